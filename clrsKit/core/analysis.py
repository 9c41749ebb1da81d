from __future__ import annotations

# ==== EMPIRICAL COMPLEXITY ANALYSIS MODULE ==== #
"""
Empirical running-time analysis for the sorting algorithms.

Provides the `ComplexityAnalyzer`, which times catalog algorithms on random
integer inputs of growing size, checks every output against `sorted()`, and
estimates the growth order by a least-squares fit in log-log space:
if T(n) ~ c * n^k then log T = log c + k * log n, so the slope is k.
"""

import logging
import math
import time
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

import numpy as np
import pandas as pd
from scipy.stats import linregress

from clrsKit.core.registry import FAMILY_SORT, AlgorithmInfo, get_algorithm, list_algorithms
from clrsKit.utils.cache import cache_get, cache_set, khash

logger = logging.getLogger(__name__)


# --- Constants ---
DEFAULT_SIZES: Tuple[int, ...] = (100, 200, 400, 800)
DEFAULT_REPEATS = 3
DEFAULT_VALUE_RANGE: Tuple[int, int] = (-1000, 1000)

RESULT_COLUMNS = ["algorithm", "n", "seconds_min", "seconds_mean", "verified"]
GROWTH_COLUMNS = ["algorithm", "complexity", "slope", "r_squared", "growth_class"]

# Upper slope bounds for each label; anything above the last is super-quadratic
_GROWTH_BANDS: Tuple[Tuple[float, str], ...] = (
    (0.8, "sub-linear"),
    (1.05, "~linear"),
    (1.5, "~n log n"),
    (2.4, "~quadratic"),
)

# Floor for timings, keeps log() finite on coarse clocks
_MIN_SECONDS = 1e-9


def classify_growth(slope: float) -> str:
    """Map a log-log slope to a coarse growth label."""
    if not math.isfinite(slope):
        return "unknown"
    for bound, label in _GROWTH_BANDS:
        if slope < bound:
            return label
    return "super-quadratic"


# --- ComplexityAnalyzer Class ---
class ComplexityAnalyzer:
    """
    Time sorting algorithms over growing input sizes and fit their growth.

    Inputs are drawn once per size from `numpy.random.default_rng(seed)`, so
    every algorithm sorts exactly the same vectors and runs are reproducible.
    """

    def __init__(
        self,
        algorithms: Optional[Sequence[str]] = None,
        sizes: Sequence[int] = DEFAULT_SIZES,
        repeats: int = DEFAULT_REPEATS,
        seed: int = 0,
        value_range: Tuple[int, int] = DEFAULT_VALUE_RANGE,
        use_cache: bool = True,
        cache_ttl: Optional[int] = None,
    ) -> None:
        """
        Args:
            algorithms: Catalog names of sorting algorithms; all of them if None.
            sizes: Input sizes, at least two distinct positive values.
            repeats: Timed runs per (algorithm, size); the minimum is kept
                as the estimate, the mean is reported alongside.
            seed: Seed for the input generator.
            value_range: Inclusive bounds of the generated integers.
            use_cache: Whether to reuse results through `utils.cache`.
            cache_ttl: Cache lifetime in seconds; the cache default if None.

        Raises:
            ValueError: On invalid sizes, repeats or value range.
            UnknownAlgorithmError: On an unknown algorithm name.
        """
        if algorithms:
            resolved = [get_algorithm(name, FAMILY_SORT) for name in algorithms]
            # one entry per algorithm, in first-seen order
            self.algorithms: List[AlgorithmInfo] = list({info.name: info for info in resolved}.values())
        else:
            self.algorithms = list_algorithms(FAMILY_SORT)

        clean_sizes = sorted({int(n) for n in sizes})
        if len(clean_sizes) < 2:
            raise ValueError("at least two distinct input sizes are required to estimate growth")
        if clean_sizes[0] < 1:
            raise ValueError(f"input sizes must be positive, got {clean_sizes[0]}")
        if repeats < 1:
            raise ValueError(f"repeats must be >= 1, got {repeats}")
        lo, hi = value_range
        if lo > hi:
            raise ValueError(f"empty value range [{lo}, {hi}]")

        self.sizes: List[int] = clean_sizes
        self.repeats: int = int(repeats)
        self.seed: int = int(seed)
        self.value_range: Tuple[int, int] = (int(lo), int(hi))
        self.use_cache: bool = use_cache
        self.cache_ttl: Optional[int] = cache_ttl
        self._results: Optional[pd.DataFrame] = None

    @property
    def algorithm_names(self) -> List[str]:
        return [info.name for info in self.algorithms]

    def cache_key(self) -> str:
        return khash("bench", self.algorithm_names, self.sizes, self.repeats, self.seed, self.value_range)

    def generate_inputs(self) -> Dict[int, List[int]]:
        """Random integer vectors, one per size, as plain Python lists."""
        rng = np.random.default_rng(self.seed)
        lo, hi = self.value_range
        return {
            n: rng.integers(lo, hi, size=n, endpoint=True).tolist()
            for n in self.sizes
        }

    # --► TIMING

    def run(self, on_step: Optional[Callable[[str, int], None]] = None) -> pd.DataFrame:
        """
        Time every (algorithm, size) pair.

        Args:
            on_step: Called with `(algorithm, n)` after each pair, e.g. to
                advance a progress bar.

        Returns:
            pd.DataFrame: One row per pair with `RESULT_COLUMNS`.
        """
        if self._results is not None:
            return self._results.copy()

        key = self.cache_key()
        if self.use_cache:
            cached = cache_get(key)
            if cached is not None:
                logger.debug("Benchmark cache hit for %s", key)
                self._results = cached
                return cached.copy()

        inputs = self.generate_inputs()
        expected = {n: sorted(data) for n, data in inputs.items()}
        rows: List[Dict[str, Any]] = []
        for info in self.algorithms:
            for n in self.sizes:
                times: List[float] = []
                verified = True
                for _ in range(self.repeats):
                    work = list(inputs[n])
                    t0 = time.perf_counter()
                    info.func(work)
                    times.append(time.perf_counter() - t0)
                    verified = verified and work == expected[n]
                if not verified:
                    logger.error("%s produced an unsorted result for n=%d", info.name, n)
                rows.append({
                    "algorithm": info.name,
                    "n": n,
                    "seconds_min": float(np.min(times)),
                    "seconds_mean": float(np.mean(times)),
                    "verified": verified,
                })
                if on_step is not None:
                    on_step(info.name, n)

        df = pd.DataFrame(rows, columns=RESULT_COLUMNS)
        self._results = df
        if self.use_cache:
            cache_set(key, df, ttl=self.cache_ttl)
        return df.copy()

    # --► GROWTH ESTIMATION

    def estimate_growth(self, results: Optional[pd.DataFrame] = None) -> pd.DataFrame:
        """
        Fit `log(seconds_min) ~ slope * log(n)` per algorithm.

        Args:
            results: Output of `run()`; computed if omitted.

        Returns:
            pd.DataFrame: One row per algorithm with `GROWTH_COLUMNS`.
        """
        df = results if results is not None else self.run()
        complexity = {info.name: info.complexity for info in self.algorithms}
        rows: List[Dict[str, Any]] = []
        for name, group in df.groupby("algorithm", sort=False):
            group = group.sort_values("n")
            x = np.log(group["n"].to_numpy(dtype=float))
            y = np.log(np.maximum(group["seconds_min"].to_numpy(dtype=float), _MIN_SECONDS))
            if len(np.unique(x)) < 2:
                slope, r_squared = float("nan"), float("nan")
            else:
                fit = linregress(x, y)
                slope = float(fit.slope)
                r_squared = float(fit.rvalue ** 2) if np.isfinite(fit.rvalue) else float("nan")
            rows.append({
                "algorithm": name,
                "complexity": complexity.get(name, ""),
                "slope": slope,
                "r_squared": r_squared,
                "growth_class": classify_growth(slope),
            })
        return pd.DataFrame(rows, columns=GROWTH_COLUMNS)

    def report(self) -> Dict[str, Any]:
        """JSON-ready dict with parameters, timing rows and growth estimates."""
        results = self.run()
        growth = self.estimate_growth(results)
        return {
            "params": {
                "algorithms": self.algorithm_names,
                "sizes": self.sizes,
                "repeats": self.repeats,
                "seed": self.seed,
                "value_range": list(self.value_range),
            },
            "results": _records(results),
            "growth": _records(growth),
        }


def _records(df: pd.DataFrame) -> List[Dict[str, Any]]:
    out: List[Dict[str, Any]] = []
    for record in df.to_dict(orient="records"):
        clean: Dict[str, Any] = {}
        for k, v in record.items():
            if isinstance(v, np.generic):
                v = v.item()
            if isinstance(v, float) and not math.isfinite(v):
                v = None
            clean[k] = v
        out.append(clean)
    return out
