# ==== ALGORITHM CATALOG MODULE ==== #
"""
Catalog of the algorithms shipped by clrsKit.

The CLI, the HTTP API, the benchmark runner and the docs generator all look
algorithms up here by name instead of importing them one by one.
"""

import functools
import inspect
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, Optional

from clrsKit.core.bubble_sort import bubble_sort_lr, bubble_sort_rl
from clrsKit.core.count_sort import count_sort
from clrsKit.core.errors import UnknownAlgorithmError
from clrsKit.core.heap_sort import heap_sort
from clrsKit.core.insertion_sort import (
    insertion_sort,
    insertion_sort_clrs,
    insertion_sort_shift,
    insertion_sort_swap,
)
from clrsKit.core.max_subarray import (
    MaxSubarray,
    find_max_sum_subarray_dc,
    find_max_sum_subarray_kadane,
)
from clrsKit.core.merge_sort import merge_sort
from clrsKit.core.quick_sort import Partitioner, quick_sort
from clrsKit.core.radix_sort import radix_sort

FAMILY_SORT = "sort"
FAMILY_SUBARRAY = "subarray"


@dataclass(frozen=True)
class AlgorithmInfo:
    """
    Catalog entry for one algorithm.

    Attributes:
        name: Lookup name used by the CLI and the API.
        func: The callable. Sorts take a mutable sequence and return None;
            subarray searches take a sequence and return `MaxSubarray`.
        family: `FAMILY_SORT` or `FAMILY_SUBARRAY`.
        complexity: Worst-case (or typical, where noted) running time.
        stable: Whether equal elements keep their input order.
        in_place: Whether only O(1) (or O(log n) stack) extra space is used.
        integer_only: Whether the algorithm accepts integers only.
    """

    name: str
    func: Callable[..., Any]
    family: str
    complexity: str
    stable: bool = False
    in_place: bool = True
    integer_only: bool = False

    @property
    def target(self) -> Callable[..., Any]:
        """The underlying function, unwrapped from `functools.partial`."""
        func = self.func
        while isinstance(func, functools.partial):
            func = func.func
        return func

    @property
    def summary(self) -> str:
        doc = inspect.getdoc(self.target) or ""
        return doc.splitlines()[0] if doc else ""

    def as_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "family": self.family,
            "complexity": self.complexity,
            "stable": self.stable,
            "in_place": self.in_place,
            "integer_only": self.integer_only,
            "function": f"{self.target.__module__}.{self.target.__name__}",
            "summary": self.summary,
        }


def _catalog(entries: Iterable[AlgorithmInfo]) -> Dict[str, AlgorithmInfo]:
    return {entry.name: entry for entry in entries}


SORTING_ALGORITHMS: Dict[str, AlgorithmInfo] = _catalog([
    AlgorithmInfo("bubble_lr", bubble_sort_lr, FAMILY_SORT, "O(n^2)", stable=True),
    AlgorithmInfo("bubble_rl", bubble_sort_rl, FAMILY_SORT, "O(n^2)", stable=True),
    AlgorithmInfo("insertion", insertion_sort, FAMILY_SORT, "O(n^2)", stable=True),
    AlgorithmInfo("insertion_swap", insertion_sort_swap, FAMILY_SORT, "O(n^2)", stable=True),
    AlgorithmInfo("insertion_shift", insertion_sort_shift, FAMILY_SORT, "O(n^2)", stable=True),
    AlgorithmInfo("insertion_clrs", insertion_sort_clrs, FAMILY_SORT, "O(n^2)", stable=True),
    AlgorithmInfo("merge", merge_sort, FAMILY_SORT, "O(n log n)", stable=True, in_place=False),
    AlgorithmInfo(
        "quick_lomuto",
        functools.partial(quick_sort, partitioner=Partitioner.LOMUTO),
        FAMILY_SORT,
        "O(n log n) avg, O(n^2) worst",
    ),
    AlgorithmInfo(
        "quick_hoare",
        functools.partial(quick_sort, partitioner=Partitioner.HOARE),
        FAMILY_SORT,
        "O(n log n) avg, O(n^2) worst",
    ),
    AlgorithmInfo("heap", heap_sort, FAMILY_SORT, "O(n log n)"),
    AlgorithmInfo(
        "count", count_sort, FAMILY_SORT, "O(n + k)",
        stable=True, in_place=False, integer_only=True,
    ),
    AlgorithmInfo(
        "radix", radix_sort, FAMILY_SORT, "O(d (n + b))",
        stable=True, in_place=False, integer_only=True,
    ),
])

SUBARRAY_ALGORITHMS: Dict[str, AlgorithmInfo] = _catalog([
    AlgorithmInfo("kadane", find_max_sum_subarray_kadane, FAMILY_SUBARRAY, "O(n)"),
    AlgorithmInfo("divide_conquer", find_max_sum_subarray_dc, FAMILY_SUBARRAY, "O(n log n)"),
])


def list_algorithms(family: Optional[str] = None) -> List[AlgorithmInfo]:
    """Return catalog entries, optionally filtered by family."""
    entries = list(SORTING_ALGORITHMS.values()) + list(SUBARRAY_ALGORITHMS.values())
    if family is None:
        return entries
    if family not in (FAMILY_SORT, FAMILY_SUBARRAY):
        raise UnknownAlgorithmError(
            f"Unknown algorithm family '{family}'",
            metadata={"choices": [FAMILY_SORT, FAMILY_SUBARRAY]},
        )
    return [entry for entry in entries if entry.family == family]


def get_algorithm(name: str, family: Optional[str] = None) -> AlgorithmInfo:
    """Look an algorithm up by name.

    Raises:
        UnknownAlgorithmError: If no entry of that name (and family) exists.
    """
    key = (name or "").strip().lower()
    for entry in list_algorithms(family):
        if entry.name == key:
            return entry
    raise UnknownAlgorithmError(
        f"Unknown algorithm '{name}'",
        metadata={"choices": [entry.name for entry in list_algorithms(family)]},
    )


def run_sort(name: str, values: Iterable[Any]) -> List[Any]:
    """Sort a copy of `values` with the named algorithm and return it."""
    info = get_algorithm(name, FAMILY_SORT)
    result = list(values)
    info.func(result)
    return result


def run_subarray(name: str, values: Iterable[Any]) -> MaxSubarray:
    """Run the named maximum subarray search over `values`."""
    info = get_algorithm(name, FAMILY_SUBARRAY)
    return info.func(list(values))
