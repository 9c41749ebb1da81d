import argparse
import json
import os
import sys
from typing import Any, Callable, Dict, List, Optional, Sequence, Union

import numpy as np
from dotenv import find_dotenv, load_dotenv

from clrsKit.core.analysis import ComplexityAnalyzer
from clrsKit.core.errors import ClrsKitError, ConfigError
from clrsKit.core.registry import (
    FAMILY_SORT,
    FAMILY_SUBARRAY,
    SUBARRAY_ALGORITHMS,
    get_algorithm,
    list_algorithms,
    run_sort,
    run_subarray,
)
from clrsKit.utils import tui
from clrsKit.utils.logger_adapter import TuiLoggerAdapter, configure_logging

logger = TuiLoggerAdapter(tui)

# --- Default Config Values (used if config file is missing) ---
DEFAULT_CONFIG_FILENAME = 'clrsKit_config.json'
DEFAULT_LOG_LEVEL = 'WARNING'
DEFAULT_LOG_PATH = None
DEFAULT_BENCH_SIZES = [100, 200, 400, 800]
DEFAULT_BENCH_REPEATS = 3
DEFAULT_BENCH_SEED = 0
DEFAULT_RANDOM_RANGE = [-100, 100]
DEFAULT_DASHBOARD_HOST = '127.0.0.1'
DEFAULT_DASHBOARD_PORT = 8050
DEFAULT_DASHBOARD_DEBUG = False
DEFAULT_CACHE_TTL_SECONDS = 3600

DEFAULT_CONFIG: Dict[str, Any] = {
    "log_level": DEFAULT_LOG_LEVEL,
    "log_path": DEFAULT_LOG_PATH,
    "bench_sizes": DEFAULT_BENCH_SIZES,
    "bench_repeats": DEFAULT_BENCH_REPEATS,
    "bench_seed": DEFAULT_BENCH_SEED,
    "random_range": DEFAULT_RANDOM_RANGE,
    "dashboard_host": DEFAULT_DASHBOARD_HOST,
    "dashboard_port": DEFAULT_DASHBOARD_PORT,
    "dashboard_debug": DEFAULT_DASHBOARD_DEBUG,
    "cache_ttl_seconds": DEFAULT_CACHE_TTL_SECONDS,
}

# Environment variables override clrsKit_config.json, which overrides Python defaults
ENV_OVERRIDES: Dict[str, str] = {
    "log_level": "CLRSKIT_LOG_LEVEL",
    "log_path": "CLRSKIT_LOG_PATH",
    "bench_sizes": "CLRSKIT_BENCH_SIZES",
    "bench_repeats": "CLRSKIT_BENCH_REPEATS",
    "bench_seed": "CLRSKIT_BENCH_SEED",
    "dashboard_host": "FLASK_HOST",
    "dashboard_port": "FLASK_PORT",
    "dashboard_debug": "FLASK_DEBUG",
    "cache_ttl_seconds": "CLRSKIT_CACHE_TTL_SECONDS",
}


# ==== CONFIGURATION ==== #

def config_path() -> str:
    return os.getenv("CLRSKIT_CONFIG", DEFAULT_CONFIG_FILENAME)


def _coerce(key: str, value: Any) -> Any:
    """Convert a raw config value (JSON or env string) to the expected type."""
    try:
        if key in ("bench_sizes", "random_range"):
            if isinstance(value, str):
                value = [v for v in value.split(",") if v.strip()]
            out = [int(v) for v in value]
            if key == "random_range" and (len(out) != 2 or out[0] > out[1]):
                raise ValueError("expected [low, high]")
            return out
        if key in ("bench_repeats", "bench_seed", "dashboard_port", "cache_ttl_seconds"):
            return int(value)
        if key == "dashboard_debug":
            if isinstance(value, str):
                return value.strip().lower() in ("1", "true", "yes", "on")
            return bool(value)
        if key == "log_path":
            return str(value) if value else None
        return str(value)
    except (TypeError, ValueError):
        raise ConfigError(f"Invalid value for '{key}': {value!r}", metadata={"key": key}) from None


def load_app_config(path: Optional[str] = None) -> Dict[str, Any]:
    """
    Resolve the effective configuration.

    Python defaults are overridden by the JSON config file, which is
    overridden by environment variables (after loading `.env`).

    Raises:
        ConfigError: If the config file is not valid JSON or a value has
            the wrong type.
    """
    load_dotenv(find_dotenv(usecwd=True))
    path = path or config_path()
    config: Dict[str, Any] = dict(DEFAULT_CONFIG)

    if os.path.exists(path):
        try:
            with open(path, 'r') as f:
                file_config = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Config file {path} is not valid JSON: {e}") from e
        if not isinstance(file_config, dict):
            raise ConfigError(f"Config file {path} must contain a JSON object")
        for key, value in file_config.items():
            if key in DEFAULT_CONFIG:
                config[key] = _coerce(key, value)

    for key, env_name in ENV_OVERRIDES.items():
        raw = os.getenv(env_name)
        if raw is not None and raw != "":
            config[key] = _coerce(key, raw)

    return config


def create_default_config_file(path: Optional[str] = None, force: bool = False) -> bool:
    """Write the default JSON config. Returns False if the file already exists."""
    path = path or config_path()
    if os.path.exists(path) and not force:
        return False
    with open(path, "w") as f:
        json.dump(DEFAULT_CONFIG, f, indent=4)
    return True


# ==== HELPERS ==== #

def _number(raw: str) -> Union[int, float]:
    """argparse type: an int when possible, else a float."""
    try:
        return int(raw)
    except ValueError:
        pass
    try:
        return float(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {raw!r}") from None


def _random_values(n: int, seed: Optional[int], value_range: Sequence[int]) -> List[int]:
    if n < 0:
        raise ValueError(f"--random must be >= 0, got {n}")
    lo, hi = value_range[0], value_range[1]
    rng = np.random.default_rng(seed)
    return rng.integers(lo, hi, size=n, endpoint=True).tolist()


def _input_values(args: argparse.Namespace, config: Dict[str, Any]) -> List[Any]:
    if args.random is not None:
        if args.values:
            raise ValueError("pass either explicit values or --random, not both")
        return _random_values(args.random, args.seed, config["random_range"])
    return list(args.values)


def _yes(flag: bool) -> str:
    return "yes" if flag else "no"


# ==== MODE HANDLERS ==== #

def handle_list(args: argparse.Namespace, config: Dict[str, Any]) -> int:
    rows = []
    for info in list_algorithms(args.family):
        rows.append({
            "name": info.name,
            "family": info.family,
            "complexity": info.complexity,
            "stable": info.stable,
            "in_place": info.in_place,
            "ints only": info.integer_only,
        })
    tui.tui_print_table(rows, title="clrsKit algorithms")
    return 0


def handle_sort(args: argparse.Namespace, config: Dict[str, Any]) -> int:
    info = get_algorithm(args.algorithm, FAMILY_SORT)
    values = _input_values(args, config)
    result = run_sort(info.name, values)

    if args.json:
        tui.tui_print_json({"algorithm": info.name, "input": values, "sorted": result})
        return 0
    tui.tui_print_highlight(f"{info.name} ({info.complexity})")
    tui.tui_print_detail(
        f"stable: {_yes(info.stable)}, in place: {_yes(info.in_place)}, integers only: {_yes(info.integer_only)}"
    )
    tui.tui_print_values("Input", values, style="input")
    tui.tui_print_values("Sorted", result, style="output")
    return 0


def handle_subarray(args: argparse.Namespace, config: Dict[str, Any]) -> int:
    values = _input_values(args, config)
    methods = list(SUBARRAY_ALGORITHMS) if args.method == "both" else [args.method]

    results = {}
    for method in methods:
        info = get_algorithm(method, FAMILY_SUBARRAY)
        results[info.name] = run_subarray(info.name, values)

    if args.json:
        tui.tui_print_json({
            "input": values,
            "results": {
                name: {"subarray": r.subarray, "sum": r.total} for name, r in results.items()
            },
        })
        return 0

    tui.tui_print_values("Input", values, style="input")
    rows = [
        {
            "method": name,
            "subarray": tui.format_values(r.subarray) if r.subarray is not None else "-",
            "sum": r.total,
        }
        for name, r in results.items()
    ]
    tui.tui_print_table(rows, title="Maximum subarray")
    sums = {r.total for r in results.values()}
    if len(sums) > 1:
        logger.error("Methods disagree on the maximum sum: %s", sorted(sums))
        return 1
    return 0


def handle_bench(args: argparse.Namespace, config: Dict[str, Any]) -> int:
    sizes = args.sizes or config["bench_sizes"]
    repeats = args.repeats if args.repeats is not None else config["bench_repeats"]
    seed = args.seed if args.seed is not None else config["bench_seed"]

    analyzer = ComplexityAnalyzer(
        algorithms=args.algorithms,
        sizes=sizes,
        repeats=repeats,
        seed=seed,
        use_cache=not args.no_cache,
        cache_ttl=config["cache_ttl_seconds"],
    )
    total = len(analyzer.algorithms) * len(analyzer.sizes)
    tui.tui_starting_process(f"Benchmark of {len(analyzer.algorithms)} algorithms over sizes {analyzer.sizes}")

    with tui.tui_progress_bar("Benchmarking") as progress:
        task_id = progress.add_task("Benchmarking", total=total)

        def _advance(name: str, n: int) -> None:
            progress.update(task_id, advance=1, description=f"{name} n={n}")

        results = analyzer.run(on_step=_advance)

    growth = analyzer.estimate_growth(results)
    tui.tui_print_table(results.to_dict(orient="records"), title="Timings (seconds)")
    tui.tui_print_table(growth.to_dict(orient="records"), title="Empirical growth (log-log fit)")

    unverified = results.loc[~results["verified"], "algorithm"].unique().tolist()
    if unverified:
        tui.tui_process_failed("Benchmark", f"unsorted output from {', '.join(unverified)}")
        return 1

    if args.export:
        with open(args.export, "w") as f:
            json.dump(analyzer.report(), f, indent=2)
        tui.tui_print_success(f"Report exported to {args.export}")
    tui.tui_process_complete("Benchmark")
    return 0


def handle_dashboard(args: argparse.Namespace, config: Dict[str, Any]) -> int:
    from clrsKit.web.dashboard import app as dashboard_flask_app

    host = args.host or config["dashboard_host"]
    port = args.port or config["dashboard_port"]
    debug = config["dashboard_debug"]
    tui.tui_print_info(f"Starting dashboard on {host}:{port} (Debug: {debug})")
    dashboard_flask_app.run(host=host, port=port, debug=debug, use_reloader=False)
    return 0


def handle_init_config(args: argparse.Namespace, config: Dict[str, Any]) -> int:
    path = args.path or config_path()
    if create_default_config_file(path, force=args.force):
        tui.tui_print_success(f"Default config written to {path}")
    else:
        tui.tui_print_warning(f"{path} already exists (use --force to overwrite)")
    return 0


# ==== ARGUMENT PARSER ==== #

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="clrskit",
        description="clrsKit - classic CLRS algorithms, runnable from the terminal.",
    )
    parser.add_argument("--log-level", type=str, default=None, help="Override the configured log level")
    subparsers = parser.add_subparsers(dest="mode", help="Available modes of operation", required=True)

    sort_names = [info.name for info in list_algorithms(FAMILY_SORT)]

    list_parser = subparsers.add_parser("list", help="List the available algorithms.")
    list_parser.add_argument("--family", choices=[FAMILY_SORT, FAMILY_SUBARRAY], default=None)
    list_parser.set_defaults(func=handle_list)

    sort_parser = subparsers.add_parser("sort", help="Sort numbers with a chosen algorithm.")
    sort_parser.add_argument("algorithm", type=str, help=f"One of: {', '.join(sort_names)}")
    sort_parser.add_argument("values", nargs="*", type=_number, help="Numbers to sort")
    sort_parser.add_argument("--random", type=int, default=None, metavar="N", help="Sort N random integers instead")
    sort_parser.add_argument("--seed", type=int, default=None, help="Seed for --random")
    sort_parser.add_argument("--json", action="store_true", help="Print the result as JSON")
    sort_parser.set_defaults(func=handle_sort)

    subarray_parser = subparsers.add_parser("subarray", help="Find the maximum-sum contiguous subarray.")
    subarray_parser.add_argument("values", nargs="*", type=_number, help="Numbers to search")
    subarray_parser.add_argument(
        "--method", default="both", choices=list(SUBARRAY_ALGORITHMS) + ["both"],
        help="Algorithm to use (default: both, compared)",
    )
    subarray_parser.add_argument("--random", type=int, default=None, metavar="N", help="Search N random integers instead")
    subarray_parser.add_argument("--seed", type=int, default=None, help="Seed for --random")
    subarray_parser.add_argument("--json", action="store_true", help="Print the result as JSON")
    subarray_parser.set_defaults(func=handle_subarray)

    bench_parser = subparsers.add_parser("bench", help="Time sorting algorithms and estimate their growth.")
    bench_parser.add_argument("--algorithms", nargs="+", default=None, help="Algorithms to time (default: all)")
    bench_parser.add_argument("--sizes", nargs="+", type=int, default=None, help="Input sizes (default from config)")
    bench_parser.add_argument("--repeats", type=int, default=None, help="Timed runs per size")
    bench_parser.add_argument("--seed", type=int, default=None, help="Seed for the random inputs")
    bench_parser.add_argument("--no-cache", action="store_true", help="Ignore cached benchmark results")
    bench_parser.add_argument("--export", type=str, default=None, help="Export report JSON to path")
    bench_parser.set_defaults(func=handle_bench)

    dashboard_parser = subparsers.add_parser("dashboard", help="Run the JSON API server.")
    dashboard_parser.add_argument("--host", type=str, default=None)
    dashboard_parser.add_argument("--port", type=int, default=None)
    dashboard_parser.set_defaults(func=handle_dashboard)

    init_parser = subparsers.add_parser("init-config", help="Write a default clrsKit_config.json.")
    init_parser.add_argument("--path", type=str, default=None, help="Config file path")
    init_parser.add_argument("--force", action="store_true", help="Overwrite an existing file")
    init_parser.set_defaults(func=handle_init_config)

    return parser


# ==== ENTRY POINTS ==== #

def main(argv: Optional[Sequence[str]] = None) -> int:
    """Parse `argv`, dispatch to the selected mode and return an exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)
    handler: Callable[[argparse.Namespace, Dict[str, Any]], int] = args.func

    try:
        config = load_app_config()
        configure_logging(args.log_level or config["log_level"], config["log_path"])
        return handler(args, config)
    except ClrsKitError as e:
        logger.error("%s: %s", type(e).__name__, e)
        return 2
    except ValueError as e:
        logger.error("Invalid input: %s", e)
        return 2
    except Exception as e:
        logger.exception("Critical error during operation in mode '%s': %s", getattr(args, 'mode', '?'), e)
        return 1


def run() -> None:
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        tui.tui_print_warning("Process interrupted by user (KeyboardInterrupt). Exiting...")
        sys.exit(130)


if __name__ == "__main__":
    run()
