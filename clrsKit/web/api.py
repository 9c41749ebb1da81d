from __future__ import annotations

import logging
import os
from typing import Any, Dict, List, Optional, Tuple

from flask import Blueprint, jsonify, request

from clrsKit.core.analysis import DEFAULT_REPEATS, DEFAULT_SIZES, ComplexityAnalyzer
from clrsKit.core.errors import ClrsKitError
from clrsKit.core.registry import (
    FAMILY_SORT,
    FAMILY_SUBARRAY,
    get_algorithm,
    list_algorithms,
    run_sort,
    run_subarray,
)

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)

# Upper bounds keep a single request from pinning the worker
MAX_VALUES = int(os.getenv("CLRSKIT_API_MAX_VALUES", "10000"))
MAX_BENCH_SIZE = int(os.getenv("CLRSKIT_API_MAX_BENCH_SIZE", "2000"))
MAX_BENCH_REPEATS = int(os.getenv("CLRSKIT_API_MAX_BENCH_REPEATS", "10"))
# Counting sort allocates max - min + 1 counters, whatever the number of values
MAX_COUNT_RANGE = int(os.getenv("CLRSKIT_API_MAX_COUNT_RANGE", "1000000"))


class InvalidRequestError(ClrsKitError):
    category = "request"


def _error(message: str, status: int, **extra: Any) -> Tuple[Any, int]:
    body: Dict[str, Any] = {"error": message}
    body.update(extra)
    return jsonify(body), status


@api_bp.errorhandler(ClrsKitError)
def handle_clrskit_error(e: ClrsKitError) -> Tuple[Any, int]:
    return _error(str(e), 400, category=e.category, **({"details": e.metadata} if e.metadata else {}))


@api_bp.errorhandler(ValueError)
def handle_value_error(e: ValueError) -> Tuple[Any, int]:
    return _error(str(e), 400)


@api_bp.errorhandler(Exception)
def handle_unexpected(e: Exception) -> Tuple[Any, int]:
    logger.exception("Unhandled error in %s", request.path)
    return _error("internal error", 500)


def _json_body() -> Dict[str, Any]:
    body = request.get_json(silent=True)
    if not isinstance(body, dict):
        raise InvalidRequestError("request body must be a JSON object")
    return body


def _values_from(body: Dict[str, Any]) -> List[Any]:
    values = body.get("values")
    if not isinstance(values, list):
        raise InvalidRequestError("'values' must be a JSON array")
    if len(values) > MAX_VALUES:
        raise InvalidRequestError(f"too many values ({len(values)} > {MAX_VALUES})")
    for v in values:
        if isinstance(v, bool) or not isinstance(v, (int, float)):
            raise InvalidRequestError("'values' must contain numbers only")
    return values


def _int_list_arg(name: str, default: List[int]) -> List[int]:
    raw = (request.args.get(name) or "").strip()
    if not raw:
        return list(default)
    try:
        return [int(x) for x in raw.split(",") if x.strip()]
    except ValueError:
        raise InvalidRequestError(f"'{name}' must be a comma-separated list of integers") from None


@api_bp.get("/health")
def health() -> Any:
    return jsonify({"status": "ok"})


@api_bp.get("/config")
def config_view() -> Any:
    return jsonify({
        "max_values": MAX_VALUES,
        "max_bench_size": MAX_BENCH_SIZE,
        "max_bench_repeats": MAX_BENCH_REPEATS,
        "max_count_range": MAX_COUNT_RANGE,
        "bench_defaults": {"sizes": list(DEFAULT_SIZES), "repeats": DEFAULT_REPEATS},
        "cache_backend": os.getenv("CLRSKIT_CACHE_BACKEND", "auto"),
    })


@api_bp.get("/algorithms")
def algorithms() -> Any:
    family: Optional[str] = request.args.get("family") or None
    return jsonify({"algorithms": [info.as_dict() for info in list_algorithms(family)]})


@api_bp.post("/sort")
def sort_values() -> Any:
    body = _json_body()
    name = body.get("algorithm")
    if not isinstance(name, str) or not name.strip():
        raise InvalidRequestError("'algorithm' is required")
    values = _values_from(body)
    info = get_algorithm(name, FAMILY_SORT)
    if info.name == "count" and values and max(values) - min(values) > MAX_COUNT_RANGE:
        raise InvalidRequestError(
            f"count sort is limited to a value range of {MAX_COUNT_RANGE}",
            metadata={"range": max(values) - min(values)},
        )
    result = run_sort(info.name, values)
    return jsonify({"algorithm": info.name, "input": values, "sorted": result})


@api_bp.post("/max-subarray")
def max_subarray() -> Any:
    body = _json_body()
    method = body.get("method") or "kadane"
    values = _values_from(body)
    info = get_algorithm(str(method), FAMILY_SUBARRAY)
    subarray, total = run_subarray(info.name, values)
    return jsonify({"method": info.name, "subarray": subarray, "sum": total})


@api_bp.get("/benchmark")
def benchmark() -> Any:
    names = [n.strip() for n in (request.args.get("algorithms") or "").split(",") if n.strip()]
    sizes = _int_list_arg("sizes", list(DEFAULT_SIZES))
    if sizes and max(sizes) > MAX_BENCH_SIZE:
        raise InvalidRequestError(f"benchmark sizes are limited to {MAX_BENCH_SIZE}")
    try:
        repeats = int(request.args.get("repeats", DEFAULT_REPEATS))
        seed = int(request.args.get("seed", 0))
    except ValueError:
        raise InvalidRequestError("'repeats' and 'seed' must be integers") from None
    if repeats > MAX_BENCH_REPEATS:
        raise InvalidRequestError(f"benchmark repeats are limited to {MAX_BENCH_REPEATS}")

    analyzer = ComplexityAnalyzer(algorithms=names or None, sizes=sizes, repeats=repeats, seed=seed)
    return jsonify(analyzer.report())
