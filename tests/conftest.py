import sys
from pathlib import Path
from typing import List, Tuple

import pytest

# Ensure repository root is on sys.path so the in-tree package imports cleanly.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from clrsKit.utils.cache import reset_cache  # noqa: E402


SORT_VECTORS: List[Tuple[List[int], List[int]]] = [
    ([9, 2, 3, 4, 1, 6, 8, 19, 20, 34], [1, 2, 3, 4, 6, 8, 9, 19, 20, 34]),
    ([10, 80, 30, 70, 40, 50, 90], [10, 30, 40, 50, 70, 80, 90]),
    ([2, 3, 4, 5, 10, 1, 11], [1, 2, 3, 4, 5, 10, 11]),
    ([1, 2, 3, 4, 5, 6, 7, 8, 9], [1, 2, 3, 4, 5, 6, 7, 8, 9]),
    ([1, 5, 3, 4], [1, 3, 4, 5]),
    ([1, 2, 3, 0, 5], [0, 1, 2, 3, 5]),
    ([1, 2, 3], [1, 2, 3]),
    ([3, 1, 2], [1, 2, 3]),
    ([2, 1, 3], [1, 2, 3]),
    ([6, 1, 7, 9, 3, 8, 2, 5, 4, 0], [0, 1, 2, 3, 4, 5, 6, 7, 8, 9]),
    ([3, 2], [2, 3]),
    ([8, 3, 7, 9, 6, 1, 9, 10], [1, 3, 6, 7, 8, 9, 9, 10]),
    ([8, 2, 78, 892, 11, 0, 34], [0, 2, 8, 11, 34, 78, 892]),
    (
        [9, 3, 83, 9, 2, 0, 1, 65, 2, 822, 9, 11, 22, 3, 3, 3, 47],
        [0, 1, 2, 2, 3, 3, 3, 3, 9, 9, 9, 11, 22, 47, 65, 83, 822],
    ),
    ([-6, 9, 0, 1, 17, 91, 0, 178], [-6, 0, 0, 1, 9, 17, 91, 178]),
    ([-3, -2, -1, -9, -5, -1, -19, -33], [-33, -19, -9, -5, -3, -2, -1, -1]),
    ([-5, -6, -7, 0, 0, 0, 0, -8, 1, 2, 3], [-8, -7, -6, -5, 0, 0, 0, 0, 1, 2, 3]),
    ([2] * 5, [2] * 5),
]


@pytest.fixture
def sort_vectors() -> List[Tuple[List[int], List[int]]]:
    """Fresh copies of the shared sorting vectors (input, expected)."""
    return [(list(src), list(expected)) for src, expected in SORT_VECTORS]


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run every test in an empty directory with an in-memory cache."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("CLRSKIT_CACHE_BACKEND", "memory")
    for name in ("CLRSKIT_CONFIG", "CLRSKIT_LOG_LEVEL", "CLRSKIT_LOG_PATH", "CLRSKIT_BENCH_SIZES",
                 "FLASK_HOST", "FLASK_PORT", "FLASK_DEBUG"):
        monkeypatch.delenv(name, raising=False)
    reset_cache()
    yield tmp_path
    reset_cache()
