# ==== MAXIMUM SUBARRAY MODULE ==== #
"""
Maximum subarray: find the contiguous run with the largest sum.

Two implementations:
- Divide & Conquer (& Combine), O(n*log n): `find_max_sum_subarray_dc`;
- Kadane's algorithm, O(n): `find_max_sum_subarray_kadane`.

The empty run, with sum 0, is a valid answer. When every element is negative
no run beats it, and both functions return `(None, 0)`. Several runs may share
the maximum sum; the two functions always agree on the sum but may pick
different runs.
"""

from typing import Any, List, NamedTuple, Optional, Sequence, Tuple


class MaxSubarray(NamedTuple):
    """Result of a maximum subarray search."""

    subarray: Optional[List[Any]]
    total: Any


_NONE = MaxSubarray(None, 0)


def find_max_sum_subarray_kadane(src: Sequence[Any]) -> MaxSubarray:
    """Kadane's algorithm. O(n).

    Keeps the best sum of a run ending at the current index, plus the index
    where that run starts. A running sum that drops below zero can only hurt
    any run extended from it, so the run restarts after it.

    Args:
        src: Numbers to search.

    Returns:
        MaxSubarray: `(subarray, total)`, or `(None, 0)` if every element
        is negative.
    """
    max_sum = 0
    cur_sum = 0
    left: Optional[int] = None
    right: Optional[int] = None

    cur_left = 0
    for i, value in enumerate(src):
        cur_sum = cur_sum + value
        if cur_sum >= max_sum:
            max_sum = cur_sum
            right = i
            left = cur_left
        elif cur_sum < 0:
            cur_left = i + 1
            cur_sum = 0

    if left is None or right is None:
        return _NONE
    return MaxSubarray(list(src[left:right + 1]), max_sum)


def find_max_sum_subarray_dc(src: Sequence[Any]) -> MaxSubarray:
    """Divide and conquer maximum subarray. O(n*log n).

    The best run lies entirely in the left half, entirely in the right half,
    or crosses the midpoint. The first two cases recurse, the third is solved
    in linear time by `find_max_sum_cross_subarray`. Among candidates with
    equal sums the longest wins.

    Args:
        src: Numbers to search.

    Returns:
        MaxSubarray: `(subarray, total)`, or `(None, 0)` if every element
        is negative.
    """
    if len(src) == 0:
        return _NONE
    if len(src) == 1:
        if src[0] >= 0:
            return MaxSubarray(list(src), src[0])
        return _NONE

    mid = len(src) // 2
    candidates = (
        find_max_sum_subarray_dc(src[:mid]),
        find_max_sum_subarray_dc(src[mid:]),
        find_max_sum_cross_subarray(src, mid),
    )

    best = _NONE
    best_key: Tuple[Any, int] = (0, -1)
    for candidate in candidates:
        key = (candidate.total, _run_length(candidate))
        # full ties go to the later candidate
        if key >= best_key:
            best, best_key = candidate, key
    return best


def find_max_sum_cross_subarray(src: Sequence[Any], mid: int) -> MaxSubarray:
    """Best run that ends at or before `mid - 1` and/or starts at `mid`.

    Scans leftwards from `mid - 1` and rightwards from `mid`, keeping the
    best non-negative partial sum on each side.

    Args:
        src: Numbers to search.
        mid: Split point; the left half is `src[:mid]`.

    Returns:
        MaxSubarray: The joined run and its sum, or `(None, 0)` if neither
        side has a non-negative partial sum.
    """
    left: Optional[int] = None
    right: Optional[int] = None

    cur_sum = 0
    left_sum = 0
    for i in range(mid - 1, -1, -1):
        cur_sum = cur_sum + src[i]
        if cur_sum >= left_sum:
            left_sum = cur_sum
            left = i

    cur_sum = 0
    right_sum = 0
    for j in range(mid, len(src)):
        cur_sum = cur_sum + src[j]
        if cur_sum >= right_sum:
            right_sum = cur_sum
            right = j

    if left is None and right is None:
        return _NONE
    start = left if left is not None else mid
    stop = right + 1 if right is not None else mid
    return MaxSubarray(list(src[start:stop]), left_sum + right_sum)


def _run_length(result: MaxSubarray) -> int:
    return -1 if result.subarray is None else len(result.subarray)
