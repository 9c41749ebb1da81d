# ==== COUNTING SORT MODULE ==== #
"""
Counting sort. O(n + k) time for n integers spanning k distinct values.

The algorithm makes no comparisons between elements, which is how it escapes
the Ω(n*log n) lower bound that holds for comparison sorts in the worst case.

The idea:
- count how many times each value occurs;
- turn the counts into prefix sums, so `count[v]` is the number of elements
  `<= v`;
- if three elements are `<= x`, the last `x` of the input belongs at index 2
  of the output.

With n elements drawn from a range of k values and k = O(n), the running
time is O(n + k) = O(n). Counting sort is stable, which is what lets radix
sort use it as a subroutine.

Values are offset by the minimum, so negative integers are accepted.
"""

import logging
import numbers
from typing import Any, Callable, List, MutableSequence, Optional

from clrsKit.core.errors import UnsupportedInputError

logger = logging.getLogger(__name__)


def ensure_integers(src: MutableSequence[Any], algorithm: str) -> None:
    """Reject any element that is not an integer (booleans included).

    Raises:
        UnsupportedInputError: On the first non-integer element.
    """
    for idx, value in enumerate(src):
        if isinstance(value, bool) or not isinstance(value, numbers.Integral):
            raise UnsupportedInputError(
                f"{algorithm} sorts integers only; got {type(value).__name__} at index {idx}",
                metadata={"algorithm": algorithm, "index": idx, "value": repr(value)},
            )


def count_sort_by_key(
    src: MutableSequence[Any],
    key: Callable[[Any], int],
    k: int,
) -> None:
    """
    Stable counting sort of `src` by an integer key in `range(k)`.

    Args:
        src: Sequence sorted in place.
        key: Maps an element to its key, `0 <= key(x) < k`.
        k: Number of distinct key slots.

    Raises:
        ValueError: If a key falls outside `range(k)`.
    """
    count: List[int] = [0] * k
    keys: List[int] = []
    for value in src:
        c = key(value)
        if not 0 <= c < k:
            raise ValueError(f"key {c} of {value!r} is outside range({k})")
        keys.append(c)
        count[c] += 1

    for i in range(1, k):
        count[i] += count[i - 1]

    out: List[Optional[Any]] = [None] * len(src)
    # right to left keeps equal keys in input order
    for idx in range(len(src) - 1, -1, -1):
        c = keys[idx]
        count[c] -= 1
        out[count[c]] = src[idx]

    src[:] = out


def count_sort(src: MutableSequence[Any]) -> None:
    """Sort a sequence of integers in place with counting sort.

    Uses O(n + k) extra space for the counts and the output buffer.

    Raises:
        UnsupportedInputError: If an element is not an integer.
    """
    ensure_integers(src, "count_sort")
    n = len(src)
    if n < 2:
        return
    if n == 2:
        if src[0] > src[1]:
            src[0], src[1] = src[1], src[0]
        return

    lo = int(min(src))
    hi = int(max(src))
    k = hi - lo + 1
    logger.debug("count_sort: n=%d, value range [%d, %d] (k=%d)", n, lo, hi, k)
    count_sort_by_key(src, lambda v: int(v) - lo, k)
