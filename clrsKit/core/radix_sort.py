# ==== RADIX SORT MODULE ==== #
"""
Radix sort. O(d * (n + b)) for n integers of d digits in base b.

Least-significant-digit first: the input is sorted digit by digit, starting
from the lowest, with a stable counting sort. Stability is what makes the
earlier passes survive the later ones.

Negative inputs are rebased: the minimum is subtracted before sorting, so
every value is a non-negative offset, and added back afterwards.
"""

import logging
from typing import Any, List, MutableSequence

from clrsKit.core.count_sort import count_sort_by_key, ensure_integers

logger = logging.getLogger(__name__)

DEFAULT_BASE = 10


def radix_sort(src: MutableSequence[Any], base: int = DEFAULT_BASE) -> None:
    """Sort a sequence of integers in place with LSD radix sort.

    Args:
        src: Sequence sorted in place.
        base: Digit base, at least 2.

    Raises:
        ValueError: If `base` is not an integer `>= 2`.
        UnsupportedInputError: If an element is not an integer.
    """
    if isinstance(base, bool) or not isinstance(base, int) or base < 2:
        raise ValueError(f"radix base must be an integer >= 2, got {base!r}")
    ensure_integers(src, "radix_sort")
    if len(src) < 2:
        return

    lo = int(min(src))
    offsets: List[int] = [int(v) - lo for v in src]
    largest = max(offsets)

    passes = 0
    exp = 1
    while largest // exp > 0:
        count_sort_by_key(offsets, lambda v, e=exp: (v // e) % base, base)
        exp *= base
        passes += 1
    logger.debug("radix_sort: n=%d, base=%d, %d digit passes", len(src), base, passes)

    src[:] = [v + lo for v in offsets]
