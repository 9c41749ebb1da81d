# ==== BUBBLE SORT MODULE ==== #
"""
Bubble sort. O(n^2).

Two directions are provided:
- "right-left": smaller values bubble to the left (`bubble_sort_rl`);
- "left-right": bigger values bubble to the right (`bubble_sort_lr`).
"""

from typing import Any, MutableSequence


def bubble_sort_rl(src: MutableSequence[Any]) -> None:
    """Bubble sort where smaller values bubble to the left.

    After the i-th pass `src[:i + 1]` holds the i + 1 smallest values in order.

    Args:
        src: Sequence sorted in place.
    """
    n = len(src)
    for i in range(n - 1):
        for j in range(n - 1, i, -1):
            if src[j] < src[j - 1]:
                src[j], src[j - 1] = src[j - 1], src[j]


def bubble_sort_lr(src: MutableSequence[Any]) -> None:
    """Bubble sort where bigger values bubble to the right.

    After each pass the largest value of `src[:i + 1]` sits at index `i`.

    Args:
        src: Sequence sorted in place.
    """
    for i in range(len(src) - 1, 0, -1):
        for j in range(i):
            if src[j] > src[j + 1]:
                src[j], src[j + 1] = src[j + 1], src[j]
