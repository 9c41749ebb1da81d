# ==== INSERTION SORT MODULE ==== #
"""
Insertion sort. O(n^2), stable, in place.

All variants share one idea: `src[:i]` is already sorted and `src[i]` is
inserted into it. They differ in how room is made for the inserted value.

- `insertion_sort_swap` swaps the value leftwards one step at a time.
- `insertion_sort_shift` shifts bigger values right and writes the
  value once.
- `insertion_sort_clrs` follows the book's INSERTION-SORT, whose index `j`
  may run off the left end (to -1) before the value is placed at `j + 1`.
- `insertion_sort` is the readable form of the swapping variant.
"""

from typing import Any, MutableSequence


def insertion_sort_swap(src: MutableSequence[Any]) -> None:
    """Swap the current value leftwards while it is smaller than its neighbour."""
    for i in range(1, len(src)):
        j = i - 1
        while j >= 0 and src[j + 1] < src[j]:
            src[j + 1], src[j] = src[j], src[j + 1]
            j -= 1


def insertion_sort_shift(src: MutableSequence[Any]) -> None:
    """Shift bigger values to the right, then write the current value once.

    The loop stops on the first `src[j] <= current`, so `current` lands at
    `j + 1`. Reaching the left end means `current` is the smallest value
    seen so far and belongs at index 0.
    """
    for i in range(1, len(src)):
        current = src[i]
        j = i - 1
        while j >= 0:
            if current >= src[j]:
                break
            src[j + 1] = src[j]
            j -= 1
        src[j + 1] = current


def insertion_sort_clrs(src: MutableSequence[Any]) -> None:
    """INSERTION-SORT as written in CLRS, translated to 0-based indices."""
    for i in range(1, len(src)):
        key = src[i]
        # insert src[i] into the sorted src[0:i]
        j = i - 1
        while j >= 0 and src[j] > key:
            src[j + 1] = src[j]
            j = j - 1
        src[j + 1] = key


def insertion_sort(src: MutableSequence[Any]) -> None:
    """Insertion sort, default variant.

    Args:
        src: Sequence sorted in place.
    """
    for cur in range(1, len(src)):
        i = cur
        while i > 0 and src[i] < src[i - 1]:
            src[i], src[i - 1] = src[i - 1], src[i]
            i -= 1
