# ==== MERGE SORT MODULE ==== #
"""
Merge sort. O(n*log n).

Works by the Divide & Conquer (& Combine) strategy:
- divide the input into two halves;
- conquer by sorting each half recursively, until a half is so small that
  sorting it is trivial (O(1));
- combine the two sorted halves with a `merge` procedure.
"""

from typing import Any, List, MutableSequence


def merge_sort(src: MutableSequence[Any]) -> None:
    """Sort `src` in place with merge sort.

    Args:
        src: Sequence sorted in place. Ties keep their original order.
    """
    _merge_sort(src, 0, len(src))


def _merge_sort(src: MutableSequence[Any], lo: int, hi: int) -> None:
    n = hi - lo
    if n <= 1:
        return
    if n == 2:
        if src[lo] > src[lo + 1]:
            src[lo], src[lo + 1] = src[lo + 1], src[lo]
        return
    # Divide: the left half gets the extra element for odd lengths
    q = lo + (n + 1) // 2
    # Conquer
    _merge_sort(src, lo, q)
    _merge_sort(src, q, hi)
    # Combine
    _merge_range(src, lo, q, hi)


def _merge_range(src: MutableSequence[Any], lo: int, mid: int, hi: int) -> None:
    tmp: List[Any] = []
    i, j = lo, mid
    while i < mid or j < hi:
        if i == mid:
            tmp.append(src[j])
            j += 1
        elif j == hi:
            tmp.append(src[i])
            i += 1
        elif src[i] <= src[j]:
            tmp.append(src[i])
            i += 1
        else:
            tmp.append(src[j])
            j += 1
    src[lo:hi] = tmp


def merge(src: MutableSequence[Any], mid: int) -> None:
    """Merge the sorted runs `src[:mid]` and `src[mid:]` in place.

    Uses a single temporary buffer of `len(src)` elements. On equal values the
    left run wins, which keeps the merge stable.

    Args:
        src: Sequence whose two runs are each sorted.
        mid: Index of the first element of the right run.
    """
    _merge_range(src, 0, mid, len(src))


def merge_clrs(src: MutableSequence[Any], mid: int) -> None:
    """MERGE procedure closer to the CLRS book.

    Copies both runs into `left` and `right` and writes them back into
    `src`. Instead of the book's infinity sentinels, an exhausted run is
    detected by its index reaching the run's length.

    Args:
        src: Sequence whose two runs are each sorted.
        mid: Index of the first element of the right run.
    """
    left = list(src[:mid])
    right = list(src[mid:])

    i = 0
    j = 0
    for k in range(len(src)):
        if i == len(left):
            src[k] = right[j]
            j += 1
        elif j == len(right):
            src[k] = left[i]
            i += 1
        elif left[i] <= right[j]:
            src[k] = left[i]
            i += 1
        else:
            src[k] = right[j]
            j += 1
