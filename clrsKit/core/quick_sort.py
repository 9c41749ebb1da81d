# ==== QUICK SORT MODULE ==== #
"""
Quick sort. O(n*log n) in the best and average case, Θ(n^2) in the worst.

Quick sort is an in-place algorithm built on a partitioning procedure.
Partitioning splits a range into two areas such that every element of the
left area is not bigger than any element of the right area. Both areas are
then partitioned recursively, so the recursion tree has O(log n) height on
average, and each level costs O(n).

The worst case matches insertion sort, but the average case is close to the
best one, which is why quick sort performs well in practice.

Recursion always descends into the smaller area and loops over the bigger
one (CLRS problem 7-4), so the stack depth stays O(log n) even on inputs
that trigger the quadratic case.
"""

import enum
from typing import Any, MutableSequence, Union

from clrsKit.core.errors import UnknownAlgorithmError


# ==== PARTITIONING ==== #

def lomuto_partition(src: MutableSequence[Any], lo: int, hi: int) -> int:
    """Nico Lomuto's partitioning of `src[lo:hi + 1]`.

    The pivot is the last element. Every element `<= pivot` is swapped to the
    end of a growing left area. Finally the pivot is swapped right after that
    area, which is its final sorted position.

    Args:
        src: Sequence partitioned in place.
        lo: First index of the range.
        hi: Last index of the range (inclusive); holds the pivot.

    Returns:
        int: Final index `q` of the pivot. `src[lo:q]` holds values `<=` the
        pivot and `src[q + 1:hi + 1]` holds values `>` the pivot.
    """
    pivot = src[hi]
    # first index of the "more than pivot" area
    boundary = lo
    for k in range(lo, hi):
        if src[k] <= pivot:
            src[boundary], src[k] = src[k], src[boundary]
            boundary += 1
    src[boundary], src[hi] = src[hi], src[boundary]
    return boundary


def hoare_partition(src: MutableSequence[Any], lo: int, hi: int) -> int:
    """Tony Hoare's partitioning of `src[lo:hi + 1]`.

    The pivot is the first element. Two indices move towards each other and
    swap out-of-place pairs until they cross. Unlike Lomuto's scheme, the
    pivot is not put into its final position.

    Args:
        src: Sequence partitioned in place.
        lo: First index of the range.
        hi: Last index of the range (inclusive).

    Returns:
        int: Index `j`, `lo <= j < hi`, such that every element of
        `src[lo:j + 1]` is `<=` every element of `src[j + 1:hi + 1]`.
    """
    pivot = src[lo]
    i = lo - 1
    j = hi + 1
    while True:
        j -= 1
        while src[j] > pivot:
            j -= 1
        i += 1
        while src[i] < pivot:
            i += 1
        if i < j:
            src[i], src[j] = src[j], src[i]
        else:
            return j


# ==== PARTITIONER ENUM ==== #

class Partitioner(enum.Enum):
    """Partitioning scheme used by `quick_sort`."""

    LOMUTO = "lomuto"
    HOARE = "hoare"

    @classmethod
    def from_name(cls, name: Union[str, "Partitioner"]) -> "Partitioner":
        """Parse a partitioner from its case-insensitive name.

        Raises:
            UnknownAlgorithmError: If the name is not a known scheme.
        """
        if isinstance(name, Partitioner):
            return name
        try:
            return cls(str(name).strip().lower())
        except ValueError:
            raise UnknownAlgorithmError(
                f"Unknown partitioner '{name}'",
                metadata={"choices": [p.value for p in cls]},
            ) from None

    def run(self, src: MutableSequence[Any], lo: int, hi: int) -> int:
        """Partition `src[lo:hi + 1]` and return the split index."""
        if self is Partitioner.LOMUTO:
            return lomuto_partition(src, lo, hi)
        return hoare_partition(src, lo, hi)


# ==== QUICK SORT ==== #

def quick_sort(
    src: MutableSequence[Any],
    partitioner: Union[Partitioner, str] = Partitioner.LOMUTO,
) -> None:
    """Sort `src` in place with quick sort.

    Args:
        src: Sequence sorted in place.
        partitioner: A `Partitioner` or its name ("lomuto" or "hoare").
    """
    scheme = Partitioner.from_name(partitioner)
    _quick_sort(src, 0, len(src) - 1, scheme)


def _quick_sort(src: MutableSequence[Any], lo: int, hi: int, scheme: Partitioner) -> None:
    while hi - lo >= 1:
        if hi - lo == 1:
            if src[lo] > src[hi]:
                src[lo], src[hi] = src[hi], src[lo]
            return
        q = scheme.run(src, lo, hi)
        if scheme is Partitioner.LOMUTO:
            left_hi, right_lo = q - 1, q + 1
        else:
            left_hi, right_lo = q, q + 1
        if left_hi - lo < hi - right_lo:
            _quick_sort(src, lo, left_hi, scheme)
            lo = right_lo
        else:
            _quick_sort(src, right_lo, hi, scheme)
            hi = left_hi
