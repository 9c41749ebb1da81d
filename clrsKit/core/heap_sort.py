# ==== HEAP SORT MODULE ==== #
"""
Heap sort. O(n*log n).

Notable for being an in-place algorithm with an optimal comparison-sort time
bound. The price is keeping the data in a binary max-heap: a nearly complete
binary tree stored in an array, where every node is not smaller than its
children.

The same `Heap` also serves as a max-priority queue (CLRS section 6.5).
"""

import logging
from typing import Any, List, MutableSequence, Optional

from clrsKit.core.errors import HeapUnderflowError, InvalidKeyError

logger = logging.getLogger(__name__)


# ==== HEAP CLASS ==== #

class Heap:
    """
    Binary max-heap over an array.

    Only `inner[:heap_size]` belongs to the heap. Slots past `heap_size` hold
    values the heap has let go of: heap sort and `extract_max` park the
    current maximum there, which is how the array ends up sorted.

    Attributes:
        inner (MutableSequence[Any]): Backing storage, used without copying.
        heap_size (int): Number of leading elements that form the heap.
    """

    def __init__(self, inner: Optional[MutableSequence[Any]] = None) -> None:
        """
        Wrap `inner` (a new list if omitted) and build a max-heap over it.

        Args:
            inner: Storage to arrange into a heap. It is reordered in place.
        """
        self.inner: MutableSequence[Any] = inner if inner is not None else []
        self.heap_size: int = 0
        self.build_max_heap()

    # --► INDEX ARITHMETIC (0-based)

    @staticmethod
    def parent(i: int) -> int:
        return (i - 1) // 2

    @staticmethod
    def left(i: int) -> int:
        return 2 * i + 1

    @staticmethod
    def right(i: int) -> int:
        return 2 * i + 2

    # --► HEAP PROPERTY MAINTENANCE

    def max_heapify(self, i: int) -> None:
        """
        Let `inner[i]` float down until the subtree rooted at `i` is a max-heap.

        Preconditions:
        - The subtrees rooted at `left(i)` and `right(i)` are max-heaps.

        Args:
            i: Index of the subtree root.
        """
        a = self.inner
        while True:
            l, r = self.left(i), self.right(i)
            largest = i
            if l < self.heap_size and a[l] > a[largest]:
                largest = l
            if r < self.heap_size and a[r] > a[largest]:
                largest = r
            if largest == i:
                return
            a[i], a[largest] = a[largest], a[i]
            i = largest

    def build_max_heap(self) -> None:
        """Turn the whole backing array into a max-heap, bottom-up. O(n)."""
        self.heap_size = len(self.inner)
        for i in range(len(self.inner) // 2 - 1, -1, -1):
            self.max_heapify(i)

    def is_max_heap(self) -> bool:
        """Check the max-heap property over `inner[:heap_size]`."""
        a = self.inner
        for i in range(1, self.heap_size):
            if a[self.parent(i)] < a[i]:
                return False
        return True

    def _sift_up(self, i: int) -> None:
        a = self.inner
        while i > 0 and a[self.parent(i)] < a[i]:
            p = self.parent(i)
            a[i], a[p] = a[p], a[i]
            i = p

    # --► SORTING

    def sort(self) -> None:
        """
        Heap sort the backing array in place, ascending.

        Afterwards `heap_size` is 0 and `inner` is sorted. Call
        `build_max_heap()` to use the storage as a heap again.
        """
        self.build_max_heap()
        for i in range(len(self.inner) - 1, 0, -1):
            self.inner[0], self.inner[i] = self.inner[i], self.inner[0]
            self.heap_size -= 1
            self.max_heapify(0)
        self.heap_size = 0

    # --► MAX-PRIORITY QUEUE

    def maximum(self) -> Any:
        """Return the largest element without removing it. O(1)."""
        if self.heap_size < 1:
            raise HeapUnderflowError("heap underflow: maximum() on an empty heap")
        return self.inner[0]

    def extract_max(self) -> Any:
        """Remove and return the largest element. O(log n).

        The extracted value is parked right after the shrunk heap, so
        extracting everything leaves `inner` sorted ascending.
        """
        if self.heap_size < 1:
            raise HeapUnderflowError("heap underflow: extract_max() on an empty heap")
        last = self.heap_size - 1
        a = self.inner
        a[0], a[last] = a[last], a[0]
        self.heap_size -= 1
        self.max_heapify(0)
        return a[last]

    def increase_key(self, i: int, key: Any) -> None:
        """Raise the value at heap index `i` to `key` and restore the heap.

        Raises:
            IndexError: If `i` is outside the heap.
            InvalidKeyError: If `key` is smaller than the current value.
        """
        if not 0 <= i < self.heap_size:
            raise IndexError(f"heap index {i} out of range (heap size {self.heap_size})")
        if key < self.inner[i]:
            raise InvalidKeyError(
                "new key is smaller than current key",
                metadata={"index": i, "current": self.inner[i], "key": key},
            )
        self.inner[i] = key
        self._sift_up(i)

    def insert(self, key: Any) -> None:
        """Add `key` to the heap. O(log n).

        The book inserts minus infinity and raises it with `increase_key`;
        here the key is written directly and sifted up, so any ordered type
        works.
        """
        if self.heap_size < len(self.inner):
            self.inner[self.heap_size] = key
        else:
            self.inner.append(key)
        self.heap_size += 1
        self._sift_up(self.heap_size - 1)

    def __len__(self) -> int:
        return self.heap_size

    def __bool__(self) -> bool:
        return self.heap_size > 0

    def __repr__(self) -> str:
        items: List[Any] = list(self.inner[: self.heap_size])
        return f"Heap({items!r})"


# ==== HEAP SORT FUNCTION ==== #

def heap_sort(src: MutableSequence[Any]) -> None:
    """Sort `src` in place with heap sort.

    Args:
        src: Sequence sorted in place.
    """
    heap = Heap(src)
    logger.debug("heap_sort: built max-heap of %d elements", len(heap))
    heap.sort()
