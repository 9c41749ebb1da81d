"""
clrsKit: algorithms and data structures from "Introduction to Algorithms".

Every algorithm is a small, self-contained exercise written for reading, not
for speed. Sorting functions sort a mutable sequence in place and return None,
like `list.sort`.
"""

from clrsKit.core.bubble_sort import bubble_sort_lr, bubble_sort_rl
from clrsKit.core.count_sort import count_sort
from clrsKit.core.errors import (
    ClrsKitError,
    ConfigError,
    HeapUnderflowError,
    InvalidKeyError,
    UnknownAlgorithmError,
    UnsupportedInputError,
)
from clrsKit.core.heap_sort import Heap, heap_sort
from clrsKit.core.insertion_sort import (
    insertion_sort,
    insertion_sort_clrs,
    insertion_sort_shift,
    insertion_sort_swap,
)
from clrsKit.core.max_subarray import (
    MaxSubarray,
    find_max_sum_subarray_dc,
    find_max_sum_subarray_kadane,
)
from clrsKit.core.merge_sort import merge, merge_clrs, merge_sort
from clrsKit.core.quick_sort import Partitioner, quick_sort
from clrsKit.core.radix_sort import radix_sort

__version__ = "0.1.0"

__all__ = [
    "ClrsKitError",
    "ConfigError",
    "Heap",
    "HeapUnderflowError",
    "InvalidKeyError",
    "MaxSubarray",
    "Partitioner",
    "UnknownAlgorithmError",
    "UnsupportedInputError",
    "bubble_sort_lr",
    "bubble_sort_rl",
    "count_sort",
    "find_max_sum_subarray_dc",
    "find_max_sum_subarray_kadane",
    "heap_sort",
    "insertion_sort",
    "insertion_sort_clrs",
    "insertion_sort_shift",
    "insertion_sort_swap",
    "merge",
    "merge_clrs",
    "merge_sort",
    "quick_sort",
    "radix_sort",
]
