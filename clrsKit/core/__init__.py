"""
# ==== CORE PACKAGE INITIALIZER ==== #

Algorithms from "Introduction to Algorithms" (CLRS).

Modules:
    bubble_sort     - bubble sort, both bubbling directions
    insertion_sort  - insertion sort variants
    merge_sort      - merge sort and its merge procedures
    quick_sort      - quick sort with Lomuto and Hoare partitioning
    heap_sort       - binary max-heap, heap sort, max-priority queue
    count_sort      - counting sort
    radix_sort      - LSD radix sort
    max_subarray    - maximum subarray (Kadane, divide and conquer)
    registry        - catalog of the algorithms above
    analysis        - empirical running-time analysis

Notes:
- This file intentionally contains no runtime logic.
"""
