"""
algorithms - From-scratch sorting and searching routines

    sorting    - quick_sort, merge_sort, heap_sort over a three-way comparator
    searching  - binary_search, jump_search, linear_search over a key projection
"""

from algorithms.sorting import (
    SORTING_ALGORITHMS, heap_sort, is_sorted, merge_sort, quick_sort, sort,
)
from algorithms.searching import (
    SEARCH_ALGORITHMS, binary_search, jump_search, linear_search,
    linear_search_key, search,
)

__all__ = [
    "quick_sort",
    "merge_sort",
    "heap_sort",
    "sort",
    "is_sorted",
    "SORTING_ALGORITHMS",
    "binary_search",
    "jump_search",
    "linear_search",
    "linear_search_key",
    "search",
    "SEARCH_ALGORITHMS",
]
