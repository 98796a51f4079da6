"""
advisor.py - Rule-of-thumb algorithm selection

Static guidance that does not need a benchmark run: given what is known about
a dataset up front (size, whether it is sorted, available memory, ...), name
the approach that usually wins.  The measured counterpart lives in
:mod:`performance.analyzer`.
"""

from __future__ import annotations

from core.errors import InvalidArgumentError

# Rough per-item footprint used by recommend_memory_optimization.
BYTES_PER_ITEM_ESTIMATE = 100


def _check_size(dataset_size: int) -> None:
    if isinstance(dataset_size, bool) or not isinstance(dataset_size, int) or dataset_size < 0:
        raise InvalidArgumentError(
            f"dataset_size must be a non-negative integer, got {dataset_size!r}"
        )


def recommend_sorting_algorithm(dataset_size: int) -> str:
    _check_size(dataset_size)
    if dataset_size < 100:
        return ("Use database ORDER BY - overhead of in-memory sorting not worth it "
                "for small datasets")
    if dataset_size < 10000:
        return "QuickSort - best average performance O(n log n) for medium datasets"
    return ("MergeSort - stable and predictable O(n log n) for large datasets, "
            "no worst-case degradation")


def recommend_search_algorithm(dataset_size: int, is_sorted: bool) -> str:
    _check_size(dataset_size)
    if not is_sorted:
        return ("Use database WHERE clause or Linear Search - unsorted data requires "
                "full scan anyway")
    if dataset_size < 1000:
        return "Linear Search - simple and fast O(n) for small datasets, low overhead"
    if dataset_size < 100000:
        return "Binary Search - logarithmic O(log n) time for large sorted datasets"
    return "Jump Search - fewer backward jumps and better cache behaviour for very large datasets"


def recommend_pagination_strategy(real_time_data: bool, page_size: int) -> str:
    if page_size <= 0:
        raise InvalidArgumentError(f"page_size must be positive, got {page_size}")
    if real_time_data:
        return ("Cursor-based pagination - avoids missing/duplicate items in real-time "
                "data streams")
    if page_size > 100:
        return "Cursor-based pagination - more efficient for large page sizes"
    return "Offset-based pagination - simpler implementation, works well for static data"


def recommend_sort_by_data_characteristics(dataset_size: int, nearly_sorted: bool,
                                           uniform_distribution: bool) -> str:
    """
    Pick a sort from the shape of the data.

    ``uniform_distribution`` only matters in the middle size band, where
    QuickSort's median-of-three pivot behaves well on either shape.
    """
    _check_size(dataset_size)
    if nearly_sorted and dataset_size < 10000:
        return "MergeSort - already-ordered runs are merged in linear time"
    if dataset_size < 50:
        return "Insertion Sort - simple and efficient for very small datasets"
    if dataset_size > 100000:
        return "MergeSort - predictable performance for large datasets, no worst case"
    if uniform_distribution:
        return "QuickSort - best average case performance for random data"
    return "QuickSort - three-way partitioning copes with skewed and repeated keys"


def recommend_memory_optimization(dataset_size: int, available_memory: int) -> str:
    """
    Compare an estimated in-memory footprint against ``available_memory`` bytes.
    """
    _check_size(dataset_size)
    if available_memory <= 0:
        raise InvalidArgumentError(
            f"available_memory must be positive, got {available_memory}"
        )
    estimated = dataset_size * BYTES_PER_ITEM_ESTIMATE
    if estimated > available_memory:
        return "Use database operations - dataset too large for in-memory processing"
    if estimated > available_memory * 0.5:
        return "HeapSort - in-place sorting O(1) space complexity"
    return "MergeSort - extra space for stability and predictable performance"
