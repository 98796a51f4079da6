"""
===============================================================================
ALGORITHM BENCHMARKS - Sorting Engine
===============================================================================
From-scratch comparison sorts over arbitrary elements and a three-way
comparator ``cmp(a, b) -> int``:

    quick_sort  - in-place partition-exchange, median-of-three pivot with a
                  single left-to-right three-way partition.  Average
                  O(n log n), worst O(n^2), not stable.  Recursion only on the
                  smaller partition, so the stack stays O(log n) deep.
                  Elements already in their partition are never moved, so
                  an already-sorted input comes back unchanged.
    merge_sort  - top-down divide and conquer with a single auxiliary buffer
                  the size of the input.  Always O(n log n) time, O(n) space,
                  stable.
    heap_sort   - in-place max-heap build followed by repeated extraction of
                  the maximum.  O(n log n) time, O(1) extra space, not stable.

All three sort the list in place and return the same list object, so they can
be used either as statements or as expressions.  Empty and single-element
inputs are returned untouched.  Pivot choice and partitioning depend only on
the comparator and the input, so repeated runs produce identical results.
===============================================================================
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, MutableSequence

from core.constants import QUICK_SORT, MERGE_SORT, HEAP_SORT
from core.errors import InvalidArgumentError

Comparator = Callable[[Any, Any], int]


def _check_comparator(comparator: Comparator) -> None:
    if comparator is None:
        raise InvalidArgumentError("comparator must be a callable, got None")
    if not callable(comparator):
        raise InvalidArgumentError(
            f"comparator must be callable, got {type(comparator).__name__}"
        )


# =============================================================================
# Quicksort
# =============================================================================

def _median_of_three(items: MutableSequence, low: int, high: int,
                     comparator: Comparator) -> Any:
    mid = low + (high - low) // 2
    a, b, c = items[low], items[mid], items[high]
    if comparator(a, b) <= 0:
        if comparator(b, c) <= 0:
            return b
        return c if comparator(a, c) <= 0 else a
    if comparator(a, c) <= 0:
        return a
    return c if comparator(b, c) <= 0 else b


def _partition3(items: MutableSequence, low: int, high: int,
                comparator: Comparator) -> tuple:
    """
    Three-way partition of ``items[low:high + 1]`` around a median-of-three
    pivot.  Returns ``(lt, gt)`` such that ``items[lt:gt + 1]`` all compare
    equal to the pivot, everything before is smaller, everything after larger.

    The scan keeps three growing regions behind ``i``: smaller in
    ``[low, lt)``, equal in ``[lt, eq)``, larger in ``[eq, i)``.  A larger
    element stays where it is; an equal one swaps with the first larger; a
    smaller one rotates through both regions.  When the regions are empty the
    moves are self-assignments, which keeps sorted input in place.
    """
    pivot = _median_of_three(items, low, high, comparator)
    lt = eq = low
    for i in range(low, high + 1):
        c = comparator(items[i], pivot)
        if c > 0:
            continue
        x = items[i]
        if c == 0:
            items[i] = items[eq]
            items[eq] = x
        else:
            items[i] = items[eq]
            items[eq] = items[lt]
            items[lt] = x
            lt += 1
        eq += 1
    return lt, eq - 1


def _quick_sort(items: MutableSequence, low: int, high: int,
                comparator: Comparator) -> None:
    while low < high:
        lt, gt = _partition3(items, low, high, comparator)
        # Recurse into the smaller side, iterate over the larger one.
        if lt - low < high - gt:
            _quick_sort(items, low, lt - 1, comparator)
            low = gt + 1
        else:
            _quick_sort(items, gt + 1, high, comparator)
            high = lt - 1


def quick_sort(items: MutableSequence, comparator: Comparator) -> MutableSequence:
    """Sort ``items`` in place with quicksort and return it."""
    _check_comparator(comparator)
    if len(items) > 1:
        _quick_sort(items, 0, len(items) - 1, comparator)
    return items


# =============================================================================
# Mergesort
# =============================================================================

def _merge(items: MutableSequence, buffer: List, left: int, mid: int, right: int,
           comparator: Comparator) -> None:
    buffer[left:right + 1] = items[left:right + 1]
    i, j, k = left, mid + 1, left
    while i <= mid and j <= right:
        # <= keeps equal elements in input order
        if comparator(buffer[i], buffer[j]) <= 0:
            items[k] = buffer[i]
            i += 1
        else:
            items[k] = buffer[j]
            j += 1
        k += 1
    while i <= mid:
        items[k] = buffer[i]
        i += 1
        k += 1
    # Any remaining right-half elements are already in place.


def _merge_sort(items: MutableSequence, buffer: List, left: int, right: int,
                comparator: Comparator) -> None:
    if left >= right:
        return
    mid = left + (right - left) // 2
    _merge_sort(items, buffer, left, mid, comparator)
    _merge_sort(items, buffer, mid + 1, right, comparator)
    if comparator(items[mid], items[mid + 1]) <= 0:
        return
    _merge(items, buffer, left, mid, right, comparator)


def merge_sort(items: MutableSequence, comparator: Comparator) -> MutableSequence:
    """Stable in-place (from the caller's view) mergesort; returns ``items``."""
    _check_comparator(comparator)
    n = len(items)
    if n > 1:
        buffer = [None] * n
        _merge_sort(items, buffer, 0, n - 1, comparator)
    return items


# =============================================================================
# Heapsort
# =============================================================================

def _sift_down(items: MutableSequence, start: int, end: int,
               comparator: Comparator) -> None:
    root = start
    while True:
        child = 2 * root + 1
        if child >= end:
            return
        if child + 1 < end and comparator(items[child + 1], items[child]) > 0:
            child += 1
        if comparator(items[child], items[root]) <= 0:
            return
        items[root], items[child] = items[child], items[root]
        root = child


def heap_sort(items: MutableSequence, comparator: Comparator) -> MutableSequence:
    """Sort ``items`` in place with heapsort and return it."""
    _check_comparator(comparator)
    n = len(items)
    if n <= 1:
        return items

    for start in range(n // 2 - 1, -1, -1):
        _sift_down(items, start, n, comparator)

    for end in range(n - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        _sift_down(items, 0, end, comparator)
    return items


# =============================================================================
# Registry
# =============================================================================

SORTING_ALGORITHMS: Dict[str, Callable[[MutableSequence, Comparator], MutableSequence]] = {
    QUICK_SORT: quick_sort,
    MERGE_SORT: merge_sort,
    HEAP_SORT: heap_sort,
}


def sort(items: MutableSequence, comparator: Comparator,
         algorithm: str = QUICK_SORT) -> MutableSequence:
    """Dispatch to one of :data:`SORTING_ALGORITHMS` by name."""
    try:
        func = SORTING_ALGORITHMS[algorithm]
    except KeyError:
        raise InvalidArgumentError(
            f"Unknown sort algorithm: {algorithm}. Valid: {list(SORTING_ALGORITHMS)}"
        ) from None
    return func(items, comparator)


def is_sorted(items: MutableSequence, comparator: Comparator) -> bool:
    """True when every adjacent pair satisfies ``comparator(a, b) <= 0``."""
    _check_comparator(comparator)
    return all(comparator(items[i], items[i + 1]) <= 0 for i in range(len(items) - 1))
