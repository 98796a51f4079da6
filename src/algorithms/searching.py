"""
===============================================================================
ALGORITHM BENCHMARKS - Search Engine
===============================================================================
Three lookups, all returning the index of a matching element or
:data:`core.constants.NOT_FOUND` (-1).  An absent target is never an error.

    binary_search  - O(log n); sequence must be sorted ascending by ``key``.
                     Any index whose key equals the target may be returned.
    jump_search    - O(sqrt n); sequence must be sorted ascending by ``key``.
                     Jumps in blocks of floor(sqrt n) (at least 1) until the
                     target is bracketed, then scans the block.
    linear_search  - O(n); no ordering precondition.  Takes an arbitrary
                     predicate and returns the first element satisfying it.
===============================================================================
"""

from __future__ import annotations

import math
from typing import Any, Callable, Dict, Sequence

from core.constants import NOT_FOUND, BINARY_SEARCH, JUMP_SEARCH, LINEAR_SEARCH
from core.errors import InvalidArgumentError

KeyFunc = Callable[[Any], Any]
Predicate = Callable[[Any], bool]


def _check_callable(name: str, func: Any) -> None:
    if func is None or not callable(func):
        raise InvalidArgumentError(f"{name} must be a callable, got {func!r}")


def binary_search(items: Sequence, target: Any, key: KeyFunc) -> int:
    """
    Iterative binary search for ``target`` among ``key(item)`` values.

    Parameters
    ----------
    items : sequence
        Sorted ascending by ``key``.
    target : comparable
        Key value to look for.
    key : callable
        Projection from element to key.

    Returns
    -------
    int
        Index of an element whose key equals ``target``, else ``NOT_FOUND``.
    """
    _check_callable("key", key)
    if target is None:
        return NOT_FOUND

    low, high = 0, len(items) - 1
    while low <= high:
        mid = low + (high - low) // 2
        k = key(items[mid])
        if k == target:
            return mid
        if k < target:
            low = mid + 1
        else:
            high = mid - 1
    return NOT_FOUND


def jump_search(items: Sequence, target: Any, key: KeyFunc) -> int:
    """Block-jumping search over a sequence sorted ascending by ``key``."""
    _check_callable("key", key)
    n = len(items)
    if n == 0 or target is None:
        return NOT_FOUND

    step = max(1, math.isqrt(n))
    prev, end = 0, step
    while key(items[min(end, n) - 1]) < target:
        prev = end
        if prev >= n:
            return NOT_FOUND
        end += step

    for i in range(prev, min(end, n)):
        k = key(items[i])
        if k == target:
            return i
        if target < k:
            break
    return NOT_FOUND


def linear_search(items: Sequence, predicate: Predicate) -> int:
    """Index of the first element satisfying ``predicate``, else ``NOT_FOUND``."""
    _check_callable("predicate", predicate)
    for i, item in enumerate(items):
        if predicate(item):
            return i
    return NOT_FOUND


def linear_search_key(items: Sequence, target: Any, key: KeyFunc) -> int:
    """Equality lookup through :func:`linear_search`, same signature as the others."""
    _check_callable("key", key)
    return linear_search(items, lambda item: key(item) == target)


SEARCH_ALGORITHMS: Dict[str, Callable[[Sequence, Any, KeyFunc], int]] = {
    BINARY_SEARCH: binary_search,
    JUMP_SEARCH: jump_search,
    LINEAR_SEARCH: linear_search_key,
}


def search(items: Sequence, target: Any, key: KeyFunc,
           algorithm: str = BINARY_SEARCH) -> int:
    """Dispatch to one of :data:`SEARCH_ALGORITHMS` by name."""
    try:
        func = SEARCH_ALGORITHMS[algorithm]
    except KeyError:
        raise InvalidArgumentError(
            f"Unknown search algorithm: {algorithm}. Valid: {list(SEARCH_ALGORITHMS)}"
        ) from None
    return func(items, target, key)
