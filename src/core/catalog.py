"""
===============================================================================
ALGORITHM BENCHMARKS - Catalog Items and Comparators
===============================================================================
The orderable records the benchmarks run on, plus the comparator helpers the
sorting and search routines are parameterised with.

Comparators follow the three-way contract used throughout the engine: a
callable ``cmp(a, b)`` returning a negative number when ``a`` orders before
``b``, zero when they are equal, and a positive number otherwise.  Absent
keys (``None``) always order last, whatever the direction.

Usage:
    from core.catalog import generate_products, get_comparator

    products = generate_products(1000)
    by_price = get_comparator("price", "ASC")

===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, List, Optional

import numpy as np

from core.constants import (
    DATASET_SEED, PRICE_MIN, PRICE_MAX, STOCK_MIN, STOCK_MAX,
)
from core.errors import InvalidArgumentError

Comparator = Callable[[Any, Any], int]
KeyFunc = Callable[[Any], Any]


# =============================================================================
# Orderable item
# =============================================================================

@dataclass(frozen=True)
class Product:
    """A catalog product; only the key chosen by the comparator matters."""

    product_id: int
    name: str
    price: float
    stock: int = 0


# =============================================================================
# Comparators
# =============================================================================

def comparing(key: KeyFunc, reverse: bool = False) -> Comparator:
    """
    Build a three-way comparator ordering elements by ``key(element)``.

    Parameters
    ----------
    key : callable
        Projection from an element to a comparable value.
    reverse : bool
        Descending order when True.  ``None`` keys stay last either way.
    """
    if key is None:
        raise InvalidArgumentError("key must be a callable, got None")

    def compare(a: Any, b: Any) -> int:
        ka, kb = key(a), key(b)
        if ka is None or kb is None:
            if ka is None and kb is None:
                return 0
            return 1 if ka is None else -1
        if ka == kb:
            return 0
        result = -1 if ka < kb else 1
        return -result if reverse else result

    return compare


# Field name -> key projection; aliases map onto the same key.
SORT_FIELDS = {
    "price": lambda p: p.price,
    "name": lambda p: p.name,
    "product_name": lambda p: p.name,
    "id": lambda p: p.product_id,
    "product_id": lambda p: p.product_id,
    "stock": lambda p: p.stock,
}

SORT_DIRECTIONS = ("ASC", "DESC")
DEFAULT_SORT_FIELD = "product_id"
DEFAULT_DIRECTION = "ASC"


def is_valid_sort_field(field: Optional[str]) -> bool:
    return field is not None and field.lower() in SORT_FIELDS


def is_valid_direction(direction: Optional[str]) -> bool:
    return direction is not None and direction.upper() in SORT_DIRECTIONS


def safe_sort_field(field: Optional[str]) -> str:
    """Return the lower-cased field, or the default field when it is unknown."""
    return field.lower() if is_valid_sort_field(field) else DEFAULT_SORT_FIELD


def safe_direction(direction: Optional[str]) -> str:
    """Return the upper-cased direction, or ``ASC`` when it is unknown."""
    return direction.upper() if is_valid_direction(direction) else DEFAULT_DIRECTION


def get_comparator(sort_by: str, direction: str = DEFAULT_DIRECTION) -> Comparator:
    """
    Comparator over :class:`Product` for a named field and direction.

    Raises
    ------
    InvalidArgumentError
        If the field or the direction is not recognised.
    """
    if not is_valid_sort_field(sort_by):
        raise InvalidArgumentError(
            f"Unknown sort field: {sort_by!r}. Valid: {sorted(SORT_FIELDS)}"
        )
    if not is_valid_direction(direction):
        raise InvalidArgumentError(
            f"Unknown sort direction: {direction!r}. Valid: {list(SORT_DIRECTIONS)}"
        )
    return comparing(SORT_FIELDS[sort_by.lower()], reverse=direction.upper() == "DESC")


BY_PRICE_ASC = comparing(SORT_FIELDS["price"])
BY_PRICE_DESC = comparing(SORT_FIELDS["price"], reverse=True)


# =============================================================================
# Synthetic dataset
# =============================================================================

def generate_products(size: int, seed: int = DATASET_SEED) -> List[Product]:
    """
    Generate ``size`` products with uniformly distributed price and stock.

    A fresh generator is seeded on every call, so the same ``(size, seed)``
    pair always yields the same list.

    Parameters
    ----------
    size : int
        Number of products, must be positive.
    seed : int
        Seed for :func:`numpy.random.default_rng`.

    Returns
    -------
    list of Product
        Prices in ``[PRICE_MIN, PRICE_MAX)``, stock in ``[STOCK_MIN, STOCK_MAX)``.
    """
    if isinstance(size, bool) or not isinstance(size, (int, np.integer)) or size <= 0:
        raise InvalidArgumentError(f"Dataset size must be a positive integer, got {size!r}")

    rng = np.random.default_rng(seed)
    prices = rng.uniform(PRICE_MIN, PRICE_MAX, size=int(size))
    stock = rng.integers(STOCK_MIN, STOCK_MAX, size=int(size))

    return [
        Product(
            product_id=i,
            name=f"Product {i}",
            price=float(prices[i]),
            stock=int(stock[i]),
        )
        for i in range(int(size))
    ]
