"""
===============================================================================
ALGORITHM BENCHMARKS - Sorting Engine Test Suite
===============================================================================
Ordering, stability, idempotence and boundary behaviour of quick_sort,
merge_sort and heap_sort, plus the comparator helpers they are driven by.
===============================================================================
"""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import random

import pytest

from algorithms.sorting import (
    SORTING_ALGORITHMS, heap_sort, is_sorted, merge_sort, quick_sort, sort,
)
from core.catalog import (
    BY_PRICE_ASC, Product, comparing, generate_products, get_comparator,
    safe_direction, safe_sort_field,
)
from core.errors import InvalidArgumentError


ALL_SORTS = [quick_sort, merge_sort, heap_sort]


def int_cmp(a, b):
    return (a > b) - (a < b)


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def shuffled_ints():
    """Deterministic shuffled integers with duplicates."""
    rng = random.Random(7)
    return [rng.randint(-50, 50) for _ in range(500)]


@pytest.fixture
def products():
    return generate_products(300)


# =============================================================================
# Ordering
# =============================================================================

class TestOrdering:
    """Every adjacent pair of the output satisfies comparator(a, b) <= 0."""

    @pytest.mark.parametrize("sort_func", ALL_SORTS)
    def test_sorts_integers(self, sort_func, shuffled_ints):
        data = list(shuffled_ints)
        result = sort_func(data, int_cmp)
        assert result is data
        assert data == sorted(shuffled_ints)

    @pytest.mark.parametrize("sort_func", ALL_SORTS)
    def test_sorts_products_by_price(self, sort_func, products):
        data = list(products)
        sort_func(data, BY_PRICE_ASC)
        assert is_sorted(data, BY_PRICE_ASC)
        assert sorted(p.product_id for p in data) == list(range(300))

    @pytest.mark.parametrize("sort_func", ALL_SORTS)
    def test_descending_comparator(self, sort_func, products):
        desc = get_comparator("price", "DESC")
        data = sort_func(list(products), desc)
        prices = [p.price for p in data]
        assert prices == sorted(prices, reverse=True)

    @pytest.mark.parametrize("sort_func", ALL_SORTS)
    def test_reverse_sorted_input(self, sort_func):
        data = list(range(2000, 0, -1))
        sort_func(data, int_cmp)
        assert data == list(range(1, 2001))

    @pytest.mark.parametrize("sort_func", ALL_SORTS)
    def test_all_equal_keys(self, sort_func):
        data = [5] * 3000
        sort_func(data, int_cmp)
        assert data == [5] * 3000

    @pytest.mark.parametrize("name", list(SORTING_ALGORITHMS))
    def test_dispatch_by_name(self, name, shuffled_ints):
        data = sort(list(shuffled_ints), int_cmp, algorithm=name)
        assert data == sorted(shuffled_ints)


# =============================================================================
# Stability
# =============================================================================

class TestStability:
    """MergeSort keeps equal-keyed elements in input order."""

    def test_merge_sort_is_stable(self):
        rng = random.Random(3)
        data = [(rng.randint(0, 9), i) for i in range(400)]
        by_key = comparing(lambda t: t[0])
        result = merge_sort(list(data), by_key)
        assert result == sorted(data, key=lambda t: t[0])

    def test_merge_sort_stable_on_products(self):
        items = [Product(i, f"P{i}", float(i % 4)) for i in range(40)]
        result = merge_sort(list(items), BY_PRICE_ASC)
        for price in range(4):
            ids = [p.product_id for p in result if p.price == price]
            assert ids == sorted(ids)


# =============================================================================
# Idempotence & determinism
# =============================================================================

class TestIdempotence:

    @pytest.mark.parametrize("sort_func", [quick_sort, merge_sort])
    def test_sorted_input_unchanged(self, sort_func):
        data = list(range(5000))
        sort_func(data, int_cmp)
        assert data == list(range(5000))

    @pytest.mark.parametrize("sort_func", [quick_sort, merge_sort])
    def test_sorted_products_with_duplicate_prices_unchanged(self, sort_func):
        data = [Product(0, "A", 1.0), Product(1, "B", 2.0), Product(2, "C", 3.0),
                Product(3, "D", 5.0), Product(4, "E", 5.0)]
        before = list(data)
        sort_func(data, BY_PRICE_ASC)
        assert data == before

    @pytest.mark.parametrize("sort_func", [quick_sort, merge_sort])
    def test_sorted_runs_of_equal_keys_unchanged(self, sort_func):
        data = [Product(i, f"P{i}", float(i // 7)) for i in range(700)]
        before = list(data)
        sort_func(data, BY_PRICE_ASC)
        assert [p.product_id for p in data] == [p.product_id for p in before]

    @pytest.mark.parametrize("sort_func", [quick_sort, merge_sort])
    def test_sorted_generated_catalog_unchanged(self, sort_func, products):
        ordered = merge_sort(list(products), comparing(lambda p: p.stock))
        data = list(ordered)
        sort_func(data, comparing(lambda p: p.stock))
        assert data == ordered

    @pytest.mark.parametrize("sort_func", ALL_SORTS)
    def test_sorting_twice_matches_once(self, sort_func, products):
        once = sort_func(list(products), BY_PRICE_ASC)
        twice = sort_func(list(once), BY_PRICE_ASC)
        assert [p.price for p in once] == [p.price for p in twice]

    def test_quick_sort_is_deterministic(self, products):
        by_stock = comparing(lambda p: p.stock)
        first = quick_sort(list(products), by_stock)
        second = quick_sort(list(products), by_stock)
        assert first == second


# =============================================================================
# Boundaries and contract violations
# =============================================================================

class TestBoundaries:

    @pytest.mark.parametrize("sort_func", ALL_SORTS)
    def test_empty_input(self, sort_func):
        assert sort_func([], int_cmp) == []

    @pytest.mark.parametrize("sort_func", ALL_SORTS)
    def test_single_element(self, sort_func):
        assert sort_func([42], int_cmp) == [42]

    @pytest.mark.parametrize("sort_func", ALL_SORTS)
    def test_none_comparator_rejected(self, sort_func):
        with pytest.raises(InvalidArgumentError):
            sort_func([3, 1, 2], None)

    @pytest.mark.parametrize("sort_func", ALL_SORTS)
    def test_none_comparator_rejected_even_for_empty(self, sort_func):
        with pytest.raises(ValueError):
            sort_func([], None)

    def test_unknown_algorithm_name(self):
        with pytest.raises(InvalidArgumentError, match="Unknown sort algorithm"):
            sort([1], int_cmp, algorithm="BubbleSort")

    @pytest.mark.parametrize("sort_func", ALL_SORTS)
    def test_comparator_error_propagates(self, sort_func):
        def broken(a, b):
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError, match="boom"):
            sort_func([2, 1, 3], broken)


# =============================================================================
# Comparator helpers
# =============================================================================

class TestComparators:

    def test_none_keys_sort_last(self):
        cmp = comparing(lambda x: x)
        data = merge_sort([3, None, 1, None, 2], cmp)
        assert data == [1, 2, 3, None, None]

    def test_none_keys_last_when_descending(self):
        cmp = comparing(lambda x: x, reverse=True)
        data = merge_sort([3, None, 1, 2], cmp)
        assert data == [3, 2, 1, None]

    def test_get_comparator_rejects_unknown_field(self):
        with pytest.raises(InvalidArgumentError):
            get_comparator("colour")

    def test_get_comparator_rejects_unknown_direction(self):
        with pytest.raises(InvalidArgumentError):
            get_comparator("price", "SIDEWAYS")

    def test_safe_helpers_fall_back(self):
        assert safe_sort_field("PRICE") == "price"
        assert safe_sort_field("bogus") == "product_id"
        assert safe_sort_field(None) == "product_id"
        assert safe_direction("desc") == "DESC"
        assert safe_direction(None) == "ASC"
