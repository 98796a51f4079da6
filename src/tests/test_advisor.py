"""
Tests for the rule-of-thumb algorithm advisor.
"""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import pytest

from core.errors import InvalidArgumentError
from performance.advisor import (
    recommend_memory_optimization, recommend_pagination_strategy,
    recommend_search_algorithm, recommend_sort_by_data_characteristics,
    recommend_sorting_algorithm,
)


class TestSortingAdvice:

    @pytest.mark.parametrize("size, prefix", [
        (10, "Use database ORDER BY"),
        (99, "Use database ORDER BY"),
        (100, "QuickSort"),
        (9999, "QuickSort"),
        (10000, "MergeSort"),
    ])
    def test_size_bands(self, size, prefix):
        assert recommend_sorting_algorithm(size).startswith(prefix)

    @pytest.mark.parametrize("size", [-1, 1.5, None, True])
    def test_invalid_size(self, size):
        with pytest.raises(InvalidArgumentError):
            recommend_sorting_algorithm(size)


class TestSearchAdvice:

    def test_unsorted_data(self):
        assert "Linear Search" in recommend_search_algorithm(1_000_000, is_sorted=False)

    @pytest.mark.parametrize("size, prefix", [
        (500, "Linear Search"),
        (1000, "Binary Search"),
        (99999, "Binary Search"),
        (100000, "Jump Search"),
    ])
    def test_sorted_size_bands(self, size, prefix):
        assert recommend_search_algorithm(size, is_sorted=True).startswith(prefix)


class TestPaginationAdvice:

    def test_real_time_prefers_cursor(self):
        assert recommend_pagination_strategy(True, 10).startswith("Cursor-based")

    def test_large_pages_prefer_cursor(self):
        assert recommend_pagination_strategy(False, 500).startswith("Cursor-based")

    def test_static_small_pages_use_offset(self):
        assert recommend_pagination_strategy(False, 20).startswith("Offset-based")

    def test_page_size_must_be_positive(self):
        with pytest.raises(InvalidArgumentError):
            recommend_pagination_strategy(False, 0)


class TestDataCharacteristics:

    def test_nearly_sorted(self):
        assert recommend_sort_by_data_characteristics(5000, True, False).startswith("MergeSort")

    def test_tiny(self):
        assert recommend_sort_by_data_characteristics(20, False, True).startswith("Insertion")

    def test_huge(self):
        assert recommend_sort_by_data_characteristics(500000, True, True).startswith("MergeSort")

    @pytest.mark.parametrize("uniform", [True, False])
    def test_middle_band(self, uniform):
        assert recommend_sort_by_data_characteristics(5000, False, uniform).startswith("QuickSort")


class TestMemoryAdvice:

    def test_too_large_for_memory(self):
        assert "database" in recommend_memory_optimization(10_000, 500_000)

    def test_tight_memory(self):
        assert recommend_memory_optimization(6_000, 1_000_000).startswith("HeapSort")

    def test_plenty_of_memory(self):
        assert recommend_memory_optimization(1_000, 1_000_000).startswith("MergeSort")

    def test_memory_must_be_positive(self):
        with pytest.raises(InvalidArgumentError):
            recommend_memory_optimization(10, 0)
