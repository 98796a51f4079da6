"""
===============================================================================
ALGORITHM BENCHMARKS - Benchmark Harness Test Suite
===============================================================================
The harness times exactly one call, never copies the dataset, propagates
failures untouched and packages an immutable BenchmarkResult.
===============================================================================
"""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import dataclasses

import pytest

from algorithms.searching import binary_search
from algorithms.sorting import quick_sort
from core.constants import NOT_FOUND
from core.errors import InvalidArgumentError
from performance.benchmarks import (
    Benchmark, BenchmarkResult, OperationKind, benchmark_search, benchmark_sort,
)


def int_cmp(a, b):
    return (a > b) - (a < b)


# =============================================================================
# Sort benchmarks
# =============================================================================

class TestBenchmarkSort:

    def test_result_fields(self):
        data = [3, 1, 2]
        result = benchmark_sort(data, lambda d: quick_sort(d, int_cmp), "QuickSort")
        assert result.algorithm_name == "QuickSort"
        assert result.operation_kind is OperationKind.SORT
        assert result.dataset_size == 3
        assert result.execution_time_ms >= 0.0
        assert result.found_index is None
        assert result.found is None
        assert result.memory_used_bytes is None

    def test_dataset_sorted_in_place(self):
        data = [5, 4, 3, 2, 1]
        benchmark_sort(data, lambda d: quick_sort(d, int_cmp), "QuickSort")
        assert data == [1, 2, 3, 4, 5]

    def test_operation_called_exactly_once(self):
        calls = []
        benchmark_sort([1, 2], lambda d: calls.append(d), "Counting")
        assert len(calls) == 1

    def test_operation_receives_same_object(self):
        data = [2, 1]
        seen = []
        benchmark_sort(data, lambda d: seen.append(d), "Identity")
        assert seen[0] is data

    def test_failure_propagates(self):
        def explode(d):
            raise KeyError("bad comparator")

        with pytest.raises(KeyError, match="bad comparator"):
            benchmark_sort([1, 2], explode, "Exploding")

    def test_none_operation_rejected(self):
        with pytest.raises(InvalidArgumentError):
            benchmark_sort([1], None, "Nothing")

    def test_memory_tracking(self):
        result = Benchmark.benchmark_sort(
            list(range(1000, 0, -1)),
            lambda d: sorted(d),
            "Builtin",
            track_memory=True,
        )
        assert result.memory_used_bytes is not None
        assert result.memory_used_bytes > 0


# =============================================================================
# Search benchmarks
# =============================================================================

class TestBenchmarkSearch:

    def test_found(self):
        data = list(range(100))
        result = benchmark_search(
            data, lambda d: binary_search(d, 42, lambda x: x), "BinarySearch"
        )
        assert result.operation_kind is OperationKind.SEARCH
        assert result.found_index == 42
        assert result.found is True
        assert result.dataset_size == 100

    def test_not_found(self):
        result = benchmark_search(
            [1, 2, 3], lambda d: binary_search(d, 99, lambda x: x), "BinarySearch"
        )
        assert result.found_index == NOT_FOUND
        assert result.found is False

    def test_failure_propagates(self):
        with pytest.raises(ZeroDivisionError):
            benchmark_search([1], lambda d: 1 // 0, "Broken")


# =============================================================================
# BenchmarkResult value object
# =============================================================================

class TestBenchmarkResult:

    def test_immutable(self):
        result = BenchmarkResult("QuickSort", OperationKind.SORT, 10, 1.5)
        with pytest.raises(dataclasses.FrozenInstanceError):
            result.execution_time_ms = 0.0

    def test_negative_time_rejected(self):
        with pytest.raises(InvalidArgumentError):
            BenchmarkResult("QuickSort", OperationKind.SORT, 10, -0.1)

    @pytest.mark.parametrize("ms, expected", [
        (0.1234, "0.123 ms"),
        (12.346, "12.35 ms"),
        (1500.0, "1.50 s"),
    ])
    def test_time_formatting(self, ms, expected):
        result = BenchmarkResult("X", OperationKind.SORT, 1, ms)
        assert result.execution_time_formatted == expected

    @pytest.mark.parametrize("size, expected", [
        (None, "n/a"),
        (512, "512 B"),
        (1536, "1.50 KB"),
        (2 * 1024 * 1024, "2.00 MB"),
    ])
    def test_memory_formatting(self, size, expected):
        result = BenchmarkResult("X", OperationKind.SORT, 1, 0.0, memory_used_bytes=size)
        assert result.memory_used_formatted == expected

    def test_formatted_output_and_dict(self):
        result = BenchmarkResult("JumpSearch", OperationKind.SEARCH, 9, 0.5, found_index=3)
        assert result.formatted_output() == "JumpSearch: 0.500 ms, n/a"
        d = result.to_dict()
        assert d["operation_kind"] == "Search"
        assert d["found"] is True
