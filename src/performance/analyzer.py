"""
===============================================================================
ALGORITHM BENCHMARKS - Performance Analyzer
===============================================================================
Orchestrates one analysis pass for a dataset size:

    1. generate ``dataset_size`` products from the fixed seed;
    2. time QuickSort, MergeSort and HeapSort, each on its own copy of the
       unsorted data, ordering by price ascending;
    3. sort one more copy (untimed) as the substrate for BinarySearch and
       JumpSearch; LinearSearch scans the original unsorted data;
    4. search for the price of the item at ``dataset_size // 2`` of the
       unsorted data, so the target is always present;
    5. derive the winners and advisories from the six timings.

Everything runs sequentially in the calling thread.  Each algorithm gets a
private copy of the dataset, so the only shared state between runs is the
immutable product records themselves.

The recommendation step is a pure function of the six execution times and the
dataset size (:func:`derive_recommendations`); the resulting
:class:`AnalysisResult` is frozen once built.
===============================================================================
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

import numpy as np
import pandas as pd

from algorithms.searching import binary_search, jump_search, linear_search
from algorithms.sorting import heap_sort, merge_sort, quick_sort
from core.catalog import BY_PRICE_ASC, Product, generate_products
from core.config import AnalyzerSettings
from core.constants import (
    QUICK_SORT, MERGE_SORT, HEAP_SORT,
    BINARY_SEARCH, JUMP_SEARCH, LINEAR_SEARCH,
    SORT_PRIORITY, SEARCH_PRIORITY,
)
from core.errors import InvalidArgumentError
from performance.benchmarks import Benchmark, BenchmarkResult

logger = logging.getLogger(__name__)


# Advisory text per winner: the property that justifies the choice.
SORT_ADVISORIES = {
    QUICK_SORT: "QuickSort is fastest for this dataset size",
    MERGE_SORT: "MergeSort provides stable sorting with consistent performance",
    HEAP_SORT: "HeapSort is memory efficient for large datasets",
}
SEARCH_ADVISORIES = {
    BINARY_SEARCH: "BinarySearch is optimal for sorted data",
    JUMP_SEARCH: "JumpSearch balances simplicity and performance",
    LINEAR_SEARCH: "LinearSearch is suitable for unsorted small datasets",
}


# =============================================================================
# Pure recommendation logic
# =============================================================================

def select_winner(times: Mapping[str, float], priority: Sequence[str],
                  tolerance: float = 0.0) -> str:
    """
    Fastest candidate in ``priority``, ties resolved by position in ``priority``.

    Parameters
    ----------
    times : mapping
        Execution time per candidate name; must cover every candidate.
    priority : sequence of str
        Candidate names, highest priority first.
    tolerance : float
        Times within ``fastest * (1 + tolerance)`` count as ties.
    """
    missing = [name for name in priority if name not in times]
    if missing:
        raise InvalidArgumentError(f"Missing execution times for: {missing}")
    fastest = min(times[name] for name in priority)
    limit = fastest * (1.0 + tolerance)
    for name in priority:
        if times[name] <= limit:
            return name
    # Unreachable: the fastest candidate always satisfies the limit.
    return priority[0]


def derive_recommendations(times: Mapping[str, float], dataset_size: int,
                           settings: Optional[AnalyzerSettings] = None,
                           ) -> Tuple[str, str, Tuple[str, ...]]:
    """
    Compute ``(best_sort, best_search, recommendations)`` from the six times.

    Order of advisories: sorting winner, search winner, then at most one
    size-based advisory.
    """
    settings = settings or AnalyzerSettings()

    best_sort = select_winner(times, SORT_PRIORITY, settings.tie_tolerance)
    best_search = select_winner(times, SEARCH_PRIORITY, settings.tie_tolerance)

    recommendations = [SORT_ADVISORIES[best_sort], SEARCH_ADVISORIES[best_search]]
    if dataset_size < settings.small_dataset_threshold:
        recommendations.append(
            f"Consider using database sorting for datasets under "
            f"{settings.small_dataset_threshold}"
        )
    elif dataset_size > settings.large_dataset_threshold:
        recommendations.append(
            "For large datasets, consider pagination and database indexing"
        )
    return best_sort, best_search, tuple(recommendations)


# =============================================================================
# Result aggregate
# =============================================================================

@dataclass(frozen=True)
class AnalysisResult:
    """
    Outcome of one analysis pass: six measurements, two winners, advisories.

    Build instances with :meth:`from_results`, which validates completeness and
    derives the winners and recommendations before freezing.
    """

    dataset_size: int
    quick_sort: BenchmarkResult
    merge_sort: BenchmarkResult
    heap_sort: BenchmarkResult
    binary_search: BenchmarkResult
    linear_search: BenchmarkResult
    jump_search: BenchmarkResult
    best_sorting_algorithm: str
    best_search_algorithm: str
    recommendations: Tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def from_results(cls, dataset_size: int, results: Mapping[str, BenchmarkResult],
                     settings: Optional[AnalyzerSettings] = None) -> "AnalysisResult":
        expected = SORT_PRIORITY + SEARCH_PRIORITY
        missing = [name for name in expected if name not in results]
        if missing:
            raise InvalidArgumentError(f"Analysis is missing results for: {missing}")

        times = {name: results[name].execution_time_ms for name in expected}
        best_sort, best_search, recommendations = derive_recommendations(
            times, dataset_size, settings
        )
        return cls(
            dataset_size=dataset_size,
            quick_sort=results[QUICK_SORT],
            merge_sort=results[MERGE_SORT],
            heap_sort=results[HEAP_SORT],
            binary_search=results[BINARY_SEARCH],
            linear_search=results[LINEAR_SEARCH],
            jump_search=results[JUMP_SEARCH],
            best_sorting_algorithm=best_sort,
            best_search_algorithm=best_search,
            recommendations=recommendations,
        )

    @property
    def sorting_results(self) -> Dict[str, BenchmarkResult]:
        """Sort measurements in priority order."""
        return {
            QUICK_SORT: self.quick_sort,
            MERGE_SORT: self.merge_sort,
            HEAP_SORT: self.heap_sort,
        }

    @property
    def search_results(self) -> Dict[str, BenchmarkResult]:
        """Search measurements in priority order."""
        return {
            BINARY_SEARCH: self.binary_search,
            JUMP_SEARCH: self.jump_search,
            LINEAR_SEARCH: self.linear_search,
        }

    @property
    def results(self) -> List[BenchmarkResult]:
        return list(self.sorting_results.values()) + list(self.search_results.values())

    def get(self, algorithm_name: str) -> BenchmarkResult:
        for result in self.results:
            if result.algorithm_name == algorithm_name:
                return result
        raise InvalidArgumentError(f"No result for algorithm {algorithm_name!r}")

    def to_dataframe(self) -> pd.DataFrame:
        """One row per algorithm, indexed by algorithm name."""
        rows = [r.to_dict() for r in self.results]
        return pd.DataFrame(rows).set_index("algorithm_name")


# =============================================================================
# Analyzer
# =============================================================================

class PerformanceAnalyzer:
    """
    Runs all six algorithms through :class:`Benchmark` for a dataset size.

    Parameters
    ----------
    settings : AnalyzerSettings, optional
        Seed, thresholds, tie tolerance and memory tracking.  Defaults match
        :mod:`core.constants`.
    """

    def __init__(self, settings: Optional[AnalyzerSettings] = None) -> None:
        self.settings = settings or AnalyzerSettings()

    def generate_dataset(self, dataset_size: int) -> List[Product]:
        return generate_products(dataset_size, seed=self.settings.seed)

    def analyze_all(self, dataset_size: int) -> AnalysisResult:
        """
        Benchmark the three sorts and three searches on a fresh dataset.

        Raises
        ------
        InvalidArgumentError
            If ``dataset_size`` is not a positive integer.  Raised before any
            data is generated or any algorithm runs.
        """
        if (isinstance(dataset_size, bool)
                or not isinstance(dataset_size, (int, np.integer))
                or dataset_size <= 0):
            raise InvalidArgumentError(
                f"Dataset size must be a positive integer, got {dataset_size!r}"
            )
        dataset_size = int(dataset_size)
        track = self.settings.track_memory

        logger.info("Analyzing algorithms on %d items (seed=%d)", dataset_size, self.settings.seed)
        dataset = self.generate_dataset(dataset_size)

        results: Dict[str, BenchmarkResult] = {}
        for name, func in ((QUICK_SORT, quick_sort), (MERGE_SORT, merge_sort),
                           (HEAP_SORT, heap_sort)):
            results[name] = Benchmark.benchmark_sort(
                list(dataset),
                lambda data, f=func: f(data, BY_PRICE_ASC),
                name,
                track_memory=track,
            )
            logger.info("  %s", results[name].formatted_output())

        sorted_data = quick_sort(list(dataset), BY_PRICE_ASC)
        target = dataset[dataset_size // 2].price

        def price(p: Product) -> float:
            return p.price

        results[BINARY_SEARCH] = Benchmark.benchmark_search(
            sorted_data, lambda data: binary_search(data, target, price),
            BINARY_SEARCH, track_memory=track,
        )
        results[LINEAR_SEARCH] = Benchmark.benchmark_search(
            dataset, lambda data: linear_search(data, lambda p: p.price == target),
            LINEAR_SEARCH, track_memory=track,
        )
        results[JUMP_SEARCH] = Benchmark.benchmark_search(
            sorted_data, lambda data: jump_search(data, target, price),
            JUMP_SEARCH, track_memory=track,
        )
        for name in SEARCH_PRIORITY:
            logger.info("  %s", results[name].formatted_output())

        analysis = AnalysisResult.from_results(dataset_size, results, self.settings)
        logger.info(
            "Best sorting: %s, best search: %s",
            analysis.best_sorting_algorithm, analysis.best_search_algorithm,
        )
        return analysis

    def compare_sizes(self, sizes: Iterable[int]) -> pd.DataFrame:
        """Run :meth:`analyze_all` for each size and tabulate via :func:`timing_table`."""
        sizes = list(sizes)
        if len(set(sizes)) != len(sizes):
            raise InvalidArgumentError(f"compare_sizes got repeated dataset sizes: {sizes}")
        return timing_table(self.analyze_all(size) for size in sizes)


def timing_table(analyses: Iterable[AnalysisResult]) -> pd.DataFrame:
    """
    Execution times of several analyses side by side.

    Returns
    -------
    pd.DataFrame
        Rows are algorithm names (priority order), columns are dataset sizes,
        values are milliseconds.
    """
    columns: Dict[int, pd.Series] = {}
    for analysis in analyses:
        if analysis.dataset_size in columns:
            raise InvalidArgumentError(
                f"timing_table got two analyses for dataset size {analysis.dataset_size}"
            )
        columns[analysis.dataset_size] = pd.Series(
            {r.algorithm_name: r.execution_time_ms for r in analysis.results}
        )
    if not columns:
        raise InvalidArgumentError("timing_table needs at least one analysis")
    frame = pd.DataFrame(columns)
    frame.index.name = "algorithm"
    frame.columns.name = "dataset_size"
    return frame
