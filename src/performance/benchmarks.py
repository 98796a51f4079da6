"""
benchmarks.py - Single-shot Benchmark Harness

Times exactly one invocation of a sort or search operation and packages the
measurement as an immutable :class:`BenchmarkResult`.

The harness is minimal:

    - one call per measurement, no warm-up, no repeated trials;
    - wall-clock time from :func:`time.perf_counter` (monotonic);
    - no copy of the input: a sort operation may sort the dataset it is handed
      in place, so callers that need the original order copy it first;
    - exceptions raised by the operation propagate unchanged and no result is
      produced for that call.

Optional memory tracking wraps the same single call in :mod:`tracemalloc` and
records the peak allocation.  Tracing slows the call down, so timings taken
with ``track_memory=True`` are only comparable with each other.
"""

from __future__ import annotations

import enum
import logging
import time
import tracemalloc
from dataclasses import asdict, dataclass
from typing import Any, Callable, Dict, Optional, Sequence, Tuple

from core.constants import NOT_FOUND
from core.errors import InvalidArgumentError

logger = logging.getLogger(__name__)


class OperationKind(enum.Enum):
    """Which family of algorithm a measurement belongs to."""

    SORT = "Sort"
    SEARCH = "Search"


@dataclass(frozen=True)
class BenchmarkResult:
    """
    One timed algorithm invocation.

    Attributes
    ----------
    algorithm_name : str
        Label supplied by the caller, e.g. ``"QuickSort"``.
    operation_kind : OperationKind
    dataset_size : int
        Length of the dataset the operation ran on.
    execution_time_ms : float
        Elapsed wall-clock time in milliseconds, never negative.
    found_index : int or None
        Index returned by a search operation; ``None`` for sorts.
    memory_used_bytes : int or None
        Peak traced allocation, only when memory tracking was requested.
    """

    algorithm_name: str
    operation_kind: OperationKind
    dataset_size: int
    execution_time_ms: float
    found_index: Optional[int] = None
    memory_used_bytes: Optional[int] = None

    def __post_init__(self) -> None:
        if self.execution_time_ms < 0.0:
            raise InvalidArgumentError(
                f"execution_time_ms must be non-negative, got {self.execution_time_ms}"
            )

    @property
    def found(self) -> Optional[bool]:
        """Whether a search located its target; ``None`` for sorts."""
        if self.found_index is None:
            return None
        return self.found_index != NOT_FOUND

    @property
    def execution_time_formatted(self) -> str:
        ms = self.execution_time_ms
        if ms < 1.0:
            return f"{ms:.3f} ms"
        if ms < 1000.0:
            return f"{ms:.2f} ms"
        return f"{ms / 1000.0:.2f} s"

    @property
    def memory_used_formatted(self) -> str:
        if self.memory_used_bytes is None:
            return "n/a"
        b = self.memory_used_bytes
        if b < 1024:
            return f"{b} B"
        if b < 1024 * 1024:
            return f"{b / 1024.0:.2f} KB"
        return f"{b / (1024.0 * 1024.0):.2f} MB"

    def formatted_output(self) -> str:
        """Single-line summary, e.g. ``"QuickSort: 1.23 ms, n/a"``."""
        return f"{self.algorithm_name}: {self.execution_time_formatted}, {self.memory_used_formatted}"

    def to_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        d["operation_kind"] = self.operation_kind.value
        d["found"] = self.found
        return d


# ---------------------------------------------------------------------------
# Benchmark utility class
# ---------------------------------------------------------------------------

class Benchmark:
    """
    Single-measurement benchmarking harness.

    Both entry points accept the dataset and a one-argument operation taking
    that dataset; they return a :class:`BenchmarkResult` and nothing else.
    """

    # ---- Core measurement helper ------------------------------------------

    @staticmethod
    def time_call(func: Callable, *args, track_memory: bool = False,
                  **kwargs) -> Tuple[Any, float, Optional[int]]:
        """
        Call *func* once and measure it.

        Returns
        -------
        tuple
            ``(return value, elapsed milliseconds, peak bytes or None)``.
        """
        if not track_memory:
            t0 = time.perf_counter()
            value = func(*args, **kwargs)
            t1 = time.perf_counter()
            return value, max(0.0, (t1 - t0) * 1000.0), None

        already_tracing = tracemalloc.is_tracing()
        if not already_tracing:
            tracemalloc.start()
        tracemalloc.reset_peak()
        try:
            t0 = time.perf_counter()
            value = func(*args, **kwargs)
            t1 = time.perf_counter()
            _, peak = tracemalloc.get_traced_memory()
        finally:
            if not already_tracing:
                tracemalloc.stop()
        return value, max(0.0, (t1 - t0) * 1000.0), peak

    # ---- Public entry points ------------------------------------------------

    @staticmethod
    def benchmark_sort(dataset: Sequence, sort_operation: Callable[[Sequence], Any],
                       label: str, track_memory: bool = False) -> BenchmarkResult:
        """
        Time one call of ``sort_operation(dataset)``.

        The operation may sort ``dataset`` in place; it is not copied here.
        """
        _check_operation(sort_operation, label)
        size = len(dataset)
        _, elapsed_ms, peak = Benchmark.time_call(
            sort_operation, dataset, track_memory=track_memory
        )
        logger.debug("%s sorted %d items in %.3f ms", label, size, elapsed_ms)
        return BenchmarkResult(
            algorithm_name=label,
            operation_kind=OperationKind.SORT,
            dataset_size=size,
            execution_time_ms=elapsed_ms,
            memory_used_bytes=peak,
        )

    @staticmethod
    def benchmark_search(dataset: Sequence, search_operation: Callable[[Sequence], int],
                         label: str, track_memory: bool = False) -> BenchmarkResult:
        """
        Time one call of ``search_operation(dataset)``, which returns an index
        or ``NOT_FOUND``.
        """
        _check_operation(search_operation, label)
        size = len(dataset)
        index, elapsed_ms, peak = Benchmark.time_call(
            search_operation, dataset, track_memory=track_memory
        )
        logger.debug("%s searched %d items in %.3f ms (index=%s)", label, size, elapsed_ms, index)
        return BenchmarkResult(
            algorithm_name=label,
            operation_kind=OperationKind.SEARCH,
            dataset_size=size,
            execution_time_ms=elapsed_ms,
            found_index=NOT_FOUND if index is None else int(index),
            memory_used_bytes=peak,
        )


def _check_operation(operation: Any, label: str) -> None:
    if operation is None or not callable(operation):
        raise InvalidArgumentError(f"Operation for {label!r} must be callable, got {operation!r}")


benchmark_sort = Benchmark.benchmark_sort
benchmark_search = Benchmark.benchmark_search
