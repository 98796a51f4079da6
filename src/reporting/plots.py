"""
Charts for the benchmark results, saved next to the text reports.
Non-interactive matplotlib backend; every function writes a PNG and closes
its figure.
"""

from __future__ import annotations

import logging
import os
from typing import Union

import numpy as np
import pandas as pd
import matplotlib

matplotlib.use("Agg")  # Non-interactive backend for server / CI environments
import matplotlib.pyplot as plt

from performance.analyzer import AnalysisResult

logger = logging.getLogger(__name__)

# Colorblind-friendly palette
PALETTE = ['#2E86AB', '#F18F01', '#2E7D32', '#C73E1D', '#7B1FA2', '#00838F']
SORT_COLOR = '#2E86AB'
SEARCH_COLOR = '#F18F01'


def _save(fig, output_path: Union[str, os.PathLike]) -> str:
    directory = os.path.dirname(os.fspath(output_path))
    if directory:
        os.makedirs(directory, exist_ok=True)
    fig.tight_layout()
    fig.savefig(output_path, dpi=150)
    plt.close(fig)
    logger.info("Saved chart to %s", output_path)
    return os.fspath(output_path)


def plot_execution_times(analysis: AnalysisResult,
                         output_path: Union[str, os.PathLike]) -> str:
    """Side-by-side bar charts of sort and search times for one analysis."""
    fig, (ax_sort, ax_search) = plt.subplots(1, 2, figsize=(12, 5))

    for ax, results, color, title, best in (
        (ax_sort, analysis.sorting_results, SORT_COLOR, "Sorting",
         analysis.best_sorting_algorithm),
        (ax_search, analysis.search_results, SEARCH_COLOR, "Search",
         analysis.best_search_algorithm),
    ):
        names = list(results)
        times = [results[n].execution_time_ms for n in names]
        bars = ax.bar(names, times, color=color, edgecolor="black")
        bars[names.index(best)].set_hatch("//")
        ax.set_ylabel("Execution time (ms)")
        ax.set_title(f"{title} ({analysis.dataset_size} items)")

    return _save(fig, output_path)


def plot_size_comparison(frame: pd.DataFrame,
                         output_path: Union[str, os.PathLike]) -> str:
    """
    Log-log line chart of execution time against dataset size.

    ``frame`` is the output of :meth:`PerformanceAnalyzer.compare_sizes`.
    """
    fig, ax = plt.subplots(figsize=(10, 6))
    sizes = np.asarray(frame.columns, dtype=float)
    for i, (name, row) in enumerate(frame.iterrows()):
        # Timings of 0 ms cannot be drawn on a log axis.
        values = np.maximum(row.to_numpy(dtype=float), 1e-6)
        ax.plot(sizes, values, marker="o", label=name, color=PALETTE[i % len(PALETTE)])
    ax.set_xscale("log")
    ax.set_yscale("log")
    ax.set_xlabel("Dataset size (items)")
    ax.set_ylabel("Execution time (ms)")
    ax.set_title("Execution Time vs Dataset Size")
    ax.legend()
    return _save(fig, output_path)
