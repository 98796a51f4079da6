#!/usr/bin/env python3
"""
===============================================================================
ALGORITHM BENCHMARKS - MAIN ENTRY POINT
===============================================================================
Runs the sorting & search benchmarks for one or more dataset sizes, merges the
results with the configured API and system metrics, and writes the performance
report in Markdown, HTML and/or CSV.

USAGE:
    python main.py                              # Sizes from the config file
    python main.py --sizes 500 5000             # Explicit dataset sizes
    python main.py --format markdown            # Single output format
    python main.py --plot                       # Also save PNG charts
    python main.py --config my_config.yaml      # Alternate configuration

OUTPUTS (under run.output_dir, default output/reports):
    performance-report-<size>.md / .html / .csv
    execution-times-<size>.png      (with --plot)
    size-comparison.png             (with --plot and more than one size)

DEPENDENCIES:
    numpy, pandas, matplotlib, pyyaml
    Install: pip install -e .

===============================================================================
"""

import sys
import argparse
import logging
from dataclasses import replace
from pathlib import Path
from typing import List, Optional

# ---------------------------------------------------------------------------
# Path setup: ensure all project modules are importable
# ---------------------------------------------------------------------------
PROJECT_ROOT = Path(__file__).parent
sys.path.insert(0, str(PROJECT_ROOT))

# ---------------------------------------------------------------------------
# Project imports
# ---------------------------------------------------------------------------
from core.config import BenchmarkConfig, REPORT_FORMATS, load_config
from core.errors import BenchmarkError
from performance.advisor import recommend_search_algorithm, recommend_sorting_algorithm
from performance.analyzer import AnalysisResult, PerformanceAnalyzer, timing_table
from reporting.generator import ReportGenerator
from reporting.writer import write_reports

logger = logging.getLogger('BENCH_MAIN')

LOG_FORMAT = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'


def setup_logging(output_dir: Optional[str] = None, verbose: bool = False) -> None:
    """Log to stdout and, when an output directory is given, to benchmark.log."""
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if output_dir:
        Path(output_dir).mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(str(Path(output_dir) / 'benchmark.log'), mode='w'))
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format=LOG_FORMAT,
        handlers=handlers,
        force=True,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Benchmark sorting/search algorithms and write performance reports."
    )
    parser.add_argument('--config', default=None,
                        help='Path to YAML config (default: config/benchmark_config.yaml)')
    parser.add_argument('--sizes', type=int, nargs='+', default=None,
                        help='Dataset sizes to analyze (overrides run.dataset_sizes)')
    parser.add_argument('--output-dir', default=None,
                        help='Directory for report files (overrides run.output_dir)')
    parser.add_argument('--format', choices=list(REPORT_FORMATS) + ['all'], default=None,
                        help='Report format (default: formats from the config)')
    parser.add_argument('--plot', action='store_true',
                        help='Save PNG charts of the execution times')
    parser.add_argument('--verbose', action='store_true', help='Debug logging')
    return parser


def apply_overrides(config: BenchmarkConfig, args: argparse.Namespace) -> BenchmarkConfig:
    """Fold command-line options over the loaded configuration."""
    run = config.run
    changes = {}
    if args.sizes is not None:
        changes['dataset_sizes'] = list(args.sizes)
    if args.output_dir is not None:
        changes['output_dir'] = args.output_dir
    if args.format is not None:
        changes['formats'] = list(REPORT_FORMATS) if args.format == 'all' else [args.format]
    if args.plot:
        changes['plot'] = True
    if changes:
        run = replace(run, **changes)
    return replace(config, run=run)


def run_benchmarks(config: BenchmarkConfig) -> List[Path]:
    """
    Analyze every configured dataset size and write its reports.

    Returns
    -------
    list of Path
        Every file written, in order.
    """
    analyzer = PerformanceAnalyzer(config.analyzer)
    generator = ReportGenerator(config.report)
    written: List[Path] = []
    analyses: List[AnalysisResult] = []

    logger.info("=" * 60)
    logger.info("ALGORITHM BENCHMARKS: sizes %s", config.run.dataset_sizes)
    logger.info("=" * 60)

    for size in config.run.dataset_sizes:
        logger.info("Rule of thumb (sort): %s", recommend_sorting_algorithm(size))
        logger.info("Rule of thumb (search): %s", recommend_search_algorithm(size, is_sorted=True))

        analysis = analyzer.analyze_all(size)
        analyses.append(analysis)
        report = generator.generate(
            analysis,
            config.rest_metrics,
            config.graphql_metrics,
            config.system_metrics,
        )
        paths = write_reports(
            report, config.run.output_dir, config.run.formats,
            stem=f"performance-report-{size}",
        )
        written.extend(paths.values())

        if config.run.plot:
            from reporting.plots import plot_execution_times
            written.append(Path(plot_execution_times(
                analysis, Path(config.run.output_dir) / f"execution-times-{size}.png"
            )))

    if len(analyses) > 1:
        comparison = timing_table(analyses)
        logger.info("Execution time (ms) by dataset size:\n%s", comparison.to_string())
        if config.run.plot:
            from reporting.plots import plot_size_comparison
            written.append(Path(plot_size_comparison(
                comparison, Path(config.run.output_dir) / "size-comparison.png"
            )))

    return written


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(verbose=args.verbose)

    try:
        config = apply_overrides(load_config(args.config), args)
        setup_logging(config.run.output_dir, verbose=args.verbose)
        written = run_benchmarks(config)
    except BenchmarkError as exc:
        logger.error("Benchmark run failed: %s", exc)
        return 2

    logger.info("Done. %d files written to %s", len(written),
                Path(config.run.output_dir).resolve())
    return 0


if __name__ == '__main__':
    sys.exit(main())
