"""
===============================================================================
ALGORITHM BENCHMARKS - Report Renderers
===============================================================================
Pure functions turning a :class:`reporting.report.PerformanceReport` into
text.  No I/O and no global state: the same report always renders to the same
bytes.

Downstream tooling matches on literal structure, so the following are fixed:

    Markdown : headers "# Performance Analysis Report", "## Executive Summary",
               "## Algorithm Performance", "## API Performance Comparison",
               "## Recommendations"
    HTML     : "<!DOCTYPE html>" preamble, <title> and <h1> carrying the report
               title, result tables as <table> elements
    CSV      : header row "Report Type,Metric,Value", then rows keyed
               "Metadata", "Algorithm Performance", "Sorting", "Search",
               "REST API", "GraphQL API", "API Comparison", "System",
               "Recommendation"
===============================================================================
"""

from __future__ import annotations

import html
from typing import Any, Dict, List, Mapping, Tuple

import pandas as pd

from core.constants import DATE_FORMAT, REPORT_TITLE
from performance.benchmarks import BenchmarkResult
from reporting.report import PerformanceReport

CSV_COLUMNS = ["Report Type", "Metric", "Value"]

HTML_STYLE = """body { font-family: Arial, sans-serif; margin: 40px; }
h1 { color: #333; }
table { border-collapse: collapse; width: 100%; margin: 20px 0; }
th, td { border: 1px solid #ddd; padding: 12px; text-align: left; }
th { background-color: #4CAF50; color: white; }
.summary { background-color: #f9f9f9; padding: 20px; margin: 20px 0; }
.recommendation { background-color: #e7f3fe; padding: 10px; margin: 10px 0; }"""


# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------

def _ms(result: BenchmarkResult) -> str:
    return f"{result.execution_time_ms:.3f}"


def _kb(result: BenchmarkResult) -> str:
    if result.memory_used_bytes is None:
        return "n/a"
    return str(result.memory_used_bytes // 1024)


def _found(result: BenchmarkResult) -> str:
    return "yes" if result.found else "no"


def _metric(value: Any) -> str:
    if isinstance(value, float):
        return f"{value:.3f}"
    return str(value)


def _timestamp(report: PerformanceReport) -> str:
    return report.generated_at.strftime(DATE_FORMAT)


def _sorting_rows(report: PerformanceReport) -> List[Tuple[str, str, str]]:
    return [
        (name, _ms(r), _kb(r))
        for name, r in report.algorithm_performance.sorting_results.items()
    ]


def _search_rows(report: PerformanceReport) -> List[Tuple[str, str, str, str]]:
    return [
        (name, _ms(r), _found(r), _kb(r))
        for name, r in report.algorithm_performance.search_results.items()
    ]


# ---------------------------------------------------------------------------
# Markdown
# ---------------------------------------------------------------------------

def _md_metrics(metrics: Mapping[str, Any]) -> List[str]:
    if not metrics:
        return ["_No metrics supplied._"]
    return [f"- **{name}:** {_metric(value)}" for name, value in metrics.items()]


def to_markdown(report: PerformanceReport) -> str:
    """Render the report as GitHub-flavoured Markdown."""
    alg = report.algorithm_performance
    api = report.api_performance

    lines = [
        f"# {REPORT_TITLE}",
        "",
        f"**Generated:** {_timestamp(report)}  ",
        f"**Version:** {report.report_version}",
        "",
        "## Executive Summary",
        "",
        report.executive_summary,
        "",
        "## Algorithm Performance",
        "",
        f"**Dataset Size:** {alg.dataset_size} items",
        "",
        "### Sorting Algorithms",
        "",
        "| Algorithm | Time (ms) | Memory (KB) |",
        "|-----------|----------:|------------:|",
    ]
    for name, ms, kb in _sorting_rows(report):
        lines.append(f"| {name} | {ms} | {kb} |")

    lines += [
        "",
        "### Search Algorithms",
        "",
        "| Algorithm | Time (ms) | Found | Memory (KB) |",
        "|-----------|----------:|:-----:|------------:|",
    ]
    for name, ms, found, kb in _search_rows(report):
        lines.append(f"| {name} | {ms} | {found} | {kb} |")

    lines += [
        "",
        f"**Best Sorting:** {alg.best_sorting_algorithm}  ",
        f"**Best Search:** {alg.best_search_algorithm}",
        "",
        "## API Performance Comparison",
        "",
        "### REST API",
        "",
        *_md_metrics(api.rest_metrics),
        "",
        "### GraphQL API",
        "",
        *_md_metrics(api.graphql_metrics),
        "",
        f"**Winner:** {api.winner}  ",
        f"**Performance Gain:** {api.performance_gain:.2f}%",
        "",
        "## System Metrics",
        "",
        *_md_metrics(report.system_metrics),
        "",
        "## Recommendations",
        "",
    ]
    lines += [f"- {rec}" for rec in report.recommendations]
    return "\n".join(lines) + "\n"


# ---------------------------------------------------------------------------
# HTML
# ---------------------------------------------------------------------------

def _html_table(rows: List[Tuple], columns: List[str]) -> str:
    frame = pd.DataFrame(rows, columns=columns)
    return frame.to_html(index=False, escape=True, border=0, classes="results")


def _metric_rows(metrics: Mapping[str, Any]) -> List[Tuple[str, str]]:
    return [(str(name), _metric(value)) for name, value in metrics.items()]


def to_html(report: PerformanceReport) -> str:
    """Render the report as a standalone HTML document."""
    alg = report.algorithm_performance
    api = report.api_performance
    esc = html.escape

    parts = [
        "<!DOCTYPE html>",
        "<html>",
        "<head>",
        '<meta charset="utf-8">',
        f"<title>{REPORT_TITLE}</title>",
        "<style>",
        HTML_STYLE,
        "</style>",
        "</head>",
        "<body>",
        f"<h1>{REPORT_TITLE}</h1>",
        f"<p><strong>Generated:</strong> {esc(_timestamp(report))}</p>",
        f"<p><strong>Version:</strong> {esc(report.report_version)}</p>",
        "<div class='summary'>",
        "<h2>Executive Summary</h2>",
        f"<p>{esc(report.executive_summary)}</p>",
        "</div>",
        "<h2>Algorithm Performance</h2>",
        f"<h3>Sorting Algorithms ({alg.dataset_size} items)</h3>",
        _html_table(_sorting_rows(report), ["Algorithm", "Time (ms)", "Memory (KB)"]),
        f"<h3>Search Algorithms ({alg.dataset_size} items)</h3>",
        _html_table(_search_rows(report), ["Algorithm", "Time (ms)", "Found", "Memory (KB)"]),
        f"<p><strong>Best Sorting:</strong> {esc(alg.best_sorting_algorithm)}</p>",
        f"<p><strong>Best Search:</strong> {esc(alg.best_search_algorithm)}</p>",
        "<h2>API Performance Comparison</h2>",
        "<h3>REST API</h3>",
        _html_table(_metric_rows(api.rest_metrics), ["Metric", "Value"]),
        "<h3>GraphQL API</h3>",
        _html_table(_metric_rows(api.graphql_metrics), ["Metric", "Value"]),
        f"<p><strong>Winner:</strong> {esc(api.winner)}</p>",
        f"<p><strong>Performance Gain:</strong> {api.performance_gain:.2f}%</p>",
        "<h2>System Metrics</h2>",
        _html_table(_metric_rows(report.system_metrics), ["Metric", "Value"]),
        "<h2>Recommendations</h2>",
    ]
    parts += [f"<div class='recommendation'>{esc(rec)}</div>" for rec in report.recommendations]
    parts += ["</body>", "</html>"]
    return "\n".join(parts) + "\n"


# ---------------------------------------------------------------------------
# CSV
# ---------------------------------------------------------------------------

def _csv_value(value: Any) -> str:
    return str(value)


def to_csv(report: PerformanceReport) -> str:
    """Render the report as ``Report Type,Metric,Value`` rows."""
    alg = report.algorithm_performance
    api = report.api_performance

    rows: List[Tuple[str, str, str]] = [
        ("Metadata", "Generated At", _timestamp(report)),
        ("Metadata", "Version", report.report_version),
        ("Algorithm Performance", "Dataset Size", str(alg.dataset_size)),
        ("Algorithm Performance", "Best Sorting Algorithm", alg.best_sorting_algorithm),
        ("Algorithm Performance", "Best Search Algorithm", alg.best_search_algorithm),
    ]
    for name, r in alg.sorting_results.items():
        rows.append(("Sorting", f"{name} Time (ms)", f"{r.execution_time_ms:.6f}"))
        rows.append(("Sorting", f"{name} Memory (KB)", _kb(r)))
    for name, r in alg.search_results.items():
        rows.append(("Search", f"{name} Time (ms)", f"{r.execution_time_ms:.6f}"))
        rows.append(("Search", f"{name} Found", _found(r)))
    for metric, value in api.rest_metrics.items():
        rows.append(("REST API", str(metric), _csv_value(value)))
    for metric, value in api.graphql_metrics.items():
        rows.append(("GraphQL API", str(metric), _csv_value(value)))
    rows.append(("API Comparison", "Winner", api.winner))
    rows.append(("API Comparison", "Performance Gain (%)", f"{api.performance_gain:.2f}"))
    for metric, value in report.system_metrics.items():
        rows.append(("System", str(metric), _csv_value(value)))
    for rec in report.recommendations:
        rows.append(("Recommendation", "Advisory", rec))

    frame = pd.DataFrame(rows, columns=CSV_COLUMNS)
    return frame.to_csv(index=False, lineterminator="\n")


RENDERERS: Dict[str, Any] = {
    "markdown": to_markdown,
    "html": to_html,
    "csv": to_csv,
}

FILE_EXTENSIONS = {
    "markdown": "md",
    "html": "html",
    "csv": "csv",
}
