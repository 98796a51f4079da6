"""
===============================================================================
ALGORITHM BENCHMARKS - Report Generator
===============================================================================
Merges an :class:`performance.analyzer.AnalysisResult` with externally measured
API latencies and system metrics into a :class:`reporting.report.PerformanceReport`.

Inputs are validated here, not at render time: both latency maps must carry an
"Average Response Time" entry holding a finite, non-negative number.  Once a
report exists, every renderer accepts it.

API comparison
--------------
    winner           = the API with the lower average response time
    performance_gain = (max - min) / max * 100

Equal averages report "GraphQL" with a gain of 0.0.
===============================================================================
"""

from __future__ import annotations

import logging
import math
from datetime import datetime
from numbers import Real
from typing import Any, Callable, List, Mapping, Optional

from core.config import ReportSettings
from core.constants import AVERAGE_RESPONSE_TIME, GRAPHQL_API, REST_API
from core.errors import InvalidArgumentError
from performance.analyzer import AnalysisResult
from reporting.report import ApiPerformanceSection, PerformanceReport

logger = logging.getLogger(__name__)


def _average_response_time(name: str, metrics: Optional[Mapping[str, float]]) -> float:
    if metrics is None:
        raise InvalidArgumentError(f"{name} metrics must be a mapping, got None")
    if AVERAGE_RESPONSE_TIME not in metrics:
        raise InvalidArgumentError(
            f"{name} metrics lack a '{AVERAGE_RESPONSE_TIME}' entry"
        )
    value = metrics[AVERAGE_RESPONSE_TIME]
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidArgumentError(
            f"{name} '{AVERAGE_RESPONSE_TIME}' must be a number, got {value!r}"
        )
    value = float(value)
    if not math.isfinite(value) or value < 0.0:
        raise InvalidArgumentError(
            f"{name} '{AVERAGE_RESPONSE_TIME}' must be finite and non-negative, got {value}"
        )
    return value


def compare_apis(rest_metrics: Mapping[str, float],
                 graphql_metrics: Mapping[str, float]) -> ApiPerformanceSection:
    """Pick the faster API by average response time and compute the gain."""
    rest_avg = _average_response_time(REST_API, rest_metrics)
    graphql_avg = _average_response_time(GRAPHQL_API, graphql_metrics)

    slower = max(rest_avg, graphql_avg)
    faster = min(rest_avg, graphql_avg)
    gain = (slower - faster) * 100.0 / slower if slower > 0.0 else 0.0
    winner = REST_API if rest_avg < graphql_avg else GRAPHQL_API

    return ApiPerformanceSection(
        winner=winner,
        performance_gain=gain,
        rest_metrics=rest_metrics,
        graphql_metrics=graphql_metrics,
    )


class ReportGenerator:
    """
    Builds :class:`PerformanceReport` instances.

    Parameters
    ----------
    settings : ReportSettings, optional
        Version string and advisory thresholds.
    clock : callable, optional
        Zero-argument callable returning the ``generated_at`` timestamp.
        Defaults to :meth:`datetime.now`; tests inject a fixed clock.
    """

    def __init__(self, settings: Optional[ReportSettings] = None,
                 clock: Optional[Callable[[], datetime]] = None) -> None:
        self.settings = settings or ReportSettings()
        self.clock = clock or datetime.now

    def generate(self, analysis: AnalysisResult,
                 rest_metrics: Mapping[str, float],
                 graphql_metrics: Mapping[str, float],
                 system_metrics: Optional[Mapping[str, Any]] = None) -> PerformanceReport:
        if not isinstance(analysis, AnalysisResult):
            raise InvalidArgumentError(
                f"analysis must be an AnalysisResult, got {type(analysis).__name__}"
            )
        system_metrics = dict(system_metrics or {})

        api = compare_apis(rest_metrics, graphql_metrics)
        recommendations = self._recommendations(analysis, api, system_metrics)
        summary = self._executive_summary(analysis, api, len(recommendations))

        report = PerformanceReport(
            generated_at=self.clock(),
            executive_summary=summary,
            algorithm_performance=analysis,
            api_performance=api,
            system_metrics=system_metrics,
            recommendations=tuple(recommendations),
            report_version=self.settings.report_version,
        )
        logger.info(
            "Generated report for %d items: %s wins API comparison by %.2f%%, %d recommendations",
            analysis.dataset_size, api.winner, api.performance_gain, len(recommendations),
        )
        return report

    # ---- Advisories ---------------------------------------------------------

    def _recommendations(self, analysis: AnalysisResult, api: ApiPerformanceSection,
                         system_metrics: Mapping[str, Any]) -> List[str]:
        s = self.settings
        recs = list(analysis.recommendations)

        if api.performance_gain > s.api_gain_threshold:
            if api.winner == GRAPHQL_API:
                recs.append(
                    "Consider migrating complex queries to GraphQL for better performance "
                    f"({api.performance_gain:.2f}% faster on average)"
                )
            else:
                recs.append(
                    "Keep high-traffic read endpoints on REST "
                    f"({api.performance_gain:.2f}% faster on average than GraphQL)"
                )

        fastest_avg = min(api.rest_average, api.graphql_average)
        if fastest_avg > s.caching_latency_threshold_ms:
            recs.append(
                f"Introduce response caching: the faster API still averages "
                f"{fastest_avg:.2f} ms per request"
            )

        if analysis.dataset_size > s.caching_dataset_threshold:
            recs.append("Implement caching for large dataset operations")
            recs.append(
                f"Consider database-level sorting for datasets over "
                f"{s.caching_dataset_threshold} items"
            )

        for name, limit in s.system_metric_limits.items():
            value = system_metrics.get(name)
            if isinstance(value, bool) or not isinstance(value, Real):
                continue
            if value > limit:
                logger.warning("%s at %s exceeds limit %s", name, value, limit)
                recs.append(
                    f"{name} is at {value}, above the {limit} limit; "
                    f"investigate resource saturation"
                )
        return recs

    @staticmethod
    def _executive_summary(analysis: AnalysisResult, api: ApiPerformanceSection,
                           recommendation_count: int) -> str:
        return (
            f"Performance analysis completed for {analysis.dataset_size} data items. "
            f"{analysis.best_sorting_algorithm} demonstrated optimal sorting performance, "
            f"while {analysis.best_search_algorithm} excelled in search operations. "
            f"API comparison shows {api.winner} with {api.performance_gain:.2f}% "
            f"performance advantage. "
            f"Total {recommendation_count} optimization recommendations generated."
        )
