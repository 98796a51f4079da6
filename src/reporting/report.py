"""
Report model: immutable aggregates produced by :mod:`reporting.generator`.

Mapping-valued fields are copied on construction and exposed read-only, so a
report never changes after it is built; generating again yields a new object.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType
from typing import Any, Mapping, Tuple

from core.constants import AVERAGE_RESPONSE_TIME, REPORT_VERSION
from performance.analyzer import AnalysisResult


def _freeze(mapping: Mapping) -> Mapping:
    return MappingProxyType(dict(mapping or {}))


@dataclass(frozen=True)
class ApiPerformanceSection:
    """Outcome of comparing the REST and GraphQL latency maps."""

    winner: str
    performance_gain: float
    rest_metrics: Mapping[str, float] = field(default_factory=dict)
    graphql_metrics: Mapping[str, float] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "rest_metrics", _freeze(self.rest_metrics))
        object.__setattr__(self, "graphql_metrics", _freeze(self.graphql_metrics))

    @property
    def rest_average(self) -> float:
        return self.rest_metrics[AVERAGE_RESPONSE_TIME]

    @property
    def graphql_average(self) -> float:
        return self.graphql_metrics[AVERAGE_RESPONSE_TIME]


@dataclass(frozen=True)
class PerformanceReport:
    """Algorithm, API and system findings merged into one artifact."""

    generated_at: datetime
    executive_summary: str
    algorithm_performance: AnalysisResult
    api_performance: ApiPerformanceSection
    system_metrics: Mapping[str, Any] = field(default_factory=dict)
    recommendations: Tuple[str, ...] = ()
    report_version: str = REPORT_VERSION

    def __post_init__(self) -> None:
        object.__setattr__(self, "system_metrics", _freeze(self.system_metrics))
        object.__setattr__(self, "recommendations", tuple(self.recommendations))
