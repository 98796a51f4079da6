"""
===============================================================================
ALGORITHM BENCHMARKS - Configuration Loading
===============================================================================
Reads the YAML configuration into typed settings objects.  Without an explicit
path, ``config/benchmark_config.yaml`` is looked up in the working directory,
then in the project root.  Every value has a default, sample API and system
metrics included, so a missing file or a missing section simply yields the
defaults; a value of the wrong type or range raises
:class:`core.errors.ConfigurationError`.

Layout of the YAML file::

    analyzer:
      seed: 42
      small_dataset_threshold: 1000
      large_dataset_threshold: 10000
      tie_tolerance: 0.0
      track_memory: false
    report:
      report_version: "1.0.0"
      api_gain_threshold: 20.0
      caching_latency_threshold_ms: 100.0
      caching_dataset_threshold: 5000
      system_metric_limits: {"CPU Usage": 80.0}
    run:
      dataset_sizes: [100, 1000, 10000]
      output_dir: output/reports
      formats: [markdown, html, csv]
      plot: false
    metrics:
      rest: {"Average Response Time": 45.5}
      graphql: {"Average Response Time": 38.2}
      system: {"CPU Usage": 45.2}

===============================================================================
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml

from core.constants import (
    DATASET_SEED, SMALL_DATASET_THRESHOLD, LARGE_DATASET_THRESHOLD, TIE_TOLERANCE,
    REPORT_VERSION, API_GAIN_THRESHOLD, CACHING_LATENCY_THRESHOLD_MS,
    CACHING_DATASET_THRESHOLD, SYSTEM_METRIC_LIMITS,
    DEFAULT_REST_METRICS, DEFAULT_GRAPHQL_METRICS, DEFAULT_SYSTEM_METRICS,
)
from core.errors import ConfigurationError

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
CONFIG_RELATIVE_PATH = Path("config") / "benchmark_config.yaml"
DEFAULT_CONFIG_PATH = PROJECT_ROOT / CONFIG_RELATIVE_PATH

REPORT_FORMATS = ("markdown", "html", "csv")


@dataclass(frozen=True)
class AnalyzerSettings:
    """Knobs of :class:`performance.analyzer.PerformanceAnalyzer`."""

    seed: int = DATASET_SEED
    small_dataset_threshold: int = SMALL_DATASET_THRESHOLD
    large_dataset_threshold: int = LARGE_DATASET_THRESHOLD
    tie_tolerance: float = TIE_TOLERANCE
    track_memory: bool = False

    def __post_init__(self) -> None:
        if self.small_dataset_threshold > self.large_dataset_threshold:
            raise ConfigurationError(
                "small_dataset_threshold must not exceed large_dataset_threshold "
                f"({self.small_dataset_threshold} > {self.large_dataset_threshold})"
            )
        if self.tie_tolerance < 0.0:
            raise ConfigurationError(
                f"tie_tolerance must be non-negative, got {self.tie_tolerance}"
            )


@dataclass(frozen=True)
class ReportSettings:
    """Thresholds driving the report-level advisories."""

    report_version: str = REPORT_VERSION
    api_gain_threshold: float = API_GAIN_THRESHOLD
    caching_latency_threshold_ms: float = CACHING_LATENCY_THRESHOLD_MS
    caching_dataset_threshold: int = CACHING_DATASET_THRESHOLD
    system_metric_limits: Dict[str, float] = field(
        default_factory=lambda: dict(SYSTEM_METRIC_LIMITS)
    )


@dataclass(frozen=True)
class RunSettings:
    """What the command-line entry point runs and where it writes."""

    dataset_sizes: List[int] = field(default_factory=lambda: [100, 1000, 10000])
    output_dir: str = "output/reports"
    formats: List[str] = field(default_factory=lambda: list(REPORT_FORMATS))
    plot: bool = False

    def __post_init__(self) -> None:
        if not self.dataset_sizes:
            raise ConfigurationError("run.dataset_sizes must list at least one size")
        for size in self.dataset_sizes:
            if isinstance(size, bool) or not isinstance(size, int) or size <= 0:
                raise ConfigurationError(
                    f"run.dataset_sizes entries must be positive integers, got {size!r}"
                )
        repeated = sorted({s for s in self.dataset_sizes if self.dataset_sizes.count(s) > 1})
        if repeated:
            raise ConfigurationError(f"run.dataset_sizes lists sizes more than once: {repeated}")
        unknown = [f for f in self.formats if f not in REPORT_FORMATS]
        if unknown:
            raise ConfigurationError(
                f"Unknown report format(s): {unknown}. Valid: {list(REPORT_FORMATS)}"
            )


@dataclass(frozen=True)
class BenchmarkConfig:
    """Complete configuration: settings plus externally supplied metric maps."""

    analyzer: AnalyzerSettings = field(default_factory=AnalyzerSettings)
    report: ReportSettings = field(default_factory=ReportSettings)
    run: RunSettings = field(default_factory=RunSettings)
    rest_metrics: Dict[str, float] = field(default_factory=lambda: dict(DEFAULT_REST_METRICS))
    graphql_metrics: Dict[str, float] = field(
        default_factory=lambda: dict(DEFAULT_GRAPHQL_METRICS)
    )
    system_metrics: Dict[str, Any] = field(default_factory=lambda: dict(DEFAULT_SYSTEM_METRICS))


# ---------------------------------------------------------------------------
# Value coercion helpers
# ---------------------------------------------------------------------------

def _section(raw: Dict[str, Any], name: str) -> Dict[str, Any]:
    value = raw.get(name)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ConfigurationError(f"Section '{name}' must be a mapping, got {type(value).__name__}")
    return value


def _as_int(section: str, key: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(f"{section}.{key} must be an integer, got {value!r}")
    return value


def _as_float(section: str, key: str, value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigurationError(f"{section}.{key} must be a number, got {value!r}")
    return float(value)


def _as_bool(section: str, key: str, value: Any) -> bool:
    if not isinstance(value, bool):
        raise ConfigurationError(f"{section}.{key} must be true or false, got {value!r}")
    return value


def _metric_map(name: str, value: Any) -> Dict[str, float]:
    if not isinstance(value, dict):
        raise ConfigurationError(f"metrics.{name} must be a mapping, got {value!r}")
    return {str(k): _as_float(f"metrics.{name}", str(k), v) for k, v in value.items()}


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def parse_config(raw: Optional[Dict[str, Any]]) -> BenchmarkConfig:
    """
    Build a :class:`BenchmarkConfig` from an already-parsed YAML document.

    Unknown keys are ignored so a configuration file can be shared with other
    tools.
    """
    raw = raw or {}
    if not isinstance(raw, dict):
        raise ConfigurationError("Configuration root must be a mapping")

    a = _section(raw, "analyzer")
    analyzer = AnalyzerSettings(
        seed=_as_int("analyzer", "seed", a.get("seed", DATASET_SEED)),
        small_dataset_threshold=_as_int(
            "analyzer", "small_dataset_threshold",
            a.get("small_dataset_threshold", SMALL_DATASET_THRESHOLD)),
        large_dataset_threshold=_as_int(
            "analyzer", "large_dataset_threshold",
            a.get("large_dataset_threshold", LARGE_DATASET_THRESHOLD)),
        tie_tolerance=_as_float("analyzer", "tie_tolerance", a.get("tie_tolerance", TIE_TOLERANCE)),
        track_memory=_as_bool("analyzer", "track_memory", a.get("track_memory", False)),
    )

    r = _section(raw, "report")
    limits = r.get("system_metric_limits", SYSTEM_METRIC_LIMITS)
    if not isinstance(limits, dict):
        raise ConfigurationError("report.system_metric_limits must be a mapping")
    report = ReportSettings(
        report_version=str(r.get("report_version", REPORT_VERSION)),
        api_gain_threshold=_as_float(
            "report", "api_gain_threshold", r.get("api_gain_threshold", API_GAIN_THRESHOLD)),
        caching_latency_threshold_ms=_as_float(
            "report", "caching_latency_threshold_ms",
            r.get("caching_latency_threshold_ms", CACHING_LATENCY_THRESHOLD_MS)),
        caching_dataset_threshold=_as_int(
            "report", "caching_dataset_threshold",
            r.get("caching_dataset_threshold", CACHING_DATASET_THRESHOLD)),
        system_metric_limits={
            str(k): _as_float("report.system_metric_limits", str(k), v)
            for k, v in limits.items()
        },
    )

    defaults = RunSettings()
    u = _section(raw, "run")
    formats = u.get("formats", defaults.formats)
    if isinstance(formats, str):
        formats = list(REPORT_FORMATS) if formats == "all" else [formats]
    sizes = u.get("dataset_sizes", defaults.dataset_sizes)
    if not isinstance(sizes, list):
        raise ConfigurationError("run.dataset_sizes must be a list")
    run = RunSettings(
        dataset_sizes=list(sizes),
        output_dir=str(u.get("output_dir", defaults.output_dir)),
        formats=list(formats),
        plot=_as_bool("run", "plot", u.get("plot", defaults.plot)),
    )

    m = _section(raw, "metrics")
    rest = m.get("rest")
    graphql = m.get("graphql")
    system = m.get("system")
    if system is not None and not isinstance(system, dict):
        raise ConfigurationError(f"metrics.system must be a mapping, got {system!r}")
    return BenchmarkConfig(
        analyzer=analyzer,
        report=report,
        run=run,
        rest_metrics=_metric_map("rest", DEFAULT_REST_METRICS if rest is None else rest),
        graphql_metrics=_metric_map(
            "graphql", DEFAULT_GRAPHQL_METRICS if graphql is None else graphql),
        system_metrics=dict(DEFAULT_SYSTEM_METRICS if system is None else system),
    )


def config_search_paths() -> List[Path]:
    """Where :func:`load_config` looks when no path is given, in order."""
    return [Path.cwd() / CONFIG_RELATIVE_PATH, DEFAULT_CONFIG_PATH]


def load_config(config_path: Optional[Union[str, Path]] = None) -> BenchmarkConfig:
    """
    Load the benchmark configuration from a YAML file.

    Args:
        config_path: Path to YAML config. Defaults to the first existing file
            of :func:`config_search_paths`.

    Returns:
        The parsed configuration; the built-in defaults, sample metrics
        included, when no path is given and no default file exists.
    """
    if config_path is not None:
        path = Path(config_path)
        if not path.exists():
            raise ConfigurationError(f"Configuration file not found: {path}")
    else:
        candidates = config_search_paths()
        path = next((p for p in candidates if p.exists()), None)
        if path is None:
            logger.info("No configuration found in %s, using defaults",
                        [str(p) for p in candidates])
            return BenchmarkConfig()

    logger.info("Loading configuration from: %s", path)
    with open(path, "r") as f:
        try:
            raw = yaml.safe_load(f)
        except yaml.YAMLError as exc:
            raise ConfigurationError(f"Invalid YAML in {path}: {exc}") from exc
    return parse_config(raw)
