"""Configuration data structures."""

from __future__ import annotations

from dataclasses import dataclass, field

from kubefilter.models.patterns import KindPatternSet, PatternSet

DEFAULT_STAGE_ORDER: tuple[str, ...] = (
    "warnings",
    "namespace",
    "name",
    "reason",
    "uid",
    "component",
    "kind",
)


@dataclass
class FilterConfig:
    """Pattern sets for each filter stage.

    An empty pattern set leaves its stage out of the chain.
    """

    warnings_only: bool = False
    namespaces: PatternSet = field(default_factory=PatternSet)
    names: PatternSet = field(default_factory=PatternSet)
    reasons: PatternSet = field(default_factory=PatternSet)
    uids: PatternSet = field(default_factory=PatternSet)
    components: PatternSet = field(default_factory=PatternSet)
    kinds: KindPatternSet = field(default_factory=KindPatternSet)
    stage_order: tuple[str, ...] = DEFAULT_STAGE_ORDER


@dataclass
class MetricsConfig:
    """Prometheus metrics configuration."""

    enabled: bool = False


@dataclass
class LogConfig:
    """Logging configuration."""

    level: str = "info"
    json_output: bool = True


@dataclass
class KubeFilterConfig:
    """Top-level kubefilter configuration."""

    filters: FilterConfig = field(default_factory=FilterConfig)
    metrics: MetricsConfig = field(default_factory=MetricsConfig)
    log: LogConfig = field(default_factory=LogConfig)
