"""Core data structures for kubefilter."""

from kubefilter.models.config import FilterConfig, KubeFilterConfig, LogConfig, MetricsConfig
from kubefilter.models.events import EventRecord, EventType, GroupKind, parse_group_kind
from kubefilter.models.patterns import KindPatternSet, PatternError, PatternSet

__all__ = [
    "EventRecord",
    "EventType",
    "FilterConfig",
    "GroupKind",
    "KindPatternSet",
    "KubeFilterConfig",
    "LogConfig",
    "MetricsConfig",
    "PatternError",
    "PatternSet",
    "parse_group_kind",
]
