"""Prometheus metrics for filter chains."""

from __future__ import annotations

from prometheus_client import Counter, Histogram

events_in_total = Counter(
    "kubefilter_events_in_total",
    "Events received by a filter stage",
    ["stage"],
)

events_dropped_total = Counter(
    "kubefilter_events_dropped_total",
    "Events removed by a filter stage",
    ["stage"],
)

chain_duration_seconds = Histogram(
    "kubefilter_chain_duration_seconds",
    "Wall time spent applying a whole filter chain",
    buckets=(0.0001, 0.0005, 0.001, 0.005, 0.01, 0.05, 0.1, 0.5),
)
