"""Builds a FilterChain from a FilterConfig."""

from __future__ import annotations

from collections.abc import Callable

from kubefilter.filters.attributes import (
    ComponentFilter,
    NameFilter,
    NamespaceFilter,
    ReasonFilter,
    UIDFilter,
    WarningFilter,
)
from kubefilter.filters.base import EventFilter, FilterChain
from kubefilter.filters.kind import KindFilter
from kubefilter.models.config import FilterConfig
from kubefilter.observability.logging import get_logger

_logger = get_logger("filters.builder")


def _warnings(config: FilterConfig) -> EventFilter | None:
    return WarningFilter() if config.warnings_only else None


def _namespace(config: FilterConfig) -> EventFilter | None:
    return None if config.namespaces.is_empty() else NamespaceFilter(config.namespaces)


def _name(config: FilterConfig) -> EventFilter | None:
    return None if config.names.is_empty() else NameFilter(config.names)


def _reason(config: FilterConfig) -> EventFilter | None:
    return None if config.reasons.is_empty() else ReasonFilter(config.reasons)


def _uid(config: FilterConfig) -> EventFilter | None:
    return None if config.uids.is_empty() else UIDFilter(config.uids)


def _component(config: FilterConfig) -> EventFilter | None:
    return None if config.components.is_empty() else ComponentFilter(config.components)


def _kind(config: FilterConfig) -> EventFilter | None:
    return None if config.kinds.is_empty() else KindFilter(config.kinds)


STAGE_FACTORIES: dict[str, Callable[[FilterConfig], EventFilter | None]] = {
    "warnings": _warnings,
    "namespace": _namespace,
    "name": _name,
    "reason": _reason,
    "uid": _uid,
    "component": _component,
    "kind": _kind,
}


def build_chain(config: FilterConfig, record_metrics: bool = False) -> FilterChain:
    """Instantiate one filter per active stage, in ``config.stage_order``.

    Raises:
        ValueError: if the stage order names an unknown stage.
    """
    unknown = [name for name in config.stage_order if name not in STAGE_FACTORIES]
    if unknown:
        raise ValueError(f"Unknown filter stage(s): {unknown}. Must be among {sorted(STAGE_FACTORIES)}")

    stages: list[EventFilter] = []
    for name in config.stage_order:
        stage = STAGE_FACTORIES[name](config)
        if stage is not None:
            stages.append(stage)

    _logger.debug("chain_built", stages=[s.stage for s in stages])
    return FilterChain(stages, record_metrics=record_metrics)
