"""Filter protocol and the chain that composes filters.

Every filter maps an ordered sequence of events to a new list holding a
subsequence of it.  Filters keep no state between calls, so one instance can
be shared by any number of callers.
"""

from __future__ import annotations

import time
from abc import ABC, abstractmethod
from collections.abc import Iterable, Sequence

from kubefilter.models.events import EventRecord
from kubefilter.observability.logging import get_logger
from kubefilter.observability.metrics import chain_duration_seconds, events_dropped_total, events_in_total

_logger = get_logger("filters.chain")


class EventFilter(ABC):
    """Base class for all filter stages."""

    stage: str = ""

    @abstractmethod
    def filter_events(self, events: Iterable[EventRecord]) -> list[EventRecord]:
        """Return the events this stage keeps, in input order."""

    def __call__(self, events: Iterable[EventRecord]) -> list[EventRecord]:
        return self.filter_events(events)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class PredicateFilter(EventFilter):
    """Filter that keeps every event for which ``accepts`` is true."""

    @abstractmethod
    def accepts(self, event: EventRecord) -> bool: ...

    def filter_events(self, events: Iterable[EventRecord]) -> list[EventRecord]:
        return [event for event in events if self.accepts(event)]


class FilterChain(EventFilter):
    """Left-to-right composition of filters.

    ``FilterChain([f1, f2]).filter_events(s) == f2(f1(s))``.  An empty chain
    returns a copy of its input.  Chains are filters themselves and nest
    freely; nesting never changes the result.  A nested chain is expanded
    into its own stages, so metrics are recorded per stage at any depth.
    """

    stage = "chain"

    def __init__(self, filters: Sequence[EventFilter] = (), record_metrics: bool = False) -> None:
        self._filters: tuple[EventFilter, ...] = tuple(filters)
        self._record_metrics = record_metrics

    @property
    def filters(self) -> tuple[EventFilter, ...]:
        return self._filters

    def filter_events(self, events: Iterable[EventRecord]) -> list[EventRecord]:
        t_start = time.monotonic()
        result = list(events)
        events_in = len(result)
        result = self._apply(result, self._record_metrics)

        duration = time.monotonic() - t_start
        if self._record_metrics:
            chain_duration_seconds.observe(duration)

        _logger.debug(
            "chain_applied",
            stages=len(self._filters),
            events_in=events_in,
            events_out=len(result),
            duration_ms=round(duration * 1000.0, 3),
        )
        return result

    def _apply(self, events: list[EventRecord], record_metrics: bool) -> list[EventRecord]:
        result = events
        for current in self._filters:
            if isinstance(current, FilterChain):
                result = current._apply(result, record_metrics or current._record_metrics)
                continue
            before = len(result)
            result = current.filter_events(result)
            if record_metrics:
                stage = current.stage or type(current).__name__
                events_in_total.labels(stage=stage).inc(before)
                events_dropped_total.labels(stage=stage).inc(before - len(result))
        return result

    def __add__(self, other: FilterChain) -> FilterChain:
        return FilterChain(self._filters + other._filters, record_metrics=self._record_metrics or other._record_metrics)

    def __len__(self) -> int:
        return len(self._filters)

    def __repr__(self) -> str:
        return f"FilterChain({list(self._filters)!r})"
