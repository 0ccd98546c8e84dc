"""Single-attribute filters and the warning-only filter."""

from __future__ import annotations

from collections.abc import Callable, Iterable

from kubefilter.filters.base import PredicateFilter
from kubefilter.models.events import EventRecord, EventType
from kubefilter.models.patterns import PatternSet
from kubefilter.observability.logging import get_logger

_logger = get_logger("filters.attributes")


class WarningFilter(PredicateFilter):
    """Keeps only events of type Warning."""

    stage = "warnings"

    def accepts(self, event: EventRecord) -> bool:
        return event.severity == EventType.WARNING


class AttributeFilter(PredicateFilter):
    """Matches one string attribute of an event against a PatternSet.

    An exclusion always wins: a value listed in both ``includes`` and
    ``excludes`` is dropped.  Values in neither set are dropped as well.
    """

    def __init__(self, stage: str, extract: Callable[[EventRecord], str], patterns: PatternSet) -> None:
        self.stage = stage
        self._extract = extract
        self.patterns = patterns

    def accepts(self, event: EventRecord) -> bool:
        value = self._extract(event)
        if value in self.patterns.excludes:
            return False
        return value in self.patterns.includes

    def filter_events(self, events: Iterable[EventRecord]) -> list[EventRecord]:
        events = list(events)
        kept = super().filter_events(events)
        _logger.debug("filter_applied", stage=self.stage, events_in=len(events), events_out=len(kept))
        return kept

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(includes={sorted(self.patterns.includes)!r}, "
            f"excludes={sorted(self.patterns.excludes)!r})"
        )


class NamespaceFilter(AttributeFilter):
    def __init__(self, patterns: PatternSet) -> None:
        super().__init__("namespace", lambda e: e.namespace, patterns)


class NameFilter(AttributeFilter):
    def __init__(self, patterns: PatternSet) -> None:
        super().__init__("name", lambda e: e.name, patterns)


class ReasonFilter(AttributeFilter):
    def __init__(self, patterns: PatternSet) -> None:
        super().__init__("reason", lambda e: e.reason, patterns)


class UIDFilter(AttributeFilter):
    def __init__(self, patterns: PatternSet) -> None:
        super().__init__("uid", lambda e: e.uid, patterns)


class ComponentFilter(AttributeFilter):
    """Matches the component that reported the event."""

    def __init__(self, patterns: PatternSet) -> None:
        super().__init__("component", lambda e: e.reporting_component, patterns)
