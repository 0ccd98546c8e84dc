"""Kind filter: two-level ``{group, kind}`` matching with wildcards.

Rules are evaluated top to bottom and the first rule whose predicate holds
decides the event.  Every exclusion rule sits above every inclusion rule, so
an exclusion always overrides an inclusion, and an event is kept at most once
however many inclusion rules it satisfies.

=========================  ===========================  =========
rule                       pattern looked up            decision
=========================  ===========================  =========
exact_exclude              ``{group, -kind}``           exclude
any_group_exclude          ``{*, -kind}``               exclude
group_exclude              ``{group, -*}``              exclude
exact_include              ``{group, kind}``            include
all_include                ``{*, *}``                   include
any_group_include          ``{*, kind}``                include
group_include              ``{group, *}``               include
=========================  ===========================  =========

Events no rule matches are excluded.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import NamedTuple

from kubefilter.filters.base import PredicateFilter
from kubefilter.models.events import EventRecord, GroupKind
from kubefilter.models.patterns import EXCLUDE_PREFIX, WILDCARD, KindPatternSet
from kubefilter.observability.logging import get_logger

_logger = get_logger("filters.kind")

NO_MATCH = "no_match"


class KindRule(NamedTuple):
    name: str
    lookup: Callable[[GroupKind], GroupKind]
    include: bool


KIND_RULES: tuple[KindRule, ...] = (
    KindRule("exact_exclude", lambda gk: GroupKind(gk.group, EXCLUDE_PREFIX + gk.kind), False),
    KindRule("any_group_exclude", lambda gk: GroupKind(WILDCARD, EXCLUDE_PREFIX + gk.kind), False),
    KindRule("group_exclude", lambda gk: GroupKind(gk.group, EXCLUDE_PREFIX + WILDCARD), False),
    KindRule("exact_include", lambda gk: gk, True),
    KindRule("all_include", lambda gk: GroupKind(WILDCARD, WILDCARD), True),
    KindRule("any_group_include", lambda gk: GroupKind(WILDCARD, gk.kind), True),
    KindRule("group_include", lambda gk: GroupKind(gk.group, WILDCARD), True),
)


class KindFilter(PredicateFilter):
    """Keeps events whose involved object's GroupKind is selected by ``patterns``."""

    stage = "kind"

    def __init__(self, patterns: KindPatternSet, rules: tuple[KindRule, ...] = KIND_RULES) -> None:
        self.patterns = patterns
        self._rules = rules

    def decide(self, gk: GroupKind) -> tuple[str, bool]:
        """Return the name of the deciding rule and whether the event is kept."""
        for rule in self._rules:
            if rule.lookup(gk) in self.patterns:
                return rule.name, rule.include
        return NO_MATCH, False

    def accepts(self, event: EventRecord) -> bool:
        _, include = self.decide(event.group_kind)
        return include

    def filter_events(self, events: Iterable[EventRecord]) -> list[EventRecord]:
        events = list(events)
        kept = super().filter_events(events)
        _logger.debug("filter_applied", stage=self.stage, events_in=len(events), events_out=len(kept))
        return kept

    def __repr__(self) -> str:
        return f"KindFilter({sorted(str(gk) for gk in self.patterns.entries)!r})"
