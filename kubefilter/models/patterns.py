"""Pattern sets consumed by the attribute and kind filters.

Configuration tokens use a leading ``-`` to mark an exclusion.  Attribute
pattern sets store inclusions and exclusions separately, so the prefix never
has to be re-attached when matching.  Kind pattern sets keep the prefix on the
kind because ``-*`` carries its own meaning ("every kind in this group").
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from kubefilter.models.events import GroupKind

WILDCARD = "*"
EXCLUDE_PREFIX = "-"


class PatternError(ValueError):
    """Raised when a pattern token cannot be parsed."""


def _clean(token: str) -> str:
    token = token.strip()
    if not token or token == EXCLUDE_PREFIX:
        raise PatternError(f"Invalid pattern token: {token!r}")
    return token


@dataclass(frozen=True)
class PatternSet:
    """Inclusion and exclusion values for a single string attribute."""

    includes: frozenset[str] = field(default_factory=frozenset)
    excludes: frozenset[str] = field(default_factory=frozenset)

    @classmethod
    def parse(cls, tokens: Iterable[str]) -> PatternSet:
        """Build a PatternSet from tokens such as ``["prod", "-kube-system"]``."""
        includes: set[str] = set()
        excludes: set[str] = set()
        for raw in tokens:
            token = _clean(raw)
            if token.startswith(EXCLUDE_PREFIX):
                excludes.add(token[len(EXCLUDE_PREFIX) :])
            else:
                includes.add(token)
        return cls(includes=frozenset(includes), excludes=frozenset(excludes))

    def is_empty(self) -> bool:
        return not self.includes and not self.excludes


def _parse_kind_token(raw: str) -> GroupKind:
    token = _clean(raw)
    kind, _, group = token.partition(".")
    if not kind or kind == EXCLUDE_PREFIX:
        raise PatternError(f"Invalid kind pattern: {raw!r}")
    return GroupKind(group=group, kind=kind)


@dataclass(frozen=True)
class KindPatternSet:
    """Set of GroupKind patterns for the kind filter.

    ``group`` may be ``*``; ``kind`` may be ``*``, ``-Kind`` or ``-*``.
    """

    entries: frozenset[GroupKind] = field(default_factory=frozenset)

    @classmethod
    def parse(cls, tokens: Iterable[str]) -> KindPatternSet:
        """Build a KindPatternSet from ``Kind[.group]`` tokens.

        ``Deployment.apps`` -> ``{apps, Deployment}``; ``Pod`` -> core group;
        ``Pod.*`` -> any group; ``-*.apps`` -> exclude everything in apps.
        """
        return cls(entries=frozenset(_parse_kind_token(t) for t in tokens))

    def __contains__(self, item: object) -> bool:
        return item in self.entries

    def __len__(self) -> int:
        return len(self.entries)

    def is_empty(self) -> bool:
        return not self.entries
