"""Core event data structures and enumerations."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum
from typing import Any


class EventType(StrEnum):
    """Kubernetes event type (``v1.Event.type``)."""

    NORMAL = "Normal"
    WARNING = "Warning"


@dataclass(frozen=True)
class GroupKind:
    """API group plus kind of an involved object.

    The empty group is the core API group.  In pattern sets either field may
    be the wildcard ``*`` and ``kind`` may carry a leading ``-``.
    """

    group: str
    kind: str

    def __str__(self) -> str:
        if not self.group:
            return self.kind
        return f"{self.kind}.{self.group}"


def parse_group_kind(api_version: str, kind: str) -> GroupKind:
    """Derive the GroupKind from an apiVersion string and a kind.

    ``apps/v1`` yields group ``apps``; ``v1`` yields the empty group.  Input
    with more than one ``/`` is malformed and degrades to the empty group.
    """
    if "/" not in api_version:
        return GroupKind(group="", kind=kind)
    group, _, version = api_version.partition("/")
    if "/" in version:
        return GroupKind(group="", kind=kind)
    return GroupKind(group=group, kind=kind)


def _str(value: object) -> str:
    return value if isinstance(value, str) else ""


def _mapping(value: object) -> Mapping[str, Any]:
    return value if isinstance(value, Mapping) else {}


@dataclass(frozen=True)
class EventRecord:
    """Canonical event representation.

    Only the involved-object fields, severity, reason and reporting component
    take part in filtering.  Immutable: filters never mutate a record.
    """

    severity: EventType
    namespace: str
    name: str
    uid: str = ""
    reason: str = ""
    reporting_component: str = ""
    kind: str = ""
    api_version: str = ""
    message: str = ""
    count: int = 1
    raw_object: dict[str, Any] | None = None

    @property
    def group_kind(self) -> GroupKind:
        return parse_group_kind(self.api_version, self.kind)

    @classmethod
    def from_k8s(cls, obj: Mapping[str, Any]) -> EventRecord:
        """Build a record from a raw ``v1.Event`` mapping.

        Missing or non-string fields become empty strings and an unknown
        ``type`` becomes ``Normal``.  The reporting component prefers
        ``reportingComponent`` and falls back to ``source.component``.
        """
        involved = _mapping(obj.get("involvedObject"))
        source = _mapping(obj.get("source"))

        try:
            severity = EventType(obj.get("type", EventType.NORMAL))
        except ValueError:
            severity = EventType.NORMAL

        component = _str(obj.get("reportingComponent")) or _str(source.get("component"))
        count = obj.get("count")

        return cls(
            severity=severity,
            namespace=_str(involved.get("namespace")),
            name=_str(involved.get("name")),
            uid=_str(involved.get("uid")),
            reason=_str(obj.get("reason")),
            reporting_component=component,
            kind=_str(involved.get("kind")),
            api_version=_str(involved.get("apiVersion")),
            message=_str(obj.get("message")),
            count=count if isinstance(count, int) and count > 0 else 1,
            raw_object=dict(obj),
        )
