"""Shared fixtures for kubefilter integration tests.

Provides a realistic mixed event feed, built from raw ``v1.Event`` mappings
the way an event source would hand them over, so tests exercise the full
path from raw objects through a configured chain.
"""

from __future__ import annotations

from typing import Any

import pytest

from kubefilter.models.events import EventRecord

# ---------------------------------------------------------------------------
# Raw event factory
# ---------------------------------------------------------------------------


def make_raw_event(
    type_: str = "Warning",
    reason: str = "BackOff",
    namespace: str = "prod",
    name: str = "web-0",
    kind: str = "Pod",
    api_version: str = "v1",
    uid: str = "",
    component: str = "kubelet",
    message: str = "",
) -> dict[str, Any]:
    """Create a raw v1.Event mapping with sensible defaults for testing."""
    return {
        "type": type_,
        "reason": reason,
        "message": message or f"{reason} on {kind}/{name}",
        "count": 1,
        "involvedObject": {
            "kind": kind,
            "namespace": namespace,
            "name": name,
            "uid": uid or f"uid-{namespace}-{name}",
            "apiVersion": api_version,
        },
        "reportingComponent": component,
    }


def make_event(**kwargs: Any) -> EventRecord:
    return EventRecord.from_k8s(make_raw_event(**kwargs))


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def event_feed() -> list[EventRecord]:
    """A noisy feed spanning namespaces, kinds, reasons and components."""
    return [
        make_event(reason="BackOff", namespace="prod", name="web-0"),
        make_event(type_="Normal", reason="Pulled", namespace="prod", name="web-0"),
        make_event(reason="FailedScheduling", namespace="prod", name="web-1", component="default-scheduler"),
        make_event(reason="BackOff", namespace="dev", name="api-0"),
        make_event(
            reason="ProgressDeadlineExceeded",
            namespace="prod",
            name="web",
            kind="Deployment",
            api_version="apps/v1",
            component="deployment-controller",
        ),
        make_event(
            type_="Normal",
            reason="ScalingReplicaSet",
            namespace="prod",
            name="web",
            kind="Deployment",
            api_version="apps/v1",
            component="deployment-controller",
        ),
        make_event(
            reason="BackoffLimitExceeded",
            namespace="batch-jobs",
            name="nightly",
            kind="Job",
            api_version="batch/v1",
            component="job-controller",
        ),
        make_event(reason="Unhealthy", namespace="kube-system", name="coredns-abc"),
        make_event(reason="NodeNotReady", namespace="", name="node-1", kind="Node", component="node-controller"),
        make_event(
            reason="FailedCreate",
            namespace="prod",
            name="web-6d4",
            kind="ReplicaSet",
            api_version="apps/v1",
            component="replicaset-controller",
        ),
    ]
