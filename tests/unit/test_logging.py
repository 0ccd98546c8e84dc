"""Tests for structlog configuration."""

from __future__ import annotations

import json
import logging
import subprocess
import sys
import textwrap
from collections.abc import Iterator

import pytest
import structlog

from kubefilter.observability.logging import LOGGER_NAMESPACE, get_logger, setup_logging


@pytest.fixture(autouse=True)
def _reset_logging() -> Iterator[None]:
    yield
    structlog.reset_defaults()
    stdlib_logger = logging.getLogger(LOGGER_NAMESPACE)
    stdlib_logger.handlers.clear()
    stdlib_logger.setLevel(logging.NOTSET)
    stdlib_logger.propagate = True


class TestSetupLogging:
    def test_json_output_carries_component(self, capsys: pytest.CaptureFixture[str]) -> None:
        setup_logging("debug")
        get_logger("filters.test").debug("filter_applied", stage="namespace", events_in=3, events_out=1)

        line = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
        assert line["event"] == "filter_applied"
        assert line["component"] == "filters.test"
        assert line["level"] == "debug"
        assert line["events_out"] == 1
        assert "ts" in line

    def test_level_filters_debug(self, capsys: pytest.CaptureFixture[str]) -> None:
        setup_logging("info")
        get_logger("filters.test").debug("hidden")
        assert capsys.readouterr().err == ""

    def test_console_renderer(self, capsys: pytest.CaptureFixture[str]) -> None:
        setup_logging("info", json_output=False)
        get_logger("filters.test").info("chain_built")
        assert "chain_built" in capsys.readouterr().err


class TestUnconfiguredLogging:
    def test_filters_write_nothing_without_setup(self) -> None:
        script = textwrap.dedent(
            """
            from kubefilter.filters.attributes import NamespaceFilter
            from kubefilter.filters.base import FilterChain
            from kubefilter.filters.kind import KindFilter
            from kubefilter.models.events import EventRecord, EventType
            from kubefilter.models.patterns import KindPatternSet, PatternSet

            events = [EventRecord(EventType.WARNING, "prod", "x", kind="Pod", api_version="v1")]
            chain = FilterChain([NamespaceFilter(PatternSet.parse(["prod"])), KindFilter(KindPatternSet.parse(["Pod"]))])
            assert len(chain.filter_events(events)) == 1
            """
        )
        proc = subprocess.run([sys.executable, "-c", script], capture_output=True, text=True, check=False)

        assert proc.returncode == 0, proc.stderr
        assert proc.stdout == ""
        assert proc.stderr == ""
