"""Configuration loading from environment variables."""

from __future__ import annotations

import os

from kubefilter.models.config import (
    DEFAULT_STAGE_ORDER,
    FilterConfig,
    KubeFilterConfig,
    LogConfig,
    MetricsConfig,
)
from kubefilter.models.patterns import KindPatternSet, PatternSet


def _env(key: str, default: str = "") -> str:
    return os.environ.get(f"KUBEFILTER_{key}", default)


def _env_bool(key: str, default: bool = False) -> bool:
    val = _env(key, str(default).lower())
    return val.lower() in ("true", "1", "yes")


def _env_list(key: str) -> list[str]:
    raw = _env(key, "")
    if not raw.strip():
        return []
    return raw.split(",")


def _validate_log_level(value: str) -> str:
    valid = {"debug", "info", "warning", "error"}
    if value.lower() not in valid:
        raise ValueError(f"Invalid log level: {value}. Must be one of {valid}")
    return value.lower()


def _stage_order() -> tuple[str, ...]:
    names = [n.strip().lower() for n in _env_list("STAGE_ORDER") if n.strip()]
    return tuple(names) if names else DEFAULT_STAGE_ORDER


def load_config() -> KubeFilterConfig:
    """Load configuration from KUBEFILTER_* environment variables.

    Raises:
        PatternError: if a pattern list holds an empty or bare ``-`` token.
        ValueError:   if the log level is invalid.
    """
    return KubeFilterConfig(
        filters=FilterConfig(
            warnings_only=_env_bool("WARNINGS_ONLY", False),
            namespaces=PatternSet.parse(_env_list("NAMESPACES")),
            names=PatternSet.parse(_env_list("NAMES")),
            reasons=PatternSet.parse(_env_list("REASONS")),
            uids=PatternSet.parse(_env_list("UIDS")),
            components=PatternSet.parse(_env_list("COMPONENTS")),
            kinds=KindPatternSet.parse(_env_list("KINDS")),
            stage_order=_stage_order(),
        ),
        metrics=MetricsConfig(
            enabled=_env_bool("METRICS_ENABLED", False),
        ),
        log=LogConfig(
            level=_validate_log_level(_env("LOG_LEVEL", "info")),
            json_output=_env_bool("LOG_JSON", True),
        ),
    )
