"""Structured logging configuration using structlog.

Loggers are structlog wrappers around stdlib loggers under the ``kubefilter``
namespace.  Until the host application configures stdlib logging (or calls
``setup_logging``) debug records from the filters go nowhere.
"""

from __future__ import annotations

import logging
import sys

import structlog

LOGGER_NAMESPACE = "kubefilter"


def setup_logging(level: str = "info", json_output: bool = True) -> None:
    """Configure structlog output to stderr.

    ``json_output=False`` switches to the human-readable console renderer,
    which is handier when piping events through a terminal.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)
    renderer: structlog.typing.Processor = (
        structlog.processors.JSONRenderer() if json_output else structlog.dev.ConsoleRenderer(colors=False)
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))
    stdlib_logger = logging.getLogger(LOGGER_NAMESPACE)
    stdlib_logger.handlers[:] = [handler]
    stdlib_logger.setLevel(log_level)
    stdlib_logger.propagate = False

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True, key="ts"),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(component: str) -> structlog.stdlib.BoundLogger:
    """Get a logger bound with a component name."""
    return structlog.wrap_logger(  # type: ignore[no-any-return]
        logging.getLogger(f"{LOGGER_NAMESPACE}.{component}"),
        wrapper_class=structlog.stdlib.BoundLogger,
        component=component,
    )
