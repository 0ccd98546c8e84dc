"""One-call wiring for tools embedding kubefilter.

Startup order: config -> logging -> chain.  Callers that already configure
logging themselves should use ``build_chain`` directly instead.
"""

from __future__ import annotations

from kubefilter.config import load_config
from kubefilter.filters.base import FilterChain
from kubefilter.filters.builder import build_chain
from kubefilter.models.config import KubeFilterConfig
from kubefilter.observability.logging import get_logger, setup_logging


def configure(config: KubeFilterConfig | None = None) -> FilterChain:
    """Set up logging and build the filter chain described by ``config``.

    With no argument the configuration is read from ``KUBEFILTER_*``
    environment variables.
    """
    if config is None:
        config = load_config()

    setup_logging(config.log.level, json_output=config.log.json_output)
    chain = build_chain(config.filters, record_metrics=config.metrics.enabled)
    get_logger("app").info(
        "kubefilter_configured",
        stages=[f.stage for f in chain.filters],
        metrics_enabled=config.metrics.enabled,
    )
    return chain
