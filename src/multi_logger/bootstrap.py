"""Build children from config and install them behind one MultiLogger.

    configure(cfg)
        1. Resolve the backend (structlog or stdlib)
        2. For each sink spec: open its destination handler, give it the
           formatter for its render and its own level
        3. init(children, coarse_level) installs the MultiLogger

The install threshold is the most permissive level among the declared
sinks, so the facade never drops a record some child asked for. The
handlers belong to the children and are closed with the MultiLogger.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from multi_logger import facade
from multi_logger.config import MultiLoggerConfig
from multi_logger.formatting import (
    Backend,
    activate,
    backend,
    destination,
    get_logger,
    render_for,
)
from multi_logger.levels import Level
from multi_logger.multi import MultiLogger
from multi_logger.sinks.base import HandlerSink


def coarse_level(levels: Iterable[Level]) -> Level:
    """Most permissive of levels. ERROR when there are none."""
    return min(levels, default=Level.ERROR)


def build_sinks(config: MultiLoggerConfig, log_backend: Backend) -> list[HandlerSink]:
    """One HandlerSink per configured sink, in declaration order.

    Handlers opened before a failure are closed again.
    """
    formatters: dict[str, logging.Formatter] = {}
    sinks: list[HandlerSink] = []
    try:
        for spec in config.sink_specs():
            render = render_for(spec, config)
            if render not in formatters:
                formatters[render] = log_backend.formatter(render)
            handler = destination(spec.destination).opener(config)
            handler.setFormatter(formatters[render])
            handler.setLevel(int(spec.level))
            sinks.append(HandlerSink(handler))
    except Exception:
        for sink in sinks:
            sink.close()
        raise
    return sinks


def configure(config: MultiLoggerConfig | None = None) -> MultiLogger:
    """Compose the configured sinks and install them process-wide.

    Raises SetLoggerError if a sink is already installed.
    """
    cfg = config or MultiLoggerConfig()
    log_backend = backend(cfg.log_formatter)
    sinks = build_sinks(cfg, log_backend)
    threshold = coarse_level(sink_spec.level for sink_spec in cfg.sink_specs())

    try:
        multi = facade.init(sinks, threshold)
    except Exception:
        for sink in sinks:
            sink.close()
        raise

    activate(log_backend)
    get_logger(__name__).debug(
        "multi_logger.configured",
        sinks=[sink_spec.destination for sink_spec in cfg.sink_specs()],
        threshold=threshold.name,
    )
    return multi


def shutdown_logging() -> None:
    """Flush and close every child. Call on process exit."""
    facade.shutdown()


def reset() -> None:
    """Reset for testing."""
    activate(None)
    facade.reset()
