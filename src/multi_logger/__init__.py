"""multi_logger: send every log record to any number of sinks.

stdlib logging keeps a single process-wide destination in mind; a
MultiLogger takes that slot and forwards each record to all of its
children, in order.

Public API:
    MultiLogger(children)   - fan-out sink over Sinks or logging.Handlers
    init(children, level)   - build a MultiLogger, set the threshold, install it
    set_max_level(filter)   - set the global threshold by hand
    set_boxed_logger(sink)  - install any Sink by hand
    configure(cfg)          - build children from MultiLoggerConfig and install

Example:
    import logging
    import multi_logger
    from multi_logger import Level

    console = logging.StreamHandler()
    console.setLevel(logging.WARNING)
    audit = logging.FileHandler("audit.log")
    multi_logger.init([console, audit], Level.INFO)
"""

from multi_logger.bootstrap import configure, shutdown_logging
from multi_logger.config import MultiLoggerConfig, SinkSpec
from multi_logger.errors import MultiLoggerError, SetLoggerError
from multi_logger.facade import (
    init,
    log_enabled,
    logger,
    max_level,
    set_boxed_logger,
    set_max_level,
)
from multi_logger.formatting import get_logger, register_destination
from multi_logger.levels import TRACE, Level, LevelFilter
from multi_logger.multi import MultiLogger
from multi_logger.sinks import HandlerSink, MemorySink, Metadata, NoOpSink, Sink

__all__ = [
    # Core
    "MultiLogger",
    "init",
    "set_max_level",
    "max_level",
    "set_boxed_logger",
    "logger",
    "log_enabled",
    # Levels
    "Level",
    "LevelFilter",
    "TRACE",
    # Sinks
    "Sink",
    "Metadata",
    "HandlerSink",
    "MemorySink",
    "NoOpSink",
    # Errors
    "MultiLoggerError",
    "SetLoggerError",
    # Config + children
    "MultiLoggerConfig",
    "configure",
    "shutdown_logging",
    "SinkSpec",
    "get_logger",
    "register_destination",
]
