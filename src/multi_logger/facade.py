"""Integration with the stdlib logging facade.

stdlib logging plays the facade: log calls anywhere in the process go
through logging.getLogger(...) and end up at the root logger. This module
owns the two pieces of global state that matter here:

    threshold - the root logger level (set_max_level / max_level)
    sink slot - one Sink installed on the root logger (set_boxed_logger)

The slot is written once per process. Handlers installed by anyone else
(pytest capture, monitoring agents, basicConfig) are left where they are.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable
from typing import Any

from multi_logger.errors import SetLoggerError
from multi_logger.levels import Level, LevelFilter
from multi_logger.multi import MultiLogger
from multi_logger.sinks.base import Metadata, Sink

_lock = threading.Lock()
_sink: Sink | None = None
_handler: _SinkHandler | None = None
_previous_level: int | None = None


class _SinkHandler(logging.Handler):
    """Bridge from the root logger to an installed Sink.

    handle() consults sink.enabled() before emitting, so a record that no
    child wants is never rendered. No handler lock is taken; the sink is
    responsible for its own thread safety.
    """

    def __init__(self, sink: Sink) -> None:
        super().__init__()
        self.sink = sink

    def handle(self, record: logging.LogRecord) -> bool:  # type: ignore[override]
        if not self.sink.enabled(Metadata.from_record(record)):
            return False
        self.sink.emit(record)
        return True

    def emit(self, record: logging.LogRecord) -> None:
        self.sink.emit(record)

    def flush(self) -> None:
        self.sink.flush()

    def close(self) -> None:
        try:
            close = getattr(self.sink, "close", None)
            if callable(close):
                close()
            else:
                self.sink.flush()
        finally:
            super().close()


def set_max_level(level: LevelFilter) -> None:
    """Set the global threshold: records below it never reach the sink."""
    global _previous_level
    root = logging.getLogger()
    with _lock:
        if _previous_level is None:
            _previous_level = root.level
        root.setLevel(int(level))


def max_level() -> LevelFilter:
    return LevelFilter.from_levelno(logging.getLogger().level)


def set_boxed_logger(sink: Sink) -> None:
    """Install sink as the process-wide sink.

    Raises SetLoggerError if one is already installed; the installed sink
    is kept.
    """
    global _sink, _handler
    with _lock:
        if _sink is not None:
            raise SetLoggerError()
        handler = _SinkHandler(sink)
        logging.getLogger().addHandler(handler)
        _sink = sink
        _handler = handler


def init(children: Iterable[Any], level: Level) -> MultiLogger:
    """Build a MultiLogger from children and install it process-wide.

    The threshold of individual children can't always be determined, so
    level is the most permissive level any child should receive. Records
    below it are dropped before the MultiLogger sees them.

    The threshold is applied before installation, so it stays changed
    even when SetLoggerError is raised.
    """
    multi = MultiLogger(children)
    set_max_level(level.to_level_filter())
    set_boxed_logger(multi)
    return multi


def logger() -> Sink | None:
    """The installed process-wide sink, if any."""
    return _sink


def _effective_level(target: str) -> int:
    """Level a logger named target has, or would inherit if it existed.

    Reads the logger registry without adding to it.
    """
    registry = logging.Logger.manager.loggerDict
    name = target
    while name:
        existing = registry.get(name)
        if isinstance(existing, logging.Logger):
            return existing.getEffectiveLevel()
        name = name.rpartition(".")[0]
    return logging.getLogger().getEffectiveLevel()


def log_enabled(level: Level | int, target: str = "") -> bool:
    """Whether a record at level for target would be emitted by any sink.

    Unlike logging.getLogger(target), this never registers a logger.
    """
    if _sink is None:
        return False
    levelno = int(level)
    if logging.Logger.manager.disable >= levelno or levelno < _effective_level(target):
        return False
    return _sink.enabled(Metadata(level=levelno, target=target))


def shutdown() -> None:
    """Flush and close the installed sink. The slot stays occupied."""
    if _handler is not None:
        _handler.flush()
        _handler.close()


def reset() -> None:
    """Reset for testing."""
    global _sink, _handler, _previous_level
    with _lock:
        handler, previous = _handler, _previous_level
        _sink = None
        _handler = None
        _previous_level = None
    root = logging.getLogger()
    if handler is not None:
        root.removeHandler(handler)
        handler.close()
    if previous is not None:
        root.setLevel(previous)
