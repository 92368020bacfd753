"""MultiLogger: one sink that broadcasts to an ordered set of child sinks.

The facade only holds one process-wide sink. MultiLogger fills that slot
and forwards every call to each child, in the order the children were
given:

    enabled(metadata)  - true if any child is enabled
    emit(record)       - every child gets the same record
    flush()            - every child is flushed

Children are fixed at construction. The adapter keeps no other state and
takes no locks, so it can be driven from any number of threads as long as
each child is thread-safe.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from multi_logger.levels import Level
from multi_logger.sinks.base import Metadata, Sink, as_sink


class MultiLogger:
    """Logger that writes log records to all the sinks it encapsulates."""

    __slots__ = ("_children",)

    def __init__(self, children: Iterable[Any] = ()) -> None:
        """Take ownership of children, in order.

        Each child is a Sink or a plain logging.Handler (wrapped in a
        HandlerSink). A child must not be shared with another MultiLogger.
        """
        self._children: tuple[Sink, ...] = tuple(as_sink(c) for c in children)

    @classmethod
    def init(cls, children: Iterable[Any], level: Level) -> MultiLogger:
        """Build a MultiLogger and install it as the process-wide sink."""
        from multi_logger.facade import init

        return init(children, level)

    @property
    def children(self) -> tuple[Sink, ...]:
        return self._children

    def enabled(self, metadata: Metadata) -> bool:
        return any(child.enabled(metadata) for child in self._children)

    def emit(self, record: logging.LogRecord) -> None:
        # Children filter for themselves; no enabled() pre-check here.
        for child in self._children:
            child.emit(record)

    def flush(self) -> None:
        for child in self._children:
            child.flush()

    def close(self) -> None:
        """Flush every child, then close the ones that can be closed."""
        for child in self._children:
            child.flush()
            close = getattr(child, "close", None)
            if callable(close):
                close()

    def __repr__(self) -> str:
        return f"MultiLogger({list(self._children)!r})"
