"""Sink capability: the trio every logging backend exposes.

A Sink answers enabled(metadata) without the message being rendered,
receives records through emit(record), and pushes buffered output on
flush(). Implementations are driven from arbitrary threads and must
synchronise their own resources.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@dataclass(frozen=True)
class Metadata:
    """The part of a record that enablement queries look at."""

    level: int
    target: str

    @classmethod
    def from_record(cls, record: logging.LogRecord) -> Metadata:
        return cls(level=record.levelno, target=record.name)


@runtime_checkable
class Sink(Protocol):
    """Where log records go."""

    def enabled(self, metadata: Metadata) -> bool: ...

    def emit(self, record: logging.LogRecord) -> None: ...

    def flush(self) -> None: ...


class HandlerSink:
    """Expose an ordinary logging.Handler as a Sink.

    The handler's own level is the sink's threshold. Failures inside the
    handler are absorbed by Handler.handleError, as stdlib handlers do.
    """

    def __init__(self, handler: logging.Handler) -> None:
        self._handler = handler

    @property
    def handler(self) -> logging.Handler:
        return self._handler

    def enabled(self, metadata: Metadata) -> bool:
        return metadata.level >= self._handler.level

    def emit(self, record: logging.LogRecord) -> None:
        if record.levelno >= self._handler.level:
            self._handler.handle(record)

    def flush(self) -> None:
        self._handler.flush()

    def close(self) -> None:
        self._handler.close()

    def __repr__(self) -> str:
        return f"HandlerSink({self._handler!r})"


def as_sink(obj: object) -> Sink:
    """Return obj as a Sink, wrapping plain logging handlers."""
    if isinstance(obj, logging.Handler):
        return HandlerSink(obj)
    if isinstance(obj, Sink):
        return obj
    raise TypeError(
        f"{type(obj).__name__} is neither a Sink nor a logging.Handler"
    )
