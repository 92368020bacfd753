"""Errors raised by multi_logger."""

from __future__ import annotations


class MultiLoggerError(Exception):
    """Base class for multi_logger errors."""


class SetLoggerError(MultiLoggerError):
    """The process-wide sink slot is already taken."""

    def __init__(self, message: str | None = None) -> None:
        super().__init__(
            message
            or "attempted to set a logger after the logging system was already initialized"
        )
