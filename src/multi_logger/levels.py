"""Severity levels and level filters, mapped onto stdlib logging numbers.

Level        - severity of a single record (ERROR, WARN, INFO, DEBUG, TRACE)
LevelFilter  - a threshold: one of the levels, or OFF to admit nothing

Stdlib numbers grow with severity, so "admitted by a threshold" means
record.levelno >= threshold.
"""

from __future__ import annotations

import logging
from enum import IntEnum

TRACE = 5

logging.addLevelName(TRACE, "TRACE")


class LevelFilter(IntEnum):
    """Threshold installed on the root logger."""

    OFF = logging.CRITICAL + 10
    ERROR = logging.ERROR
    WARN = logging.WARNING
    INFO = logging.INFO
    DEBUG = logging.DEBUG
    TRACE = TRACE

    @classmethod
    def from_levelno(cls, levelno: int) -> LevelFilter:
        if levelno > logging.CRITICAL:
            return cls.OFF
        return cls(Level.from_levelno(levelno))


class Level(IntEnum):
    """Severity of a record."""

    ERROR = logging.ERROR
    WARN = logging.WARNING
    INFO = logging.INFO
    DEBUG = logging.DEBUG
    TRACE = TRACE

    def to_level_filter(self) -> LevelFilter:
        return LevelFilter(self.value)

    @classmethod
    def from_levelno(cls, levelno: int) -> Level:
        """Closest level at or below the severity of a stdlib level number."""
        for level in cls:
            if levelno >= level:
                return level
        return cls.TRACE


_ALIASES = {"WARNING": "WARN", "CRITICAL": "ERROR", "FATAL": "ERROR"}


def parse_level(text: str | Level) -> Level:
    if isinstance(text, Level):
        return text
    name = str(text).strip().upper()
    name = _ALIASES.get(name, name)
    try:
        return Level[name]
    except KeyError:
        raise ValueError(
            f"Unknown log level: {text!r}. Available: {[lvl.name.lower() for lvl in Level]}."
        ) from None


def parse_level_filter(text: str | LevelFilter) -> LevelFilter:
    if isinstance(text, LevelFilter):
        return text
    if str(text).strip().upper() == "OFF":
        return LevelFilter.OFF
    return parse_level(text).to_level_filter()
