"""Shared fixtures: clean facade state and recording children."""

from __future__ import annotations

import logging
import threading

import pytest

from multi_logger.levels import Level
from multi_logger.sinks.base import Metadata


@pytest.fixture(autouse=True)
def _reset_multi_logger():
    """Detach any installed sink before and after each test."""
    from multi_logger.bootstrap import reset

    reset()
    yield
    reset()


class RecordingSink:
    """Test child that writes (name, message) into a journal shared by siblings."""

    def __init__(self, name: str, journal: list, level: Level = Level.TRACE) -> None:
        self.name = name
        self.level = level
        self.journal = journal
        self.flushes = 0
        self.enabled_calls = 0
        self._lock = threading.Lock()

    def enabled(self, metadata: Metadata) -> bool:
        with self._lock:
            self.enabled_calls += 1
        return metadata.level >= self.level

    def emit(self, record: logging.LogRecord) -> None:
        with self._lock:
            self.journal.append((self.name, record.getMessage()))

    def flush(self) -> None:
        with self._lock:
            self.flushes += 1
            self.journal.append((self.name, "<flush>"))


@pytest.fixture()
def journal() -> list:
    return []


@pytest.fixture()
def recording_sink(journal):
    """Factory for RecordingSink children sharing one journal."""

    def _make(name: str, level: Level = Level.TRACE) -> RecordingSink:
        return RecordingSink(name, journal, level)

    return _make
