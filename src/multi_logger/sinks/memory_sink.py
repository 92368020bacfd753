"""In-memory sink: keeps rendered messages in a locked buffer."""

from __future__ import annotations

import logging
import threading

from multi_logger.levels import Level
from multi_logger.sinks.base import Metadata


class MemorySink:
    """Append each admitted message to a thread-safe list."""

    def __init__(self, level: Level = Level.TRACE) -> None:
        self.level = level
        self._messages: list[str] = []
        self._lock = threading.Lock()

    def enabled(self, metadata: Metadata) -> bool:
        return metadata.level >= self.level

    def emit(self, record: logging.LogRecord) -> None:
        if not self.enabled(Metadata.from_record(record)):
            return
        message = record.getMessage()
        with self._lock:
            self._messages.append(message)

    def flush(self) -> None:
        pass

    @property
    def messages(self) -> list[str]:
        with self._lock:
            return list(self._messages)

    def clear(self) -> None:
        with self._lock:
            self._messages.clear()
