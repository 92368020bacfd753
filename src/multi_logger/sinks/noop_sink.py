"""No-op sink: placeholder child that wants nothing."""

from __future__ import annotations

import logging

from multi_logger.sinks.base import Metadata


class NoOpSink:
    """Discards all records. Zero overhead."""

    def enabled(self, metadata: Metadata) -> bool:
        return False

    def emit(self, record: logging.LogRecord) -> None:
        pass

    def flush(self) -> None:
        pass
