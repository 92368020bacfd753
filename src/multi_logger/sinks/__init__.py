"""Sinks: the capability protocol and ready-made children."""

from multi_logger.sinks.base import HandlerSink, Metadata, Sink, as_sink
from multi_logger.sinks.memory_sink import MemorySink
from multi_logger.sinks.noop_sink import NoOpSink

__all__ = ["Sink", "Metadata", "HandlerSink", "as_sink", "MemorySink", "NoOpSink"]
