"""Per-sink rendering for children built from config.

Every configured sink has a destination (where its handler writes) and a
render (``json`` or ``console``). The backend turns a render into a
logging.Formatter:

    structlog (default) - ProcessorFormatter; plain stdlib records go
                          through foreign_pre_chain so both kinds match
    stdlib              - logging.Formatter / JsonLineFormatter

Sinks that share a render share one formatter. A sink that names no
render gets its destination's fixed render (jsonl is always json), then
the config-wide log_format.

Register your own destination:
    from multi_logger.formatting import register_destination
    register_destination("syslog", lambda cfg: SysLogHandler(), render="json")
"""

from __future__ import annotations

import json
import logging
import sys
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any, Protocol

from multi_logger.config import RENDERS

if TYPE_CHECKING:
    from multi_logger.config import MultiLoggerConfig, SinkSpec

DEFAULT_JSONL_PATH = "/tmp/multi_logger.jsonl"


def _lookup(kind: str, table: dict[str, Any], name: str) -> Any:
    try:
        return table[name]
    except KeyError:
        raise ValueError(
            f"Unknown {kind}: {name!r}. Available: {sorted(table)}."
        ) from None


# ---------------------------------------------------------------------------
# Backends
# ---------------------------------------------------------------------------


class Backend(Protocol):
    """Builds formatters for renders and hands out structured loggers."""

    def formatter(self, render: str) -> logging.Formatter: ...

    def get_logger(self, name: str, **kwargs: Any) -> Any: ...


def _structlog_pre_chain() -> list:
    import structlog

    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]


class StructlogBackend:
    """structlog loggers, rendered by the stdlib handler of each sink."""

    def __init__(self) -> None:
        import structlog

        structlog.configure(
            processors=[
                structlog.stdlib.filter_by_level,
                *_structlog_pre_chain(),
                structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
            ],
            wrapper_class=structlog.stdlib.BoundLogger,
            context_class=dict,
            logger_factory=structlog.stdlib.LoggerFactory(),
            cache_logger_on_first_use=True,
        )

    def formatter(self, render: str) -> logging.Formatter:
        import structlog

        if render == "console":
            renderer: Any = structlog.dev.ConsoleRenderer()
        else:
            renderer = structlog.processors.JSONRenderer()
        return structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_structlog_pre_chain(),
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )

    def get_logger(self, name: str, **kwargs: Any) -> Any:
        import structlog

        return structlog.get_logger(name, **kwargs)


class StdlibBackend:
    """No structlog at runtime."""

    def formatter(self, render: str) -> logging.Formatter:
        if render == "console":
            return logging.Formatter(
                "%(asctime)s %(levelname)-8s %(name)s: %(message)s",
                datefmt="%Y-%m-%dT%H:%M:%S",
            )
        return JsonLineFormatter()

    def get_logger(self, name: str, **kwargs: Any) -> Any:
        return KwargsLogger(logging.getLogger(name))


class JsonLineFormatter(logging.Formatter):
    """One JSON object per record, same keys as structlog's JSON output.

    Fields passed as extra={"fields": {...}} are merged in, except where
    they would shadow a record key.
    """

    def format(self, record: logging.LogRecord) -> str:
        d: dict[str, Any] = dict(getattr(record, "fields", None) or {})
        d.update(
            timestamp=self.formatTime(record, "%Y-%m-%dT%H:%M:%SZ"),
            level=record.levelname.lower(),
            logger=record.name,
            event=record.getMessage(),
            module=record.module,
            lineno=record.lineno,
        )
        if record.exc_info and record.exc_info[1]:
            d["exception"] = self.formatException(record.exc_info)
        return json.dumps(d, default=str)


class KwargsLogger:
    """stdlib logger with structlog's call shape: log.info("event", key=value)."""

    def __init__(self, logger: logging.Logger) -> None:
        self._logger = logger

    def _log(self, level: int, event: str, exc_info: Any = None, **fields: Any) -> None:
        # stacklevel 3 points at whoever called info()/warning()/...
        self._logger.log(level, event, exc_info=exc_info, extra={"fields": fields}, stacklevel=3)

    def debug(self, event: str, **fields: Any) -> None:
        self._log(logging.DEBUG, event, **fields)

    def info(self, event: str, **fields: Any) -> None:
        self._log(logging.INFO, event, **fields)

    def warning(self, event: str, **fields: Any) -> None:
        self._log(logging.WARNING, event, **fields)

    def error(self, event: str, **fields: Any) -> None:
        self._log(logging.ERROR, event, **fields)

    def exception(self, event: str, **fields: Any) -> None:
        fields.setdefault("exc_info", True)
        self._log(logging.ERROR, event, **fields)


_BACKENDS: dict[str, type] = {
    "structlog": StructlogBackend,
    "stdlib": StdlibBackend,
}


def backend(name: str) -> Backend:
    return _lookup("log formatter", _BACKENDS, name)()


# ---------------------------------------------------------------------------
# Destinations
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Destination:
    """Opens the handler for one sink. render pins its format, if set."""

    opener: Callable[[MultiLoggerConfig], logging.Handler]
    render: str | None = None


def _open_jsonl(config: MultiLoggerConfig) -> logging.Handler:
    path = Path(config.jsonl_path or DEFAULT_JSONL_PATH)
    path.parent.mkdir(parents=True, exist_ok=True)
    return logging.FileHandler(path, mode="a", encoding="utf-8")


_DESTINATIONS: dict[str, Destination] = {
    # sys.stderr/stdout are looked up at open time so redirection is honoured.
    "stderr": Destination(lambda cfg: logging.StreamHandler(sys.stderr)),
    "stdout": Destination(lambda cfg: logging.StreamHandler(sys.stdout)),
    "jsonl": Destination(_open_jsonl, render="json"),
}


def register_destination(
    name: str,
    opener: Callable[[MultiLoggerConfig], logging.Handler],
    render: str | None = None,
) -> None:
    """Make `name` usable in MULTI_LOGGER_SINKS. Call before configure()."""
    if render is not None and render not in RENDERS:
        raise ValueError(f"Unknown render: {render!r}. Available: {list(RENDERS)}.")
    _DESTINATIONS[name] = Destination(opener, render)


def destination(name: str) -> Destination:
    return _lookup("log destination", _DESTINATIONS, name)


def render_for(spec: SinkSpec, config: MultiLoggerConfig) -> str:
    """The sink's own render, else its destination's, else config.log_format."""
    render = spec.render or destination(spec.destination).render or config.log_format
    if render not in RENDERS:
        raise ValueError(f"Unknown render: {render!r}. Available: {list(RENDERS)}.")
    return render


# ---------------------------------------------------------------------------
# Module state
# ---------------------------------------------------------------------------

_active_backend: Backend | None = None


def activate(active: Backend | None) -> None:
    global _active_backend
    _active_backend = active


def get_logger(name: str = "", **kwargs: Any) -> Any:
    """Structured logger from the active backend; stdlib-backed before configure()."""
    if _active_backend is not None:
        return _active_backend.get_logger(name, **kwargs)
    return KwargsLogger(logging.getLogger(name))
