"""multi_logger configuration, env-var driven.

All settings have safe defaults. Zero config gives one structured stderr
sink at INFO.

    Threshold:   MULTI_LOGGER_LEVEL=INFO (default)
    Sinks:       MULTI_LOGGER_SINKS=stderr (default), e.g. "stderr:warn:console,jsonl:debug"
    Formatter:   MULTI_LOGGER_FORMATTER=structlog (default) | stdlib
    Render:      MULTI_LOGGER_FORMAT=json (default) | console, for sinks that
                 do not pick their own (jsonl always renders json)
    JSONL path:  MULTI_LOGGER_JSONL_PATH

Priority: env var > YAML file > default.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field, fields
from pathlib import Path

import yaml

from multi_logger.levels import Level, parse_level

RENDERS = ("json", "console")


@dataclass(frozen=True)
class SinkSpec:
    """One configured child: where it writes, from which level, how it renders."""

    destination: str
    level: Level
    render: str | None = None  # None: destination default, then log_format


_ENV_KEYS = {
    "level": "MULTI_LOGGER_LEVEL",
    "sinks": "MULTI_LOGGER_SINKS",
    "log_formatter": "MULTI_LOGGER_FORMATTER",
    "log_format": "MULTI_LOGGER_FORMAT",
    "jsonl_path": "MULTI_LOGGER_JSONL_PATH",
}


@dataclass
class MultiLoggerConfig:
    """Which sinks to build and how they render."""

    level: str = field(
        default_factory=lambda: os.environ.get("MULTI_LOGGER_LEVEL", "INFO")
    )

    sinks: str = field(
        default_factory=lambda: os.environ.get("MULTI_LOGGER_SINKS", "stderr")
    )  # comma list of "destination" or "destination:level"

    log_formatter: str = field(
        default_factory=lambda: os.environ.get("MULTI_LOGGER_FORMATTER", "structlog")
    )  # "structlog" | "stdlib"

    log_format: str = field(
        default_factory=lambda: os.environ.get("MULTI_LOGGER_FORMAT", "json")
    )  # "json" | "console"

    jsonl_path: str | None = field(
        default_factory=lambda: os.environ.get("MULTI_LOGGER_JSONL_PATH")
    )

    @classmethod
    def load(cls, path: Path) -> MultiLoggerConfig:
        """Load settings from a YAML file, then override with env vars."""
        file_values: dict[str, str] = {}
        path = Path(path)
        if path.exists():
            raw = yaml.safe_load(path.read_text()) or {}
            if not isinstance(raw, dict):
                raise ValueError(f"{path}: expected a mapping, got {type(raw).__name__}")
            for key, value in raw.items():
                if key == "sinks" and isinstance(value, list):
                    value = ",".join(str(v) for v in value)
                if value is not None:
                    file_values[key] = str(value)

        kwargs: dict[str, str] = {}
        for f in fields(cls):
            env_key = _ENV_KEYS[f.name]
            if env_key in os.environ:
                kwargs[f.name] = os.environ[env_key]
            elif f.name in file_values:
                kwargs[f.name] = file_values[f.name]
        return cls(**kwargs)

    def default_level(self) -> Level:
        return parse_level(self.level)

    def sink_specs(self) -> list[SinkSpec]:
        """Parse `sinks` into SinkSpecs, in declaration order.

        Each entry is "destination[:level[:render]]". A missing level falls
        back to `level`; a missing render is left for the destination to pick.
        """
        specs: list[SinkSpec] = []
        for item in self.sinks.split(","):
            parts = [p.strip() for p in item.split(":")]
            if not parts[0]:
                continue
            if len(parts) > 3:
                raise ValueError(f"Bad sink entry: {item.strip()!r}. Use destination[:level[:render]].")
            level = parse_level(parts[1]) if len(parts) > 1 and parts[1] else self.default_level()
            render = parts[2].lower() if len(parts) > 2 and parts[2] else None
            if render is not None and render not in RENDERS:
                raise ValueError(f"Unknown render {render!r} for sink {parts[0]!r}. Available: {list(RENDERS)}.")
            specs.append(SinkSpec(destination=parts[0], level=level, render=render))
        return specs
