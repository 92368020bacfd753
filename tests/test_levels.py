"""Tests for Level / LevelFilter and their stdlib mapping."""

from __future__ import annotations

import logging

import pytest

from multi_logger.levels import TRACE, Level, LevelFilter, parse_level, parse_level_filter


class TestLevel:
    def test_stdlib_numbers(self):
        assert Level.ERROR == logging.ERROR
        assert Level.WARN == logging.WARNING
        assert Level.INFO == logging.INFO
        assert Level.DEBUG == logging.DEBUG
        assert Level.TRACE == TRACE

    def test_trace_name_registered(self):
        assert logging.getLevelName(TRACE) == "TRACE"

    def test_severity_order(self):
        assert Level.ERROR > Level.WARN > Level.INFO > Level.DEBUG > Level.TRACE

    @pytest.mark.parametrize("level", list(Level))
    def test_to_level_filter(self, level):
        assert level.to_level_filter().name == level.name
        assert int(level.to_level_filter()) == int(level)

    @pytest.mark.parametrize(
        ("levelno", "expected"),
        [
            (logging.CRITICAL, Level.ERROR),
            (logging.ERROR, Level.ERROR),
            (35, Level.WARN),
            (logging.INFO, Level.INFO),
            (logging.DEBUG, Level.DEBUG),
            (7, Level.TRACE),
            (1, Level.TRACE),
        ],
    )
    def test_from_levelno(self, levelno, expected):
        assert Level.from_levelno(levelno) is expected


class TestLevelFilter:
    def test_off_above_critical(self):
        assert LevelFilter.OFF > logging.CRITICAL

    def test_from_levelno_off(self):
        assert LevelFilter.from_levelno(int(LevelFilter.OFF)) is LevelFilter.OFF

    def test_from_levelno_notset_admits_everything(self):
        assert LevelFilter.from_levelno(logging.NOTSET) is LevelFilter.TRACE


class TestParsing:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("info", Level.INFO),
            ("INFO", Level.INFO),
            (" debug ", Level.DEBUG),
            ("warn", Level.WARN),
            ("warning", Level.WARN),
            ("critical", Level.ERROR),
            ("trace", Level.TRACE),
        ],
    )
    def test_parse_level(self, text, expected):
        assert parse_level(text) is expected

    def test_parse_level_passthrough(self):
        assert parse_level(Level.DEBUG) is Level.DEBUG

    def test_parse_level_unknown(self):
        with pytest.raises(ValueError, match="Unknown log level"):
            parse_level("loud")

    def test_parse_level_rejects_off(self):
        with pytest.raises(ValueError):
            parse_level("off")

    def test_parse_level_filter(self):
        assert parse_level_filter("off") is LevelFilter.OFF
        assert parse_level_filter("warning") is LevelFilter.WARN
