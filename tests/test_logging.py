"""Unit tests for the structured logger."""

import io
import json

import pytest

from internal import logging as log_module
from internal.logging import LogLevel, StructuredLogger, get_logger


class TestStructuredLogger:
    """Tests for StructuredLogger."""

    def test_emits_json_line(self):
        """Records are single JSON lines with level and message."""
        stream = io.StringIO()
        StructuredLogger(LogLevel.DEBUG, stream).info("hello", model="User")
        record = json.loads(stream.getvalue())
        assert record["level"] == "INFO"
        assert record["msg"] == "hello"
        assert record["model"] == "User"
        assert record["timestamp"].endswith("Z")

    def test_level_filter(self):
        """Records below the level are dropped."""
        stream = io.StringIO()
        logger = StructuredLogger(LogLevel.WARN, stream)
        logger.info("skip")
        logger.error("keep", error=ValueError("bad"))
        lines = stream.getvalue().splitlines()
        assert len(lines) == 1
        assert json.loads(lines[0])["err"] == "bad"

    def test_bind_adds_fields(self):
        """Bound fields appear on every record."""
        stream = io.StringIO()
        StructuredLogger(LogLevel.DEBUG, stream).bind(component="ksuid").debug("x")
        assert json.loads(stream.getvalue())["component"] == "ksuid"

    @pytest.mark.parametrize("name,level", [("debug", LogLevel.DEBUG), ("INFO", LogLevel.INFO),
                                            ("warning", LogLevel.WARN), ("ERROR", LogLevel.ERROR)])
    def test_parse_level(self, name, level):
        """Level names parse case-insensitively."""
        assert LogLevel.parse(name) == level

    def test_configure_replaces_global(self, monkeypatch):
        """configure() installs the shared logger."""
        monkeypatch.setattr(log_module, "_logger", None)
        logger = StructuredLogger.configure("DEBUG")
        assert get_logger() is logger
        assert logger.level == LogLevel.DEBUG


class TestPackageExports:
    """Tests for the internal package surface."""

    def test_exports_only_logging(self):
        """internal re-exports the logging names and nothing else."""
        import internal
        assert sorted(internal.__all__) == ["LogLevel", "StructuredLogger", "get_logger"]
        assert not hasattr(internal, "generate_ksuid")
