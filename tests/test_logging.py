"""Tests for logging configuration."""

from __future__ import annotations

import json
import logging

import pytest
import structlog

from railway._logging import configure_logging, get_logger


@pytest.fixture(autouse=True)
def _restore(restore_logging):
    """Every test here may reconfigure logging."""
    yield


class TestLibraryIsQuiet:
    """The library stays silent until an application opts in."""

    def test_package_logger_has_null_handler(self):
        """The railway namespace carries a NullHandler."""
        handlers = logging.getLogger("railway").handlers
        assert any(isinstance(handler, logging.NullHandler) for handler in handlers)

    def test_unconfigured_logging_prints_nothing(self, capsys):
        """Debug records from railway loggers produce no output by default."""
        get_logger("railway.test").debug("should_not_print", detail=1)
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_json_output(self, capsys):
        """JSON rendering includes the event, level and bound fields."""
        configure_logging(level="DEBUG", json_output=True)
        get_logger("railway.test").info("json_event", answer=42)

        lines = [line for line in capsys.readouterr().err.splitlines() if "json_event" in line]
        assert len(lines) == 1
        entry = json.loads(lines[0])
        assert entry["event"] == "json_event"
        assert entry["level"] == "info"
        assert entry["answer"] == 42
        assert entry["logger"] == "railway.test"

    def test_stdlib_records_share_format(self, capsys):
        """Plain stdlib loggers are rendered through the same formatter."""
        configure_logging(level="INFO", json_output=True)
        logging.getLogger("third.party").warning("stdlib_event")

        lines = [line for line in capsys.readouterr().err.splitlines() if "stdlib_event" in line]
        assert json.loads(lines[0])["level"] == "warning"

    def test_level_filters(self, capsys):
        """Records below the configured level are dropped."""
        configure_logging(level="WARNING", json_output=True)
        get_logger("railway.test").debug("hidden_event")
        assert "hidden_event" not in capsys.readouterr().err

    def test_console_output(self, capsys):
        """Console rendering is plain text rather than JSON."""
        configure_logging(level="INFO", json_output=False)
        get_logger("railway.test").info("console_event")
        line = next(line for line in capsys.readouterr().err.splitlines() if "console_event" in line)
        with pytest.raises(json.JSONDecodeError):
            json.loads(line)

    def test_get_logger_is_stdlib_backed(self):
        """get_logger binds to the stdlib logger of the same name."""
        logger = get_logger("railway.named")
        bound = logger.bind()
        assert isinstance(bound, structlog.stdlib.BoundLogger)
        assert bound._logger is logging.getLogger("railway.named")
