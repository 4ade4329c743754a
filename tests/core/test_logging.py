"""
Tests for ratioscale structured logging.
"""

from __future__ import annotations

import json
import logging
import sys

from ratioscale.core.logging import (
    RatioscaleFormatter,
    get_logger,
    reset_logging,
    set_log_level,
)


def _record(name="ratioscale.scales.builtin", level=logging.WARNING, msg="Test message", exc_info=None):
    return logging.LogRecord(
        name=name,
        level=level,
        pathname="test.py",
        lineno=10,
        msg=msg,
        args=(),
        exc_info=exc_info,
    )


class TestRatioscaleFormatter:
    """Test RatioscaleFormatter class."""

    def test_text_format_basic(self):
        formatter = RatioscaleFormatter(json_output=False)

        formatted = formatter.format(_record())

        assert formatted == "[RATIOSCALE WARNING] [builtin] Test message"

    def test_text_format_with_exception(self):
        formatter = RatioscaleFormatter(json_output=False)

        try:
            raise ValueError("Test error")
        except ValueError:
            exc_info = sys.exc_info()

        formatted = formatter.format(_record(level=logging.ERROR, exc_info=exc_info))

        assert "ValueError" in formatted
        assert "Test error" in formatted

    def test_json_format_basic(self):
        formatter = RatioscaleFormatter(json_output=True)

        data = json.loads(formatter.format(_record(level=logging.INFO)))

        assert data["level"] == "INFO"
        assert data["logger"] == "ratioscale.scales.builtin"
        assert data["message"] == "Test message"
        assert "timestamp" in data

    def test_json_format_extra_fields(self):
        formatter = RatioscaleFormatter(json_output=True)
        record = _record()
        record.scale_min = 0.0
        record.scale_max = float("inf")

        data = json.loads(formatter.format(record))

        assert data["scale_min"] == 0.0
        assert data["scale_max"] == float("inf")


class TestGetLogger:
    """Test logger factory and level control."""

    def test_get_logger_is_cached(self):
        assert get_logger("ratioscale.test_cache") is get_logger("ratioscale.test_cache")

    def test_logger_has_handler_and_no_propagation(self):
        logger = get_logger("ratioscale.test_handler")

        assert logger.handlers
        assert logger.propagate is False

    def test_set_log_level(self):
        logger = get_logger("ratioscale.test_level")

        set_log_level(logging.ERROR)

        assert logger.level == logging.ERROR

    def test_reset_logging_restores_propagation(self):
        logger = get_logger("ratioscale.test_reset")

        reset_logging()

        assert logger.propagate is True
        assert logger.level == logging.NOTSET

    def test_handler_uses_json_when_configured(self, monkeypatch):
        from ratioscale.core.config import reset_settings

        monkeypatch.setenv("RATIOSCALE_LOG_JSON", "1")
        reset_settings()

        logger = get_logger("ratioscale.test_json_handler")

        assert logger.handlers[0].formatter.json_output is True
