"""
Tests for centralized configuration module.
"""

from __future__ import annotations

import logging
import os
from unittest import mock

import pytest
from pydantic import ValidationError

from ratioscale.core.config import (
    RatioscaleSettings,
    get_settings,
    is_json_logging,
    reset_settings,
)


class TestRatioscaleSettings:
    """Test RatioscaleSettings class."""

    def test_default_values(self):
        with mock.patch.dict(os.environ, {}, clear=True):
            settings = RatioscaleSettings()

            assert settings.log_level == "WARNING"
            assert settings.debug is False
            assert settings.log_json is False

    def test_log_level_from_env(self):
        with mock.patch.dict(os.environ, {"RATIOSCALE_LOG_LEVEL": "DEBUG"}, clear=True):
            settings = RatioscaleSettings()
            assert settings.log_level == "DEBUG"
            assert settings.effective_log_level == "DEBUG"
            assert settings.log_level_int == logging.DEBUG

    def test_log_level_case_insensitive(self):
        with mock.patch.dict(os.environ, {"RATIOSCALE_LOG_LEVEL": "info"}, clear=True):
            settings = RatioscaleSettings()
            assert settings.log_level == "INFO"

    def test_invalid_log_level(self):
        with mock.patch.dict(os.environ, {"RATIOSCALE_LOG_LEVEL": "LOUD"}, clear=True):
            with pytest.raises(ValidationError):
                RatioscaleSettings()

    def test_legacy_debug_flag(self):
        """RATIOSCALE_DEBUG enables DEBUG when no level is set."""
        with mock.patch.dict(os.environ, {"RATIOSCALE_DEBUG": "1"}, clear=True):
            settings = RatioscaleSettings()
            assert settings.effective_log_level == "DEBUG"

    def test_explicit_level_wins_over_debug(self):
        env = {"RATIOSCALE_DEBUG": "1", "RATIOSCALE_LOG_LEVEL": "ERROR"}
        with mock.patch.dict(os.environ, env, clear=True):
            settings = RatioscaleSettings()
            assert settings.effective_log_level == "ERROR"

    def test_json_logging_flag(self):
        with mock.patch.dict(os.environ, {"RATIOSCALE_LOG_JSON": "true"}, clear=True):
            settings = RatioscaleSettings()
            assert settings.log_json is True


class TestSettingsAccessors:
    """Test the cached accessor and convenience helpers."""

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()

    def test_reset_settings_reloads(self):
        with mock.patch.dict(os.environ, {"RATIOSCALE_LOG_LEVEL": "ERROR"}, clear=True):
            reset_settings()
            first = get_settings()
            assert first.log_level == "ERROR"

        with mock.patch.dict(os.environ, {"RATIOSCALE_LOG_LEVEL": "INFO"}, clear=True):
            reset_settings()
            second = get_settings()
            assert second.log_level == "INFO"
            assert second is not first

    def test_is_json_logging(self):
        with mock.patch.dict(os.environ, {"RATIOSCALE_LOG_JSON": "1"}, clear=True):
            reset_settings()
            assert is_json_logging() is True
