"""
Ratioscale Centralized Configuration

Provides validated, type-safe access to environment variables using Pydantic Settings.

Usage:
    from ratioscale.core.config import get_settings

    settings = get_settings()
    if settings.log_level == "DEBUG":
        ...

Environment Variables:
    RATIOSCALE_LOG_LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    RATIOSCALE_DEBUG: Legacy debug flag (enables DEBUG level if set)
    RATIOSCALE_LOG_JSON: Output logs as JSON
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _find_project_env_file() -> Path | None:
    """
    Find .env file by searching for project root markers.

    Searches upward from this file's location for pyproject.toml,
    then checks for .env in that directory.

    Returns:
        Path to .env if found, None otherwise
    """
    current = Path(__file__).resolve().parent

    for _ in range(10):  # Limit search depth
        if (current / "pyproject.toml").exists():
            env_file = current / ".env"
            if env_file.exists():
                return env_file
            return None
        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


_ENV_FILE = _find_project_env_file()


class RatioscaleSettings(BaseSettings):
    """
    Ratioscale configuration settings with validation.

    Environment variables are loaded with the RATIOSCALE_ prefix.
    """

    model_config = SettingsConfigDict(
        env_prefix="RATIOSCALE_",
        env_file=_ENV_FILE,
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING",
        description="Log level for ratioscale loggers",
    )

    debug: bool = Field(
        default=False,
        description="Legacy debug flag (enables DEBUG level if set)",
    )

    log_json: bool = Field(
        default=False,
        description="Output logs in JSON format for machine parsing",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def uppercase_log_level(cls, v: str) -> str:
        """Normalize log level to uppercase."""
        if isinstance(v, str):
            return v.upper()
        return v

    @property
    def effective_log_level(self) -> str:
        """
        Get effective log level, respecting RATIOSCALE_DEBUG.

        Priority:
        1. Explicit RATIOSCALE_LOG_LEVEL
        2. RATIOSCALE_DEBUG=1 -> DEBUG
        3. Default: WARNING
        """
        if self.debug and self.log_level == "WARNING":
            return "DEBUG"
        return self.log_level

    @property
    def log_level_int(self) -> int:
        """Get effective log level as logging constant."""
        return getattr(logging, self.effective_log_level)


@lru_cache(maxsize=1)
def get_settings() -> RatioscaleSettings:
    """
    Get the singleton settings instance.

    The settings are validated at first access.
    """
    return RatioscaleSettings()


def reset_settings() -> None:
    """
    Reset the settings cache (for testing).

    After calling this, the next get_settings() call will
    reload settings from environment variables.
    """
    get_settings.cache_clear()


def is_json_logging() -> bool:
    """Check if JSON logging is enabled."""
    return get_settings().log_json
