"""
Ratioscale Core Module

Shared infrastructure: configuration, logging and exceptions.
"""

from .config import RatioscaleSettings, get_settings, reset_settings
from .errors import ScaleConfigError, ScaleError, UnknownScaleTypeError
from .logging import get_logger

__all__ = [
    "RatioscaleSettings",
    "ScaleConfigError",
    "ScaleError",
    "UnknownScaleTypeError",
    "get_logger",
    "get_settings",
    "reset_settings",
]
