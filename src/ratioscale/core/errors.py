"""
Ratioscale Exceptions

Numeric scale operations never raise; invalid ranges propagate as
NaN/Infinity. Only the declarative configuration surface (configs,
spec strings, YAML files, registry lookups) raises these.
"""

from __future__ import annotations

from typing import Any, Optional


class ScaleError(Exception):
    """Base exception for ratioscale configuration errors."""

    error_type = "scale_error"

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Convert error to JSON-serializable dict."""
        result: dict[str, Any] = {"error": self.error_type, "message": self.message}
        if self.details:
            result["details"] = self.details
        return result


class ScaleConfigError(ScaleError):
    """Raised when a scale config, spec string or file is malformed."""

    error_type = "invalid_scale_config"


class UnknownScaleTypeError(ScaleConfigError):
    """Raised when a scale type name has no registered factory."""

    error_type = "unknown_scale_type"

    def __init__(self, type_name: str, known: list[str]) -> None:
        self.type_name = type_name
        super().__init__(
            f"Unknown scale type: {type_name!r}",
            details={"known_types": sorted(known)},
        )
