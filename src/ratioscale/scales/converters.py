"""
Value converters.

A converter maps between a host's internal value representation and the
value shown externally. It is independent of ratio space.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@runtime_checkable
class ScaleConverter(Protocol):
    """Pluggable internal/external value mapping."""

    def to_internal(self, value: float) -> float:
        """Map an external value to the internal representation."""
        ...

    def to_external(self, value: float) -> float:
        """Map an internal value to the external representation."""
        ...


@dataclass(frozen=True)
class NoopScaleConverter:
    """Identity converter, the default where no conversion is configured."""

    def to_internal(self, value: float) -> float:
        return value

    def to_external(self, value: float) -> float:
        return value


def noop_scale_converter() -> NoopScaleConverter:
    """Create an identity converter."""
    return NoopScaleConverter()
