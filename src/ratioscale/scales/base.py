"""
Scale Protocols for ratioscale.

Defines the capability contract every scale satisfies. All conversions
go through ratio space: a scale turns an absolute value of its own range
into a ratio (0 at the natural start, 1 at the natural end) and back.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Protocol, runtime_checkable

ToRatio = Callable[[float], float]
ToAbsolute = Callable[[float], float]


# =============================================================================
# Scale Protocol
# =============================================================================


@runtime_checkable
class Scale(Protocol):
    """
    Protocol for all scales.

    A scale is an immutable coordinate system over [min, max]. Any object
    exposing these members can take part in cross-scale conversion.
    """

    @property
    def min(self) -> float:
        """Absolute lower bound (may exceed max)."""
        ...

    @property
    def max(self) -> float:
        """Absolute upper bound."""
        ...

    def to_ratio(self, absolute: float) -> float:
        """Map an absolute value of this scale to ratio space."""
        ...

    def to_absolute(self, ratio: float) -> float:
        """Map a ratio to an absolute value of this scale."""
        ...

    def convert_to(self, other: Scale, value: float) -> float:
        """
        Convert an absolute value of this scale into other's units.

        Args:
            other: Target scale
            value: Absolute value in this scale

        Returns:
            Absolute value in the other scale
        """
        ...

    def apply_delta_to(self, other: Scale, delta: float, other_current: float) -> float:
        """
        Apply a delta in this scale's units to a position tracked in other's units.

        Args:
            other: Scale in which the position is tracked
            delta: Difference in this scale's absolute units
            other_current: Current position in the other scale's units

        Returns:
            New position in the other scale's units
        """
        ...


# =============================================================================
# Shared cross-scale operations
# =============================================================================


def convert_scale_to(other: Scale, value: float, to_ratio: ToRatio) -> float:
    """Bridge two scales through ratio space."""
    ratio = to_ratio(value)
    return other.to_absolute(ratio)


def apply_delta_to_scale(
    other: Scale,
    delta: float,
    other_current: float,
    to_absolute: ToAbsolute,
    to_ratio: ToRatio,
) -> float:
    """
    Move other_current by delta, where delta is measured by to_absolute/to_ratio.

    other_current -> ratio (other) -> absolute (self) + delta
    -> ratio (self) -> absolute (other)
    """
    current_ratio = other.to_ratio(other_current)
    current_abs = to_absolute(current_ratio)
    new_abs = current_abs + delta
    new_ratio = to_ratio(new_abs)
    return other.to_absolute(new_ratio)


class BaseScale(ABC):
    """
    Base implementation for scales.

    Subclasses implement to_ratio() and to_absolute(); cross-scale
    conversion is derived from them.
    """

    min: float
    max: float

    @abstractmethod
    def to_ratio(self, absolute: float) -> float:
        """Map an absolute value to ratio space."""
        ...

    @abstractmethod
    def to_absolute(self, ratio: float) -> float:
        """Map a ratio to an absolute value."""
        ...

    def convert_to(self, other: Scale, value: float) -> float:
        """Convert value into other's absolute units."""
        return convert_scale_to(other, value, self.to_ratio)

    def apply_delta_to(self, other: Scale, delta: float, other_current: float) -> float:
        """Apply a delta in this scale's units to other_current."""
        return apply_delta_to_scale(
            other,
            delta,
            other_current,
            self.to_absolute,
            self.to_ratio,
        )
