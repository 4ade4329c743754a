"""
Built-in Scales.

Linear, rastered-linear, logarithmic and no-op scales, plus the clamped
decorator. None of them validate their input: degenerate ranges are
logged once at construction and then produce NaN/Infinity, never
exceptions.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from ..core.logging import get_logger
from . import numeric
from .base import BaseScale, Scale

logger = get_logger(__name__)


# =============================================================================
# Linear
# =============================================================================


@dataclass(frozen=True)
class LinearScale(BaseScale):
    """
    Direct proportion between [min, max] and [0, 1].

    max < min is allowed and inverts the mapping arithmetically;
    `inverted` is a second, independent flip. Values outside the range
    extrapolate to ratios outside [0, 1].

    Formula:
        ratio = (absolute - min) / (max - min)
        if inverted: ratio = 1 - ratio
    """

    min: float
    max: float
    inverted: bool = False

    def __post_init__(self) -> None:
        if self.min == self.max:
            logger.warning(
                f"Linear scale with empty range [{self.min}, {self.max}]; "
                "ratios will not be finite"
            )

    @property
    def span(self) -> float:
        """Signed width of the range."""
        return self.max - self.min

    def to_ratio(self, absolute: float) -> float:
        r = numeric.divide(absolute - self.min, self.span)
        if self.inverted:
            return 1.0 - r
        return r

    def to_absolute(self, ratio: float) -> float:
        if self.inverted:
            return self.min + (1.0 - ratio) * self.span
        return self.min + ratio * self.span


# =============================================================================
# Rastered Linear
# =============================================================================


@dataclass(frozen=True)
class RasteredLinearScale(BaseScale):
    """
    Linear scale whose absolute values snap to multiples of step_size.

    Models discrete UI controls, e.g. a slider that only stops at whole
    pixels. Input is snapped before conversion to a ratio and output is
    snapped after conversion from a ratio.
    """

    min: float
    max: float
    step_size: float
    inverted: bool = False
    _delegate: LinearScale = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not self.step_size > 0:
            logger.warning(f"Rastered scale with non-positive step size {self.step_size}")
        object.__setattr__(self, "_delegate", LinearScale(self.min, self.max, self.inverted))

    def to_ratio(self, absolute: float) -> float:
        rastered = numeric.raster(absolute, self.step_size)
        return self._delegate.to_ratio(rastered)

    def to_absolute(self, ratio: float) -> float:
        a = self._delegate.to_absolute(ratio)
        return numeric.raster(a, self.step_size)


# =============================================================================
# Logarithmic
# =============================================================================


@dataclass(frozen=True)
class LogarithmicScale(BaseScale):
    """
    Base-10 logarithmic scale over a range of one sign.

    The sign of min decides whether the range lies in positive or negative
    numbers. Log space always runs from the endpoint of smaller magnitude
    to the endpoint of larger magnitude, so for negative ranges ratio 0
    sits at max.

    Formula:
        ratio = (log10(sign * absolute) - log_min) / (log_max - log_min)
        absolute = sign * 10 ** (log_min + ratio * (log_max - log_min))

    Absolute values must share the sign of the range and be nonzero;
    anything else yields NaN or -Infinity.
    """

    min: float
    max: float
    inverted: bool = False
    sign: float = field(init=False, repr=False, compare=False)
    log_min: float = field(init=False, repr=False, compare=False)
    log_max: float = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        sign = numeric.sign(self.min)
        if sign < 0:
            log_min = numeric.log10(sign * self.max)
            log_max = numeric.log10(sign * self.min)
        else:
            log_min = numeric.log10(sign * self.min)
            log_max = numeric.log10(sign * self.max)

        object.__setattr__(self, "sign", sign)
        object.__setattr__(self, "log_min", log_min)
        object.__setattr__(self, "log_max", log_max)

        if self.min == 0 or self.max == 0 or sign != numeric.sign(self.max):
            logger.warning(
                f"Logarithmic scale [{self.min}, {self.max}] needs nonzero endpoints "
                "of the same sign"
            )
        elif log_min == log_max:
            logger.warning(
                f"Logarithmic scale with empty range [{self.min}, {self.max}]; "
                "ratios will not be finite"
            )

    @property
    def log_span(self) -> float:
        """Width of the range in decades."""
        return self.log_max - self.log_min

    def to_ratio(self, absolute: float) -> float:
        log_abs = numeric.log10(self.sign * absolute)
        r = numeric.divide(log_abs - self.log_min, self.log_span)
        if self.inverted:
            return 1.0 - r
        return r

    def to_absolute(self, ratio: float) -> float:
        if self.inverted:
            log_abs = self.log_min + (1.0 - ratio) * self.log_span
        else:
            log_abs = self.log_min + ratio * self.log_span
        return self.sign * numeric.pow10(log_abs)


# =============================================================================
# No-op
# =============================================================================


@dataclass(frozen=True)
class NoopScale(BaseScale):
    """
    Identity scale: ratio space equals absolute space.

    Used as a placeholder where no transformation is wanted. Its bounds
    are the whole real line.
    """

    min: float = field(default=-math.inf, init=False)
    max: float = field(default=math.inf, init=False)

    def to_ratio(self, absolute: float) -> float:
        return absolute

    def to_absolute(self, ratio: float) -> float:
        return ratio

    def convert_to(self, other: Scale, value: float) -> float:
        """Return value unchanged; other is ignored."""
        return value

    def apply_delta_to(self, other: Scale, delta: float, other_current: float) -> float:
        """Return other_current + delta; other is ignored."""
        return other_current + delta


# =============================================================================
# Clamped decorator
# =============================================================================


@dataclass(frozen=True)
class ClampedScale(BaseScale):
    """
    Wraps a scale, clamping ratios to [0, 1] and absolutes to [min, max].

    Only to_ratio() and to_absolute() are clamped. convert_to() and
    apply_delta_to() are those of the wrapped scale and therefore run
    through its unclamped conversions.
    """

    scale: Scale

    @property
    def min(self) -> float:  # type: ignore[override]
        return self.scale.min

    @property
    def max(self) -> float:  # type: ignore[override]
        return self.scale.max

    def to_ratio(self, absolute: float) -> float:
        return numeric.clamp(self.scale.to_ratio(absolute), 0.0, 1.0)

    def to_absolute(self, ratio: float) -> float:
        return numeric.clamp(self.scale.to_absolute(ratio), self.min, self.max)

    def convert_to(self, other: Scale, value: float) -> float:
        return self.scale.convert_to(other, value)

    def apply_delta_to(self, other: Scale, delta: float, other_current: float) -> float:
        return self.scale.apply_delta_to(other, delta, other_current)


# =============================================================================
# Factory functions
# =============================================================================


def linear_scale(min_value: float, max_value: float, inverted: bool = False) -> LinearScale:
    """Create a linear scale over [min_value, max_value]."""
    return LinearScale(min_value, max_value, inverted)


def rastered_linear_scale(
    min_value: float,
    max_value: float,
    step_size: float,
    inverted: bool = False,
) -> RasteredLinearScale:
    """
    Create a linear scale that snaps absolute values to step_size.

    Args:
        min_value: Absolute value at ratio 0
        max_value: Absolute value at ratio 1
        step_size: Raster width (must be positive; not validated)
        inverted: Flip the ratio direction

    Returns:
        RasteredLinearScale
    """
    return RasteredLinearScale(min_value, max_value, step_size, inverted)


def logarithmic_scale(
    min_value: float,
    max_value: float,
    inverted: bool = False,
) -> LogarithmicScale:
    """Create a base-10 logarithmic scale over [min_value, max_value]."""
    return LogarithmicScale(min_value, max_value, inverted)


def noop_scale() -> NoopScale:
    """Create an identity scale."""
    return NoopScale()


def clamped(scale: Scale) -> ClampedScale:
    """Wrap scale so that its ratios and absolutes stay within bounds."""
    return ClampedScale(scale)
