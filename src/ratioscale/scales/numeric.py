"""
IEEE-754 arithmetic helpers.

Python floats raise on division by zero and math.log10 raises on
non-positive input. Scales must instead produce NaN/Infinity, so every
operation that can leave the finite domain is evaluated through numpy
with floating-point warnings suppressed. All helpers return plain floats.
"""

from __future__ import annotations

import numpy as np

_QUIET = {"divide": "ignore", "invalid": "ignore", "over": "ignore", "under": "ignore"}


def divide(a: float, b: float) -> float:
    """IEEE division: x/0 -> +-inf, 0/0 -> nan."""
    with np.errstate(**_QUIET):
        return float(np.true_divide(np.float64(a), np.float64(b)))


def log10(x: float) -> float:
    """Base-10 logarithm: nan for negatives, -inf for zero."""
    with np.errstate(**_QUIET):
        return float(np.log10(np.float64(x)))


def pow10(x: float) -> float:
    """10**x, overflowing to inf instead of raising."""
    with np.errstate(**_QUIET):
        return float(np.power(10.0, np.float64(x)))


def sign(x: float) -> float:
    """-1.0, 0.0 or 1.0 (nan for nan)."""
    return float(np.sign(np.float64(x)))


def round_half_away(x: float) -> float:
    """Round to nearest integer, ties away from zero. nan/inf pass through."""
    value = np.float64(x)
    with np.errstate(**_QUIET):
        whole = np.trunc(value)
        # value - whole is exact; adding 0.5 first would round in floating point
        away = np.float64(np.abs(value - whole) >= 0.5)
        return float(whole + np.copysign(away, value))


def raster(x: float, step: float) -> float:
    """Snap x to the nearest multiple of step."""
    with np.errstate(**_QUIET):
        return float(np.float64(round_half_away(divide(x, step))) * np.float64(step))


def clamp(x: float, lo: float, hi: float) -> float:
    """
    max(lo, min(x, hi)) with nan propagation.

    When lo > hi the result is always lo.
    """
    with np.errstate(**_QUIET):
        return float(np.maximum(np.float64(lo), np.minimum(np.float64(x), np.float64(hi))))
