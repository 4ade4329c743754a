"""
Scales for ratioscale.

A scale maps an absolute range to ratio space [0, 1] and back. Any two
scales convert between each other through that shared ratio space.
"""

from .base import BaseScale, Scale, ToAbsolute, ToRatio
from .builtin import (
    ClampedScale,
    LinearScale,
    LogarithmicScale,
    NoopScale,
    RasteredLinearScale,
    clamped,
    linear_scale,
    logarithmic_scale,
    noop_scale,
    rastered_linear_scale,
)
from .converters import NoopScaleConverter, ScaleConverter, noop_scale_converter
from .loader import load_scales
from .models import ScaleConfig
from .registry import (
    ScaleRegistry,
    build_scale,
    get_scale_registry,
    parse_scale_spec,
    reset_scale_registry,
)

__all__ = [
    "BaseScale",
    "ClampedScale",
    "LinearScale",
    "LogarithmicScale",
    "NoopScale",
    "NoopScaleConverter",
    "RasteredLinearScale",
    "Scale",
    "ScaleConfig",
    "ScaleConverter",
    "ScaleRegistry",
    "ToAbsolute",
    "ToRatio",
    "build_scale",
    "clamped",
    "get_scale_registry",
    "linear_scale",
    "load_scales",
    "logarithmic_scale",
    "noop_scale",
    "noop_scale_converter",
    "parse_scale_spec",
    "rastered_linear_scale",
    "reset_scale_registry",
]
