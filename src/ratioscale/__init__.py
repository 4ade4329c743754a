"""
ratioscale - bounded scales with a shared ratio space

Maps values between an absolute range (pixels, slider positions, decibels)
and a normalized ratio in [0, 1], and converts values between two scales
through that ratio.

Usage as library:
    from ratioscale import linear_scale, logarithmic_scale

    linear = linear_scale(0, 100)
    log = logarithmic_scale(-1000, -1)
    linear.convert_to(log, 50)        # -31.62...
    linear.apply_delta_to(log, 10, -100)

Usage as CLI:
    python -m ratioscale convert linear:0:100 log:-1000:-1 0 50 100
    python -m ratioscale demo

Package structure:
    ratioscale/
    ├── core/           # Shared infrastructure
    │   ├── config.py   # Environment settings
    │   ├── errors.py   # Configuration exceptions
    │   └── logging.py  # Logger setup
    └── scales/         # Scale implementations
        ├── base.py     # Scale protocol and shared conversions
        ├── builtin.py  # Linear, rastered, logarithmic, no-op, clamped
        ├── registry.py # Named factories, dict/spec-string builders
        └── loader.py   # YAML scale files
"""

__version__ = "1.0.0"

from .core import ScaleConfigError, ScaleError, UnknownScaleTypeError
from .scales import (
    ClampedScale,
    LinearScale,
    LogarithmicScale,
    NoopScale,
    NoopScaleConverter,
    RasteredLinearScale,
    Scale,
    ScaleConfig,
    ScaleConverter,
    build_scale,
    clamped,
    linear_scale,
    load_scales,
    logarithmic_scale,
    noop_scale,
    noop_scale_converter,
    parse_scale_spec,
    rastered_linear_scale,
)

__all__ = [
    "__version__",
    "ClampedScale",
    "LinearScale",
    "LogarithmicScale",
    "NoopScale",
    "NoopScaleConverter",
    "RasteredLinearScale",
    "Scale",
    "ScaleConfig",
    "ScaleConfigError",
    "ScaleConverter",
    "ScaleError",
    "UnknownScaleTypeError",
    "build_scale",
    "clamped",
    "linear_scale",
    "load_scales",
    "logarithmic_scale",
    "noop_scale",
    "noop_scale_converter",
    "parse_scale_spec",
    "rastered_linear_scale",
]
