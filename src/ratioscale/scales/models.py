"""
Declarative scale configuration models.

Describes a scale as data so that scales can be defined in files or
passed around as dicts. Validation is structural only: numeric
degeneracy (empty ranges, mixed-sign log ranges) is accepted and left to
propagate as NaN/Infinity.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

BOUNDED_TYPES = frozenset({"linear", "rastered", "log"})

SCALE_TYPE_ALIASES: dict[str, str] = {
    "lin": "linear",
    "rastered_linear": "rastered",
    "raster": "rastered",
    "logarithmic": "log",
    "identity": "noop",
}


def normalize_type_name(name: str) -> str:
    """Lowercase a scale type name and resolve aliases."""
    name = name.strip().lower()
    return SCALE_TYPE_ALIASES.get(name, name)


class ScaleModel(BaseModel):
    """
    Base model for scale configuration.

    Configuration:
    - frozen: Prevents accidental mutation, enables hashing
    - extra="forbid": Catches typos in field names during construction
    """

    model_config = ConfigDict(frozen=True, extra="forbid")


class ScaleConfig(ScaleModel):
    """
    Configuration for a single scale.

    Example:
        ScaleConfig(type="rastered", min=0, max=200, step_size=1)
    """

    type: str = Field(description="Scale type name (linear, rastered, log, noop)")
    min: Optional[float] = Field(default=None, description="Absolute value at ratio 0")
    max: Optional[float] = Field(default=None, description="Absolute value at ratio 1")
    step_size: Optional[float] = Field(default=None, description="Raster width")
    inverted: bool = Field(default=False, description="Flip the ratio direction")
    clamped: bool = Field(default=False, description="Clamp ratios and absolutes")

    @model_validator(mode="before")
    @classmethod
    def normalize_type(cls, data: object) -> object:
        """Lowercase the type name and resolve aliases."""
        if isinstance(data, dict) and isinstance(data.get("type"), str):
            data = {**data, "type": normalize_type_name(data["type"])}
        return data

    @model_validator(mode="after")
    def check_required_bounds(self) -> ScaleConfig:
        """
        Check fields against the built-in type.

        Bounded types need min and max, only rastered takes step_size,
        and noop takes neither. Registered custom types are not checked.
        """
        if self.type == "noop":
            stray = [
                name for name in ("min", "max", "step_size") if getattr(self, name) is not None
            ]
            if stray:
                raise ValueError(f"scale type 'noop' does not accept {stray}")
            return self
        if self.type not in BOUNDED_TYPES:
            return self
        if self.min is None or self.max is None:
            raise ValueError(f"scale type {self.type!r} requires 'min' and 'max'")
        if self.type == "rastered" and self.step_size is None:
            raise ValueError("scale type 'rastered' requires 'step_size'")
        if self.type != "rastered" and self.step_size is not None:
            raise ValueError(f"scale type {self.type!r} does not accept 'step_size'")
        return self
