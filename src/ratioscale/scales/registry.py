"""
Scale Registry.

Maps scale type names to factories so that scales can be built from
declarative configs (dicts, YAML files, compact spec strings).
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from pydantic import ValidationError

from ..core.errors import ScaleConfigError, UnknownScaleTypeError
from ..core.logging import get_logger
from .base import Scale
from .builtin import (
    clamped,
    linear_scale,
    logarithmic_scale,
    noop_scale,
    rastered_linear_scale,
)
from .models import ScaleConfig, normalize_type_name

logger = get_logger(__name__)

ScaleFactory = Callable[[ScaleConfig], Scale]


class ScaleRegistry:
    """
    Registry of scale factories keyed by type name.

    Usage:
        registry = ScaleRegistry()
        registry.register("linear", lambda c: linear_scale(c.min, c.max, c.inverted))

        scale = registry.create(ScaleConfig(type="linear", min=0, max=100))
    """

    def __init__(self) -> None:
        self._factories: dict[str, ScaleFactory] = {}

    def register(self, name: str, factory: ScaleFactory) -> None:
        """
        Register a scale factory.

        Args:
            name: Type name referenced by ScaleConfig.type
            factory: Callable building a Scale from a ScaleConfig
        """
        key = name.lower()
        if key in self._factories:
            logger.debug(f"Replacing scale factory: {key}")
        self._factories[key] = factory
        logger.debug(f"Registered scale factory: {key}")

    def get(self, name: str) -> ScaleFactory | None:
        """Get the factory for a type name, or None if not registered."""
        return self._factories.get(name.lower())

    def list_types(self) -> list[str]:
        """List all registered type names."""
        return list(self._factories.keys())

    def create(self, config: ScaleConfig) -> Scale:
        """
        Build a scale from a validated config.

        Args:
            config: Scale configuration

        Returns:
            The scale, wrapped with clamped() when config.clamped is set

        Raises:
            UnknownScaleTypeError: If config.type has no registered factory
        """
        factory = self.get(config.type)
        if factory is None:
            raise UnknownScaleTypeError(config.type, self.list_types())

        scale = factory(config)
        if config.clamped:
            scale = clamped(scale)
        return scale


def _register_builtins(registry: ScaleRegistry) -> None:
    """Register the built-in scale types."""
    registry.register("linear", lambda c: linear_scale(c.min, c.max, c.inverted))
    registry.register(
        "rastered",
        lambda c: rastered_linear_scale(c.min, c.max, c.step_size, c.inverted),
    )
    registry.register("log", lambda c: logarithmic_scale(c.min, c.max, c.inverted))
    registry.register("noop", lambda c: noop_scale())


_registry: ScaleRegistry | None = None


def get_scale_registry() -> ScaleRegistry:
    """Get the shared registry, populated with the built-in scale types."""
    global _registry
    if _registry is None:
        _registry = ScaleRegistry()
        _register_builtins(_registry)
    return _registry


def reset_scale_registry() -> None:
    """Reset the shared registry (for testing)."""
    global _registry
    _registry = None


# =============================================================================
# Config entry points
# =============================================================================


def build_scale(
    config: ScaleConfig | dict[str, Any],
    registry: ScaleRegistry | None = None,
) -> Scale:
    """
    Build a scale from a config model or a plain dict.

    Args:
        config: ScaleConfig or dict with the same keys
        registry: Registry to use (default: shared registry)

    Returns:
        Scale instance

    Raises:
        ScaleConfigError: If the dict does not validate
        UnknownScaleTypeError: If the type is not registered
    """
    if not isinstance(config, ScaleConfig):
        try:
            config = ScaleConfig.model_validate(config)
        except ValidationError as e:
            raise ScaleConfigError(
                "Invalid scale config",
                details={"errors": [err["msg"] for err in e.errors()]},
            ) from e

    return (registry or get_scale_registry()).create(config)


_FLAGS = ("inverted", "clamped")
_POSITIONAL_KEYS: dict[str, tuple[str, ...]] = {
    "linear": ("min", "max"),
    "rastered": ("min", "max", "step_size"),
    "log": ("min", "max"),
    "noop": (),
}


def parse_scale_spec(text: str, registry: ScaleRegistry | None = None) -> Scale:
    """
    Build a scale from its compact textual form.

    Format:
        TYPE[:ARG...][:inverted][:clamped]

    Examples:
        linear:0:100
        rastered:0:200:5:inverted
        log:-1000:-1:clamped
        noop

    Raises:
        ScaleConfigError: If the text cannot be parsed
    """
    parts = [p.strip() for p in text.strip().split(":")]
    if not parts or not parts[0]:
        raise ScaleConfigError("Empty scale spec", details={"spec": text})

    data: dict[str, Any] = {"type": parts[0]}
    args: list[str] = []
    for part in parts[1:]:
        if part.lower() in _FLAGS:
            data[part.lower()] = True
        else:
            args.append(part)

    type_name = normalize_type_name(parts[0])
    keys = _POSITIONAL_KEYS.get(type_name, ("min", "max", "step_size"))
    if len(args) > len(keys):
        raise ScaleConfigError(
            f"Too many arguments for scale type {type_name!r}",
            details={"spec": text, "expected": list(keys)},
        )

    for key, raw in zip(keys, args):
        try:
            data[key] = float(raw)
        except ValueError as e:
            raise ScaleConfigError(
                f"Invalid number {raw!r} for {key!r}",
                details={"spec": text},
            ) from e

    return build_scale(data, registry)
