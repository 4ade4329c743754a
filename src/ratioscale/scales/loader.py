"""
YAML Scale Loader.

Loads named scale definitions from a YAML mapping:

    volume:
      type: log
      min: 0.001
      max: 1
    slider:
      type: rastered
      min: 0
      max: 200
      step_size: 1
      clamped: true
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from ..core.errors import ScaleConfigError
from ..core.logging import get_logger
from .base import Scale
from .registry import ScaleRegistry, build_scale

logger = get_logger(__name__)


def load_scale_configs(path: Path | str) -> dict[str, dict[str, Any]]:
    """
    Read raw scale configs from a YAML file.

    Raises:
        ScaleConfigError: If the file is missing, unparsable or not a mapping
    """
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ScaleConfigError(f"Cannot read scale file: {path}", details={"path": str(path)}) from e
    except yaml.YAMLError as e:
        raise ScaleConfigError(f"Invalid YAML in scale file: {path}", details={"path": str(path)}) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ScaleConfigError(
            "Scale file must contain a mapping of name -> config",
            details={"path": str(path)},
        )

    for name, entry in data.items():
        if not isinstance(entry, dict):
            raise ScaleConfigError(
                f"Scale {name!r} must be a mapping",
                details={"path": str(path), "scale": str(name)},
            )
    return {str(name): entry for name, entry in data.items()}


def load_scales(path: Path | str, registry: ScaleRegistry | None = None) -> dict[str, Scale]:
    """
    Build every scale defined in a YAML file.

    Args:
        path: YAML file with a mapping of name -> scale config
        registry: Registry to build with (default: shared registry)

    Returns:
        Dict of name -> Scale, in file order

    Raises:
        ScaleConfigError: If the file or any entry is invalid
    """
    scales: dict[str, Scale] = {}
    for name, entry in load_scale_configs(path).items():
        try:
            scales[name] = build_scale(entry, registry)
        except ScaleConfigError as e:
            raise ScaleConfigError(
                f"Scale {name!r}: {e.message}",
                details={**e.details, "scale": name},
            ) from e
        logger.debug(f"Loaded scale {name}: {scales[name]!r}")

    logger.info(f"Loaded {len(scales)} scales from {path}")
    return scales
