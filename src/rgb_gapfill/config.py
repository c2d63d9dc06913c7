"""Fill configuration.

Options are validated up front against a table of recognized keys and
exposed as a frozen dataclass. Configs can also be read from YAML::

    fill:
      method: linear
      gap_value: [0, 0, 0]
      output_dtype: uint8

A default config ships as ``config/default.yaml``.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from rgb_gapfill.exceptions import ArityError, ConfigError
from rgb_gapfill.methods.registry import InterpolationMethod, resolve_method
from rgb_gapfill.validation import (
    DEFAULT_GAP_VALUE,
    GapValue,
    normalize_gap_value,
)

logger = logging.getLogger(__name__)

_REQUIRED = object()

# Option name -> default (``_REQUIRED`` for mandatory options).
OPTIONS: dict[str, Any] = {
    "method": _REQUIRED,
    "gap_value": DEFAULT_GAP_VALUE,
    "output_dtype": "uint8",
}

VALID_OUTPUT_DTYPES = frozenset({"uint8", "input"})


@dataclass(frozen=True)
class FillConfig:
    """Validated options for one fill call.

    Attributes:
        method: 1-D interpolation method used for both directions.
        gap_value: Sentinel identifying gap pixels.
        output_dtype: ``"uint8"`` always converts the result to 8-bit;
            ``"input"`` keeps the input image's dtype.
    """

    method: InterpolationMethod
    gap_value: GapValue = field(
        default_factory=lambda: GapValue((DEFAULT_GAP_VALUE,))
    )
    output_dtype: str = "uint8"

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any]) -> FillConfig:
        """Build a config from a mapping of option name -> value.

        ``None`` values count as omitted.

        Raises:
            ArityError: If ``method`` is missing.
            ConfigError: If a key is unknown or a value is invalid.
            ShapeError: If ``gap_value`` has an invalid shape.
            DTypeError: If ``gap_value`` is not numeric.
        """
        _validate_keys(options)
        resolved = _apply_defaults(options)
        return cls(
            method=resolve_method(resolved["method"]),
            gap_value=normalize_gap_value(resolved["gap_value"]),
            output_dtype=_validate_output_dtype(resolved["output_dtype"]),
        )


def _validate_keys(options: Mapping[str, Any]) -> None:
    unknown = sorted(set(options) - set(OPTIONS))
    if unknown:
        msg = f"Unknown fill option(s) {unknown}. Valid: {sorted(OPTIONS)}"
        raise ConfigError(msg)


def _apply_defaults(options: Mapping[str, Any]) -> dict[str, Any]:
    resolved: dict[str, Any] = {}
    for key, default in OPTIONS.items():
        value = options.get(key)
        if value is None:
            if default is _REQUIRED:
                msg = f"Too few arguments: {key!r} is required"
                raise ArityError(msg)
            value = default
        resolved[key] = value
    return resolved


def _validate_output_dtype(value: Any) -> str:
    if not isinstance(value, str) or value not in VALID_OUTPUT_DTYPES:
        msg = (
            f"Invalid output_dtype {value!r}. "
            f"Valid: {sorted(VALID_OUTPUT_DTYPES)}"
        )
        raise ConfigError(msg)
    return value


def _validate_raw(raw: Any) -> Mapping[str, Any]:
    """Validate the raw YAML structure and return the ``fill`` section.

    Raises:
        ConfigError: If the ``fill`` key is missing or not a mapping.
    """
    if not isinstance(raw, dict) or "fill" not in raw:
        msg = "Config missing required top-level key: 'fill'"
        raise ConfigError(msg)
    section = raw["fill"]
    if not isinstance(section, dict):
        msg = "Config 'fill' must be a mapping"
        raise ConfigError(msg)
    return section


def load_config(path: str | Path) -> FillConfig:
    """Load a fill configuration from a YAML file.

    Args:
        path: Path to the YAML config file.

    Returns:
        Parsed FillConfig.

    Raises:
        FileNotFoundError: If the config file does not exist.
        ConfigError: If the structure or values are invalid.
        ArityError: If the ``method`` key is missing.
    """
    path = Path(path)
    if not path.exists():
        msg = f"Config file not found: {path}"
        raise FileNotFoundError(msg)

    with path.open() as fh:
        try:
            raw = yaml.safe_load(fh)
        except yaml.YAMLError as exc:
            msg = f"Could not parse config file {path}: {exc}"
            raise ConfigError(msg) from exc

    section = _validate_raw(raw)
    cfg = FillConfig.from_mapping(section)
    logger.debug("Loaded fill config from %s: %s", path, cfg)
    return cfg
