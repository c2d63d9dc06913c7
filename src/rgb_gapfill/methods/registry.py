"""Centralized method registry and factory for 1-D interpolation methods.

Provides :class:`InterpolationMethod`, the closed set of method names,
:func:`get_interpolator` to instantiate methods by name, and
:func:`list_methods`, :func:`list_aliases` and :func:`get_all_methods`
for introspection.
"""

from __future__ import annotations

import logging
from enum import Enum

from rgb_gapfill.exceptions import ConfigError
from rgb_gapfill.methods.base import BaseInterpolator
from rgb_gapfill.methods.carry import (
    NearestInterpolator,
    NextInterpolator,
    PreviousInterpolator,
)
from rgb_gapfill.methods.curve import (
    LinearInterpolator,
    PchipInterpolator1D,
    SplineInterpolator,
)

logger = logging.getLogger(__name__)


class InterpolationMethod(str, Enum):
    """The six supported 1-D interpolation strategies."""

    PREVIOUS = "previous"
    NEXT = "next"
    NEAREST = "nearest"
    LINEAR = "linear"
    SPLINE = "spline"
    PCHIP = "pchip"

    def __str__(self) -> str:
        return self.value


# Canonical name -> implementing class.
_METHOD_MAP: dict[InterpolationMethod, type[BaseInterpolator]] = {
    # --- neighbour carry ---
    InterpolationMethod.PREVIOUS: PreviousInterpolator,
    InterpolationMethod.NEXT: NextInterpolator,
    InterpolationMethod.NEAREST: NearestInterpolator,
    # --- curve fitting ---
    InterpolationMethod.LINEAR: LinearInterpolator,
    InterpolationMethod.SPLINE: SplineInterpolator,
    InterpolationMethod.PCHIP: PchipInterpolator1D,
}

# Convenience aliases so config files can use either name.
_ALIASES: dict[str, str] = {
    "prev": "previous",
    "nearest_neighbor": "nearest",
    "cubic": "pchip",
}


def resolve_method(name: str | InterpolationMethod) -> InterpolationMethod:
    """Resolve a name, alias or enum member to an :class:`InterpolationMethod`.

    Args:
        name: Method name or alias, case-insensitive.

    Returns:
        Canonical method.

    Raises:
        ConfigError: If the name is unknown or not a string.
    """
    if isinstance(name, InterpolationMethod):
        return name
    if not isinstance(name, str):
        msg = f"Method must be a string, got {type(name).__name__}"
        raise ConfigError(msg)

    key = name.strip().lower()
    key = _ALIASES.get(key, key)
    try:
        return InterpolationMethod(key)
    except ValueError:
        valid = sorted({*list_methods(), *_ALIASES})
        msg = f"Unknown method {name!r}. Valid names: {valid}"
        raise ConfigError(msg) from None


def get_interpolator(name: str | InterpolationMethod) -> BaseInterpolator:
    """Instantiate an interpolation method by name.

    Args:
        name: Method name, alias or :class:`InterpolationMethod`.

    Returns:
        An initialized :class:`BaseInterpolator` instance.

    Raises:
        ConfigError: If the method name is unknown.
    """
    method = resolve_method(name)
    cls = _METHOD_MAP[method]
    logger.debug("Instantiating method %s (%s)", method, cls.__name__)
    return cls()


def list_methods() -> list[str]:
    """Return all canonical method names (sorted)."""
    return sorted(m.value for m in InterpolationMethod)


def list_aliases() -> dict[str, str]:
    """Return all alias -> canonical name mappings."""
    return dict(_ALIASES)


def get_all_methods() -> dict[str, type[BaseInterpolator]]:
    """Return canonical name -> class for every method."""
    return {m.value: cls for m, cls in _METHOD_MAP.items()}
