"""rgb_gapfill - fill sentinel-marked gaps in RGB images.

Public API exports for the library.
"""

from rgb_gapfill.config import FillConfig, load_config
from rgb_gapfill.exceptions import (
    ArityError,
    ConfigError,
    DTypeError,
    GapFillError,
    InterpolationError,
    ShapeError,
)
from rgb_gapfill.fill import GapFiller, fill_missing_rgb
from rgb_gapfill.methods.base import BaseInterpolator
from rgb_gapfill.methods.registry import (
    InterpolationMethod,
    get_interpolator,
    list_methods,
)
from rgb_gapfill.validation import MISSING

__all__ = [
    "MISSING",
    "ArityError",
    "BaseInterpolator",
    "ConfigError",
    "DTypeError",
    "FillConfig",
    "GapFillError",
    "GapFiller",
    "InterpolationError",
    "InterpolationMethod",
    "ShapeError",
    "fill_missing_rgb",
    "get_interpolator",
    "list_methods",
    "load_config",
]
