"""1-D interpolation methods used for the directional passes."""

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
from rgb_gapfill.methods.registry import InterpolationMethod

__all__ = [
    "BaseInterpolator",
    "InterpolationMethod",
    "LinearInterpolator",
    "NearestInterpolator",
    "NextInterpolator",
    "PchipInterpolator1D",
    "PreviousInterpolator",
    "SplineInterpolator",
]
