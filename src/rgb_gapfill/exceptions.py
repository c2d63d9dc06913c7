"""Custom exception hierarchy for RGB gap filling.

All domain-specific exceptions inherit from :class:`GapFillError`, which
itself inherits from :class:`Exception`. Each concrete error also inherits
from the matching builtin so callers can catch broad (``except
GapFillError``), narrow (``except ShapeError``) or builtin (``except
ValueError``) depending on context.
"""

from __future__ import annotations


class GapFillError(Exception):
    """Base exception for all gap-filling errors."""


class ShapeError(GapFillError, ValueError):
    """Raised when the image or gap value has an invalid shape.

    Covers images that are not rank 3, images without exactly three
    channels, and gap values that are neither 1x1 nor 1x3.
    """


class DTypeError(GapFillError, TypeError):
    """Raised when an argument has an unsupported element type.

    Inherits from both :class:`GapFillError` and :class:`TypeError`.
    """


class ArityError(GapFillError, TypeError):
    """Raised when a mandatory argument (the method) is omitted."""


class ConfigError(GapFillError, ValueError):
    """Raised when options or a configuration file are invalid."""


class InterpolationError(GapFillError, RuntimeError):
    """Raised when a 1-D interpolation kernel fails unexpectedly.

    Gaps that simply cannot be resolved by a method are *not* errors;
    they stay missing in the output.
    """
