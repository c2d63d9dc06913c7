"""Input validation for RGB gap filling.

All checks run before any computation, so a rejected call never leaves
partially processed data behind.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

import numpy as np

from rgb_gapfill.exceptions import DTypeError, ShapeError
from rgb_gapfill.representation import SUPPORTED_DTYPES

MISSING = math.nan
"""The missing marker. Passing it as the gap value means the image
already encodes its gaps as ``NaN``."""

N_CHANNELS = 3
DEFAULT_GAP_VALUE = 0.0

_NUMERIC_KINDS = frozenset("iuf")


@dataclass(frozen=True)
class GapValue:
    """Normalized sentinel: one value for all channels, or one per channel."""

    values: tuple[float, ...]

    @property
    def is_scalar(self) -> bool:
        return len(self.values) == 1

    @property
    def is_missing_marker(self) -> bool:
        """True when any component is ``NaN``.

        Equality against ``NaN`` is never true, so such a sentinel cannot
        select pixels; the image's own ``NaN`` entries are the gaps.
        """
        return any(math.isnan(v) for v in self.values)

    def per_channel(self) -> np.ndarray:
        """Return the sentinel broadcast to shape ``(3,)``."""
        return np.broadcast_to(
            np.asarray(self.values, dtype=np.float64), (N_CHANNELS,)
        ).copy()


def validate_image(image: Any) -> np.ndarray:
    """Check that *image* is an ``(rows, cols, 3)`` array of a supported dtype.

    Args:
        image: Candidate RGB image.

    Returns:
        *image* as an ndarray (no copy when already an ndarray).

    Raises:
        ShapeError: If the rank is not 3 or the channel count is not 3.
        DTypeError: If the dtype is not ``uint8``, ``float32`` or
            ``float64``.
    """
    arr = np.asarray(image)
    if arr.ndim != 3:
        msg = (
            "Invalid number of dimensions for an RGB image "
            f"(expected 3), got ndim={arr.ndim}, shape={arr.shape}"
        )
        raise ShapeError(msg)
    if arr.shape[2] != N_CHANNELS:
        msg = (
            "Invalid RGB channel count "
            f"(expected {N_CHANNELS}), got shape={arr.shape}"
        )
        raise ShapeError(msg)
    if arr.dtype not in SUPPORTED_DTYPES:
        valid = [dt.name for dt in SUPPORTED_DTYPES]
        msg = f"Unsupported image dtype {arr.dtype.name!r}; valid: {valid}"
        raise DTypeError(msg)
    return arr


def normalize_gap_value(gap_value: Any = DEFAULT_GAP_VALUE) -> GapValue:
    """Validate and normalize the gap value.

    Accepts a real scalar, a 1x1 or 1x3 array-like, or :data:`MISSING`.
    ``None`` is treated as omitted and yields the default of 0. A 1x3
    value whose entries are all equal collapses to the scalar form.

    Raises:
        DTypeError: If the value is not numeric (booleans, strings,
            complex numbers and arbitrary objects are rejected).
        ShapeError: If the value is not 1x1 or 1x3.
    """
    if gap_value is None:
        return GapValue((DEFAULT_GAP_VALUE,))
    if isinstance(gap_value, (str, bytes)):
        msg = (
            "Invalid gap value type - should be numeric or NaN, "
            f"got {type(gap_value).__name__}"
        )
        raise DTypeError(msg)

    try:
        arr = np.asarray(gap_value)
    except ValueError as exc:
        msg = f"Gap value is not a rectangular array: {gap_value!r}"
        raise ShapeError(msg) from exc

    if arr.dtype.kind not in _NUMERIC_KINDS:
        msg = (
            "Invalid gap value type - should be numeric or NaN, "
            f"got dtype {arr.dtype.name!r}"
        )
        raise DTypeError(msg)

    if arr.ndim > 2 or arr.size not in (1, N_CHANNELS):
        msg = f"Incorrect gap value size {arr.shape} (valid: 1x1, 1x3)"
        raise ShapeError(msg)
    if arr.size == N_CHANNELS and arr.shape not in ((3,), (1, 3)):
        msg = f"Incorrect gap value size {arr.shape} (valid: 1x1, 1x3)"
        raise ShapeError(msg)

    values = tuple(float(v) for v in arr.ravel())
    if len(values) == N_CHANNELS and values[0] == values[1] == values[2]:
        values = values[:1]
    return GapValue(values)
