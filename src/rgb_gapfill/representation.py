"""Conversions between the caller's image type and the working type.

Images enter as ``uint8``, ``float32`` or ``float64`` and are promoted to
``float64`` for computation so that sentinel comparisons are exact and
``NaN`` can be embedded as the missing marker. On exit the result is
converted to the canonical output representation.

The ``uint8`` conversion follows the usual saturating integer cast:
``NaN`` becomes 0, values are clipped to ``[0, 255]`` and rounded half
away from zero (``254.5 -> 255``, ``0.5 -> 1``).
"""

from __future__ import annotations

import numpy as np

SUPPORTED_DTYPES = (
    np.dtype(np.uint8),
    np.dtype(np.float32),
    np.dtype(np.float64),
)
WORKING_DTYPE = np.dtype(np.float64)

_UINT8_MAX = 255.0


def to_working(image: np.ndarray) -> np.ndarray:
    """Return a ``float64`` copy of *image*.

    The promotion is exact for every supported input dtype.
    """
    return np.array(image, dtype=WORKING_DTYPE, copy=True)


def to_uint8(arr: np.ndarray) -> np.ndarray:
    """Saturating cast to ``uint8`` with round-half-away-from-zero."""
    out = np.nan_to_num(arr, nan=0.0, posinf=_UINT8_MAX, neginf=0.0)
    out = np.clip(out, 0.0, _UINT8_MAX)
    # Non-negative after clipping, so floor(x + 0.5) rounds half up.
    return np.floor(out + 0.5).astype(np.uint8)


def to_output(working: np.ndarray, dtype: np.dtype | type) -> np.ndarray:
    """Convert a working array to the output representation.

    Args:
        working: ``float64`` array, possibly containing ``NaN``.
        dtype: Target dtype. ``uint8`` uses :func:`to_uint8`; float
            targets are a plain cast, so unresolved gaps stay ``NaN``.

    Returns:
        New array of the requested dtype.
    """
    dtype = np.dtype(dtype)
    if dtype == np.uint8:
        return to_uint8(working)
    return working.astype(dtype, copy=True)
