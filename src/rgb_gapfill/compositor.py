"""Write interpolated values back into gap pixels only."""

from __future__ import annotations

import numpy as np


def composite(
    original: np.ndarray,
    estimate: np.ndarray,
    mask: np.ndarray,
) -> np.ndarray:
    """Replace gap pixels of *original* with the matching *estimate* pixels.

    Args:
        original: Untouched working copy of the input, ``(rows, cols, 3)``.
        estimate: Combined directional estimate, same shape.
        mask: Boolean ``(rows, cols)`` gap mask.

    Returns:
        New array; pixels outside *mask* are copied from *original*
        unchanged.
    """
    result = original.copy()
    result[mask] = estimate[mask]
    return result
