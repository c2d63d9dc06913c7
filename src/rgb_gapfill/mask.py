"""Gap mask construction.

A pixel is a gap when *every* channel matches its sentinel. The
comparison is a single broadcast over the whole image.
"""

from __future__ import annotations

import logging

import numpy as np

from rgb_gapfill.validation import GapValue

logger = logging.getLogger(__name__)


def build_gap_mask(
    image: np.ndarray,
    gap_value: GapValue,
) -> np.ndarray | None:
    """Build the 2-D gap mask for a ``(rows, cols, 3)`` image.

    Float images are compared in their own precision, so a ``float32``
    pixel set to ``0.1`` matches a sentinel of ``0.1``. Integer images
    are compared in ``float64``.

    Args:
        image: Input image in its own dtype.
        gap_value: Normalized sentinel.

    Returns:
        Boolean ``(rows, cols)`` array, ``True`` at gap pixels, or
        ``None`` when *gap_value* is the missing marker. In that case no
        masking is performed and the ``NaN`` entries already present in
        the image are the gaps.
    """
    if gap_value.is_missing_marker:
        logger.debug("Gap value is the missing marker; masking skipped.")
        return None

    sentinel = gap_value.per_channel()
    if image.dtype.kind == "f":
        with np.errstate(over="ignore"):
            sentinel = sentinel.astype(image.dtype)

    # (rows, cols, 3) == (3,) compares each channel with its own sentinel.
    matches = image == sentinel
    mask = np.all(matches, axis=2)
    logger.debug(
        "Gap mask selects %d of %d pixels", int(mask.sum()), mask.size
    )
    return mask


def missing_pixels(working: np.ndarray) -> np.ndarray:
    """Mask of pixels with at least one ``NaN`` channel."""
    return np.isnan(working).any(axis=2)


def mark_missing(working: np.ndarray, mask: np.ndarray) -> np.ndarray:
    """Return a copy of *working* with all channels of gap pixels set to NaN."""
    marked = working.copy()
    marked[mask] = np.nan
    return marked
