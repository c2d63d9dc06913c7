"""Directional interpolation along rows and along columns.

Each pass runs the 1-D method independently on every line of every
channel. The two passes are averaged into one estimate, which handles
gaps elongated along either axis better than a single pass would.
"""

from __future__ import annotations

import logging

import numpy as np

from rgb_gapfill.methods.base import BaseInterpolator

logger = logging.getLogger(__name__)

_ROW_AXIS = 0
_COL_AXIS = 1


def row_direction_estimate(
    marked: np.ndarray,
    interpolator: BaseInterpolator,
) -> np.ndarray:
    """Interpolate down the rows, one column and channel at a time."""
    return interpolator.fill_along_axis(marked, axis=_ROW_AXIS)


def column_direction_estimate(
    marked: np.ndarray,
    interpolator: BaseInterpolator,
) -> np.ndarray:
    """Interpolate across the columns, one row and channel at a time."""
    return interpolator.fill_along_axis(marked, axis=_COL_AXIS)


def combine_estimates(first: np.ndarray, second: np.ndarray) -> np.ndarray:
    """Elementwise mean of two estimates.

    ``NaN`` in either input stays ``NaN``: an entry unresolved along one
    axis is unresolved in the combined estimate.
    """
    return (first + second) / 2.0


def directional_estimate(
    marked: np.ndarray,
    interpolator: BaseInterpolator,
) -> np.ndarray:
    """Average of the row-direction and column-direction estimates.

    Args:
        marked: ``float64`` image with gaps marked ``NaN``.
        interpolator: 1-D method used for both passes.

    Returns:
        ``float64`` array with the shape of *marked*. Non-missing
        entries equal those of *marked* exactly.
    """
    by_rows = row_direction_estimate(marked, interpolator)
    by_cols = column_direction_estimate(marked, interpolator)
    combined = combine_estimates(by_rows, by_cols)

    unresolved = int(np.isnan(combined).sum())
    if unresolved:
        logger.debug(
            "%s left %d samples unresolved", interpolator.name, unresolved
        )
    return combined
