"""Curve-fitting methods: linear, spline and pchip.

The anchors of a line are fitted with a piecewise polynomial from
:mod:`scipy.interpolate`, which is then evaluated at the gap positions.
Gaps outside the anchor range are extrapolated with the same curve.
Infinite samples are not used as anchors; a line with fewer than two
finite anchors keeps its gaps missing.
"""

from __future__ import annotations

from abc import abstractmethod

import numpy as np
from scipy.interpolate import CubicSpline, PchipInterpolator, interp1d

from rgb_gapfill.exceptions import InterpolationError
from rgb_gapfill.methods.base import BaseInterpolator

# ---------------------------------------------------------------------------
# Module-level constants
# ---------------------------------------------------------------------------
_MIN_CURVE_ANCHORS = 2
"""A curve through fewer than two points is undefined."""


class _CurveInterpolator(BaseInterpolator):
    """Shared evaluation for methods backed by a scipy interpolant."""

    min_anchors = _MIN_CURVE_ANCHORS

    @abstractmethod
    def _build(self, x: np.ndarray, y: np.ndarray):
        """Return a callable interpolant through the anchors."""

    def _fill_line(self, positions, values, anchors):
        # Infinite samples are kept as-is but do not shape the curve.
        usable = anchors & np.isfinite(values)
        result = values.copy()
        if usable.sum() < self.min_anchors:
            return result

        x = positions[usable].astype(np.float64)
        y = values[usable]
        gaps = positions[~anchors].astype(np.float64)

        try:
            curve = self._build(x, y)
            estimates = curve(gaps)
        except ValueError as exc:
            msg = f"{self.name} interpolation failed on {x.size} anchors"
            raise InterpolationError(msg) from exc

        result[~anchors] = estimates
        return result


class LinearInterpolator(_CurveInterpolator):
    r"""Piecewise linear interpolation between neighbouring anchors.

    For a gap at position :math:`t` between anchors :math:`(t_0, y_0)`
    and :math:`(t_1, y_1)`:

    .. math::

        f(t) = y_0 + (y_1 - y_0) \frac{t - t_0}{t_1 - t_0}

    The first and last segments are extended linearly past the ends.
    """

    name = "linear"

    def _build(self, x, y):
        return interp1d(
            x,
            y,
            kind="linear",
            fill_value="extrapolate",
            assume_sorted=True,
        )


class SplineInterpolator(_CurveInterpolator):
    """Cubic spline with not-a-knot end conditions.

    Two anchors give a straight line and three give a parabola, matching
    what the not-a-knot conditions reduce to on so few points.
    """

    name = "spline"

    def _build(self, x, y):
        return CubicSpline(x, y, bc_type="not-a-knot", extrapolate=True)


class PchipInterpolator1D(_CurveInterpolator):
    """Shape-preserving piecewise cubic Hermite interpolation.

    Does not overshoot between anchors, which keeps filled pixels inside
    the local intensity range on monotone stretches.
    """

    name = "pchip"

    def _build(self, x, y):
        return PchipInterpolator(x, y, extrapolate=True)
