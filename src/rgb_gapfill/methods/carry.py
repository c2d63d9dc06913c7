"""Neighbour-carry methods: previous, next and nearest.

Each missing entry takes the value of an anchor (non-missing entry) on
the same line. No new values are invented, so these methods never
overshoot the range of the data.
"""

from __future__ import annotations

import numpy as np

from rgb_gapfill.methods.base import BaseInterpolator


def _previous_anchor_index(anchors: np.ndarray) -> np.ndarray:
    """Index of the closest anchor at or before each position, or -1."""
    idx = np.where(anchors, np.arange(anchors.size), -1)
    return np.maximum.accumulate(idx)


def _next_anchor_index(anchors: np.ndarray) -> np.ndarray:
    """Index of the closest anchor at or after each position, or ``n``."""
    n = anchors.size
    idx = np.where(anchors, np.arange(n), n)
    return np.minimum.accumulate(idx[::-1])[::-1]


def _take(values: np.ndarray, index: np.ndarray) -> np.ndarray:
    """Gather ``values[index]`` with out-of-range indices mapped to NaN."""
    valid = (index >= 0) & (index < values.size)
    out = np.full(values.shape, np.nan)
    out[valid] = values[index[valid]]
    return out


class PreviousInterpolator(BaseInterpolator):
    """Carry the previous anchor forward.

    Leading gaps have no previous anchor and stay missing.
    """

    name = "previous"

    def _fill_line(self, positions, values, anchors):
        return _take(values, _previous_anchor_index(anchors))


class NextInterpolator(BaseInterpolator):
    """Carry the next anchor backward.

    Trailing gaps have no next anchor and stay missing.
    """

    name = "next"

    def _fill_line(self, positions, values, anchors):
        return _take(values, _next_anchor_index(anchors))


class NearestInterpolator(BaseInterpolator):
    """Take the anchor closest in index distance.

    Ties (a gap exactly midway between two anchors) go to the next
    anchor. A single anchor is enough to fill the whole line.
    """

    name = "nearest"

    def _fill_line(self, positions, values, anchors):
        prev_idx = _previous_anchor_index(anchors)
        next_idx = _next_anchor_index(anchors)

        n = anchors.size
        dist_prev = np.where(prev_idx >= 0, positions - prev_idx, n + 1)
        dist_next = np.where(next_idx < n, next_idx - positions, n + 1)

        chosen = np.where(dist_next <= dist_prev, next_idx, prev_idx)
        return _take(values, chosen)
