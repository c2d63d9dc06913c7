"""Base interface for 1-D gap interpolation methods.

Every method inherits from :class:`BaseInterpolator` and implements
:meth:`_fill_line`. The base class provides the shared contract checks,
the line-wise dispatch over N-D arrays, and the bookkeeping for lines
that cannot be resolved, so that subclasses can focus on the kernel.

``NaN`` is the missing marker throughout.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

import numpy as np

from rgb_gapfill.exceptions import ShapeError

logger = logging.getLogger(__name__)


class BaseInterpolator(ABC):
    """Abstract base for all 1-D interpolation methods.

    Implementations are stateless; ``fill`` is purely functional with
    respect to its input.

    Attributes:
        name: Method identifier used in logs and the registry.
        min_anchors: Minimum number of non-missing entries a line needs
            before the kernel is attempted. Lines with fewer anchors are
            returned unchanged (their gaps stay ``NaN``).
    """

    name: str
    min_anchors: int = 1

    @abstractmethod
    def _fill_line(
        self,
        positions: np.ndarray,
        values: np.ndarray,
        anchors: np.ndarray,
    ) -> np.ndarray:
        """Fill the missing entries of a single line.

        Args:
            positions: Integer sample positions ``0..n-1``.
            values: ``float64`` line of length ``n`` containing ``NaN``.
            anchors: Boolean array, ``True`` where *values* is known.

        Returns:
            Line of length ``n``. Entries at anchor positions are
            ignored by the caller; unresolved gaps must be ``NaN``.
        """

    def fill(self, values: np.ndarray) -> np.ndarray:
        """Fill missing entries of a 1-D sequence.

        Args:
            values: 1-D numeric sequence with ``NaN`` marking missing
                entries.

        Returns:
            New ``float64`` array of the same length. Non-missing
            entries are unchanged, missing entries are replaced per the
            method, and entries the method cannot resolve stay ``NaN``.

        Raises:
            ShapeError: If *values* is not one-dimensional.
        """
        line = np.array(values, dtype=np.float64, copy=True)
        if line.ndim != 1:
            msg = f"fill expects a 1-D sequence, got shape={line.shape}"
            raise ShapeError(msg)

        anchors = ~np.isnan(line)
        if anchors.all() or anchors.sum() < self.min_anchors:
            return line

        positions = np.arange(line.size)
        filled = self._fill_line(positions, line, anchors)
        # Anchors are copied back so known samples stay bit-identical.
        return np.where(anchors, line, filled)

    def fill_along_axis(self, array: np.ndarray, axis: int) -> np.ndarray:
        """Apply :meth:`fill` to every 1-D line of *array* along *axis*.

        Lines without any missing entry are skipped.

        Args:
            array: N-D ``float`` array with ``NaN`` marking missing data.
            axis: Axis along which each line runs.

        Returns:
            New ``float64`` array with the same shape as *array*.
        """
        moved = np.moveaxis(np.asarray(array, dtype=np.float64), axis, -1)
        lines = moved.reshape(-1, moved.shape[-1])
        result = lines.copy()

        needs_fill = np.flatnonzero(np.isnan(lines).any(axis=1))
        logger.debug(
            "%s: filling %d of %d lines along axis %d",
            self.name,
            needs_fill.size,
            lines.shape[0],
            axis,
        )
        for idx in needs_fill:
            result[idx] = self.fill(lines[idx])

        return np.moveaxis(result.reshape(moved.shape), -1, axis)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
