"""Fill gap pixels of an RGB image by directional interpolation.

The pipeline runs strictly forward:

1. validate the image and options;
2. build the gap mask from the sentinel and mark gap pixels ``NaN``;
3. interpolate along rows and along columns and average the two;
4. write the average back into gap pixels only, then convert to the
   output representation.

Pixels that no method can reach (for example a leading gap under
``previous`` with no anchor on either axis) are left missing; with the
default ``uint8`` output they become 0.
"""

from __future__ import annotations

import logging
from typing import Any

import numpy as np

from rgb_gapfill.compositor import composite
from rgb_gapfill.config import FillConfig
from rgb_gapfill.directional import directional_estimate
from rgb_gapfill.mask import build_gap_mask, mark_missing, missing_pixels
from rgb_gapfill.methods.registry import InterpolationMethod, get_interpolator
from rgb_gapfill.representation import to_output, to_working
from rgb_gapfill.validation import DEFAULT_GAP_VALUE, validate_image

logger = logging.getLogger(__name__)


class GapFiller:
    """Reusable gap filler bound to one method and sentinel.

    Instances carry only their validated :class:`FillConfig`; ``apply``
    is purely functional, so one instance can serve concurrent callers.

    Example:
        >>> filler = GapFiller("linear", gap_value=[0, 0, 0])
        >>> restored = filler.apply(image)  # doctest: +SKIP
    """

    def __init__(
        self,
        method: str | InterpolationMethod | None = None,
        gap_value: Any = DEFAULT_GAP_VALUE,
        output_dtype: str = "uint8",
    ) -> None:
        """Initialize the filler.

        Args:
            method: One of ``previous``, ``next``, ``nearest``,
                ``linear``, ``spline``, ``pchip``. Mandatory.
            gap_value: Scalar, 3-element sequence, or ``NaN``.
            output_dtype: ``"uint8"`` or ``"input"``.

        Raises:
            ArityError: If *method* is omitted.
            ConfigError: If *method* or *output_dtype* is unknown.
            ShapeError: If *gap_value* is not 1x1 or 1x3.
            DTypeError: If *gap_value* is not numeric.
        """
        self.config = FillConfig.from_mapping(
            {
                "method": method,
                "gap_value": gap_value,
                "output_dtype": output_dtype,
            }
        )
        self.interpolator = get_interpolator(self.config.method)

    @classmethod
    def from_config(cls, config: FillConfig) -> GapFiller:
        """Build a filler from an already validated config."""
        return cls(
            config.method,
            gap_value=config.gap_value.values,
            output_dtype=config.output_dtype,
        )

    @property
    def name(self) -> str:
        return self.config.method.value

    def apply(self, image: np.ndarray) -> np.ndarray:
        """Fill the gaps of *image*.

        Args:
            image: ``(rows, cols, 3)`` array of dtype ``uint8``,
                ``float32`` or ``float64``. Not modified.

        Returns:
            New array with the shape of *image*. Non-gap pixels equal
            the input after output conversion.

        Raises:
            ShapeError: If *image* is not ``(rows, cols, 3)``.
            DTypeError: If *image* has an unsupported dtype.
        """
        image = validate_image(image)
        out_dtype = (
            np.uint8 if self.config.output_dtype == "uint8" else image.dtype
        )

        working = to_working(image)
        mask = build_gap_mask(image, self.config.gap_value)
        if mask is None:
            # The image's own NaN entries are the gaps.
            marked = working
            mask = missing_pixels(working)
        else:
            marked = mark_missing(working, mask)

        if not np.any(mask):
            logger.debug("No gap pixels found; returning input unchanged.")
            return to_output(working, out_dtype)

        logger.debug(
            "Filling %d gap pixels in %s image with method=%s",
            int(mask.sum()),
            image.shape,
            self.name,
        )
        estimate = directional_estimate(marked, self.interpolator)
        result = composite(working, estimate, mask)
        return to_output(result, out_dtype)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(method={self.name!r}, "
            f"gap_value={self.config.gap_value.values}, "
            f"output_dtype={self.config.output_dtype!r})"
        )


def fill_missing_rgb(
    image: np.ndarray,
    method: str | InterpolationMethod | None = None,
    gap_value: Any = DEFAULT_GAP_VALUE,
    *,
    output_dtype: str = "uint8",
) -> np.ndarray:
    """Fill gap pixels of an RGB image.

    A pixel is a gap when all three channels equal *gap_value* (scalar)
    or each channel equals its own component (3-element *gap_value*).
    Gaps are filled with the mean of a row-direction and a
    column-direction 1-D interpolation; all other pixels are returned
    unchanged.

    Passing ``NaN`` as *gap_value* skips mask building: the ``NaN``
    entries already present in a float image are treated as the gaps.

    Args:
        image: ``(rows, cols, 3)`` array of dtype ``uint8``, ``float32``
            or ``float64``.
        method: One of ``previous``, ``next``, ``nearest``, ``linear``,
            ``spline``, ``pchip``. Mandatory.
        gap_value: Scalar, 3-element sequence, or ``NaN``. Defaults to 0.
        output_dtype: ``"uint8"`` (default) or ``"input"`` to keep the
            dtype of *image*.

    Returns:
        New array with the shape of *image*.

    Raises:
        ArityError: If *method* is omitted.
        ShapeError: If *image* or *gap_value* has an invalid shape.
        DTypeError: If *image* or *gap_value* has an invalid type.
        ConfigError: If *method* or *output_dtype* is unknown.
    """
    filler = GapFiller(method, gap_value=gap_value, output_dtype=output_dtype)
    return filler.apply(image)
