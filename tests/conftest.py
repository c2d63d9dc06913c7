"""Shared fixtures for the rgb_gapfill test suite.

All images are synthetic, so the suite needs no data files. Pixel values
of the random images start at 1 so that a gap value of 0 never matches
by accident.
"""

from __future__ import annotations

import numpy as np
import pytest

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------
ALL_METHODS = ("previous", "next", "nearest", "linear", "spline", "pchip")
GAP = 0


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------
def make_random_image(
    rows: int = 12,
    cols: int = 10,
    *,
    seed: int = 0,
    dtype: type = np.uint8,
) -> np.ndarray:
    """Random RGB image with every sample in ``[1, 255]``."""
    rng = np.random.default_rng(seed)
    image = rng.integers(1, 256, size=(rows, cols, 3))
    return image.astype(dtype)


def make_interior_mask(
    rows: int,
    cols: int,
    *,
    seed: int = 0,
    fraction: float = 0.3,
) -> np.ndarray:
    """Random gap mask that never touches the image border.

    Every row and column line then has anchors at both ends, so no
    method has to extrapolate.
    """
    rng = np.random.default_rng(seed + 1000)
    mask = np.zeros((rows, cols), dtype=bool)
    mask[1:-1, 1:-1] = rng.random((rows - 2, cols - 2)) < fraction
    return mask


def punch_gaps(
    image: np.ndarray,
    mask: np.ndarray,
    value: float | tuple[float, float, float] = GAP,
) -> np.ndarray:
    """Return a copy of *image* with gap pixels set to *value*."""
    out = image.copy()
    out[mask] = value
    return out


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------
@pytest.fixture
def white_with_black_centre() -> np.ndarray:
    """3x3 all-white uint8 image with a single black pixel at (1, 1)."""
    image = np.full((3, 3, 3), 255, dtype=np.uint8)
    image[1, 1] = 0
    return image


@pytest.fixture
def column_ramp() -> np.ndarray:
    """5x5 uint8 image where every sample equals ``10 * (col + 1)``.

    The pixel at (2, 2) is a gap (all channels 0).
    """
    ramp = np.arange(1, 6, dtype=np.uint8) * 10
    image = np.broadcast_to(ramp[None, :, None], (5, 5, 3)).copy()
    image[2, 2] = 0
    return image


@pytest.fixture
def random_image() -> np.ndarray:
    return make_random_image()


@pytest.fixture
def interior_mask(random_image: np.ndarray) -> np.ndarray:
    rows, cols = random_image.shape[:2]
    return make_interior_mask(rows, cols)


@pytest.fixture(params=ALL_METHODS)
def method(request: pytest.FixtureRequest) -> str:
    return request.param
