"""River carving from a rectified secondary noise field."""

import numpy as np
from numpy.typing import NDArray

from .config import RiverConfig
from .noise import perlin, sample_coordinates


def river_mask(
    width: int,
    height: int,
    river: RiverConfig,
    offset: tuple[int, int],
) -> NDArray[np.float64]:
    """Generate the river multiplier field.

    Noise is remapped to [-1, 1] and rectified, so the multiplier drops to
    0 where the river noise crosses zero. ``river_size`` widens the range
    that saturates at 1; a size of 0 yields an all-zero mask.

    Args:
        width: Grid width.
        height: Grid height.
        river: River parameters.
        offset: (x, y) offset drawn from the run's stream.

    Returns:
        Multiplier values in [0, 1] shaped (height, width).
    """
    xx, yy = sample_coordinates(width, height)
    ox, oy = offset

    sample = perlin(xx * river.river_scale + ox, yy * river.river_scale + oy)
    rectified = np.abs(sample * 2.0 - 1.0)

    return np.clip(rectified * river.river_size, 0.0, 1.0)


def carve_rivers(
    elevation: NDArray[np.float64],
    mask: NDArray[np.float64],
) -> NDArray[np.float64]:
    """Multiply the river mask into the elevation field."""
    return elevation * mask
