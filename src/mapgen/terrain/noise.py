"""Noise generation functions for terrain generation.

Provides vectorized 2D Perlin noise, octave layering, and min/max
normalization of the layered field.
"""

import numpy as np
import structlog
from numpy.typing import NDArray

logger = structlog.get_logger()

# Reference permutation from Perlin's improved noise, doubled to avoid wrapping
_PERMUTATION = np.array(
    [
        151, 160, 137, 91, 90, 15, 131, 13, 201, 95, 96, 53, 194, 233, 7, 225,
        140, 36, 103, 30, 69, 142, 8, 99, 37, 240, 21, 10, 23, 190, 6, 148,
        247, 120, 234, 75, 0, 26, 197, 62, 94, 252, 219, 203, 117, 35, 11, 32,
        57, 177, 33, 88, 237, 149, 56, 87, 174, 20, 125, 136, 171, 168, 68, 175,
        74, 165, 71, 134, 139, 48, 27, 166, 77, 146, 158, 231, 83, 111, 229, 122,
        60, 211, 133, 230, 220, 105, 92, 41, 55, 46, 245, 40, 244, 102, 143, 54,
        65, 25, 63, 161, 1, 216, 80, 73, 209, 76, 132, 187, 208, 89, 18, 169,
        200, 196, 135, 130, 116, 188, 159, 86, 164, 100, 109, 198, 173, 186, 3, 64,
        52, 217, 226, 250, 124, 123, 5, 202, 38, 147, 118, 126, 255, 82, 85, 212,
        207, 206, 59, 227, 47, 16, 58, 17, 182, 189, 28, 42, 223, 183, 170, 213,
        119, 248, 152, 2, 44, 154, 163, 70, 221, 153, 101, 155, 167, 43, 172, 9,
        129, 22, 39, 253, 19, 98, 108, 110, 79, 113, 224, 232, 178, 185, 112, 104,
        218, 246, 97, 228, 251, 34, 242, 193, 238, 210, 144, 12, 191, 179, 162, 241,
        81, 51, 145, 235, 249, 14, 239, 107, 49, 192, 214, 31, 181, 199, 106, 157,
        184, 84, 204, 176, 115, 121, 50, 45, 127, 4, 150, 254, 138, 236, 205, 93,
        222, 114, 67, 29, 24, 72, 243, 141, 128, 195, 78, 66, 215, 61, 156, 180,
    ],
    dtype=np.int64,
)
_PERM = np.concatenate([_PERMUTATION, _PERMUTATION])


def _fade(t: NDArray[np.float64]) -> NDArray[np.float64]:
    return t * t * t * (t * (t * 6.0 - 15.0) + 10.0)


def _lerp(t: NDArray[np.float64], a: NDArray[np.float64], b: NDArray[np.float64]) -> NDArray[np.float64]:
    return a + t * (b - a)


def _grad(
    hashed: NDArray[np.int64], x: NDArray[np.float64], y: NDArray[np.float64]
) -> NDArray[np.float64]:
    """Dot product with one of the four diagonal gradients."""
    gx = np.where(hashed & 1, -x, x)
    gy = np.where(hashed & 2, -y, y)
    return gx + gy


def perlin(x: NDArray[np.float64], y: NDArray[np.float64]) -> NDArray[np.float64]:
    """Sample 2D Perlin noise at the given coordinates.

    The lattice repeats every 256 units. Integer lattice points map to 0.5.

    Args:
        x: X coordinates (any shape).
        y: Y coordinates (same shape as x).

    Returns:
        Noise values in [0, 1], same shape as the inputs.
    """
    x = np.asarray(x, dtype=np.float64)
    y = np.asarray(y, dtype=np.float64)

    x0 = np.floor(x)
    y0 = np.floor(y)
    xi = x0.astype(np.int64) & 255
    yi = y0.astype(np.int64) & 255
    dx = x - x0
    dy = y - y0

    u = _fade(dx)
    v = _fade(dy)

    a = _PERM[xi] + yi
    b = _PERM[xi + 1] + yi

    bottom = _lerp(u, _grad(_PERM[a], dx, dy), _grad(_PERM[b], dx - 1.0, dy))
    top = _lerp(
        u, _grad(_PERM[a + 1], dx, dy - 1.0), _grad(_PERM[b + 1], dx - 1.0, dy - 1.0)
    )
    n = _lerp(v, bottom, top)

    return np.clip((n + 1.0) * 0.5, 0.0, 1.0)


def sample_coordinates(
    width: int, height: int
) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
    """Return (x / width, y / height) grids shaped (height, width)."""
    x_coords = np.arange(width, dtype=np.float64) / width
    y_coords = np.arange(height, dtype=np.float64) / height
    xx, yy = np.meshgrid(x_coords, y_coords)
    return xx, yy


def layered_noise(
    width: int,
    height: int,
    scale: float,
    octaves: int,
    persistence: float,
    lacunarity: float,
    offsets: list[tuple[int, int]],
) -> NDArray[np.float64]:
    """Accumulate octaves of Perlin noise into a raw height field.

    Each octave samples at ``coord * scale * frequency + offset``, remaps
    the noise to [-1, 1], and adds it weighted by the running amplitude.
    Amplitude starts at 1 and decays by ``persistence``; frequency starts
    at 1 and grows by ``lacunarity``.

    Args:
        width: Output width in cells.
        height: Output height in cells.
        scale: Base sampling scale.
        octaves: Number of layers to sum.
        persistence: Amplitude multiplier between octaves.
        lacunarity: Frequency multiplier between octaves.
        offsets: One (x, y) offset per octave.

    Returns:
        Raw (unnormalized) field shaped (height, width). All zeros when
        ``octaves`` is 0.
    """
    xx, yy = sample_coordinates(width, height)
    result = np.zeros((height, width), dtype=np.float64)

    amplitude = 1.0
    frequency = 1.0

    for i in range(octaves):
        ox, oy = offsets[i]
        sample = perlin(xx * scale * frequency + ox, yy * scale * frequency + oy)
        result += (sample * 2.0 - 1.0) * amplitude

        amplitude *= persistence
        frequency *= lacunarity

    return result


def normalize(raw: NDArray[np.float64]) -> NDArray[np.float64]:
    """Rescale a field into [0, 1] using its realized min and max.

    A field with no variance (including the all-zero field from zero
    octaves) maps to 0.5 everywhere.
    """
    low = float(raw.min())
    high = float(raw.max())
    logger.debug("noise_extrema", min=low, max=high)

    if high == low:
        return np.full(raw.shape, 0.5, dtype=np.float64)

    result = (raw - low) / (high - low)
    return np.clip(result, 0.0, 1.0)
