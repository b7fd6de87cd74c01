"""Border shaping: linear edge fade and square falloff curve."""

import numpy as np
import structlog
from numpy.typing import NDArray

from .config import BorderConfig, LinearEdgeBorder, RadialFalloffBorder

logger = structlog.get_logger()


def _edge_fade(size: int, border: LinearEdgeBorder) -> NDArray[np.float64]:
    """Fade contributed along one axis by both of its edges."""
    coords = np.arange(size, dtype=np.float64)
    fade = np.zeros(size, dtype=np.float64)
    if border.border_size <= 0:
        return fade

    for dist in (coords, (size - 1) - coords):
        in_band = dist < border.border_size
        t = dist[in_band] / border.border_size
        # lerp(fill_percent, 0, t)
        fade[in_band] += border.fill_percent * (1.0 - t)

    return fade


def linear_edge_falloff(
    width: int,
    height: int,
    border: LinearEdgeBorder,
) -> NDArray[np.float64]:
    """Build the additive edge fade for a width x height grid.

    Cells within ``border_size`` of an edge receive
    ``fill_percent * (1 - d / border_size)`` where ``d`` is the distance to
    that edge (0 on the outermost row/column). Corner cells collect the
    contribution of both edges.

    Args:
        width: Grid width.
        height: Grid height.
        border: Linear border parameters.

    Returns:
        Contribution array shaped (height, width).
    """
    fade_x = _edge_fade(width, border)
    fade_y = _edge_fade(height, border)
    return fade_y[:, np.newaxis] + fade_x[np.newaxis, :]


def radial_falloff(
    width: int,
    height: int,
    border: RadialFalloffBorder,
) -> NDArray[np.float64]:
    """Build the square falloff curve for a width x height grid.

    Coordinates are mapped to [-1, 1] per axis and combined with the
    Chebyshev distance ``v = max(|nx|, |ny|)``. The curve
    ``v^c / (v^c + (b - b*v)^c)`` is ~0 at the center and 1 at the edge.

    Args:
        width: Grid width.
        height: Grid height.
        border: Falloff curve parameters.

    Returns:
        Falloff values in [0, 1] shaped (height, width).
    """
    nx = np.arange(width, dtype=np.float64) / width * 2.0 - 1.0
    ny = np.arange(height, dtype=np.float64) / height * 2.0 - 1.0
    v = np.maximum(np.abs(nx)[np.newaxis, :], np.abs(ny)[:, np.newaxis])

    c = border.curve
    b = border.offset
    rising = v**c
    return rising / (rising + (b - b * v) ** c)


def apply_border(
    field: NDArray[np.float64],
    border: BorderConfig | None,
) -> NDArray[np.float64]:
    """Apply the configured border strategy to a normalized field.

    The result is not clamped; additive shaping can push cells above 1.

    Args:
        field: Normalized height field shaped (height, width).
        border: Border strategy, or None to leave the field unchanged.

    Returns:
        Shaped height field.
    """
    height, width = field.shape

    if border is None:
        return field.copy()

    if isinstance(border, LinearEdgeBorder):
        logger.debug(
            "border_linear_edge",
            border_size=border.border_size,
            fill_percent=border.fill_percent,
        )
        return field + linear_edge_falloff(width, height, border)

    falloff = radial_falloff(width, height, border)
    logger.debug(
        "border_radial_falloff",
        curve=border.curve,
        offset=border.offset,
        combine=border.combine,
    )
    if border.combine == "multiply":
        return field * (1.0 - falloff)
    return field + falloff
