"""Main terrain generation orchestration."""

import numpy as np
import structlog
from numpy.typing import NDArray

from .border import apply_border
from .classification import classify_regions, region_counts, threshold_mask
from .config import GenerationConfig, OutputMode
from .noise import layered_noise, normalize
from .rivers import carve_rivers, river_mask
from .seeding import draw_offset, make_rng, octave_offsets, resolve_seed
from .validation import validate_config

logger = structlog.get_logger()


class GenerationResult:
    """Result of terrain generation with intermediate data."""

    def __init__(
        self,
        config: GenerationConfig,
        seed: int,
        offsets: list[tuple[int, int]],
        river_offset: tuple[int, int] | None,
        normalized: NDArray[np.float64],
        heights: NDArray[np.float64],
        grid: NDArray[np.uint8] | None,
    ):
        self.config = config
        self.seed = seed
        self.offsets = offsets
        self.river_offset = river_offset
        self.normalized = normalized
        self.heights = heights
        self.grid = grid

    @property
    def labels(self) -> list[str]:
        """Region labels indexed by the values in ``grid`` (regions output)."""
        return [r.label for r in self.config.regions]


def generate_terrain(config: GenerationConfig) -> GenerationResult:
    """Generate a height field and its output grid from configuration.

    Stages run strictly in order: offsets, layered noise, normalization,
    border shaping, river carving, then the configured output mode.

    Args:
        config: Generation configuration.

    Returns:
        GenerationResult with the final height field and output grid.

    Raises:
        TerrainError: If the configuration is invalid, or if a cell cannot
            be classified under the strict policy.
    """
    validate_config(config)

    seed = resolve_seed(config.seed)
    rng = make_rng(seed)
    width, height = config.width, config.height

    logger.info(
        "terrain_generation_started",
        width=width,
        height=height,
        seed=seed,
        octaves=config.octaves,
    )

    offsets = octave_offsets(rng, config.octaves)
    # Drawn after every octave offset so seeds reproduce across runs
    river_offset = draw_offset(rng) if config.river is not None else None

    raw = layered_noise(
        width,
        height,
        config.scale,
        config.octaves,
        config.persistence,
        config.lacunarity,
        offsets,
    )
    normalized = normalize(raw)

    heights = apply_border(normalized, config.border)

    if config.river is not None and river_offset is not None:
        mask = river_mask(width, height, config.river, river_offset)
        heights = carve_rivers(heights, mask)
        logger.debug(
            "rivers_carved",
            offset=river_offset,
            carved_fraction=float(np.mean(mask < 1.0)),
        )

    grid = _make_output(heights, config)
    _log_output_stats(heights, grid, config)

    return GenerationResult(
        config=config,
        seed=seed,
        offsets=offsets,
        river_offset=river_offset,
        normalized=normalized,
        heights=heights,
        grid=grid,
    )


def generate(
    config: GenerationConfig,
) -> NDArray[np.float64] | tuple[NDArray[np.float64], NDArray[np.uint8]]:
    """Generate terrain and return only the data a renderer needs.

    Returns:
        The height field for continuous output, otherwise a tuple of the
        height field and the binary mask or region index grid.
    """
    result = generate_terrain(config)
    if result.grid is None:
        return result.heights
    return result.heights, result.grid


def cell_world_position(x: int, y: int, width: int, height: int) -> tuple[float, float]:
    """Center of cell (x, y) with the map centered on the origin.

    Grid arrays are indexed ``[y, x]``. Renderers drawing one unit per cell
    can use this to keep the map centered.
    """
    return (-width * 0.5 + x + 0.5, -height * 0.5 + y + 0.5)


def _make_output(
    heights: NDArray[np.float64],
    config: GenerationConfig,
) -> NDArray[np.uint8] | None:
    if config.output == OutputMode.BINARY:
        return threshold_mask(heights, config.fill_threshold)
    if config.output == OutputMode.REGIONS:
        return classify_regions(heights, config.regions, config.unclassified_policy)
    return None


def _log_output_stats(
    heights: NDArray[np.float64],
    grid: NDArray[np.uint8] | None,
    config: GenerationConfig,
) -> None:
    """Log summary statistics for the finished run."""
    stats: dict[str, object] = {
        "min_height": float(heights.min()),
        "max_height": float(heights.max()),
        "output": config.output.value,
    }

    if config.output == OutputMode.BINARY and grid is not None:
        stats["filled_fraction"] = float(np.mean(grid))
    elif config.output == OutputMode.REGIONS and grid is not None:
        stats["regions"] = region_counts(grid, config.regions)

    logger.info("terrain_generation_finished", **stats)
