"""Up-front validation of generation configuration.

Everything here runs before any grid is allocated, so a bad configuration
fails without doing partial work.
"""

import math

from ..exceptions import (
    InvalidBorderConfigError,
    InvalidDimensionError,
    InvalidNoiseParameterError,
    InvalidOctavesError,
    InvalidRegionTableError,
    InvalidRiverConfigError,
    InvalidScaleError,
)
from .config import (
    GenerationConfig,
    LinearEdgeBorder,
    OutputMode,
    RadialFalloffBorder,
)

MAX_REGIONS = 256


def validate_config(config: GenerationConfig) -> None:
    """Check a configuration, raising the first problem found.

    Args:
        config: Generation configuration.

    Raises:
        InvalidDimensionError: Width or height is not positive.
        InvalidScaleError: Base or river scale is not positive.
        InvalidOctavesError: Octave count is negative.
        InvalidNoiseParameterError: Persistence, lacunarity or fill threshold
            out of range.
        InvalidBorderConfigError: Border parameters are unusable.
        InvalidRiverConfigError: River size is negative or not finite.
        InvalidRegionTableError: Region table is unusable.
    """
    _check_dimensions(config)
    _check_noise(config)
    _check_border(config)
    _check_river(config)
    _check_regions(config)


def _check_dimensions(config: GenerationConfig) -> None:
    if config.width <= 0 or config.height <= 0:
        raise InvalidDimensionError(
            f"Map size must be positive, got {config.width}x{config.height}"
        )


def _check_noise(config: GenerationConfig) -> None:
    if not (config.scale > 0 and math.isfinite(config.scale)):
        raise InvalidScaleError(f"Scale must be positive, got {config.scale}")

    if config.octaves < 0:
        raise InvalidOctavesError(
            f"Octaves must be zero or more, got {config.octaves}"
        )

    if not (config.lacunarity >= 1.0 and math.isfinite(config.lacunarity)):
        raise InvalidNoiseParameterError(
            f"Lacunarity must be finite and at least 1, got {config.lacunarity}"
        )

    if not (config.persistence >= 0.0 and math.isfinite(config.persistence)):
        raise InvalidNoiseParameterError(
            f"Persistence must be finite and not negative, got {config.persistence}"
        )

    if not math.isfinite(config.fill_threshold):
        raise InvalidNoiseParameterError(
            f"Fill threshold must be finite, got {config.fill_threshold}"
        )


def _check_border(config: GenerationConfig) -> None:
    border = config.border

    if isinstance(border, LinearEdgeBorder):
        limit = min(config.width, config.height) / 2
        if border.border_size < 0 or border.border_size >= limit:
            raise InvalidBorderConfigError(
                f"Border size {border.border_size} must be in [0, {limit:g}) "
                f"for a {config.width}x{config.height} map"
            )
        if not math.isfinite(border.fill_percent):
            raise InvalidBorderConfigError(
                f"Edge fill percent must be finite, got {border.fill_percent}"
            )

    elif isinstance(border, RadialFalloffBorder):
        # Both must be positive or the curve denominator can reach zero
        if not (border.curve > 0 and math.isfinite(border.curve)):
            raise InvalidBorderConfigError(
                f"Falloff curve must be positive and finite, got {border.curve}"
            )
        if not (border.offset > 0 and math.isfinite(border.offset)):
            raise InvalidBorderConfigError(
                f"Falloff offset must be positive and finite, got {border.offset}"
            )


def _check_river(config: GenerationConfig) -> None:
    river = config.river
    if river is None:
        return

    if not (river.river_scale > 0 and math.isfinite(river.river_scale)):
        raise InvalidScaleError(
            f"River scale must be positive, got {river.river_scale}"
        )

    if not (river.river_size >= 0 and math.isfinite(river.river_size)):
        raise InvalidRiverConfigError(
            f"River size must be finite and not negative, got {river.river_size}"
        )


def _check_regions(config: GenerationConfig) -> None:
    regions = config.regions

    if config.output == OutputMode.REGIONS and not regions:
        raise InvalidRegionTableError("Region output requires at least one region")

    if len(regions) > MAX_REGIONS:
        raise InvalidRegionTableError(
            f"At most {MAX_REGIONS} regions are supported, got {len(regions)}"
        )

    for region in regions:
        if not math.isfinite(region.height):
            raise InvalidRegionTableError(
                f"Region '{region.label}' has a non-finite threshold {region.height}"
            )

    for previous, current in zip(regions, regions[1:]):
        if current.height < previous.height:
            raise InvalidRegionTableError(
                f"Region thresholds must ascend: '{current.label}' "
                f"({current.height}) follows '{previous.label}' ({previous.height})"
            )
