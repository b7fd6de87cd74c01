"""Shared test fixtures for terrain tests."""

import pytest

from mapgen.terrain.config import (
    GenerationConfig,
    LinearEdgeBorder,
    OutputMode,
    RadialFalloffBorder,
    RegionThreshold,
    RiverConfig,
)


@pytest.fixture
def small_config() -> GenerationConfig:
    """32x24 map with a linear border and default regions."""
    return GenerationConfig(
        width=32,
        height=24,
        seed=1234,
        scale=4.0,
        octaves=3,
        persistence=0.5,
        lacunarity=2.0,
        border=LinearEdgeBorder(border_size=3, fill_percent=0.3),
    )


@pytest.fixture
def island_config() -> GenerationConfig:
    """40x40 island with radial falloff, rivers and region output."""
    return GenerationConfig(
        width=40,
        height=40,
        seed="island",
        scale=3.0,
        octaves=4,
        border=RadialFalloffBorder(curve=3.0, offset=2.2, combine="multiply"),
        river=RiverConfig(river_scale=2.0, river_size=6.0),
        output=OutputMode.REGIONS,
    )


@pytest.fixture
def simple_regions() -> tuple[RegionThreshold, ...]:
    """Three regions covering [0, 1]."""
    return (
        RegionThreshold(height=0.3, label="water"),
        RegionThreshold(height=0.7, label="land"),
        RegionThreshold(height=1.0, label="peak"),
    )
