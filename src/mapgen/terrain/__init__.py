"""Procedural terrain generation package.

This package builds seeded height fields from layered Perlin noise, shapes
their borders, carves rivers, and classifies cells into regions.
"""

from .config import (
    GenerationConfig,
    LinearEdgeBorder,
    OutputMode,
    RadialFalloffBorder,
    RegionThreshold,
    RiverConfig,
    UnclassifiedPolicy,
    load_config,
)
from .generator import (
    GenerationResult,
    cell_world_position,
    generate,
    generate_terrain,
)
from .persistence import load_map, save_map
from .validation import validate_config

__all__ = [
    "GenerationConfig",
    "GenerationResult",
    "LinearEdgeBorder",
    "OutputMode",
    "RadialFalloffBorder",
    "RegionThreshold",
    "RiverConfig",
    "UnclassifiedPolicy",
    "cell_world_position",
    "generate",
    "generate_terrain",
    "load_config",
    "load_map",
    "save_map",
    "validate_config",
]
