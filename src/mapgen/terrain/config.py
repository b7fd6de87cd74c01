"""Terrain generation configuration models."""

import tomllib
from enum import Enum
from pathlib import Path
from typing import Annotated, Literal

from pydantic import BaseModel, Field


class OutputMode(str, Enum):
    """What the pipeline produces next to the height field."""

    CONTINUOUS = "continuous"
    BINARY = "binary"
    REGIONS = "regions"


class UnclassifiedPolicy(str, Enum):
    """How cells above every region threshold are handled."""

    STRICT = "strict"
    LAST = "last"


class LinearEdgeBorder(BaseModel, frozen=True):
    """Linear fade added within a band along each map edge."""

    kind: Literal["linear_edge"] = "linear_edge"
    border_size: int = Field(default=5, description="Band width in cells")
    fill_percent: float = Field(
        default=0.45, description="Value added at the outermost cell"
    )


class RadialFalloffBorder(BaseModel, frozen=True):
    """Square falloff curve applied to the whole grid."""

    kind: Literal["radial_falloff"] = "radial_falloff"
    curve: float = Field(default=3.0, description="Falloff curve exponent")
    offset: float = Field(
        default=2.2, description="Shifts where the falloff curve rises"
    )
    combine: Literal["add", "multiply"] = Field(
        default="add",
        description="'add' raises edges, 'multiply' scales by (1 - falloff)",
    )


BorderConfig = Annotated[
    LinearEdgeBorder | RadialFalloffBorder, Field(discriminator="kind")
]


class RiverConfig(BaseModel, frozen=True):
    """River carving parameters."""

    river_scale: float = Field(default=2.0, description="River noise scale")
    river_size: float = Field(
        default=8.0, description="Multiplier applied to the rectified river noise"
    )


class RegionThreshold(BaseModel, frozen=True):
    """Upper height bound for a named terrain region."""

    height: float
    label: str


DEFAULT_REGIONS: tuple[RegionThreshold, ...] = (
    RegionThreshold(height=0.30, label="deep_water"),
    RegionThreshold(height=0.40, label="shallow_water"),
    RegionThreshold(height=0.45, label="sand"),
    RegionThreshold(height=0.65, label="grass"),
    RegionThreshold(height=0.80, label="forest"),
    RegionThreshold(height=0.90, label="mountain"),
    RegionThreshold(height=1.00, label="snow"),
)


class GenerationConfig(BaseModel, frozen=True):
    """Complete terrain generation configuration."""

    width: int = Field(default=100, description="Map width in cells")
    height: int = Field(default=100, description="Map height in cells")
    seed: int | str | None = Field(
        default=0, description="Random seed; strings are hashed, None picks one"
    )

    scale: float = Field(default=10.0, description="Base noise scale")
    octaves: int = Field(default=4, description="Number of noise octaves")
    persistence: float = Field(default=0.5, description="Amplitude multiplier per octave")
    lacunarity: float = Field(default=2.0, description="Frequency multiplier per octave")

    border: BorderConfig | None = Field(
        default=None, description="Border shaping strategy (None = unshaped)"
    )
    river: RiverConfig | None = Field(
        default=None, description="River carving (None = disabled)"
    )

    output: OutputMode = Field(default=OutputMode.CONTINUOUS)
    fill_threshold: float = Field(
        default=0.45, description="Binary output: values below become 0"
    )
    regions: tuple[RegionThreshold, ...] = Field(default=DEFAULT_REGIONS)
    unclassified_policy: UnclassifiedPolicy = Field(default=UnclassifiedPolicy.LAST)


def load_config(config_path: Path) -> GenerationConfig:
    """Load generation configuration from a TOML file.

    Args:
        config_path: Path to the TOML config file.

    Returns:
        Parsed GenerationConfig.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        tomllib.TOMLDecodeError: If TOML is malformed.
    """
    with open(config_path, "rb") as f:
        data = tomllib.load(f)
    return GenerationConfig.model_validate(data)
