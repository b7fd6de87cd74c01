"""Tests for terrain configuration models."""

from pathlib import Path

import pytest

from mapgen.terrain.config import (
    DEFAULT_REGIONS,
    GenerationConfig,
    LinearEdgeBorder,
    OutputMode,
    RadialFalloffBorder,
    UnclassifiedPolicy,
    load_config,
)
from mapgen.terrain.validation import validate_config

CONFIGS_DIR = Path(__file__).resolve().parents[2] / "configs"


class TestGenerationConfig:
    """Tests for GenerationConfig."""

    def test_defaults(self) -> None:
        config = GenerationConfig()
        assert config.width == 100
        assert config.height == 100
        assert config.seed == 0
        assert config.border is None
        assert config.river is None
        assert config.output == OutputMode.CONTINUOUS
        assert config.unclassified_policy == UnclassifiedPolicy.LAST
        assert config.regions == DEFAULT_REGIONS

    def test_default_regions_ascend_to_one(self) -> None:
        heights = [r.height for r in DEFAULT_REGIONS]
        assert heights == sorted(heights)
        assert heights[-1] >= 1.0

    def test_frozen(self) -> None:
        config = GenerationConfig()
        with pytest.raises(Exception):
            config.width = 5

    def test_string_seed_kept(self) -> None:
        assert GenerationConfig(seed="hello").seed == "hello"

    def test_border_discriminator(self) -> None:
        config = GenerationConfig.model_validate(
            {"border": {"kind": "radial_falloff", "curve": 2.0, "offset": 1.5}}
        )
        assert isinstance(config.border, RadialFalloffBorder)
        assert config.border.curve == 2.0
        assert config.border.combine == "add"

    def test_border_none(self) -> None:
        assert GenerationConfig(border=None).border is None

    def test_unknown_border_kind_rejected(self) -> None:
        with pytest.raises(Exception):
            GenerationConfig.model_validate({"border": {"kind": "hexagon"}})

    def test_output_from_string(self) -> None:
        config = GenerationConfig.model_validate({"output": "binary"})
        assert config.output == OutputMode.BINARY


class TestLoadConfig:
    """Tests for TOML loading."""

    def test_load_minimal(self, tmp_path: Path) -> None:
        path = tmp_path / "map.toml"
        path.write_text(
            'width = 64\nheight = 32\nseed = "dunes"\n'
            "[border]\nkind = \"linear_edge\"\nborder_size = 2\nfill_percent = 0.2\n"
        )
        config = load_config(path)
        assert config.width == 64
        assert config.seed == "dunes"
        assert config.border == LinearEdgeBorder(border_size=2, fill_percent=0.2)

    def test_regions_from_toml(self, tmp_path: Path) -> None:
        path = tmp_path / "map.toml"
        path.write_text(
            "[[regions]]\nheight = 0.5\nlabel = \"sea\"\n"
            "[[regions]]\nheight = 1.0\nlabel = \"land\"\n"
        )
        config = load_config(path)
        assert [r.label for r in config.regions] == ["sea", "land"]

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "nope.toml")

    def test_shipped_configs_are_valid(self) -> None:
        for name in ("island.toml", "cave.toml"):
            validate_config(load_config(CONFIGS_DIR / name))
