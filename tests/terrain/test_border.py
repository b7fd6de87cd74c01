"""Tests for border shaping functions."""

import numpy as np
import pytest

from mapgen.terrain.border import apply_border, linear_edge_falloff, radial_falloff
from mapgen.terrain.config import LinearEdgeBorder, RadialFalloffBorder


class TestLinearEdgeFalloff:
    """Tests for the additive linear edge fade."""

    @pytest.fixture
    def fade(self) -> np.ndarray:
        border = LinearEdgeBorder(border_size=3, fill_percent=0.3)
        return linear_edge_falloff(10, 8, border)

    def test_output_shape(self, fade: np.ndarray) -> None:
        assert fade.shape == (8, 10)

    def test_outermost_cells_get_fill(self, fade: np.ndarray) -> None:
        """Edge cells (not corners) receive exactly fill_percent."""
        assert fade[4, 0] == pytest.approx(0.3)
        assert fade[4, 9] == pytest.approx(0.3)
        assert fade[0, 5] == pytest.approx(0.3)
        assert fade[7, 5] == pytest.approx(0.3)

    def test_linear_steps(self, fade: np.ndarray) -> None:
        np.testing.assert_allclose(fade[4, :4], [0.3, 0.2, 0.1, 0.0])
        np.testing.assert_allclose(fade[4, 6:], [0.0, 0.1, 0.2, 0.3])

    def test_interior_untouched(self, fade: np.ndarray) -> None:
        np.testing.assert_array_equal(fade[3:5, 3:7], 0.0)

    def test_corners_add_both_edges(self, fade: np.ndarray) -> None:
        assert fade[0, 0] == pytest.approx(0.6)
        assert fade[7, 9] == pytest.approx(0.6)
        assert fade[1, 1] == pytest.approx(0.4)

    def test_monotonic_toward_interior(self, fade: np.ndarray) -> None:
        """Contribution never grows as distance from the edge grows."""
        for y in range(fade.shape[0]):
            row = fade[y, :5]
            assert np.all(np.diff(row) <= 1e-12)

    def test_zero_border_size(self) -> None:
        border = LinearEdgeBorder(border_size=0, fill_percent=0.5)
        np.testing.assert_array_equal(linear_edge_falloff(6, 6, border), 0.0)


class TestRadialFalloff:
    """Tests for the square falloff curve."""

    @pytest.fixture
    def falloff(self) -> np.ndarray:
        return radial_falloff(10, 10, RadialFalloffBorder(curve=3.0, offset=2.2))

    def test_output_range(self, falloff: np.ndarray) -> None:
        assert falloff.min() >= 0.0
        assert falloff.max() <= 1.0

    def test_center_is_zero(self, falloff: np.ndarray) -> None:
        assert falloff[5, 5] == 0.0

    def test_outer_edge_is_one(self, falloff: np.ndarray) -> None:
        """x = 0 maps to nx = -1, where the curve reaches 1."""
        np.testing.assert_allclose(falloff[:, 0], 1.0)
        np.testing.assert_allclose(falloff[0, :], 1.0)

    def test_center_less_than_edges(self, falloff: np.ndarray) -> None:
        assert falloff[5, 5] < falloff[5, 1] < falloff[5, 0]

    def test_square_contours(self, falloff: np.ndarray) -> None:
        """Cells at equal Chebyshev distance share a value."""
        assert falloff[2, 5] == pytest.approx(falloff[5, 2])
        assert falloff[2, 2] == pytest.approx(falloff[2, 5])

    def test_symmetric(self, falloff: np.ndarray) -> None:
        assert falloff[5, 1] == pytest.approx(falloff[5, 9])
        assert falloff[1, 5] == pytest.approx(falloff[9, 5])

    def test_curve_shapes_transition(self) -> None:
        """A steeper curve keeps the interior lower."""
        soft = radial_falloff(20, 20, RadialFalloffBorder(curve=1.0, offset=2.2))
        steep = radial_falloff(20, 20, RadialFalloffBorder(curve=4.0, offset=2.2))
        assert steep[10, 6] < soft[10, 6]


class TestApplyBorder:
    """Tests for applying a border strategy to a field."""

    def test_none_leaves_field(self) -> None:
        field = np.random.default_rng(3).random((6, 5))
        result = apply_border(field, None)
        np.testing.assert_array_equal(result, field)
        assert result is not field

    def test_linear_is_additive(self) -> None:
        field = np.full((8, 8), 0.5)
        border = LinearEdgeBorder(border_size=2, fill_percent=0.4)
        result = apply_border(field, border)
        np.testing.assert_allclose(result, 0.5 + linear_edge_falloff(8, 8, border))

    def test_linear_not_clamped(self) -> None:
        """Additive fade may push values above 1."""
        field = np.ones((8, 8))
        border = LinearEdgeBorder(border_size=2, fill_percent=0.4)
        assert apply_border(field, border).max() > 1.0

    def test_radial_add(self) -> None:
        field = np.full((10, 10), 0.2)
        border = RadialFalloffBorder(curve=3.0, offset=2.2, combine="add")
        result = apply_border(field, border)
        np.testing.assert_allclose(result, 0.2 + radial_falloff(10, 10, border))

    def test_radial_multiply(self) -> None:
        """Multiply keeps the center and sinks the edges to zero."""
        field = np.full((10, 10), 0.8)
        border = RadialFalloffBorder(curve=3.0, offset=2.2, combine="multiply")
        result = apply_border(field, border)
        assert result[5, 5] == pytest.approx(0.8)
        np.testing.assert_allclose(result[:, 0], 0.0, atol=1e-12)
        assert result.max() <= 0.8
