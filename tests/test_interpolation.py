"""Tests for interpolation kernels."""

import numpy as np
import pytest

from valuenoise.exceptions import KnotCountError
from valuenoise.interpolation import bicubic, bilinear, cubic, lerp


class TestLerp:
    """Tests for linear interpolation."""

    def test_endpoints(self) -> None:
        """Weights 0 and 1 return the endpoints."""
        assert lerp(2.0, 6.0, 0.0) == 2.0
        assert lerp(2.0, 6.0, 1.0) == 6.0

    def test_midpoint(self) -> None:
        """Weight 0.5 returns the mean."""
        assert lerp(2.0, 6.0, 0.5) == pytest.approx(4.0)

    def test_extrapolates(self) -> None:
        """Weights outside [0, 1] extrapolate instead of failing."""
        assert lerp(0.0, 1.0, 1.5) == pytest.approx(1.5)
        assert lerp(0.0, 1.0, -0.5) == pytest.approx(-0.5)


class TestBilinear:
    """Tests for bilinear interpolation."""

    @pytest.mark.parametrize(
        "weight_x, weight_y, expected",
        [(0.0, 0.0, 1.0), (1.0, 0.0, 2.0), (0.0, 1.0, 3.0), (1.0, 1.0, 4.0)],
    )
    def test_corners_reproduced(self, weight_x, weight_y, expected) -> None:
        """Lattice-aligned weights reproduce the corner values."""
        result = bilinear(1.0, 2.0, 3.0, 4.0, weight_x, weight_y)
        assert result == pytest.approx(expected)

    def test_center_is_mean(self) -> None:
        """Center of the quad is the mean of the corners."""
        assert bilinear(1.0, 2.0, 3.0, 4.0, 0.5, 0.5) == pytest.approx(2.5)

    def test_x_before_y(self) -> None:
        """Interpolates along x for bottom and top, then along y."""
        result = bilinear(0.0, 10.0, 20.0, 40.0, 0.25, 0.5)
        bottom = 2.5
        top = 25.0
        assert result == pytest.approx(bottom + 0.5 * (top - bottom))

    def test_vectorized(self) -> None:
        """Array weights broadcast to an array of results."""
        weights = np.array([0.0, 0.5, 1.0])
        result = bilinear(0.0, 1.0, 0.0, 1.0, weights, 0.3)
        np.testing.assert_allclose(result, weights)


class TestCubic:
    """Tests for 1D Catmull-Rom interpolation."""

    def test_weight_zero_returns_second_knot(self) -> None:
        """At weight 0 the spline passes through knot 1."""
        assert cubic([3.0, 7.0, -2.0, 5.0], 0.0) == pytest.approx(7.0)

    def test_weight_one_returns_third_knot(self) -> None:
        """At weight 1 the spline passes through knot 2."""
        assert cubic([3.0, 7.0, -2.0, 5.0], 1.0) == pytest.approx(-2.0)

    def test_reproduces_linear_data(self) -> None:
        """Knots on a line interpolate along that line."""
        assert cubic([0.0, 1.0, 2.0, 3.0], 0.25) == pytest.approx(1.25)

    def test_midpoint_value(self) -> None:
        """Midpoint matches the Catmull-Rom formula."""
        # c0=1, c1=0.5, c2=-0.5, c3=0 for knots [0, 1, 1, 0]
        result = cubic([0.0, 1.0, 1.0, 0.0], 0.5)
        assert result == pytest.approx(1.0 + 0.25 - 0.125)

    def test_can_overshoot(self) -> None:
        """Results are not bounded by the knot range."""
        assert cubic([0.0, 1.0, 1.0, 0.0], 0.5) > 1.0
        assert cubic([1.0, 0.0, 0.0, 1.0], 0.5) < 0.0

    def test_vectorized_over_leading_axes(self) -> None:
        """Trailing axis holds the knots, leading axes are preserved."""
        knots = np.tile([3.0, 7.0, -2.0, 5.0], (2, 5, 1))
        result = cubic(knots, 0.0)
        assert result.shape == (2, 5)
        np.testing.assert_allclose(result, 7.0)

    @pytest.mark.parametrize("knots", [[1.0, 2.0, 3.0], [1.0, 2.0, 3.0, 4.0, 5.0]])
    def test_wrong_knot_count_raises(self, knots) -> None:
        """Anything but 4 knots is rejected."""
        with pytest.raises(KnotCountError, match="must be 4"):
            cubic(knots, 0.5)

    def test_scalar_raises(self) -> None:
        """A bare scalar is not a knot set."""
        with pytest.raises(KnotCountError):
            cubic(1.0, 0.5)


class TestBicubic:
    """Tests for bicubic interpolation."""

    def test_weight_zero_returns_inner_knot(self) -> None:
        """Zero weights return knot (row 1, column 1)."""
        knots = np.arange(16, dtype=np.float64).reshape(4, 4)
        assert bicubic(knots, 0.0, 0.0) == pytest.approx(knots[1, 1])

    def test_weight_one_returns_opposite_inner_knot(self) -> None:
        """Unit weights return knot (row 2, column 2)."""
        knots = np.random.default_rng(3).random((4, 4))
        assert bicubic(knots, 1.0, 1.0) == pytest.approx(knots[2, 2])

    def test_rows_then_columns(self) -> None:
        """Equals cubic along each row followed by cubic along the results."""
        knots = np.random.default_rng(5).random((4, 4))
        rows = [cubic(row, 0.3) for row in knots]
        assert bicubic(knots, 0.3, 0.7) == pytest.approx(cubic(rows, 0.7))

    def test_constant_knots(self) -> None:
        """A constant neighborhood interpolates to the constant."""
        knots = np.full((4, 4), 0.25)
        assert bicubic(knots, 0.4, 0.6) == pytest.approx(0.25)

    def test_vectorized(self) -> None:
        """A batch of neighborhoods is evaluated with per-item weights."""
        rng = np.random.default_rng(11)
        knots = rng.random((6, 4, 4))
        weights_x = rng.random(6)
        result = bicubic(knots, weights_x, 0.5)
        expected = [bicubic(k, wx, 0.5) for k, wx in zip(knots, weights_x)]
        np.testing.assert_allclose(result, expected)

    @pytest.mark.parametrize("shape", [(3, 4), (4, 3), (4,), (5, 5)])
    def test_wrong_shape_raises(self, shape) -> None:
        """Anything but a 4x4 neighborhood is rejected."""
        with pytest.raises(KnotCountError, match="4 in each dimension"):
            bicubic(np.zeros(shape), 0.5, 0.5)
