"""Tests for easing curves."""

import pytest

from greetmatrix.easing import EASINGS, CubicBezier, clamp01, get_easing


class TestClamp:
    """Test clamp01."""

    def test_inside_range_unchanged(self):
        """Values inside 0..1 should pass through."""
        assert clamp01(0.25) == 0.25

    def test_clamps_both_ends(self):
        """Values outside 0..1 should be pinned to the nearest end."""
        assert clamp01(-0.5) == 0.0
        assert clamp01(1.0000001) == 1.0


class TestEndpoints:
    """Test properties shared by every named easing."""

    @pytest.mark.parametrize("name", sorted(EASINGS))
    def test_zero_and_one_exact(self, name):
        """Every easing should return exactly 0 at t=0 and 1 at t=1."""
        easing = EASINGS[name]
        assert easing(0.0) == 0.0
        assert easing(1.0) == 1.0

    @pytest.mark.parametrize("name", sorted(EASINGS))
    def test_out_of_range_input_clamped(self, name):
        """Inputs outside 0..1 should be clamped before easing."""
        easing = EASINGS[name]
        assert easing(-3.0) == 0.0
        assert easing(7.0) == 1.0

    @pytest.mark.parametrize("name", sorted(EASINGS))
    def test_monotonic_and_in_range(self, name):
        """Every easing should rise monotonically within 0..1."""
        easing = EASINGS[name]
        values = [easing(i / 100) for i in range(101)]
        assert all(0.0 <= v <= 1.0 for v in values)
        assert all(b >= a - 1e-9 for a, b in zip(values, values[1:]))


class TestCurveShapes:
    """Test the shape of individual curves."""

    def test_linear_identity(self):
        """Linear should return its input."""
        assert EASINGS["linear"](0.3) == 0.3

    def test_ease_in_out_symmetric(self):
        """Ease-in-out should be point-symmetric about the midpoint."""
        easing = EASINGS["ease_in_out"]
        assert easing(0.5) == pytest.approx(0.5, abs=1e-5)
        assert easing(0.2) == pytest.approx(1 - easing(0.8), abs=1e-5)

    def test_ease_out_front_loaded(self):
        """Ease-out should be past halfway at t=0.5."""
        assert EASINGS["ease_out"](0.5) > 0.5

    def test_fast_out_linear_in_starts_slow_then_accelerates(self):
        """Fast-out-linear-in should lag early and land fast."""
        easing = EASINGS["fast_out_linear_in"]
        assert easing(0.5) < 0.5
        assert easing(1.0) - easing(0.9) > easing(0.1) - easing(0.0)

    def test_bezier_matches_diagonal_control_points(self):
        """Control points on the diagonal should give a straight line."""
        diagonal = CubicBezier(1 / 3, 1 / 3, 2 / 3, 2 / 3)
        for t in (0.1, 0.37, 0.5, 0.91):
            assert diagonal(t) == pytest.approx(t, abs=1e-5)


class TestLookup:
    """Test get_easing."""

    def test_get_known(self):
        """Known names should return the shared curve."""
        assert get_easing("ease") is EASINGS["ease"]

    def test_get_unknown_raises(self):
        """Unknown names should raise KeyError naming the curve."""
        with pytest.raises(KeyError, match="bounce"):
            get_easing("bounce")
