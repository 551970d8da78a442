"""Tests for easing formulas and the formula registry."""
import pytest

from tick_glide import FORMULAS, register_formula, resolve_formula
from tick_glide.easing import linear


class TestLinearFormula:
    """Test the reference linear formula."""

    def test_linear_at_start(self):
        """Linear should return start at elapsed 0."""
        assert linear(0, 10, 50, 1000) == 10

    def test_linear_at_end(self):
        """Linear should return start + delta at elapsed == duration."""
        assert linear(1000, 10, 50, 1000) == 60

    @pytest.mark.parametrize("t", [0, 250, 500, 750, 1000])
    def test_linear_is_proportional(self, t):
        """Linear should move delta * t / d from start."""
        assert linear(t, 0, 100, 1000) == pytest.approx(100 * t / 1000)

    def test_linear_negative_delta(self):
        """Linear should interpolate downwards for negative deltas."""
        assert linear(500, 100, -100, 1000) == pytest.approx(50)


class TestQuadraticFormulas:
    """Test the bundled quadratic curves hit both endpoints."""

    @pytest.mark.parametrize("name", ["ease_in", "ease_out", "ease_in_out"])
    def test_endpoints(self, name):
        """Every curve starts at start and ends at start + delta."""
        fn = FORMULAS[name]
        assert fn(0, 5, 20, 400) == pytest.approx(5)
        assert fn(400, 5, 20, 400) == pytest.approx(25)

    def test_ease_in_half(self):
        """Ease-in should be a quarter of the way at half time."""
        assert FORMULAS["ease_in"](500, 0, 100, 1000) == pytest.approx(25)

    def test_ease_out_half(self):
        """Ease-out should be three quarters of the way at half time."""
        assert FORMULAS["ease_out"](500, 0, 100, 1000) == pytest.approx(75)

    def test_ease_in_out_half(self):
        """Ease-in-out should be halfway at half time."""
        assert FORMULAS["ease_in_out"](500, 0, 100, 1000) == pytest.approx(50)


class TestRegistry:
    """Test formula lookup and registration."""

    def test_resolve_known(self):
        assert resolve_formula("ease_in") is FORMULAS["ease_in"]

    def test_resolve_unknown_falls_back_to_linear(self):
        """Unregistered names should silently resolve to linear."""
        assert resolve_formula("bogus") is linear

    def test_resolve_none_falls_back_to_linear(self):
        assert resolve_formula(None) is linear

    def test_register_formula(self):
        """Registered formulas become resolvable by name."""

        def snap(t, b, c, d):
            return b + c

        register_formula("snap_test", snap)
        try:
            assert resolve_formula("snap_test") is snap
        finally:
            del FORMULAS["snap_test"]
