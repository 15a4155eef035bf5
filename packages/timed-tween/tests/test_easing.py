"""Tests for easing functions."""

import math

import pytest
from timed_tween import (
    EASINGS,
    get_easing,
    in_out_cubic,
    in_out_quartic,
    linear,
    out_back,
    out_back2,
    out_elastic,
)

GRID = [i / 100 for i in range(101)]


class TestLinearEasing:
    """Test linear easing function."""

    def test_linear_at_zero(self):
        assert linear(0.0) == 0.0

    def test_linear_at_half(self):
        assert linear(0.5) == 0.5

    def test_linear_at_one(self):
        assert linear(1.0) == 1.0

    def test_linear_extrapolates(self):
        """Inputs outside [0,1] are not clamped."""
        assert linear(-0.5) == -0.5
        assert linear(1.5) == 1.5


class TestInOutCubicEasing:
    """Test in_out_cubic easing function."""

    def test_endpoints(self):
        assert in_out_cubic(0.0) == 0.0
        assert in_out_cubic(1.0) == 1.0

    def test_midpoint_is_exact(self):
        """Both halves of the piecewise curve meet at 0.5."""
        assert in_out_cubic(0.5) == 0.5

    def test_quarter_points(self):
        """4t^3 at 0.25, 0.5((2t-2)^3 + 2) at 0.75."""
        assert in_out_cubic(0.25) == 0.0625
        assert in_out_cubic(0.75) == 0.9375

    def test_symmetric_around_midpoint(self):
        for t in (0.1, 0.2, 0.3, 0.4):
            assert in_out_cubic(t) + in_out_cubic(1 - t) == pytest.approx(1.0)

    def test_monotonic_on_unit_range(self):
        values = [in_out_cubic(t) for t in GRID]
        assert values == sorted(values)


class TestInOutQuarticEasing:
    """Test in_out_quartic easing function."""

    def test_endpoints(self):
        assert in_out_quartic(0.0) == 0.0
        assert in_out_quartic(1.0) == 1.0

    def test_midpoint_is_exact(self):
        assert in_out_quartic(0.5) == 0.5

    def test_quarter_points(self):
        """8t^4 at 0.25, -0.5((2t-2)^4 - 2) at 0.75."""
        assert in_out_quartic(0.25) == 0.03125
        assert in_out_quartic(0.75) == 0.96875

    def test_flatter_than_cubic_near_start(self):
        assert in_out_quartic(0.2) < in_out_cubic(0.2)


class TestOutBackEasing:
    """Test out_back easing function."""

    def test_ends_at_one(self):
        assert out_back(1.0) == 1.0

    def test_start_matches_closed_form(self):
        """(0-1)^2 * ((s+1)(0-1) + s) + 1 with s = 1.70158 is zero up to rounding."""
        s = 1.70158
        assert out_back(0.0) == (-1.0) * (-1.0) * ((s + 1) * -1.0 + s) + 1
        assert out_back(0.0) == pytest.approx(0.0, abs=1e-12)

    def test_overshoots_above_one(self):
        assert max(out_back(t) for t in GRID) > 1.0
        assert out_back(0.8) == pytest.approx(1.046451, abs=1e-6)


class TestOutBack2Easing:
    """Test out_back2 easing function."""

    def test_ends_at_one(self):
        assert out_back2(1.0) == 1.0

    def test_start_matches_closed_form(self):
        """1 - (1 - sin(pi)) leaves only sin(pi)'s rounding error."""
        assert out_back2(0.0) == 1 - (1 - math.sin(math.pi))
        assert out_back2(0.0) == pytest.approx(0.0, abs=1e-12)

    def test_overshoots_more_than_out_back(self):
        assert max(out_back2(t) for t in GRID) > max(out_back(t) for t in GRID)


class TestOutElasticEasing:
    """Test out_elastic easing function."""

    def test_exact_endpoints(self):
        """Endpoints bypass the trigonometric formula."""
        assert out_elastic(0.0) == 0.0
        assert out_elastic(1.0) == 1.0

    def test_midpoint_value(self):
        """sin(-9.75pi) * 2^-5 + 1."""
        expected = math.sin(-6.5 * math.pi * 1.5) * 2 ** -5 + 1
        assert out_elastic(0.5) == pytest.approx(expected)
        assert out_elastic(0.5) == pytest.approx(1.0 + math.sqrt(0.5) / 32)

    def test_oscillates_around_one(self):
        values = [out_elastic(t) for t in GRID[1:-1]]
        assert any(v > 1.0 for v in values)
        assert any(v < 1.0 for v in values)

    def test_values_are_finite(self):
        for t in GRID:
            assert math.isfinite(out_elastic(t))

    def test_settles_near_end(self):
        assert out_elastic(0.99) == pytest.approx(1.0, abs=1e-2)


class TestEasingsDict:
    """Test EASINGS registry."""

    def test_easings_contains_all_functions(self):
        expected_keys = {
            "linear",
            "in_out_cubic",
            "in_out_quartic",
            "out_back",
            "out_back2",
            "out_elastic",
        }
        assert set(EASINGS.keys()) == expected_keys

    def test_easings_values_are_callable(self):
        for name, func in EASINGS.items():
            assert callable(func), f"{name} is not callable"

    def test_easings_map_one_to_one(self):
        for name, func in EASINGS.items():
            assert func(1.0) == 1.0, f"{name}(1) != 1"

    def test_non_overshooting_easings_map_zero_to_zero(self):
        for name in ("linear", "in_out_cubic", "in_out_quartic", "out_elastic"):
            assert EASINGS[name](0.0) == 0.0, f"{name}(0) != 0"

    def test_easings_are_deterministic(self):
        for name, func in EASINGS.items():
            for t in GRID:
                assert func(t) == func(t), f"{name}({t}) is not deterministic"

    def test_get_easing_by_name(self):
        assert get_easing("out_elastic") is out_elastic

    def test_get_easing_unknown_name(self):
        with pytest.raises(KeyError, match="bounce"):
            get_easing("bounce")
