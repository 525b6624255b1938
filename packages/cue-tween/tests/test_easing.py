"""Tests for easing functions."""

from cue_tween import EASINGS


class TestEndpoints:
    """Every easing maps 0 -> 0 and 1 -> 1."""

    def test_all_start_at_zero(self):
        """No easing offsets the start value."""
        for name, fn in EASINGS.items():
            assert fn(0.0) == 0.0, name

    def test_all_end_at_one(self):
        """No easing overshoots or undershoots the end value."""
        for name, fn in EASINGS.items():
            assert fn(1.0) == 1.0, name

    def test_only_known_curves(self):
        """The registry holds the curves the presentation uses."""
        assert set(EASINGS) == {"linear", "ease_out_cubic"}


class TestLinearEasing:
    """Test linear easing function."""

    def test_linear_is_identity(self):
        """Linear easing returns its input."""
        for t in (0.1, 0.25, 0.5, 0.9):
            assert EASINGS["linear"](t) == t


class TestCubicEasing:
    """Cubic ease-out used by the latency counter."""

    def test_ease_out_cubic_at_half(self):
        """1 - (1 - 0.5)^3 = 0.875."""
        assert EASINGS["ease_out_cubic"](0.5) == 0.875

    def test_ease_out_cubic_is_monotonic(self):
        """The curve never runs backwards."""
        fn = EASINGS["ease_out_cubic"]
        samples = [fn(i / 100) for i in range(101)]
        assert samples == sorted(samples)

    def test_ease_out_cubic_front_loaded(self):
        """Most of the distance is covered early."""
        assert EASINGS["ease_out_cubic"](0.25) > 0.5
