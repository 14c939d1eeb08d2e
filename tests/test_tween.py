"""Tests for retargetable scalars and colors."""

import pytest

from greetmatrix.easing import EASINGS
from greetmatrix.tween import AnimatedColor, AnimatedScalar


class TestAnimatedScalar:
    """Test AnimatedScalar."""

    def test_initial_value_is_settled(self):
        """A fresh scalar should hold its value and not be running."""
        s = AnimatedScalar(3.0, duration_ms=100)
        assert s.value(0) == 3.0
        assert s.value(1000) == 3.0
        assert not s.is_running(0)

    def test_linear_progress(self):
        """Linear retarget should be halfway at half the duration."""
        s = AnimatedScalar(0.0, duration_ms=100)
        s.retarget(10.0, now=0)
        assert s.value(50) == pytest.approx(5.0)
        assert s.is_running(50)

    def test_lands_exactly_on_target(self):
        """After the duration the value should equal the target exactly."""
        s = AnimatedScalar(0.1, duration_ms=100, easing=EASINGS["ease"])
        s.retarget(0.7, now=0)
        assert s.value(100) == 0.7
        assert s.value(250) == 0.7
        assert not s.is_running(100)

    def test_retarget_mid_flight_starts_from_current_value(self):
        """Retargeting mid-flight should start from the displayed value."""
        s = AnimatedScalar(0.0, duration_ms=100)
        s.retarget(10.0, now=0)
        s.retarget(0.0, now=40)
        assert s.start == pytest.approx(4.0)
        assert s.value(40) == pytest.approx(4.0)
        assert s.value(90) == pytest.approx(2.0)

    def test_snap_to_skips_animation(self):
        """snap_to() should jump without animating."""
        s = AnimatedScalar(0.0, duration_ms=100)
        s.retarget(10.0, now=0)
        s.snap_to(0.0, now=30)
        assert s.value(30) == 0.0
        assert s.value(60) == 0.0

    def test_zero_duration_jumps(self):
        """A zero duration should reach the target immediately."""
        s = AnimatedScalar(1.0, duration_ms=0)
        s.retarget(5.0, now=10)
        assert s.value(10) == 5.0


class TestAnimatedColor:
    """Test AnimatedColor."""

    def test_crossfade_midpoint(self):
        """A linear crossfade should be the channel-wise midpoint at half time."""
        c = AnimatedColor((0, 0, 0), duration_ms=1000)
        c.retarget((200, 100, 50), now=0)
        assert c.value(500) == (100, 50, 25)
        assert c.target == (200, 100, 50)

    def test_values_stay_in_gamut(self):
        """Channels should stay within 0..255 throughout the fade."""
        c = AnimatedColor((255, 0, 255), duration_ms=1000, easing=EASINGS["fast_out_linear_in"])
        c.retarget((0, 255, 0), now=0)
        for t in range(0, 1001, 50):
            assert all(0 <= ch <= 255 for ch in c.value(t))

    def test_retarget_carries_over(self):
        """A color retargeted mid-fade should start from the blended value."""
        c = AnimatedColor((0, 0, 0), duration_ms=100)
        c.retarget((100, 100, 100), now=0)
        c.retarget((0, 0, 0), now=50)
        assert c.value(50) == (50, 50, 50)
