"""Retargetable time-based tweens for scalars and RGB colors."""

from greetmatrix.canvas import Color
from greetmatrix.easing import Easing, clamp01, linear


class AnimatedScalar:
    """A value moving from `start` to `target` over `duration_ms`.

    Time is passed in explicitly, so `value(now)` is a pure query. Retargeting
    starts the new leg from the value at that instant, never from the old
    target, so an in-flight animation carries over without a jump.
    """

    def __init__(self, value: float, duration_ms: float = 0.0, easing: Easing = linear):
        self.start = float(value)
        self.target = float(value)
        self.started_at = 0.0
        self.duration_ms = duration_ms
        self.easing = easing

    def fraction(self, now: float) -> float:
        if self.duration_ms <= 0:
            return 1.0
        return clamp01((now - self.started_at) / self.duration_ms)

    def value(self, now: float) -> float:
        f = self.fraction(now)
        if f >= 1.0:
            return self.target
        return self.start + (self.target - self.start) * self.easing(f)

    def is_running(self, now: float) -> bool:
        return self.fraction(now) < 1.0 and self.start != self.target

    def retarget(self, target: float, now: float) -> None:
        self.start = self.value(now)
        self.target = float(target)
        self.started_at = now

    def snap_to(self, value: float, now: float) -> None:
        self.start = self.target = float(value)
        self.started_at = now


class AnimatedColor:
    """Crossfades an RGB color; one AnimatedScalar per channel."""

    def __init__(self, color: Color, duration_ms: float = 0.0, easing: Easing = linear):
        self.channels = [AnimatedScalar(c, duration_ms, easing) for c in color]

    @property
    def target(self) -> Color:
        r, g, b = (int(ch.target) for ch in self.channels)
        return (r, g, b)

    def value(self, now: float) -> Color:
        r, g, b = (max(0, min(255, round(ch.value(now)))) for ch in self.channels)
        return (r, g, b)

    def retarget(self, color: Color, now: float) -> None:
        for ch, c in zip(self.channels, color):
            ch.retarget(c, now)

    def snap_to(self, color: Color, now: float) -> None:
        for ch, c in zip(self.channels, color):
            ch.snap_to(c, now)
