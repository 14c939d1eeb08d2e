"""Pure animators: every query is a function of elapsed time (ms) and config.

Calling any of them twice with the same time returns the same result, which is
what makes frames replayable and testable without a real clock.
"""

from enum import Enum

from greetmatrix.canvas import Color
from greetmatrix.config import FloatingElement, SceneConfig
from greetmatrix.easing import Easing, clamp01, get_easing, linear
from greetmatrix.tween import AnimatedColor


class Phase(Enum):
    WAITING = "waiting"
    ANIMATING = "animating"
    DONE = "done"


def lerp(start: float, stop: float, fraction: float) -> float:
    return start + (stop - start) * clamp01(fraction)


# --- Background ---

class BackgroundCycler:
    """Steps through the palette every `period_ms` and crossfades between entries."""

    def __init__(self, palette: list[Color], period_ms: float = 1000,
                 crossfade_ms: float = 1000, easing: Easing = linear):
        self.palette = list(palette)
        self.period_ms = period_ms
        self.crossfade_ms = crossfade_ms
        self.easing = easing
        self._replay: tuple[int, AnimatedColor] | None = None

    @classmethod
    def from_config(cls, config: SceneConfig) -> "BackgroundCycler":
        return cls(config.palette, config.color_period_ms, config.crossfade_ms,
                   get_easing(config.crossfade_easing))

    def steps_at(self, t_ms: float) -> int:
        """Number of palette advances that have happened by `t_ms`."""
        return max(0, int(t_ms // self.period_ms))

    def index_at(self, t_ms: float) -> int:
        return self.steps_at(t_ms) % len(self.palette)

    def color_for_step(self, step: int) -> Color:
        return self.palette[step % len(self.palette)]

    def current_color(self, t_ms: float) -> Color:
        """Displayed (crossfaded) background color at `t_ms`.

        When a crossfade fits inside one period, only the latest advance can be
        in flight and it starts from the previous palette entry. A longer
        crossfade is retargeted mid-flight, so every advance from the first
        one is replayed in order. The replay is cached and continued forward
        for later queries.
        """
        steps = self.steps_at(t_ms)
        if self.crossfade_ms <= self.period_ms:
            first = max(1, steps)
            color = AnimatedColor(self.color_for_step(first - 1), self.crossfade_ms, self.easing)
        else:
            if self._replay is None or self._replay[0] > steps:
                self._replay = (0, AnimatedColor(self.color_for_step(0), self.crossfade_ms, self.easing))
            first, color = self._replay
            first += 1
            self._replay = (steps, color)
        for step in range(first, steps + 1):
            color.retarget(self.color_for_step(step), step * self.period_ms)
        return color.value(t_ms)


# --- Text ---

class Oscillator:
    """Ping-pong between `low` and `high`, each leg lasting `half_period_ms`.

    The forward leg follows the easing curve; the reverse leg plays the same
    curve backwards.
    """

    def __init__(self, low: float, high: float, half_period_ms: float, easing: Easing = linear):
        self.low = low
        self.high = high
        self.half_period_ms = half_period_ms
        self.easing = easing

    @property
    def period_ms(self) -> float:
        return 2 * self.half_period_ms

    def ramp(self, t_ms: float) -> float:
        local = t_ms % self.period_ms
        if local < self.half_period_ms:
            return clamp01(local / self.half_period_ms)
        return clamp01(1.0 - (local - self.half_period_ms) / self.half_period_ms)

    def value(self, t_ms: float) -> float:
        return lerp(self.low, self.high, self.easing(self.ramp(t_ms)))


class TextPulser:
    """Greeting scale pulse and subtitle fade, two independent oscillators."""

    def __init__(self, pulse: Oscillator, fade: Oscillator):
        self.pulse = pulse
        self.fade = fade

    @classmethod
    def from_config(cls, config: SceneConfig) -> "TextPulser":
        return cls(
            Oscillator(config.scale_min, config.scale_max, config.scale_half_period_ms,
                       get_easing(config.scale_easing)),
            Oscillator(config.opacity_min, config.opacity_max, config.opacity_half_period_ms,
                       get_easing(config.opacity_easing)),
        )

    def scale(self, t_ms: float) -> float:
        return self.pulse.value(t_ms)

    def subtitle_opacity(self, t_ms: float) -> float:
        return self.fade.value(t_ms)


# --- Floating elements ---

class BalloonWave:
    """Balloons relaunched every `wave_ms`; each rises after its phase delay.

    The rise takes longer than a wave, so a new wave snaps every balloon back to
    the bottom even when it is still mid-flight.
    """

    def __init__(self, elements: list[FloatingElement], wave_ms: float = 5000,
                 rise_ms: float = 10000, start_offset: float = 600,
                 end_offset: float = -800, easing: Easing = linear):
        self.elements = list(elements)
        self.wave_ms = wave_ms
        self.rise_ms = rise_ms
        self.start_offset = start_offset
        self.end_offset = end_offset
        self.easing = easing

    @classmethod
    def from_config(cls, config: SceneConfig) -> "BalloonWave":
        return cls(config.balloons, config.wave_ms, config.rise_ms,
                   config.balloon_start, config.balloon_end, get_easing(config.rise_easing))

    def wave_index(self, t_ms: float) -> int:
        return max(0, int(t_ms // self.wave_ms))

    def wave_start(self, t_ms: float) -> float:
        return self.wave_index(t_ms) * self.wave_ms

    def rise_fraction(self, element: FloatingElement, elapsed_in_wave: float) -> float:
        """Eased rise progress `elapsed_in_wave` ms after the wave started."""
        since = elapsed_in_wave - element.phase_delay_ms
        if since < 0:
            return 0.0
        return clamp01(self.easing(clamp01(since / self.rise_ms)))

    def phase(self, element: FloatingElement, t_ms: float) -> Phase:
        since = t_ms - self.wave_start(t_ms) - element.phase_delay_ms
        if since < 0:
            return Phase.WAITING
        if since < self.rise_ms:
            return Phase.ANIMATING
        return Phase.DONE

    def fraction(self, element: FloatingElement, t_ms: float) -> float:
        return self.rise_fraction(element, t_ms - self.wave_start(t_ms))

    def offset_for(self, fraction: float) -> float:
        return lerp(self.start_offset, self.end_offset, fraction)

    def offset(self, element: FloatingElement, t_ms: float) -> float:
        return self.offset_for(self.fraction(element, t_ms))

    def positions(self, t_ms: float) -> list[tuple[float, float]]:
        return [(e.x_offset, self.offset(e, t_ms)) for e in self.elements]


class ConfettiLoop:
    """Confetti falling on a shared sawtooth cycle, staggered by phase delay."""

    def __init__(self, elements: list[FloatingElement], cycle_ms: float = 5000,
                 start_offset: float = -500, end_offset: float = 600):
        self.elements = list(elements)
        self.cycle_ms = cycle_ms
        self.start_offset = start_offset
        self.end_offset = end_offset

    @classmethod
    def from_config(cls, config: SceneConfig) -> "ConfettiLoop":
        return cls(config.confetti, config.confetti_cycle_ms,
                   config.confetti_start, config.confetti_end)

    def phase(self, element: FloatingElement, t_ms: float) -> Phase:
        if t_ms % self.cycle_ms < element.phase_delay_ms:
            return Phase.WAITING
        return Phase.ANIMATING

    def fraction(self, element: FloatingElement, t_ms: float) -> float:
        local = t_ms % self.cycle_ms
        delay = element.phase_delay_ms
        if local < delay or delay >= self.cycle_ms:
            return 0.0
        return clamp01((local - delay) / (self.cycle_ms - delay))

    def offset(self, element: FloatingElement, t_ms: float) -> float:
        return lerp(self.start_offset, self.end_offset, self.fraction(element, t_ms))

    def positions(self, t_ms: float) -> list[tuple[float, float]]:
        return [(e.x_offset, self.offset(e, t_ms)) for e in self.elements]
