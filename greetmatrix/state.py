"""Mutable animation state driven by an explicit clock.

AnimationState owns everything that changes between frames: the background
color index and its crossfade, and one RiseState per balloon. `advance(dt_ms)`
is the only way time moves, so a recorded sequence of deltas replays to the
same frames.
"""

from dataclasses import dataclass

from greetmatrix.animators import BackgroundCycler, BalloonWave, ConfettiLoop, TextPulser
from greetmatrix.canvas import Color
from greetmatrix.config import SceneConfig
from greetmatrix.tween import AnimatedColor


@dataclass(frozen=True)
class Frame:
    """Everything the renderer needs for one frame.

    Positions are (x, y) offsets from the screen center in layout units.
    """

    time_ms: float
    background: Color
    color_index: int
    text_scale: float
    subtitle_opacity: float
    balloons: tuple[tuple[float, float], ...]
    confetti: tuple[tuple[float, float], ...]


@dataclass
class RiseState:
    fraction: float = 0.0
    generation: int = -1


@dataclass
class _RiseTask:
    """One balloon's snap, wait, then animate sequence within a wave."""

    generation: int
    index: int
    wave_start: float
    snapped: bool = False


class AnimationState:
    def __init__(self, config: SceneConfig):
        self.config = config
        self.cycler = BackgroundCycler.from_config(config)
        self.pulser = TextPulser.from_config(config)
        self.wave = BalloonWave.from_config(config)
        self.confetti = ConfettiLoop.from_config(config)

        self.now = 0.0
        self.color_index = 0
        self._color_steps = 0
        self._background = AnimatedColor(
            self.cycler.color_for_step(0), self.cycler.crossfade_ms, self.cycler.easing
        )

        self.generation = -1
        self.rises = [RiseState() for _ in self.wave.elements]
        self._tasks: list[_RiseTask] = []
        self._launch_waves()
        self._step_tasks()

    def advance(self, dt_ms: float) -> Frame:
        """Move the clock forward by `dt_ms` and return the resulting frame."""
        if dt_ms < 0:
            raise ValueError(f"cannot advance by a negative delta ({dt_ms} ms)")
        self.now += dt_ms
        self._advance_background()
        self._launch_waves()
        self._step_tasks()
        return self.frame()

    def advance_to(self, t_ms: float) -> Frame:
        return self.advance(max(0.0, t_ms - self.now))

    # --- Background ---

    def _advance_background(self) -> None:
        # Retarget at each boundary crossed, at the boundary's own timestamp.
        steps = self.cycler.steps_at(self.now)
        while self._color_steps < steps:
            self._color_steps += 1
            self.color_index = (self.color_index + 1) % len(self.cycler.palette)
            self._background.retarget(
                self.cycler.palette[self.color_index], self._color_steps * self.cycler.period_ms
            )

    @property
    def background(self) -> Color:
        return self._background.value(self.now)

    # --- Balloons ---

    def _launch_waves(self) -> None:
        wave = self.wave.wave_index(self.now)
        if wave == self.generation:
            return
        # Skipped waves are superseded before they ever run.
        self.generation = wave
        wave_start = wave * self.wave.wave_ms
        for i in range(len(self.wave.elements)):
            self._tasks.append(_RiseTask(wave, i, wave_start))

    def _step_tasks(self) -> None:
        self._tasks = [task for task in self._tasks if self._step(task)]

    def _step(self, task: _RiseTask) -> bool:
        """Apply one task to its balloon; False once it should be dropped."""
        if task.generation != self.generation:
            return False
        rise = self.rises[task.index]
        if not task.snapped:
            rise.fraction = 0.0
            rise.generation = task.generation
            task.snapped = True
        element = self.wave.elements[task.index]
        in_wave = self.now - task.wave_start
        rise.fraction = self.wave.rise_fraction(element, in_wave)
        return in_wave - element.phase_delay_ms < self.wave.rise_ms

    # --- Snapshot ---

    def frame(self) -> Frame:
        t = self.now
        return Frame(
            time_ms=t,
            background=self.background,
            color_index=self.color_index,
            text_scale=self.pulser.scale(t),
            subtitle_opacity=self.pulser.subtitle_opacity(t),
            balloons=tuple(
                (e.x_offset, self.wave.offset_for(r.fraction))
                for e, r in zip(self.wave.elements, self.rises)
            ),
            confetti=tuple(self.confetti.positions(t)),
        )
