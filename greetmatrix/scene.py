"""Greeting scene - draws each animation frame onto a Canvas."""

from greetmatrix.canvas import GLYPH_H, Canvas, text_width
from greetmatrix.config import SceneConfig, Settings
from greetmatrix.sprites import sprite_for
from greetmatrix.state import AnimationState, Frame
from greetmatrix.strings import get_string

LINE_GAP = 2  # pixels between greeting lines, before scaling
SUBTITLE_GAP = 4


class GreetingScene:
    """Owns an AnimationState and renders it with the run loop's callback shape."""

    def __init__(self, config: SceneConfig, message: str, sender: str):
        self.config = config
        self.message = message
        self.sender = sender
        self.state = AnimationState(self.config)

    @classmethod
    def from_settings(cls, settings: Settings) -> "GreetingScene":
        message = settings.message or get_string("happy_birthday", settings.locale)
        sender = settings.sender or get_string("from_", settings.locale)
        return cls(settings.scene(), message, sender)

    def restart(self) -> None:
        self.state = AnimationState(self.config)

    def render(self, canvas: Canvas, t: float, frame: int) -> None:
        t_ms = t * 1000.0
        if t_ms < self.state.now:
            # Clock went backwards (new recording or replay): start over.
            print(f"[scene] Clock rewound to {t:.2f}s, restarting timeline")
            self.restart()
        self.draw(canvas, self.state.advance_to(t_ms))

    # --- Drawing ---

    def units_to_px(self, canvas: Canvas) -> float:
        return canvas.height / self.config.layout_units

    def draw(self, canvas: Canvas, frame: Frame) -> None:
        cfg = self.config
        k = self.units_to_px(canvas)
        cx, cy = canvas.width / 2, canvas.height / 2

        canvas.clear(frame.background)

        for element, (x, y) in zip(cfg.balloons, frame.balloons):
            canvas.sprite(cx + x * k, cy + y * k, sprite_for(element.glyph),
                          scale=cfg.balloon_size, opacity=cfg.balloon_opacity)

        for element, (x, y) in zip(cfg.confetti, frame.confetti):
            canvas.sprite(cx + x * k, cy + y * k, sprite_for(element.glyph),
                          scale=cfg.confetti_size, opacity=cfg.confetti_opacity)

        self._draw_text(canvas, frame)

    def greeting_scale(self, canvas: Canvas, pulse: float) -> float:
        """Pulsed greeting size, shrunk so the widest line still fits at peak pulse."""
        widest = max(text_width(line) for line in self.message.split("\n"))
        if widest == 0:
            return self.config.greeting_size * pulse
        fit = (canvas.width - 2) / (widest * self.config.scale_max)
        return min(self.config.greeting_size, fit) * pulse

    def _draw_text(self, canvas: Canvas, frame: Frame) -> None:
        cfg = self.config
        lines = self.message.split("\n")
        scale = self.greeting_scale(canvas, frame.text_scale)
        line_h = (GLYPH_H + LINE_GAP) * scale
        block_h = len(lines) * line_h - LINE_GAP * scale
        sub_scale = min(1.0, (canvas.width - 2) / max(1, text_width(self.sender)))

        total_h = block_h + SUBTITLE_GAP + GLYPH_H * sub_scale
        top = canvas.height / 2 - total_h / 2
        cx = canvas.width / 2

        for i, line in enumerate(lines):
            canvas.text(cx, top + i * line_h + GLYPH_H * scale / 2, line, cfg.text_color,
                        scale=scale, align="center")

        sub_y = top + block_h + SUBTITLE_GAP + GLYPH_H * sub_scale / 2
        canvas.text(cx, sub_y, self.sender, cfg.text_color, scale=sub_scale,
                    opacity=frame.subtitle_opacity, align="center")
