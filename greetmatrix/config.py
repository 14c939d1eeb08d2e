"""Scene configuration and runtime settings.

SceneConfig holds every timing constant, the palette and the floating element
lists. It is a pydantic model so a hand-edited scene file is checked field by
field; any failure surfaces as a ConfigError naming the offending entry.
Settings are read from the environment (and a project-level .env file) the
same way the board and server scripts pick up their knobs.
"""

import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Annotated, Any

from dotenv import load_dotenv
from pydantic import (
    BaseModel,
    BeforeValidator,
    Field,
    ValidationError,
    field_serializer,
    field_validator,
)

from greetmatrix.canvas import Canvas, Color
from greetmatrix.easing import EASINGS
from greetmatrix.sprites import Symbol

load_dotenv(Path(__file__).parent.parent / ".env")

_HEX_COLOR = re.compile(r"^#?[0-9a-fA-F]{6}$")


class ConfigError(ValueError):
    """Raised for a scene configuration that cannot be animated."""


def _describe(error: ValidationError) -> str:
    messages = []
    for err in error.errors():
        field_path = ".".join(str(x) for x in err["loc"]) or "scene"
        messages.append(f"{field_path}: {err['msg']}")
    return "; ".join(messages)


def _parse_color(value: Any) -> Color:
    """Accept '#rrggbb' / 'rrggbb' strings or a 3-item sequence of 0..255 ints."""
    if isinstance(value, str):
        if not _HEX_COLOR.match(value):
            raise ValueError(f"invalid RGB color {value!r}")
        return Canvas.hex(int(value.lstrip("#"), 16))
    if not isinstance(value, (list, tuple)) or len(value) != 3:
        raise ValueError(f"invalid RGB color {value!r}")
    for channel in value:
        if isinstance(channel, bool) or not isinstance(channel, int) or not 0 <= channel <= 255:
            raise ValueError(f"invalid RGB color {value!r}")
    return tuple(value)


RGB = Annotated[Color, BeforeValidator(_parse_color)]
Offset = Annotated[float, Field(strict=True)]
Positive = Annotated[float, Field(strict=True, gt=0)]
Opacity = Annotated[float, Field(strict=True, ge=0, le=1)]


class _Model(BaseModel):
    def __init__(self, **data: Any):
        try:
            super().__init__(**data)
        except ValidationError as e:
            raise ConfigError(_describe(e)) from e


class FloatingElement(_Model):
    """One balloon or confetti glyph: horizontal offset plus start delay."""

    model_config = {"frozen": True, "extra": "forbid"}

    glyph: Symbol
    x_offset: Offset
    phase_delay_ms: float = Field(..., strict=True, ge=0, description="Delay before the element starts moving")

    @field_validator("glyph", mode="before")
    @classmethod
    def validate_glyph(cls, v):
        # Scene files name glyphs (e.g. "CAKE") rather than embedding emoji
        if isinstance(v, str) and not isinstance(v, Symbol) and v in Symbol.__members__:
            return Symbol[v]
        return v

    @field_serializer("glyph")
    def serialize_glyph(self, glyph: Symbol) -> str:
        return glyph.name


# --- Defaults ---

DEFAULT_PALETTE: list[Color] = [
    Canvas.hex(0xF8BBD0),  # pastel pink
    Canvas.hex(0xE6E6FA),  # lavender
    Canvas.hex(0xC8E6C9),  # mint green
    Canvas.hex(0xB3E5FC),  # pastel blue
    Canvas.hex(0xFCE4EC),  # pale rose
    Canvas.hex(0xE1F5FE),  # pale sky
    Canvas.hex(0xFFE0B2),  # soft peach
    Canvas.hex(0xFFF9C4),  # soft yellow
]


def _element(glyph: Symbol, x_offset: float, phase_delay_ms: float) -> FloatingElement:
    return FloatingElement(glyph=glyph, x_offset=x_offset, phase_delay_ms=phase_delay_ms)


# Full pool of balloon slots; only three are launched by default.
BALLOON_POOL: list[FloatingElement] = [
    _element(Symbol.BALLOON, x, delay)
    for x, delay in [(-132, 527), (45, 1834), (249, 112), (-87, 1540), (-23, 39),
                     (168, 998), (-45, 712), (201, 366), (-10, 1265), (78, 433)]
]

DEFAULT_BALLOONS: list[FloatingElement] = [BALLOON_POOL[1], BALLOON_POOL[3], BALLOON_POOL[8]]

DEFAULT_CONFETTI: list[FloatingElement] = [
    _element(Symbol.PARTY_POPPER, -147, 1280),
    _element(Symbol.CONFETTI_BALL, 103, 320),
    _element(Symbol.PARTY_FACE, -32, 1720),
    _element(Symbol.CAKE, 198, 470),
    _element(Symbol.DOUGHNUT, -115, 930),
    _element(Symbol.HALO_FACE, 36, 1840),
    _element(Symbol.CROWN, -189, 150),
    _element(Symbol.TEDDY_BEAR, 57, 1130),
    _element(Symbol.COOKIE, 122, 740),
    _element(Symbol.CUPCAKE, -61, 2000),
    _element(Symbol.CHOCOLATE, 171, 290),
]


class SceneConfig(_Model):
    """Everything the animation timeline is derived from. Times are in ms,
    offsets in layout units relative to the screen center (+y is down)."""

    model_config = {"extra": "forbid", "validate_assignment": True}

    palette: list[RGB] = Field(default_factory=lambda: list(DEFAULT_PALETTE), min_length=1)
    color_period_ms: Positive = 1000.0
    crossfade_ms: Positive = 1000.0
    crossfade_easing: str = "fast_out_linear_in"

    scale_min: Offset = 0.9
    scale_max: Offset = 1.1
    scale_half_period_ms: Positive = 500.0
    scale_easing: str = "ease_in_out"
    opacity_min: Opacity = 0.5
    opacity_max: Opacity = 1.0
    opacity_half_period_ms: Positive = 1000.0
    opacity_easing: str = "ease_out"

    wave_ms: Positive = 5000.0
    rise_ms: Positive = 10000.0
    rise_easing: str = "ease"
    balloon_start: Offset = 600.0
    balloon_end: Offset = -800.0
    balloon_opacity: Opacity = 0.8
    balloon_size: Positive = 2.0
    balloons: list[FloatingElement] = Field(default_factory=lambda: list(DEFAULT_BALLOONS))

    confetti_cycle_ms: Positive = 5000.0
    confetti_start: Offset = -500.0
    confetti_end: Offset = 600.0
    confetti_opacity: Opacity = 0.7
    confetti_size: Positive = 1.0
    confetti: list[FloatingElement] = Field(default_factory=lambda: list(DEFAULT_CONFETTI))

    # Viewport height in layout units; maps offsets onto canvas pixels
    layout_units: Positive = 900.0
    text_color: RGB = (90, 20, 60)
    greeting_size: Positive = 1.5

    @field_validator("crossfade_easing", "scale_easing", "opacity_easing", "rise_easing")
    @classmethod
    def validate_easing(cls, v):
        if v not in EASINGS:
            msg = f"unknown easing {v!r}, expected one of {sorted(EASINGS)}"
            raise ValueError(msg)
        return v

    # --- Serialization ---

    def to_dict(self) -> dict:
        return self.model_dump(mode="json")

    @classmethod
    def from_dict(cls, data: dict) -> "SceneConfig":
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise ConfigError(_describe(e)) from e

    def to_json(self) -> str:
        return self.model_dump_json(indent=2)

    @classmethod
    def from_json(cls, text: str) -> "SceneConfig":
        try:
            return cls.model_validate_json(text)
        except ValidationError as e:
            raise ConfigError(_describe(e)) from e

    @classmethod
    def load(cls, path: str | Path) -> "SceneConfig":
        return cls.from_json(Path(path).read_text(encoding="utf-8"))


# --- Runtime settings ---

@dataclass
class Settings:
    locale: str = "en"
    fps: int = 30
    scale: int = 10
    width: int = 64
    height: int = 64
    scene_path: str = ""
    message: str = ""
    sender: str = ""
    balloons: int | None = None

    def scene(self) -> SceneConfig:
        """Build the scene config these settings ask for."""
        if self.scene_path:
            print(f"[config] Loading scene from {self.scene_path}")
            scene = SceneConfig.load(self.scene_path)
        else:
            scene = SceneConfig()
        if self.balloons is not None:
            scene.balloons = list(BALLOON_POOL[:max(0, self.balloons)])
        return scene


def load_settings() -> Settings:
    balloons = os.getenv("GREETING_BALLOONS", "")
    return Settings(
        locale=os.getenv("GREETING_LOCALE", "en"),
        fps=int(os.getenv("GREETING_FPS", "30")),
        scale=int(os.getenv("GREETING_SCALE", "10")),
        width=int(os.getenv("MATRIX_WIDTH", "64")),
        height=int(os.getenv("MATRIX_HEIGHT", "64")),
        scene_path=os.getenv("GREETING_SCENE", ""),
        message=os.getenv("GREETING_MESSAGE", ""),
        sender=os.getenv("GREETING_FROM", ""),
        balloons=int(balloons) if balloons else None,
    )
