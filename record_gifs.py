#!/usr/bin/env python3
"""Record an animated GIF of the greeting by rendering frames headlessly.

Usage: python record_gifs.py
Output: media/demo-birthday.gif, media/demo-birthday-full.gif
"""

import os
import sys

# Prevent pygame from opening windows or printing its banner
os.environ["SDL_VIDEODRIVER"] = "dummy"
os.environ["PYGAME_HIDE_SUPPORT_PROMPT"] = "1"

from pathlib import Path

from PIL import Image

# Add project root to path
ROOT = Path(__file__).parent
sys.path.insert(0, str(ROOT))

from greetmatrix.canvas import Canvas
from greetmatrix.config import BALLOON_POOL, load_settings
from greetmatrix.scene import GreetingScene

MEDIA_DIR = ROOT / "media"

# GIF settings
SCALE = 6          # Upscale factor (64*6 = 384px)
DURATION_S = 10.0  # Two full balloon waves
GIF_FPS = 20       # Frames per second in the GIF


def canvas_to_image(canvas: Canvas, scale: int = SCALE) -> Image.Image:
    """Convert a Canvas buffer to a scaled-up PIL Image."""
    img = Image.fromarray(canvas.pixels)
    if scale > 1:
        img = img.resize(
            (canvas.width * scale, canvas.height * scale),
            Image.NEAREST,
        )
    return img


def render_frames(render_fn, width: int = 64, height: int = 64, fps: float = GIF_FPS,
                  duration: float = DURATION_S, t_offset: float = 0.0,
                  scale: int = SCALE) -> list[Image.Image]:
    """Drive `render_fn` with a fixed-step clock and collect the frames."""
    n_frames = int(duration * fps)
    dt = 1.0 / fps
    frames = []

    canvas = Canvas(width, height)
    for i in range(n_frames):
        t = t_offset + i * dt
        render_fn(canvas, t, i)
        frames.append(canvas_to_image(canvas, scale))
    return frames


def save_gif(frames: list[Image.Image], out_path: Path, fps: float = GIF_FPS) -> None:
    # Save as GIF (duration in ms per frame)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    frames[0].save(
        out_path,
        save_all=True,
        append_images=frames[1:],
        duration=int(1000 / fps),
        loop=0,
        optimize=True,
    )
    print(f"[record] Saved {out_path} ({len(frames)} frames, {len(frames) / fps:.1f}s)")


def record_birthday():
    settings = load_settings()
    scene = GreetingScene.from_settings(settings)
    frames = render_frames(scene.render, settings.width, settings.height)
    save_gif(frames, MEDIA_DIR / "demo-birthday.gif")


def record_birthday_full():
    """Same greeting with every balloon slot launched."""
    settings = load_settings()
    settings.balloons = len(BALLOON_POOL)
    scene = GreetingScene.from_settings(settings)
    frames = render_frames(scene.render, settings.width, settings.height)
    save_gif(frames, MEDIA_DIR / "demo-birthday-full.gif")


RECORDINGS = [
    ("birthday",      record_birthday),
    ("birthday-full", record_birthday_full),
]


if __name__ == "__main__":
    print(f"\n[record] Recording demo GIFs to {MEDIA_DIR}/\n")

    for name, fn in RECORDINGS:
        try:
            print(f"[record] Recording {name}...")
            fn()
        except Exception as e:
            print(f"[record] ERROR recording {name}: {e}")
            import traceback
            traceback.print_exc()

    print(f"\n[record] Done! GIFs saved to {MEDIA_DIR}/")
