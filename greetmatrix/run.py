"""Wall-clock loop that plays a greeting scene in the simulator window."""

import time
from typing import Callable

from greetmatrix.canvas import Canvas
from greetmatrix.simulator import Simulator

# fn(canvas, seconds_since_start, frame_number); GreetingScene.render fits this
RenderFn = Callable[[Canvas, float, int], None]


def run(render: RenderFn, fps: int = 30, title: str = "Greeting Matrix",
        scale: int = 10, width: int = 64, height: int = 64) -> None:
    """Play a greeting until the window is closed.

    Args:
        render: Frame callback, usually a GreetingScene's render. It receives
                seconds since start and repaints the whole canvas (background
                first), so nothing is cleared between frames.
        fps: Frame rate the animation clock is sampled at.
        title: Window caption.
        scale: Window pixels per LED (10 gives a 640x640 window for 64x64).
        width: Matrix width in LEDs.
        height: Matrix height in LEDs.
    """
    canvas = Canvas(width, height)
    sim = Simulator(canvas, scale=scale, title=title)
    print(f"[run] {title}: {width}x{height} @ {fps} fps (Esc or close window to quit)")

    start = time.monotonic()
    frame = 0

    try:
        while True:
            t = time.monotonic() - start
            render(canvas, t, frame)

            if not sim.update():
                break

            sim.tick(fps)
            frame += 1
    except KeyboardInterrupt:
        pass
    finally:
        sim.close()
        elapsed = time.monotonic() - start
        if elapsed > 0:
            print(f"[run] Stopped after {frame} frames ({frame / elapsed:.1f} fps)")
