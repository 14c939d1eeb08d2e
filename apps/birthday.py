"""Happy Birthday - crossfading pastels, pulsing greeting, balloons and confetti."""

from greetmatrix import Canvas, GreetingScene, run
from greetmatrix.config import load_settings

settings = load_settings()
scene = GreetingScene.from_settings(settings)


def render(canvas: Canvas, t: float, frame: int) -> None:
    scene.render(canvas, t, frame)


if __name__ == "__main__":
    run(render, fps=settings.fps, title="Happy Birthday", scale=settings.scale,
        width=settings.width, height=settings.height)
