"""Tests for the preview window and the wall-clock loop, on SDL's dummy driver."""

import pygame
import pytest

from greetmatrix.canvas import Canvas
from greetmatrix.run import run
from greetmatrix.simulator import Simulator


@pytest.fixture(autouse=True)
def headless(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("PYGAME_HIDE_SUPPORT_PROMPT", "1")


class TestSimulator:
    """Test the preview window."""

    def test_window_is_scaled_matrix(self):
        """Each LED should become a scale x scale block of window pixels."""
        canvas = Canvas(4, 3)
        sim = Simulator(canvas, scale=5)
        try:
            assert sim.screen.get_size() == (20, 15)
            canvas.set(1, 2, (255, 0, 0))
            assert sim.update() is True
            assert tuple(sim.screen.get_at((7, 12)))[:3] == (255, 0, 0)
            assert tuple(sim.screen.get_at((2, 2)))[:3] == (0, 0, 0)
        finally:
            sim.close()

    def test_quit_event_ends_preview(self):
        """Closing the window should make update() return False."""
        sim = Simulator(Canvas(4, 4), scale=1)
        try:
            pygame.event.post(pygame.event.Event(pygame.QUIT))
            assert sim.update() is False
        finally:
            sim.close()


class TestRun:
    """Test the frame loop."""

    def test_frames_numbered_until_window_closes(self):
        """run() should call render with rising times and frame numbers until quit."""
        calls = []

        def render(canvas, t, frame):
            calls.append((t, frame))
            canvas.clear((frame, 0, 0))
            if frame == 3:
                pygame.event.post(pygame.event.Event(pygame.QUIT))

        run(render, fps=120, width=8, height=8, scale=1)
        assert [frame for _, frame in calls] == [0, 1, 2, 3]
        times = [t for t, _ in calls]
        assert times == sorted(times)
        assert times[0] >= 0.0
