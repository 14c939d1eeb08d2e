"""Animated birthday greeting for 64x64 RGB matrices, previewed with pygame."""

from greetmatrix.canvas import Canvas
from greetmatrix.run import run
from greetmatrix.scene import GreetingScene

__all__ = ["Canvas", "GreetingScene", "run"]
