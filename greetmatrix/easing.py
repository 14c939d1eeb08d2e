"""Easing curves mapping linear progress [0, 1] to eased progress [0, 1]."""

from typing import Callable

Easing = Callable[[float], float]

_NEWTON_ITERATIONS = 8
_BISECT_ITERATIONS = 40
_EPSILON = 1e-7


def clamp01(value: float) -> float:
    """Clamp a progress value to [0, 1]."""
    if value <= 0.0:
        return 0.0
    if value >= 1.0:
        return 1.0
    return value


def linear(t: float) -> float:
    return clamp01(t)


class CubicBezier:
    """CSS-style cubic bezier easing through (0,0), (x1,y1), (x2,y2), (1,1).

    Solves x(s) = t for the curve parameter s (Newton first, bisection if
    Newton stalls on a flat slope) and returns y(s).
    """

    def __init__(self, x1: float, y1: float, x2: float, y2: float):
        self.x1, self.y1, self.x2, self.y2 = x1, y1, x2, y2

    @staticmethod
    def _coord(s: float, p1: float, p2: float) -> float:
        inv = 1.0 - s
        return 3 * inv * inv * s * p1 + 3 * inv * s * s * p2 + s * s * s

    @staticmethod
    def _slope(s: float, p1: float, p2: float) -> float:
        inv = 1.0 - s
        return 3 * inv * inv * p1 + 6 * inv * s * (p2 - p1) + 3 * s * s * (1.0 - p2)

    def _solve(self, x: float) -> float:
        s = x
        for _ in range(_NEWTON_ITERATIONS):
            err = self._coord(s, self.x1, self.x2) - x
            if abs(err) < _EPSILON:
                return s
            d = self._slope(s, self.x1, self.x2)
            if abs(d) < 1e-6:
                break
            s -= err / d
            if not 0.0 <= s <= 1.0:
                break
        lo, hi = 0.0, 1.0
        s = x
        for _ in range(_BISECT_ITERATIONS):
            err = self._coord(s, self.x1, self.x2) - x
            if abs(err) < _EPSILON:
                break
            if err > 0:
                hi = s
            else:
                lo = s
            s = (lo + hi) / 2
        return s

    def __call__(self, t: float) -> float:
        t = clamp01(t)
        if t == 0.0 or t == 1.0:
            return t
        return clamp01(self._coord(self._solve(t), self.y1, self.y2))

    def __repr__(self) -> str:
        return f"CubicBezier({self.x1}, {self.y1}, {self.x2}, {self.y2})"


ease = CubicBezier(0.25, 0.1, 0.25, 1.0)
ease_in_out = CubicBezier(0.42, 0.0, 0.58, 1.0)
ease_out = CubicBezier(0.0, 0.0, 0.58, 1.0)
# Fast start, linear landing
fast_out_linear_in = CubicBezier(0.4, 0.0, 1.0, 1.0)

EASINGS: dict[str, Easing] = {
    "linear": linear,
    "ease": ease,
    "ease_in_out": ease_in_out,
    "ease_out": ease_out,
    "fast_out_linear_in": fast_out_linear_in,
}


def get_easing(name: str) -> Easing:
    """Look up an easing by name. Raises KeyError for unknown names."""
    try:
        return EASINGS[name]
    except KeyError:
        raise KeyError(f"unknown easing {name!r}; expected one of {sorted(EASINGS)}") from None
