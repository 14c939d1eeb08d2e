"""Tiny bitmap sprites standing in for the greeting's emoji glyphs.

Each sprite is a list of equal-width rows; every character is a key into the
sprite's color map, and "." is transparent.
"""

from enum import Enum

from greetmatrix.canvas import Color


class Symbol(str, Enum):
    BALLOON = "🎈"
    PARTY_POPPER = "🎉"
    CONFETTI_BALL = "🎊"
    PARTY_FACE = "🥳"
    CAKE = "🍰"
    DOUGHNUT = "🍩"
    HALO_FACE = "😇"
    CROWN = "👑"
    TEDDY_BEAR = "🧸"
    COOKIE = "🍪"
    CUPCAKE = "🧁"
    CHOCOLATE = "🍫"


class Sprite:
    def __init__(self, rows: list[str], colors: dict[str, Color]):
        self.rows = rows
        self.colors = colors
        self.width = len(rows[0])
        self.height = len(rows)

    def cells(self):
        """Yield (col, row, color) for every opaque cell."""
        for y, row in enumerate(self.rows):
            for x, ch in enumerate(row):
                if ch != ".":
                    yield x, y, self.colors[ch]


_YELLOW = (255, 205, 60)
_DARK = (60, 35, 20)
_WHITE = (255, 255, 255)

SPRITES: dict[Symbol, Sprite] = {
    Symbol.BALLOON: Sprite(
        [".rr.",
         "rrhr",
         "rrrr",
         ".rr.",
         "..s.",
         ".s.."],
        {"r": (230, 40, 60), "h": (255, 170, 170), "s": (120, 120, 120)},
    ),
    Symbol.PARTY_POPPER: Sprite(
        ["p.b.",
         "..y.",
         ".oo.",
         "ooo."],
        {"p": (230, 60, 200), "b": (60, 140, 255), "y": _YELLOW, "o": (240, 150, 40)},
    ),
    Symbol.CONFETTI_BALL: Sprite(
        [".pb.",
         "yggr",
         "gggg",
         ".gg."],
        {"p": (230, 60, 200), "b": (60, 140, 255), "y": _YELLOW, "r": (230, 40, 60),
         "g": (220, 180, 40)},
    ),
    Symbol.PARTY_FACE: Sprite(
        [".hy.",
         "yyyy",
         "ykyk",
         ".yy."],
        {"h": (230, 60, 200), "y": _YELLOW, "k": _DARK},
    ),
    Symbol.CAKE: Sprite(
        ["..c.",
         "wwww",
         "pppp",
         "wwww"],
        {"c": (255, 80, 80), "w": (255, 240, 220), "p": (240, 130, 160)},
    ),
    Symbol.DOUGHNUT: Sprite(
        [".pp.",
         "p..p",
         "p..p",
         ".pp."],
        {"p": (240, 120, 170)},
    ),
    Symbol.HALO_FACE: Sprite(
        [".hh.",
         "yyyy",
         "ykyk",
         ".yy."],
        {"h": (160, 220, 255), "y": _YELLOW, "k": _DARK},
    ),
    Symbol.CROWN: Sprite(
        ["y.y.y",
         "yyyyy",
         "yrybb",
         "yyyyy"],
        {"y": (240, 190, 30), "r": (230, 40, 60), "b": (60, 140, 255)},
    ),
    Symbol.TEDDY_BEAR: Sprite(
        ["b..b",
         "bbbb",
         "bkkb",
         ".bb."],
        {"b": (170, 110, 60), "k": _DARK},
    ),
    Symbol.COOKIE: Sprite(
        [".cc.",
         "ckcc",
         "cckc",
         ".cc."],
        {"c": (210, 160, 90), "k": _DARK},
    ),
    Symbol.CUPCAKE: Sprite(
        [".pp.",
         "pppp",
         "wbwb",
         ".bw."],
        {"p": (240, 130, 180), "w": _WHITE, "b": (190, 120, 70)},
    ),
    Symbol.CHOCOLATE: Sprite(
        ["ccc",
         "cdc",
         "ccc",
         "cdc"],
        {"c": (110, 60, 30), "d": (80, 40, 20)},
    ),
}


def sprite_for(symbol: Symbol) -> Sprite:
    return SPRITES[symbol]
