"""RGB pixel buffer with opacity-aware drawing primitives.

The buffer is a numpy array of shape (height, width, 3), dtype uint8, so whole
regions can be composited in one vectorized step.
"""

import math

import numpy as np

# Type alias for RGB tuples
Color = tuple[int, int, int]

# Simple 3x5 bitmap font for digits and basic ASCII
# Each char is 3 pixels wide, 5 pixels tall, stored as 5 rows of 3-bit bitmaps
_FONT_3X5 = {
    ' ': [0b000, 0b000, 0b000, 0b000, 0b000],
    '!': [0b010, 0b010, 0b010, 0b000, 0b010],
    '0': [0b111, 0b101, 0b101, 0b101, 0b111],
    '1': [0b010, 0b110, 0b010, 0b010, 0b111],
    '2': [0b111, 0b001, 0b111, 0b100, 0b111],
    '3': [0b111, 0b001, 0b111, 0b001, 0b111],
    '4': [0b101, 0b101, 0b111, 0b001, 0b001],
    '5': [0b111, 0b100, 0b111, 0b001, 0b111],
    '6': [0b111, 0b100, 0b111, 0b101, 0b111],
    '7': [0b111, 0b001, 0b010, 0b010, 0b010],
    '8': [0b111, 0b101, 0b111, 0b101, 0b111],
    '9': [0b111, 0b101, 0b111, 0b001, 0b111],
    ':': [0b000, 0b010, 0b000, 0b010, 0b000],
    '.': [0b000, 0b000, 0b000, 0b000, 0b010],
    '-': [0b000, 0b000, 0b111, 0b000, 0b000],
    '+': [0b000, 0b010, 0b111, 0b010, 0b000],
    'A': [0b010, 0b101, 0b111, 0b101, 0b101],
    'B': [0b110, 0b101, 0b110, 0b101, 0b110],
    'C': [0b011, 0b100, 0b100, 0b100, 0b011],
    'D': [0b110, 0b101, 0b101, 0b101, 0b110],
    'E': [0b111, 0b100, 0b110, 0b100, 0b111],
    'F': [0b111, 0b100, 0b110, 0b100, 0b100],
    'G': [0b011, 0b100, 0b101, 0b101, 0b011],
    'H': [0b101, 0b101, 0b111, 0b101, 0b101],
    'I': [0b111, 0b010, 0b010, 0b010, 0b111],
    'J': [0b001, 0b001, 0b001, 0b101, 0b010],
    'K': [0b101, 0b110, 0b100, 0b110, 0b101],
    'L': [0b100, 0b100, 0b100, 0b100, 0b111],
    'M': [0b101, 0b111, 0b111, 0b101, 0b101],
    'N': [0b101, 0b111, 0b111, 0b111, 0b101],
    'O': [0b010, 0b101, 0b101, 0b101, 0b010],
    'P': [0b110, 0b101, 0b110, 0b100, 0b100],
    'Q': [0b010, 0b101, 0b101, 0b111, 0b011],
    'R': [0b110, 0b101, 0b110, 0b101, 0b101],
    'S': [0b011, 0b100, 0b010, 0b001, 0b110],
    'T': [0b111, 0b010, 0b010, 0b010, 0b010],
    'U': [0b101, 0b101, 0b101, 0b101, 0b111],
    'V': [0b101, 0b101, 0b101, 0b101, 0b010],
    'W': [0b101, 0b101, 0b111, 0b111, 0b101],
    'X': [0b101, 0b101, 0b010, 0b101, 0b101],
    'Y': [0b101, 0b101, 0b010, 0b010, 0b010],
    'Z': [0b111, 0b001, 0b010, 0b100, 0b111],
    ',': [0b000, 0b000, 0b000, 0b010, 0b100],
    "'": [0b010, 0b010, 0b000, 0b000, 0b000],
    '?': [0b111, 0b001, 0b011, 0b000, 0b010],
    '/': [0b001, 0b001, 0b010, 0b100, 0b100],
}

GLYPH_W = 3
GLYPH_H = 5


def text_width(string: str, spacing: int = 1) -> int:
    """Width in unscaled pixels of a single line of text."""
    if not string:
        return 0
    return len(string) * (GLYPH_W + spacing) - spacing


class Canvas:
    """RGB pixel buffer with drawing primitives.

    Pixel (x, y) lives at pixels[y, x]. Every draw call takes an optional
    opacity in [0, 1]; values outside that range are clamped, and drawing
    outside the canvas is silently clipped.
    """

    def __init__(self, width: int = 64, height: int = 64):
        self.width = width
        self.height = height
        self.pixels = np.zeros((height, width, 3), dtype=np.uint8)

    def clear(self, color: Color = (0, 0, 0)) -> None:
        """Fill entire canvas with a color (default black)."""
        self.pixels[:, :] = color

    def fill(self, color: Color) -> None:
        """Alias for clear() with a color."""
        self.clear(color)

    def set(self, x: int, y: int, color: Color) -> None:
        """Set a single pixel. Out-of-bounds writes are silently ignored."""
        if 0 <= x < self.width and 0 <= y < self.height:
            self.pixels[y, x] = color

    def get(self, x: int, y: int) -> Color:
        """Get a pixel's color. Returns (0,0,0) for out-of-bounds."""
        if 0 <= x < self.width and 0 <= y < self.height:
            r, g, b = (int(c) for c in self.pixels[y, x])
            return (r, g, b)
        return (0, 0, 0)

    def blend_rect(self, x0: int, y0: int, x1: int, y1: int, color: Color,
                   opacity: float = 1.0) -> None:
        """Composite `color` over the half-open box [x0, x1) x [y0, y1)."""
        x0, x1 = max(0, x0), min(self.width, x1)
        y0, y1 = max(0, y0), min(self.height, y1)
        if x0 >= x1 or y0 >= y1:
            return
        alpha = min(1.0, max(0.0, opacity))
        if alpha <= 0.0:
            return
        region = self.pixels[y0:y1, x0:x1]
        if alpha >= 1.0:
            region[:, :] = color
            return
        src = np.asarray(color, dtype=np.float32)
        mixed = region.astype(np.float32) * (1.0 - alpha) + src * alpha
        region[:, :] = np.clip(np.rint(mixed), 0, 255).astype(np.uint8)

    def _cells(self, x: float, y: float, cells, scale: float, opacity: float) -> None:
        # Each logical cell becomes a scale x scale block, at least one pixel wide.
        for col, row, color in cells:
            px0 = math.floor(x + col * scale)
            py0 = math.floor(y + row * scale)
            px1 = max(px0 + 1, math.floor(x + (col + 1) * scale))
            py1 = max(py0 + 1, math.floor(y + (row + 1) * scale))
            self.blend_rect(px0, py0, px1, py1, color, opacity)

    def text(self, x: float, y: float, string: str, color: Color, spacing: int = 1,
             scale: float = 1.0, opacity: float = 1.0, align: str = "left") -> None:
        """Draw text using built-in 3x5 pixel font. Uppercase only.

        With align="center", `x` is the horizontal center of the line and `y`
        its vertical center; with align="left", (x, y) is the top-left corner.
        Unknown characters render as blanks.
        """
        string = string.upper()
        if align == "center":
            x -= text_width(string, spacing) * scale / 2
            y -= GLYPH_H * scale / 2
        cells = []
        cursor = 0
        for ch in string:
            glyph = _FONT_3X5.get(ch)
            if glyph is not None:
                for row_idx, row_bits in enumerate(glyph):
                    for col in range(GLYPH_W):
                        if row_bits & (1 << (GLYPH_W - 1 - col)):
                            cells.append((cursor + col, row_idx, color))
            cursor += GLYPH_W + spacing
        self._cells(x, y, cells, scale, opacity)

    def sprite(self, cx: float, cy: float, sprite, scale: float = 1.0,
               opacity: float = 1.0) -> None:
        """Draw a bitmap sprite centered on (cx, cy)."""
        x = cx - sprite.width * scale / 2
        y = cy - sprite.height * scale / 2
        self._cells(x, y, sprite.cells(), scale, opacity)

    @staticmethod
    def rgb(r: int, g: int, b: int) -> Color:
        """Convenience: clamp and return an RGB tuple."""
        return (max(0, min(255, r)), max(0, min(255, g)), max(0, min(255, b)))

    @staticmethod
    def hex(color: int) -> Color:
        """Convert 0xRRGGBB integer to (R, G, B) tuple."""
        return ((color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF)

    def get_buffer(self) -> bytes:
        """Get the entire pixel buffer as packed RGB bytes, row-major."""
        return self.pixels.tobytes()
