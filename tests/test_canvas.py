"""Tests for the canvas and glyph sprites."""

from greetmatrix.canvas import Canvas, text_width
from greetmatrix.sprites import SPRITES, Symbol, sprite_for


class TestPixels:
    """Test raw pixel access."""

    def test_clear_and_get(self):
        """clear() should fill every pixel of a (h, w, 3) buffer."""
        c = Canvas(8, 4)
        c.clear((10, 20, 30))
        assert c.get(7, 3) == (10, 20, 30)
        assert c.pixels.shape == (4, 8, 3)

    def test_out_of_bounds_ignored(self):
        """Writes outside the canvas should be dropped."""
        c = Canvas(4, 4)
        c.set(10, 10, (255, 0, 0))
        assert c.get(10, 10) == (0, 0, 0)

    def test_buffer_is_row_major_rgb(self):
        """get_buffer() should pack pixels row by row as RGB bytes."""
        c = Canvas(2, 2)
        c.set(1, 0, (1, 2, 3))
        assert c.get_buffer()[3:6] == bytes([1, 2, 3])
        assert len(c.get_buffer()) == 12

    def test_hex_and_rgb(self):
        """hex() should unpack 0xRRGGBB and rgb() should clamp channels."""
        assert Canvas.hex(0xF8BBD0) == (0xF8, 0xBB, 0xD0)
        assert Canvas.rgb(300, -5, 12) == (255, 0, 12)


class TestBlend:
    """Test alpha-blended rectangles."""

    def test_half_opacity_mixes(self):
        """Half opacity should average with the existing pixel."""
        c = Canvas(4, 4)
        c.clear((0, 0, 0))
        c.blend_rect(0, 0, 2, 2, (200, 100, 50), opacity=0.5)
        assert c.get(0, 0) == (100, 50, 25)
        assert c.get(3, 3) == (0, 0, 0)

    def test_opacity_clamped(self):
        """Opacity outside 0..1 should be clamped."""
        c = Canvas(2, 2)
        c.blend_rect(0, 0, 2, 2, (255, 255, 255), opacity=4.0)
        assert c.get(1, 1) == (255, 255, 255)
        c.blend_rect(0, 0, 2, 2, (0, 0, 0), opacity=-1.0)
        assert c.get(1, 1) == (255, 255, 255)

    def test_clipped_to_canvas(self):
        """Rectangles larger than the canvas should be clipped."""
        c = Canvas(4, 4)
        c.blend_rect(-10, -10, 100, 1, (9, 9, 9))
        assert c.get(0, 0) == (9, 9, 9)
        assert c.get(3, 0) == (9, 9, 9)
        assert c.get(0, 1) == (0, 0, 0)


class TestText:
    """Test bitmap text drawing."""

    def test_width(self):
        """Text width should count glyphs plus spacing."""
        assert text_width("") == 0
        assert text_width("A") == 3
        assert text_width("HI") == 7

    def test_left_aligned_origin(self):
        """Left-aligned text should start at the given origin."""
        c = Canvas(8, 8)
        c.text(0, 0, "1", (255, 255, 255))
        # '1' is 010 on its top row
        assert c.get(0, 0) == (0, 0, 0)
        assert c.get(1, 0) == (255, 255, 255)

    def test_lowercase_drawn_as_uppercase(self):
        """Lowercase input should render with the uppercase glyphs."""
        a, b = Canvas(8, 8), Canvas(8, 8)
        a.text(0, 0, "hi", (255, 0, 0))
        b.text(0, 0, "HI", (255, 0, 0))
        assert a.get_buffer() == b.get_buffer()

    def test_scale_doubles_cells(self):
        """Scale 2 should draw each font cell as a 2x2 block."""
        c = Canvas(16, 16)
        c.text(0, 0, "-", (255, 255, 255), scale=2.0)
        # '-' lights the middle row, which becomes rows 4-5 at 2x
        assert c.get(0, 4) == (255, 255, 255)
        assert c.get(5, 5) == (255, 255, 255)
        assert c.get(0, 3) == (0, 0, 0)
        assert c.get(6, 4) == (0, 0, 0)

    def test_centered(self):
        """Centered text should put the glyph center on the anchor."""
        c = Canvas(9, 9)
        c.text(4.5, 4.5, "+", (255, 255, 255), align="center")
        assert c.get(4, 4) == (255, 255, 255)
        assert c.get(3, 4) == (255, 255, 255)
        assert c.get(3, 3) == (0, 0, 0)

    def test_opacity(self):
        """Text opacity should blend with the background."""
        c = Canvas(4, 6)
        c.text(0, 0, "1", (200, 200, 200), opacity=0.5)
        assert c.get(1, 0) == (100, 100, 100)


class TestSprites:
    """Test the glyph sprite table."""

    def test_every_symbol_has_a_sprite(self):
        """Every Symbol should map to a sprite."""
        assert set(SPRITES) == set(Symbol)

    def test_rows_rectangular_and_colored(self):
        """Sprite rows should share a width and use only known color keys."""
        for symbol, sprite in SPRITES.items():
            assert all(len(row) == sprite.width for row in sprite.rows), symbol
            for ch in "".join(sprite.rows).replace(".", ""):
                assert ch in sprite.colors, (symbol, ch)

    def test_sprite_drawn_centered(self):
        """Sprites should be centered on the anchor, keeping transparent cells."""
        c = Canvas(16, 16)
        c.clear((0, 0, 0))
        c.sprite(8, 8, sprite_for(Symbol.DOUGHNUT))
        # Doughnut is 4x4 with a transparent hole
        assert c.get(7, 6) != (0, 0, 0)
        assert c.get(7, 7) == (0, 0, 0)

    def test_sprite_off_canvas_is_clipped(self):
        """A sprite entirely off the canvas should draw nothing."""
        c = Canvas(8, 8)
        c.sprite(-50, 200, sprite_for(Symbol.BALLOON), scale=2.0)
        assert not c.pixels.any()
