"""Layout of digit glyphs from the HUD number sprite sheet."""

from __future__ import annotations

import enum

import numpy as np

from hellkit.common import NRM_Y_UP, Vertex

TEXTURE_WIDTH = 161.0
CHAR_HEIGHT = 34.0

# (begin, width) of each glyph in the sheet, in pixels.
_GLYPHS = {
    "1": (0.0, 9.0),
    "2": (9.0, 15.0),
    "3": (24.0, 15.0),
    "4": (39.0, 17.0),
    "5": (56.0, 15.0),
    "6": (71.0, 16.0),
    "7": (87.0, 15.0),
    "8": (102.0, 16.0),
    "9": (118.0, 15.0),
    "0": (133.0, 16.0),
}
_FALLBACK_GLYPH = (149.0, 12.0)


class Justification(enum.Enum):
    LEFT = 0
    RIGHT = 1


def glyph_metrics(character):
    """Pixel offset and width of a character in the sheet; others use the slash glyph."""
    return _GLYPHS.get(character, _FALLBACK_GLYPH)


def build_vertices(text, x_screen, y_screen, render_width, render_height, scale, justification):
    """Triangle-strip vertices, four per character, in normalised device coordinates.

    Left-justified text grows rightwards from the screen position; right-justified
    text is laid out from its last character leftwards, ending at that position.
    """
    screen_width = float(render_width)
    screen_height = float(render_height)
    cursor_x = (x_screen / screen_width) * 2 - 1
    cursor_y = -((y_screen / screen_height) * 2 - 1)
    left = justification == Justification.LEFT
    characters = text if left else reversed(text)

    vertices = []
    for character in characters:
        begin, width = glyph_metrics(character)
        tex_left = begin / TEXTURE_WIDTH
        tex_right = (begin + width) / TEXTURE_WIDTH
        w = width * scale / (screen_width / 2) * (screen_width / render_width)
        h = CHAR_HEIGHT * scale / (screen_height / 2) * (screen_height / render_height)
        if not left:
            cursor_x -= w
        corners = (
            (cursor_x, cursor_y, tex_left, 0.0),
            (cursor_x, cursor_y - h, tex_left, 1.0),
            (cursor_x + w, cursor_y, tex_right, 0.0),
            (cursor_x + w, cursor_y - h, tex_right, 1.0),
        )
        for x, y, u, v in corners:
            vertices.append(
                Vertex(
                    position=np.array([x, y, 0.0]),
                    normal=np.array(NRM_Y_UP),
                    uv=np.array([u, v]),
                )
            )
        if left:
            cursor_x += w
    return vertices