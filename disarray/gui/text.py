"""Bitmap-font text drawing through a sprite batcher."""

from __future__ import annotations

from typing import Any, Protocol

from ..colors import Color

__all__ = [
    "GLYPH_WIDTH",
    "SMALL_GLYPH_WIDTH",
    "FIRST_GLYPH",
    "NUMBER_DIGITS",
    "SpritePainter",
    "write_text",
    "write_small_text",
    "write_shaded_text",
    "write_small_shaded_text",
    "draw_number",
]

GLYPH_WIDTH = 11
SMALL_GLYPH_WIDTH = 6
FIRST_GLYPH = 32
NUMBER_DIGITS = 7
_DIGIT_SPACING = 16
_DIGIT_SCALE = 0.98
_DIGIT_COLOR = Color(1.0, 1.0, 1.0, 0.6)
_SHADE = Color(0.0, 0.0, 0.0, 1.0)


class SpritePainter(Protocol):
    """Anything that can queue sprites for drawing and describe its textures."""

    def draw(
        self,
        texture_index: int,
        x: float,
        y: float,
        frame: int = 0,
        use_center: bool = False,
        scale_x: float = 1.0,
        scale_y: float = 1.0,
        rotation_angle: float = 0.0,
        up_color: Color = Color(),
        down_color: Color = Color(),
    ) -> Any:
        ...

    def get_info(self, index: int) -> Any:
        ...


def _write(
    spacing: int,
    x: float,
    y: float,
    pics: SpritePainter,
    font: int,
    s: str,
    scalex: float,
    scaley: float,
    c1: Color,
    c2: Color,
) -> None:
    x, y = int(x), int(y)
    for i, ch in enumerate(s):
        pics.draw(
            font,
            x + (spacing * scalex) * i,
            y,
            ord(ch) - FIRST_GLYPH,
            False,
            scalex,
            scaley,
            0.0,
            c1,
            c2,
        )


def write_text(
    x: float,
    y: float,
    pics: SpritePainter,
    font: int,
    s: str,
    scalex: float = 1.0,
    scaley: float = 1.0,
    c1: Color = Color(),
    c2: Color = Color(),
) -> None:
    """Draw ``s`` one glyph per character with the regular font spacing."""
    _write(GLYPH_WIDTH, x, y, pics, font, s, scalex, scaley, c1, c2)


def write_small_text(
    x: float,
    y: float,
    pics: SpritePainter,
    font: int,
    s: str,
    scalex: float = 1.0,
    scaley: float = 1.0,
    c1: Color = Color(),
    c2: Color = Color(),
) -> None:
    """Draw ``s`` one glyph per character with the narrow font spacing."""
    _write(SMALL_GLYPH_WIDTH, x, y, pics, font, s, scalex, scaley, c1, c2)


def write_shaded_text(
    x: float,
    y: float,
    pics: SpritePainter,
    font: int,
    s: str,
    scalex: float = 1.0,
    scaley: float = 1.0,
    c1: Color = Color(),
    c2: Color = Color(),
    shade: Color = _SHADE,
) -> None:
    """Draw a shadow one pixel up and left, then the text itself."""
    x, y = int(x), int(y)
    write_text(x - 1, y - 1, pics, font, s, scalex, scaley, shade, shade)
    write_text(x, y, pics, font, s, scalex, scaley, c1, c2)


def write_small_shaded_text(
    x: float,
    y: float,
    pics: SpritePainter,
    font: int,
    s: str,
    scalex: float = 1.0,
    scaley: float = 1.0,
    c1: Color = Color(),
    c2: Color = Color(),
    shade: Color = _SHADE,
) -> None:
    """Shaded text with the narrow font spacing."""
    x, y = int(x), int(y)
    write_small_text(x - 1, y - 1, pics, font, s, scalex, scaley, shade, shade)
    write_small_text(x, y, pics, font, s, scalex, scaley, c1, c2)


def _digits(number: int) -> list[int]:
    digits = [0] * NUMBER_DIGITS
    sign = -1 if number < 0 else 1
    magnitude = abs(number)
    position = NUMBER_DIGITS - 1
    while magnitude:
        if position < 0:
            raise ValueError(f"{number} has more than {NUMBER_DIGITS} digits")
        digits[position] = sign * (magnitude % 10)
        magnitude //= 10
        position -= 1
    return digits


def draw_number(x: int, y: int, number: int, pics: SpritePainter, index: int) -> None:
    """Draw ``number`` as seven zero-padded digits using digit sprites from ``index``."""
    for position, digit in enumerate(_digits(number)):
        pics.draw(
            index,
            x + position * _DIGIT_SPACING,
            y,
            digit,
            False,
            _DIGIT_SCALE,
            _DIGIT_SCALE,
            0,
            _DIGIT_COLOR,
            _DIGIT_COLOR,
        )