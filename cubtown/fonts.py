"""Bitmap fonts cut from a 16-column glyph sheet, and text layout."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator

logger = logging.getLogger(__name__)

GLYPH_SIZE = 48
GLYPHS_PER_ROW = 16
GLYPH_COUNT = 127

# Characters drawn slightly closer to their neighbours.
_NARROW_CHAR = "1"
_NARROW_EXTRA = 2


@dataclass
class Font:
    """A named bitmap font tinted with one colour."""

    name: str
    path: str
    color: int = 0
    size_multiplier: int = 1
    inner_offset: tuple[int, int] = (0, 0)


def glyph_origin(char: str) -> tuple[int, int]:
    """Top-left pixel of a character's cell in the glyph sheet."""
    if len(char) != 1:
        raise ValueError("expected a single character")
    index = ord(char)
    if index >= GLYPH_COUNT:
        raise ValueError(f"character {char!r} has no glyph")
    return (index % GLYPHS_PER_ROW) * GLYPH_SIZE, (index // GLYPHS_PER_ROW) * GLYPH_SIZE


class FontRegistry:
    """Loaded fonts, looked up by name; the most recent comes first."""

    def __init__(self) -> None:
        self._fonts: list[Font] = []

    def load(self, font: Font) -> bool:
        """Register a font; a second font with the same name is refused."""
        if self.get(font.name) is not None:
            logger.warning("tried to load the same font twice!")
            return False
        self._fonts.insert(0, font)
        return True

    def get(self, name: str) -> Font | None:
        return next((font for font in self._fonts if font.name == name), None)

    def clear(self) -> None:
        self._fonts.clear()

    def __iter__(self) -> Iterator[Font]:
        return iter(self._fonts)

    def __len__(self) -> int:
        return len(self._fonts)


def layout_text(font: Font | None, text: str, x: int, y: int) -> list[tuple[str, int, int]]:
    """Where each character of text is drawn, as (char, x, y) triples.

    Glyphs overlap by the font's horizontal inner offset, and the digit
    one by a little more. An unknown font lays out nothing.
    """
    if font is None:
        logger.warning("tried to print with unknown font!")
        return []
    placed = []
    for index, char in enumerate(text):
        if ord(char) >= GLYPH_COUNT:
            raise ValueError(f"character {char!r} has no glyph")
        if index == 0:
            placed.append((char, x, y))
            continue
        offset = font.inner_offset[0]
        if char == _NARROW_CHAR:
            offset += _NARROW_EXTRA
        placed.append((char, x + GLYPH_SIZE * index - offset * index, y))
    return placed