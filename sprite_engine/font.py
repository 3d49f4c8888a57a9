"""
Bitmap fonts rasterized from a glyph strip texture.
"""

from __future__ import annotations
import logging
import math
import pygame
from dataclasses import dataclass
from typing import TYPE_CHECKING, Dict, Optional

from .config import DEFAULT_HORIZONTAL_MARGIN, DEFAULT_VERTICAL_MARGIN
from .glyphs import extract_glyph_widths, glyph_height, row_offset, surface_alpha

if TYPE_CHECKING:
    from .engine import Engine
    from .texture import Texture

logger = logging.getLogger(__name__)


@dataclass
class Glyph:
    width: int
    offset_y: int


class BitmapFont:
    """
    Draws text onto the engine surface from a glyph strip.

    Metrics are computed once the texture has loaded; until then every
    character is unknown and drawing is a no-op. ``x``/``y`` is the draw
    cursor shared by chained ``draw_character``/``draw_string`` calls.
    """

    def __init__(
        self,
        engine: Engine,
        chars: str,
        texture: Texture,
        space_width: Optional[int] = None,
        horizontal_margin: int = DEFAULT_HORIZONTAL_MARGIN,
        vertical_margin: int = DEFAULT_VERTICAL_MARGIN,
    ) -> None:
        self.engine = engine
        self.chars = chars
        self.texture = texture
        self.height = 1
        self.x = 0.0
        self.y = 0.0
        self._space_width = space_width
        self.horizontal_margin = horizontal_margin
        self.vertical_margin = vertical_margin
        self.characters: Dict[str, Glyph] = {}
        self.unknown: Optional[Glyph] = None
        texture.when_loaded(self._on_load)

    @property
    def space_width(self) -> int:
        if self._space_width is None:
            return self.texture.width
        return self._space_width

    @space_width.setter
    def space_width(self, value: Optional[int]) -> None:
        self._space_width = value

    @property
    def loaded(self) -> bool:
        return self.unknown is not None

    def _on_load(self, texture: Texture) -> None:
        count = len(self.chars)
        height = glyph_height(texture.height, count)
        widths = extract_glyph_widths(surface_alpha(texture.surface), count)
        self.height = max(int(height), 0)
        self.unknown = Glyph(widths[0], 0)
        for i, char in enumerate(self.chars):
            offset_y = math.floor(row_offset(i + 1, height))
            self.characters[char] = Glyph(widths[i + 1], offset_y)
        logger.debug(
            "Font metrics computed for %d glyphs (height %d) from %r",
            count,
            self.height,
            texture,
        )

    def glyph(self, char: str) -> Optional[Glyph]:
        """Return the glyph for ``char``, the fallback glyph, or None."""
        return self.characters.get(char, self.unknown)

    def draw_character(
        self,
        char: str,
        x: Optional[float] = None,
        y: Optional[float] = None,
    ) -> int:
        """Draw one glyph at the cursor and return the horizontal advance."""
        if x is not None:
            self.x = x
        if y is not None:
            self.y = y
        glyph = self.glyph(char)
        if glyph is None:
            return 0
        self.engine.surface.blit(
            self.texture.surface,
            (self.x, self.y),
            pygame.Rect(0, glyph.offset_y, glyph.width, self.height),
        )
        advance = glyph.width + self.horizontal_margin
        self.x += advance
        return advance

    def draw_string(
        self,
        text: str,
        x: Optional[float] = None,
        y: Optional[float] = None,
    ) -> None:
        """Draw ``text`` from the cursor; newlines return to the start x."""
        if x is not None:
            self.x = x
        if y is not None:
            self.y = y
        start_x = self.x
        for char in text:
            if char == " ":
                self.x += self.space_width
            elif char == "\n":
                self.y += self.height + self.vertical_margin
                self.x = start_x
            else:
                self.draw_character(char)

    def measure_string(self, text: str) -> int:
        """Width of the widest line of ``text`` using the drawing advances."""
        widest = 0
        for line in text.split("\n"):
            width = 0
            for char in line:
                if char == " ":
                    width += self.space_width
                    continue
                glyph = self.glyph(char)
                if glyph is not None:
                    width += glyph.width + self.horizontal_margin
            widest = max(widest, width)
        return widest
