"""
Engine: owns the canvas, the live sprite list and the per-frame loop.
"""

from __future__ import annotations
import logging
import pygame
from operator import attrgetter
from typing import List, Optional

from .config import (
    CANVAS_WIDTH,
    CANVAS_HEIGHT,
    CLEAR_COLOR,
    DEFAULT_HORIZONTAL_MARGIN,
    DEFAULT_VERTICAL_MARGIN,
)
from .events import CursorEventHandler, CursorEventType
from .font import BitmapFont
from .pointer import PointerRouter
from .scheduler import advance_processes, advance_scripts
from .sprite import Sprite
from .texture import Texture

logger = logging.getLogger(__name__)


class EngineError(RuntimeError):
    """Raised when the engine cannot be constructed."""


class Engine:
    """
    Instance-scoped sprite engine.
    Attributes:
        surface: pygame Surface every sprite and font draws onto.
        sprites: Live sprites in draw order after the last tick.
        scale: Display scale; only pointer input is divided by it.
        offset_x, offset_y: Global render offset added when drawing sprites.
        pointer: PointerRouter dispatching cursor events to sprites.
        frame: Number of completed ticks.
    """

    def __init__(self, surface: Optional[pygame.Surface] = None) -> None:
        if surface is None:
            surface = pygame.Surface(
                (CANVAS_WIDTH, CANVAS_HEIGHT), pygame.SRCALPHA
            )
        if not isinstance(surface, pygame.Surface):
            logger.error("Engine created without a draw surface: %r", surface)
            raise EngineError(
                f"Engine requires a pygame.Surface to draw on, got {type(surface).__name__}"
            )
        self.surface = surface
        self.sprites: List[Sprite] = []
        self.scale = 1.0
        self.offset_x = 0.0
        self.offset_y = 0.0
        self.frame = 0
        self.pointer = PointerRouter(self)

    @property
    def width(self) -> int:
        return self.surface.get_width()

    @property
    def height(self) -> int:
        return self.surface.get_height()

    def new_sprite(self, **attributes) -> Sprite:
        """Create a sprite and append it to the live list."""
        sprite = Sprite(self, **attributes)
        logger.debug("Sprite created: %r", sprite)
        return sprite

    def remove_sprite(self, sprite: Sprite) -> None:
        """Remove ``sprite`` by identity; unknown sprites are ignored."""
        for i, candidate in enumerate(self.sprites):
            if candidate is sprite:
                del self.sprites[i]
                sprite.engine = None
                logger.debug("Sprite removed: %r", sprite)
                return

    def new_bitmap_font(
        self,
        chars: str,
        texture: Texture,
        space_width: Optional[int] = None,
        horizontal_margin: int = DEFAULT_HORIZONTAL_MARGIN,
        vertical_margin: int = DEFAULT_VERTICAL_MARGIN,
    ) -> BitmapFont:
        return BitmapFont(
            self,
            chars,
            texture,
            space_width=space_width,
            horizontal_margin=horizontal_margin,
            vertical_margin=vertical_margin,
        )

    def on(
        self,
        sprite: Sprite,
        kind: CursorEventType,
        handler: CursorEventHandler,
    ) -> Sprite:
        """Register a cursor handler on ``sprite``."""
        return sprite.on(kind, handler)

    def set_display_scale(self, scale: float) -> None:
        if scale <= 0:
            raise ValueError("Display scale must be positive")
        if scale != self.scale:
            logger.debug("Display scale changed: %s -> %s", self.scale, scale)
        self.scale = scale

    def tick(self) -> None:
        """
        Run one frame: clear, sort by layer, then for each sprite advance its
        script and processes and draw it unless hidden.
        """
        self.surface.fill(CLEAR_COLOR)
        # list.sort is stable: equal layers keep insertion order
        self.sprites.sort(key=attrgetter("layer"))
        # Sprites created during this frame first run on the next tick
        for sprite in list(self.sprites):
            # Removed earlier in this frame by another sprite's step
            if sprite.engine is not self:
                continue
            advance_scripts(sprite)
            advance_processes(sprite)
            if sprite.engine is self and not sprite.hidden:
                self.draw_sprite(sprite)
        self.frame += 1

    def draw_sprite(self, sprite: Sprite) -> None:
        texture = sprite.texture
        if not texture.complete:
            return
        dest = (sprite.x + self.offset_x, sprite.y + self.offset_y)
        if sprite.cell_size() is None:
            self.surface.blit(texture.surface, dest)
        else:
            self.surface.blit(
                texture.surface, dest, pygame.Rect(sprite.source_rect())
            )
