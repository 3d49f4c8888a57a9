"""
Pointer event routing: turns raw pointer samples into per-sprite cursor events.
"""

from __future__ import annotations
from typing import TYPE_CHECKING, List, Tuple

from .events import CursorEvent, CursorEventType, PointerSample

if TYPE_CHECKING:
    from .engine import Engine
    from .sprite import Sprite


class PointerRouter:
    """
    Hit-tests pointer samples against the engine's sprites and calls handlers.

    Samples arrive in host coordinates; ``origin`` is where the canvas's top
    left corner sits in host space and the engine's ``scale`` maps host
    pixels to canvas pixels. Every dispatch works on a snapshot of the live
    sprite list and of each handler list, so handlers may add or remove
    sprites and handlers freely.
    """

    def __init__(self, engine: Engine) -> None:
        self.engine = engine
        self.origin: Tuple[float, float] = (0.0, 0.0)

    def to_canvas(self, x: float, y: float) -> Tuple[float, float]:
        """Convert a host-space position to canvas pixels."""
        scale = self.engine.scale
        return (x - self.origin[0]) / scale, (y - self.origin[1]) / scale

    def move(self, sample: PointerSample) -> int:
        """
        Classify sprites by before/after overlap and dispatch Leave, then
        Move, then Enter. Returns the number of handlers called.
        """
        x, y = self.to_canvas(sample.x, sample.y)
        scale = self.engine.scale
        old_x = x - sample.movement_x / scale
        old_y = y - sample.movement_y / scale
        leaving: List[Sprite] = []
        moving: List[Sprite] = []
        entering: List[Sprite] = []
        for sprite in list(self.engine.sprites):
            was_over = sprite.overlaps_point(old_x, old_y)
            is_over = sprite.overlaps_point(x, y)
            if was_over and is_over:
                moving.append(sprite)
            elif was_over:
                leaving.append(sprite)
            elif is_over:
                entering.append(sprite)
        calls = 0
        for kind, sprites in (
            (CursorEventType.LEAVE, leaving),
            (CursorEventType.MOVE, moving),
            (CursorEventType.ENTER, entering),
        ):
            for sprite in sprites:
                calls += self._dispatch(sprite, kind, sample, x, y)
        return calls

    def down(self, sample: PointerSample) -> int:
        return self._dispatch_overlapping(CursorEventType.DOWN, sample)

    def up(self, sample: PointerSample) -> int:
        return self._dispatch_overlapping(CursorEventType.UP, sample)

    def enter(self, sample: PointerSample) -> int:
        """Pointer entered the canvas: Enter every sprite under it."""
        return self._dispatch_overlapping(CursorEventType.ENTER, sample)

    def leave(self, sample: PointerSample) -> int:
        """Pointer left the canvas: Leave every sprite under its last position."""
        return self._dispatch_overlapping(CursorEventType.LEAVE, sample)

    def _dispatch_overlapping(
        self, kind: CursorEventType, sample: PointerSample
    ) -> int:
        x, y = self.to_canvas(sample.x, sample.y)
        targets = [
            sprite
            for sprite in list(self.engine.sprites)
            if sprite.overlaps_point(x, y)
        ]
        calls = 0
        for sprite in targets:
            calls += self._dispatch(sprite, kind, sample, x, y)
        return calls

    def _dispatch(
        self,
        sprite: Sprite,
        kind: CursorEventType,
        sample: PointerSample,
        x: float,
        y: float,
    ) -> int:
        handlers = list(sprite.handlers[kind])
        if not handlers:
            return 0
        scale = self.engine.scale
        event = CursorEvent(
            x=x - sprite.x,
            y=y - sprite.y,
            button=sample.buttons,
            alt_key=sample.alt_key,
            ctrl_key=sample.ctrl_key,
            shift_key=sample.shift_key,
            movement_x=sample.movement_x / scale,
            movement_y=sample.movement_y / scale,
            timestamp=sample.timestamp,
        )
        for handler in handlers:
            handler(event)
        return len(handlers)
