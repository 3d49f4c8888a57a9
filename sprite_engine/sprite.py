"""Sprite: positioned, textured, layered drawable with scripts and handlers."""

from __future__ import annotations
import math
from collections import deque
from typing import TYPE_CHECKING, Deque, Dict, Iterable, List, Optional, Tuple

from .collision import point_in_sprite, sprites_overlap
from .events import CursorEventHandler, CursorEventType
from .scheduler import Step, StepLike, as_step
from .texture import Texture, missing_texture

if TYPE_CHECKING:
    from .engine import Engine


class Sprite:
    """
    A textured rectangle living in an engine's sprite list.
    Attributes:
        x, y (float): Position in unscaled canvas pixels.
        layer (int): Draw order key, lower layers are drawn first.
        hidden (bool): Skip drawing while True (scripts still run).
        texture (Texture): Pixel source; the missing texture by default.
        width, height (int | None): Sheet cell size; setting one implies a
            square cell.
        index (int): Row-major cell index into the sheet.
        scripts (deque[Step]): Sequential timeline, only the head runs.
        processes (list[Step]): Concurrent effects, all run every frame.
        handlers (dict): Cursor event kind to ordered handler list.
    """

    def __init__(
        self,
        engine: Engine,
        x: float = 0.0,
        y: float = 0.0,
        layer: int = 0,
        hidden: bool = False,
        texture: Optional[Texture] = None,
        scripts: Iterable[StepLike] = (),
        width: Optional[int] = None,
        index: int = 0,
        processes: Iterable[StepLike] = (),
        height: Optional[int] = None,
    ) -> None:
        self.engine: Optional[Engine] = engine
        self.x = x
        self.y = y
        self.layer = layer
        self.hidden = hidden
        self.texture = texture or missing_texture()
        self.scripts: Deque[Step] = deque(as_step(s) for s in scripts)
        self.width = width
        self.index = index
        self.processes: List[Step] = [as_step(p) for p in processes]
        self.height = height
        self.handlers: Dict[CursorEventType, List[CursorEventHandler]] = {
            kind: [] for kind in CursorEventType
        }
        engine.sprites.append(self)

    def __repr__(self) -> str:
        return (
            f"<Sprite x={self.x:.2f} y={self.y:.2f} layer={self.layer} "
            f"texture={self.texture!r}>"
        )

    @property
    def removed(self) -> bool:
        return self.engine is None

    def on(self, kind: CursorEventType, handler: CursorEventHandler) -> Sprite:
        """Register ``handler`` for ``kind`` events; returns self for chaining."""
        self.handlers[kind].append(handler)
        return self

    def off(self, kind: CursorEventType, handler: CursorEventHandler) -> Sprite:
        """Remove one registration of ``handler`` for ``kind`` if present."""
        handlers = self.handlers[kind]
        if handler in handlers:
            handlers.remove(handler)
        return self

    def add_script(self, script: StepLike) -> Sprite:
        self.scripts.append(as_step(script))
        return self

    def add_process(self, process: StepLike) -> Sprite:
        self.processes.append(as_step(process))
        return self

    def cell_size(self) -> Optional[Tuple[int, int]]:
        """Return the (width, height) of a sheet cell, or None for no sheet."""
        width = self.width or self.height
        height = self.height or self.width
        if width and height:
            return width, height
        return None

    def source_rect(self) -> Tuple[int, int, int, int]:
        """Return the (x, y, w, h) texture region this sprite draws."""
        cell = self.cell_size()
        if cell is None:
            return 0, 0, self.texture.width, self.texture.height
        width, height = cell
        columns = self.texture.width / width
        if not columns:
            return 0, 0, width, height
        sx = math.floor(self.index % columns) * width
        sy = math.floor(self.index / columns) * height
        return sx, sy, width, height

    def overlaps_point(self, x: float, y: float) -> bool:
        return point_in_sprite(x, y, self)

    def overlaps_sprite(self, other: Sprite) -> bool:
        return sprites_overlap(self, other)

    def remove(self) -> Sprite:
        """Detach from the engine; later frames and events skip this sprite."""
        if self.engine is not None:
            self.engine.remove_sprite(self)
        return self
