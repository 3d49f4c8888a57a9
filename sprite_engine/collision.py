"""
Axis-aligned hit tests between sprites and points.

Bounds always come from the sprite texture size, not its sheet cell size.
Point containment is exclusive on every edge while sprite overlap is
inclusive, so two sprites that only touch still overlap.
"""

from __future__ import annotations
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .sprite import Sprite


def point_in_sprite(px: float, py: float, sprite: Sprite) -> bool:
    """Return True if (px, py) lies strictly inside the sprite bounds."""
    texture = sprite.texture
    return (
        sprite.x < px < sprite.x + texture.width
        and sprite.y < py < sprite.y + texture.height
    )


def sprites_overlap(a: Sprite, b: Sprite) -> bool:
    """Return True if the two sprite rectangles intersect or touch."""
    return (
        a.x + a.texture.width >= b.x
        and a.x <= b.x + b.texture.width
        and a.y <= b.y + b.texture.height
        and a.y + a.texture.height >= b.y
    )
