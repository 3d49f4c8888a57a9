import pygame
import pytest

from sprite_engine.collision import point_in_sprite, sprites_overlap
from sprite_engine.texture import Texture


class DummySprite:
    """Minimal sprite stub: position plus a texture with a size."""

    def __init__(self, x, y, w, h):
        self.x = x
        self.y = y
        self.texture = Texture(surface=pygame.Surface((w, h)))


@pytest.mark.parametrize(
    "px,py",
    [(10, 20), (20, 20), (10, 25), (20, 25)],
)
def test_point_on_corners_is_not_inside(px, py):
    sprite = DummySprite(10, 20, 10, 5)
    assert not point_in_sprite(px, py, sprite)


@pytest.mark.parametrize(
    "px,py",
    [(15, 20), (15, 25), (10, 22), (20, 22)],
)
def test_point_on_edges_is_not_inside(px, py):
    sprite = DummySprite(10, 20, 10, 5)
    assert not point_in_sprite(px, py, sprite)


def test_point_strictly_inside():
    sprite = DummySprite(10, 20, 10, 5)
    assert point_in_sprite(10.001, 24.999, sprite)
    assert point_in_sprite(15, 22, sprite)


def test_touching_sprites_overlap():
    a = DummySprite(0, 0, 10, 10)
    b = DummySprite(10, 0, 10, 10)
    assert sprites_overlap(a, b)
    assert sprites_overlap(b, a)


def test_corner_touch_overlaps_but_gap_does_not():
    a = DummySprite(0, 0, 10, 10)
    assert sprites_overlap(a, DummySprite(10, 10, 5, 5))
    assert not sprites_overlap(a, DummySprite(10.5, 0, 5, 5))
    assert not sprites_overlap(a, DummySprite(0, -6, 5, 5))


def test_contained_sprite_overlaps():
    outer = DummySprite(0, 0, 50, 50)
    inner = DummySprite(10, 10, 5, 5)
    assert sprites_overlap(outer, inner)
    assert sprites_overlap(inner, outer)
