import pygame
import pytest

from sprite_engine.engine import Engine
from sprite_engine.events import CursorEventType
from sprite_engine.scheduler import GeneratorStep
from sprite_engine.texture import Texture, missing_texture


def sheet(width, height):
    return Texture(surface=pygame.Surface((width, height), pygame.SRCALPHA))


def test_sprite_defaults_and_registration():
    engine = Engine()
    sprite = engine.new_sprite()
    assert engine.sprites == [sprite]
    assert (sprite.x, sprite.y, sprite.layer, sprite.index) == (0.0, 0.0, 0, 0)
    assert not sprite.hidden
    assert sprite.texture is missing_texture()
    assert sprite.width is None and sprite.height is None
    assert set(sprite.handlers) == set(CursorEventType)
    assert all(handlers == [] for handlers in sprite.handlers.values())


def test_no_cell_size_draws_full_texture():
    engine = Engine()
    sprite = engine.new_sprite(texture=sheet(40, 24))
    assert sprite.cell_size() is None
    assert sprite.source_rect() == (0, 0, 40, 24)


@pytest.mark.parametrize(
    "width,height,expected",
    [(16, None, (16, 16)), (None, 8, (8, 8)), (16, 8, (16, 8))],
)
def test_cell_size_copies_missing_dimension(width, height, expected):
    engine = Engine()
    sprite = engine.new_sprite(texture=sheet(64, 32), width=width, height=height)
    assert sprite.cell_size() == expected


@pytest.mark.parametrize(
    "index,expected",
    [(0, (0, 0)), (3, (48, 0)), (4, (0, 16)), (5, (16, 16))],
)
def test_source_rect_is_row_major_cell(index, expected):
    engine = Engine()
    # 64x32 sheet of 16x16 cells: 4 columns, 2 rows
    sprite = engine.new_sprite(texture=sheet(64, 32), width=16, index=index)
    assert sprite.source_rect() == expected + (16, 16)


def test_scripts_and_processes_are_normalised_to_steps():
    def script():
        yield

    engine = Engine()
    sprite = engine.new_sprite(scripts=[script()], processes=[script()])
    assert isinstance(sprite.scripts[0], GeneratorStep)
    assert isinstance(sprite.processes[0], GeneratorStep)
    sprite.add_script(script()).add_process(script())
    assert len(sprite.scripts) == 2
    assert len(sprite.processes) == 2


def test_on_chains_and_off_removes_one_registration():
    engine = Engine()
    sprite = engine.new_sprite()

    def handler(event):
        pass

    assert sprite.on(CursorEventType.DOWN, handler) is sprite
    sprite.on(CursorEventType.DOWN, handler)
    sprite.off(CursorEventType.DOWN, handler)
    assert sprite.handlers[CursorEventType.DOWN] == [handler]
    # Removing an unknown handler is harmless
    sprite.off(CursorEventType.UP, handler)


def test_engine_on_registers_handler():
    engine = Engine()
    sprite = engine.new_sprite()
    calls = []
    assert engine.on(sprite, CursorEventType.ENTER, calls.append) is sprite
    assert sprite.handlers[CursorEventType.ENTER] == [calls.append]


def test_remove_detaches_by_identity_and_is_idempotent():
    engine = Engine()
    a = engine.new_sprite()
    b = engine.new_sprite()
    assert a.remove() is a
    assert engine.sprites == [b]
    assert a.removed and a.engine is None
    a.remove()
    assert engine.sprites == [b]


def test_overlap_helpers_delegate_to_hit_tests():
    engine = Engine()
    a = engine.new_sprite(texture=sheet(10, 10))
    b = engine.new_sprite(x=10, texture=sheet(10, 10))
    assert a.overlaps_sprite(b)
    assert a.overlaps_point(5, 5)
    assert not a.overlaps_point(10, 5)


def test_sprite_repr():
    engine = Engine()
    sprite = engine.new_sprite(x=1.2345, y=2.3456, layer=3)
    r = repr(sprite)
    assert "x=1.23" in r and "y=2.35" in r and "layer=3" in r
