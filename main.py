import logging
import math
import pygame

from sprite_engine.app import App
from sprite_engine.config import LOG_LEVEL, LOG_FORMAT
from sprite_engine.events import CursorEventType
from sprite_engine.scheduler import run_parallel, run_sequential, skip_frames
from sprite_engine.texture import Texture


def make_sheet(cell, colors):
    """Build a one-row sprite sheet with one solid-colour cell per colour."""
    surface = pygame.Surface((cell * len(colors), cell), pygame.SRCALPHA)
    for i, color in enumerate(colors):
        surface.fill(color, pygame.Rect(i * cell + 1, 1, cell - 2, cell - 2))
    return Texture("<walker>", surface=surface)


def walk(sprite, frames, step):
    """Cycle through the sheet cells while moving right."""
    for _ in range(frames):
        sprite.index = (sprite.index + 1) % 4
        sprite.x += step
        yield


def bob(sprite, frames):
    base_y = sprite.y
    for i in range(frames):
        sprite.y = base_y + math.sin(i / 6.0) * 4
        yield
    sprite.y = base_y


def blink(sprite, times):
    for _ in range(times):
        sprite.hidden = not sprite.hidden
        for _ in range(8):
            yield
    sprite.hidden = False


def main():
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
    app = App()
    engine = app.engine
    sheet = make_sheet(
        16,
        [(230, 80, 80, 255), (80, 230, 80, 255), (80, 80, 230, 255), (230, 230, 80, 255)],
    )
    walker = engine.new_sprite(x=20, y=80, layer=1, texture=sheet, width=16)
    walker.add_script(run_sequential(walk(walker, 120, 1.5), skip_frames(30)))
    walker.add_script(run_parallel(walk(walker, 60, -1), bob(walker, 60)))
    backdrop = engine.new_sprite(x=0, y=0, layer=0)
    backdrop.on(CursorEventType.ENTER, lambda event: backdrop.add_process(blink(backdrop, 4)))
    backdrop.on(CursorEventType.DOWN, lambda event: walker.remove())
    app.run()


if __name__ == "__main__":
    main()
