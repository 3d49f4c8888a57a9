from __future__ import annotations
import logging
import pygame
from typing import Optional, Tuple

from .config import (
    CANVAS_WIDTH,
    CANVAS_HEIGHT,
    WINDOW_WIDTH,
    WINDOW_HEIGHT,
    WINDOW_CAPTION,
    FPS,
)
from .engine import Engine
from .input_handler import InputHandler
from .presenter import Presenter

logger = logging.getLogger(__name__)


class App:
    """Window shell: owns pygame, the engine, presentation and input routing."""

    def __init__(
        self,
        clock: Optional[pygame.time.Clock] = None,
        canvas_size: Tuple[int, int] = (CANVAS_WIDTH, CANVAS_HEIGHT),
        window_size: Tuple[int, int] = (WINDOW_WIDTH, WINDOW_HEIGHT),
    ) -> None:
        pygame.init()
        self.window_size = window_size
        # OpenGL window; the canvas is presented as a scaled texture
        self.screen = pygame.display.set_mode(
            window_size,
            pygame.OPENGL | pygame.DOUBLEBUF | pygame.RESIZABLE,
        )
        pygame.display.set_caption(WINDOW_CAPTION)
        # Clock for frame rate (injectable for testing)
        self.clock = clock or pygame.time.Clock()
        self.fps = FPS
        self.engine = Engine(pygame.Surface(canvas_size, pygame.SRCALPHA))
        self.presenter = Presenter(window_size, canvas_size)
        self.input = InputHandler(self.engine.pointer)
        self.running = True
        self.resize(*window_size)
        logger.info(
            "App started: canvas %dx%d in window %dx%d",
            canvas_size[0],
            canvas_size[1],
            window_size[0],
            window_size[1],
        )

    def resize(self, width: int, height: int) -> None:
        """Rescale the canvas for a new window size and re-anchor pointer input."""
        self.window_size = (width, height)
        scale = self.presenter.resize(width, height)
        self.engine.set_display_scale(scale)
        self.engine.pointer.origin = self.presenter.origin

    def handle_events(self) -> None:
        for event in pygame.event.get():
            if event.type == pygame.VIDEORESIZE:
                self.resize(event.w, event.h)
            else:
                self.input.handle_event(event)
        if self.input.should_quit():
            self.running = False

    def update(self) -> None:
        """Advance scripts and redraw the canvas for one frame."""
        self.engine.tick()

    def render(self) -> None:
        self.presenter.present(self.engine.surface)
        pygame.display.flip()

    def run(self) -> None:
        """Main loop: handle events, tick the engine, present."""
        while self.running:
            self.clock.tick(self.fps)
            self.handle_events()
            self.update()
            self.render()
        # Free GL objects while the context is still alive
        self.presenter.shutdown()
        pygame.quit()
        logger.info("App stopped after %d frames", self.engine.frame)
