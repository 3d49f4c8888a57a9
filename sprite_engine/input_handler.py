"""
Input handling abstraction to decouple Pygame events from pointer routing.
"""

from __future__ import annotations
import pygame
from typing import TYPE_CHECKING, Callable, Tuple

from .config import POINTER_BUTTON_BITS
from .events import PointerSample

if TYPE_CHECKING:
    from .pointer import PointerRouter


class InputHandler:
    """
    Translates Pygame mouse and window events into pointer samples and hands
    them to a PointerRouter. Modifier, clock and cursor position sources are
    injectable for testing.
    """

    def __init__(
        self,
        router: PointerRouter,
        get_mods: Callable[[], int] = pygame.key.get_mods,
        get_ticks: Callable[[], int] = pygame.time.get_ticks,
        get_pos: Callable[[], Tuple[int, int]] = pygame.mouse.get_pos,
    ) -> None:
        self.router = router
        self._get_mods = get_mods
        self._get_ticks = get_ticks
        self._get_pos = get_pos
        self._quit = False
        # Mask of currently held buttons, kept across events
        self._buttons = 0

    @property
    def buttons(self) -> int:
        return self._buttons

    def should_quit(self) -> bool:
        """Return True once a quit event has been seen."""
        return self._quit

    def handle_event(self, event: pygame.event.Event) -> bool:
        """
        Route one Pygame event. Returns True if it was a pointer event.
        """
        if event.type == pygame.QUIT:
            self._quit = True
            return False
        if event.type == pygame.MOUSEMOTION:
            self.router.move(self._sample(event.pos, event.rel))
            return True
        if event.type in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP):
            bit = POINTER_BUTTON_BITS.get(event.button)
            # Wheel clicks arrive as buttons 4 and up
            if bit is None:
                return False
            if event.type == pygame.MOUSEBUTTONDOWN:
                self._buttons |= bit
                self.router.down(self._sample(event.pos))
            else:
                self._buttons &= ~bit
                self.router.up(self._sample(event.pos))
            return True
        if event.type == pygame.WINDOWENTER:
            self.router.enter(self._sample(self._get_pos()))
            return True
        if event.type == pygame.WINDOWLEAVE:
            self.router.leave(self._sample(self._get_pos()))
            return True
        return False

    def _sample(
        self,
        pos: Tuple[float, float],
        rel: Tuple[float, float] = (0, 0),
    ) -> PointerSample:
        mods = self._get_mods()
        return PointerSample(
            x=pos[0],
            y=pos[1],
            movement_x=rel[0],
            movement_y=rel[1],
            buttons=self._buttons,
            alt_key=bool(mods & pygame.KMOD_ALT),
            ctrl_key=bool(mods & pygame.KMOD_CTRL),
            shift_key=bool(mods & pygame.KMOD_SHIFT),
            timestamp=self._get_ticks(),
        )
