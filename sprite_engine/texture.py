"""
Texture handles: pixel data backed by a pygame Surface plus a load signal.
"""

from __future__ import annotations
import logging
import pygame
from typing import Callable, List, Optional

from .config import MISSING_TEXTURE_SIZE, MISSING_TEXTURE_COLORS

logger = logging.getLogger(__name__)

LoadListener = Callable[["Texture"], None]


class Texture:
    """
    Rectangular pixel resource.

    A texture is either created from an existing surface (complete at once)
    or from a path, in which case it stays incomplete until ``load()`` runs.
    Width and height hints are reported until pixel data arrives.
    """

    def __init__(
        self,
        path: Optional[str] = None,
        surface: Optional[pygame.Surface] = None,
        width: Optional[int] = None,
        height: Optional[int] = None,
    ) -> None:
        self.path = path
        self.surface: Optional[pygame.Surface] = None
        self._width_hint = width or 0
        self._height_hint = height or 0
        # One-shot callbacks fired when pixel data becomes available
        self._listeners: List[LoadListener] = []
        if surface is not None:
            self.set_surface(surface)

    def __repr__(self) -> str:
        return (
            f"<Texture path={self.path!r} size={self.width}x{self.height} "
            f"complete={self.complete}>"
        )

    @classmethod
    def from_file(cls, path: str) -> Texture:
        """Create a texture and load it immediately."""
        texture = cls(path)
        texture.load()
        return texture

    @property
    def complete(self) -> bool:
        return self.surface is not None

    @property
    def width(self) -> int:
        if self.surface is not None:
            return self.surface.get_width()
        return self._width_hint

    @property
    def height(self) -> int:
        if self.surface is not None:
            return self.surface.get_height()
        return self._height_hint

    def load(self) -> None:
        """Read pixel data from ``path`` and notify load listeners."""
        if self.path is None:
            raise ValueError("Texture has no path to load from")
        try:
            surface = pygame.image.load(self.path)
        except (pygame.error, OSError) as e:
            logger.error("Texture load failed: %s", self.path)
            raise RuntimeError(
                f"Failed to load texture from {self.path}: {e}"
            ) from e
        self.set_surface(surface)

    def set_surface(self, surface: pygame.Surface) -> None:
        """Attach pixel data and fire the pending load listeners once."""
        self.surface = surface
        logger.debug(
            "Texture loaded: %s (%dx%d)", self.path, self.width, self.height
        )
        listeners, self._listeners = self._listeners, []
        for listener in listeners:
            listener(self)

    def add_load_listener(self, listener: LoadListener) -> None:
        self._listeners.append(listener)

    def when_loaded(self, listener: LoadListener) -> None:
        """Call ``listener`` now if loaded, otherwise once loading finishes."""
        if self.complete:
            listener(self)
        else:
            self.add_load_listener(listener)


def _build_missing_texture() -> Texture:
    size = MISSING_TEXTURE_SIZE
    half = size // 2
    surface = pygame.Surface((size, size), pygame.SRCALPHA)
    first, second = MISSING_TEXTURE_COLORS
    surface.fill(first)
    surface.fill(second, pygame.Rect(half, 0, size - half, half))
    surface.fill(second, pygame.Rect(0, half, half, size - half))
    return Texture("<missing>", surface=surface)


_missing_texture: Optional[Texture] = None


def missing_texture() -> Texture:
    """Return the shared placeholder texture, creating it on first use."""
    global _missing_texture
    if _missing_texture is None:
        _missing_texture = _build_missing_texture()
    return _missing_texture
