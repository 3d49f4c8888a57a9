"""
Glyph metrics for bitmap font strips.

A strip stacks ``count + 1`` rows of equal height separated by one-pixel
gaps: row 0 is the fallback glyph, row ``i`` holds the ``i``-th character.
"""

from __future__ import annotations
import logging
import math
from typing import List

import numpy as np
import pygame

logger = logging.getLogger(__name__)


def glyph_height(texture_height: int, count: int) -> float:
    """Height of one glyph row in a strip holding ``count`` characters."""
    return (texture_height + 1) / (count + 1) - 1


def row_offset(row: int, height: float) -> float:
    """Top y coordinate of ``row`` in the strip."""
    return (height + 1) * row


def extract_glyph_widths(alpha: np.ndarray, count: int) -> List[int]:
    """
    Return the visible width of every strip row, fallback row first.

    ``alpha`` is indexed ``[x, y]`` like ``pygame.surfarray.array_alpha``.
    A row's width is one past the rightmost column holding any non-zero
    alpha inside the row's band; a fully transparent row gets the full
    texture width.
    """
    texture_width, texture_height = alpha.shape
    height = glyph_height(texture_height, count)
    if height != int(height):
        logger.warning(
            "Strip height %d does not split into %d rows; glyph height %.2f, "
            "drawn %d px tall",
            texture_height,
            count + 1,
            height,
            max(int(height), 0),
        )
    # Bands span [offset, offset + height), so a fractional height reaches
    # into one more pixel row
    band = max(math.ceil(height), 0)
    widths = []
    for row in range(count + 1):
        top = math.floor(row_offset(row, height))
        bottom = min(top + band, texture_height)
        columns = np.flatnonzero(alpha[:, top:bottom].any(axis=1))
        if columns.size:
            widths.append(int(columns[-1]) + 1)
        else:
            widths.append(texture_width)
    return widths


def surface_alpha(surface: pygame.Surface) -> np.ndarray:
    """Copy the per-pixel alpha channel of ``surface`` as an ``[x, y]`` array."""
    return pygame.surfarray.array_alpha(surface)
