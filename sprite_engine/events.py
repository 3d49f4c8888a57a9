"""
Cursor event records shared by the pointer router and sprite handlers.
"""

from __future__ import annotations
import enum
from dataclasses import dataclass
from typing import Callable


class CursorEventType(enum.Enum):
    DOWN = "down"
    UP = "up"
    ENTER = "enter"
    MOVE = "move"
    LEAVE = "leave"


@dataclass(frozen=True)
class CursorEvent:
    """
    Pointer event as seen by one sprite.
    Attributes:
        x, y: Pointer position relative to the receiving sprite's origin.
        button: Mask of held buttons (1 primary, 2 secondary, 4 middle).
        alt_key, ctrl_key, shift_key: Modifier state.
        movement_x, movement_y: Motion delta in engine pixels.
        timestamp: Host timestamp in milliseconds.
    """

    x: float
    y: float
    button: int = 0
    alt_key: bool = False
    ctrl_key: bool = False
    shift_key: bool = False
    movement_x: float = 0.0
    movement_y: float = 0.0
    timestamp: int = 0


@dataclass(frozen=True)
class PointerSample:
    """Raw pointer sample in host (window) coordinates."""

    x: float
    y: float
    movement_x: float = 0.0
    movement_y: float = 0.0
    buttons: int = 0
    alt_key: bool = False
    ctrl_key: bool = False
    shift_key: bool = False
    timestamp: int = 0


CursorEventHandler = Callable[[CursorEvent], object]
