"""Keyboard -> intent mapping shared by every frontend."""

from __future__ import annotations

from enum import Enum
from typing import Dict, Optional, Tuple


class Intent(Enum):
    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    TOGGLE_DISPLAY = "toggle_display"
    RESTART = "restart"
    EXIT = "exit"


# screen coordinates: y grows downward
DIRECTIONS: Dict[Intent, Tuple[int, int]] = {
    Intent.MOVE_UP: (0, -1),
    Intent.MOVE_DOWN: (0, 1),
    Intent.MOVE_LEFT: (-1, 0),
    Intent.MOVE_RIGHT: (1, 0),
}

KEYMAP: Dict[str, Intent] = {
    "w": Intent.MOVE_UP,
    "up": Intent.MOVE_UP,
    "s": Intent.MOVE_DOWN,
    "down": Intent.MOVE_DOWN,
    "a": Intent.MOVE_LEFT,
    "left": Intent.MOVE_LEFT,
    "d": Intent.MOVE_RIGHT,
    "right": Intent.MOVE_RIGHT,
    "f": Intent.TOGGLE_DISPLAY,
    "r": Intent.RESTART,
    "escape": Intent.EXIT,
    "q": Intent.EXIT,
}


def intent_for_key(key: str) -> Optional[Intent]:
    return KEYMAP.get((key or "").lower())


def direction_for(intent: Intent) -> Optional[Tuple[int, int]]:
    return DIRECTIONS.get(intent)


__all__ = ["DIRECTIONS", "Intent", "KEYMAP", "direction_for", "intent_for_key"]
