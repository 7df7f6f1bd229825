"""Tile value type and the four presentation states used by renderers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass
class Tile:
    blocked: bool = True
    blocks_sight: bool = True
    explored: bool = False

    @classmethod
    def wall(cls) -> "Tile":
        return cls(blocked=True, blocks_sight=True)

    @classmethod
    def empty(cls) -> "Tile":
        return cls(blocked=False, blocks_sight=False)

    def mark_explored(self) -> None:
        # one-way latch
        self.explored = True


class TileAppearance(Enum):
    REMEMBERED_WALL = "remembered_wall"
    REMEMBERED_FLOOR = "remembered_floor"
    LIT_WALL = "lit_wall"
    LIT_FLOOR = "lit_floor"

    @classmethod
    def for_tile(cls, visible: bool, blocked: bool) -> "TileAppearance":
        if visible:
            return cls.LIT_WALL if blocked else cls.LIT_FLOOR
        return cls.REMEMBERED_WALL if blocked else cls.REMEMBERED_FLOOR


APPEARANCE_COLORS = {
    TileAppearance.REMEMBERED_WALL: (0, 0, 100),
    TileAppearance.REMEMBERED_FLOOR: (50, 50, 150),
    TileAppearance.LIT_WALL: (130, 110, 50),
    TileAppearance.LIT_FLOOR: (200, 180, 50),
}


__all__ = ["Tile", "TileAppearance", "APPEARANCE_COLORS"]
