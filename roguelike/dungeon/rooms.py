from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Tuple

from .tiles import Tile


@dataclass
class Room:
    """Axis-aligned rectangle; ``right`` and ``top`` are exclusive.

    Also used for the straight corridor segments of a tunnel, which is why the
    two intersection predicates below differ in strictness.
    """

    left: int
    right: int
    bottom: int
    top: int
    # filled while the room is being populated during generation only
    monsters: List = field(default_factory=list, repr=False, compare=False)

    @property
    def width(self) -> int:
        return self.right - self.left

    @property
    def height(self) -> int:
        return self.top - self.bottom

    def cells(self) -> Iterator[Tuple[int, int]]:
        for ix in range(self.left, self.right):
            for iy in range(self.bottom, self.top):
                yield ix, iy

    def contains(self, x: int, y: int) -> bool:
        return self.left <= x < self.right and self.bottom <= y < self.top

    @property
    def center(self) -> Tuple[int, int]:
        return ((self.left + self.right) // 2, (self.bottom + self.top) // 2)

    def carve(self, tiles) -> int:
        """Overwrite every in-grid cell with an empty tile; returns cells carved."""
        width = len(tiles)
        height = len(tiles[0]) if width else 0
        carved = 0
        for ix, iy in self.cells():
            if 0 <= ix < width and 0 <= iy < height:
                tiles[ix][iy] = Tile.empty()
                carved += 1
        return carved

    def intersects_as_tunnel(self, other: "Room") -> bool:
        return (
            self.left < other.right
            and self.right > other.left
            and self.top > other.bottom
            and self.bottom < other.top
        )

    def intersects_as_room(self, other: "Room") -> bool:
        # inclusive: rooms sharing an edge coordinate count as overlapping
        return (
            self.left <= other.right
            and self.right >= other.left
            and self.top >= other.bottom
            and self.bottom <= other.top
        )


def room_overlaps(room: Room, existing: List[Room]) -> bool:
    return any(r.intersects_as_room(room) for r in existing)


__all__ = ["Room", "room_overlaps"]
