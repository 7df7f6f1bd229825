"""Field of view: symmetric shadowcasting over a tile grid.

The engine scans the four quadrants around the origin row by row, tracking
the slope interval that is still lit. A floor tile is visible only when its
center lies inside that interval, which makes visibility symmetric: if A can
see floor tile B then B can see A. Sight-blocking tiles are lit when reached
(``light_walls``), cast shadow onto everything behind them, and nothing
beyond ``radius`` (Euclidean, ``dx*dx + dy*dy <= r*r``) is ever visible.

``refresh`` is cached on the origin: calling it again with the same origin is
a no-op, observable via ``recompute_count``. Every tile made visible has its
``explored`` latch set, which is never cleared.
"""

from __future__ import annotations

import math
from fractions import Fraction
from typing import Callable, Iterator, List, Optional, Set, Tuple

from roguelike.logging_utils import get_logger

from .tiles import Tile

Coord = Tuple[int, int]

_log = get_logger("fov")

# quadrant -> (row, col) to grid offset
_QUADRANTS = (
    lambda row, col: (col, -row),  # north
    lambda row, col: (row, col),  # east
    lambda row, col: (col, row),  # south
    lambda row, col: (-row, col),  # west
)


def _round_ties_up(n: Fraction) -> int:
    return math.floor(n + Fraction(1, 2))


def _round_ties_down(n: Fraction) -> int:
    return math.ceil(n - Fraction(1, 2))


def _slope(depth: int, col: int) -> Fraction:
    return Fraction(2 * col - 1, 2 * depth)


class _Row:
    __slots__ = ("depth", "start_slope", "end_slope")

    def __init__(self, depth: int, start_slope: Fraction, end_slope: Fraction):
        self.depth = depth
        self.start_slope = start_slope
        self.end_slope = end_slope

    def cols(self) -> Iterator[int]:
        lo = _round_ties_up(self.depth * self.start_slope)
        hi = _round_ties_down(self.depth * self.end_slope)
        return iter(range(lo, hi + 1))

    def is_symmetric(self, col: int) -> bool:
        return self.depth * self.start_slope <= col <= self.depth * self.end_slope

    def next(self) -> "_Row":
        return _Row(self.depth + 1, self.start_slope, self.end_slope)


def compute_fov(
    origin: Coord,
    radius: int,
    is_blocking: Callable[[int, int], bool],
    in_bounds: Callable[[int, int], bool],
    light_walls: bool = True,
) -> Set[Coord]:
    """Return the set of grid coordinates visible from ``origin``.

    Out-of-bounds cells are treated as opaque and never reported.
    """
    ox, oy = origin
    visible: Set[Coord] = set()
    if in_bounds(ox, oy):
        visible.add(origin)
    if radius <= 0:
        return visible
    r2 = radius * radius

    for transform in _QUADRANTS:

        def cell(depth: int, col: int) -> Coord:
            dx, dy = transform(depth, col)
            return ox + dx, oy + dy

        def opaque(depth: int, col: int) -> bool:
            x, y = cell(depth, col)
            return not in_bounds(x, y) or is_blocking(x, y)

        def reveal(depth: int, col: int, wall: bool) -> None:
            if wall and not light_walls:
                return
            dx, dy = transform(depth, col)
            if dx * dx + dy * dy > r2:
                return
            x, y = ox + dx, oy + dy
            if in_bounds(x, y):
                visible.add((x, y))

        rows: List[_Row] = [_Row(1, Fraction(-1), Fraction(1))]
        while rows:
            row = rows.pop()
            if row.depth > radius:
                continue
            prev_wall: Optional[bool] = None
            for col in row.cols():
                wall = opaque(row.depth, col)
                if wall or row.is_symmetric(col):
                    reveal(row.depth, col, wall)
                if prev_wall is True and not wall:
                    row.start_slope = _slope(row.depth, col)
                if prev_wall is False and wall:
                    next_row = row.next()
                    next_row.end_slope = _slope(row.depth, col)
                    rows.append(next_row)
                prev_wall = wall
            if prev_wall is False:
                rows.append(row.next())
    return visible


class VisibilityEngine:
    """Origin-cached visible set over a ``tiles[x][y]`` grid."""

    def __init__(self, tiles: List[List[Tile]], light_walls: bool = True):
        self.tiles = tiles
        self.width = len(tiles)
        self.height = len(tiles[0]) if tiles else 0
        self.light_walls = light_walls
        self.visible: Set[Coord] = set()
        self.origin: Optional[Coord] = None
        self.radius: Optional[int] = None
        self.recompute_count = 0

    def _in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def _blocks_sight(self, x: int, y: int) -> bool:
        return self.tiles[x][y].blocks_sight

    def refresh(self, origin: Coord, radius: int) -> bool:
        """Recompute visibility if ``origin`` moved; returns True when a sweep ran."""
        origin = (origin[0], origin[1])
        if origin == self.origin and radius == self.radius:
            return False
        self.origin = origin
        self.radius = radius
        self.visible = compute_fov(origin, radius, self._blocks_sight, self._in_bounds, self.light_walls)
        for x, y in self.visible:
            self.tiles[x][y].mark_explored()
        self.recompute_count += 1
        _log.debug(event="fov_recomputed", x=origin[0], y=origin[1], visible=len(self.visible))
        return True

    def invalidate(self) -> None:
        """Forget the cached origin so the next refresh sweeps again."""
        self.origin = None

    def is_visible(self, x: int, y: int) -> bool:
        return (x, y) in self.visible


__all__ = ["VisibilityEngine", "compute_fov"]
