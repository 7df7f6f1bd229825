"""Elbow tunnels between room centers and the nearest-room heuristic.

Each tunnel is two 1-tile-wide straight segments meeting at a right angle.
Segments are modelled as thin ``Room`` rectangles so the strict
``intersects_as_tunnel`` test can tell whether the two halves actually touch;
when they do not, the second segment is re-carved one tile longer to close
the elbow joint.

The nearest-room rule is an approximation kept on purpose: a candidate wins
when it improves *either* the horizontal or the vertical gap against the
current best, rather than minimising a true distance. Changing it would
change every generated layout.
"""

from __future__ import annotations

import random
from typing import Callable, List, Optional, Tuple

from .rooms import Room

Coord = Tuple[int, int]


def _span(a: int, b: int) -> Tuple[int, int]:
    return (a, b) if a < b else (b, a)


def h_v_tunnel(new_center: Coord, prev_center: Coord, tiles) -> bool:
    """Carve horizontally along ``prev_center``'s row, then vertically down ``new_center``'s column.

    Returns True when the joint needed patching.
    """
    nx, ny = new_center
    px, py = prev_center
    left, right = _span(nx, px)
    h_tunnel = Room(left, right, py, py + 1)
    h_tunnel.carve(tiles)

    bottom, top = _span(ny, py)
    v_tunnel = Room(nx, nx + 1, bottom, top)
    v_tunnel.carve(tiles)

    if not h_tunnel.intersects_as_tunnel(v_tunnel):
        Room(nx, nx + 1, bottom, top + 1).carve(tiles)
        return True
    return False


def v_h_tunnel(new_center: Coord, prev_center: Coord, tiles) -> bool:
    """Carve vertically along ``prev_center``'s column, then horizontally along ``new_center``'s row.

    Returns True when the joint needed patching.
    """
    nx, ny = new_center
    px, py = prev_center
    bottom, top = _span(ny, py)
    v_tunnel = Room(px, px + 1, bottom, top)
    v_tunnel.carve(tiles)

    left, right = _span(nx, px)
    h_tunnel = Room(left, right, ny, ny + 1)
    h_tunnel.carve(tiles)

    if not h_tunnel.intersects_as_tunnel(v_tunnel):
        Room(left, right + 1, ny, ny + 1).carve(tiles)
        return True
    return False


def carve_elbow(new_center: Coord, prev_center: Coord, tiles, rng=None) -> bool:
    """Pick one of the two elbow orderings uniformly and carve it."""
    r = rng or random
    carve: Callable[[Coord, Coord, object], bool]
    carve = v_h_tunnel if r.random() < 0.5 else h_v_tunnel
    return carve(new_center, prev_center, tiles)


def distance_gaps(a: Room, b: Room) -> Tuple[int, int]:
    """Return ``(vertical_gap, horizontal_gap)`` between two rooms.

    Each axis is scored independently as ``|min(a.far - b.near, a.near - b.far)|``.
    """
    rlx = a.right - b.left
    lrx = a.left - b.right
    tby = a.top - b.bottom
    bty = a.bottom - b.top
    w = min(rlx, lrx)
    h = min(tby, bty)
    return abs(h), abs(w)


def find_nearest_room(rooms: List[Room], target: Room) -> Optional[Room]:
    if not rooms:
        return None
    nearest = rooms[0]
    best_h, best_w = distance_gaps(target, nearest)
    for room in rooms[1:]:
        h, w = distance_gaps(target, room)
        if h < best_h or w < best_w:
            nearest = room
            best_h, best_w = h, w
    return nearest


__all__ = ["h_v_tunnel", "v_h_tunnel", "carve_elbow", "distance_gaps", "find_nearest_room"]
