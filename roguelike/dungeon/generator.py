"""Room-and-corridor generation.

Phases, per accepted room (up to ``config.max_rooms``):
    * sample a size in [room_min_size, room_max_size] and an origin that keeps
      the room inside a 1-tile wall border;
    * reject it if it overlaps any accepted room (inclusive test); rejections
      do not use up a quota slot, but ``max_placement_attempts`` consecutive
      rejections end generation early with a partial layout;
    * every room after the first is joined to its nearest accepted room by an
      elbow tunnel, carved, then populated with up to ``max_room_monsters``
      monsters. The first room gets no tunnel and no monsters; the player
      spawns at its center.

``generate`` is pure with respect to its inputs: it builds a fresh wall grid
and hands back tiles, rooms, monsters and metrics. All randomness comes from
the ``rng`` argument (defaults to the ``random`` module) so tests can pin it.
"""

from __future__ import annotations

import random
import time
from dataclasses import replace
from typing import Any, Dict, List, NamedTuple, Optional

from roguelike.logging_utils import get_logger
from roguelike.models.unit import Unit

from .config import DungeonConfig
from .metrics import init_metrics
from .rooms import Room, room_overlaps
from .tiles import Tile
from .tunnels import carve_elbow, find_nearest_room

_log = get_logger("generator")


class GenerationError(RuntimeError):
    """Raised when not a single room could be placed."""


class GenerationResult(NamedTuple):
    tiles: List[List[Tile]]
    rooms: List[Room]
    monsters: List[Unit]
    metrics: Dict[str, Any]


def init_tiles(width: int, height: int) -> List[List[Tile]]:
    # column-major: tiles[x][y]
    return [[Tile.wall() for _ in range(height)] for _ in range(width)]


def spawn_monsters(room: Room, room_number: int, config: DungeonConfig, rng=None) -> List[Unit]:
    """Populate ``room`` with 0..max_room_monsters monsters on distinct cells."""
    r = rng or random
    count = r.randint(0, config.max_room_monsters)
    taken = set()
    monsters: List[Unit] = []
    while len(monsters) < count:
        x = r.randint(room.left, room.right - 1)
        y = r.randint(room.bottom, room.top - 1)
        if (x, y) in taken:
            continue
        taken.add((x, y))
        if r.random() < 1.0 - config.strong_monster_chance:
            monster = Unit.orc(x, y, room_number)
        else:
            monster = Unit.troll(x, y, room_number)
        monsters.append(monster)
    room.monsters = list(monsters)
    return monsters


def _sample_room(config: DungeonConfig, r) -> Room:
    w = r.randint(config.room_min_size, config.room_max_size)
    h = r.randint(config.room_min_size, config.room_max_size)
    x = r.randint(1, config.width - w - 2)
    y = r.randint(1, config.height - h - 2)
    return Room(x, x + w, y, y + h)


def generate(
    width: Optional[int] = None,
    height: Optional[int] = None,
    config: Optional[DungeonConfig] = None,
    rng=None,
) -> GenerationResult:
    if config is None:
        config = DungeonConfig()
    if width is not None or height is not None:
        config = replace(
            config,
            width=config.width if width is None else width,
            height=config.height if height is None else height,
        )
    config.validate()
    r = rng or random
    start = time.perf_counter()
    metrics = init_metrics()
    tiles = init_tiles(config.width, config.height)
    rooms: List[Room] = []
    monsters: List[Unit] = []
    _log.debug(event="generation_start", width=config.width, height=config.height, quota=config.max_rooms)

    rejections = 0
    while len(rooms) < config.max_rooms:
        if rejections >= config.max_placement_attempts:
            metrics['quota_exhausted'] = True
            _log.warn(
                event="placement_budget_exhausted",
                rooms_placed=len(rooms),
                quota=config.max_rooms,
                attempts=rejections,
            )
            break
        new_room = _sample_room(config, r)
        if room_overlaps(new_room, rooms):
            rejections += 1
            metrics['placement_rejections'] += 1
            continue
        rejections = 0
        if rooms:
            nearest = find_nearest_room(rooms, new_room)
            if carve_elbow(new_room.center, nearest.center, tiles, rng=r):
                metrics['joints_patched'] += 1
            metrics['tunnels_carved'] += 1
            new_room.carve(tiles)
            monsters.extend(spawn_monsters(new_room, len(rooms), config, rng=r))
        else:
            new_room.carve(tiles)
        rooms.append(new_room)

    if not rooms:
        raise GenerationError(
            f"no room fits a {config.width}x{config.height} grid within {config.max_placement_attempts} attempts"
        )
    metrics['rooms_placed'] = len(rooms)
    metrics['monsters_spawned'] = len(monsters)
    metrics['runtime_ms'] = int((time.perf_counter() - start) * 1000)
    _log.info(event="map_generated", width=config.width, height=config.height, **metrics)
    return GenerationResult(tiles, rooms, monsters, metrics)


__all__ = ["GenerationError", "GenerationResult", "generate", "init_tiles", "spawn_monsters"]
