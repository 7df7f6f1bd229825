import random

import pytest

from roguelike.dungeon import Map
from tests.dungeon_test_utils import bfs_reachable, first_room_center


@pytest.mark.parametrize("seed", [0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 42, 99, 12345])
def test_every_room_reachable_from_spawn(seed):
    m = Map.generate(rng=random.Random(seed))
    start = first_room_center(m)
    seen = bfs_reachable(m.tiles, start)
    for idx, room in enumerate(m.rooms):
        cells = list(room.cells())
        assert all(not m.tiles[x][y].blocked for x, y in cells), f"seed {seed}: room {idx} not fully carved"
        assert room.center in seen, f"seed {seed}: room {idx} unreachable from spawn"


@pytest.mark.parametrize("seed", [3, 17])
def test_every_monster_reachable(seed):
    m = Map.generate(rng=random.Random(seed))
    seen = bfs_reachable(m.tiles, m.player.position)
    assert all(mon.position in seen for mon in m.monsters)
