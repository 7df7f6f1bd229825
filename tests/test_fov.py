import random

from roguelike.dungeon import Map, VisibilityEngine, compute_fov
from tests.factories import map_from_ascii, open_room, place

PILLAR = [
    "###########",
    "#.........#",
    "#.@..#....#",
    "#.........#",
    "###########",
]


def _engine(rows):
    m = map_from_ascii(rows)
    return m, VisibilityEngine(m.tiles)


def test_radius_is_a_euclidean_cutoff():
    rows = place(open_room(21, 21), 10, 10, "@")
    m, engine = _engine(rows)
    engine.refresh((10, 10), 3)
    assert engine.is_visible(13, 10) and engine.is_visible(10, 7)
    assert not engine.is_visible(14, 10)
    assert engine.is_visible(12, 12)  # 8 <= 9
    assert not engine.is_visible(13, 13)  # 18 > 9


def test_walls_are_lit_and_cast_shadow():
    m, engine = _engine(PILLAR)
    engine.refresh((2, 2), 10)
    assert engine.is_visible(5, 2), "the pillar itself is lit"
    assert not engine.is_visible(6, 2)
    assert not engine.is_visible(7, 2)
    assert engine.is_visible(4, 2) and engine.is_visible(2, 1)
    assert engine.is_visible(0, 2), "outer wall is lit"


def test_light_walls_off_hides_wall_tiles():
    m = map_from_ascii(PILLAR)
    engine = VisibilityEngine(m.tiles, light_walls=False)
    engine.refresh((2, 2), 10)
    assert not engine.is_visible(5, 2)
    assert engine.is_visible(4, 2)


def test_zero_radius_sees_only_origin():
    m, engine = _engine(PILLAR)
    engine.refresh((2, 2), 0)
    assert engine.visible == {(2, 2)}


def test_never_reports_out_of_grid_cells():
    rows = ["@...", "....", "...."]
    m, engine = _engine(rows)
    engine.refresh((0, 0), 10)
    assert all(0 <= x < 4 and 0 <= y < 3 for x, y in engine.visible)
    assert len(engine.visible) == 12


def test_refresh_is_cached_on_origin():
    m, engine = _engine(PILLAR)
    assert engine.refresh((2, 2), 10) is True
    first = set(engine.visible)
    assert engine.refresh((2, 2), 10) is False
    assert engine.recompute_count == 1
    assert engine.visible == first
    assert engine.refresh((3, 2), 10) is True
    assert engine.recompute_count == 2


def test_map_recomputes_only_after_player_displacement():
    m = map_from_ascii(PILLAR)
    m.compute_fov()
    m.compute_fov()
    assert m.fov.recompute_count == 1
    assert m.prev_player_pos == (2, 2)
    m.player_move_or_attack(0, 1)
    m.render_state()
    m.render_state()
    assert m.fov.recompute_count == 2
    assert m.prev_player_pos == (2, 3)


def test_blocked_move_does_not_trigger_recompute():
    m = map_from_ascii(PILLAR)
    m.compute_fov()
    assert m.player_move_or_attack(-2, 0) is False
    m.compute_fov()
    assert m.fov.recompute_count == 1


def test_explored_latch_is_monotonic():
    corridor = ["#" * 40, "#" + "." * 38 + "#", "#" * 40]
    m = map_from_ascii(place(list(corridor), 1, 1, "@"), torch_radius=4)
    m.compute_fov()
    explored_before = {(x, y) for x in range(m.width) for y in range(m.height) if m.tiles[x][y].explored}
    assert (1, 1) in explored_before and (30, 1) not in explored_before
    for step in range(30):
        m.player_move_or_attack(1, 0)
        m.compute_fov()
        explored_now = {(x, y) for x in range(m.width) for y in range(m.height) if m.tiles[x][y].explored}
        assert explored_before <= explored_now, f"explored shrank at step {step}"
        assert m.fov.visible <= explored_now
        explored_before = explored_now
    assert not m.is_visible(1, 1) and m.tiles[1][1].explored


def test_visibility_is_symmetric_between_floor_tiles():
    m = Map.generate(rng=random.Random(21))
    radius = m.config.torch_radius

    def blocking(x, y):
        return m.tiles[x][y].blocks_sight

    origin = m.player.position
    seen = compute_fov(origin, radius, blocking, m.in_bounds)
    floor_seen = [c for c in seen if not m.tiles[c[0]][c[1]].blocks_sight]
    assert len(floor_seen) > 1
    for target in floor_seen:
        back = compute_fov(target, radius, blocking, m.in_bounds)
        assert origin in back, f"{target} sees no line back to {origin}"
