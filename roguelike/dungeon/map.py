"""The game map: tile grid, rooms, monster roster, player and turn engine.

A ``Map`` is built once per session, either from a generator run
(``Map.generate``) or directly from hand-made parts (tests). There is no
in-place reset; a restart builds a new ``Map``.

Turn flow per input event:
    1. ``player_move_or_attack(dx, dy)`` classifies the destination and either
       moves the player, resolves an attack, or does nothing (AFK).
    2. ``monster_turn_pass(action)`` lets every living, visible monster act,
       in spawn order, but only when the player is alive and the input
       actually consumed a turn.
``take_turn`` wraps both and reports a ``TurnOutcome``.
"""

from __future__ import annotations

from collections import deque
from dataclasses import replace
from typing import Deque, List, Optional, Sequence, Tuple

from roguelike.logging_utils import get_logger
from roguelike.models.actions import TurnOutcome, UnitActions, UserActions
from roguelike.models.unit import Unit
from roguelike.render_state import RenderState, TileView, UnitView
from roguelike.services.combat_service import AttackResult, resolve_attack
from roguelike.services.monster_ai import select_action

from .config import DungeonConfig
from .fov import VisibilityEngine
from .generator import generate
from .rooms import Room
from .tiles import Tile, TileAppearance

_log = get_logger("map")


class OutOfBoundsError(IndexError):
    def __init__(self, x: int, y: int, width: int, height: int):
        super().__init__(f"({x}, {y}) outside {width}x{height} grid")
        self.x = x
        self.y = y


class Map:
    def __init__(
        self,
        tiles: List[List[Tile]],
        rooms: Sequence[Room] = (),
        monsters: Sequence[Unit] = (),
        player: Optional[Unit] = None,
        config: Optional[DungeonConfig] = None,
        metrics: Optional[dict] = None,
    ):
        if not tiles or not tiles[0]:
            raise ValueError("tile grid must be non-empty")
        self.tiles = tiles
        self._width = len(tiles)
        self._height = len(tiles[0])
        self.config = config or DungeonConfig(width=self._width, height=self._height)
        self.rooms: List[Room] = list(rooms)
        self.monsters: List[Unit] = list(monsters)
        if player is None:
            if not self.rooms:
                raise ValueError("a map without rooms needs an explicit player")
            sx, sy = self.spawn_point
            player = Unit.player(sx, sy)
        self.player = player
        self.metrics = dict(metrics or {})
        self.fov = VisibilityEngine(tiles, light_walls=self.config.light_walls)
        self.messages: Deque[str] = deque(maxlen=self.config.message_log_size)
        self.last_attacks: List[AttackResult] = []

    @classmethod
    def generate(
        cls,
        width: Optional[int] = None,
        height: Optional[int] = None,
        config: Optional[DungeonConfig] = None,
        rng=None,
    ) -> "Map":
        result = generate(width, height, config=config, rng=rng)
        cfg = replace(config or DungeonConfig(), width=len(result.tiles), height=len(result.tiles[0]))
        return cls(result.tiles, result.rooms, result.monsters, config=cfg, metrics=result.metrics)

    # ------------------------------------------------------------------
    # Grid access
    # ------------------------------------------------------------------
    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def spawn_point(self) -> Tuple[int, int]:
        return self.rooms[0].center

    @property
    def prev_player_pos(self) -> Optional[Tuple[int, int]]:
        return self.fov.origin

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def get_tile(self, x: int, y: int) -> Tile:
        if not self.in_bounds(x, y):
            raise OutOfBoundsError(x, y, self._width, self._height)
        return self.tiles[x][y]

    def set_tile(self, x: int, y: int, tile: Tile) -> bool:
        if not self.in_bounds(x, y):
            return False
        self.tiles[x][y] = tile
        # sight lines may have changed under the cached origin
        self.fov.invalidate()
        return True

    def living_monsters(self) -> List[Unit]:
        return [m for m in self.monsters if m.alive]

    def blocking_monster_at(self, x: int, y: int) -> Optional[Unit]:
        for monster in self.monsters:
            if monster.alive and monster.blocks_point and monster.position == (x, y):
                return monster
        return None

    # ------------------------------------------------------------------
    # Visibility
    # ------------------------------------------------------------------
    def compute_fov(self) -> bool:
        return self.fov.refresh(self.player.position, self.config.torch_radius)

    def is_visible(self, x: int, y: int) -> bool:
        return self.fov.is_visible(x, y)

    # ------------------------------------------------------------------
    # Turn engine
    # ------------------------------------------------------------------
    def classify(self, x: int, y: int) -> UnitActions:
        if not self.in_bounds(x, y):
            return UnitActions.AFK
        if self.tiles[x][y].blocked:
            return UnitActions.AFK
        if self.blocking_monster_at(x, y) is not None:
            return UnitActions.ATTACK
        return UnitActions.MOVE

    def _attack(self, attacker: Unit, defender: Unit) -> AttackResult:
        result = resolve_attack(attacker, defender)
        self.last_attacks.append(result)
        self.messages.append(result.message)
        return result

    def player_move_or_attack(self, dx: int, dy: int) -> bool:
        """Resolve the player's intent; returns True if it consumed a turn."""
        if not self.player.alive:
            return False
        tx, ty = self.player.x + dx, self.player.y + dy
        action = self.classify(tx, ty)
        if action is UnitActions.MOVE:
            self.player.move(dx, dy)
            return True
        if action is UnitActions.ATTACK:
            self._attack(self.player, self.blocking_monster_at(tx, ty))
            return True
        return False

    def monster_turn_pass(self, last_user_action: UserActions) -> None:
        if not self.player.alive or last_user_action is not UserActions.TOOK_TURN:
            return
        for monster in self.monsters:
            if not self.player.alive:
                break
            if not monster.alive or not self.is_visible(monster.x, monster.y):
                continue
            action = select_action(monster, self.player)
            if action["type"] == "move":
                dx, dy = action["dx"], action["dy"]
                if self.classify(monster.x + dx, monster.y + dy) is UnitActions.MOVE:
                    monster.move(dx, dy)
            elif action["type"] == "attack":
                self._attack(monster, self.player)

    monsters_action = monster_turn_pass

    def take_turn(self, dx: int, dy: int) -> TurnOutcome:
        """One directional intent: player resolution, then the gated monster pass."""
        self._begin_turn()
        took_turn = self.player_move_or_attack(dx, dy)
        return self._finish_turn(UserActions.TOOK_TURN if took_turn else UserActions.DID_NOT_TAKE_TURN)

    def wait_turn(self, user_action: UserActions) -> TurnOutcome:
        """Report a non-directional intent (display toggle etc.) to the turn engine."""
        self._begin_turn()
        return self._finish_turn(user_action)

    def _begin_turn(self) -> None:
        # monsters act on what the player could see when the input arrived
        self.compute_fov()
        self.last_attacks = []

    def _finish_turn(self, user_action: UserActions) -> TurnOutcome:
        was_alive = self.player.alive
        self.monster_turn_pass(user_action)
        if was_alive and not self.player.alive:
            self.messages.append("You died!")
            _log.info(event="player_died", attacks=len(self.last_attacks))
        return TurnOutcome(
            turn_elapsed=user_action is UserActions.TOOK_TURN,
            combat_occurred=bool(self.last_attacks),
            player_dead=not self.player.alive,
        )

    # ------------------------------------------------------------------
    # Render state
    # ------------------------------------------------------------------
    def render_state(self) -> RenderState:
        self.compute_fov()
        tiles = []
        for x in range(self._width):
            for y in range(self._height):
                tile = self.tiles[x][y]
                visible = self.fov.is_visible(x, y)
                tiles.append(
                    TileView(
                        x=x,
                        y=y,
                        visible=visible,
                        explored=tile.explored,
                        blocked=tile.blocked,
                        appearance=TileAppearance.for_tile(visible, tile.blocked),
                    )
                )
        units = [UnitView.of(m) for m in self.monsters if self.fov.is_visible(m.x, m.y)]
        # corpses first so living units are drawn over them
        units.sort(key=lambda u: u.alive)
        units.append(UnitView.of(self.player))
        return RenderState(
            width=self._width,
            height=self._height,
            tiles=tiles,
            units=units,
            player_hp=self.player.stats.current_hp,
            player_max_hp=self.player.stats.max_hp,
            messages=list(self.messages),
        )


__all__ = ["Map", "OutOfBoundsError"]
