"""Basic monster AI: one greedy step toward the player, or a melee swing.

``select_action`` returns a small dict in the same spirit as the combat layer
consumes elsewhere:

    {'type': 'attack'}
    {'type': 'move', 'dx': 0, 'dy': 1}
    {'type': 'idle'}

A monster two or more tiles away (Euclidean) only ever moves, even when the
step would leave it adjacent; closer than that it attacks instead of moving.
No pathfinding beyond that single rounded step.
"""

from __future__ import annotations

import math
from typing import Any, Dict, Tuple

from roguelike.models.unit import Unit

Action = Dict[str, Any]

ATTACK_RANGE = 2.0


def monster_step(monster: Unit, target: Tuple[int, int]) -> Tuple[float, int, int]:
    """Return ``(distance, dx, dy)`` where (dx, dy) is the rounded unit vector toward target."""
    vx = target[0] - monster.x
    vy = target[1] - monster.y
    distance = math.hypot(vx, vy)
    if distance == 0:
        return 0.0, 0, 0
    dx = int(round(vx / distance))
    dy = int(round(vy / distance))
    return distance, dx, dy


def select_action(monster: Unit, player: Unit) -> Action:
    if not monster.alive or not player.alive:
        return {"type": "idle"}
    distance, dx, dy = monster_step(monster, player.position)
    if distance >= ATTACK_RANGE:
        return {"type": "move", "dx": dx, "dy": dy}
    return {"type": "attack"}


__all__ = ["ATTACK_RANGE", "monster_step", "select_action"]
