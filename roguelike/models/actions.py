from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class UnitActions(Enum):
    """What a step onto a cell would turn into."""

    MOVE = "move"
    ATTACK = "attack"
    AFK = "afk"


class UserActions(Enum):
    """Outcome of one input event, as reported by the input layer."""

    TOOK_TURN = "took_turn"
    DID_NOT_TAKE_TURN = "did_not_take_turn"
    EXIT = "exit"


@dataclass(frozen=True)
class TurnOutcome:
    turn_elapsed: bool
    combat_occurred: bool
    player_dead: bool


__all__ = ["UnitActions", "UserActions", "TurnOutcome"]
