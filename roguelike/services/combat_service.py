"""Melee resolution between two units.

Rules:
  - ``damage = attacker.damage - defender.defense``.
  - An attacker whose own damage stat is <= 0 is categorically too weak and
    deals nothing, whatever the defender's defense (``TOO_WEAK``).
  - Otherwise a non-positive result means the blow was absorbed (``ABSORBED``).
  - Positive damage is subtracted from the defender's current HP in one step;
    reaching zero or below kills the defender (``KILLED``), else ``HIT``.
  - Attacking a unit that is already dead changes nothing (``TARGET_DEAD``).

Every outcome, including the zero-effect ones, still costs the attacker its
turn; that accounting lives with the caller (``Map``).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from roguelike.logging_utils import get_logger
from roguelike.models.unit import Unit

_log = get_logger("combat")


class AttackOutcome(Enum):
    HIT = "hit"
    KILLED = "killed"
    ABSORBED = "absorbed"
    TOO_WEAK = "too_weak"
    TARGET_DEAD = "target_dead"


@dataclass(frozen=True)
class AttackResult:
    attacker: str
    defender: str
    outcome: AttackOutcome
    damage: int
    message: str

    @property
    def dealt_damage(self) -> bool:
        return self.damage > 0


def _message(attacker: Unit, defender: Unit, outcome: AttackOutcome, damage: int) -> str:
    if outcome is AttackOutcome.TOO_WEAK:
        return f"{attacker.name} is too weak to hurt {defender.name}."
    if outcome is AttackOutcome.ABSORBED:
        return f"{attacker.name} attacks {defender.name} but it has no effect!"
    if outcome is AttackOutcome.TARGET_DEAD:
        return f"{defender.name} is already dead."
    msg = f"{attacker.name} attacks {defender.name} for {damage} hit points."
    if outcome is AttackOutcome.KILLED:
        msg += f" {defender.name} is dead!"
    return msg


def resolve_attack(attacker: Unit, defender: Unit) -> AttackResult:
    if not defender.alive:
        outcome, damage = AttackOutcome.TARGET_DEAD, 0
    elif attacker.stats.damage <= 0:
        outcome, damage = AttackOutcome.TOO_WEAK, 0
    else:
        damage = attacker.stats.damage - defender.stats.defense
        if damage > 0:
            killed = defender.take_damage(damage)
            outcome = AttackOutcome.KILLED if killed else AttackOutcome.HIT
        else:
            outcome, damage = AttackOutcome.ABSORBED, 0
    result = AttackResult(
        attacker=attacker.name,
        defender=defender.name,
        outcome=outcome,
        damage=damage,
        message=_message(attacker, defender, outcome, damage),
    )
    _log.debug(
        event="attack",
        attacker=attacker.name,
        defender=defender.name,
        outcome=outcome.value,
        damage=damage,
        defender_hp=defender.stats.current_hp,
    )
    if outcome is AttackOutcome.KILLED:
        _log.info(event="unit_died", name=defender.name, x=defender.x, y=defender.y)
    return result


__all__ = ["AttackOutcome", "AttackResult", "resolve_attack"]
