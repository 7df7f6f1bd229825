from .actions import TurnOutcome, UnitActions, UserActions
from .unit import ARCHETYPES, DEAD_COLOR, AIKind, Stats, Unit

__all__ = [
    "AIKind",
    "ARCHETYPES",
    "DEAD_COLOR",
    "Stats",
    "TurnOutcome",
    "Unit",
    "UnitActions",
    "UserActions",
]
