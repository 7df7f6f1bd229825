from .combat_service import AttackOutcome, AttackResult, resolve_attack
from .monster_ai import monster_step, select_action

__all__ = ["AttackOutcome", "AttackResult", "monster_step", "resolve_attack", "select_action"]
