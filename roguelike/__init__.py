"""Turn-based dungeon crawler core.

Procedural room-and-corridor generation, cached shadowcasting field of view
and a deterministic turn engine. Frontends consume ``Map.render_state()`` and
``Map.take_turn()``; see ``run.py`` for the terminal entry point.
"""

from .dungeon import DungeonConfig, GenerationError, Map, OutOfBoundsError, generate
from .models import AIKind, TurnOutcome, Unit, UnitActions, UserActions

__version__ = "0.1.0"

__all__ = [
    "AIKind",
    "DungeonConfig",
    "GenerationError",
    "Map",
    "OutOfBoundsError",
    "TurnOutcome",
    "Unit",
    "UnitActions",
    "UserActions",
    "__version__",
    "generate",
]
