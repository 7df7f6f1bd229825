"""Public dungeon package interface."""

from .config import DungeonConfig
from .fov import VisibilityEngine, compute_fov
from .generator import GenerationError, GenerationResult, generate, spawn_monsters
from .map import Map, OutOfBoundsError
from .rooms import Room
from .tiles import APPEARANCE_COLORS, Tile, TileAppearance
from .tunnels import distance_gaps, find_nearest_room, h_v_tunnel, v_h_tunnel

__all__ = [
    "APPEARANCE_COLORS",
    "DungeonConfig",
    "GenerationError",
    "GenerationResult",
    "Map",
    "OutOfBoundsError",
    "Room",
    "Tile",
    "TileAppearance",
    "VisibilityEngine",
    "compute_fov",
    "distance_gaps",
    "find_nearest_room",
    "generate",
    "h_v_tunnel",
    "spawn_monsters",
    "v_h_tunnel",
]
