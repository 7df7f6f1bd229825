"""Positioned actors: the player and the monsters.

A unit's life is one-way: ``alive`` flips to False exactly once, when
``current_hp`` drops to zero or below. On that transition the unit stops
blocking its tile and its render colour switches to ``DEAD_COLOR``. Dead
monsters stay in the map's roster; every pass filters on ``alive``.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional, Tuple

DEAD_COLOR = "dark_red"


class AIKind(Enum):
    PLAYER = "player"
    BASIC = "basic"


@dataclass
class Stats:
    max_hp: int
    current_hp: int
    defense: int
    damage: int

    @classmethod
    def preset(cls, max_hp: int, defense: int, damage: int) -> "Stats":
        return cls(max_hp=max_hp, current_hp=max_hp, defense=defense, damage=damage)


# name -> (glyph, color, max_hp, defense, damage)
ARCHETYPES: Dict[str, Tuple[str, str, int, int, int]] = {
    "player": ("@", "white", 30, 2, 5),
    "orc": ("o", "green", 10, 0, 3),
    "troll": ("T", "dark_green", 16, 1, 4),
}


@dataclass
class Unit:
    x: int
    y: int
    glyph: str
    color: str
    name: str
    stats: Stats
    ai: AIKind = AIKind.BASIC
    blocks_point: bool = True
    alive: bool = True
    spawn_room: Optional[int] = None
    base_color: str = field(default="", repr=False)

    def __post_init__(self):
        if not self.base_color:
            self.base_color = self.color

    @classmethod
    def from_archetype(cls, kind: str, x: int, y: int, spawn_room: Optional[int] = None) -> "Unit":
        glyph, color, max_hp, defense, damage = ARCHETYPES[kind]
        ai = AIKind.PLAYER if kind == "player" else AIKind.BASIC
        return cls(
            x=x,
            y=y,
            glyph=glyph,
            color=color,
            name=kind,
            stats=Stats.preset(max_hp, defense, damage),
            ai=ai,
            spawn_room=spawn_room,
        )

    @classmethod
    def player(cls, x: int, y: int) -> "Unit":
        return cls.from_archetype("player", x, y)

    @classmethod
    def orc(cls, x: int, y: int, spawn_room: Optional[int] = None) -> "Unit":
        return cls.from_archetype("orc", x, y, spawn_room)

    @classmethod
    def troll(cls, x: int, y: int, spawn_room: Optional[int] = None) -> "Unit":
        return cls.from_archetype("troll", x, y, spawn_room)

    @property
    def position(self) -> Tuple[int, int]:
        return (self.x, self.y)

    @property
    def is_player(self) -> bool:
        return self.ai is AIKind.PLAYER

    def move(self, dx: int, dy: int) -> None:
        # callers classify the destination first
        self.x += dx
        self.y += dy

    def distance_to(self, x: int, y: int) -> float:
        return math.hypot(x - self.x, y - self.y)

    def take_damage(self, amount: int) -> bool:
        """Subtract ``amount`` (ignored unless positive); returns True if this killed the unit."""
        if amount <= 0 or not self.alive:
            return False
        self.stats.current_hp -= amount
        if self.stats.current_hp <= 0:
            self.die()
            return True
        return False

    def die(self) -> None:
        if not self.alive:
            return
        self.alive = False
        self.blocks_point = False
        self.color = DEAD_COLOR


__all__ = ["AIKind", "Stats", "Unit", "ARCHETYPES", "DEAD_COLOR"]
