"""Read-only snapshot handed to whatever draws the game.

Tiles that were never explored are still listed (with ``explored=False``);
drawers skip them. Monsters appear only while inside the visible set; the
player is always last so it is drawn on top.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from roguelike.dungeon.tiles import APPEARANCE_COLORS, TileAppearance


@dataclass(frozen=True)
class TileView:
    x: int
    y: int
    visible: bool
    explored: bool
    blocked: bool
    appearance: TileAppearance

    @property
    def drawn(self) -> bool:
        return self.explored

    @property
    def background(self) -> Tuple[int, int, int]:
        return APPEARANCE_COLORS[self.appearance]


@dataclass(frozen=True)
class UnitView:
    position: Tuple[int, int]
    glyph: str
    color: str
    alive: bool
    name: str = ""

    @classmethod
    def of(cls, unit) -> "UnitView":
        return cls(position=unit.position, glyph=unit.glyph, color=unit.color, alive=unit.alive, name=unit.name)


@dataclass
class RenderState:
    width: int
    height: int
    tiles: List[TileView]
    units: List[UnitView]
    player_hp: int
    player_max_hp: int
    messages: List[str] = field(default_factory=list)

    def tile(self, x: int, y: int) -> TileView:
        # tiles are stored column-major, matching the map grid
        return self.tiles[x * self.height + y]

    def units_by_position(self) -> Dict[Tuple[int, int], UnitView]:
        # later entries win: living units over corpses, the player over everything
        return {u.position: u for u in self.units}

    @property
    def hud(self) -> str:
        return f"HP: {self.player_hp}/{self.player_max_hp}"


__all__ = ["RenderState", "TileView", "UnitView"]
