"""Textual frontend.

A thin collaborator around the core: it turns key presses into intents,
feeds directional intents to ``Map.take_turn`` and redraws from
``Map.render_state()``. Restart leaves the app with ``RESTART`` as its return
value; ``run.py`` re-executes the process so the next session starts from a
brand-new map.

Run with: `python run.py play`
"""

from __future__ import annotations

from typing import Optional, Tuple

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.widgets import Footer, Header, Log, Static

from roguelike.dungeon import DungeonConfig, Map
from roguelike.intents import DIRECTIONS, KEYMAP, Intent, direction_for
from roguelike.logging_utils import get_logger
from roguelike.models import UserActions
from roguelike.render_state import RenderState

RESTART = "restart"

_log = get_logger("tui")


def _bindings():
    bindings = []
    for intent in Intent:
        keys = ",".join(k for k, i in KEYMAP.items() if i is intent)
        label = intent.value.replace("_", " ").capitalize()
        bindings.append(Binding(keys, f"intent('{intent.value}')", label, show=intent not in DIRECTIONS))
    return bindings


def _rgb(color: Tuple[int, int, int]) -> str:
    return "rgb({},{},{})".format(*color)


def render_viewport(state: RenderState, center: Tuple[int, int], cols: int, rows: int) -> Text:
    """Draw a ``cols`` x ``rows`` window of the map centred on ``center``.

    Unexplored and off-map cells are blank; explored cells get their
    appearance colour as background, units their glyph on top.
    """
    cols = max(1, min(cols, state.width))
    rows = max(1, min(rows, state.height))
    left = min(max(0, center[0] - cols // 2), state.width - cols)
    top = min(max(0, center[1] - rows // 2), state.height - rows)
    units = state.units_by_position()
    text = Text()
    for y in range(top, top + rows):
        for x in range(left, left + cols):
            tile = state.tile(x, y)
            if not tile.drawn:
                text.append(" ")
                continue
            bg = _rgb(tile.background)
            unit = units.get((x, y))
            if unit is not None:
                text.append(unit.glyph, style=f"bold {unit.color} on {bg}")
            else:
                text.append(" ", style=f"on {bg}")
        if y != top + rows - 1:
            text.append("\n")
    return text


class DungeonApp(App):
    """Single-screen game view: map viewport on the left, HUD on the right."""

    CSS = """
    Screen { layout: vertical; }
    #map { width: 1fr; height: 100%; }
    #hud { width: 36; border: tall $primary; padding: 0 1; }
    #status { height: 3; text-style: bold; }
    """

    BINDINGS = _bindings()

    def __init__(self, game_map: Optional[Map] = None, config: Optional[DungeonConfig] = None, rng=None) -> None:
        super().__init__()
        self.config = config or DungeonConfig()
        self.game_map = game_map or Map.generate(config=self.config, rng=rng)
        self.show_hud = True

    def compose(self) -> ComposeResult:  # type: ignore[override]
        yield Header(show_clock=False)
        with Horizontal():
            yield Static(id="map")
            with Vertical(id="hud"):
                yield Static(id="status")
                yield Log(id="messages")
        yield Footer()

    def on_mount(self) -> None:
        # keep arrow keys away from the log's scrolling
        self.query_one("#messages", Log).can_focus = False
        self.redraw()

    def redraw(self) -> None:
        state = self.game_map.render_state()
        view = self.query_one("#map", Static)
        cols = view.size.width or 80
        rows = view.size.height or 40
        view.update(render_viewport(state, self.game_map.player.position, cols, rows))
        status = state.hud
        if not self.game_map.player.alive:
            status += "\nYou are dead. Press r to restart."
        self.query_one("#status", Static).update(status)
        log = self.query_one("#messages", Log)
        log.clear()
        for line in state.messages[-20:]:
            log.write_line(line)

    def handle_intent(self, intent: Intent) -> UserActions:
        if intent is Intent.EXIT:
            self.exit()
            return UserActions.EXIT
        if intent is Intent.RESTART:
            self.exit(RESTART)
            return UserActions.EXIT
        if intent is Intent.TOGGLE_DISPLAY:
            self.show_hud = not self.show_hud
            self.query_one("#hud").display = self.show_hud
            self.game_map.wait_turn(UserActions.DID_NOT_TAKE_TURN)
            return UserActions.DID_NOT_TAKE_TURN
        if not self.game_map.player.alive:
            return UserActions.DID_NOT_TAKE_TURN
        dx, dy = direction_for(intent)
        outcome = self.game_map.take_turn(dx, dy)
        if outcome.player_dead:
            _log.info(event="game_over", hp=self.game_map.player.stats.current_hp)
        return UserActions.TOOK_TURN if outcome.turn_elapsed else UserActions.DID_NOT_TAKE_TURN

    def action_intent(self, name: str) -> None:
        action = self.handle_intent(Intent(name))
        if action is not UserActions.EXIT:
            self.redraw()


__all__ = ["DungeonApp", "RESTART", "render_viewport"]
