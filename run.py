"""Roguelike CLI entry point.

Provides subcommands for playing in the terminal and for printing a freshly
generated map. Accepts configuration via flags and environment variables,
with optional .env loading.

Run `python run.py --help` for details.
"""

import argparse
import os
import random
import sys
from textwrap import dedent

from colorama import Fore, Style
from colorama import init as _color_init
from dotenv import load_dotenv

from roguelike import __version__

_color_init()
# Disable colors if output is not a real terminal (e.g., during pytest capture)
_COLOR_ENABLED = sys.stdout.isatty()


def parse_args(argv: list[str]) -> argparse.Namespace:
    description = """
    Roguelike dungeon crawler

    Play a turn-based dungeon crawl in the terminal, or print a generated map.
    Map size can be provided via CLI flags or environment variables. If both
    are present, CLI flags take precedence.
    """

    epilog = dedent(
        """
        Environment variables:
          ROGUELIKE_MAP_WIDTH    Map width in tiles (default: 100)
          ROGUELIKE_MAP_HEIGHT   Map height in tiles (default: 100)
          ROGUELIKE_LOG_LEVEL    debug|info|warn|error (default: info)
          ROGUELIKE_LOG_JSON     Emit JSON log lines when set to 1/true

        Examples:
          # Play on the default 100x100 map
          python run.py play

          # Print a reproducible map
          python run.py generate --seed 42

          # Load variables from .env then play
          python run.py --env-file .env play

        Keys while playing:
          w a s d / arrows   Move or attack
          f                  Toggle the HUD panel (does not use a turn)
          r                  Restart with a new dungeon
          escape / q         Quit
        """
    )

    parser = argparse.ArgumentParser(
        prog="roguelike",
        description=dedent(description),
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "--env-file",
        dest="env_file",
        help="Path to a .env file to load before processing flags",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"roguelike {__version__}",
    )

    def add_map_flags(p: argparse.ArgumentParser) -> None:
        p.add_argument("--width", type=int, default=None, help="Map width (default: env ROGUELIKE_MAP_WIDTH or 100)")
        p.add_argument("--height", type=int, default=None, help="Map height (default: env ROGUELIKE_MAP_HEIGHT or 100)")
        p.add_argument("--seed", type=int, default=None, help="Seed an injected random source for a reproducible map")

    subparsers = parser.add_subparsers(dest="command")

    play_parser = subparsers.add_parser(
        "play",
        help="Play in the terminal (Textual UI)",
        formatter_class=argparse.RawTextHelpFormatter,
        description="Launch the terminal game. Log lines go to --log-file so they do not disturb the screen.",
    )
    add_map_flags(play_parser)
    play_parser.add_argument(
        "--log-file",
        dest="log_file",
        default="roguelike.log",
        help="File receiving log output while the UI runs (default: roguelike.log)",
    )
    play_parser.set_defaults(command="play")

    gen_parser = subparsers.add_parser(
        "generate",
        help="Generate a map and print it as coloured ASCII",
        formatter_class=argparse.RawTextHelpFormatter,
        description="Run the generator once and print the full map with monsters and metrics.",
    )
    add_map_flags(gen_parser)
    gen_parser.set_defaults(command="generate")

    # If no subcommand provided, default to play
    if len(argv) == 0:
        argv = ["play"]

    return parser.parse_args(argv)


def resolve_config(args: argparse.Namespace):
    from roguelike.dungeon import DungeonConfig

    width = getattr(args, "width", None)
    if width is None:
        width = int(os.getenv("ROGUELIKE_MAP_WIDTH", "100"))
    height = getattr(args, "height", None)
    if height is None:
        height = int(os.getenv("ROGUELIKE_MAP_HEIGHT", "100"))
    return DungeonConfig(width=width, height=height).validate()


def _rng_for(args: argparse.Namespace):
    seed = getattr(args, "seed", None)
    return random.Random(seed) if seed is not None else None


def render_ascii(game_map, color: bool = False) -> str:
    """Full-map ASCII dump: '#' wall, '.' floor, unit glyphs on top."""
    units = {m.position: m for m in game_map.monsters}
    units[game_map.player.position] = game_map.player
    lines = []
    for y in range(game_map.height):
        row = []
        for x in range(game_map.width):
            unit = units.get((x, y))
            if unit is not None:
                ch = unit.glyph
                if color:
                    tint = Fore.WHITE if unit.is_player else (Fore.RED if unit.name == "troll" else Fore.GREEN)
                    ch = f"{Style.BRIGHT}{tint}{ch}{Style.RESET_ALL}"
            elif game_map.tiles[x][y].blocked:
                ch = f"{Fore.BLUE}#{Style.RESET_ALL}" if color else "#"
            else:
                ch = "."
            row.append(ch)
        lines.append("".join(row))
    return "\n".join(lines)


def restart_process() -> None:
    """Replace the current process with a fresh copy of itself; fatal on failure."""
    from roguelike.logging_utils import log

    try:
        os.execv(sys.executable, [sys.executable] + sys.argv)
    except OSError as exc:
        log.error(event="restart_failed", error=exc)
        print(f"[ERROR] Could not restart: {exc}", file=sys.stderr)
        sys.exit(1)


def cmd_generate(args: argparse.Namespace) -> int:
    from roguelike.dungeon import GenerationError, Map

    config = resolve_config(args)
    try:
        game_map = Map.generate(config=config, rng=_rng_for(args))
    except GenerationError as exc:
        print(f"[ERROR] {exc}", file=sys.stderr)
        return 1
    print(render_ascii(game_map, color=_COLOR_ENABLED))

    def label(text: str) -> str:
        return f"{Fore.YELLOW}{text}{Style.RESET_ALL}" if _COLOR_ENABLED else text

    print()
    print(f"{label('Size:'):12} {game_map.width}x{game_map.height}")
    print(f"{label('Spawn:'):12} {game_map.spawn_point}")
    for key, val in game_map.metrics.items():
        print(f"{label(key + ':'):12} {val}")
    return 0


def cmd_play(args: argparse.Namespace) -> int:
    from roguelike import logging_utils
    from roguelike.tui import RESTART, DungeonApp

    config = resolve_config(args)
    with open(args.log_file, "a", encoding="utf-8") as log_stream:
        logging_utils.configure(stream=log_stream)
        logging_utils.log.info(event="startup", mode="play", width=config.width, height=config.height)
        result = DungeonApp(config=config, rng=_rng_for(args)).run()
        if result == RESTART:
            logging_utils.log.info(event="restart")
            restart_process()
    return 0


def main(argv: list[str]) -> int:
    args = parse_args(argv)
    if getattr(args, "env_file", None):
        load_dotenv(args.env_file)
    else:
        # Load default .env if present (no error if missing)
        load_dotenv()

    mode = (getattr(args, "command", None) or "play").lower()
    try:
        if mode == "generate":
            return cmd_generate(args)
        return cmd_play(args)
    except ValueError as exc:
        print(f"[ERROR] {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
