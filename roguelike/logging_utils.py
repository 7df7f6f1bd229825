"""Event logging for the dungeon core and its frontends.

Each call records one event as a single line. The default line layout is
``level=info ts=1700000000 logger=generator event=map_generated rooms=30``;
with ``ROGUELIKE_LOG_JSON`` set the same fields come out as one JSON object.
``ROGUELIKE_LOG_LEVEL`` picks the threshold (debug, info, warn, error).

While the Textual screen is up, ``run.py play`` points the output at a log
file through ``configure(stream=...)``.

    from roguelike.logging_utils import get_logger
    _log = get_logger("combat")
    _log.info(event="unit_died", name="orc", x=4, y=7)

Fields set to None are left out. Text values have their spaces turned into
underscores so every key=value pair stays one token.
"""

from __future__ import annotations

import json
import os
import sys
import time
from typing import IO, Dict, Optional

LEVELS = {"debug": 10, "info": 20, "warn": 30, "error": 40}
CURRENT_LEVEL = LEVELS.get(os.getenv("ROGUELIKE_LOG_LEVEL", "info"), 20)
JSON_MODE = os.getenv("ROGUELIKE_LOG_JSON", "0").lower() in ("1", "true", "yes", "on")
# unset: stdout, with errors on stderr
STREAM: Optional[IO[str]] = None


def configure(level: str | None = None, json_mode: bool | None = None, stream: IO[str] | None = None) -> None:
    """Replace the settings read from the environment at import time."""
    global CURRENT_LEVEL, JSON_MODE, STREAM
    if level is not None:
        if level not in LEVELS:
            raise ValueError(f"unknown log level: {level}")
        CURRENT_LEVEL = LEVELS[level]
    if json_mode is not None:
        JSON_MODE = bool(json_mode)
    if stream is not None:
        STREAM = stream


def _as_json(record: Dict[str, object]) -> str:
    try:
        return json.dumps(record, separators=(",", ":"), default=str)
    except (TypeError, ValueError):
        return json.dumps({"level": record["level"], "ts": record["ts"], "error": "json_encode_failed"})


def _as_pairs(record: Dict[str, object]) -> str:
    pairs = []
    for key, value in record.items():
        if not isinstance(value, (int, float)):
            value = str(value).replace(" ", "_")
        pairs.append(f"{key}={value}")
    return " ".join(pairs)


def _format(level: str, **fields) -> str:
    record: Dict[str, object] = {"level": level, "ts": int(time.time())}
    record.update((k, v) for k, v in fields.items() if v is not None)
    return _as_json(record) if JSON_MODE else _as_pairs(record)


class _Logger:
    def __init__(self, name: str | None = None):
        self.name = name or "roguelike"

    def _emit(self, level: str, **fields):
        if LEVELS[level] < CURRENT_LEVEL:
            return
        fields.setdefault("logger", self.name)
        target = STREAM
        if target is None:
            target = sys.stderr if level == "error" else sys.stdout
        print(_format(level, **fields), file=target, flush=True)

    def debug(self, **fields):
        self._emit("debug", **fields)

    def info(self, **fields):
        self._emit("info", **fields)

    def warn(self, **fields):
        self._emit("warn", **fields)

    def error(self, **fields):
        self._emit("error", **fields)


_LOGGERS: Dict[str, _Logger] = {}


def get_logger(name: str) -> _Logger:
    if name not in _LOGGERS:
        _LOGGERS[name] = _Logger(name)
    return _LOGGERS[name]


log = get_logger("roguelike")


__all__ = ["LEVELS", "configure", "get_logger", "log"]
