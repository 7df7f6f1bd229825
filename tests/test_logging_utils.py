import io
import json

import pytest

from roguelike import logging_utils
from roguelike.logging_utils import get_logger


def test_key_value_format_replaces_spaces(capsys):
    get_logger("gen").info(event="map_generated", rooms=30, note="two words", skipped=None)
    out = capsys.readouterr().out.strip()
    assert out.startswith("level=info ts=")
    assert "event=map_generated" in out
    assert "rooms=30" in out
    assert "note=two_words" in out
    assert "skipped" not in out
    assert "logger=gen" in out


def test_level_threshold(capsys):
    log = get_logger("t")
    log.debug(event="hidden")
    assert capsys.readouterr().out == ""
    logging_utils.configure(level="debug")
    log.debug(event="shown")
    assert "event=shown" in capsys.readouterr().out


def test_errors_go_to_stderr_by_default(capsys):
    get_logger("t").error(event="boom")
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "level=error" in captured.err


def test_json_mode_and_stream_override():
    buf = io.StringIO()
    logging_utils.configure(json_mode=True, stream=buf)
    get_logger("t").warn(event="placement_budget_exhausted", rooms=4)
    rec = json.loads(buf.getvalue())
    assert rec["level"] == "warn"
    assert rec["event"] == "placement_budget_exhausted"
    assert rec["rooms"] == 4
    assert rec["logger"] == "t"


def test_unknown_level_rejected():
    with pytest.raises(ValueError):
        logging_utils.configure(level="loud")


def test_loggers_are_cached():
    assert get_logger("same") is get_logger("same")
