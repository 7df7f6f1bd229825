import os
import random
import sys

import pytest

# Ensure repository root importable early
ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

from roguelike import logging_utils  # noqa: E402


@pytest.fixture(autouse=True)
def _isolate_logging(monkeypatch):
    """Keep logger overrides made by one test from leaking into the next."""
    monkeypatch.setattr(logging_utils, "CURRENT_LEVEL", logging_utils.LEVELS["info"])
    monkeypatch.setattr(logging_utils, "JSON_MODE", False)
    monkeypatch.setattr(logging_utils, "STREAM", None)
    yield


@pytest.fixture()
def seeded_rng():
    return random.Random(1234)


class ScriptedRng:
    """Stand-in random source replaying fixed randint/random sequences."""

    def __init__(self, randints=(), randoms=()):
        self._randints = list(randints)
        self._randoms = list(randoms)

    def randint(self, a, b):
        value = self._randints.pop(0)
        assert a <= value <= b, f"scripted randint {value} outside [{a}, {b}]"
        return value

    def random(self):
        return self._randoms.pop(0)


@pytest.fixture()
def scripted_rng():
    return ScriptedRng
