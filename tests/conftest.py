"""
Shared fixtures for the Circle Warriors test suite.

Everything here is headless: the simulation core never imports pygame.
"""

import math
import os
import sys

import pytest

# Add the project root to the Python path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

from config import WARRIOR_SPEED  # noqa: E402
from game.arena import Arena  # noqa: E402
from game.entities.warrior import Warrior  # noqa: E402
from game.systems.outcome import OutcomeController  # noqa: E402

COLORS = ("red", "blue", "green", "yellow")


class ScriptedRng:
    """Stand-in RNG returning a fixed script of values from next(); counts draws."""

    def __init__(self, values=(0.5,)):
        self.values = list(values)
        self.draws = 0

    def next(self) -> float:
        v = self.values[min(self.draws, len(self.values) - 1)]
        self.draws += 1
        return v


class TestDataBuilder:
    """Small builders for warriors in known geometric setups."""

    @staticmethod
    def warrior(
        warrior_id=0,
        px=100.0,
        py=100.0,
        vx=None,
        vy=0.0,
        is_player=False,
        rotation=None,
        speed=WARRIOR_SPEED,
    ) -> Warrior:
        if vx is None:
            vx = speed
        w = Warrior(warrior_id, COLORS[warrior_id % 4], is_player, px, py, vx, vy, speed)
        if rotation is not None:
            w.rotation_rad = rotation
            w.update_weapon_pos()
        return w

    @staticmethod
    def speed_of(w) -> float:
        return math.hypot(w.vx, w.vy)


@pytest.fixture
def build():
    return TestDataBuilder


@pytest.fixture
def arena():
    return Arena(0, 0, 500)


@pytest.fixture
def neutral_params():
    return OutcomeController.neutral()


@pytest.fixture
def scripted_rng():
    return ScriptedRng
