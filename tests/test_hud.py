"""
Tests for HUD text helpers (no display needed).
"""
from game.systems.boosters import BoosterType
from game.ui.hud import booster_label


class TestBoosterLabel:
    def test_plain_names(self):
        assert booster_label(BoosterType.BURGER) == "burger"
        assert booster_label(BoosterType.SHIELD) == "shield"
        assert f"[B] Booster: {booster_label(BoosterType.GLOVE)}" == "[B] Booster: glove"

    def test_none(self):
        assert booster_label(None) == "none"
