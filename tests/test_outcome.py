"""
Tests for the outcome controller presets and sampling.
"""
import dataclasses

import pytest

from game.sim.determinism import Rng
from game.systems.outcome import OutcomeController, WIN_PARAMS, LOSE_PARAMS


class TestOutcomeController:
    def test_probability_clamped(self):
        oc = OutcomeController(1.7)
        assert oc.win_probability == 1.0
        oc.set_win_probability(-0.2)
        assert oc.win_probability == 0.0

    def test_extremes_pick_fixed_preset(self, scripted_rng):
        assert OutcomeController(1.0).sample_params(scripted_rng([0.999])).target_win is True
        assert OutcomeController(0.0).sample_params(scripted_rng([0.0])).target_win is False

    def test_single_draw(self, scripted_rng):
        rng = scripted_rng([0.3])
        params = OutcomeController(0.5).sample_params(rng)
        assert rng.draws == 1
        assert params == WIN_PARAMS

    def test_presets(self, scripted_rng):
        lose = OutcomeController(0.5).sample_params(scripted_rng([0.7]))
        assert lose == LOSE_PARAMS
        assert lose.player_weapon_assist == -0.07
        assert lose.player_take_damage_delta == 2
        assert WIN_PARAMS.player_speed_mul == 1.02

    def test_returns_a_copy(self, scripted_rng):
        params = OutcomeController(1.0).sample_params(scripted_rng([0.1]))
        assert params is not WIN_PARAMS
        with pytest.raises(dataclasses.FrozenInstanceError):
            params.player_deal_bonus_damage = 99

    def test_neutral(self):
        n = OutcomeController.neutral()
        assert n.player_weapon_assist == 0
        assert n.player_deal_bonus_damage == 0
        assert n.player_take_damage_delta == 0
        assert n.player_speed_mul == 1.0

    def test_sampling_is_seeded(self):
        oc = OutcomeController(0.5)
        first = [oc.sample_params(Rng(s)).target_win for s in range(50)]
        again = [oc.sample_params(Rng(s)).target_win for s in range(50)]
        assert first == again
        assert True in first and False in first
