"""
Tests for stakes, in-round profit and the payout formula.
"""
import pytest

from config import BET_AMOUNT, BOOSTER_COST, WIN_BONUS_NET
from game.sim.contracts import CollisionType, DamageEvent
from game.systems.economy import EconomySystem, compute_final_profit, round_cost


class TestPayoutFormula:
    @pytest.mark.parametrize(
        "round_profit, win, expected",
        [
            (4.0, True, 4.0 * 1.5 + 5.0),
            (-3.0, True, 2.0),
            (0.0, True, 5.0),
            (4.0, False, 4.0),
            (-3.2, False, -3.2),
        ],
    )
    def test_compute_final_profit(self, round_profit, win, expected):
        assert compute_final_profit(round_profit, win) == pytest.approx(expected)

    def test_win_is_always_positive_for_small_losses(self):
        rp = 0.0
        while rp > -WIN_BONUS_NET:
            assert compute_final_profit(rp, True) > 0
            rp -= 0.8

    def test_round_cost(self):
        assert round_cost(False) == BET_AMOUNT
        assert round_cost(True) == BET_AMOUNT + BOOSTER_COST


class TestEconomySystem:
    def test_start_round_deducts_stake(self):
        eco = EconomySystem(100)
        assert eco.start_round(False)
        assert eco.balance == 90
        assert eco.transaction_log[-1]["type"] == "stake"

    def test_side_bet_costs_extra(self):
        eco = EconomySystem(100)
        eco.start_round(True)
        assert eco.balance == 89

    def test_unaffordable_round_is_noop(self):
        eco = EconomySystem(10.5)
        assert not eco.start_round(True)
        assert eco.balance == 10.5
        assert eco.transaction_log == []

    def test_damage_events_move_round_profit(self, build):
        eco = EconomySystem(100)
        eco.start_round()
        player = build.warrior(0, is_player=True)
        npc = build.warrior(1)
        eco.process_damage_event(DamageEvent(player, npc, CollisionType.WEAPON_BODY, 26))
        eco.process_damage_event(DamageEvent(npc, player, CollisionType.WEAPON_BODY, 24))
        eco.process_damage_event(DamageEvent(npc, player, CollisionType.BODY_BODY, 10))
        # Body contact dealt by the player earns nothing.
        eco.process_damage_event(DamageEvent(player, npc, CollisionType.BODY_BODY, 10))
        assert eco.round_profit == pytest.approx(1.0 - 0.8 - 0.8)

    def test_npc_only_events_ignored(self, build):
        eco = EconomySystem(100)
        eco.start_round()
        eco.process_damage_event(DamageEvent(build.warrior(1), build.warrior(2), CollisionType.WEAPON_BODY, 25))
        assert eco.round_profit == 0.0

    def test_finalise_win(self):
        eco = EconomySystem(100)
        eco.start_round()
        eco.round_profit = 2.0
        assert eco.finalise_round(True) == pytest.approx(8.0)
        assert eco.balance == pytest.approx(98.0)
        assert eco.transaction_log[-1]["type"] == "payout"

    def test_finalise_clamps_balance(self):
        eco = EconomySystem(10)
        eco.start_round()
        eco.round_profit = -4.0
        eco.finalise_round(False)
        assert eco.balance == 0.0
        assert eco.final_profit == -4.0

    def test_booster_purchase(self):
        eco = EconomySystem(1.5)
        assert eco.buy_booster("glove")
        assert eco.balance == pytest.approx(0.5)
        assert not eco.buy_booster("shield")
        assert eco.get_recent_transactions(1)[0]["booster"] == "glove"
