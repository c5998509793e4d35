"""
Economy system for stakes, in-round profit and round payouts.
"""
from config import (
    STARTING_BALANCE, BET_AMOUNT, BOOSTER_COST, WEAPON_REWARD, DAMAGE_PENALTY,
    WIN_MULTIPLIER, WIN_BONUS_NET,
)
from game.sim.contracts import CollisionType


def round_cost(has_side_bet: bool) -> float:
    """Stake plus the optional pre-purchased booster."""
    return BET_AMOUNT + (BOOSTER_COST if has_side_bet else 0)


def compute_final_profit(round_profit: float, win: bool) -> float:
    """
    Payout for a finished round, from the live round profit.

    1. raw round profit
    2. x WIN_MULTIPLIER, only on a win with positive profit
    3. + WIN_BONUS_NET, only on a win
    """
    profit = round_profit * WIN_MULTIPLIER if (win and round_profit > 0) else round_profit
    return profit + WIN_BONUS_NET if win else profit


class EconomySystem:
    """Manages the player's balance and the current round's profit."""

    def __init__(self, starting_balance: float = STARTING_BALANCE):
        self.balance = float(starting_balance)
        self.round_profit = 0.0
        self.final_profit = 0.0
        self.transaction_log = []

    def can_afford_round(self, has_side_bet: bool = False) -> bool:
        """Check if the player can pay the stake (+ side bet)."""
        return self.balance >= round_cost(has_side_bet)

    def start_round(self, has_side_bet: bool = False) -> bool:
        """Pay the stake and reset round profit. Returns False (and changes nothing) if unaffordable."""
        if not self.can_afford_round(has_side_bet):
            return False
        cost = round_cost(has_side_bet)
        self.balance -= cost
        self.round_profit = 0.0
        self.final_profit = 0.0
        self.transaction_log.append({
            "type": "stake",
            "cost": cost,
            "side_bet": bool(has_side_bet),
        })
        return True

    def can_afford_booster(self) -> bool:
        return self.balance >= BOOSTER_COST

    def buy_booster(self, booster_type: str) -> bool:
        """Mid-round booster purchase. Returns True if successful."""
        if not self.can_afford_booster():
            return False
        self.balance -= BOOSTER_COST
        self.transaction_log.append({
            "type": "booster_purchase",
            "booster": booster_type,
            "cost": BOOSTER_COST,
        })
        return True

    def process_damage_event(self, ev):
        """Reward player weapon hits; charge every hit the player takes."""
        if ev.attacker.is_player and ev.kind == CollisionType.WEAPON_BODY:
            self.round_profit += WEAPON_REWARD
        if ev.victim.is_player:
            self.round_profit -= DAMAGE_PENALTY

    def finalise_round(self, win: bool) -> float:
        """Pay out the round. Round/final profit stay readable until the next start_round."""
        self.final_profit = compute_final_profit(self.round_profit, win)
        self.balance += self.final_profit
        if self.balance < 0:
            self.balance = 0.0
        self.transaction_log.append({
            "type": "payout",
            "win": bool(win),
            "round_profit": self.round_profit,
            "final_profit": self.final_profit,
        })
        return self.final_profit

    def get_recent_transactions(self, count: int = 5) -> list:
        """Get the most recent transactions."""
        return self.transaction_log[-count:]
