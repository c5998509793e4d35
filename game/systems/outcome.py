"""
Outcome controller: per-round bias toward (or away from) a player win.

One Bernoulli draw at round start picks a preset from a fixed table. The preset
only nudges borderline weapon contacts, damage amounts and player speed, so a
"win" round can still be lost and vice versa.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from config import WIN_PROBABILITY


@dataclass(frozen=True, slots=True)
class OutcomeParams:
    # Positive = bias toward player weapon hits, negative = bias toward plain body contact.
    player_weapon_assist: float
    player_deal_bonus_damage: int
    player_take_damage_delta: int
    player_speed_mul: float
    target_win: bool


WIN_PARAMS = OutcomeParams(
    player_weapon_assist=0.05,
    player_deal_bonus_damage=1,
    player_take_damage_delta=-1,
    player_speed_mul=1.02,
    target_win=True,
)

LOSE_PARAMS = OutcomeParams(
    player_weapon_assist=-0.07,
    player_deal_bonus_damage=-1,
    player_take_damage_delta=2,
    player_speed_mul=0.98,
    target_win=False,
)

NEUTRAL_PARAMS = OutcomeParams(
    player_weapon_assist=0.0,
    player_deal_bonus_damage=0,
    player_take_damage_delta=0,
    player_speed_mul=1.0,
    target_win=False,
)

PRESETS = {
    True: WIN_PARAMS,
    False: LOSE_PARAMS,
}


def _clamp01(p: float) -> float:
    return max(0.0, min(1.0, float(p)))


class OutcomeController:
    """Holds the configured win probability and samples round params from it."""

    def __init__(self, win_probability: float = WIN_PROBABILITY):
        self._win_probability = _clamp01(win_probability)

    @property
    def win_probability(self) -> float:
        return self._win_probability

    def set_win_probability(self, p: float):
        self._win_probability = _clamp01(p)

    def sample_params(self, rng) -> OutcomeParams:
        """Draw once from `rng` and return the matching preset (a copy)."""
        target_win = rng.next() < self._win_probability
        return replace(PRESETS[target_win])

    @staticmethod
    def neutral() -> OutcomeParams:
        """Neutral params (for headless baselines and tests)."""
        return replace(NEUTRAL_PARAMS)
