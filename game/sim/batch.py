"""
Headless batch simulation.

Runs many independent seeded rounds through the same RoundDriver the viewer uses
and aggregates win rate, average profit and realized RTP (returned / wagered).
"""

from __future__ import annotations

from typing import Callable, Optional

from config import BATCH_STARTING_BALANCE
from game.round import RoundConfig, RoundDriver
from game.sim.contracts import BatchSummary, RoundResult
from game.sim.determinism import batch_seed
from game.systems.boosters import BoosterType
from game.systems.economy import EconomySystem


def run_one_round(
    mode: int,
    win_probability: float,
    has_booster: bool,
    seed: int,
    booster: BoosterType = BoosterType.SHIELD,
) -> RoundResult:
    """
    Play one round to completion with a fresh driver and a large balance.

    Nothing is shared with other rounds: new RNG, new economy, new cooldown table.
    """
    driver = RoundDriver(economy=EconomySystem(BATCH_STARTING_BALANCE))
    config = RoundConfig(
        mode=mode,
        player_index=0,
        booster=booster if has_booster else None,
        win_probability=win_probability,
        seed=seed,
    )
    if not driver.start_round(config):
        raise RuntimeError("batch round could not start (balance too low)")
    return driver.run_to_completion()


def run_batch(
    rounds: int = 10_000,
    win_probability: float = 0.5,
    mode: int = 2,
    has_booster: bool = False,
    booster: BoosterType = BoosterType.SHIELD,
    seed_fn: Callable[[int], int] = batch_seed,
    on_round: Optional[Callable[[int, RoundResult], None]] = None,
) -> BatchSummary:
    wins = 0
    total_profit = 0.0
    total_wagered = 0.0
    total_returned = 0.0

    for i in range(int(rounds)):
        result = run_one_round(mode, win_probability, has_booster, seed_fn(i), booster=booster)
        if result.win:
            wins += 1
        total_profit += result.final_profit
        total_wagered += result.wagered
        total_returned += result.returned
        if on_round is not None:
            on_round(i, result)

    return BatchSummary(
        rounds=int(rounds),
        wins=wins,
        total_profit=total_profit,
        total_wagered=total_wagered,
        total_returned=total_returned,
    )
