"""
Round driver: owns one arena round from stake to payout.

The same driver runs rounds for the pygame viewer (fed frame time via `update()`)
and for the headless batch runner (`run_to_completion()`), so a given seed plays
out identically on both paths.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from config import (
    WARRIOR_SPEED, WARRIOR_COLOR_NAMES, SPAWN_MARGIN, SPAWN_MIN_SEPARATION, SPAWN_MAX_ATTEMPTS,
    DEATH_FADE_PER_SEC, MIN_WARRIORS, MAX_WARRIORS, FIXED_DT, MAX_TICKS,
    MAX_STEPS_PER_UPDATE, MAX_STEPS_PER_UPDATE_SPEEDUP, SPEEDUP_FACTOR, WIN_PROBABILITY,
    BOOSTER_COST, DEBUG_ROUND,
)
from game.arena import Arena
from game.entities.warrior import Warrior
from game.sim.contracts import RoundResult
from game.sim.determinism import Rng
from game.sim.timebase import SimClock
from game.systems import physics
from game.systems.boosters import BoosterType, spawn_booster, check_pickup, apply_booster
from game.systems.combat import CombatSystem
from game.systems.economy import EconomySystem, round_cost
from game.systems.outcome import OutcomeController

# Debug logging (set DEBUG_ROUND=1 in the environment / .env to see round logs)
DEBUG = DEBUG_ROUND


def debug_log(msg):
    if not DEBUG:
        return
    print(f"[ROUND] {msg}")


class RoundState(Enum):
    READY = "ready"
    RUNNING = "running"
    WIN = "win"
    LOSE = "lose"


@dataclass(slots=True)
class RoundConfig:
    """What the player picked before pressing start."""

    mode: int = MAX_WARRIORS
    player_index: int = 0
    booster: Optional[BoosterType] = None
    win_probability: float = WIN_PROBABILITY
    seed: Optional[int] = None

    def validate(self):
        if not (MIN_WARRIORS <= int(self.mode) <= MAX_WARRIORS):
            raise ValueError(f"mode must be {MIN_WARRIORS}..{MAX_WARRIORS} warriors, got {self.mode}")
        if not (0 <= int(self.player_index) < len(WARRIOR_COLOR_NAMES)):
            raise ValueError(f"player_index out of range: {self.player_index}")


class RoundDriver:
    """Fixed-timestep round loop + READY/RUNNING/WIN/LOSE state machine."""

    def __init__(
        self,
        economy: Optional[EconomySystem] = None,
        arena: Optional[Arena] = None,
        outcome: Optional[OutcomeController] = None,
        max_ticks: int = MAX_TICKS,
    ):
        self.economy = economy if economy is not None else EconomySystem()
        self.arena = arena if arena is not None else Arena()
        self.outcome = outcome if outcome is not None else OutcomeController()
        self.combat = CombatSystem()
        self.clock = SimClock(FIXED_DT)
        self.max_ticks = int(max_ticks)

        self.state = RoundState.READY
        self.config: Optional[RoundConfig] = None
        self.rng: Optional[Rng] = None
        self.params = None
        self.warriors: list[Warrior] = []
        self.pickup = None
        self.boosters_bought = {t: 0 for t in BoosterType}
        self.wagered = 0.0
        self.result: Optional[RoundResult] = None
        self.speedup_active = False

        # Applied damage events and pickup messages since the viewer last asked.
        self._pending_events: list = []
        self._pending_messages: list = []

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    @property
    def player(self) -> Optional[Warrior]:
        return next((w for w in self.warriors if w.is_player), None)

    @property
    def is_running(self) -> bool:
        return self.state == RoundState.RUNNING

    def start_round(self, config: RoundConfig) -> bool:
        """
        Pay the stake and spawn the warriors.

        Returns False without touching any state when not READY or when the
        player cannot afford stake + side bet.
        """
        config.validate()
        if self.state != RoundState.READY:
            return False
        has_side_bet = config.booster is not None
        if not self.economy.can_afford_round(has_side_bet):
            debug_log(f"cannot afford round (balance={self.economy.balance:.2f})")
            return False

        self.config = config
        self.outcome.set_win_probability(config.win_probability)
        self.rng = Rng(config.seed)
        self.params = self.outcome.sample_params(self.rng)
        self.economy.start_round(has_side_bet)
        self.wagered = round_cost(has_side_bet)
        self.combat.clear_cooldowns()
        self.clock.reset()
        self.result = None
        self.speedup_active = False
        self._pending_events = []
        self._pending_messages = []

        self.boosters_bought = {t: 0 for t in BoosterType}
        self.pickup = None
        self._spawn_warriors(config)
        if config.booster is not None:
            self.boosters_bought[config.booster] += 1
            self.pickup = spawn_booster(config.booster, self.arena, self.rng)

        self.state = RoundState.RUNNING
        debug_log(
            f"start seed={self.rng.seed} mode={config.mode} target_win={self.params.target_win} "
            f"booster={config.booster.value if config.booster else 'none'}"
        )
        return True

    def reset_to_ready(self) -> bool:
        """Replay: WIN/LOSE -> READY. Balance is kept; everything round-scoped is dropped."""
        if self.state not in (RoundState.WIN, RoundState.LOSE):
            return False
        self.state = RoundState.READY
        self.warriors = []
        self.pickup = None
        self.boosters_bought = {t: 0 for t in BoosterType}
        self.clock.reset()
        self.speedup_active = False
        self._pending_events = []
        self._pending_messages = []
        return True

    def _spawn_positions(self, count: int) -> list:
        a = self.arena
        positions = []
        for _ in range(count):
            x = y = 0.0
            attempts = 0
            while True:
                x = self.rng.float(a.left + SPAWN_MARGIN, a.right - SPAWN_MARGIN)
                y = self.rng.float(a.top + SPAWN_MARGIN, a.bottom - SPAWN_MARGIN)
                attempts += 1
                crowded = any(math.hypot(px - x, py - y) < SPAWN_MIN_SEPARATION for px, py in positions)
                if attempts >= SPAWN_MAX_ATTEMPTS or not crowded:
                    break
            positions.append((x, y))
        return positions

    def _spawn_warriors(self, config: RoundConfig):
        # Player always gets id 0 and its chosen color; the rest keep palette order.
        player_color = WARRIOR_COLOR_NAMES[config.player_index]
        colors = [player_color] + [c for c in WARRIOR_COLOR_NAMES if c != player_color]

        positions = self._spawn_positions(config.mode)
        self.warriors = []
        for i in range(config.mode):
            angle = self.rng.angle()
            is_player = i == 0
            speed = WARRIOR_SPEED * self.params.player_speed_mul if is_player else WARRIOR_SPEED
            px, py = positions[i]
            self.warriors.append(Warrior(
                i, colors[i], is_player, px, py,
                math.cos(angle) * speed, math.sin(angle) * speed, speed,
            ))

    # ------------------------------------------------------------------
    # Mid-round actions
    # ------------------------------------------------------------------
    def buy_booster_mid_round(self, booster_type) -> bool:
        """Side bet during a round: pay and drop a new pickup. One pickup on the field at a time."""
        booster_type = BoosterType.parse(booster_type)
        if booster_type is None or self.state != RoundState.RUNNING:
            return False
        if self.pickup is not None and self.pickup.active:
            return False
        if not self.economy.buy_booster(booster_type.value):
            return False
        self.pickup = spawn_booster(booster_type, self.arena, self.rng)
        self.boosters_bought[booster_type] += 1
        self.wagered += BOOSTER_COST
        return True

    def pop_presentation_events(self) -> tuple:
        """Damage events and pickup messages produced since the last call (viewer effects only)."""
        events, messages = self._pending_events, self._pending_messages
        self._pending_events = []
        self._pending_messages = []
        return events, messages

    def toggle_speedup(self) -> bool:
        self.speedup_active = not self.speedup_active
        return self.speedup_active

    # ------------------------------------------------------------------
    # Simulation
    # ------------------------------------------------------------------
    def update(self, delta_ms: float) -> int:
        """
        Feed frame time in; drains as many fixed steps as allowed. Returns steps run.

        Backlog beyond the per-call step cap is dropped rather than carried over.
        """
        if self.state != RoundState.RUNNING:
            return 0

        if self.speedup_active:
            delta_ms *= SPEEDUP_FACTOR
            max_steps = MAX_STEPS_PER_UPDATE_SPEEDUP
        else:
            max_steps = MAX_STEPS_PER_UPDATE
        self.clock.accumulate(delta_ms)

        steps = 0
        while self.clock.has_step() and steps < max_steps and self.state == RoundState.RUNNING:
            self.clock.consume_step()
            self._tick()
            steps += 1

        if self.state != RoundState.RUNNING or self.clock.has_step():
            self.clock.drop_backlog()
        return steps

    def step(self) -> bool:
        """Run exactly one fixed tick regardless of frame time. Returns False once the round is over."""
        if self.state != RoundState.RUNNING:
            return False
        self.clock.advance()
        self._tick()
        return self.state == RoundState.RUNNING

    def run_to_completion(self) -> Optional[RoundResult]:
        while self.step():
            pass
        return self.result

    def _tick(self):
        dt = self.clock.step_s
        warriors = self.warriors

        physics.advance_rotation(warriors, dt)
        physics.integrate_motion(warriors, dt)
        physics.resolve_walls(warriors, self.arena)
        pairs = physics.resolve_collisions(warriors)

        applied = self.combat.resolve_pairs(pairs, self.clock.now_ms, self.params, self.rng)
        for ev in applied:
            self.economy.process_damage_event(ev)
        self._pending_events.extend(applied)

        player = self.player
        if player is not None and player.alive and self.pickup is not None and check_pickup(player, self.pickup):
            msg = apply_booster(player, self.pickup)
            self._pending_messages.append(msg)
            debug_log(f"pickup {self.pickup.type.value} -> {msg}")

        for w in warriors:
            w.update_fade(dt, DEATH_FADE_PER_SEC)
            w.update_heal_pulse(dt)

        self._check_round_end()

    def _check_round_end(self):
        player = self.player
        if player is None:
            return

        player_active = player.is_active
        active_count = sum(1 for w in self.warriors if w.is_active)
        player_last = player_active and active_count == 1
        timed_out = self.clock.ticks >= self.max_ticks

        if player_active and not player_last and not timed_out:
            return

        win = player_last
        self.state = RoundState.WIN if win else RoundState.LOSE
        final_profit = self.economy.finalise_round(win)
        self.result = RoundResult(
            win=win,
            final_profit=final_profit,
            wagered=self.wagered,
            ticks=self.clock.ticks,
            seed=self.rng.seed,
            timed_out=timed_out and not win and player_active,
        )
        debug_log(
            f"end {self.state.value} ticks={self.clock.ticks} round_profit={self.economy.round_profit:.2f} "
            f"final_profit={final_profit:.2f} balance={self.economy.balance:.2f}"
        )
