"""
Simulation time abstraction.

Gameplay code reads time from a `SimClock` instead of `pygame.time.get_ticks()` so:
- the pair cooldowns and timers advance in fixed ticks, identical in viewer and batch runs
- the viewer stays free to use real wall-clock time for pacing and effects
"""

from __future__ import annotations

from config import FIXED_DT


class SimClock:
    """
    Fixed-timestep accumulator plus a sim-time counter in milliseconds.

    Frame time is fed in with `accumulate()`, then drained one fixed step at a time
    with `consume_step()`.
    """

    def __init__(self, step_s: float = FIXED_DT):
        self.step_s = float(step_s)
        self.accumulator = 0.0
        self.now_ms = 0.0
        self.ticks = 0

    def reset(self) -> None:
        self.accumulator = 0.0
        self.now_ms = 0.0
        self.ticks = 0

    def accumulate(self, delta_ms: float) -> None:
        self.accumulator += max(0.0, float(delta_ms)) / 1000.0

    def has_step(self) -> bool:
        return self.accumulator >= self.step_s

    def consume_step(self) -> None:
        self.accumulator -= self.step_s
        self.advance()

    def advance(self) -> None:
        """Advance sim time by exactly one fixed step."""
        self.now_ms += self.step_s * 1000.0
        self.ticks += 1

    def drop_backlog(self) -> None:
        """Forget accumulated time that the step cap could not drain this frame."""
        self.accumulator = 0.0

