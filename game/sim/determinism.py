"""
Determinism helpers.

Goals:
- Provide a small seeded RNG for gameplay state (spawns, outcome bias, combat nudges, pickups)
- Same seed -> same sequence, whether the round is driven by the viewer or the batch runner

Non-goals:
- Cryptographic security
"""

from __future__ import annotations

import math
import secrets
from typing import Optional

_MASK32 = 0xFFFFFFFF
_TWO_POW_32 = 4294967296.0


def _imul(a: int, b: int) -> int:
    """32-bit wrapping multiply (unsigned result)."""
    return (a * b) & _MASK32


class Rng:
    """
    Mulberry32 PRNG: tiny state machine, fast, good enough for game use.

    Every random draw in a round goes through one instance of this class.
    """

    def __init__(self, seed: Optional[int] = None):
        if seed is None:
            seed = secrets.randbits(32)
        self._seed = int(seed) & _MASK32
        self._state = self._seed

    @property
    def seed(self) -> int:
        """The seed this stream was constructed with."""
        return self._seed

    @property
    def state(self) -> int:
        return self._state

    def next(self) -> float:
        """Return a float in [0, 1)."""
        self._state = (self._state + 0x6D2B79F5) & _MASK32
        s = self._state
        t = _imul(s ^ (s >> 15), 1 | s)
        t = (t + _imul(t ^ (t >> 7), 61 | t)) & _MASK32
        return ((t ^ (t >> 14)) & _MASK32) / _TWO_POW_32

    def int(self, lo: int, hi: int) -> int:
        """Return an integer in [lo, hi] inclusive."""
        return math.floor(self.next() * (hi - lo + 1)) + lo

    def float(self, lo: float, hi: float) -> float:
        """Return a float in [lo, hi)."""
        return self.next() * (hi - lo) + lo

    def angle(self) -> float:
        """Return an angle in radians, [0, 2*pi)."""
        return self.next() * math.pi * 2


def string_seed(text: str) -> int:
    # Stable string hash (NEVER Python's built-in hash(), which is randomized per process).
    h = 0
    for ch in text:
        h = (h * 31 + ord(ch)) & _MASK32
    return h


def parse_seed(text: Optional[str]) -> Optional[int]:
    """
    Turn a user-entered seed string into a 32-bit seed.

    - blank / None -> None (caller gets a non-deterministic seed)
    - decimal integer -> that integer (masked to 32 bits)
    - anything else -> stable string hash
    """
    if text is None:
        return None
    s = str(text).strip()
    if not s:
        return None
    try:
        return int(s, 10) & _MASK32
    except ValueError:
        return string_seed(s)


def batch_seed(round_index: int) -> int:
    """Deterministic per-round seed for headless batches (Knuth multiplicative hash)."""
    return (int(round_index) * 2654435761) & _MASK32
