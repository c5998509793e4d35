"""
Thin, stable data contracts shared by the round driver, the viewer and the batch runner.

These are intentionally small "struct-like" dataclasses so:
- gameplay systems can share data without tight coupling or import cycles
- results are easy to print, aggregate or dump to CSV from the tools
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from enum import Enum
from typing import Any, TYPE_CHECKING

if TYPE_CHECKING:
    from game.entities.warrior import Warrior


class CollisionType(str, Enum):
    WEAPON_BODY = "weapon_body"
    BODY_BODY = "body_body"
    WEAPON_WEAPON = "weapon_weapon"
    NONE = "none"


@dataclass(slots=True)
class CollisionPair:
    """Two overlapping warriors found during one physics step."""

    a: "Warrior"
    b: "Warrior"


@dataclass(slots=True)
class DamageEvent:
    attacker: "Warrior"
    victim: "Warrior"
    kind: CollisionType
    damage: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "attacker": int(self.attacker.id),
            "victim": int(self.victim.id),
            "kind": self.kind.value,
            "damage": int(self.damage),
        }


@dataclass(slots=True)
class RoundResult:
    """
    Outcome of one finished round.

    `wagered` is stake plus any side bets; `final_profit` is the balance change on
    top of what was wagered (so returned = wagered + final_profit).
    """

    win: bool
    final_profit: float
    wagered: float
    ticks: int
    seed: int
    timed_out: bool = False

    @property
    def returned(self) -> float:
        return self.wagered + self.final_profit

    def to_dict(self) -> dict[str, Any]:
        d = asdict(self)
        d["returned"] = self.returned
        return d


@dataclass(slots=True)
class BatchSummary:
    rounds: int
    wins: int
    total_profit: float
    total_wagered: float
    total_returned: float

    @property
    def win_rate(self) -> float:
        return self.wins / self.rounds if self.rounds else 0.0

    @property
    def avg_profit(self) -> float:
        return self.total_profit / self.rounds if self.rounds else 0.0

    @property
    def rtp(self) -> float:
        return self.total_returned / self.total_wagered if self.total_wagered > 0 else 0.0

    def to_dict(self) -> dict[str, Any]:
        return {
            "rounds": int(self.rounds),
            "wins": int(self.wins),
            "win_rate": float(self.win_rate),
            "avg_profit": float(self.avg_profit),
            "total_wagered": float(self.total_wagered),
            "total_returned": float(self.total_returned),
            "rtp": float(self.rtp),
        }
