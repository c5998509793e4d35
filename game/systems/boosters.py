"""
Booster pickups: a burger (heal), a glove (next weapon hit +10) or a shield (blocks next hit).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from config import WARRIOR_RADIUS, PICKUP_RADIUS, PICKUP_SPAWN_MARGIN, BURGER_HEAL, HEAL_PULSE_MS
from game.entities.warrior import BoosterEffect
from game.systems.physics import dist_sq

COLLECT_DIST = WARRIOR_RADIUS + PICKUP_RADIUS


class BoosterType(str, Enum):
    BURGER = "burger"  # healing
    GLOVE = "glove"    # damage boost
    SHIELD = "shield"  # damage shield

    @classmethod
    def parse(cls, name) -> "BoosterType | None":
        """'none' / '' / None -> None, otherwise the matching type (ValueError if unknown)."""
        if name is None or isinstance(name, cls):
            return name
        s = str(name).strip().lower()
        if s in ("", "none"):
            return None
        return cls(s)


@dataclass(slots=True)
class BoosterPickup:
    type: BoosterType
    px: float
    py: float
    radius: float = PICKUP_RADIUS
    active: bool = True


def spawn_booster(booster_type: BoosterType, arena, rng) -> BoosterPickup:
    """Place a pickup uniformly inside the arena, away from the walls."""
    m = PICKUP_SPAWN_MARGIN
    return BoosterPickup(
        type=booster_type,
        px=rng.float(arena.left + m, arena.right - m),
        py=rng.float(arena.top + m, arena.bottom - m),
    )


def check_pickup(player, pickup: BoosterPickup) -> bool:
    """Consume the pickup if the player's body overlaps it. Returns True if collected."""
    if pickup is None or not pickup.active:
        return False
    if dist_sq(player.px, player.py, pickup.px, pickup.py) < COLLECT_DIST * COLLECT_DIST:
        pickup.active = False
        return True
    return False


def apply_booster(player, pickup: BoosterPickup) -> str:
    """Apply a collected pickup to the player; returns a short floating-text message."""
    if pickup.type == BoosterType.BURGER:
        player.heal(BURGER_HEAL)
        player.heal_pulse = True
        player.heal_pulse_timer = float(HEAL_PULSE_MS)
        return f"+{BURGER_HEAL} HP"
    if pickup.type == BoosterType.GLOVE:
        player.booster_effect = BoosterEffect.GLOVE
        return "GLOVE READY"
    player.booster_effect = BoosterEffect.SHIELD
    return "SHIELD READY"
