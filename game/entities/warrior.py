"""
Warrior entity: a rolling circle with a weapon hitbox on its rim.
"""
import math
from enum import Enum

from config import WARRIOR_RADIUS, WEAPON_OFFSET, WARRIOR_MAX_HP, WARRIOR_COLOR_NAMES


class BoosterEffect(str, Enum):
    NONE = "none"
    GLOVE = "glove"
    SHIELD = "shield"


class Warrior:
    """One combatant in the arena."""

    def __init__(
        self,
        warrior_id: int,
        color: str,
        is_player: bool,
        px: float,
        py: float,
        vx: float,
        vy: float,
        speed: float,
    ):
        if color not in WARRIOR_COLOR_NAMES:
            raise ValueError(f"unknown warrior color: {color!r}")
        self.id = int(warrior_id)
        self.color = color
        self.is_player = bool(is_player)

        self.px = float(px)
        self.py = float(py)
        self.vx = float(vx)
        self.vy = float(vy)
        self.speed = float(speed)

        self.hp = WARRIOR_MAX_HP
        self.alive = True
        # Dying warriors still count as alive until their fade-out finishes,
        # but physics and combat skip them.
        self.dying = False
        self.alpha = 1.0

        # Single source of truth for both the visual roll and the weapon hitbox direction.
        # Staggered per id so weapons don't all point the same way at spawn.
        self.rotation_rad = self.id * (math.pi * 2 / 4)
        self.weapon_x = 0.0
        self.weapon_y = 0.0

        self.booster_effect = BoosterEffect.NONE
        self.heal_pulse = False
        self.heal_pulse_timer = 0.0  # ms

        self.update_weapon_pos()

    @property
    def is_active(self) -> bool:
        """Alive and not fading out: takes part in physics and combat."""
        return self.alive and not self.dying

    @property
    def health_percent(self) -> float:
        return self.hp / WARRIOR_MAX_HP

    @property
    def velocity_magnitude(self) -> float:
        return math.sqrt(self.vx * self.vx + self.vy * self.vy)

    def update_weapon_pos(self):
        """Recompute the weapon hitbox. Call after any change to px/py or rotation_rad."""
        self.weapon_x = self.px + math.cos(self.rotation_rad) * WEAPON_OFFSET
        self.weapon_y = self.py + math.sin(self.rotation_rad) * WEAPON_OFFSET

    def normalise(self, fallback_x: float = 0.0, fallback_y: float = 0.0):
        """
        Rescale velocity back to `speed` (direction kept).

        A (near) zero velocity takes the unit direction (fallback_x, fallback_y)
        instead; with no fallback it is left alone.
        """
        mag = self.velocity_magnitude
        if mag < 1e-6:
            fmag = math.hypot(fallback_x, fallback_y)
            if fmag < 1e-6:
                return
            self.vx = (fallback_x / fmag) * self.speed
            self.vy = (fallback_y / fmag) * self.speed
            return
        self.vx = (self.vx / mag) * self.speed
        self.vy = (self.vy / mag) * self.speed

    def advance_rotation(self, dt: float):
        # Rolling without slipping: angular speed = linear speed / radius.
        self.rotation_rad += (self.speed / WARRIOR_RADIUS) * dt
        self.update_weapon_pos()

    def take_damage(self, amount: int) -> bool:
        """Take damage, returns True if this hit started the death fade."""
        if not self.is_active:
            return False
        self.hp -= amount
        if self.hp <= 0:
            self.hp = 0
            self.dying = True
            return True
        return False

    def heal(self, amount: int):
        self.hp = min(WARRIOR_MAX_HP, self.hp + amount)

    def update_fade(self, dt: float, fade_per_sec: float):
        """Advance the death fade; the warrior is removed once alpha reaches zero."""
        if not (self.dying and self.alive):
            return
        self.alpha -= dt * fade_per_sec
        if self.alpha <= 0:
            self.alpha = 0.0
            self.alive = False

    def update_heal_pulse(self, dt: float):
        if not self.heal_pulse:
            return
        self.heal_pulse_timer -= dt * 1000.0
        if self.heal_pulse_timer <= 0:
            self.heal_pulse_timer = 0.0
            self.heal_pulse = False
