"""
Combat system: turns colliding warrior pairs into damage events.
"""
import math

from config import (
    WARRIOR_RADIUS, WEAPON_RADIUS, PAIR_COOLDOWN_MS,
    WEAPON_HIT_BASE_DAMAGE, WEAPON_HIT_MIN_DAMAGE, WEAPON_HIT_MAX_DAMAGE,
    BODY_HIT_BASE_DAMAGE, BODY_HIT_MIN_DAMAGE, BODY_HIT_MAX_DAMAGE,
    GLOVE_BONUS_DAMAGE,
)
from game.entities.warrior import BoosterEffect
from game.sim.contracts import CollisionType, DamageEvent
from game.systems.physics import dist


def _clamp(v, lo, hi):
    return max(lo, min(hi, v))


def _round_half_up(v: float) -> int:
    return int(math.floor(v + 0.5))


class CooldownTable:
    """Last contact time (sim ms) per unordered warrior pair."""

    def __init__(self, cooldown_ms: float = PAIR_COOLDOWN_MS):
        self.cooldown_ms = cooldown_ms
        self._last_contact = {}

    @staticmethod
    def key(a, b) -> tuple:
        return (min(a.id, b.id), max(a.id, b.id))

    def try_contact(self, a, b, now_ms: float) -> bool:
        """Record a contact; False when the pair is still cooling down from the last one."""
        key = self.key(a, b)
        last = self._last_contact.get(key)
        if last is not None and now_ms - last < self.cooldown_ms:
            return False
        self._last_contact[key] = now_ms
        return True

    def clear(self):
        self._last_contact.clear()

    def __len__(self) -> int:
        return len(self._last_contact)


def classify_collision(a, b, params, rng) -> tuple:
    """
    Decide what kind of contact a colliding pair made.

    Returns (CollisionType, attacker_is_a). attacker_is_a only matters for WEAPON_BODY.

    Body-body is the default. A weapon classification needs a strictly positive
    overlap (real geometric contact), so a weapon that is merely close never counts.
    Ties go to the first candidate: A hits B, then B hits A, then weapon vs weapon.
    """
    overlap_wa_body_b = (WEAPON_RADIUS + WARRIOR_RADIUS) - dist(a.weapon_x, a.weapon_y, b.px, b.py)
    overlap_wb_body_a = (WEAPON_RADIUS + WARRIOR_RADIUS) - dist(b.weapon_x, b.weapon_y, a.px, a.py)
    overlap_wa_wb = (WEAPON_RADIUS + WEAPON_RADIUS) - dist(a.weapon_x, a.weapon_y, b.weapon_x, b.weapon_y)

    best = CollisionType.BODY_BODY
    best_overlap = 0.0
    attacker_is_a = True

    if overlap_wa_body_b > best_overlap:
        best_overlap = overlap_wa_body_b
        best = CollisionType.WEAPON_BODY
        attacker_is_a = True
    if overlap_wb_body_a > best_overlap:
        best_overlap = overlap_wb_body_a
        best = CollisionType.WEAPON_BODY
        attacker_is_a = False
    if overlap_wa_wb > best_overlap:
        best = CollisionType.WEAPON_WEAPON
        attacker_is_a = True

    # Outcome nudge, player-involved contacts only.
    if (a.is_player or b.is_player) and best != CollisionType.WEAPON_WEAPON:
        assist = params.player_weapon_assist
        if rng.next() < abs(assist):
            if assist > 0:
                if a.is_player and overlap_wa_body_b > 0:
                    return CollisionType.WEAPON_BODY, True
                if b.is_player and overlap_wb_body_a > 0:
                    return CollisionType.WEAPON_BODY, False
            else:
                return CollisionType.BODY_BODY, True

    return best, attacker_is_a


def weapon_hit_damage(attacker, victim, params) -> int:
    dmg = WEAPON_HIT_BASE_DAMAGE
    if attacker.is_player:
        dmg += params.player_deal_bonus_damage
    if victim.is_player:
        dmg += params.player_take_damage_delta
    return int(_clamp(dmg, WEAPON_HIT_MIN_DAMAGE, WEAPON_HIT_MAX_DAMAGE))


def body_hit_damage(victim, params) -> int:
    dmg = float(BODY_HIT_BASE_DAMAGE)
    if victim.is_player:
        dmg += params.player_take_damage_delta * 0.5
    return _round_half_up(_clamp(dmg, BODY_HIT_MIN_DAMAGE, BODY_HIT_MAX_DAMAGE))


class CombatSystem:
    """Classifies collisions into damage events and applies them to warriors."""

    def __init__(self, cooldowns: CooldownTable = None):
        self.cooldowns = cooldowns if cooldowns is not None else CooldownTable()

    def clear_cooldowns(self):
        self.cooldowns.clear()

    def process_collision(self, pair, now_ms: float, params, rng) -> list:
        """
        Raw damage events for one colliding pair (empty while the pair is cooling down).
        """
        a, b = pair.a, pair.b
        if not self.cooldowns.try_contact(a, b, now_ms):
            return []

        kind, attacker_is_a = classify_collision(a, b, params, rng)
        if kind in (CollisionType.NONE, CollisionType.WEAPON_WEAPON):
            return []

        if kind == CollisionType.WEAPON_BODY:
            attacker = a if attacker_is_a else b
            victim = b if attacker_is_a else a
            return [DamageEvent(attacker, victim, kind, weapon_hit_damage(attacker, victim, params))]

        return [
            DamageEvent(a, b, kind, body_hit_damage(b, params)),
            DamageEvent(b, a, kind, body_hit_damage(a, params)),
        ]

    def apply_damage_events(self, events: list) -> list:
        """
        Apply damage events to warriors, honouring booster effects.

        A shield negates the next hit on the player and is used up.
        A glove adds +10 to the next player weapon hit and is used up.
        Returns the events that actually landed, with their final damage.
        """
        applied = []
        for ev in events:
            dmg = ev.damage

            if ev.victim.is_player and ev.victim.booster_effect == BoosterEffect.SHIELD:
                ev.victim.booster_effect = BoosterEffect.NONE
                continue

            if (
                ev.attacker.is_player
                and ev.attacker.booster_effect == BoosterEffect.GLOVE
                and ev.kind == CollisionType.WEAPON_BODY
            ):
                dmg += GLOVE_BONUS_DAMAGE
                ev.attacker.booster_effect = BoosterEffect.NONE

            ev.victim.take_damage(dmg)
            applied.append(DamageEvent(ev.attacker, ev.victim, ev.kind, dmg))

        return applied

    def resolve_pairs(self, pairs: list, now_ms: float, params, rng) -> list:
        """Process + apply every pair from one physics step; returns applied events in order."""
        applied = []
        for pair in pairs:
            raw = self.process_collision(pair, now_ms, params, rng)
            applied.extend(self.apply_damage_events(raw))
        return applied
