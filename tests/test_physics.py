"""
Tests for warrior motion, wall resolution and body-body collisions.
"""
import math

import pytest

from config import WARRIOR_RADIUS, WEAPON_OFFSET
from game.systems import physics


class TestWarriorEntity:
    def test_spawn_rotation_staggered_by_id(self, build):
        w = build.warrior(warrior_id=1, px=100, py=100)
        assert w.rotation_rad == pytest.approx(math.pi / 2)
        assert w.weapon_x == pytest.approx(100)
        assert w.weapon_y == pytest.approx(100 + WEAPON_OFFSET)

    def test_unknown_color_rejected(self):
        from game.entities.warrior import Warrior
        with pytest.raises(ValueError):
            Warrior(0, "purple", True, 0, 0, 1, 0, 1)

    def test_take_damage_starts_dying(self, build):
        w = build.warrior()
        assert w.take_damage(60) is False
        assert w.take_damage(60) is True
        assert w.hp == 0
        assert w.dying and w.alive
        assert not w.is_active
        # Further hits are ignored once dying.
        assert w.take_damage(10) is False
        assert w.hp == 0

    def test_fade_removes_warrior(self, build):
        w = build.warrior()
        w.take_damage(200)
        w.update_fade(0.2, 3.0)
        assert w.alive
        assert w.alpha == pytest.approx(0.4)
        w.update_fade(0.2, 3.0)
        assert not w.alive
        assert w.alpha == 0.0

    def test_rotation_rolls_with_speed(self, build):
        w = build.warrior(rotation=0.0, speed=220)
        w.advance_rotation(0.1)
        assert w.rotation_rad == pytest.approx(220 / WARRIOR_RADIUS * 0.1)


class TestMotion:
    def test_integrate_moves_by_velocity(self, build):
        w = build.warrior(px=100, py=100, vx=300, vy=-120, speed=math.hypot(300, 120))
        physics.integrate_motion([w], 0.5)
        assert (w.px, w.py) == pytest.approx((250, 40))

    def test_dying_warriors_are_frozen(self, build):
        w = build.warrior(px=100, py=100)
        w.take_damage(500)
        physics.integrate_motion([w], 1.0)
        physics.advance_rotation([w], 1.0)
        assert (w.px, w.py) == (100, 100)

    def test_walls_keep_speed(self, build, arena):
        w = build.warrior(px=5, py=490, vx=-200, vy=150, speed=250)
        physics.resolve_walls([w], arena)
        assert arena.contains_circle(w.px, w.py, WARRIOR_RADIUS)
        assert build.speed_of(w) == pytest.approx(250)
        assert w.vx > 0 and w.vy < 0


class TestCollisions:
    def test_head_on_swap(self, build):
        a = build.warrior(0, px=100, py=100, vx=300, vy=0, speed=300)
        b = build.warrior(1, px=130, py=100, vx=-300, vy=0, speed=300)
        pairs = physics.resolve_collisions([a, b])

        assert len(pairs) == 1
        assert pairs[0].a is a and pairs[0].b is b
        assert math.hypot(b.px - a.px, b.py - a.py) == pytest.approx(2 * WARRIOR_RADIUS)
        assert a.vx == pytest.approx(-300)
        assert b.vx == pytest.approx(300)

    def test_speed_restored_after_glancing_hit(self, build):
        a = build.warrior(0, px=100, py=100, vx=378, vy=0)
        b = build.warrior(1, px=130, py=120, vx=0, vy=-378)
        physics.resolve_collisions([a, b])
        assert build.speed_of(a) == pytest.approx(378)
        assert build.speed_of(b) == pytest.approx(378)

    def test_separated_pair_after_resolution(self, build):
        for offset in (1.0, 10.0, 25.0, 43.0):
            a = build.warrior(0, px=200, py=200)
            b = build.warrior(1, px=200 + offset * 0.6, py=200 + offset * 0.8, vx=-378)
            physics.resolve_collisions([a, b])
            assert math.hypot(b.px - a.px, b.py - a.py) >= 2 * WARRIOR_RADIUS - 1e-9

    def test_no_pair_when_apart(self, build):
        a = build.warrior(0, px=100, py=100)
        b = build.warrior(1, px=144, py=100)
        assert physics.resolve_collisions([a, b]) == []

    def test_coincident_centers_stay_finite(self, build):
        a = build.warrior(0, px=100, py=100, vx=378)
        b = build.warrior(1, px=100, py=100, vx=-378)
        pairs = physics.resolve_collisions([a, b])
        assert len(pairs) == 1
        for w in (a, b):
            assert all(math.isfinite(v) for v in (w.px, w.py, w.vx, w.vy))

    def test_coincident_centers_separate(self, build):
        # Same spot, same velocity: must still be pushed apart and keep speed.
        a = build.warrior(0, px=100, py=100, vx=0, vy=378)
        b = build.warrior(1, px=100, py=100, vx=0, vy=378)
        physics.resolve_collisions([a, b])
        assert math.hypot(b.px - a.px, b.py - a.py) == pytest.approx(2 * WARRIOR_RADIUS, abs=0.01)
        assert build.speed_of(a) == pytest.approx(378)
        assert build.speed_of(b) == pytest.approx(378)

    def test_body_stopped_by_exchange_keeps_speed(self, build):
        # A's velocity lies on the normal, B's is perpendicular to it:
        # the exchange leaves A with a zero vector.
        a = build.warrior(0, px=100, py=100, vx=300, vy=0, speed=300)
        b = build.warrior(1, px=130, py=100, vx=0, vy=300, speed=300)
        physics.resolve_collisions([a, b])
        assert build.speed_of(a) == pytest.approx(300)
        assert build.speed_of(b) == pytest.approx(300)
        # A rolls back away from B.
        assert a.vx < 0

    def test_speed_holds_every_tick_of_a_round(self):
        from game.round import RoundConfig, RoundDriver

        for seed in (3, 42, 1234):
            driver = RoundDriver()
            driver.start_round(RoundConfig(mode=4, win_probability=0.5, seed=seed))
            for _ in range(900):
                if not driver.step():
                    break
                for w in driver.warriors:
                    if w.is_active:
                        assert math.hypot(w.vx, w.vy) == pytest.approx(w.speed)

    def test_dying_warriors_skipped(self, build):
        a = build.warrior(0, px=100, py=100)
        b = build.warrior(1, px=110, py=100)
        b.take_damage(500)
        assert physics.resolve_collisions([a, b]) == []
