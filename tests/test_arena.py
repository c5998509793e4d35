"""
Tests for arena geometry and wall bounces.
"""
import math

import pytest

from game.arena import Arena

R = 22.0


class TestArenaBounds:
    def test_edges_and_center(self):
        a = Arena(20, 30, 500)
        assert (a.left, a.right, a.top, a.bottom) == (20, 520, 30, 530)
        assert (a.cx, a.cy) == (270, 280)

    def test_contains_circle(self, arena):
        assert arena.contains_circle(250, 250, R)
        assert arena.contains_circle(R, R, R)
        assert not arena.contains_circle(R - 1, 250, R)
        assert not arena.contains_circle(250, 500 - R + 1, R)

    def test_clamp(self, arena):
        assert arena.clamp(-10, 600, margin=5) == (5, 495)
        assert arena.clamp(100, 100) == (100, 100)


class TestBounceCircle:
    def test_left_wall(self, arena):
        px, py, vx, vy = arena.bounce_circle(10, 250, -300, 40, R)
        assert px == R
        assert vx == 300
        assert (py, vy) == (250, 40)

    def test_right_and_bottom_walls(self, arena):
        px, py, vx, vy = arena.bounce_circle(495, 490, 300, 300, R)
        assert (px, py) == (500 - R, 500 - R)
        assert (vx, vy) == (-300, -300)

    def test_inward_velocity_kept_inward(self, arena):
        # Already moving away from the wall: only the position is corrected.
        px, _, vx, _ = arena.bounce_circle(5, 250, 120, 0, R)
        assert px == R
        assert vx == 120

    def test_speed_magnitude_preserved(self, arena):
        vx0, vy0 = -250.0, 280.0
        _, _, vx, vy = arena.bounce_circle(-3, 499, vx0, vy0, R)
        assert math.hypot(vx, vy) == pytest.approx(math.hypot(vx0, vy0))

    def test_idempotent(self, arena):
        once = arena.bounce_circle(-40, 520, -100, 200, R)
        twice = arena.bounce_circle(*once, R)
        assert once == twice

    def test_inside_untouched(self, arena):
        assert arena.bounce_circle(250, 250, 10, -10, R) == (250, 250, 10, -10)
