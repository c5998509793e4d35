"""
Physics for rolling warriors: motion, wall bounces and body-body overlap resolution.

All functions skip warriors that are dead or fading out.
"""
import math

from config import WARRIOR_RADIUS
from game.sim.contracts import CollisionPair

TWO_R = WARRIOR_RADIUS * 2

# Used as the center distance when two bodies sit exactly on top of each other.
MIN_SEPARATION_DIST = 0.001


def dist_sq(ax: float, ay: float, bx: float, by: float) -> float:
    dx = ax - bx
    dy = ay - by
    return dx * dx + dy * dy


def dist(ax: float, ay: float, bx: float, by: float) -> float:
    return math.sqrt(dist_sq(ax, ay, bx, by))


def _active(warriors: list) -> list:
    return [w for w in warriors if w.alive and not w.dying]


def advance_rotation(warriors: list, dt: float):
    """Spin every active warrior. Run before integrate_motion so the weapon uses the new angle."""
    for w in _active(warriors):
        w.advance_rotation(dt)


def integrate_motion(warriors: list, dt: float):
    """Move all warriors by their velocity (dt in seconds)."""
    for w in _active(warriors):
        w.px += w.vx * dt
        w.py += w.vy * dt
        w.update_weapon_pos()


def resolve_walls(warriors: list, arena):
    """Bounce warriors off arena walls."""
    for w in _active(warriors):
        w.px, w.py, w.vx, w.vy = arena.bounce_circle(w.px, w.py, w.vx, w.vy, WARRIOR_RADIUS)
        w.normalise()
        w.update_weapon_pos()


def resolve_collisions(warriors: list) -> list:
    """
    Detect and resolve body-body overlaps between warriors.

    Returns the list of colliding pairs for the combat system.
    """
    pairs = []
    alive = _active(warriors)
    min_dist_sq = TWO_R * TWO_R

    for i in range(len(alive)):
        a = alive[i]
        for j in range(i + 1, len(alive)):
            b = alive[j]

            dx = b.px - a.px
            dy = b.py - a.py
            d2 = dx * dx + dy * dy
            if d2 >= min_dist_sq:
                continue

            pairs.append(CollisionPair(a, b))

            if d2 > 0.0:
                d = math.sqrt(d2)
                nx = dx / d
                ny = dy / d
            else:
                # Coincident centers: fixed normal so the pair still separates.
                d = MIN_SEPARATION_DIST
                nx, ny = 1.0, 0.0
            overlap = TWO_R - d

            # Push apart equally along the normal.
            half = overlap * 0.5
            a.px -= nx * half
            a.py -= ny * half
            b.px += nx * half
            b.py += ny * half

            # Swap the normal component of the relative velocity; tangential untouched.
            dot = (a.vx - b.vx) * nx + (a.vy - b.vy) * ny
            a.vx -= dot * nx
            a.vy -= dot * ny
            b.vx += dot * nx
            b.vy += dot * ny

            # A body stopped dead by the exchange rolls away along the normal.
            a.normalise(-nx, -ny)
            b.normalise(nx, ny)
            a.update_weapon_pos()
            b.update_weapon_pos()

    return pairs
