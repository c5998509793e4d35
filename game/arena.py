"""
Arena: the static square the warriors fight in.
"""
from config import ARENA_SIZE


class Arena:
    """Axis-aligned square, fixed for the duration of a round."""

    __slots__ = ("_x", "_y", "_size")

    def __init__(self, x: float = 0.0, y: float = 0.0, size: float = ARENA_SIZE):
        self._x = float(x)
        self._y = float(y)
        self._size = float(size)

    @property
    def x(self) -> float:
        return self._x

    @property
    def y(self) -> float:
        return self._y

    @property
    def size(self) -> float:
        return self._size

    @property
    def left(self) -> float:
        return self._x

    @property
    def right(self) -> float:
        return self._x + self._size

    @property
    def top(self) -> float:
        return self._y

    @property
    def bottom(self) -> float:
        return self._y + self._size

    @property
    def cx(self) -> float:
        return self._x + self._size / 2

    @property
    def cy(self) -> float:
        return self._y + self._size / 2

    def bounce_circle(self, px: float, py: float, vx: float, vy: float, radius: float):
        """
        Keep a circle inside the walls.

        Returns (px, py, vx, vy). On any axis where the circle crossed a wall it is
        pushed back flush and its velocity is pointed inward; magnitude is unchanged.
        """
        if px - radius < self.left:
            px = self.left + radius
            vx = abs(vx)
        elif px + radius > self.right:
            px = self.right - radius
            vx = -abs(vx)

        if py - radius < self.top:
            py = self.top + radius
            vy = abs(vy)
        elif py + radius > self.bottom:
            py = self.bottom - radius
            vy = -abs(vy)

        return px, py, vx, vy

    def clamp(self, px: float, py: float, margin: float = 0.0) -> tuple[float, float]:
        """Clamp a point inside the arena with optional margin."""
        return (
            max(self.left + margin, min(self.right - margin, px)),
            max(self.top + margin, min(self.bottom - margin, py)),
        )

    def contains_circle(self, px: float, py: float, radius: float) -> bool:
        return (
            px - radius >= self.left
            and px + radius <= self.right
            and py - radius >= self.top
            and py + radius <= self.bottom
        )
