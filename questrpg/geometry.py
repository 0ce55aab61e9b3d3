"""Plain 2D vectors and rectangles, with the two hit tests the game relies on."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Vec2:
    """A point or offset on the screen, in pixels."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def shifted(self, dx: float = 0.0, dy: float = 0.0) -> Vec2:
        """Return this point moved by ``dx`` and ``dy``."""
        return Vec2(self.x + dx, self.y + dy)


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its top-left corner and its size."""

    left: float
    top: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height

    @property
    def position(self) -> Vec2:
        return Vec2(self.left, self.top)

    def moved_to(self, position: Vec2) -> Rect:
        """Return a rectangle of the same size whose corner is at ``position``."""
        return Rect(position.x, position.y, self.width, self.height)


def is_collision(pos: Vec2, rect: Rect) -> bool:
    """Whether ``pos`` lies in ``rect``, edges included (used for mouse clicks)."""
    return rect.left <= pos.x <= rect.right and rect.top <= pos.y <= rect.bottom


def is_hit(pos: Vec2, rect: Rect) -> bool:
    """Whether ``pos`` lies strictly inside ``rect`` (used for projectile hits)."""
    return rect.left < pos.x < rect.right and rect.top < pos.y < rect.bottom