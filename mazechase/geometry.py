"""Rectangles, distances and angles shared by the game code."""

from __future__ import annotations

import math
from dataclasses import dataclass

WIN_WIDTH = 608
WIN_HEIGHT = 608
WIN_START_X = 50
WIN_START_Y = 50

TILE_SIZE = 16
TILES_X = WIN_WIDTH // TILE_SIZE
TILES_Y = WIN_HEIGHT // TILE_SIZE

PI = math.pi
PI2 = math.pi * 2
PI8 = math.pi / 8
PI16 = math.pi / 16


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle; right and bottom are exclusive."""

    left: int
    top: int
    right: int
    bottom: int

    def width(self) -> int:
        return self.right - self.left

    def height(self) -> int:
        return self.bottom - self.top

    def offset(self, dx: int, dy: int) -> Rect:
        """Return the rectangle moved by (dx, dy)."""
        return Rect(self.left + dx, self.top + dy, self.right + dx, self.bottom + dy)

    def intersection(self, other: Rect) -> Rect | None:
        """Return the overlapping area, or None if the rectangles do not overlap."""
        left = max(self.left, other.left)
        top = max(self.top, other.top)
        right = min(self.right, other.right)
        bottom = min(self.bottom, other.bottom)
        if left >= right or top >= bottom:
            return None
        return Rect(left, top, right, bottom)

    def contains(self, x: float, y: float) -> bool:
        """Whether the point lies inside; left and top edges are inclusive."""
        return self.left <= x < self.right and self.top <= y < self.bottom


def _half(value: int) -> int:
    # Integer halving that truncates toward zero.
    return int(value / 2)


def rect_make(x: float, y: float, width: int, height: int) -> Rect:
    """A rectangle with its top-left corner at (x, y)."""
    x, y, width, height = int(x), int(y), int(width), int(height)
    return Rect(x, y, x + width, y + height)


def rect_make_center(x: float, y: float, width: int, height: int) -> Rect:
    """A rectangle centred on (x, y)."""
    x, y, width, height = int(x), int(y), int(width), int(height)
    half_w, half_h = _half(width), _half(height)
    return Rect(x - half_w, y - half_h, x + half_w, y + half_h)


def resolve_collision(hold: Rect, move: Rect) -> Rect | None:
    """Push ``move`` out of ``hold``.

    Returns None when the rectangles do not overlap, otherwise the moved
    rectangle, shifted along the axis of the shallower overlap.
    """
    inter = hold.intersection(move)
    if inter is None:
        return None
    inter_w = inter.width()
    inter_h = inter.height()
    if inter_w > inter_h:
        if inter.top == hold.top:
            return move.offset(0, -inter_h)
        if inter.bottom == hold.bottom:
            return move.offset(0, inter_h)
    else:
        if inter.left == hold.left:
            return move.offset(-inter_w, 0)
        if inter.right == hold.right:
            return move.offset(inter_w, 0)
    return move


def distance(x1: float, y1: float, x2: float, y2: float) -> float:
    """Euclidean distance between two points."""
    return math.hypot(x2 - x1, y2 - y1)


def angle(x1: float, y1: float, x2: float, y2: float) -> float:
    """Angle from the first point to the second in [0, 2*pi).

    Screen y grows downward, so an angle of pi/2 points up the screen;
    a step along the angle is (cos(a), -sin(a)).
    """
    result = math.atan2(-(y2 - y1), x2 - x1)
    if result < 0:
        result += PI2
    if result >= PI2:
        result -= PI2
    return result