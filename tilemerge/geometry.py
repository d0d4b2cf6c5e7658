"""Rectangles, angles and distances on the screen plane."""

from __future__ import annotations

import math
from dataclasses import dataclass

DEG_TO_RAD = 0.017453
PI = 3.1415902654
PI2 = PI * 2
FLOAT_EPSILON = 0.001


def _half(value: int) -> int:
    """Halve an integer, truncating toward zero."""
    return int(value / 2)


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its edges."""

    left: int
    top: int
    right: int
    bottom: int

    @property
    def width(self) -> int:
        return self.right - self.left

    @property
    def height(self) -> int:
        return self.bottom - self.top


def rect_make(x: int, y: int, width: int, height: int) -> Rect:
    """Build a rectangle from its top-left corner and size."""
    return Rect(x, y, x + width, y + height)


def rect_make_center(x: int, y: int, width: int, height: int) -> Rect:
    """Build a rectangle centred on (x, y)."""
    half_w = _half(width)
    half_h = _half(height)
    return Rect(x - half_w, y - half_h, x + half_w, y + half_h)


def get_angle(start_x: float, start_y: float, end_x: float, end_y: float) -> float:
    """Angle in radians from the start point to the end point.

    The y axis points down, so a point below the start gives an angle
    past PI.
    """
    dx = end_x - start_x
    dy = end_y - start_y
    distance = math.hypot(dx, dy)
    if distance == 0:
        raise ValueError("angle between coincident points is undefined")
    angle = math.acos(max(-1.0, min(1.0, dx / distance)))
    if dy > 0:
        angle = PI2 - angle
    return angle


def get_distance(start_x: float, start_y: float, end_x: float, end_y: float) -> float:
    """Euclidean distance between two points."""
    return math.hypot(end_x - start_x, end_y - start_y)