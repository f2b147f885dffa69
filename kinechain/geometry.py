"""Plane vectors and axis-aligned rectangles."""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class Vec2:
    """A two-dimensional vector or point."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def __mul__(self, factor: float) -> Vec2:
        return Vec2(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: float) -> Vec2:
        return Vec2(self.x / divisor, self.y / divisor)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def length(self) -> float:
        return math.hypot(self.x, self.y)


@dataclass(frozen=True)
class Rectangle:
    """An axis-aligned rectangle given by its lower-left corner and size."""

    lower_left_corner: Vec2 = Vec2()
    width: float = 0.0
    height: float = 0.0

    @classmethod
    def from_corners(cls, corner1: Vec2, corner2: Vec2) -> Rectangle:
        """Build the rectangle spanned by two opposite corners, in any order."""
        lower_left = Vec2(min(corner1.x, corner2.x), min(corner1.y, corner2.y))
        return cls(
            lower_left,
            max(corner1.x, corner2.x) - lower_left.x,
            max(corner1.y, corner2.y) - lower_left.y,
        )

    def upper_left(self) -> Vec2:
        return Vec2(self.lower_left_corner.x, self.lower_left_corner.y + self.height)

    def upper_right(self) -> Vec2:
        return Vec2(
            self.lower_left_corner.x + self.width,
            self.lower_left_corner.y + self.height,
        )

    def lower_left(self) -> Vec2:
        return self.lower_left_corner

    def lower_right(self) -> Vec2:
        return Vec2(self.lower_left_corner.x + self.width, self.lower_left_corner.y)