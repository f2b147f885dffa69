"""Angles stored in radians, with the trigonometric helpers used by the model."""

from __future__ import annotations

import math
from dataclasses import dataclass

_DEGREES_TO_RADIANS = math.pi / 180.0
_RADIANS_TO_DEGREES = 1.0 / _DEGREES_TO_RADIANS


@dataclass(frozen=True)
class Angle:
    """A plane angle, kept in radians."""

    radians: float = 0.0

    @classmethod
    def from_degrees(cls, degrees: float) -> Angle:
        return cls(degrees * _DEGREES_TO_RADIANS)

    @classmethod
    def from_radians(cls, radians: float) -> Angle:
        return cls(radians)

    def to_degrees(self) -> float:
        return self.radians * _RADIANS_TO_DEGREES

    def to_radians(self) -> float:
        return self.radians

    def __add__(self, other: Angle) -> Angle:
        if not isinstance(other, Angle):
            return NotImplemented
        return Angle(self.radians + other.radians)

    def __sub__(self, other: Angle) -> Angle:
        if not isinstance(other, Angle):
            return NotImplemented
        return Angle(self.radians - other.radians)

    def __mul__(self, factor: float) -> Angle:
        if isinstance(factor, Angle):
            return NotImplemented
        return Angle(self.radians * factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: float) -> Angle:
        if isinstance(divisor, Angle):
            return NotImplemented
        return Angle(self.radians / divisor)


def sin(angle: Angle) -> float:
    return math.sin(angle.radians)


def cos(angle: Angle) -> float:
    return math.cos(angle.radians)


def atan2(y: float, x: float) -> Angle:
    return Angle(math.atan2(y, x))


def acos(value: float) -> Angle:
    """Arc cosine; outside [-1, 1] the result is NaN rather than an error."""
    if not -1.0 <= value <= 1.0:
        return Angle(math.nan)
    return Angle(math.acos(value))