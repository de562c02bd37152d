"""Two-dimensional float vectors and rectangle helpers."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Tuple, Union

FLT_EPSILON = 1.1920929e-07

Number = Union[int, float]


@dataclass(frozen=True)
class Vec2:
    """An immutable 2D vector of floats."""

    x: float = 0.0
    y: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __add__(self, other: object) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: object) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, other: object) -> Vec2:
        if isinstance(other, Vec2):
            return Vec2(self.x * other.x, self.y * other.y)
        if isinstance(other, (int, float)):
            return Vec2(self.x * other, self.y * other)
        return NotImplemented

    def __rmul__(self, other: object) -> Vec2:
        if isinstance(other, (int, float)):
            return Vec2(self.x * other, self.y * other)
        return NotImplemented

    def __truediv__(self, other: object) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        if other.x == 0.0 or other.y == 0.0:
            raise ZeroDivisionError("vector division by a zero component")
        return Vec2(self.x / other.x, self.y / other.y)

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def normalized(self) -> Vec2:
        """Return the unit vector; a near-zero vector is returned unchanged."""
        length = self.length()
        if length < FLT_EPSILON:
            return self
        return Vec2(self.x / length, self.y / length)

    def dot(self, other: Vec2) -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, other: Vec2) -> float:
        """The z component of the 3D cross product."""
        return self.x * other.y - self.y * other.x


def rect_make(pos: Vec2, size: Vec2) -> Tuple[int, int, int, int]:
    """Integer (left, top, right, bottom) of a rectangle centred on ``pos``."""
    half_w = size.x / 2
    half_h = size.y / 2
    return (
        int(pos.x - half_w),
        int(pos.y - half_h),
        int(pos.x + half_w),
        int(pos.y + half_h),
    )