"""Two-dimensional vectors."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True, slots=True)
class Vector:
    """An immutable 2D vector with the usual arithmetic."""

    x: float = 0.0
    y: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __add__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vector:
        if isinstance(scalar, Vector):
            return NotImplemented
        return Vector(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vector:
        if isinstance(scalar, Vector):
            return NotImplemented
        return Vector(self.x / scalar, self.y / scalar)

    def __neg__(self) -> Vector:
        return Vector(-self.x, -self.y)

    def __str__(self) -> str:
        return f"({self.x:g}, {self.y:g})"

    def dot(self, other: Vector) -> float:
        """Dot product with another vector."""
        return self.x * other.x + self.y * other.y

    def perp(self, clockwise: bool = False) -> Vector:
        """A vector perpendicular to this one, of the same length."""
        if clockwise:
            return Vector(self.y, -self.x)
        return Vector(-self.y, self.x)

    def magnitude(self) -> float:
        """Euclidean length."""
        return math.hypot(self.x, self.y)

    def angle(self) -> float:
        """Angle to the x axis in radians."""
        return math.atan2(self.y, self.x)

    def rotated(self, angle: float) -> Vector:
        """This vector rotated by ``angle`` radians."""
        c = math.cos(angle)
        s = math.sin(angle)
        return Vector(self.x * c - self.y * s, self.x * s + self.y * c)

    @classmethod
    def polar(cls, angle: float, magnitude: float = 1.0) -> Vector:
        """Vector from polar coordinates."""
        return cls(magnitude * math.cos(angle), magnitude * math.sin(angle))

    @classmethod
    def zero(cls) -> Vector:
        return cls(0, 0)

    @classmethod
    def one(cls) -> Vector:
        return cls(1, 1)

    @classmethod
    def unit_x(cls) -> Vector:
        return cls(1, 0)

    @classmethod
    def unit_y(cls) -> Vector:
        return cls(0, 1)


def dot(a: Vector, b: Vector) -> float:
    """Dot product of two vectors."""
    return a.dot(b)