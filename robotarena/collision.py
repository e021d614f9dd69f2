"""Rectangle collision detection using the separating axis theorem."""

from __future__ import annotations

from dataclasses import dataclass

from .rectangle import Rectangle
from .vector import Vector


@dataclass(frozen=True)
class Projection:
    """The interval covered by a shape projected onto an axis."""

    min: float
    max: float

    def overlap(self, other: Projection) -> bool:
        """Whether the two intervals overlap."""
        return not (other.min > self.max or self.min > other.max)


def project(rect: Rectangle, axis: Vector) -> Projection:
    """Project the corners of ``rect`` onto ``axis``."""
    values = [axis.dot(vertex) for vertex in rect.vertices()]
    return Projection(min(values), max(values))


def get_axes(rect: Rectangle) -> list[Vector]:
    """The two edge normals of a rectangle that need testing."""
    axis0 = Vector.polar(rect.rotation)
    return [axis0, axis0.perp()]


def collides(rect1: Rectangle, rect2: Rectangle) -> bool:
    """Whether two rectangles overlap."""
    for axis in (*get_axes(rect1), *get_axes(rect2)):
        if not project(rect1, axis).overlap(project(rect2, axis)):
            return False
    return True