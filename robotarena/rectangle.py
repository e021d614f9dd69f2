"""Rotated rectangles used as bodies of robots and projectiles."""

from __future__ import annotations

from .vector import Vector


class Rectangle:
    """A rectangle with a size, a centre position and a rotation."""

    def __init__(
        self,
        size: Vector,
        position: Vector = Vector(0, 0),
        rotation: float = 0.0,
    ) -> None:
        self.size = size
        # The origin is fixed at construction and not updated on resize.
        self.origin = Vector(size.x / 2, size.y / 2)
        self.position = position
        self.rotation = rotation

    def move(self, delta: Vector) -> Rectangle:
        """Translate by ``delta``."""
        self.position = self.position + delta
        return self

    def rotate(self, delta: float) -> Rectangle:
        """Turn by ``delta`` radians."""
        self.rotation = self.rotation + delta
        return self

    def resize(self, factor: float | Vector) -> Rectangle:
        """Scale the size by a number or component-wise by a vector."""
        if isinstance(factor, Vector):
            self.size = Vector(self.size.x * factor.x, self.size.y * factor.y)
        else:
            self.size = Vector(self.size.x * factor, self.size.y * factor)
        return self

    def vertices(self) -> list[Vector]:
        """Corners in world coordinates: top-left, top-right, bottom-right, bottom-left."""
        w, h = self.size.x, self.size.y
        corners = (Vector(0, 0), Vector(w, 0), Vector(w, h), Vector(0, h))
        return [self.to_global(corner - self.origin) for corner in corners]

    def to_global(self, vec: Vector) -> Vector:
        """Convert a vector from local to world coordinates."""
        return vec.rotated(self.rotation) + self.position

    def __str__(self) -> str:
        return f"Rectangle({self.size}, {self.position}, {self.rotation:g})"

    def __repr__(self) -> str:
        return (
            f"Rectangle(size={self.size!r}, position={self.position!r}, "
            f"rotation={self.rotation!r})"
        )