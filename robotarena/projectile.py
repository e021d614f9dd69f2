"""Projectiles fired by robots."""

from __future__ import annotations

from .rectangle import Rectangle
from .rules import Rules
from .vector import Vector


class Projectile:
    """A projectile flying in a straight line at constant speed."""

    def __init__(
        self, rules: Rules, position: Vector, direction: float, owner: str
    ) -> None:
        self.rules = rules
        self.body = Rectangle(rules.projectile_size, position, direction)
        self.owner = owner

    def update(self) -> None:
        """Move forward by one time step."""
        self.body.move(
            Vector.polar(
                self.body.rotation, self.rules.projectile_speed * self.rules.time_step
            )
        )

    def __repr__(self) -> str:
        return f"Projectile(owner={self.owner!r}, body={self.body!r})"