"""Robots, the agents that steer them and the actions agents choose."""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from dataclasses import dataclass

from .mathutil import ang_diff_radians, clamp
from .rectangle import Rectangle
from .rules import Rules
from .vector import Vector


@dataclass(frozen=True)
class Action:
    """What an agent wants its robot to do during one step."""

    v: float = 0.0
    w: float = 0.0
    turret_angle: float = 0.0
    shooting: bool = False


class Agent(ABC):
    """Controls a robot by choosing an action each step."""

    @abstractmethod
    def update(self, robot: Robot) -> Action:
        """Choose the action for ``robot``."""


class Robot:
    """A robot in the arena, steered by an agent."""

    def __init__(self, rules: Rules, agent: Agent | None = None) -> None:
        self.rules = rules
        self.body = Rectangle(rules.robot_size)
        self.health = rules.max_health
        self.agent = agent
        self.turret_angle = 0.0
        self.cooldown = 0.0
        self.shooting = False
        self.scan_targets: list[Robot] = []

    @property
    def position(self) -> Vector:
        return self.body.position

    @position.setter
    def position(self, value: Vector) -> None:
        self.body.position = value

    @property
    def rotation(self) -> float:
        return self.body.rotation

    @rotation.setter
    def rotation(self, value: float) -> None:
        self.body.rotation = value

    def update(self) -> None:
        """Ask the agent for an action and apply it within the rules."""
        if self.agent is None:
            raise RuntimeError("No Agent was set for this Robot.")
        action = self.agent.update(self)
        rules = self.rules

        v = clamp(action.v, rules.v_min, rules.v_max)
        w = clamp(action.w, -rules.w_max, rules.w_max)

        self.body.move(Vector.polar(self.body.rotation, v * rules.time_step))
        self.body.rotate(w * rules.time_step)

        turret_limit = rules.turret_w_max * rules.time_step
        self.turret_angle += clamp(
            ang_diff_radians(action.turret_angle, self.turret_angle),
            -turret_limit,
            turret_limit,
        )

        self.cooldown -= rules.time_step
        if self.cooldown < 0 and action.shooting:
            self.cooldown = rules.projectile_cooldown
            self.shooting = True

    def scan_all(self) -> list[Robot]:
        """All robots currently visible."""
        return list(self.scan_targets)

    def scan_closest(self) -> Robot | None:
        """The nearest visible robot, or None."""
        if not self.scan_targets:
            return None
        here = self.body.position
        return min(
            self.scan_targets, key=lambda target: (target.position - here).magnitude()
        )

    def scan_any(self) -> Robot | None:
        """Some visible robot, or None."""
        return self.scan_targets[0] if self.scan_targets else None

    def on_collision(self) -> None:
        """Take collision damage."""
        self.take_damage(self.rules.collision_damage)

    def take_damage(self, damage: float) -> float:
        """Lose ``damage`` health and return what is left."""
        self.health -= damage
        return self.health

    def _snapshot(self) -> Robot:
        clone = copy.copy(self)
        clone.body = copy.copy(self.body)
        clone.scan_targets = list(self.scan_targets)
        return clone

    def __str__(self) -> str:
        return f"<Robot at {self.body.position}>"