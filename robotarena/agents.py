"""Built-in agents that steer robots."""

from __future__ import annotations

import math
import random

from .mathutil import ang_diff_radians, clamp, lerp, wrap_radians
from .robot import Action, Agent, Robot
from .vector import Vector


class Follower(Agent):
    """Drives toward the closest visible robot and keeps a fixed distance."""

    def __init__(self, target_distance: float, k_distance: float, k_angle: float) -> None:
        self.target_distance = target_distance
        self.k_distance = k_distance
        self.k_angle = k_angle

    def update(self, robot: Robot) -> Action:
        target = robot.scan_closest()
        if target is None:
            # Nothing visible: turn on the spot to look around.
            w = -robot.rules.scan_angle / robot.rules.time_step
            return Action(0.0, w, 0.0, False)

        delta = target.position - robot.position
        distance_error = delta.magnitude() - self.target_distance
        angle_error = ang_diff_radians(delta.angle(), robot.rotation)
        return Action(
            self.k_distance * distance_error, self.k_angle * angle_error, 0.0, False
        )


class Hunter(Agent):
    """Circles the closest visible robot at a fixed distance and shoots at it."""

    def __init__(self, target_distance: float, k_perp: float, k_straight: float) -> None:
        self.target_distance = target_distance
        self.k_perp = k_perp
        self.k_straight = k_straight

    def update(self, robot: Robot) -> Action:
        target = robot.scan_closest()
        position = robot.position
        rotation = robot.rotation

        if target is None:
            # Head for the centre of the arena and sweep the turret.
            delta = robot.rules.arena_size / 2.0 - position
            turret_angle = robot.turret_angle + robot.rules.scan_angle
        else:
            delta = target.position - position
            turret_angle = delta.angle() - rotation

        w_toward = self.turn_toward(delta.angle(), rotation)
        w_perp = self.turn_perpendicular(delta.angle(), rotation)

        # -1 when on top of the target, 0 at the target distance, 1 far away.
        distance_error = clamp(
            delta.magnitude() / self.target_distance - 1.0, -1.0, 1.0
        )
        w = lerp(w_perp, w_toward, distance_error)

        turret_error = ang_diff_radians(turret_angle, robot.turret_angle)
        shooting = abs(turret_error) < 0.01 and target is not None
        return Action(robot.rules.v_max, w, turret_angle, shooting)

    def turn_perpendicular(self, angle: float, rotation: float) -> float:
        """Turn rate that brings ``rotation`` perpendicular to ``angle``."""
        error1 = ang_diff_radians(angle + math.pi / 2, rotation)
        error2 = ang_diff_radians(angle - math.pi / 2, rotation)
        error = error1 if abs(error1) < abs(error2) else error2
        return error * self.k_perp

    def turn_toward(self, angle: float, rotation: float) -> float:
        """Turn rate that brings ``rotation`` toward ``angle``."""
        return ang_diff_radians(angle, rotation) * self.k_straight


class Orbiter(Agent):
    """Drives in a circle with constant speed and turn rate."""

    def __init__(self, v: float, w: float) -> None:
        self.v = v
        self.w = w

    def update(self, robot: Robot) -> Action:
        return Action(self.v, self.w, 0.0, False)


class Simon(Agent):
    """Heads slowly for the arena centre, sweeping and firing all the time."""

    def __init__(self, target_distance: float, k_perp: float, k_straight: float) -> None:
        self.target_distance = target_distance
        self.k_perp = k_perp
        self.k_straight = k_straight

    def update(self, robot: Robot) -> Action:
        delta = robot.rules.arena_size / 2.0 - robot.position
        turret_angle = robot.turret_angle + robot.rules.scan_angle
        return Action(
            robot.rules.v_max / 4,
            self.turn_toward(delta.angle(), robot.rotation),
            turret_angle,
            True,
        )

    def turn_toward(self, angle: float, rotation: float) -> float:
        """Turn rate that brings ``rotation`` toward ``angle``."""
        return ang_diff_radians(angle, rotation) * self.k_straight


class Sniper(Agent):
    """Stands still, aims at the closest visible robot and fires when on target."""

    def update(self, robot: Robot) -> Action:
        target = robot.scan_closest()
        if target is None:
            turret_angle = wrap_radians(robot.turret_angle + robot.rules.scan_angle)
            return Action(0.0, 0.0, turret_angle, False)

        delta: Vector = target.position - robot.position
        turret_angle = wrap_radians(delta.angle() - robot.rotation)
        turret_error = ang_diff_radians(turret_angle, robot.turret_angle)
        return Action(0.0, 0.0, turret_angle, abs(turret_error) < 0.01)


class Wanderer(Agent):
    """Drives at constant speed with a randomly drifting turn rate."""

    def __init__(self, delta_w: float, v: float, seed: int = 0) -> None:
        self.delta_w = delta_w
        self.v = v
        self.w = 0.0
        self._random = random.Random(seed)

    def update(self, robot: Robot) -> Action:
        self.w += self._random.gauss(0.0, self.delta_w)
        # Limit to what the robot can do so the integral does not wind up.
        self.w = clamp(self.w, -robot.rules.w_max, robot.rules.w_max)
        return Action(self.v, self.w, 0.0, False)