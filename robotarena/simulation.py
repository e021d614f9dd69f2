"""The simulation that moves robots and projectiles and resolves events."""

from __future__ import annotations

import math
import random

from .collision import collides
from .mathutil import ang_diff_radians, wrap_radians
from .projectile import Projectile
from .robot import Agent, Robot
from .rules import Rules
from .signals import Signal
from .vector import Vector

_SPAWN_SAFETY = 0.1


class Simulation:
    """Runs the game world one time step at a time.

    Events within a step are applied by kind (scanning, moving, shooting,
    collisions, bounds, hits) so that their order within a kind never matters.
    """

    def __init__(self, rules: Rules | None = None, seed: int = 0) -> None:
        self.rules = rules if rules is not None else Rules()
        self._players: dict[str, Robot] = {}
        self._projectiles: list[Projectile] = []
        self._runtime = 0.0
        self._random = random.Random(seed)

        self.death_signal = Signal()
        self.new_player_signal = Signal()
        self.collision_signal = Signal()
        self.hit_signal = Signal()
        self.out_of_bounds_signal = Signal()
        self.simulation_step_signal = Signal()

    @property
    def players(self) -> dict[str, Robot]:
        """The robots in play, by name, in name order."""
        return dict(self._players)

    @property
    def projectiles(self) -> list[Projectile]:
        """The projectiles in flight."""
        return list(self._projectiles)

    @property
    def runtime(self) -> float:
        """Simulated time elapsed, in seconds."""
        return self._runtime

    def new_player(
        self,
        name: str,
        agent: Agent,
        position: Vector | None = None,
        rotation: float | None = None,
    ) -> None:
        """Add a robot; position and rotation are random when not given.

        A name already in play is left as it is.
        """
        if position is None:
            arena = self.rules.arena_size
            x = self._random.uniform(
                arena.x * _SPAWN_SAFETY, arena.x * (1 - _SPAWN_SAFETY)
            )
            y = self._random.uniform(
                arena.y * _SPAWN_SAFETY, arena.y * (1 - _SPAWN_SAFETY)
            )
            position = Vector(x, y)
        if rotation is None:
            rotation = self._random.uniform(0, 2 * math.pi)

        robot = Robot(self.rules, agent)
        robot.position = position
        robot.rotation = rotation
        if name not in self._players:
            self._players[name] = robot
            self._players = dict(sorted(self._players.items()))
        self.new_player_signal(name)

    def update(self) -> None:
        """Run one step of the simulation."""
        self._update_projectiles()
        self._update_players()

        for name in list(self._players):
            robot = self._players.get(name)
            if robot is not None and robot.health <= 0:
                del self._players[name]
                self.death_signal(name)

        self.simulation_step_signal()
        self._runtime += self.rules.time_step

    def is_running(self) -> bool:
        """Whether the simulation is running; it always is."""
        return True

    def runtime_string(self) -> str:
        """The runtime as ``minutes:seconds.millis``."""
        minutes = int(self._runtime / 60)
        seconds = math.fmod(self._runtime, 60)
        return f"{minutes}:{seconds:06.3f}"

    def num_players(self) -> int:
        """The number of robots in play."""
        return len(self._players)

    def _out_of_bounds(self, pos: Vector) -> bool:
        arena = self.rules.arena_size
        return pos.x > arena.x or pos.y > arena.y or pos.x < 0 or pos.y < 0

    def _update_players(self) -> None:
        rules = self.rules
        players = list(self._players.items())

        for _, robot in players:
            self._check_scan(robot)

        for _, robot in players:
            robot.update()

        spawn_distance = Vector(rules.robot_size.x, rules.projectile_size.x).magnitude()
        for name, robot in players:
            if robot.shooting:
                robot.shooting = False
                direction = robot.rotation + robot.turret_angle
                position = robot.position + Vector.polar(direction, spawn_distance)
                self._projectiles.append(Projectile(rules, position, direction, name))

        for name, robot in players:
            for other_name, other in players:
                if other is robot:
                    continue
                if collides(robot.body, other.body):
                    self.collision_signal(name, other_name)
                    robot.take_damage(rules.collision_damage)

        for name, robot in players:
            if self._out_of_bounds(robot.position):
                self.out_of_bounds_signal(name)
                robot.take_damage(rules.collision_damage)

        for name, robot in players:
            remaining = []
            for projectile in self._projectiles:
                if collides(robot.body, projectile.body):
                    robot.take_damage(rules.projectile_damage)
                    self.hit_signal(name, projectile.owner)
                else:
                    remaining.append(projectile)
            self._projectiles = remaining

    def _update_projectiles(self) -> None:
        for projectile in self._projectiles:
            projectile.update()
        self._projectiles = [
            p for p in self._projectiles if not self._out_of_bounds(p.body.position)
        ]

    def _in_scan_area(self, p1: Vector, rotation: float, p2: Vector) -> bool:
        v = p2 - p1
        distance = v.magnitude()
        if distance < self.rules.scan_proximity:
            return True
        if distance > self.rules.scan_range:
            return False
        angle = ang_diff_radians(rotation, v.angle())
        half = self.rules.scan_angle / 2
        return -half < angle < half

    def _check_scan(self, robot: Robot) -> None:
        here = robot.position
        rotation = wrap_radians(robot.rotation + robot.turret_angle)
        robot.scan_targets = [
            other._snapshot()
            for other in self._players.values()
            if other is not robot and self._in_scan_area(here, rotation, other.position)
        ]