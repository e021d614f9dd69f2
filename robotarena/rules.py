"""Game rules and their JSON form."""

from __future__ import annotations

import json
import math
from dataclasses import dataclass, fields
from typing import Any, TextIO

from .vector import Vector

_VECTOR_FIELDS = ("robot_size", "arena_size", "projectile_size")
_JSON_NAMES = {"time_step": "timeStep"}
# The written form leaves this field out; it is still read when present.
_NOT_WRITTEN = {"turret_w_max"}


def _as_float(value: Any, key: str) -> float:
    if value is None:
        return 0.0
    if isinstance(value, (bool, int, float)):
        return float(value)
    raise ValueError(f"value of {key!r} is not a number: {value!r}")


def _lookup(obj: Any, key: str, default: float) -> float:
    if obj is None:
        return default
    if not isinstance(obj, dict):
        raise ValueError(f"expected a JSON object when reading {key!r}")
    if key not in obj:
        return default
    return _as_float(obj[key], key)


@dataclass(frozen=True)
class Rules:
    """The parameters of a game."""

    time_step: float = 1 / 60.0
    scan_range: float = 1000.0
    scan_proximity: float = 100.0
    scan_angle: float = math.pi / 3
    robot_size: Vector = Vector(30.0, 18.0)
    arena_size: Vector = Vector(1500.0, 1000.0)
    v_max: float = 100.0
    v_min: float = -30.0
    w_max: float = 0.6
    turret_w_max: float = 3.14
    collision_damage: float = 5.0
    max_health: float = 100.0
    projectile_size: Vector = Vector(4.0, 4.0)
    projectile_speed: float = 1000.0
    projectile_cooldown: float = 0.4
    projectile_damage: float = 10.0

    def to_json(self) -> str:
        """The rules as a JSON document."""
        root: dict[str, Any] = {}
        for f in fields(self):
            if f.name in _NOT_WRITTEN:
                continue
            key = _JSON_NAMES.get(f.name, f.name)
            value = getattr(self, f.name)
            if isinstance(value, Vector):
                root[key] = {"x": float(value.x), "y": float(value.y)}
            else:
                root[key] = float(value)
        return json.dumps(root, indent=3, sort_keys=True) + "\n"

    @classmethod
    def from_json(cls, text: str) -> Rules:
        """Read rules from a JSON document; missing entries keep their defaults."""
        root = json.loads(text)
        if root is not None and not isinstance(root, dict):
            raise ValueError("rules must be a JSON object")
        defaults = cls()
        values: dict[str, Any] = {}
        for f in fields(cls):
            key = _JSON_NAMES.get(f.name, f.name)
            default = getattr(defaults, f.name)
            if f.name in _VECTOR_FIELDS:
                sub = root.get(key) if root else None
                values[f.name] = Vector(
                    _lookup(sub, "x", default.x), _lookup(sub, "y", default.y)
                )
            else:
                values[f.name] = _lookup(root, key, default)
        return cls(**values)

    @classmethod
    def load(cls, stream: TextIO) -> Rules:
        """Read rules from a text stream holding JSON."""
        return cls.from_json(stream.read())

    def dump(self, stream: TextIO) -> None:
        """Write the rules to a text stream as JSON."""
        stream.write(self.to_json())