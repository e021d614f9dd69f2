"""Small numeric helpers: wrapping, clamping, interpolation and angles."""

from __future__ import annotations

import math


def modulus(a: float, n: float) -> float:
    """Remainder with the sign of the divisor: ``a - n * floor(a / n)``."""
    return a - math.floor(a / n) * n


def wrap(value: float, lower_limit: float, upper_limit: float) -> float:
    """Wrap ``value`` into the range ``[lower_limit, upper_limit)``."""
    span = upper_limit - lower_limit
    return value - math.floor((value - lower_limit) / span) * span


def clamp(value: float, lower_limit: float, upper_limit: float) -> float:
    """Limit ``value`` to the range ``[lower_limit, upper_limit]``."""
    if upper_limit < value:
        return upper_limit
    if value < lower_limit:
        return lower_limit
    return value


def lerp(v0, v1, t: float):
    """Linear interpolation between ``v0`` and ``v1`` by ``t``."""
    return (1 - t) * v0 + t * v1


def wrap_radians(angle: float) -> float:
    """Wrap an angle into ``[-pi, pi)``."""
    return wrap(angle, -math.pi, math.pi)


def ang_diff_radians(a: float, b: float) -> float:
    """Signed smallest difference ``a - b`` between two angles."""
    return wrap_radians(a - b)