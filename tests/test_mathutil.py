import math

import pytest

from robotarena.mathutil import (
    ang_diff_radians,
    clamp,
    lerp,
    modulus,
    wrap,
    wrap_radians,
)


@pytest.mark.parametrize(
    "value, expected", [(1.0, 5.0), (4.0, 4.0), (7.0, 3.0)]
)
def test_wrap(value, expected):
    assert wrap(value, 2.0, 6.0) == pytest.approx(expected)


@pytest.mark.parametrize(
    "value, expected", [(1.0, 2.0), (4.0, 4.0), (7.0, 6.0)]
)
def test_clamp(value, expected):
    assert clamp(value, 2.0, 6.0) == pytest.approx(expected)


@pytest.mark.parametrize(
    "t, expected",
    [(0.0, 1.0), (0.25, 2.25), (0.5, 3.5), (0.75, 4.75), (1.0, 6.0)],
)
def test_lerp(t, expected):
    assert lerp(1.0, 6.0, t) == pytest.approx(expected)


def test_modulus_sign_follows_divisor():
    assert modulus(-1.0, 4.0) == pytest.approx(3.0)
    assert modulus(5.0, 4.0) == pytest.approx(1.0)


@pytest.mark.parametrize("angle", [-10.0, -3.5, 0.0, 1.0, 3.5, 20.0])
def test_wrap_radians_in_range(angle):
    result = wrap_radians(angle)
    assert -math.pi <= result < math.pi
    assert math.sin(result) == pytest.approx(math.sin(angle), abs=1e-9)
    assert math.cos(result) == pytest.approx(math.cos(angle), abs=1e-9)


def test_wrap_radians_keeps_small_angles():
    assert wrap_radians(0.5) == pytest.approx(0.5)
    assert wrap_radians(-0.5) == pytest.approx(-0.5)


def test_ang_diff_radians_across_boundary():
    assert ang_diff_radians(0.1, 2 * math.pi) == pytest.approx(0.1)
    assert ang_diff_radians(2 * math.pi - 0.1, 0.0) == pytest.approx(-0.1)


def test_ang_diff_radians_antisymmetric():
    a, b = 0.3, 1.2
    assert ang_diff_radians(a, b) == pytest.approx(-ang_diff_radians(b, a))