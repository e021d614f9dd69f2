import math

import pytest

from robotarena.rectangle import Rectangle
from robotarena.vector import Vector


def test_constructor():
    r = Rectangle(Vector(10, 10))
    assert r.size == Vector(10, 10)
    assert r.position == Vector.zero()
    assert r.rotation == 0.0

    r2 = Rectangle(Vector(10, 10), Vector(20, 7), 0.4)
    assert r2.size == Vector(10, 10)
    assert r2.position == Vector(20, 7)
    assert r2.rotation == pytest.approx(0.4)


def test_position():
    r = Rectangle(Vector(10, 10))
    r.move(Vector(10, 10))
    assert r.position == Vector(10, 10)

    r.move(Vector(20, -30))
    assert r.position == Vector(30, -20)

    r.position = Vector(10, 10)
    assert r.position == Vector(10, 10)


def test_rotation():
    r = Rectangle(Vector(10, 10))
    r.rotate(0.2)
    assert r.rotation == pytest.approx(0.2)

    r.rotate(-0.7)
    assert r.rotation == pytest.approx(-0.5)

    r.rotation = 1.2
    assert r.rotation == pytest.approx(1.2)


def test_resize():
    r = Rectangle(Vector(10, 10))
    r.resize(Vector(2, 3))
    assert r.size == Vector(20, 30)

    r.resize(0.5)
    assert r.size == Vector(10, 15)

    r.size = Vector(1, 1)
    assert r.size == Vector(1, 1)


def test_methods_chain():
    r = Rectangle(Vector(10, 10))
    assert r.move(Vector(1, 1)).rotate(0.5) is r
    assert r.position == Vector(1, 1)
    assert r.rotation == pytest.approx(0.5)


def test_vertices():
    r = Rectangle(Vector(10, 20), Vector(0, 10), math.pi / 2.0)
    vertices = r.vertices()
    expected = [(10, 5), (10, 15), (-10, 15), (-10, 5)]
    assert len(vertices) == 4
    for vertex, (x, y) in zip(vertices, expected):
        assert vertex.x == pytest.approx(x)
        assert vertex.y == pytest.approx(y)


def test_vertices_centred_on_position():
    r = Rectangle(Vector(6, 4), Vector(3, -2), 0.7)
    vertices = r.vertices()
    cx = sum(v.x for v in vertices) / 4
    cy = sum(v.y for v in vertices) / 4
    assert cx == pytest.approx(3)
    assert cy == pytest.approx(-2)


def test_str():
    r = Rectangle(Vector(10, 10))
    assert str(r) == "Rectangle((10, 10), (0, 0), 0)"