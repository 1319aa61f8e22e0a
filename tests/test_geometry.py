import math
import time

import pytest

from laneplan.geometry import Point, delay
from laneplan.render import Canvas, Color


def test_move_adds_speed():
    p = Point(10.0, 20.0)
    p.move(1.5, -2.5)
    assert p.x == pytest.approx(11.5)
    assert p.y == pytest.approx(17.5)


def test_distance_classic_triangle():
    assert Point(0, 0).distance_to(Point(3, 4)) == pytest.approx(5.0)


def test_distance_symmetric():
    a, b = Point(1.2, -7.0), Point(-4.0, 9.5)
    assert a.distance_to(b) == pytest.approx(b.distance_to(a))


def test_turn_keeps_radius_and_accumulates_angle():
    centre = Point(100.0, 100.0)
    p = Point(0.0, 0.0, theta=0.3, radius=25.0)
    for _ in range(7):
        p.turn(centre, 0.1)
        assert p.distance_to(centre) == pytest.approx(25.0)
    assert p.theta == pytest.approx(1.0)


def test_turn_quarter_counter_clockwise_goes_up():
    centre = Point(100.0, 100.0)
    p = Point(0.0, 0.0, theta=0.0, radius=10.0)
    p.turn(centre, math.pi / 2)
    assert p.x == pytest.approx(100.0)
    assert p.y == pytest.approx(90.0)


def test_show_draws_black_dot():
    canvas = Canvas()
    Point(5, 6).show(canvas)
    shape = canvas.shapes[0]
    assert shape.coords == (5, 6, 5)
    assert shape.fill is Color.BLACK


def test_delay_waits():
    start = time.monotonic()
    result = delay(20)
    elapsed = time.monotonic() - start
    assert result is None
    assert elapsed >= 0.015


def test_delay_negative_returns_immediately():
    start = time.monotonic()
    result = delay(-100)
    elapsed = time.monotonic() - start
    assert result is None
    assert elapsed < 0.05