import pytest

from laneplan.render import Canvas, Color, ShapeKind
from laneplan.traffic import Cone, Person


def test_cone_default_radius():
    cone = Cone(600.0, 300.0)
    assert cone.r == 20.0
    assert (cone.center.x, cone.center.y) == (600.0, 300.0)


def test_cone_show_orange():
    canvas = Canvas()
    Cone(1.0, 2.0, 50.0).show(canvas)
    shape = canvas.shapes[0]
    assert shape.kind is ShapeKind.SOLID_CIRCLE
    assert shape.coords == (1.0, 2.0, 50.0)
    assert shape.fill is Color.ORANGE


def test_person_moves_by_speed():
    person = Person(820.0, 400.0)
    person.speed = -2.0
    for _ in range(3):
        person.move()
    assert person.center.x == pytest.approx(814.0)
    assert person.center.y == 400.0


def test_person_still_by_default():
    person = Person(5.0, 5.0)
    person.move()
    assert person.center.x == 5.0


def test_person_show_yellow():
    canvas = Canvas()
    Person(3.0, 4.0).show(canvas)
    shape = canvas.shapes[0]
    assert shape.kind is ShapeKind.FILL_CIRCLE
    assert shape.fill is Color.YELLOW
    assert shape.coords == (3.0, 4.0, 20.0)