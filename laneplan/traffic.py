"""Obstacles and pedestrians."""

from __future__ import annotations

from laneplan.geometry import Point
from laneplan.render import Canvas, Color


class Cone:
    """A round traffic cone."""

    def __init__(self, pos_x: float, pos_y: float, r: float = 20.0) -> None:
        self.center = Point(pos_x, pos_y)
        self.r = r

    def show(self, canvas: Canvas) -> None:
        canvas.solid_circle(self.center.x, self.center.y, self.r, Color.ORANGE)


class Person:
    """A pedestrian walking horizontally at a constant speed per frame."""

    def __init__(self, pos_x: float, pos_y: float) -> None:
        self.center = Point(pos_x, pos_y)
        self.r = 20.0
        self.speed = 0.0

    def move(self) -> None:
        self.center.x += self.speed

    def show(self, canvas: Canvas) -> None:
        canvas.fill_circle(self.center.x, self.center.y, self.r, Color.YELLOW)