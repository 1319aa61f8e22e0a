"""Points in screen coordinates (x to the right, y downwards) and timing helpers."""

from __future__ import annotations

import math
import time
from dataclasses import dataclass

from laneplan.render import Canvas, Color

PI = math.pi
SHOW_CIRCLE = False  # draw turning circles
DELAY_TIME = 20  # frame interval, ms
CHANGE_TIME = 1000  # gear change time, ms


@dataclass
class Point:
    """A point that can move and rotate about a centre at a fixed radius."""

    x: float
    y: float
    theta: float = 0.0
    radius: float = 0.0
    draw_radius: int = 5

    def show(self, canvas: Canvas) -> None:
        canvas.solid_circle(self.x, self.y, self.draw_radius, Color.BLACK)

    def move(self, speed_x: float, speed_y: float) -> None:
        self.x += speed_x
        self.y += speed_y

    def turn(self, center: Point, turn_speed: float) -> None:
        """Advance the angle by turn_speed (positive is counter-clockwise)."""
        self.theta += turn_speed
        self.x = self.radius * math.cos(self.theta) + center.x
        self.y = -self.radius * math.sin(self.theta) + center.y

    def distance_to(self, other: Point) -> float:
        return math.hypot(self.x - other.x, self.y - other.y)


def delay(ms: float) -> None:
    """Wait for the given number of milliseconds."""
    if ms > 0:
        time.sleep(ms / 1000.0)