"""Rectangular vehicles that drive straight or turn about a centre."""

from __future__ import annotations

import logging
import math
from enum import Enum

from laneplan.geometry import PI, Point
from laneplan.render import Canvas, Color

logger = logging.getLogger(__name__)


class Shift(Enum):
    D = "drive"
    N = "neutral"
    R = "reverse"
    P = "park"


class TurnDirection(Enum):
    RIGHT = "right"
    LEFT = "left"


class CarBase:
    """A vehicle made of four corner points plus front, rear and centre midpoints.

    Speeds are per frame; negative speed_y moves up the screen.
    """

    def __init__(self) -> None:
        self.car_width = 80.0
        self.car_length = 160.0

        self.plf: Point | None = None
        self.plr: Point | None = None
        self.prf: Point | None = None
        self.prr: Point | None = None
        self.p_center: Point | None = None

        self.pmidf: Point | None = None
        self.pmidr: Point | None = None
        self.pmid: Point | None = None

        self.r_min = 100.0
        self.r_of = 0.0
        self.r_or = 0.0
        self.r_if = 0.0
        self.r_ir = 0.0

        self.r0 = 0.0
        self.theta0 = 0.0

        self.speed = 0.0
        self.speed_x = 0.0
        self.speed_y = 0.0

        self.a = 0.0
        self.a_x = 0.0
        self.a_y = 0.0

        self.delta_theta = 0.0
        self.delta_theta_rot = 0.0
        self.heading_theta = 0.0

        self.gear = Shift.P

    def init_car(self, pos_x: float, pos_y: float, heading: float,
                 width: float, length: float) -> None:
        self.car_width = width
        self.car_length = length
        self.heading_theta = heading

        self.r0 = math.hypot(width / 2, length / 2)
        self.theta0 = math.atan(length / width)

        self.pmid = Point(pos_x, pos_y)
        self.plf = Point(pos_x - width / 2, pos_y - length / 2, PI - self.theta0, self.r0)
        self.prf = Point(pos_x + width / 2, pos_y - length / 2, self.theta0, self.r0)
        self.plr = Point(pos_x - width / 2, pos_y + length / 2, PI + self.theta0, self.r0)
        self.prr = Point(pos_x + width / 2, pos_y + length / 2, -self.theta0, self.r0)

        for corner in self.corners:
            corner.turn(corner, heading)

        self.update_pmidf()
        self.update_pmidr()

    @property
    def corners(self) -> tuple[Point, Point, Point, Point]:
        return self.plf, self.prf, self.plr, self.prr

    @staticmethod
    def _midpoint(existing: Point | None, a: Point, b: Point) -> Point:
        x, y = (a.x + b.x) / 2.0, (a.y + b.y) / 2.0
        if existing is None:
            return Point(x, y)
        existing.x, existing.y = x, y
        return existing

    def update_pmidf(self) -> None:
        self.pmidf = self._midpoint(self.pmidf, self.plf, self.prf)

    def update_pmidr(self) -> None:
        self.pmidr = self._midpoint(self.pmidr, self.plr, self.prr)

    def update_pmid(self) -> None:
        self.pmid = self._midpoint(self.pmid, self.plf, self.prr)

    def show(self, canvas: Canvas, color: Color) -> None:
        canvas.set_line(color, 4)
        outline = (self.plf, self.prf, self.prr, self.plr, self.plf)
        for start, end in zip(outline, outline[1:]):
            canvas.line(start.x, start.y, end.x, end.y)

    def _require_center(self) -> Point:
        if self.p_center is None:
            raise RuntimeError("car has no turning centre")
        return self.p_center

    def show_circle(self, canvas: Canvas) -> None:
        center = self._require_center()
        canvas.set_line(Color.MAGENTA, 2)
        for radius in (self.r_of, self.r_or, self.r_if, self.r_ir):
            canvas.circle(center.x, center.y, radius)

    def info(self) -> str:
        """A multi-line report of point positions and motion state."""
        named = (("pmidr", self.pmidr), ("pmidf", self.pmidf), ("pmid", self.pmid),
                 ("plf", self.plf), ("plr", self.plr), ("prf", self.prf), ("prr", self.prr))
        lines = [f"{name}: x={p.x} y={p.y} Rp={p.radius} thetaP={p.theta}" for name, p in named]
        lines.append(f"speed={self.speed} a={self.a} delta_theta={self.delta_theta / PI} "
                     f"delta_theta_rot={self.delta_theta_rot / PI}")
        return "\n".join(lines)

    def move_straight_step(self) -> None:
        for point in (*self.corners, self.pmidf, self.pmidr, self.pmid):
            point.move(self.speed_x, self.speed_y)

    def turn_step(self) -> None:
        center = self._require_center()
        for point in (self.pmidr, self.plf, self.plr, self.prf, self.prr):
            point.turn(center, self.delta_theta)
        self.heading_theta += self.delta_theta

    def update_xy_va(self) -> None:
        sin_h, cos_h = math.sin(self.heading_theta), math.cos(self.heading_theta)
        self.speed_x = self.speed * sin_h
        self.speed_y = self.speed * cos_h
        self.a_x = self.a * sin_h
        self.a_y = self.a * cos_h
        logger.info("speed_x = %s speed_y = %s a_x = %s a_y = %s",
                    self.speed_x, self.speed_y, self.a_x, self.a_y)

    def update_straight_info(self) -> None:
        """Refresh midpoints and velocity and drop all turning state."""
        self.update_pmidr()
        self.update_pmidf()
        self.update_pmid()
        self.update_xy_va()
        self.p_center = None

        self.r_or = self.r_ir = self.r_of = self.r_if = 0.0

        for point in (self.pmidf, self.pmid, self.pmidr, *self.corners):
            point.theta = 0.0
            point.radius = 0.0

        self.delta_theta = 0.0
        self.delta_theta_rot = 0.0


class CarNormal(CarBase):
    """An ordinary car placed at a position with a heading and size."""

    def __init__(self, pos_x: float, pos_y: float, heading: float = 0.0,
                 width: float = 80.0, length: float = 160.0) -> None:
        super().__init__()
        self.init_car(pos_x, pos_y, heading, width, length)