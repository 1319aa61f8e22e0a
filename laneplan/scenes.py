"""Straight-road scenes: stopping for an obstacle, a station, following, a crossing."""

from __future__ import annotations

import logging
from collections.abc import Callable

from laneplan.car import CarNormal
from laneplan.geometry import Point
from laneplan.render import SHEIGHT, SWIDTH, Canvas, Color
from laneplan.road import RoadCrosswalk, RoadNormal
from laneplan.scene_base import SceneBase
from laneplan.traffic import Cone, Person

logger = logging.getLogger(__name__)

Pause = Callable[[], object]


def _ego_car() -> CarNormal:
    return CarNormal(SWIDTH / 2.0, SHEIGHT - 70.0)


class _IntroScene(SceneBase):
    def _introduce(self, pause: Pause | None) -> None:
        logger.info("%s", self.car.info())
        self.show_scene()
        if pause is not None:
            pause()


class StraightStopOBS(_IntroScene):
    """Brake to a halt a safe distance before a cone."""

    def __init__(self, canvas: Canvas | None = None, pause: Pause | None = None,
                 realtime: bool | None = None) -> None:
        super().__init__(RoadNormal(), _ego_car(), canvas, realtime)
        self.cone = Cone(SWIDTH / 2.0, SWIDTH / 4.0, 50)
        self.safe_dis = 50.0
        self.car.speed_y = -5.0
        self._introduce(pause)

    def show_scene(self) -> None:
        self._begin_frame()
        self.road.show(self.canvas)
        self.cone.show(self.canvas)
        self.car.show(self.canvas, Color.BLACK)
        self._end_frame()

    def planning_process(self) -> bool:
        stop_line = self.cone.center.y + self.cone.r + self.safe_dis
        self.uniform_acc_by_dis(self.car.pmidf.y - stop_line, 0.0)
        return True


class StraightStation(_IntroScene):
    """Stop at a station, wait, then pull away to the speed limit."""

    def __init__(self, canvas: Canvas | None = None, pause: Pause | None = None,
                 realtime: bool | None = None) -> None:
        super().__init__(RoadNormal(), _ego_car(), canvas, realtime)
        self.station = Point(SWIDTH / 2.0, SHEIGHT / 2.0)
        self.stop_time = 3  # seconds
        self.car.speed_y = -5.0
        self._introduce(pause)

    def show_scene(self) -> None:
        self._begin_frame()
        self.road.show(self.canvas)
        self.station.show(self.canvas)
        self.car.show(self.canvas, Color.BLACK)
        self._end_frame()

    def planning_process(self) -> bool:
        self.uniform_acc_by_dis(self.car.pmid.y - self.station.y, 0.0)
        self._wait(self.stop_time * 1000)
        self.uniform_acc_by_time(self.speed_limit, 2.0)
        return True


class StraightFollow(_IntroScene):
    """Close in on a slower car ahead and follow it at a safe gap."""

    def __init__(self, canvas: Canvas | None = None, pause: Pause | None = None,
                 realtime: bool | None = None) -> None:
        super().__init__(RoadNormal(), _ego_car(), canvas, realtime)
        self.car_obs = CarNormal(SWIDTH / 2.0, SHEIGHT / 2.0, 0.0, 50.0, 100.0)
        self.safe_dis = 120.0
        self.car_obs.speed_y = -2.0
        self.car.speed_y = -5.0
        logger.info("%s", self.car_obs.info())
        self._introduce(pause)

    def show_scene(self) -> None:
        self._begin_frame()
        self.road.show(self.canvas)
        self.car_obs.show(self.canvas, Color.RED)
        self.car.show(self.canvas, Color.BLACK)
        self._end_frame()

    def planning_process(self) -> bool:
        car, obs = self.car, self.car_obs
        dis = car.pmidf.y - obs.pmidr.y
        delta_dis = dis - self.safe_dis
        delta_speed_y = car.speed_y - obs.speed_y
        if dis <= 0.0 or delta_dis <= 0.0 or delta_speed_y > 0.0:
            return False

        car.a_y = delta_speed_y ** 2 / (2 * delta_dis)
        while car.pmidr.y > 0.0:
            car.move_straight_step()
            obs.move_straight_step()
            if abs(car.speed_y - obs.speed_y) > abs(car.a_y):
                car.speed_y += car.a_y
            else:
                car.speed_y = obs.speed_y
                car.a_y = 0.0
            self.show_scene()
        logger.info("%s", car.info())
        return True


class StraightCrosswalk(_IntroScene):
    """Slow for a pedestrian crossing, give way to people on it, then drive on."""

    def __init__(self, canvas: Canvas | None = None, pause: Pause | None = None,
                 realtime: bool | None = None) -> None:
        super().__init__(RoadCrosswalk(), _ego_car(), canvas, realtime)
        self.people_num = 5
        self.speed_limit_cross = -3.0
        self.safe_dis = 7.0
        self.car.speed_y = -4.0
        self.people: list[Person] = []
        for i in range(self.people_num):
            person = Person(self.road.right_boundary + 20.0 * (i * 3 + 1),
                            self.road.mid_line())
            person.speed = -2  # walking to the left
            self.people.append(person)
        self._introduce(pause)

    def people_in_cross(self) -> bool:
        """Whether anyone is on the crossing."""
        left, right = self.road.left_boundary, self.road.right_boundary
        return any(left - p.r <= p.center.x <= right + p.r for p in self.people)

    def show_scene(self) -> None:
        """Draw a frame, then advance the car and the people by one step."""
        self._begin_frame()
        self.road.show(self.canvas)
        self.car.show(self.canvas, Color.BLACK)
        self.car.move_straight_step()
        self.car.speed_y += self.car.a_y
        for person in self.people:
            person.show(self.canvas)
            person.move()
        self._end_frame()

    def planning_process(self) -> bool:
        car, road = self.car, self.road

        # Approaching: always slow down first.
        dis = car.pmidf.y - road.down_line()
        car.a_y = car.speed_y ** 2 / (2 * dis)
        while dis > 0:
            dis = car.pmidf.y - road.down_line()
            if not self.people_in_cross():
                if car.speed_y >= self.speed_limit_cross:
                    car.a_y = 0.0
            elif dis <= self.safe_dis:
                car.speed_y = 0.0
                car.a_y = 0.0
                break
            logger.debug("dis: %s, car_speed_y: %s, car_a_y: %s", dis, car.speed_y, car.a_y)
            self.show_scene()

        # On the crossing: keep to the crossing speed limit.
        while car.pmidr.y > road.up_line():
            dis = car.pmidr.y - road.up_line()
            if not self.people_in_cross():
                if car.speed_y > self.speed_limit_cross:
                    car.a_y = (car.speed_y ** 2 - self.speed_limit_cross ** 2) / (2 * dis)
                else:
                    car.a_y = 0.0
            logger.debug("car_speed_y: %s, car_a_y: %s", car.speed_y, car.a_y)
            self.show_scene()

        # Past the crossing: speed up towards the road limit.
        while car.pmidr.y > 0.0:
            if car.speed_y > self.speed_limit:
                car.a_y = (car.speed_y ** 2 - self.speed_limit_cross ** 2) / (2 * car.pmidr.y)
            else:
                car.speed_y = self.speed_limit
                car.a_y = 0.0
            logger.debug("car_speed_y: %s, car_a_y: %s", car.speed_y, car.a_y)
            self.show_scene()

        return True