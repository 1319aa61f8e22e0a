"""Common behaviour of driving scenes: drawing and straight-line motion profiles."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from laneplan.car import CarBase
from laneplan.geometry import DELAY_TIME, SHOW_CIRCLE, delay
from laneplan.render import Canvas, Color, PygameCanvas
from laneplan.road import RoadBase

logger = logging.getLogger(__name__)


class SceneBase(ABC):
    """A road with an ego car, drawn frame by frame on a canvas.

    Frames are paced in real time only when ``realtime`` is true; by default
    that is the case for a pygame window and not for an in-memory canvas.
    """

    def __init__(self, road: RoadBase, car: CarBase, canvas: Canvas | None = None,
                 realtime: bool | None = None) -> None:
        self.road = road
        self.car = car
        self.canvas = canvas if canvas is not None else Canvas()
        self.realtime = (isinstance(self.canvas, PygameCanvas)
                         if realtime is None else realtime)
        self.speed_limit = -6.0

    def _wait(self, ms: float) -> None:
        if self.realtime:
            delay(ms)

    def _begin_frame(self) -> None:
        self.canvas.clear()

    def _end_frame(self) -> None:
        self.canvas.present()
        self._wait(DELAY_TIME)

    def show_scene(self) -> None:
        """Draw the road and the car as one frame."""
        self._begin_frame()
        self.road.show(self.canvas)
        self.car.show(self.canvas, Color.BLACK)
        if SHOW_CIRCLE and self.car.p_center is not None:
            self.car.show_circle(self.canvas)
        self._end_frame()

    def obs_move_step(self) -> None:
        """Advance moving obstacles by one frame; none by default."""

    @abstractmethod
    def planning_process(self) -> bool:
        """Run the whole scene; return whether it completed."""

    def uniform_straight(self, total_s: float) -> None:
        """Drive straight at the current speed until total_s has been covered."""
        self.car.update_straight_info()
        if total_s > 0 and self.car.speed == 0.0:
            raise ValueError("cannot cover a distance at zero speed")
        travelled = 0.0
        while travelled < total_s:
            travelled += abs(self.car.speed)
            self.car.move_straight_step()
            self.obs_move_step()
            self.show_scene()
        logger.info("%s", self.car.info())

    def uniform_acc_by_speed(self, target_speed_y: float) -> None:
        """Accelerate at the car's a_y until target_speed_y, then hold it.

        Stops early once the car has come to rest; otherwise runs until the
        rear of the car leaves the top of the window.
        """
        car = self.car
        while car.pmidr.y > 0.0:
            car.move_straight_step()
            self.obs_move_step()
            if abs(car.speed_y - target_speed_y) > abs(car.a_y):
                car.speed_y += car.a_y
            else:
                car.speed_y = target_speed_y
                car.a_y = 0.0
                if target_speed_y == 0.0:
                    break
            self.show_scene()
        logger.info("%s", car.info())

    def uniform_acc_by_dis(self, dis: float, target_speed_y: float) -> None:
        """Reach target_speed_y after covering dis, at constant acceleration."""
        car = self.car
        car.a_y = (car.speed_y ** 2 - target_speed_y ** 2) / dis / 2.0
        logger.info("a_y = %s, dis = %s", car.a_y, dis)
        self.uniform_acc_by_speed(target_speed_y)

    def uniform_acc_by_time(self, target_speed_y: float, target_time: float) -> None:
        """Reach target_speed_y within target_time seconds, at constant acceleration."""
        car = self.car
        frames = target_time * 1000 / DELAY_TIME
        car.a_y = (target_speed_y - car.speed_y) / frames
        logger.info("a_y = %s", car.a_y)
        self.uniform_acc_by_speed(target_speed_y)