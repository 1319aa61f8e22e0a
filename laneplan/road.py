"""Vertical roads drawn in the middle of the window."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator

from laneplan.render import SHEIGHT, SWIDTH, Canvas, Color


class RoadBase(ABC):
    """A road with a half width and rectangular boundaries."""

    def __init__(self, width: float = 200.0) -> None:
        self.width = width
        self.up_boundary = 0.0
        self.down_boundary = 0.0
        self.left_boundary = SWIDTH / 2.0 - width
        self.right_boundary = SWIDTH / 2.0 + width

    @abstractmethod
    def show(self, canvas: Canvas) -> None:
        """Draw the road."""

    def up_line(self) -> float:
        return 0.0

    def mid_line(self) -> float:
        return 0.0

    def down_line(self) -> float:
        return 0.0

    def _draw_sides(self, canvas: Canvas) -> None:
        canvas.set_line(Color.BLACK, 4)
        canvas.line(self.left_boundary, 0.0, self.left_boundary, SHEIGHT)
        canvas.line(self.right_boundary, 0.0, self.right_boundary, SHEIGHT)


class RoadNormal(RoadBase):
    """A plain two-sided road."""

    def show(self, canvas: Canvas) -> None:
        self._draw_sides(canvas)


class RoadCrosswalk(RoadBase):
    """A road crossed by a striped pedestrian crossing."""

    def __init__(self, width: float = 200.0) -> None:
        super().__init__(width)
        self.stripe_gap = 20.0
        self._mid_line = SHEIGHT / 2.0 - 200.0
        self._up_line = self._mid_line - width / 2.0
        self._down_line = self._mid_line + width / 2.0

    def up_line(self) -> float:
        return self._up_line

    def mid_line(self) -> float:
        return self._mid_line

    def down_line(self) -> float:
        return self._down_line

    def stripes(self) -> Iterator[tuple[float, float, float, float]]:
        """Yield (left, top, right, bottom) of each crossing stripe."""
        top = self._up_line + self.stripe_gap
        bottom = self._down_line - self.stripe_gap
        i = 0
        while True:
            left = self.left_boundary + self.stripe_gap * (1 + 2 * i)
            right = self.left_boundary + self.stripe_gap * 2 * (i + 1)
            if right > self.right_boundary:
                return
            yield left, top, right, bottom
            i += 1

    def show(self, canvas: Canvas) -> None:
        self._draw_sides(canvas)
        canvas.line(self.left_boundary, self._up_line, self.right_boundary, self._up_line)
        canvas.line(self.left_boundary, self._down_line, self.right_boundary, self._down_line)
        for stripe in self.stripes():
            canvas.rectangle(*stripe)