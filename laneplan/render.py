"""Drawing surfaces: an in-memory display list and a pygame window that shows it."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

SWIDTH = 1200.0
SHEIGHT = 1200.0


class Color(Enum):
    """Colours used by the scenes, as RGB triples."""

    BLACK = (0, 0, 0)
    WHITE = (255, 255, 255)
    RED = (170, 0, 0)
    YELLOW = (255, 255, 85)
    MAGENTA = (170, 0, 170)
    ORANGE = (255, 127, 0)


class ShapeKind(Enum):
    LINE = "line"
    CIRCLE = "circle"
    SOLID_CIRCLE = "solid_circle"
    FILL_CIRCLE = "fill_circle"
    RECTANGLE = "rectangle"


@dataclass(frozen=True)
class Shape:
    """One drawing command of a frame."""

    kind: ShapeKind
    coords: tuple[float, ...]
    color: Color
    width: int
    fill: Color | None = None


class Canvas:
    """Collects the shapes of the current frame; counts presented frames."""

    def __init__(self, width: float = SWIDTH, height: float = SHEIGHT,
                 background: Color = Color.WHITE) -> None:
        self.width = width
        self.height = height
        self.background = background
        self.shapes: list[Shape] = []
        self.frames = 0
        self.line_color = Color.BLACK
        self.line_width = 1

    def clear(self) -> None:
        self.shapes.clear()

    def set_line(self, color: Color, width: int) -> None:
        self.line_color = color
        self.line_width = width

    def _add(self, kind: ShapeKind, coords: tuple[float, ...],
             fill: Color | None = None) -> None:
        self.shapes.append(Shape(kind, coords, self.line_color, self.line_width, fill))

    def line(self, x1: float, y1: float, x2: float, y2: float) -> None:
        self._add(ShapeKind.LINE, (x1, y1, x2, y2))

    def circle(self, x: float, y: float, r: float) -> None:
        self._add(ShapeKind.CIRCLE, (x, y, r))

    def solid_circle(self, x: float, y: float, r: float, color: Color) -> None:
        """A filled circle without outline."""
        self._add(ShapeKind.SOLID_CIRCLE, (x, y, r), fill=color)

    def fill_circle(self, x: float, y: float, r: float, color: Color) -> None:
        """A filled circle outlined with the current line style."""
        self._add(ShapeKind.FILL_CIRCLE, (x, y, r), fill=color)

    def rectangle(self, left: float, top: float, right: float, bottom: float) -> None:
        self._add(ShapeKind.RECTANGLE, (left, top, right, bottom))

    def present(self) -> None:
        self.frames += 1


class PygameCanvas(Canvas):
    """A canvas that shows each presented frame in a pygame window."""

    def __init__(self, width: float = SWIDTH, height: float = SHEIGHT,
                 background: Color = Color.WHITE, title: str = "laneplan") -> None:
        import pygame

        super().__init__(width, height, background)
        self._pygame = pygame
        pygame.display.init()
        pygame.display.set_caption(title)
        self.surface = pygame.display.set_mode((round(width), round(height)))

    def _draw(self, shape: Shape) -> None:
        draw = self._pygame.draw
        outline = max(1, shape.width)
        if shape.kind is ShapeKind.LINE:
            x1, y1, x2, y2 = shape.coords
            draw.line(self.surface, shape.color.value, (round(x1), round(y1)),
                      (round(x2), round(y2)), outline)
            return
        if shape.kind is ShapeKind.RECTANGLE:
            left, top, right, bottom = shape.coords
            rect = self._pygame.Rect(round(left), round(top),
                                     round(right - left), round(bottom - top))
            draw.rect(self.surface, shape.color.value, rect, outline)
            return
        x, y, r = shape.coords
        centre = (round(x), round(y))
        radius = round(r)
        if shape.fill is not None:
            draw.circle(self.surface, shape.fill.value, centre, radius)
        if shape.kind in (ShapeKind.CIRCLE, ShapeKind.FILL_CIRCLE):
            draw.circle(self.surface, shape.color.value, centre, radius, outline)

    def present(self) -> None:
        self._pygame.event.pump()
        self.surface.fill(self.background.value)
        for shape in self.shapes:
            self._draw(shape)
        self._pygame.display.flip()
        super().present()

    def close(self) -> None:
        self._pygame.display.quit()

    def __enter__(self) -> PygameCanvas:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()