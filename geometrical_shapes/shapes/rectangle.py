from __future__ import annotations

from dataclasses import dataclass

from geometrical_shapes.rng import RandomSource, default_source
from geometrical_shapes.shapes.base import Displayable, Drawable
from geometrical_shapes.shapes.line import Line
from geometrical_shapes.shapes.point import Point


@dataclass(frozen=True)
class Rectangle(Drawable):
    """Axis-aligned outline spanned by two opposite corners in any order."""

    point1: Point
    point2: Point

    @classmethod
    def random(cls, max_x: int, max_y: int, rng: RandomSource | None = None) -> Rectangle:
        source = rng or default_source()
        return cls(Point.random(max_x, max_y, source), Point.random(max_x, max_y, source))

    def corners(self) -> tuple[Point, Point, Point, Point]:
        """Corners in drawing order: point1, (x2, y1), point2, (x1, y2)."""
        corner3 = Point(self.point2.x, self.point1.y)
        corner4 = Point(self.point1.x, self.point2.y)
        return (self.point1, corner3, self.point2, corner4)

    def edges(self) -> tuple[Line, Line, Line, Line]:
        p1, p3, p2, p4 = self.corners()
        return (Line(p1, p3), Line(p3, p2), Line(p2, p4), Line(p4, p1))

    def draw(self, image: Displayable) -> None:
        for edge in self.edges():
            edge.trace(image, self.color)
