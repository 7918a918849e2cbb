from __future__ import annotations

from dataclasses import dataclass

from geometrical_shapes.rng import RandomSource, default_source
from geometrical_shapes.shapes.base import Displayable, Drawable
from geometrical_shapes.shapes.line import Line
from geometrical_shapes.shapes.point import Point


@dataclass(frozen=True)
class Triangle(Drawable):
    start: Point
    middle: Point
    end: Point

    @classmethod
    def random(cls, max_x: int, max_y: int, rng: RandomSource | None = None) -> Triangle:
        source = rng or default_source()
        return cls(
            Point.random(max_x, max_y, source),
            Point.random(max_x, max_y, source),
            Point.random(max_x, max_y, source),
        )

    def edges(self) -> tuple[Line, Line, Line]:
        return (
            Line(self.start, self.middle),
            Line(self.middle, self.end),
            Line(self.end, self.start),
        )

    def draw(self, image: Displayable) -> None:
        # Shared vertices are written by both adjacent edges.
        for edge in self.edges():
            edge.trace(image, self.color)
