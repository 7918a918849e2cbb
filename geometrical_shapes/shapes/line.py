from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterator

from geometrical_shapes.color import Color
from geometrical_shapes.geometry import round_half_away
from geometrical_shapes.rng import RandomSource, default_source
from geometrical_shapes.shapes.base import Displayable, Drawable
from geometrical_shapes.shapes.point import Point


@dataclass(frozen=True)
class Line(Drawable):
    """Segment rasterized by stepping along its dominant axis.

    The walk starts at `start` in real coordinates and advances by
    `(dx / steps, dy / steps)` where `steps = max(|dx|, |dy|)`. Each position is
    rounded to the nearest pixel only when written, so the accumulated position
    keeps its fractional part. Exactly `steps + 1` pixels are produced, the first
    being `start` and the last `end`. Consecutive pixels may repeat on the minor
    axis; they are not deduplicated.
    """

    start: Point
    end: Point

    @classmethod
    def random(cls, max_x: int, max_y: int, rng: RandomSource | None = None) -> Line:
        source = rng or default_source()
        return cls(Point.random(max_x, max_y, source), Point.random(max_x, max_y, source))

    @property
    def steps(self) -> int:
        return max(abs(self.end.x - self.start.x), abs(self.end.y - self.start.y))

    def pixels(self) -> Iterator[tuple[int, int]]:
        steps = self.steps
        if steps == 0:
            yield (self.start.x, self.start.y)
            return
        x_inc = (self.end.x - self.start.x) / steps
        y_inc = (self.end.y - self.start.y) / steps
        x = float(self.start.x)
        y = float(self.start.y)
        for _ in range(steps + 1):
            yield (round_half_away(x), round_half_away(y))
            x += x_inc
            y += y_inc

    def trace(self, image: Displayable, color: Callable[[], Color]) -> None:
        """Write every pixel of the segment, asking `color` once per write."""
        for x, y in self.pixels():
            image.set_pixel(x, y, color())

    def draw(self, image: Displayable) -> None:
        self.trace(image, self.color)
