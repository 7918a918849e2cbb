from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

from geometrical_shapes.color import Color, random_color
from geometrical_shapes.geometry import closest_to, distance
from geometrical_shapes.rng import RandomSource, default_source
from geometrical_shapes.shapes.base import Displayable, Drawable
from geometrical_shapes.shapes.point import Point


# Candidate moves from the tracking point, in tie-break order.
_STEPS = ((1, 0), (0, 1), (1, 1))


@dataclass(frozen=True)
class Circle(Drawable):
    """Circle outline traced from the top pole toward the right-hand point.

    The tracking point starts at `(cx, cy - radius)`. Each iteration writes the
    point and its three reflections about the center, then moves right, down or
    diagonally, whichever candidate lies closest to the radius. Ties prefer the
    rightward move, then the downward one. The walk stops once it passes below
    `cy`.

    A radius of 0 writes the center four times; a negative radius writes nothing.

    `color()` is queried for every single pixel write and returns a new random
    color each time, so the four reflections of one step may differ. Do not
    cache it.
    """

    center: Point
    radius: int
    rng: RandomSource | None = field(default=None, compare=False, repr=False)

    @classmethod
    def random(cls, x_rng: int, y_rng: int, rng: RandomSource | None = None) -> Circle:
        source = rng or default_source()
        center = Point.random(x_rng, y_rng, source)
        radius = source.uniform_int(0, min(x_rng, y_rng) // 2)
        return cls(center, radius, rng=rng)

    def color(self) -> Color:
        return random_color(self.rng or default_source())

    def quadrant(self) -> Iterator[tuple[int, int]]:
        """Tracking-point positions for the upper-right quadrant, in order."""
        cx, cy, r = self.center.x, self.center.y, self.radius
        if r < 0:
            return
        if r == 0:
            yield (cx, cy)
            return
        x, y = cx, cy - r
        while y <= cy:
            yield (x, y)
            dists = [distance(cx, cy, x + sx, y + sy) for sx, sy in _STEPS]
            sx, sy = _STEPS[closest_to(r, dists)]
            x += sx
            y += sy

    def pixels(self) -> Iterator[tuple[int, int]]:
        cx2 = 2 * self.center.x
        cy2 = 2 * self.center.y
        for x, y in self.quadrant():
            yield (x, y)
            yield (cx2 - x, y)
            yield (x, cy2 - y)
            yield (cx2 - x, cy2 - y)

    def draw(self, image: Displayable) -> None:
        for x, y in self.pixels():
            image.set_pixel(x, y, self.color())
