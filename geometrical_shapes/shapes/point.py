from __future__ import annotations

from dataclasses import dataclass

from geometrical_shapes.rng import RandomSource, default_source
from geometrical_shapes.shapes.base import Displayable, Drawable


@dataclass(frozen=True)
class Point(Drawable):
    x: int
    y: int

    @classmethod
    def random(cls, max_x: int, max_y: int, rng: RandomSource | None = None) -> Point:
        source = rng or default_source()
        x = source.uniform_int(0, max_x)
        y = source.uniform_int(0, max_y)
        return cls(x, y)

    def translate(self, dx: int, dy: int) -> Point:
        return Point(self.x + dx, self.y + dy)

    def draw(self, image: Displayable) -> None:
        image.set_pixel(self.x, self.y, self.color())
