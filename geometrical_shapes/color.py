from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from geometrical_shapes.rng import RandomSource


RGBA = tuple[int, int, int, int]

MIN_RANDOM_ALPHA = 100


@dataclass(frozen=True)
class Color:
    """RGBA255 color value."""

    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "a"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"color channel `{name}` must be an int, got {value!r}")
            if value < 0 or value > 255:
                raise ValueError(f"color channel `{name}` must be in [0, 255], got {value}")

    @classmethod
    def from_tuple(cls, rgba: tuple[int, ...]) -> Color:
        if len(rgba) == 3:
            return cls(*rgba)
        if len(rgba) != 4:
            raise ValueError(f"expected 3 or 4 channels, got {len(rgba)}")
        return cls(*rgba)

    def as_tuple(self) -> RGBA:
        return (self.r, self.g, self.b, self.a)


DEFAULT_COLOR = Color(255, 0, 0, 255)
TRANSPARENT = Color(0, 0, 0, 0)


def random_color(rng: RandomSource, *, min_alpha: int = MIN_RANDOM_ALPHA) -> Color:
    return Color(
        r=rng.uniform_int(0, 256),
        g=rng.uniform_int(0, 256),
        b=rng.uniform_int(0, 256),
        a=rng.uniform_int(min_alpha, 256),
    )
