from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Protocol

from geometrical_shapes.color import DEFAULT_COLOR, Color


class Displayable(Protocol):
    def set_pixel(self, x: int, y: int, color: Color) -> None:
        """Write one pixel. Out-of-range handling is up to the buffer."""
        ...


class Drawable(ABC):
    @abstractmethod
    def draw(self, image: Displayable) -> None:
        raise NotImplementedError

    def color(self) -> Color:
        """Color used for each pixel write; subclasses may override."""
        return DEFAULT_COLOR
