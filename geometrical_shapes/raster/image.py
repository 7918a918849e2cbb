from __future__ import annotations

import logging

import numpy as np

from geometrical_shapes.color import TRANSPARENT, Color


LOGGER = logging.getLogger(__name__)


class Image:
    """RGBA255 pixel buffer with overwrite semantics.

    Writes outside the buffer are dropped and counted in `dropped_writes`.
    """

    def __init__(self, width: int, height: int, background: Color = TRANSPARENT) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("width and height must be > 0")
        self.width = width
        self.height = height
        self.background = background
        self.dropped_writes = 0
        self._pixels = np.zeros((height, width, 4), dtype=np.uint8)
        self.clear()

    @classmethod
    def blank(cls, width: int, height: int, background: Color = TRANSPARENT) -> Image:
        return cls(width, height, background)

    def clear(self, color: Color | None = None) -> None:
        if color is None:
            color = self.background
        self._pixels[:, :] = np.asarray(color.as_tuple(), dtype=np.uint8)
        self.dropped_writes = 0

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def set_pixel(self, x: int, y: int, color: Color) -> None:
        if not self.contains(x, y):
            self.dropped_writes += 1
            return
        self._pixels[y, x] = color.as_tuple()

    def get_pixel(self, x: int, y: int) -> Color:
        if not self.contains(x, y):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        r, g, b, a = (int(v) for v in self._pixels[y, x])
        return Color(r, g, b, a)

    def to_array(self) -> np.ndarray:
        return self._pixels.copy()

    def report_dropped_writes(self) -> int:
        if self.dropped_writes > 0:
            LOGGER.warning(
                "Image dropped out-of-bounds writes; size=%dx%d dropped=%d",
                self.width,
                self.height,
                self.dropped_writes,
            )
        return self.dropped_writes
