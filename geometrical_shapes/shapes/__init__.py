from geometrical_shapes.shapes.base import Displayable, Drawable
from geometrical_shapes.shapes.circle import Circle
from geometrical_shapes.shapes.line import Line
from geometrical_shapes.shapes.point import Point
from geometrical_shapes.shapes.rectangle import Rectangle
from geometrical_shapes.shapes.triangle import Triangle

__all__ = [
    "Circle",
    "Displayable",
    "Drawable",
    "Line",
    "Point",
    "Rectangle",
    "Triangle",
]
