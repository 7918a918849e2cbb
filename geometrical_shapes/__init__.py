from geometrical_shapes.color import DEFAULT_COLOR, Color, random_color
from geometrical_shapes.errors import SceneConfigError
from geometrical_shapes.raster import Image, save_png
from geometrical_shapes.rng import NumpyRandomSource, RandomSource, default_source, set_default_source
from geometrical_shapes.scene import SceneConfig, load_scene_config, render_scene
from geometrical_shapes.shapes import Circle, Displayable, Drawable, Line, Point, Rectangle, Triangle

__all__ = [
    "Circle",
    "Color",
    "DEFAULT_COLOR",
    "Displayable",
    "Drawable",
    "Image",
    "Line",
    "NumpyRandomSource",
    "Point",
    "RandomSource",
    "Rectangle",
    "SceneConfig",
    "SceneConfigError",
    "Triangle",
    "default_source",
    "load_scene_config",
    "random_color",
    "render_scene",
    "save_png",
    "set_default_source",
]
