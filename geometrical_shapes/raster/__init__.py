from geometrical_shapes.raster.export import save_png, to_pil
from geometrical_shapes.raster.image import Image

__all__ = ["Image", "save_png", "to_pil"]
