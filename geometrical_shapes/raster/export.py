from __future__ import annotations

import logging
from pathlib import Path

from PIL import Image as PILImage

from geometrical_shapes.raster.image import Image


LOGGER = logging.getLogger(__name__)


def to_pil(image: Image) -> PILImage.Image:
    return PILImage.fromarray(image.to_array())


def save_png(image: Image, path: str | Path) -> Path:
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    to_pil(image).save(out, format="PNG")
    LOGGER.info("saved %dx%d image to %s", image.width, image.height, out)
    return out
