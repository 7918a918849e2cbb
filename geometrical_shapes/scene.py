from __future__ import annotations

from dataclasses import dataclass, field, replace
import logging
from pathlib import Path
import tomllib
from typing import Any, Mapping

from geometrical_shapes.color import TRANSPARENT, Color
from geometrical_shapes.errors import SceneConfigError
from geometrical_shapes.raster.image import Image
from geometrical_shapes.rng import NumpyRandomSource, RandomSource, seed_from_env
from geometrical_shapes.shapes import Circle, Drawable, Line, Point, Rectangle, Triangle


LOGGER = logging.getLogger(__name__)

Corner = tuple[int, int]

DEFAULT_RECTANGLES: tuple[tuple[Corner, Corner], ...] = (((150, 150), (50, 50)),)
DEFAULT_TRIANGLES: tuple[tuple[Corner, Corner, Corner], ...] = (((500, 500), (250, 700), (700, 800)),)


@dataclass(frozen=True)
class SceneConfig:
    width: int = 1000
    height: int = 1000
    random_lines: int = 1
    random_points: int = 1
    random_circles: int = 49
    rectangles: tuple[tuple[Corner, Corner], ...] = DEFAULT_RECTANGLES
    triangles: tuple[tuple[Corner, Corner, Corner], ...] = DEFAULT_TRIANGLES
    seed: int | None = None
    output: Path = Path("image.png")
    background: Color = field(default=TRANSPARENT)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise SceneConfigError("width and height must be > 0")
        for name in ("random_lines", "random_points", "random_circles"):
            if getattr(self, name) < 0:
                raise SceneConfigError(f"`{name}` must be >= 0")

    def with_overrides(self, **changes: Any) -> SceneConfig:
        """Return a copy with every non-None keyword applied."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})

    def resolved_seed(self) -> int | None:
        return self.seed if self.seed is not None else seed_from_env()


def load_scene_config(path: str | Path) -> SceneConfig:
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"scene config not found: {config_path}")
    with config_path.open("rb") as f:
        try:
            raw = tomllib.load(f)
        except tomllib.TOMLDecodeError as exc:
            raise SceneConfigError(f"invalid TOML in {config_path}: {exc}") from exc
    section = raw.get("scene", {})
    if not isinstance(section, dict):
        raise SceneConfigError("`scene` must be a table")
    config = scene_config_from_mapping(section)
    if config.output.is_absolute():
        return config
    return replace(config, output=config_path.parent / config.output)


def scene_config_from_mapping(raw: Mapping[str, Any]) -> SceneConfig:
    known = {
        "width",
        "height",
        "random_lines",
        "random_points",
        "random_circles",
        "rectangles",
        "triangles",
        "seed",
        "output",
        "background",
    }
    unknown = sorted(set(raw) - known)
    if unknown:
        raise SceneConfigError(f"unknown scene fields: {', '.join(unknown)}")

    kwargs: dict[str, Any] = {}
    for name in ("width", "height", "random_lines", "random_points", "random_circles"):
        if name in raw:
            kwargs[name] = _coerce_int(raw[name], name)
    if "seed" in raw:
        kwargs["seed"] = _coerce_int(raw["seed"], "seed")
    if "output" in raw:
        if not isinstance(raw["output"], str) or not raw["output"]:
            raise SceneConfigError("`output` must be a non-empty string")
        kwargs["output"] = Path(raw["output"])
    if "background" in raw:
        kwargs["background"] = _coerce_color(raw["background"], "background")
    if "rectangles" in raw:
        kwargs["rectangles"] = _coerce_corner_groups(raw["rectangles"], "rectangles", 2)
    if "triangles" in raw:
        kwargs["triangles"] = _coerce_corner_groups(raw["triangles"], "triangles", 3)
    return SceneConfig(**kwargs)


def build_scene(config: SceneConfig, rng: RandomSource) -> list[Drawable]:
    """Shapes in draw order: random lines and points, fixed shapes, random circles."""
    w, h = config.width, config.height
    shapes: list[Drawable] = []
    shapes.extend(Line.random(w, h, rng) for _ in range(config.random_lines))
    shapes.extend(Point.random(w, h, rng) for _ in range(config.random_points))
    for p1, p2 in config.rectangles:
        shapes.append(Rectangle(Point(*p1), Point(*p2)))
    for p1, p2, p3 in config.triangles:
        shapes.append(Triangle(Point(*p1), Point(*p2), Point(*p3)))
    shapes.extend(Circle.random(w, h, rng) for _ in range(config.random_circles))
    return shapes


def render_scene(config: SceneConfig, rng: RandomSource | None = None) -> Image:
    if rng is None:
        rng = NumpyRandomSource(config.resolved_seed())
    image = Image.blank(config.width, config.height, background=config.background)
    shapes = build_scene(config, rng)
    for shape in shapes:
        shape.draw(image)
    LOGGER.info("rendered %d shapes onto %dx%d image", len(shapes), config.width, config.height)
    image.report_dropped_writes()
    return image


def _coerce_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise SceneConfigError(f"`{field_name}` must be an integer")
    return value


def _coerce_color(value: Any, field_name: str) -> Color:
    if not isinstance(value, list) or not all(isinstance(v, int) for v in value):
        raise SceneConfigError(f"`{field_name}` must be a list of 3 or 4 integers")
    try:
        return Color.from_tuple(tuple(value))
    except ValueError as exc:
        raise SceneConfigError(f"`{field_name}`: {exc}") from exc


def _coerce_corner_groups(value: Any, field_name: str, size: int) -> tuple[tuple[Corner, ...], ...]:
    if not isinstance(value, list):
        raise SceneConfigError(f"`{field_name}` must be a list")
    groups: list[tuple[Corner, ...]] = []
    for idx, group in enumerate(value):
        if not isinstance(group, list) or len(group) != size:
            raise SceneConfigError(f"`{field_name}[{idx}]` must list {size} corners")
        corners: list[Corner] = []
        for corner in group:
            if (
                not isinstance(corner, list)
                or len(corner) != 2
                or not all(isinstance(c, int) and not isinstance(c, bool) for c in corner)
            ):
                raise SceneConfigError(f"`{field_name}[{idx}]` corners must be [x, y] integer pairs")
            corners.append((corner[0], corner[1]))
        groups.append(tuple(corners))
    return tuple(groups)
