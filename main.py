from __future__ import annotations

import argparse
import logging
from pathlib import Path

from geometrical_shapes.raster import save_png
from geometrical_shapes.scene import SceneConfig, load_scene_config, render_scene


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="geometrical-shapes")
    sub = parser.add_subparsers(dest="command", required=True)

    render = sub.add_parser("render", help="Draw the configured scene and save it as PNG.")
    render.add_argument("--config", type=Path, default=None, help="TOML file with a [scene] table.")
    render.add_argument("--width", type=int, default=None)
    render.add_argument("--height", type=int, default=None)
    render.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for random shapes and circle colors. Default: config, then GEOMETRICAL_SHAPES_SEED.",
    )
    render.add_argument("--out", type=Path, default=None, help="Output PNG path. Default: image.png.")
    render.add_argument("--log-level", choices=["DEBUG", "INFO", "WARNING", "ERROR"], default="WARNING")
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")

    if args.command == "render":
        config = load_scene_config(args.config) if args.config is not None else SceneConfig()
        config = config.with_overrides(width=args.width, height=args.height, seed=args.seed, output=args.out)
        image = render_scene(config)
        out = save_png(image, config.output)
        print(f"render complete: size={image.width}x{image.height} out={out}")
        return

    raise RuntimeError(f"unsupported command: {args.command}")


if __name__ == "__main__":
    main()
