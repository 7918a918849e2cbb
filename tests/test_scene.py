from __future__ import annotations

from pathlib import Path
import tempfile
import unittest

import numpy as np
from PIL import Image as PILImage

import main as cli
from geometrical_shapes.color import Color
from geometrical_shapes.errors import SceneConfigError
from geometrical_shapes.rng import NumpyRandomSource
from geometrical_shapes.scene import (
    SceneConfig,
    build_scene,
    load_scene_config,
    render_scene,
    scene_config_from_mapping,
)
from geometrical_shapes.shapes import Circle, Line, Point, Rectangle, Triangle


class SceneConfigTests(unittest.TestCase):
    def test_defaults_reproduce_demo_composition(self) -> None:
        config = SceneConfig()
        self.assertEqual((config.width, config.height), (1000, 1000))
        self.assertEqual(config.rectangles, (((150, 150), (50, 50)),))
        self.assertEqual(config.triangles, (((500, 500), (250, 700), (700, 800)),))
        self.assertEqual(config.random_circles, 49)
        self.assertEqual(config.output, Path("image.png"))

    def test_mapping_parses_all_fields(self) -> None:
        config = scene_config_from_mapping(
            {
                "width": 64,
                "height": 32,
                "random_lines": 2,
                "random_points": 0,
                "random_circles": 3,
                "rectangles": [[[1, 1], [10, 10]]],
                "triangles": [],
                "seed": 8,
                "output": "out/scene.png",
                "background": [255, 255, 255],
            }
        )
        self.assertEqual((config.width, config.height), (64, 32))
        self.assertEqual(config.rectangles, (((1, 1), (10, 10)),))
        self.assertEqual(config.triangles, ())
        self.assertEqual(config.seed, 8)
        self.assertEqual(config.output, Path("out/scene.png"))
        self.assertEqual(config.background, Color(255, 255, 255, 255))

    def test_mapping_rejects_bad_fields(self) -> None:
        bad_inputs = [
            {"colour": 1},
            {"width": "wide"},
            {"width": 0},
            {"random_circles": -1},
            {"seed": True},
            {"output": ""},
            {"background": [300, 0, 0]},
            {"rectangles": [[[1, 1]]]},
            {"triangles": [[[0, 0], [1, 1], [2, "x"]]]},
        ]
        for raw in bad_inputs:
            with self.subTest(raw=raw):
                with self.assertRaises(SceneConfigError):
                    scene_config_from_mapping(raw)

    def test_with_overrides_skips_none(self) -> None:
        config = SceneConfig(width=10, height=10).with_overrides(width=20, height=None, seed=None)
        self.assertEqual((config.width, config.height, config.seed), (20, 10, None))

    def test_load_toml_resolves_output_relative_to_config(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            root = Path(td)
            (root / "scene.toml").write_text(
                "\n".join(
                    [
                        "[scene]",
                        "width = 40",
                        "height = 30",
                        "seed = 3",
                        'output = "renders/a.png"',
                        "rectangles = [[[2, 2], [20, 12]]]",
                    ]
                ),
                encoding="utf-8",
            )
            config = load_scene_config(root / "scene.toml")
            self.assertEqual(config.output, root / "renders" / "a.png")
            self.assertEqual(config.seed, 3)

    def test_load_missing_file_raises(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            with self.assertRaises(FileNotFoundError):
                load_scene_config(Path(td) / "missing.toml")

    def test_load_invalid_toml_raises(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            path = Path(td) / "bad.toml"
            path.write_text("[scene\nwidth = ", encoding="utf-8")
            with self.assertRaises(SceneConfigError):
                load_scene_config(path)


class SceneRenderTests(unittest.TestCase):
    def test_build_scene_order_and_counts(self) -> None:
        config = SceneConfig(width=50, height=40, random_lines=2, random_points=1, random_circles=3)
        shapes = build_scene(config, NumpyRandomSource(seed=4))
        kinds = [type(s) for s in shapes]
        self.assertEqual(kinds, [Line, Line, Point, Rectangle, Triangle, Circle, Circle, Circle])
        self.assertEqual(shapes[3], Rectangle(Point(150, 150), Point(50, 50)))
        for circle in shapes[5:]:
            self.assertLess(circle.radius, 20)

    def test_render_is_deterministic_for_a_seed(self) -> None:
        config = SceneConfig(width=80, height=60, random_circles=5, seed=21)
        a = render_scene(config)
        b = render_scene(config)
        self.assertTrue(np.array_equal(a.to_array(), b.to_array()))
        self.assertTrue(np.any(a.to_array()[:, :, 3] > 0))

    def test_render_clips_shapes_outside_image(self) -> None:
        config = SceneConfig(width=20, height=20, random_lines=0, random_points=0, random_circles=0)
        with self.assertLogs("geometrical_shapes.raster.image", level="WARNING"):
            image = render_scene(config, NumpyRandomSource(seed=0))
        self.assertGreater(image.dropped_writes, 0)


class CliTests(unittest.TestCase):
    def test_render_command_writes_png(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            out = Path(td) / "image.png"
            cli.main(["render", "--width", "64", "--height", "48", "--seed", "3", "--out", str(out)])
            with PILImage.open(out) as loaded:
                self.assertEqual(loaded.size, (64, 48))

    def test_render_command_reads_config(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            root = Path(td)
            (root / "scene.toml").write_text(
                '[scene]\nwidth = 32\nheight = 16\nrandom_circles = 2\nrectangles = []\ntriangles = []\noutput = "x.png"\n',
                encoding="utf-8",
            )
            cli.main(["render", "--config", str(root / "scene.toml"), "--seed", "1"])
            with PILImage.open(root / "x.png") as loaded:
                self.assertEqual(loaded.size, (32, 16))


if __name__ == "__main__":
    unittest.main()
