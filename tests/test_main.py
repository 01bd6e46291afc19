"""Tests for the command-line entry point."""

import textwrap

from PIL import Image

import main
from scene.config import SceneConfig


def write_scene(tmp_path, text):
    path = tmp_path / "scene.yaml"
    path.write_text(textwrap.dedent(text), encoding="utf-8")
    return path


class TestArguments:
    """Tests for argument parsing and overrides."""

    def test_defaults(self):
        args = main.parse_args([])
        assert args.config is None
        assert args.output == "output.png"
        assert args.tone_map == "gamma"
        assert not args.preview

    def test_overrides(self):
        args = main.parse_args(["--samples", "3", "--width", "16", "--workers", "2", "--seed", "9"])
        config = main.apply_overrides(SceneConfig(), args)
        assert config.render.samples_per_pixel == 3
        assert config.render.workers == 2
        assert config.render.seed == 9
        assert config.camera.image_width == 16
        # unrelated settings are untouched
        assert config.render.max_depth == 50


class TestMain:
    """End-to-end runs on tiny images."""

    def test_render_config_file(self, tmp_path):
        scene = write_scene(tmp_path, """
            camera:
              look_from: [0, 0, 3]
              look_at: [0, 0, 0]
              image_width: 8
              aspect_ratio: 2.0
            render:
              samples_per_pixel: 1
              max_depth: 4
            objects:
              - type: sphere
                center: [0, 0, 0]
                radius: 2
                material: {type: diffuse_light, color: [1, 1, 1], strength: 1}
        """)
        output = tmp_path / "out.png"
        assert main.main(["--config", str(scene), "--output", str(output)]) == 0
        with Image.open(output) as img:
            assert img.size == (8, 4)
            # the light sphere covers the image center
            assert img.getpixel((4, 2)) == (255, 255, 255)

    def test_default_scene_when_no_config(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        output = tmp_path / "default.ppm"
        assert main.main(["--output", str(output), "--samples", "1", "--width", "8",
                          "--tone-map", "reinhard"]) == 0
        assert output.read_text(encoding="ascii").startswith("P3\n8 4\n255\n")

    def test_auto_exposure_tone_map(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        output = tmp_path / "auto.png"
        assert main.main(["--output", str(output), "--samples", "1", "--width", "8",
                          "--tone-map", "auto"]) == 0
        with Image.open(output) as img:
            assert img.size == (8, 4)

    def test_missing_config_exits_with_error(self, tmp_path):
        assert main.main(["--config", str(tmp_path / "missing.yaml")]) == 2

    def test_invalid_config_exits_with_error(self, tmp_path):
        scene = write_scene(tmp_path, """
            objects:
              - type: sphere
                center: [0, 0, 0]
                radius: 1
                shininess: 3
        """)
        assert main.main(["--config", str(scene), "--output", str(tmp_path / "x.png")]) == 2
        assert not (tmp_path / "x.png").exists()
