# main.py
import argparse
import logging
import random
import sys
from dataclasses import replace
from typing import List, Optional

from scene.config import SceneConfigError, load_config, load_config_or_default
from scene.builder import build_camera, build_integrator, build_world
from renderer.raytracer import Renderer
from renderer.tone_mapping import auto_exposure_tone_mapping, gamma_to_8bit, reinhard_tone_mapping
from renderer.output import save_image

# Read when --config is not given; a missing file means the default scene.
DEFAULT_CONFIG = "scene.yaml"

logger = logging.getLogger("pathtracer")

def setup_logging(level: str = "INFO") -> None:
    """Configure structured logging."""
    fmt = "%(name)s [%(levelname)s] %(message)s"
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=fmt,
        stream=sys.stdout,
    )

def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse CLI arguments."""
    parser = argparse.ArgumentParser(
        prog="pathtracer",
        description="Offline Monte Carlo path tracer",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  pathtracer\n"
            "  pathtracer --config configs/cornell_box.yaml --samples 200 --workers 8\n"
            "  pathtracer --config configs/cornell_box.yaml --output cornell.ppm --preview\n"
        ),
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help=f"Scene YAML file (default: {DEFAULT_CONFIG} if present, else the built-in scene)",
    )
    parser.add_argument(
        "--output",
        type=str,
        default="output.png",
        help="Image to write; .ppm gives plain PPM (default: output.png)",
    )
    parser.add_argument("--samples", type=int, default=None, help="Override samples per pixel")
    parser.add_argument("--width", type=int, default=None, help="Override image width in pixels")
    parser.add_argument("--workers", type=int, default=None, help="Override number of worker processes")
    parser.add_argument("--seed", type=int, default=None, help="Override the random seed")
    parser.add_argument(
        "--tone-map",
        type=str,
        default="gamma",
        choices=["gamma", "reinhard", "auto"],
        help="Mapping from linear radiance to 8-bit output (default: gamma)",
    )
    parser.add_argument(
        "--preview",
        action="store_true",
        default=False,
        help="Show the finished image in a window",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: INFO)",
    )
    return parser.parse_args(argv)

def apply_overrides(config, args):
    """Returns config with any command-line overrides applied."""
    render_overrides = {}
    if args.samples is not None:
        render_overrides["samples_per_pixel"] = args.samples
    if args.workers is not None:
        render_overrides["workers"] = args.workers
    if args.seed is not None:
        render_overrides["seed"] = args.seed
    camera = config.camera
    if args.width is not None:
        camera = replace(camera, image_width=args.width)
    return replace(config, camera=camera, render=replace(config.render, **render_overrides))

def main(argv: Optional[List[str]] = None) -> int:
    """Render entry point."""
    args = parse_args(argv)
    setup_logging(args.log_level)

    try:
        if args.config is None:
            config = load_config_or_default(DEFAULT_CONFIG)
        else:
            config = load_config(args.config)
        config = apply_overrides(config, args)

        rng = random.Random(config.render.seed)
        world = build_world(config.objects, rng)
        camera = build_camera(config.camera)
    except (SceneConfigError, FileNotFoundError) as exc:
        logger.error("%s", exc)
        return 2

    renderer = Renderer(
        camera,
        build_integrator(config.render),
        samples_per_pixel=config.render.samples_per_pixel,
        seed=config.render.seed,
        workers=config.render.workers,
    )
    linear = renderer.render(world)

    if args.tone_map == "reinhard":
        rgb8 = reinhard_tone_mapping(linear)
    elif args.tone_map == "auto":
        rgb8 = auto_exposure_tone_mapping(linear)
    else:
        rgb8 = gamma_to_8bit(linear)
    save_image(args.output, rgb8)

    if args.preview:
        from renderer.preview import show_image
        show_image(rgb8, title=args.output)
    return 0

if __name__ == "__main__":
    sys.exit(main())
