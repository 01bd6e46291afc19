# renderer/output.py
import logging
from pathlib import Path
import numpy as np
from PIL import Image

logger = logging.getLogger(__name__)

def _check_rgb8(rgb8) -> np.ndarray:
    rgb8 = np.asarray(rgb8)
    if rgb8.ndim != 3 or rgb8.shape[2] != 3:
        raise ValueError(f"Expected a (height, width, 3) image, got shape {rgb8.shape}")
    if rgb8.dtype != np.uint8:
        raise ValueError(f"Expected uint8 pixels, got {rgb8.dtype}")
    return rgb8

def write_ppm(path, rgb8):
    """Plain-text (P3) PPM, one pixel per line."""
    rgb8 = _check_rgb8(rgb8)
    height, width = rgb8.shape[:2]
    with open(path, "w", encoding="ascii") as f:
        f.write(f"P3\n{width} {height}\n255\n")
        for row in rgb8:
            for r, g, b in row:
                f.write(f"{r} {g} {b}\n")

def save_image(path, rgb8) -> Path:
    """
    Writes an 8-bit RGB image. The format follows the file suffix; .ppm is
    written as plain PPM, anything else goes through Pillow.
    """
    path = Path(path)
    rgb8 = _check_rgb8(rgb8)
    if path.parent and not path.parent.exists():
        path.parent.mkdir(parents=True, exist_ok=True)

    if path.suffix.lower() == ".ppm":
        write_ppm(path, rgb8)
    else:
        Image.fromarray(rgb8).save(path)
    logger.info("Saved %dx%d image to %s", rgb8.shape[1], rgb8.shape[0], path)
    return path
