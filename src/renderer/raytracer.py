# renderer/raytracer.py
import logging
import random
import time
from concurrent import futures
from typing import Callable, Optional
import numpy as np
from camera.camera import Camera
from geometry.hittable import Hittable
from renderer.integrator import Integrator

logger = logging.getLogger(__name__)

SAMPLES_PER_PIXEL = 50
# Large odd multiplier so neighbouring seeds do not share row streams.
SEED_STRIDE = 1_000_003

# Scene handed to each worker process once, instead of once per row.
_worker_state = None

def row_rng(seed: int, row: int) -> random.Random:
    """
    Random stream owned by one image row. Depends only on (seed, row), so an
    image is reproducible however its rows are distributed over workers.
    """
    return random.Random(seed * SEED_STRIDE + row)

def render_row(camera: Camera, integrator: Integrator, world: Hittable,
               row: int, samples_per_pixel: int, seed: int) -> np.ndarray:
    """
    Averaged linear radiance of every pixel in one row, shape (width, 3).
    """
    rng = row_rng(seed, row)
    pixels = np.zeros((camera.image_width, 3), dtype=np.float32)
    for col in range(camera.image_width):
        r = g = b = 0.0
        for _ in range(samples_per_pixel):
            ray = camera.get_ray(row, col, rng)
            color = integrator.radiance(ray, world, 0, rng)
            r += color.x
            g += color.y
            b += color.z
        pixels[col] = (r / samples_per_pixel, g / samples_per_pixel, b / samples_per_pixel)
    return pixels

def _init_worker(camera, integrator, world, samples_per_pixel, seed):
    global _worker_state
    _worker_state = (camera, integrator, world, samples_per_pixel, seed)

def _render_row_in_worker(row: int):
    camera, integrator, world, samples_per_pixel, seed = _worker_state
    return row, render_row(camera, integrator, world, row, samples_per_pixel, seed)

class Renderer:
    """
    Per-pixel sampling loop around the integrator.

    Rows are independent units of work: the scene is only read, and every row
    owns its random stream. With workers > 1 rows are spread over a process
    pool; the image is identical to a single-process render.
    """
    def __init__(self, camera: Camera, integrator: Integrator,
                 samples_per_pixel: int = SAMPLES_PER_PIXEL, seed: int = 0, workers: int = 1):
        if samples_per_pixel < 1:
            raise ValueError(f"samples_per_pixel must be at least 1, got {samples_per_pixel}")
        self.camera = camera
        self.integrator = integrator
        self.samples_per_pixel = samples_per_pixel
        self.seed = seed
        self.workers = max(1, workers)

    def render(self, world: Hittable,
               on_row: Optional[Callable[[int, np.ndarray], None]] = None) -> np.ndarray:
        """
        Renders the scene to a (height, width, 3) float32 array of linear
        radiance. on_row(row, image) is called after each finished row.
        """
        width = self.camera.image_width
        height = self.camera.image_height
        image = np.zeros((height, width, 3), dtype=np.float32)
        logger.info("Rendering %dx%d, %d samples per pixel, %d worker(s)",
                    width, height, self.samples_per_pixel, self.workers)
        start = time.perf_counter()

        for done, (row, pixels) in enumerate(self._rows(world), start=1):
            image[row] = pixels
            logger.debug("Row %4d / %4d", done, height)
            if on_row is not None:
                on_row(row, image)

        logger.info("Render finished in %.2f s", time.perf_counter() - start)
        return image

    def _rows(self, world: Hittable):
        height = self.camera.image_height
        if self.workers == 1:
            for row in range(height):
                yield row, render_row(self.camera, self.integrator, world, row,
                                      self.samples_per_pixel, self.seed)
            return

        with futures.ProcessPoolExecutor(
                max_workers=self.workers,
                initializer=_init_worker,
                initargs=(self.camera, self.integrator, world,
                          self.samples_per_pixel, self.seed)) as executor:
            yield from executor.map(_render_row_in_worker, range(height))
