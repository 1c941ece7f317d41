# renderer/raytracer.py
import logging
import time
from concurrent.futures import ProcessPoolExecutor
from typing import List, Optional

import numpy as np
from tqdm import tqdm

from core.color import PixelColor
from core.vector import Vector3
from .integrator import ray_color
from .tone_mapping import tone_map

logger = logging.getLogger(__name__)


def row_seed_sequences(seed: Optional[int], height: int) -> List[np.random.SeedSequence]:
    """
    One independent seed per scanline, so a row renders the same no matter
    which worker picks it up or in what order.
    """
    return np.random.SeedSequence(seed).spawn(height)


def row_rng(seed: Optional[int], height: int, row: int) -> np.random.Generator:
    """The random stream Renderer.render uses for the given row."""
    return np.random.default_rng(row_seed_sequences(seed, height)[row])


class Renderer:
    """
    CPU path tracer. The scene and camera are only read while rendering,
    so scanlines are independent and can be farmed out to worker processes.
    """
    def __init__(self, width: int, height: int, samples_per_pixel: int = 16, max_depth: int = 8):
        if width < 1 or height < 1:
            raise ValueError(f"image size must be positive, got {width}x{height}")
        if samples_per_pixel < 1:
            raise ValueError(f"samples_per_pixel must be positive, got {samples_per_pixel}")
        if max_depth < 1:
            raise ValueError(f"max_depth must be positive, got {max_depth}")
        self.width = width
        self.height = height
        self.samples_per_pixel = samples_per_pixel
        self.max_depth = max_depth
        # Linear sample sums of the most recent render, shape (height, width, 3).
        self.accumulation_buffer: Optional[np.ndarray] = None

    def __getstate__(self):
        # Workers only need the sampling parameters.
        state = self.__dict__.copy()
        state["accumulation_buffer"] = None
        return state

    @classmethod
    def from_settings(cls, settings) -> "Renderer":
        return cls(settings.width, settings.height, settings.samples_per_pixel, settings.max_depth)

    def sample_pixel(self, i: int, j: int, camera, world, rng) -> Vector3:
        """
        Sum of samples_per_pixel radiance estimates for pixel (i, j), each
        through a random point of the pixel footprint. Row 0 is the top.
        """
        u_scale = 1.0 / max(self.width - 1, 1)
        v_scale = 1.0 / max(self.height - 1, 1)
        row = self.height - 1 - j
        pixel_color = Vector3(0.0, 0.0, 0.0)
        for _ in range(self.samples_per_pixel):
            s = (i + rng.random()) * u_scale
            t = (row + rng.random()) * v_scale
            ray = camera.get_ray(s, t, rng)
            pixel_color = pixel_color + ray_color(ray, world, self.max_depth, rng)
        return pixel_color

    def render_pixel(self, i: int, j: int, camera, world, rng) -> PixelColor:
        """Renders and tone maps a single pixel."""
        return PixelColor.from_samples(self.sample_pixel(i, j, camera, world, rng),
                                       self.samples_per_pixel)

    def render_row(self, j: int, camera, world, rng) -> np.ndarray:
        """Linear sample sums for scanline j, shape (width, 3)."""
        row = np.empty((self.width, 3), dtype=np.float64)
        for i in range(self.width):
            row[i] = tuple(self.sample_pixel(i, j, camera, world, rng))
        return row

    def render(self, camera, world, seed: Optional[int] = None,
               workers: Optional[int] = None, progress: bool = False) -> np.ndarray:
        """
        Renders the full image and returns it as a (height, width, 3) uint8
        array. The same seed always produces the same image, whatever the
        number of workers.
        """
        seeds = row_seed_sequences(seed, self.height)
        logger.info("Rendering %dx%d, %d spp, max depth %d, %s worker(s), seed entropy %s",
                    self.width, self.height, self.samples_per_pixel, self.max_depth,
                    workers or 1, seeds[0].entropy if seeds else seed)
        start = time.perf_counter()
        accumulated = np.zeros((self.height, self.width, 3), dtype=np.float64)

        bar = tqdm(total=self.height, desc="Scanlines", unit="row", disable=not progress)
        try:
            if workers is not None and workers > 1:
                with ProcessPoolExecutor(max_workers=workers, initializer=_init_worker,
                                         initargs=(self, camera, world)) as pool:
                    for j, row in pool.map(_render_row_task, range(self.height), seeds):
                        accumulated[j] = row
                        bar.update(1)
            else:
                for j, row_seed in enumerate(seeds):
                    accumulated[j] = self.render_row(
                        j, camera, world, np.random.default_rng(row_seed))
                    logger.debug("Finished scanline %d/%d", j + 1, self.height)
                    bar.update(1)
        finally:
            bar.close()

        image = tone_map(accumulated, self.samples_per_pixel)
        self.accumulation_buffer = accumulated
        logger.info("Render finished in %.2fs", time.perf_counter() - start)
        return image


# Per-process state for parallel rendering; set once by the pool initializer
# so the scene is pickled once per worker instead of once per row.
_worker_scene = None


def _init_worker(renderer: Renderer, camera, world) -> None:
    global _worker_scene
    _worker_scene = (renderer, camera, world)


def _render_row_task(j: int, row_seed: np.random.SeedSequence):
    renderer, camera, world = _worker_scene
    return j, renderer.render_row(j, camera, world, np.random.default_rng(row_seed))
