# renderer/raytracer.py
import logging
import os
import time
from concurrent import futures
import numpy as np
from core.vector import Vector3
from core.utils import make_rng, random_double
from renderer.integrator import estimate_radiance, sky_gradient

logger = logging.getLogger(__name__)

MAX_BOUNCES = 50

# Scene shipped to each worker process once, by the pool initializer.
_worker_scene = None

def _init_worker(scene):
    global _worker_scene
    _worker_scene = scene

def render_row(scene, y: int, seed_seq) -> np.ndarray:
    """
    Renders image row y (0 is the top) with samples_per_pixel paths per
    pixel and returns the summed, not averaged, radiance as a (width, 3) array.
    """
    camera, world, lights, background, width, height, samples, max_depth = scene
    rng = make_rng(seed_seq)
    row = np.zeros((width, 3), dtype=np.float64)
    j = height - 1 - y
    for i in range(width):
        color = Vector3(0.0, 0.0, 0.0)
        for _ in range(samples):
            s = (i + random_double(rng)) / width
            t = (j + random_double(rng)) / height
            ray = camera.get_ray(s, t, rng)
            color = color + estimate_radiance(ray, background, world, max_depth, rng, lights)
        row[i] = (color.x, color.y, color.z)
    return row

def _render_worker_row(args) -> np.ndarray:
    y, seed_seq = args
    return render_row(_worker_scene, y, seed_seq)

class Renderer:
    """
    Progressive CPU path tracer.

    Every call to render_frame() adds N samples per pixel to an accumulation
    buffer and returns the running average. Rows are rendered in a process
    pool; the scene is read-only and each row draws from its own random
    stream derived from (seed, frame), so results depend only on the seed.
    """
    def __init__(self, width: int, height: int, N: int = 16, max_depth: int = MAX_BOUNCES,
                 workers: int = None):
        if width <= 0 or height <= 0:
            raise ValueError(f"Image size must be positive, got {width}x{height}")
        if N <= 0:
            raise ValueError(f"Samples per frame must be positive, got {N}")
        self.width = width
        self.height = height
        self.N = N
        self.max_depth = max_depth
        self.workers = workers if workers is not None else (os.cpu_count() or 1)
        self.accumulation_buffer = np.zeros((height, width, 3), dtype=np.float64)
        self.samples = 0
        self.frame_number = 0

    def reset_accumulation(self):
        """Drop all accumulated samples, e.g. after the scene or camera changed."""
        self.accumulation_buffer.fill(0)
        self.samples = 0
        self.frame_number = 0

    def render_frame(self, camera, world, lights=None, background=sky_gradient,
                     seed: int = 0) -> np.ndarray:
        """
        Adds N samples per pixel and returns the averaged linear image as an
        (height, width, 3) float array, row 0 at the top.
        """
        scene = (camera, world, lights, background,
                 self.width, self.height, self.N, self.max_depth)
        row_seeds = np.random.SeedSequence([seed, self.frame_number]).spawn(self.height)
        tasks = list(enumerate(row_seeds))

        start = time.perf_counter()
        if self.workers <= 1:
            rows = [render_row(scene, y, seed_seq) for y, seed_seq in tasks]
        else:
            with futures.ProcessPoolExecutor(max_workers=self.workers,
                                             initializer=_init_worker,
                                             initargs=(scene,)) as executor:
                rows = list(executor.map(_render_worker_row, tasks))

        self.accumulation_buffer += np.stack(rows)
        self.samples += self.N
        self.frame_number += 1
        logger.info("Frame %d: %dx%d, %d spp total, %.2fs",
                    self.frame_number, self.width, self.height, self.samples,
                    time.perf_counter() - start)
        return self.image()

    def image(self) -> np.ndarray:
        if self.samples == 0:
            return np.zeros_like(self.accumulation_buffer)
        return self.accumulation_buffer / self.samples
