# renderer/raytracer.py
import logging
import random
import threading
import time
from typing import List, Tuple
import numpy as np
from core.errors import ConstructionError, RenderError
from core.vector import Vector3
from geometry.hittable import Hittable
from renderer.integrator import ray_color
from renderer.tone_mapping import color_to_pixel

logger = logging.getLogger(__name__)

DEFAULT_THREADS = 8

class ImageBlock:
    """
    Rows [start_row, end_row) of the output image. Filled one row at a time
    by the worker that owns it, then handed over for assembly.
    """
    def __init__(self, start_row: int, end_row: int, width: int):
        self.start_row = start_row
        self.end_row = end_row
        self.width = width
        self.rows: List[np.ndarray] = []

    @property
    def declared_rows(self) -> int:
        return self.end_row - self.start_row

    def append_row(self, row: np.ndarray):
        self.rows.append(row)

    def to_array(self) -> np.ndarray:
        """
        Stack the finished rows into a (rows, width, 3) uint8 array.

        Raises:
            ConstructionError: If the rows do not match the declared bounds.
        """
        if len(self.rows) != self.declared_rows:
            raise ConstructionError(
                f"block [{self.start_row}, {self.end_row}) holds {len(self.rows)} rows, "
                f"expected {self.declared_rows}")
        for row in self.rows:
            if row.shape != (self.width, 3):
                raise ConstructionError(
                    f"block [{self.start_row}, {self.end_row}) has a row of shape "
                    f"{row.shape}, expected {(self.width, 3)}")
        if not self.rows:
            return np.zeros((0, self.width, 3), dtype=np.uint8)
        return np.stack(self.rows).astype(np.uint8, copy=False)

    def __repr__(self) -> str:
        return f"ImageBlock({self.start_row}, {self.end_row}, rows={len(self.rows)})"

def split_rows(height: int, n_blocks: int) -> List[Tuple[int, int]]:
    """
    Cut [0, height) into n_blocks contiguous runs of equal size; the rows
    left over by the division go to the last block.
    """
    if n_blocks < 1 or n_blocks > height:
        raise ConstructionError(f"cannot split {height} rows into {n_blocks} blocks")
    block_size = height // n_blocks
    bounds = []
    for i in range(n_blocks):
        start = i * block_size
        end = height if i == n_blocks - 1 else start + block_size
        bounds.append((start, end))
    return bounds

def render_block(block: ImageBlock, camera, world: Hittable, image_width: int,
                 image_height: int, samples_per_pixel: int, max_depth: int):
    """
    Render every pixel of the block's rows. Row 0 is the top of the image.
    """
    u_scale = max(image_width - 1, 1)
    v_scale = max(image_height - 1, 1)
    for j in range(block.start_row, block.end_row):
        row = np.empty((image_width, 3), dtype=np.uint8)
        y = image_height - 1 - j
        for i in range(image_width):
            pixel_color = Vector3(0.0, 0.0, 0.0)
            for _ in range(samples_per_pixel):
                u = (i + random.random()) / u_scale
                v = (y + random.random()) / v_scale
                ray = camera.get_ray(u, v)
                pixel_color = pixel_color + ray_color(ray, world, max_depth)
            row[i] = color_to_pixel(pixel_color, samples_per_pixel)
        block.append_row(row)

def assemble_image(blocks: List[ImageBlock], width: int, height: int) -> np.ndarray:
    """
    Place each block's rows at its recorded start row. The order of `blocks`
    does not matter, but together they must cover every row exactly once.
    """
    image = np.zeros((height, width, 3), dtype=np.uint8)
    covered = np.zeros(height, dtype=bool)
    for block in blocks:
        if block.width != width:
            raise ConstructionError(f"{block!r} is {block.width} pixels wide, image is {width}")
        if block.start_row < 0 or block.end_row > height or block.start_row > block.end_row:
            raise ConstructionError(f"{block!r} lies outside an image of height {height}")
        if covered[block.start_row:block.end_row].any():
            raise ConstructionError(f"{block!r} overlaps another block")
        image[block.start_row:block.end_row] = block.to_array()
        covered[block.start_row:block.end_row] = True
    if not covered.all():
        missing = int(np.flatnonzero(~covered)[0])
        raise ConstructionError(f"no block covers row {missing}")
    return image

class Renderer:
    """
    Renders a scene with one thread per block of image rows.

    The world (usually a BVH root) and the camera are only read while
    rendering, so every worker shares the same objects. The sole shared
    mutable state is the list of finished blocks, guarded by one lock that
    each worker takes once.
    """
    def __init__(self, width: int, height: int, samples_per_pixel: int = 100,
                 max_depth: int = 50, n_threads: int = DEFAULT_THREADS):
        if width < 1 or height < 1:
            raise ConstructionError(f"invalid image size {width}x{height}")
        if samples_per_pixel < 1:
            raise ConstructionError(f"samples_per_pixel must be positive, got {samples_per_pixel}")
        if n_threads < 1:
            raise ConstructionError(f"n_threads must be positive, got {n_threads}")
        self.width = width
        self.height = height
        self.samples_per_pixel = samples_per_pixel
        self.max_depth = max_depth
        # Never more blocks than rows.
        self.n_threads = min(n_threads, height)

    def render_block(self, block: ImageBlock, world: Hittable, camera):
        render_block(block, camera, world, self.width, self.height,
                     self.samples_per_pixel, self.max_depth)

    def render(self, world: Hittable, camera) -> np.ndarray:
        """
        Render the image and return it as a (height, width, 3) uint8 array.

        Raises:
            RenderError: If any worker failed. The remaining workers are still
                joined first and no partial image is returned.
        """
        finished: List[ImageBlock] = []
        failures = []
        lock = threading.Lock()

        def work(block: ImageBlock):
            try:
                self.render_block(block, world, camera)
            except Exception as exc:
                with lock:
                    failures.append((block, exc))
                return
            with lock:
                finished.append(block)
            logger.debug("Finished rows %d-%d", block.start_row, block.end_row)

        logger.info("Rendering %dx%d, %d spp, depth %d, %d threads",
                    self.width, self.height, self.samples_per_pixel,
                    self.max_depth, self.n_threads)
        started = time.perf_counter()

        threads = []
        for start, end in split_rows(self.height, self.n_threads):
            block = ImageBlock(start, end, self.width)
            threads.append(threading.Thread(target=work, args=(block,),
                                            name=f"render-rows-{start}-{end}"))
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        if failures:
            block, exc = failures[0]
            raise RenderError(
                f"worker for rows [{block.start_row}, {block.end_row}) failed: {exc}") from exc

        image = assemble_image(finished, self.width, self.height)
        logger.info("Render finished in %.2fs", time.perf_counter() - started)
        return image

def render(world: Hittable, camera, width: int, height: int,
           samples_per_pixel: int, max_depth: int,
           n_threads: int = DEFAULT_THREADS) -> np.ndarray:
    """Render `world` through `camera` into a (height, width, 3) uint8 array."""
    renderer = Renderer(width, height, samples_per_pixel, max_depth, n_threads)
    return renderer.render(world, camera)
