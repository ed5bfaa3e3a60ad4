"""Path tracing of a scene into an image, split across worker threads."""

from __future__ import annotations

import functools
import sys
import time
from typing import Callable, TextIO

from .camera import Camera
from .color import Color
from .hittable import Hittable
from .image import Image, ImageChunk
from .ray import Ray
from .thread_pool import TaskGenerator, ThreadPool
from .util import INFINITY, Interval
from .vec3 import normalize

_WHITE = Color(1.0, 1.0, 1.0)
_SKY_BLUE = Color(0.5, 0.7, 1.0)


def ray_color(ray: Ray, world: Hittable, depth: int, max_depth: int) -> Color:
    """Colour seen along ``ray``, following scattered rays up to ``max_depth`` bounces."""
    if depth >= max_depth:
        return Color()

    rec = world.hit(ray, Interval(0.001, INFINITY))
    if rec is not None:
        scattered = rec.mat.scatter(ray, rec) if rec.mat is not None else None
        if scattered is None:
            return Color()
        attenuation, next_ray = scattered
        return attenuation * ray_color(next_ray, world, depth + 1, max_depth)

    unit_direction = normalize(ray.direction)
    a = 0.5 * (unit_direction.y + 1.0)
    return (1.0 - a) * _WHITE + a * _SKY_BLUE


def render_chunk(cam: Camera, scene: Hittable, chunk: ImageChunk) -> None:
    """Trace every pixel of ``chunk`` and store the averaged colours."""
    for i in range(chunk.x, chunk.x + chunk.height):
        for j in range(chunk.y, chunk.y + chunk.width):
            pixel_color = Color()
            for _ in range(cam.samples_per_pixel):
                pixel_color += ray_color(cam.cast_ray_at_pixel_loc(i, j), scene, 0, cam.max_depth)
            chunk.pixels[i][j] = pixel_color * cam.pixel_color_scale


class RenderTaskGenerator(TaskGenerator):
    """Hands out one render task per image chunk, in order."""

    def __init__(self, img: Image, cam: Camera, scene: Hittable) -> None:
        self._img = img
        self._cam = cam
        self._scene = scene
        self._current_chunk = 0

    def next(self) -> Callable[[], None] | None:
        if self._current_chunk < self._img.num_chunks:
            chunk = self._img.get(self._current_chunk)
            self._current_chunk += 1
            return functools.partial(render_chunk, self._cam, self._scene, chunk)
        return None

    def has_next(self) -> bool:
        """Always False: completion is signalled by next() returning None."""
        return False


def render(
    cam: Camera,
    scene: Hittable,
    num_threads: int | None = None,
    out: TextIO | None = None,
) -> None:
    """Render ``scene`` through ``cam`` and write a PPM image to ``out``.

    Progress is reported on standard error.
    """
    out = sys.stdout if out is None else out
    img = Image(cam.image_width, cam.image_height, cam.image_width // 16, cam.image_height // 9)
    pool = ThreadPool(RenderTaskGenerator(img, cam, scene), num_threads)

    sys.stderr.write(f"Running on {pool.num_threads} threads...\n")
    while (count := pool.count()) < img.num_chunks and pool.error is None:
        sys.stderr.write(f"\r{100.0 * count / img.num_chunks:.2f}% ")
        sys.stderr.flush()
        time.sleep(0.1)

    pool.join()
    img.write(out)