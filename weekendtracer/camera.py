"""A thin-lens camera that generates primary rays for each pixel."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from .ray import Ray
from .util import degrees_to_radians, random_double
from .vec3 import Vec3, cross, normalize, random_on_unit_disk


@dataclass
class CameraParams:
    aspect_ratio: float = 16.0 / 9.0
    image_width: int = 400
    lookfrom: Vec3 = field(default_factory=Vec3)
    lookat: Vec3 = field(default_factory=lambda: Vec3(0.0, 0.0, -1.0))
    samples_per_pixel: int = 10
    max_depth: int = 10
    vfov: float = 90.0
    vup: Vec3 = field(default_factory=lambda: Vec3(0.0, 1.0, 0.0))
    defocus_angle: float = 0.0
    focus_dist: float = 10.0


class Camera:
    """Positions the viewport and casts jittered, optionally defocused rays."""

    def __init__(self, params: CameraParams | None = None) -> None:
        params = params if params is not None else CameraParams()
        self.image_width = params.image_width
        self.image_height = max(int(params.image_width / params.aspect_ratio), 1)
        self.samples_per_pixel = params.samples_per_pixel
        self.max_depth = params.max_depth
        self.pixel_color_scale = 1.0 / params.samples_per_pixel

        self._center = params.lookfrom
        self._defocus_angle = degrees_to_radians(params.defocus_angle)
        focus_dist = params.focus_dist

        h = math.tan(degrees_to_radians(params.vfov) / 2.0)
        viewport_height = 2 * h * focus_dist
        viewport_width = viewport_height * self.image_width / self.image_height

        w = normalize(params.lookfrom - params.lookat)
        u = normalize(cross(params.vup, w))
        v = cross(w, u)

        viewport_u = viewport_width * u
        viewport_v = viewport_height * -v
        self._pixel_delta_u = viewport_u / self.image_width
        self._pixel_delta_v = viewport_v / self.image_height

        upper_left = self._center - focus_dist * w - viewport_u / 2 - viewport_v / 2
        self._pixel00_loc = upper_left + 0.5 * (self._pixel_delta_u + self._pixel_delta_v)

        defocus_radius = focus_dist * math.tan(self._defocus_angle / 2.0)
        self._defocus_disk_u = u * defocus_radius
        self._defocus_disk_v = v * defocus_radius

    def cast_ray_at_pixel_loc(self, row: int, col: int) -> Ray:
        """A ray through a random point of pixel (row, col) at a random time."""
        offset_x = 0.5 - random_double()
        offset_y = 0.5 - random_double()
        pixel_center = (
            self._pixel00_loc
            + (row + offset_x) * self._pixel_delta_v
            + (col + offset_y) * self._pixel_delta_u
        )
        origin = self._center if self._defocus_angle <= 0 else self._defocus_disk_sample()
        return Ray(origin, pixel_center - origin, random_double())

    def _defocus_disk_sample(self) -> Vec3:
        p = random_on_unit_disk()
        return self._center + p.x * self._defocus_disk_u + p.y * self._defocus_disk_v