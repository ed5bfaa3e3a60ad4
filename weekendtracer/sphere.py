"""Spheres, optionally moving linearly over the shutter interval."""

from __future__ import annotations

import math

from .hittable import HitRecord, Hittable
from .material import Material
from .ray import Ray
from .util import Interval
from .vec3 import Vec3, dot


class Sphere(Hittable):
    """A sphere; given ``center2`` it moves from ``center`` at t=0 to ``center2`` at t=1."""

    def __init__(
        self,
        center: Vec3,
        radius: float,
        material: Material | None,
        center2: Vec3 | None = None,
    ) -> None:
        motion = Vec3() if center2 is None else center2 - center
        self._path = Ray(center, motion)
        self.radius = max(radius, 0.0)
        self.material = material

    def center_at(self, time: float) -> Vec3:
        return self._path.at(time)

    def hit(self, ray: Ray, ray_t: Interval) -> HitRecord | None:
        current_center = self._path.at(ray.time)
        diff = current_center - ray.origin
        a = ray.direction.length_sqr()
        h = dot(ray.direction, diff)
        c = diff.length_sqr() - self.radius * self.radius
        discriminant = h * h - a * c
        if discriminant < 0:
            return None

        sqrtd = math.sqrt(discriminant)
        root = (h - sqrtd) / a
        if not ray_t.surrounds(root):
            root = (h + sqrtd) / a
            if not ray_t.surrounds(root):
                return None

        p = ray.at(root)
        rec = HitRecord(p=p, t=root, mat=self.material)
        rec.set_face_normal(ray, (p - current_center) / self.radius)
        return rec