"""Surface materials that decide how rays scatter."""

from __future__ import annotations

import math

from .color import Color
from .hittable import HitRecord
from .ray import Ray
from .util import random_double
from .vec3 import dot, normalize, random_unit_vector, reflect, refract


class Material:
    """A surface that absorbs everything."""

    def scatter(self, ray_in: Ray, rec: HitRecord) -> tuple[Color, Ray] | None:
        """Return (attenuation, scattered ray), or None if the ray is absorbed."""
        return None


class Lambertian(Material):
    """Ideal diffuse surface."""

    def __init__(self, albedo: Color) -> None:
        self.albedo = albedo

    def scatter(self, ray_in: Ray, rec: HitRecord) -> tuple[Color, Ray] | None:
        direction = rec.normal + random_unit_vector()
        if direction.near_zero():
            direction = rec.normal
        return self.albedo, Ray(rec.p, direction, ray_in.time)


class Metal(Material):
    """Mirror-like surface; ``fuzz`` (capped at 1) blurs the reflection."""

    def __init__(self, albedo: Color, fuzz: float) -> None:
        self.albedo = albedo
        self.fuzz = fuzz if fuzz < 1 else 1.0

    def scatter(self, ray_in: Ray, rec: HitRecord) -> tuple[Color, Ray] | None:
        reflected = normalize(reflect(ray_in.direction, rec.normal)) + self.fuzz * random_unit_vector()
        scattered = Ray(rec.p, reflected, ray_in.time)
        if dot(scattered.direction, rec.normal) > 0:
            return self.albedo, scattered
        return None


class Dielectric(Material):
    """Clear refracting material such as glass or water."""

    def __init__(self, refraction_index: float) -> None:
        self.refraction_index = refraction_index

    def scatter(self, ray_in: Ray, rec: HitRecord) -> tuple[Color, Ray] | None:
        ri = 1.0 / self.refraction_index if rec.front_face else self.refraction_index
        unit_dir = normalize(ray_in.direction)
        cos_theta = min(dot(-unit_dir, rec.normal), 1.0)
        sin_theta = math.sqrt(max(0.0, 1.0 - cos_theta * cos_theta))
        can_refract = ri * sin_theta <= 1.0

        if can_refract and self.reflectance(cos_theta, ri) <= random_double():
            direction = refract(unit_dir, rec.normal, ri)
        else:
            direction = reflect(unit_dir, rec.normal)
        return Color(1.0, 1.0, 1.0), Ray(rec.p, direction, ray_in.time)

    @staticmethod
    def reflectance(cos_theta: float, refraction_index: float) -> float:
        """Schlick's approximation of reflectance."""
        r0 = (1.0 - refraction_index) / (1.0 + refraction_index)
        r0 = r0 * r0
        return r0 + (1 - r0) * (1.0 - cos_theta) ** 5