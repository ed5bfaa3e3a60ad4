"""Three-component vectors and the geometry helpers built on them."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import Iterator

from .util import random_double


@dataclass(frozen=True, slots=True)
class Vec3:
    """An immutable 3D vector; also used for points in space."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __getitem__(self, index: int) -> float:
        return (self.x, self.y, self.z)[index]

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def __add__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, t: float) -> Vec3:
        if not isinstance(t, Real):
            return NotImplemented
        return Vec3(self.x * t, self.y * t, self.z * t)

    __rmul__ = __mul__

    def __truediv__(self, t: float) -> Vec3:
        if not isinstance(t, Real):
            return NotImplemented
        return self * (1 / t)

    def __str__(self) -> str:
        return f"[{self.x} {self.y} {self.z}]"

    def length_sqr(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def length(self) -> float:
        return math.sqrt(self.length_sqr())

    def near_zero(self) -> bool:
        """True when every component is within 1e-8 of zero."""
        e = 1e-8
        return abs(self.x) < e and abs(self.y) < e and abs(self.z) < e

    @staticmethod
    def random(low: float = 0.0, high: float = 1.0) -> Vec3:
        return Vec3(random_double(low, high), random_double(low, high), random_double(low, high))


Point3 = Vec3


def dot(u: Vec3, v: Vec3) -> float:
    return u.x * v.x + u.y * v.y + u.z * v.z


def cross(u: Vec3, v: Vec3) -> Vec3:
    return Vec3(
        u.y * v.z - u.z * v.y,
        u.z * v.x - u.x * v.z,
        u.x * v.y - u.y * v.x,
    )


def normalize(v: Vec3) -> Vec3:
    return v / v.length()


def random_unit_vector() -> Vec3:
    """Uniformly distributed vector on the unit sphere."""
    while True:
        p = Vec3.random()
        length_sqr = p.length_sqr()
        if 1.0e-160 < length_sqr <= 1.0:
            return p / math.sqrt(length_sqr)


def random_on_hemisphere(normal: Vec3) -> Vec3:
    on_unit_sphere = random_unit_vector()
    if dot(on_unit_sphere, normal) > 0.0:
        return on_unit_sphere
    return -on_unit_sphere


def random_on_unit_disk() -> Vec3:
    """Random point strictly inside the unit disk in the z = 0 plane."""
    while True:
        p = Vec3(random_double(-1.0, 1.0), random_double(-1.0, 1.0), 0.0)
        if p.length_sqr() < 1:
            return p


def reflect(v: Vec3, n: Vec3) -> Vec3:
    return v - 2 * dot(v, n) * n


def refract(v: Vec3, n: Vec3, etai_over_etat: float) -> Vec3:
    cos_theta = min(dot(-v, n), 1.0)
    r_out_perp = etai_over_etat * (v + cos_theta * n)
    r_out_parallel = -math.sqrt(abs(1.0 - r_out_perp.length_sqr())) * n
    return r_out_perp + r_out_parallel