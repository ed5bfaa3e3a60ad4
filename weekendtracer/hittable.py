"""Ray intersection records and the interface every scene object provides."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .ray import Ray
from .util import Interval
from .vec3 import Vec3, dot

if TYPE_CHECKING:
    from .material import Material


@dataclass
class HitRecord:
    """Where and how a ray struck a surface."""

    p: Vec3 = field(default_factory=Vec3)
    normal: Vec3 = field(default_factory=Vec3)
    t: float = 0.0
    front_face: bool = False
    mat: Material | None = None

    def set_face_normal(self, ray: Ray, outward_normal: Vec3) -> None:
        """Store a normal that always opposes the incoming ray.

        ``outward_normal`` is assumed to have unit length.
        """
        self.front_face = dot(ray.direction, outward_normal) < 0
        self.normal = outward_normal if self.front_face else -outward_normal


class Hittable(ABC):
    """Anything a ray can intersect."""

    @abstractmethod
    def hit(self, ray: Ray, ray_t: Interval) -> HitRecord | None:
        """Return the nearest hit with t strictly inside ``ray_t``, or None."""


class HittableList(Hittable):
    """A collection of objects hit-tested as one."""

    def __init__(self, obj: Hittable | None = None) -> None:
        self.objs: list[Hittable] = []
        if obj is not None:
            self.add(obj)

    def __len__(self) -> int:
        return len(self.objs)

    def __iter__(self):
        return iter(self.objs)

    def add(self, obj: Hittable) -> None:
        self.objs.append(obj)

    def clear(self) -> None:
        self.objs.clear()

    def hit(self, ray: Ray, ray_t: Interval) -> HitRecord | None:
        closest: HitRecord | None = None
        closest_so_far = ray_t.max
        for obj in self.objs:
            rec = obj.hit(ray, Interval(ray_t.min, closest_so_far))
            if rec is not None:
                closest_so_far = rec.t
                closest = rec
        return closest