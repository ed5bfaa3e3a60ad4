"""Rays with an origin, a direction and a time stamp."""

from __future__ import annotations

from dataclasses import dataclass, field

from .vec3 import Vec3


@dataclass(frozen=True, slots=True)
class Ray:
    """A half-line origin + t * direction, cast at a given time."""

    origin: Vec3 = field(default_factory=Vec3)
    direction: Vec3 = field(default_factory=Vec3)
    time: float = 0.0

    def at(self, t: float) -> Vec3:
        return self.origin + self.direction * t