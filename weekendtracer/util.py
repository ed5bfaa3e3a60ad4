"""Numeric helpers: constants, angle conversion, random numbers and intervals."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from typing import ClassVar

INFINITY = math.inf
PI = 3.1415926535897932385

_rng = random.Random()


def seed(value: int | None) -> None:
    """Reseed the generator shared by every random helper in the package."""
    _rng.seed(value)


def degrees_to_radians(degrees: float) -> float:
    """Convert an angle in degrees to radians."""
    return degrees * PI / 180.0


def random_double(low: float = 0.0, high: float = 1.0) -> float:
    """Return a uniformly distributed float in [low, high)."""
    return low + (high - low) * _rng.random()


@dataclass(frozen=True)
class Interval:
    """A closed range of real numbers; empty by default."""

    min: float = INFINITY
    max: float = -INFINITY

    EMPTY: ClassVar[Interval]
    UNIVERSE: ClassVar[Interval]

    def span(self) -> float:
        return self.max - self.min

    def contains(self, x: float) -> bool:
        return self.min <= x <= self.max

    def surrounds(self, x: float) -> bool:
        return self.min < x < self.max

    def clamp(self, x: float) -> float:
        if x <= self.min:
            return self.min
        if x >= self.max:
            return self.max
        return x


Interval.EMPTY = Interval(INFINITY, -INFINITY)
Interval.UNIVERSE = Interval(-INFINITY, INFINITY)