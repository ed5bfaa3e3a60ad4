"""Linear RGB colours and their conversion to 8-bit output values."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import Iterator

from .util import Interval, random_double

_INTENSITY = Interval(0.0, math.nextafter(1.0, 0.0))


def linear_to_gamma(x: float) -> float:
    """Apply gamma 2 correction; non-positive values map to 0."""
    if x > 0.0:
        return math.sqrt(x)
    return 0.0


def _to_byte(component: float) -> int:
    return int(256 * _INTENSITY.clamp(linear_to_gamma(component)))


@dataclass(frozen=True, slots=True)
class Color:
    """An immutable linear RGB colour with float channels."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0

    @classmethod
    def from_ints(cls, r: int, g: int, b: int) -> Color:
        """Build a colour from integer channels on a 0..256 scale."""
        return cls(r / 256.0, g / 256.0, b / 256.0)

    def to_ints(self) -> tuple[int, int, int]:
        """Gamma-corrected channels clamped to 0..255."""
        return (_to_byte(self.r), _to_byte(self.g), _to_byte(self.b))

    def __iter__(self) -> Iterator[float]:
        yield self.r
        yield self.g
        yield self.b

    def __add__(self, other: Color) -> Color:
        if not isinstance(other, Color):
            return NotImplemented
        return Color(self.r + other.r, self.g + other.g, self.b + other.b)

    def __mul__(self, other: Color | float) -> Color:
        if isinstance(other, Color):
            return Color(self.r * other.r, self.g * other.g, self.b * other.b)
        if isinstance(other, Real):
            return Color(self.r * other, self.g * other, self.b * other)
        return NotImplemented

    __rmul__ = __mul__

    def __str__(self) -> str:
        r, g, b = self.to_ints()
        return f"{r} {g} {b}"

    @staticmethod
    def random(low: float = 0.0, high: float = 1.0) -> Color:
        return Color(random_double(low, high), random_double(low, high), random_double(low, high))