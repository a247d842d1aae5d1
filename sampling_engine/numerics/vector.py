# ========================
# file: sampling_engine/numerics/vector.py
# ========================
from __future__ import annotations
import math
from dataclasses import dataclass

from ..core.constants import VECTOR_EPSILON


@dataclass(frozen=True)
class Vec2:
    """Immutable 2D vector; accepted sample points are stored as Vec2."""

    x: float
    y: float

    def __add__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x - other.x, self.y - other.y)

    def __neg__(self) -> "Vec2":
        return Vec2(-self.x, -self.y)

    def __mul__(self, d: float) -> "Vec2":
        return Vec2(self.x * d, self.y * d)

    __rmul__ = __mul__

    def __truediv__(self, d: float) -> "Vec2":
        return Vec2(self.x / d, self.y / d)

    def __iter__(self):
        yield self.x
        yield self.y

    @property
    def sqr_magnitude(self) -> float:
        return self.x * self.x + self.y * self.y

    @property
    def magnitude(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y)

    @property
    def normalized(self) -> "Vec2":
        mag = self.magnitude
        if mag > VECTOR_EPSILON:
            return self / mag
        return ZERO

    def distance_to(self, other: "Vec2") -> float:
        return (self - other).magnitude

    def to_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


ZERO = Vec2(0.0, 0.0)
