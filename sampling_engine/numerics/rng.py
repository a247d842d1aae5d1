# ========================
# file: sampling_engine/numerics/rng.py
# ========================
from __future__ import annotations
import math
import random
import time

from .vector import Vec2


def time_seed() -> int:
    """Seed derived from the wall clock, folded into 31 bits."""
    return time.time_ns() & 0x7FFFFFFF


class UniformSource:
    """
    Seeded source of uniform draws in [0, 1).

    Every helper below consumes draws from the same generator in a fixed
    order, so a run is reproducible from its seed alone:
      - range_float / range_int: one draw
      - inside_unit_circle: two draws (angle, then radius)
    """

    def __init__(self, seed: int):
        self.seed = int(seed)
        self._rng = random.Random(self.seed)
        self.draws = 0

    def uniform(self) -> float:
        self.draws += 1
        return self._rng.random()

    def range_float(self, max_value: float, min_value: float = 0.0) -> float:
        return min_value + self.uniform() * (max_value - min_value)

    def range_int(self, max_value: int, min_value: int = 0) -> int:
        # uniform() < 1, so the result never reaches max_value
        return int(math.floor(min_value + self.uniform() * (max_value - min_value)))

    def inside_unit_circle(self) -> Vec2:
        # Radius is uniform in [0, 1), not uniform over the disc area.
        angle = self.uniform() * 2.0 * math.pi
        r = self.uniform()
        return Vec2(r * math.cos(angle), r * math.sin(angle))
