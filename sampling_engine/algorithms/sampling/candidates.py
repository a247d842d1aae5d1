# ========================
# file: sampling_engine/algorithms/sampling/candidates.py
# ========================
from __future__ import annotations

from ...numerics.rng import UniformSource
from ...numerics.vector import Vec2


def in_region(point: Vec2, width: float, height: float) -> bool:
    return 0.0 <= point.x < width and 0.0 <= point.y < height


def generate_candidate(origin: Vec2, source: UniformSource, radius: float) -> Vec2:
    """
    Candidate at distance [r, 2r) from origin.

    The direction comes from inside_unit_circle; its length also sets the
    extra distance beyond r, so angle and distance are drawn together.
    """
    direction = source.inside_unit_circle()
    return origin + (direction.normalized * radius + direction * radius)
