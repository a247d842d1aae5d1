# ========================
# file: sampling_engine/algorithms/sampling/validator.py
# ========================
from __future__ import annotations
from enum import Enum
from typing import Sequence

from .grid import SpatialGrid
from ...numerics.vector import Vec2


class Verdict(str, Enum):
    ACCEPTED = "accepted"
    CELL_OCCUPIED = "cell_occupied"
    TOO_CLOSE = "too_close"


def check_candidate(
    grid: SpatialGrid, points: Sequence[Vec2], candidate: Vec2, radius: float
) -> Verdict:
    """Checks the candidate against every stored point that could be closer than radius.

    A candidate whose own cell is taken is rejected without a distance test.
    """
    row, col = grid.cell_index_of(candidate)
    if grid.is_occupied(row, col):
        return Verdict.CELL_OCCUPIED

    for idx in grid.window(candidate, radius):
        if points[idx].distance_to(candidate) < radius:
            return Verdict.TOO_CLOSE

    return Verdict.ACCEPTED


def is_valid_candidate(
    grid: SpatialGrid, points: Sequence[Vec2], candidate: Vec2, radius: float
) -> bool:
    return check_candidate(grid, points, candidate, radius) is Verdict.ACCEPTED
