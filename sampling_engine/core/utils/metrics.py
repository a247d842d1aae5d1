# sampling_engine/core/utils/metrics.py
from __future__ import annotations
import math
from typing import Dict, Sequence

import numpy as np
from scipy.spatial import cKDTree

from ...numerics.vector import Vec2


def points_to_array(points: Sequence[Vec2]) -> np.ndarray:
    """(N, 2) float64 array of point coordinates."""
    if not points:
        return np.empty((0, 2), dtype=np.float64)
    return np.array([(p.x, p.y) for p in points], dtype=np.float64)


def min_pairwise_distance(points: Sequence[Vec2]) -> float:
    if len(points) < 2:
        return math.inf
    tree = cKDTree(points_to_array(points))
    # k=2: nearest neighbour other than the point itself
    dists, _ = tree.query(tree.data, k=2)
    return float(dists[:, 1].min())


def packing_bound(width: float, height: float, radius: float) -> float:
    """
    Upper bound on the point count: discs of radius r/2 around the points
    do not overlap and stay inside the region grown by r/2 on every side.
    """
    disc_area = math.pi * (radius / 2.0) ** 2
    return (width + radius) * (height + radius) / disc_area


def compute_metrics(
    points: Sequence[Vec2], width: float, height: float, radius: float
) -> Dict[str, float]:
    """
    Summary of a point set: count, min_distance, density, packing_ratio.
    """
    count = len(points)
    area = width * height
    bound = packing_bound(width, height, radius)
    return {
        "count": count,
        "min_distance": min_pairwise_distance(points),
        "density": count / area if area > 0 else 0.0,
        "packing_ratio": count / bound if bound > 0 else 0.0,
    }
