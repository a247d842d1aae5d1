# sampling_engine/core/types.py
from __future__ import annotations
from dataclasses import dataclass, field, asdict
from typing import Any, Dict, List

from ..numerics.vector import Vec2


@dataclass
class SampleStats:
    """Counters collected by one sampler run."""

    iterations: int = 0
    attempts: int = 0
    out_of_bounds: int = 0
    cell_rejections: int = 0
    distance_rejections: int = 0
    evictions: int = 0
    elapsed_ms: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class SampleResult:
    """Point set of a finished run plus the parameters that produced it."""

    seed: int
    width: float
    height: float
    radius: float
    k: int
    points: List[Vec2] = field(default_factory=list)
    stats: SampleStats = field(default_factory=SampleStats)

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self):
        return iter(self.points)

    def header(self) -> Dict[str, Any]:
        return {
            "seed": self.seed,
            "width": self.width,
            "height": self.height,
            "radius": self.radius,
            "k": self.k,
            "count": len(self.points),
        }
