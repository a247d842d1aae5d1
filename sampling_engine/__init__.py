from .algorithms.sampling import (
    PoissonDiscSampler,
    sample_points,
    sample_points_unseeded,
    sample_region,
)
from .core.errors import ParameterError, SamplerError
from .core.types import SampleResult, SampleStats
from .numerics.vector import Vec2

__all__ = [
    "PoissonDiscSampler",
    "sample_points",
    "sample_points_unseeded",
    "sample_region",
    "ParameterError",
    "SamplerError",
    "SampleResult",
    "SampleStats",
    "Vec2",
]
