from .grid import SpatialGrid
from .candidates import generate_candidate, in_region
from .validator import Verdict, check_candidate, is_valid_candidate
from .poisson_disc import (
    PoissonDiscSampler,
    SamplerState,
    sample_points,
    sample_points_unseeded,
    sample_region,
    validate_parameters,
    validate_seed,
)

__all__ = [
    "SpatialGrid",
    "generate_candidate",
    "in_region",
    "Verdict",
    "check_candidate",
    "is_valid_candidate",
    "PoissonDiscSampler",
    "SamplerState",
    "sample_points",
    "sample_points_unseeded",
    "sample_region",
    "validate_parameters",
    "validate_seed",
]
