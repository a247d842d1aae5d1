from .vector import Vec2, ZERO
from .rng import UniformSource, time_seed

__all__ = ["Vec2", "ZERO", "UniformSource", "time_seed"]
