# ========================
# file: sampling_engine/core/errors.py
# ========================
class SamplerError(Exception):
    """Base error for the sampling engine."""


class ParameterError(SamplerError, ValueError):
    """Raised when sampling parameters are rejected before a run starts."""


class GridAllocationError(SamplerError, MemoryError):
    """Raised when the acceleration grid cannot be allocated."""


class GridOccupiedError(SamplerError):
    """Raised when a point is stored into an already occupied grid cell."""


class PresetError(SamplerError):
    """Base error for preset system."""


class ValidationError(PresetError):
    """Raised when a preset fails validation."""


class NotFoundError(PresetError):
    """Raised when a preset id or path cannot be resolved."""
