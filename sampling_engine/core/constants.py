# ==============================================================================
# file: sampling_engine/core/constants.py
# Global constants of the sampler (grid sentinels, defaults, preview colors).
# ==============================================================================
from __future__ import annotations
from typing import Dict

# =======================================================================
# SAMPLING
# =======================================================================

# Plane sampling only.
DIMENSIONS = 2

# Candidate attempts per active point (Bridson's k).
DEFAULT_K = 30

# Grid value for a cell without a point.
EMPTY_CELL = -1

# Vectors shorter than this normalize to zero.
VECTOR_EPSILON = 1e-5

# Upper bound on rows * cols; presets can lower or raise it.
DEFAULT_MAX_GRID_CELLS = 50_000_000

# =======================================================================
# PREVIEW
# =======================================================================

DEFAULT_PALETTE: Dict[str, str] = {
    "background": "#000000",
    "dot": "#FFFF00",
    "ring": "#8B0000",
}

DEFAULT_DOT_RADIUS = 3.0
DEFAULT_RING_WIDTH = 2
