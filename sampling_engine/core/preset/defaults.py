# ========================
# file: sampling_engine/core/preset/defaults.py
# ========================
from __future__ import annotations
from typing import Any, Dict

from ..constants import (
    DEFAULT_DOT_RADIUS,
    DEFAULT_K,
    DEFAULT_MAX_GRID_CELLS,
    DEFAULT_PALETTE,
    DEFAULT_RING_WIDTH,
)

DEFAULT_PRESET: Dict[str, Any] = {
    "id": "default",
    "width": 1024.0,
    "height": 1024.0,
    "radius": 50.0,
    "k": DEFAULT_K,
    "seed": None,
    "max_grid_cells": DEFAULT_MAX_GRID_CELLS,
    "render": {
        "background": DEFAULT_PALETTE["background"],
        "dot_color": DEFAULT_PALETTE["dot"],
        "ring_color": DEFAULT_PALETTE["ring"],
        "dot_radius": DEFAULT_DOT_RADIUS,
        "ring_width": DEFAULT_RING_WIDTH,
        "draw_rings": True,
    },
    "export": {
        "image": "out.png",
        "points_json": None,
    },
}
