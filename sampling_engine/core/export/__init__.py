# ==============================================================================
# file: sampling_engine/core/export/__init__.py
# ==============================================================================
from __future__ import annotations

from .image_exporters import hex_to_rgb, render_points, write_points_preview
from .json_exporters import read_points_json, write_points_json

__all__ = [
    "hex_to_rgb",
    "render_points",
    "write_points_preview",
    "write_points_json",
    "read_points_json",
]
