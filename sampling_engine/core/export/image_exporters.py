# ==============================================================================
# file: sampling_engine/core/export/image_exporters.py
# Preview rendering of a point set (PNG).
# ==============================================================================
from __future__ import annotations
import logging
import math
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Sequence, Tuple

from PIL import Image, ImageDraw

from ..constants import DEFAULT_DOT_RADIUS, DEFAULT_PALETTE, DEFAULT_RING_WIDTH
from ...numerics.vector import Vec2

logger = logging.getLogger(__name__)


def _ensure_path_exists(path: str) -> None:
    Path(path).parent.mkdir(parents=True, exist_ok=True)


def hex_to_rgb(hex_color: str) -> Tuple[int, int, int]:
    """'#RRGGBB' or '#AARRGGBB' -> (r, g, b); alpha is dropped."""
    hex_color = hex_color.lstrip("#")
    if len(hex_color) == 8:
        hex_color = hex_color[2:]
    return tuple(int(hex_color[i : i + 2], 16) for i in (0, 2, 4))


def render_points(
    points: Sequence[Vec2],
    width: float,
    height: float,
    radius: float,
    style: Mapping[str, Any] | None = None,
) -> Image.Image:
    """Draws each point as a filled dot, optionally with a ring of diameter r."""
    style = dict(style or {})
    background = hex_to_rgb(style.get("background", DEFAULT_PALETTE["background"]))
    dot_color = hex_to_rgb(style.get("dot_color", DEFAULT_PALETTE["dot"]))
    ring_color = hex_to_rgb(style.get("ring_color", DEFAULT_PALETTE["ring"]))
    dot_r = float(style.get("dot_radius", DEFAULT_DOT_RADIUS))
    ring_width = int(style.get("ring_width", DEFAULT_RING_WIDTH))
    draw_rings = bool(style.get("draw_rings", True))

    w = max(1, int(math.ceil(width)))
    h = max(1, int(math.ceil(height)))
    img = Image.new("RGB", (w, h), background)
    draw = ImageDraw.Draw(img)

    half_r = radius / 2.0
    for p in points:
        if dot_r > 0:
            draw.ellipse(
                (p.x - dot_r, p.y - dot_r, p.x + dot_r, p.y + dot_r), fill=dot_color
            )
        if draw_rings:
            draw.ellipse(
                (p.x - half_r, p.y - half_r, p.x + half_r, p.y + half_r),
                outline=ring_color,
                width=ring_width,
            )
    return img


def write_points_preview(
    path: str,
    points: Sequence[Vec2],
    width: float,
    height: float,
    radius: float,
    style: Dict[str, Any] | None = None,
) -> str:
    """Renders the points and saves the PNG atomically. Returns the path."""
    img = render_points(points, width, height, radius, style)

    _ensure_path_exists(path)
    tmp_path = path + ".tmp"
    try:
        img.save(tmp_path, format="PNG")
        os.replace(tmp_path, path)
    except BaseException:
        if os.path.exists(tmp_path):
            os.remove(tmp_path)
        raise

    logger.info("Preview image saved: %s (%d points)", path, len(points))
    return path
