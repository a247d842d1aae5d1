# ========================
# file: sampling_engine/core/preset/validators.py
# ========================
from __future__ import annotations
import math
from typing import Any, Dict
from ..errors import ValidationError


def _require(cond: bool, msg: str) -> None:
    if not cond:
        raise ValidationError(msg)


def _is_hex_color(value: Any) -> bool:
    if not isinstance(value, str) or not value.startswith("#"):
        return False
    digits = value[1:]
    if len(digits) not in (6, 8):
        return False
    try:
        int(digits, 16)
    except ValueError:
        return False
    return True


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_finite(value: Any) -> bool:
    try:
        return math.isfinite(value)
    except OverflowError:
        return False


def _positive_number(cfg: Dict[str, Any], key: str) -> None:
    v = cfg.get(key)
    _require(_is_number(v), f"Preset.{key} must be a number")
    _require(_is_finite(v) and v > 0, f"Preset.{key} must be finite and > 0")


def validate_dict(cfg: Dict[str, Any]) -> None:
    """Validation for sampler preset dicts.

    Raises ValidationError on the first failing check.
    """
    _require(
        isinstance(cfg.get("id"), str) and cfg["id"],
        "Preset.id must be non-empty string",
    )
    for key in ("width", "height", "radius"):
        _positive_number(cfg, key)

    k = cfg.get("k")
    _require(_is_int(k), "Preset.k must be an integer")
    _require(k >= 0, "Preset.k must be >= 0")

    seed = cfg.get("seed")
    _require(
        seed is None or _is_int(seed),
        "Preset.seed must be an integer or null",
    )

    mgc = cfg.get("max_grid_cells")
    _require(
        _is_int(mgc) and mgc >= 1,
        "Preset.max_grid_cells must be an integer >= 1",
    )

    # Render
    ren = cfg.get("render")
    _require(isinstance(ren, dict), "render must be an object")
    for key in ("background", "dot_color", "ring_color"):
        _require(
            _is_hex_color(ren.get(key)),
            f"render.{key} must be hex like '#RRGGBB' or '#AARRGGBB'",
        )
    dot_radius = ren.get("dot_radius")
    _require(
        _is_number(dot_radius) and _is_finite(dot_radius) and dot_radius >= 0,
        "render.dot_radius must be a number >= 0",
    )
    ring_width = ren.get("ring_width")
    _require(_is_int(ring_width) and ring_width >= 1, "render.ring_width must be an integer >= 1")
    _require(isinstance(ren.get("draw_rings"), bool), "render.draw_rings must be true or false")

    # Export
    exp = cfg.get("export")
    _require(isinstance(exp, dict), "export must be an object")
    for key in ("image", "points_json"):
        v = exp.get(key)
        _require(
            v is None or (isinstance(v, str) and v),
            f"export.{key} must be a non-empty path string or null",
        )
