# ==============================================================================
# file: sampling_engine/core/export/json_exporters.py
# JSON output of sampled point sets.
# ==============================================================================
from __future__ import annotations
import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, List

from ..types import SampleResult
from ...numerics.vector import Vec2

logger = logging.getLogger(__name__)


def _ensure_path_exists(path: str) -> None:
    Path(path).parent.mkdir(parents=True, exist_ok=True)


def _atomic_write_json(path: str, data: Any) -> None:
    """Writes JSON through a temp file so a crash never leaves a broken file."""
    _ensure_path_exists(path)
    tmp_path = path + ".tmp"
    try:
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)
        os.replace(tmp_path, path)
    except BaseException:
        if os.path.exists(tmp_path):
            os.remove(tmp_path)
        raise


def write_points_json(path: str, result: SampleResult) -> str:
    payload = {
        "header": result.header(),
        "stats": result.stats.to_dict(),
        "points": [[p.x, p.y] for p in result.points],
    }
    _atomic_write_json(path, payload)
    logger.info("Points saved: %s (%d points)", path, len(result.points))
    return path


def read_points_json(path: str) -> Dict[str, Any]:
    """Loads a file written by write_points_json; points come back as Vec2."""
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    points: List[Vec2] = [Vec2(float(x), float(y)) for x, y in data.get("points", [])]
    data["points"] = points
    return data
