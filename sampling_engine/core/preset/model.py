# ========================
# file: sampling_engine/core/preset/model.py
# ========================
from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class SamplerPreset:
    id: str
    width: float
    height: float
    radius: float
    k: int
    seed: Optional[int]
    max_grid_cells: int
    render: Dict[str, Any]
    export: Dict[str, Any]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "width": self.width,
            "height": self.height,
            "radius": self.radius,
            "k": self.k,
            "seed": self.seed,
            "max_grid_cells": self.max_grid_cells,
            "render": dict(self.render),
            "export": dict(self.export),
        }
