# ========================
# file: sampling_engine/core/preset/__init__.py
# ========================
from .model import SamplerPreset
from .loader import load_preset, deep_merge
from .defaults import DEFAULT_PRESET
from .registry import add_search_folder, resolve_preset_path

__all__ = [
    "SamplerPreset",
    "load_preset",
    "deep_merge",
    "DEFAULT_PRESET",
    "add_search_folder",
    "resolve_preset_path",
]
