from .loader import load_palette_from_json
from .model import BASE_COLORS, SCALARS, Palette, resolve_palette, validate_palette
from .presets import PRESETS, preset, preset_names

__all__ = [
    "BASE_COLORS",
    "PRESETS",
    "SCALARS",
    "Palette",
    "load_palette_from_json",
    "preset",
    "preset_names",
    "resolve_palette",
    "validate_palette",
]
