from .boundary import FaceTable, PresentationBoundary
from .palette import Palette, preset
from .registry import SETTING, STYLE_SPEC, DependencyRegistry
from .styles import Style, merge
from .theme import apply_theme, build_registry, load_preset

__all__ = [
    "SETTING",
    "STYLE_SPEC",
    "DependencyRegistry",
    "FaceTable",
    "Palette",
    "PresentationBoundary",
    "Style",
    "apply_theme",
    "build_registry",
    "load_preset",
    "merge",
    "preset",
]
