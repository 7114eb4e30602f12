from .styles import build_zed_style
from .theme import generate_zed_theme, generate_zed_themes

__all__ = ["build_zed_style", "generate_zed_theme", "generate_zed_themes"]
