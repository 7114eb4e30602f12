import math
from collections import namedtuple

from ..color import DEFAULT_GAMMA, hex_to_rgb, is_hex_color, rgb_to_hex
from ..errors import PaletteError

BASE_COLORS = (
    "default_fg",
    "default_bg",
    "salient_fg",
    "popout_fg",
    "critical_fg",
    "subtle_bg",
    "selected_bg",
)

SCALARS = (
    "gamma",
    "accent_lightness",
    "accent_chroma",
    "hue_offset",
    "analogous_offset",
)

# Palettes are immutable: replace them wholesale with _replace()
Palette = namedtuple(
    "Palette",
    BASE_COLORS + SCALARS,
    defaults=(DEFAULT_GAMMA, 65.0, 45.0, 0.0, math.pi / 3),
)


def validate_palette(palette):
    """Check scalar parameters and that every base color is a string.

    Raises:
        PaletteError: on the first invalid field
    """
    if palette.gamma <= 0:
        raise PaletteError(
            f"gamma must be positive, got {palette.gamma}", {"field": "gamma"}
        )
    if not 0 <= palette.accent_lightness <= 100:
        raise PaletteError(
            f"accent_lightness must be within [0, 100], got {palette.accent_lightness}",
            {"field": "accent_lightness"},
        )
    if palette.accent_chroma < 0:
        raise PaletteError(
            f"accent_chroma must not be negative, got {palette.accent_chroma}",
            {"field": "accent_chroma"},
        )
    for field in BASE_COLORS:
        value = getattr(palette, field)
        if not isinstance(value, str) or not value.strip():
            raise PaletteError(f"{field} must be a color, got {value!r}", {"field": field})
    return palette


def resolve_palette(palette, resolve_named_color):
    """Rewrite every base color as lowercase #rrggbb.

    Short and uppercase hex forms are expanded; names are looked up through
    `resolve_named_color`.

    Args:
        palette: Palette whose colors may be names like "white"
        resolve_named_color: callable(name) -> (r, g, b) in [0, 1]
    """
    validate_palette(palette)
    resolved = {}
    for field in BASE_COLORS:
        value = getattr(palette, field)
        rgb = hex_to_rgb(value) if is_hex_color(value) else resolve_named_color(value)
        resolved[field] = rgb_to_hex(*rgb)
    return palette._replace(**resolved)
