from ..errors import PaletteError
from .model import Palette

PRESETS = {
    "light": Palette(
        default_fg="#37474f",
        default_bg="#ffffff",
        salient_fg="#673ab7",
        popout_fg="#ffab91",
        critical_fg="#ff6f00",
        subtle_bg="#eceff1",
        selected_bg="#e3f2fd",
    ),
    "dark": Palette(
        default_fg="#eceff4",
        default_bg="#2e3440",
        salient_fg="#81a1c1",
        popout_fg="#d08770",
        critical_fg="#ebcb8b",
        subtle_bg="#434c5e",
        selected_bg="#3b4252",
        accent_lightness=70.0,
        accent_chroma=35.0,
    ),
    "nord": Palette(
        default_fg="#d8dee9",
        default_bg="#2e3440",
        salient_fg="#88c0d0",
        popout_fg="#b48ead",
        critical_fg="#bf616a",
        subtle_bg="#3b4252",
        selected_bg="#434c5e",
        accent_lightness=72.0,
        accent_chroma=30.0,
    ),
    "solarized-light": Palette(
        default_fg="#657b83",
        default_bg="#fdf6e3",
        salient_fg="#268bd2",
        popout_fg="#cb4b16",
        critical_fg="#dc322f",
        subtle_bg="#eee8d5",
        selected_bg="#e4ddc8",
        accent_lightness=55.0,
        accent_chroma=50.0,
    ),
    "gruvbox-dark": Palette(
        default_fg="#ebdbb2",
        default_bg="#282828",
        salient_fg="#83a598",
        popout_fg="#fe8019",
        critical_fg="#fb4934",
        subtle_bg="#3c3836",
        selected_bg="#504945",
        accent_lightness=68.0,
        accent_chroma=40.0,
    ),
}


def preset_names():
    return sorted(PRESETS)


def preset(name, **overrides):
    """Look up a built-in palette, optionally replacing some of its fields.

    Raises:
        PaletteError: unknown preset name or field
    """
    try:
        palette = PRESETS[name]
    except KeyError:
        raise PaletteError(
            f"Unknown preset {name!r} (available: {', '.join(preset_names())})",
            {"preset": name},
        ) from None
    try:
        return palette._replace(**overrides)
    except ValueError as e:
        raise PaletteError(str(e), {"preset": name}) from e
