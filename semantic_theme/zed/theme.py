import json

from .styles import build_zed_style


def _variant_name(is_dark):
    return "Dark" if is_dark else "Light"


def generate_zed_theme(values, theme_name, is_dark):
    """Generate a Zed theme JSON file with a single theme variant.

    Args:
        values: Evaluated theme values
        theme_name: Base name for the theme
        is_dark: Whether this is a dark theme

    Returns:
        JSON string of the theme data
    """
    theme_data = {
        "$schema": "https://zed.dev/schema/themes/v0.2.0.json",
        "name": theme_name,
        "author": "Semantic Theme",
        "themes": [
            {
                "name": f"{theme_name} {_variant_name(is_dark)}",
                "appearance": "dark" if is_dark else "light",
                "style": build_zed_style(values),
            },
        ],
    }
    return json.dumps(theme_data, indent=2)


def generate_zed_themes(dark_values, light_values, theme_name):
    """Generate a Zed theme JSON file with both dark and light variants.

    Args:
        dark_values: Evaluated values of the dark palette
        light_values: Evaluated values of the light palette
        theme_name: Base name for the theme

    Returns:
        JSON string of the theme data
    """
    theme_data = {
        "$schema": "https://zed.dev/schema/themes/v0.2.0.json",
        "name": theme_name,
        "author": "Semantic Theme",
        "themes": [
            {
                "name": f"{theme_name} Dark",
                "appearance": "dark",
                "style": build_zed_style(dark_values),
            },
            {
                "name": f"{theme_name} Light",
                "appearance": "light",
                "style": build_zed_style(light_values),
            },
        ],
    }
    return json.dumps(theme_data, indent=2)
