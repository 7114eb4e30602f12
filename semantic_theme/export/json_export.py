import json

from ..color import HueFamily
from ..styles import Style, style_attributes


def _serialize(value):
    if isinstance(value, Style):
        return style_attributes(value)
    if isinstance(value, HueFamily):
        return {k: round(v, 6) for k, v in value._asdict().items()}
    return value


def values_to_dict(values, palette=None, theme_name=None):
    """Split evaluated values into settings and faces, ready for JSON."""
    data = {"settings": {}, "faces": {}}
    for name, value in values.items():
        section = "faces" if isinstance(value, Style) else "settings"
        data[section][name] = _serialize(value)

    if palette is not None:
        data["_palette"] = {k.replace("_", "-"): v for k, v in palette._asdict().items()}

    if theme_name:
        data["_theme"] = theme_name

    data["_note"] = (
        "Settings are derived colors; faces are attribute sets applied at "
        "default priority"
    )
    return data


def export_json(values, filepath, palette=None, theme_name=None):
    """Export evaluated theme values as JSON.

    Args:
        values: dict returned by DependencyRegistry.evaluate/reevaluate
        filepath: Output file path
        palette: Optional Palette recorded as metadata
        theme_name: Optional theme name recorded as metadata
    """
    data = values_to_dict(values, palette=palette, theme_name=theme_name)
    with open(filepath, "w") as f:
        json.dump(data, f, indent=2)
