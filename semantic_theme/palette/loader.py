import json

from ..errors import PaletteError
from .model import BASE_COLORS, SCALARS, validate_palette
from .presets import preset


def load_palette_from_json(json_path, base="light"):
    """Load a Palette from JSON with kebab-case keys.

    Args:
        json_path: Path to palette JSON file
        base: Preset supplying every field the file leaves out

    Returns:
        Palette
    """
    with open(json_path) as f:
        data = json.load(f)

    if not isinstance(data, dict):
        raise PaletteError(f"{json_path}: expected a JSON object", {"path": str(json_path)})

    fields = {}
    for key, value in data.items():
        # Skip metadata keys
        if key.startswith("_"):
            continue

        field = key.replace("-", "_")
        if field in BASE_COLORS:
            if not isinstance(value, str):
                raise PaletteError(
                    f"{json_path}: {key} must be a color string", {"key": key}
                )
        elif field in SCALARS:
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise PaletteError(f"{json_path}: {key} must be a number", {"key": key})
            value = float(value)
        else:
            raise PaletteError(f"{json_path}: unknown palette key {key!r}", {"key": key})
        fields[field] = value

    return validate_palette(preset(base, **fields))
