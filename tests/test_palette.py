import json
import os
import tempfile
import unittest

from PIL import Image

from semantic_theme.color import is_hex_color, lightness
from semantic_theme.errors import PaletteError
from semantic_theme.palette import (
    BASE_COLORS,
    Palette,
    load_palette_from_json,
    preset,
    preset_names,
    validate_palette,
)
from semantic_theme.palette.generator import extract_colors, generate_palette_from_image


class TestPresets(unittest.TestCase):
    def test_presets_are_valid(self) -> None:
        self.assertIn("light", preset_names())
        self.assertIn("dark", preset_names())
        for name in preset_names():
            palette = validate_palette(preset(name))
            for field in BASE_COLORS:
                self.assertTrue(is_hex_color(getattr(palette, field)), (name, field))

    def test_preset_overrides(self) -> None:
        palette = preset("dark", gamma=2.2, salient_fg="#00ff00")
        self.assertEqual(palette.gamma, 2.2)
        self.assertEqual(palette.salient_fg, "#00ff00")
        self.assertEqual(preset("dark").gamma, 1.5)

    def test_unknown_preset(self) -> None:
        with self.assertRaises(PaletteError):
            preset("no-such-preset")

    def test_unknown_override(self) -> None:
        with self.assertRaises(PaletteError):
            preset("light", font="Iosevka")

    def test_palette_defaults(self) -> None:
        palette = Palette(*["#000000"] * len(BASE_COLORS))
        self.assertEqual(palette.gamma, 1.5)
        self.assertEqual(palette.hue_offset, 0.0)

    def test_validate_rejects_bad_scalars(self) -> None:
        for overrides in ({"gamma": 0}, {"accent_lightness": 120}, {"accent_chroma": -1}):
            with self.assertRaises(PaletteError):
                validate_palette(preset("light", **overrides))
        with self.assertRaises(PaletteError):
            validate_palette(preset("light", default_fg=""))


class TestLoader(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.path = os.path.join(self._tmp.name, "palette.json")

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def _write(self, data) -> None:
        with open(self.path, "w") as f:
            json.dump(data, f)

    def test_load_partial_palette(self) -> None:
        self._write({"default-bg": "#000000", "gamma": 2, "_note": "metadata"})
        palette = load_palette_from_json(self.path)
        self.assertEqual(palette.default_bg, "#000000")
        self.assertEqual(palette.gamma, 2.0)
        self.assertEqual(palette.salient_fg, preset("light").salient_fg)

    def test_load_with_other_base(self) -> None:
        self._write({"accent-chroma": 10})
        palette = load_palette_from_json(self.path, base="nord")
        self.assertEqual(palette.default_bg, preset("nord").default_bg)
        self.assertEqual(palette.accent_chroma, 10.0)

    def test_unknown_key(self) -> None:
        self._write({"default-fg": "#000000", "cursor": "#ff0000"})
        with self.assertRaises(PaletteError):
            load_palette_from_json(self.path)

    def test_wrong_value_types(self) -> None:
        for data in ({"gamma": "high"}, {"gamma": True}, {"default-fg": 0}, ["#000000"]):
            self._write(data)
            with self.assertRaises(PaletteError):
                load_palette_from_json(self.path)

    def test_invalid_gamma(self) -> None:
        self._write({"gamma": -1})
        with self.assertRaises(PaletteError):
            load_palette_from_json(self.path)


class TestGenerator(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.path = os.path.join(self._tmp.name, "wallpaper.png")
        img = Image.new("RGB", (60, 60), (40, 44, 52))
        for box, color in (
            ((0, 0, 30, 30), (200, 60, 50)),
            ((30, 0, 60, 30), (60, 120, 200)),
            ((0, 30, 30, 60), (90, 170, 80)),
        ):
            img.paste(color, box)
        img.save(self.path)

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_extract_colors(self) -> None:
        colors = extract_colors(self.path)
        self.assertEqual(len(colors), 4)
        self.assertIn("#c83c32", colors)

    def test_dark_palette(self) -> None:
        palette, is_dark = generate_palette_from_image(self.path, force_theme="dark")
        self.assertTrue(is_dark)
        validate_palette(palette)
        self.assertLess(lightness(palette.default_bg), 30)
        self.assertGreater(lightness(palette.default_fg), 70)
        accents = {palette.salient_fg, palette.popout_fg, palette.critical_fg}
        self.assertEqual(len(accents), 3)

    def test_light_palette(self) -> None:
        palette, is_dark = generate_palette_from_image(self.path, force_theme="light")
        self.assertFalse(is_dark)
        self.assertGreater(lightness(palette.default_bg), 85)
        self.assertLess(lightness(palette.default_fg), 40)

    def test_auto_detects_dark_image(self) -> None:
        _, is_dark = generate_palette_from_image(self.path)
        self.assertTrue(is_dark)
