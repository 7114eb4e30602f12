import argparse
import logging
import os

from .color import lightness
from .errors import ThemeError
from .export import export_json, generate_readability_report, print_palette
from .palette import load_palette_from_json, preset, preset_names
from .palette.generator import generate_palette_from_image
from .theme import apply_theme, build_registry
from .zed import generate_zed_theme, generate_zed_themes

SCALAR_OPTIONS = ("gamma", "accent_lightness", "accent_chroma", "hue_offset")


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Expand a semantic palette into derived colors, faces and a Zed theme"
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--preset",
        metavar="NAME",
        help="Built-in palette (default: light)",
    )
    source.add_argument(
        "--from-palette",
        metavar="JSON",
        help="Load the base palette from a JSON file",
    )
    source.add_argument(
        "--from-image",
        metavar="IMAGE",
        help="Derive dark and light palettes from an image",
    )
    parser.add_argument(
        "--name",
        help="Theme name (default: derived from the preset or file name)",
    )
    parser.add_argument(
        "--output", "-o",
        metavar="DIR",
        default=".",
        help="Output directory (default: current directory)",
    )
    parser.add_argument("--gamma", type=float, help="Compositing gamma (default: 1.5)")
    parser.add_argument("--accent-lightness", type=float, help="L* of generated accents")
    parser.add_argument("--accent-chroma", type=float, help="Chroma of generated accents")
    parser.add_argument(
        "--hue-offset", type=float, help="Rotation of the accent hues, in radians"
    )
    parser.add_argument(
        "--list-presets", action="store_true", help="List built-in palettes and exit"
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Log evaluation")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.list_presets:
        for name in preset_names():
            print(name)
        return

    try:
        if args.from_image:
            _run_from_image(args)
        else:
            _run_from_palette(args)
    except ThemeError as e:
        parser.exit(2, f"error: {e}\n")


def _overrides(args):
    """Scalar palette fields given on the command line."""
    return {
        field: getattr(args, field)
        for field in SCALAR_OPTIONS
        if getattr(args, field) is not None
    }


def _zed_path(output, theme_name, source=None):
    """Path of the Zed theme file, never the palette file it was built from."""
    path = os.path.join(output, f"{theme_name}.json")
    if source and os.path.realpath(path) == os.path.realpath(source):
        path = os.path.join(output, f"{theme_name}-zed.json")
    return path


def _run_from_palette(args):
    """Generate outputs from a preset or a palette JSON file."""
    if args.from_palette:
        print(f"Loading palette: {args.from_palette}")
        palette = load_palette_from_json(args.from_palette)._replace(**_overrides(args))
        theme_name = args.name or os.path.splitext(os.path.basename(args.from_palette))[0]
    else:
        preset_name = args.preset or "light"
        palette = preset(preset_name, **_overrides(args))
        theme_name = args.name or preset_name

    values, _ = apply_theme(palette)
    is_dark = lightness(values["default"].background) < 50
    variant = "dark" if is_dark else "light"
    print(f"Detected theme type: {variant}")

    print_palette(values)
    report, _ = generate_readability_report(values)
    print("\n" + report)

    os.makedirs(args.output, exist_ok=True)
    values_path = os.path.join(args.output, f"theme-values-{variant}.json")
    report_path = os.path.join(args.output, f"readability_report-{variant}.txt")
    zed_path = _zed_path(args.output, theme_name, source=args.from_palette)

    export_json(values, values_path, palette=palette, theme_name=theme_name)
    with open(report_path, "w") as f:
        f.write(report)
    with open(zed_path, "w") as f:
        f.write(generate_zed_theme(values, theme_name, is_dark))

    print("\n" + "=" * 60)
    print("Exported:")
    print(f"  - {values_path}")
    print(f"  - {report_path}")
    print(f"  - {zed_path} (contains '{theme_name} {variant.title()}')")
    print("=" * 60)


def _run_from_image(args):
    """Generate dark and light themes from an image file."""
    image_path = args.from_image
    theme_name = args.name or os.path.splitext(os.path.basename(image_path))[0]

    print(f"Analyzing: {image_path}")

    registry = build_registry()
    exported = []
    variants = {}
    os.makedirs(args.output, exist_ok=True)

    for variant in ("dark", "light"):
        palette, _ = generate_palette_from_image(image_path, force_theme=variant)
        palette = palette._replace(**_overrides(args))
        values, _ = apply_theme(palette, registry=registry)
        variants[variant] = values

        print_palette(values)
        report, _ = generate_readability_report(values)
        print("\n" + report)

        values_path = os.path.join(args.output, f"theme-values-{variant}.json")
        report_path = os.path.join(args.output, f"readability_report-{variant}.txt")
        export_json(values, values_path, palette=palette, theme_name=theme_name)
        with open(report_path, "w") as f:
            f.write(report)
        exported.extend([values_path, report_path])

    zed_path = os.path.join(args.output, f"{theme_name}.json")
    with open(zed_path, "w") as f:
        f.write(generate_zed_themes(variants["dark"], variants["light"], theme_name))

    print("\n" + "=" * 60)
    print("Exported:")
    for path in exported:
        print(f"  - {path}")
    print(f"  - {zed_path} (contains '{theme_name} Dark' and '{theme_name} Light')")
    print("=" * 60)


if __name__ == "__main__":
    main()
