#!/usr/bin/env python3
"""
Generate themes for every preset, palette JSON file and image.
Consolidates Zed themes into out/themes/ folder.
"""

import argparse
import shutil
import subprocess
import sys
from pathlib import Path

from semantic_theme.palette import preset_names


def main():
    parser = argparse.ArgumentParser(
        description="Generate themes for all presets, palette JSON files and images"
    )
    parser.add_argument(
        "--gamma",
        type=float,
        default=None,
        help="Override compositing gamma for all themes",
    )
    args = parser.parse_args()

    root = Path(__file__).parent
    images_dir = root / "images"
    palettes_dir = root / "palettes"
    out_dir = root / "out"
    themes_dir = out_dir / "themes"

    themes_dir.mkdir(parents=True, exist_ok=True)

    image_extensions = {".png", ".jpg", ".jpeg"}

    jobs = [(name, ["--preset", name]) for name in preset_names()]
    if palettes_dir.exists():
        jobs += [
            (f.stem, ["--from-palette", str(f)])
            for f in sorted(palettes_dir.iterdir())
            if f.suffix.lower() == ".json"
        ]
    if images_dir.exists():
        jobs += [
            (f.stem, ["--from-image", str(f)])
            for f in sorted(images_dir.iterdir())
            if f.suffix.lower() in image_extensions
        ]

    print(f"Found {len(jobs)} themes to generate\n")

    for theme_name, source in jobs:
        theme_out_dir = out_dir / theme_name

        print(f"{'=' * 60}")
        print(f"Generating: {theme_name}")
        print(f"{'=' * 60}")

        cmd = [
            sys.executable,
            "-m",
            "semantic_theme.cli",
            *source,
            "--name",
            theme_name,
            "-o",
            str(theme_out_dir),
        ]
        if args.gamma is not None:
            cmd.extend(["--gamma", str(args.gamma)])

        result = subprocess.run(cmd, cwd=root)

        if result.returncode != 0:
            print(f"Error generating {theme_name}")
            continue

        zed_theme = theme_out_dir / f"{theme_name}.json"
        if zed_theme.exists():
            shutil.copy(zed_theme, themes_dir / zed_theme.name)
            print(f"Copied {zed_theme.name} to {themes_dir}")
        print()

    print(f"{'=' * 60}")
    print("Done! All themes consolidated in:")
    print(f"  {themes_dir}")
    print(f"{'=' * 60}")


if __name__ == "__main__":
    main()
