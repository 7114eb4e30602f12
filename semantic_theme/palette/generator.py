import colorsys

import numpy as np
from PIL import Image
from sklearn.cluster import KMeans

from ..color import contrast_ratio, hex_to_rgb, paint_over, relative_luminance, rgb_to_hex
from .model import Palette

# Target lightness (HSL %) for generated backgrounds and foregrounds
DARK_BG_LIGHTNESS = 15
LIGHT_BG_LIGHTNESS = 95
DARK_FG_LIGHTNESS = 85
LIGHT_FG_LIGHTNESS = 25

MAX_BG_SATURATION = 35  # Backgrounds shouldn't be too colorful
MAX_FG_SATURATION = 12  # Foregrounds should be near-neutral
MIN_ACCENT_CONTRAST = 3.0
MIN_HUE_DISTANCE = 30  # Degrees between two accents


def rgb_to_hsl(color):
    h, l, s = colorsys.rgb_to_hls(*hex_to_rgb(color))
    return (h * 360, s * 100, l * 100)


def hsl_to_hex(h, s, l):
    return rgb_to_hex(*colorsys.hls_to_rgb(h / 360, l / 100, s / 100))


def extract_colors(image_path, n_colors=12):
    """Extract dominant colors using k-means clustering"""
    img = Image.open(image_path).convert("RGB")
    img.thumbnail((300, 300))
    pixels = np.array(img).reshape(-1, 3)

    # Remove extreme pixels
    mask = (pixels.sum(axis=1) > 30) & (pixels.sum(axis=1) < 735)
    filtered_pixels = pixels[mask]

    if len(filtered_pixels) < n_colors:
        filtered_pixels = pixels

    n_clusters = min(n_colors, len(np.unique(filtered_pixels, axis=0)))
    kmeans = KMeans(n_clusters=n_clusters, random_state=42, n_init=10)
    kmeans.fit(filtered_pixels)

    return [
        rgb_to_hex(*(float(c) / 255 for c in center))
        for center in kmeans.cluster_centers_
    ]


def find_average_color(image_path):
    """Get overall average color of image"""
    img = Image.open(image_path).convert("RGB")
    img.thumbnail((100, 100))
    pixels = np.array(img).reshape(-1, 3)
    return rgb_to_hex(*(float(c) / 255 for c in pixels.mean(axis=0)))


def _hue_distance(h1, h2):
    diff = abs(h1 - h2) % 360
    return min(diff, 360 - diff)


def ensure_contrast(color, bg, min_contrast, is_dark_theme):
    """Step a color's lightness away from the background until readable."""
    h, s, l = rgb_to_hsl(color)
    step = 3 if is_dark_theme else -3
    current = color
    for _ in range(35):
        if contrast_ratio(current, bg) >= min_contrast:
            break
        l = max(0, min(100, l + step))
        current = hsl_to_hex(h, s, l)
    return current


def _pick_accents(colors, bg, is_dark_theme, count=3):
    by_saturation = sorted(colors, key=lambda c: rgb_to_hsl(c)[1], reverse=True)
    accents = []
    for color in by_saturation:
        hue = rgb_to_hsl(color)[0]
        if all(_hue_distance(hue, rgb_to_hsl(a)[0]) >= MIN_HUE_DISTANCE for a in accents):
            accents.append(color)
        if len(accents) == count:
            break
    # Monochrome images: rotate the strongest hue
    while len(accents) < count:
        h, s, l = rgb_to_hsl(by_saturation[0])
        accents.append(hsl_to_hex(h + 120 * len(accents), max(s, 50), l))
    return [ensure_contrast(c, bg, MIN_ACCENT_CONTRAST, is_dark_theme) for c in accents]


def generate_palette_from_image(image_path, force_theme=None):
    """Derive the base palette of a theme from an image

    Args:
        image_path: Path to the source image
        force_theme: "dark", "light", or None (auto-detect from image)

    Returns:
        tuple: (Palette, is_dark_theme bool)
    """
    colors = extract_colors(image_path)
    avg_color = find_average_color(image_path)

    if force_theme is not None:
        is_dark_theme = force_theme == "dark"
    else:
        is_dark_theme = relative_luminance(avg_color) < 0.5

    # Background: a moderately saturated color forced into the theme's range
    target_saturation = 25 if is_dark_theme else 15
    bg_base = min(colors, key=lambda c: abs(rgb_to_hsl(c)[1] - target_saturation))
    h, s, _ = rgb_to_hsl(bg_base)
    bg_lightness = DARK_BG_LIGHTNESS if is_dark_theme else LIGHT_BG_LIGHTNESS
    bg = hsl_to_hex(h, min(s, MAX_BG_SATURATION), bg_lightness)

    fg_lightness = DARK_FG_LIGHTNESS if is_dark_theme else LIGHT_FG_LIGHTNESS
    fg = hsl_to_hex(h, min(s, MAX_FG_SATURATION), fg_lightness)

    salient, popout, critical = _pick_accents(colors, bg, is_dark_theme)

    subtle_step = 6 if is_dark_theme else -5
    subtle = hsl_to_hex(h, min(s, MAX_BG_SATURATION), bg_lightness + subtle_step)

    palette = Palette(
        default_fg=fg,
        default_bg=bg,
        salient_fg=salient,
        popout_fg=popout,
        critical_fg=critical,
        subtle_bg=subtle,
        selected_bg=paint_over(bg, 0.2, salient),
    )
    return palette, is_dark_theme
