"""Color math: hex codec, gamma, premultiplied alpha compositing and Lab/LCH.

Named colors are "#rrggbb" strings whose channels are gamma-encoded values
in [0, 1]. Compositing happens on premultiplied ARGB tuples in linear space.
Clamping happens only when converting back to a named color, so
intermediate composites may leave [0, 1].
"""

import math
import re
from collections import namedtuple

import numpy as np

from .errors import InvalidChannelError, InvalidColorError, ZeroAlphaError

# Lower than the display-standard 2.2: physically mixing colors at 2.2
# comes out too bright for theme tints.
DEFAULT_GAMMA = 1.5

ARGB = namedtuple("ARGB", ["alpha", "r", "g", "b"])

HueFamily = namedtuple(
    "HueFamily",
    [
        "fundamental",
        "complementary",
        "analogous1",
        "analogous2",
        "coanalogous1",
        "coanalogous2",
    ],
)

_HEX_RE = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")

# sRGB <-> XYZ (D65)
_RGB_TO_XYZ = np.array(
    [
        [0.4124564, 0.3575761, 0.1804375],
        [0.2126729, 0.7151522, 0.0721750],
        [0.0193339, 0.1191920, 0.9503041],
    ]
)
_XYZ_TO_RGB = np.array(
    [
        [3.2404542, -1.5371385, -0.4985314],
        [-0.9692660, 1.8760108, 0.0415560],
        [0.0556434, -0.2040259, 1.0572252],
    ]
)
_D65_WHITE = np.array([0.95047, 1.0, 1.08883])
_LAB_EPSILON = 216 / 24389
_LAB_KAPPA = 24389 / 27


def clamp01(value):
    return max(0.0, min(1.0, value))


def is_hex_color(value):
    return isinstance(value, str) and _HEX_RE.match(value) is not None


def hex_to_rgb(hex_color):
    """Parse "#rgb" or "#rrggbb" into an (r, g, b) tuple of floats in [0, 1]."""
    if not is_hex_color(hex_color):
        raise InvalidColorError(
            f"Not a hex color: {hex_color!r}", {"color": hex_color}
        )
    digits = hex_color[1:]
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    return tuple(int(digits[i : i + 2], 16) / 255 for i in (0, 2, 4))


def rgb_to_hex(r, g, b):
    r, g, b = (round(clamp01(c) * 255) for c in (r, g, b))
    return f"#{r:02x}{g:02x}{b:02x}"


def _check_gamma(gamma):
    if gamma <= 0:
        raise InvalidChannelError(
            f"Gamma must be positive, got {gamma}", {"gamma": gamma}
        )


def gamma_encode(x, gamma=DEFAULT_GAMMA):
    """Linear -> perceptual: x ** (1 / gamma)."""
    _check_gamma(gamma)
    if x < 0:
        raise InvalidChannelError(f"Cannot gamma-encode negative channel {x}", {"channel": x})
    return x ** (1 / gamma)


def gamma_decode(x, gamma=DEFAULT_GAMMA):
    """Perceptual -> linear: x ** gamma."""
    _check_gamma(gamma)
    if x < 0:
        raise InvalidChannelError(f"Cannot gamma-decode negative channel {x}", {"channel": x})
    return x**gamma


# === PREMULTIPLIED ALPHA ===


def to_premultiplied(color, alpha, gamma=DEFAULT_GAMMA):
    """Decode a named color into linear space and premultiply it by alpha."""
    if not 0 <= alpha <= 1:
        raise InvalidChannelError(
            f"Alpha must be within [0, 1], got {alpha}", {"alpha": alpha}
        )
    r, g, b = (alpha * gamma_decode(c, gamma) for c in hex_to_rgb(color))
    return ARGB(alpha, r, g, b)


def from_premultiplied(argb, gamma=DEFAULT_GAMMA):
    """Divide out alpha, clamp, gamma-encode and format as a named color.

    Raises:
        ZeroAlphaError: a fully transparent color has no opaque equivalent
    """
    alpha = argb.alpha
    if alpha <= 0:
        raise ZeroAlphaError(
            f"Cannot un-premultiply a color with alpha {alpha}", {"argb": tuple(argb)}
        )
    channels = (gamma_encode(clamp01(c / alpha), gamma) for c in argb[1:])
    return rgb_to_hex(*channels)


def over_composite(base, addition):
    """Paint `addition` over `base`: addition + (1 - addition.alpha) * base."""
    keep = 1 - addition.alpha
    return ARGB(*(a + keep * b for a, b in zip(addition, base)))


def inverse_composite(result, addition):
    """Recover the base that `addition` was painted over to give `result`.

    Raises:
        ZeroAlphaError: an opaque addition hides its base completely
    """
    keep = 1 - addition.alpha
    if keep <= 0:
        raise ZeroAlphaError(
            "Cannot scrape off an opaque addition", {"addition": tuple(addition)}
        )
    return ARGB(*((r - a) / keep for r, a in zip(result, addition)))


def paint_over(base, alpha, addition, gamma=DEFAULT_GAMMA):
    """Tint the opaque color `base` by painting `addition` over it at `alpha`."""
    composite = over_composite(
        to_premultiplied(base, 1.0, gamma), to_premultiplied(addition, alpha, gamma)
    )
    return from_premultiplied(composite, gamma)


def scrape_paint(result, alpha, addition, gamma=DEFAULT_GAMMA):
    """Inverse of paint_over: the base which, once `addition` is painted
    over it at `alpha`, looks like `result`.

    With `addition` being the background this yields an emphasis color
    stronger than `result`.
    """
    base = inverse_composite(
        to_premultiplied(result, 1.0, gamma), to_premultiplied(addition, alpha, gamma)
    )
    return from_premultiplied(base, gamma)


# === WCAG ===


def relative_luminance(color):
    """Calculate relative luminance per WCAG 2.0"""

    def channel(c):
        return c / 12.92 if c <= 0.03928 else ((c + 0.055) / 1.055) ** 2.4

    r, g, b = hex_to_rgb(color)
    return 0.2126 * channel(r) + 0.7152 * channel(g) + 0.0722 * channel(b)


def contrast_ratio(color1, color2):
    """Calculate contrast ratio between two named colors"""
    lighter, darker = sorted(
        (relative_luminance(color1), relative_luminance(color2)), reverse=True
    )
    return (lighter + 0.05) / (darker + 0.05)


# === LAB / LCH ===


def rgb_to_lab(rgb):
    """Convert an sRGB triple in [0, 1] to (L*, a*, b*)."""
    rgb = np.asarray(rgb, dtype=np.float64)
    linear = np.where(rgb > 0.04045, ((rgb + 0.055) / 1.055) ** 2.4, rgb / 12.92)
    xyz = _RGB_TO_XYZ @ linear / _D65_WHITE

    f = np.where(
        xyz > _LAB_EPSILON, np.cbrt(xyz), (_LAB_KAPPA * xyz + 16) / 116
    )
    fx, fy, fz = f
    return (116 * fy - 16, 500 * (fx - fy), 200 * (fy - fz))


def lab_to_rgb(lightness, a, b):
    """Convert (L*, a*, b*) to an sRGB triple, clamped into [0, 1]."""
    fy = (lightness + 16) / 116
    fx = fy + a / 500
    fz = fy - b / 200

    f = np.array([fx, fy, fz])
    xyz = np.where(f**3 > _LAB_EPSILON, f**3, (116 * f - 16) / _LAB_KAPPA)

    linear = np.clip(_XYZ_TO_RGB @ (xyz * _D65_WHITE), 0.0, 1.0)
    rgb = np.where(
        linear > 0.0031308, 1.055 * linear ** (1 / 2.4) - 0.055, 12.92 * linear
    )
    return tuple(float(c) for c in np.clip(rgb, 0.0, 1.0))


def color_to_lab(color):
    return rgb_to_lab(hex_to_rgb(color))


def lightness(color):
    """L* of a named color (0-100)."""
    return float(color_to_lab(color)[0])


def chroma(color):
    _, a, b = color_to_lab(color)
    return math.hypot(a, b)


def hue(color):
    """Hue angle of a named color in radians, in (-pi, pi].

    Measured as atan2(b*, a*), the angle `from_lch` takes back, so
    from_lch(lightness(c), chroma(c), hue(c)) rebuilds c.
    """
    _, a, b = color_to_lab(color)
    return math.atan2(b, a)


def from_lch(lightness, chroma, hue):
    """Build a named color from L*, chroma and hue (radians)."""
    a = chroma * math.cos(hue)
    b = chroma * math.sin(hue)
    return rgb_to_hex(*lab_to_rgb(lightness, a, b))


def normalize_hue(angle):
    return angle % (2 * math.pi)


def hue_family(fundamental, offset=math.pi / 3):
    """Harmonious hues around `fundamental`: its complement, the two
    analogous hues and the two hues analogous to the complement."""
    complementary = fundamental + math.pi
    return HueFamily(
        fundamental=normalize_hue(fundamental),
        complementary=normalize_hue(complementary),
        analogous1=normalize_hue(fundamental + offset),
        analogous2=normalize_hue(fundamental - offset),
        coanalogous1=normalize_hue(complementary + offset),
        coanalogous2=normalize_hue(complementary - offset),
    )
