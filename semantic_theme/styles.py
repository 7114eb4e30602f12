"""Structured face specifications and attribute merging."""

from collections import namedtuple

from .errors import CyclicDependencyError, UnknownNameError

STYLE_FIELDS = (
    "foreground",
    "background",
    "weight",
    "slant",
    "underline",
    "box",
    "extend",
    "inherit",
)

# None means "unspecified": it never overrides anything in a merge
Style = namedtuple("Style", STYLE_FIELDS, defaults=(None,) * len(STYLE_FIELDS))


def merge(base, *overrides):
    """Apply each override's defined attributes over `base`, left to right."""
    merged = base._asdict()
    for override in overrides:
        for key, value in override._asdict().items():
            if value is not None:
                merged[key] = value
    return Style(**merged)


def style_attributes(style):
    """Defined attributes of a style as a plain dict."""
    return {k: v for k, v in style._asdict().items() if v is not None}


def flatten(name, styles, _visiting=()):
    """Resolve a style's `inherit` chain into a single Style.

    Parents are merged left to right, then the style's own attributes on
    top, so the rightmost and most specific definition wins.

    Args:
        name: Style to resolve
        styles: Mapping of style name -> Style

    Returns:
        Style with `inherit` cleared
    """
    if name in _visiting:
        raise CyclicDependencyError(_visiting + (name,))
    if name not in styles:
        raise UnknownNameError(name, _visiting[-1] if _visiting else None)

    style = styles[name]
    parents = [
        flatten(parent, styles, _visiting + (name,)) for parent in style.inherit or ()
    ]
    return merge(Style(), *parents, style._replace(inherit=None))
