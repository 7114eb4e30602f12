"""The semantic theme: derived colors and faces computed from a Palette.

Six meanings drive everything else:

- default: regular text
- salient: important text, in a different hue
- popout: text that must catch the eye
- critical: information that requires immediate action
- subtle: background areas that should barely stand out
- selected: the current selection

Derived colors are tints (paint_over) and emphases (scrape_paint) of the
base colors, plus a family of accents sharing one lightness and chroma.
"""

from .boundary import FaceTable
from .color import from_lch, hue, hue_family, paint_over, scrape_paint
from .palette.presets import preset
from .registry import SETTING, STYLE_SPEC, DependencyRegistry
from .styles import Style, merge

FADED_ALPHA = 0.55  # How much of the foreground survives in faded text
STRONG_ALPHA = 0.35  # Background fade that turns strong text into default text
TINT_ALPHA = 0.12  # Accent tint painted over backgrounds
HIGHLIGHT_ALPHA = 0.5
SUBTLE_FG_ALPHA = 0.7

ACCENTS = (
    "fundamental",
    "complementary",
    "analogous1",
    "analogous2",
    "coanalogous1",
    "coanalogous2",
)


def accent_name(member):
    """HueFamily field -> face name, e.g. analogous1 -> accent-analogous-1."""
    if member[-1].isdigit():
        member = f"{member[:-1]}-{member[-1]}"
    return f"accent-{member}"


def _tint(field):
    def evaluate(p, v):
        return paint_over(p.default_bg, TINT_ALPHA, getattr(p, field), p.gamma)

    return evaluate


def _accent(member):
    def evaluate(p, v):
        return from_lch(
            p.accent_lightness, p.accent_chroma, getattr(v["accent-hues"], member)
        )

    return evaluate


def _register_settings(registry):
    @registry.setting("faded-fg")
    def faded_fg(p, v):
        return paint_over(p.default_bg, FADED_ALPHA, p.default_fg, p.gamma)

    @registry.setting("strong-fg")
    def strong_fg(p, v):
        # The color that reads as default-fg once faded toward the background
        return scrape_paint(p.default_fg, STRONG_ALPHA, p.default_bg, p.gamma)

    @registry.setting("highlight-bg")
    def highlight_bg(p, v):
        return paint_over(p.default_bg, HIGHLIGHT_ALPHA, p.subtle_bg, p.gamma)

    @registry.setting("subtle-fg", depends_on=["faded-fg"])
    def subtle_fg(p, v):
        return paint_over(p.subtle_bg, SUBTLE_FG_ALPHA, v["faded-fg"], p.gamma)

    registry.register("salient-bg", SETTING, _tint("salient_fg"))
    registry.register("popout-bg", SETTING, _tint("popout_fg"))
    registry.register("critical-bg", SETTING, _tint("critical_fg"))

    @registry.setting("accent-hues")
    def accent_hues(p, v):
        return hue_family(hue(p.salient_fg) + p.hue_offset, p.analogous_offset)

    for member in ACCENTS:
        registry.register(
            accent_name(member) + "-fg",
            SETTING,
            _accent(member),
            depends_on=["accent-hues"],
        )


def _register_faces(registry):
    @registry.style("default")
    def default(p, v):
        return Style(foreground=p.default_fg, background=p.default_bg)

    @registry.style("strong", depends_on=["strong-fg"])
    def strong(p, v):
        return Style(foreground=v["strong-fg"], weight="bold")

    @registry.style("faded", depends_on=["faded-fg"])
    def faded(p, v):
        return Style(foreground=v["faded-fg"])

    @registry.style("salient")
    def salient(p, v):
        return Style(foreground=p.salient_fg)

    @registry.style("popout")
    def popout(p, v):
        return Style(foreground=p.popout_fg)

    @registry.style("critical")
    def critical(p, v):
        return Style(foreground=p.default_bg, background=p.critical_fg, weight="bold")

    @registry.style("subtle")
    def subtle(p, v):
        return Style(background=p.subtle_bg, extend=True)

    @registry.style("selected")
    def selected(p, v):
        return Style(background=p.selected_bg, extend=True)

    @registry.style("highlight", depends_on=["highlight-bg"])
    def highlight(p, v):
        return Style(background=v["highlight-bg"], extend=True)

    for meaning in ("salient", "popout", "critical"):
        registry.register(
            f"{meaning}-highlight",
            STYLE_SPEC,
            _highlight(meaning),
            depends_on=[meaning, f"{meaning}-bg"],
        )

    @registry.style("strong-salient", depends_on=["salient", "strong"])
    def strong_salient(p, v):
        return merge(v["strong"], v["salient"])

    @registry.style("mode-line", depends_on=["strong-fg"])
    def mode_line(p, v):
        return Style(
            foreground=v["strong-fg"],
            background=p.subtle_bg,
            box={"line-width": 1, "color": p.subtle_bg},
        )

    @registry.style(
        "mode-line-inactive", depends_on=["mode-line", "faded-fg", "highlight-bg"]
    )
    def mode_line_inactive(p, v):
        return merge(
            v["mode-line"],
            Style(
                foreground=v["faded-fg"],
                background=v["highlight-bg"],
                box={"line-width": 1, "color": v["highlight-bg"]},
            ),
        )

    for member in ACCENTS:
        name = accent_name(member)
        registry.register(
            name, STYLE_SPEC, _accent_face(name + "-fg"), depends_on=[name + "-fg"]
        )


def _highlight(meaning):
    def evaluate(p, v):
        return merge(v[meaning], Style(background=v[f"{meaning}-bg"], extend=True))

    return evaluate


def _accent_face(setting):
    def evaluate(p, v):
        return Style(foreground=v[setting])

    return evaluate


def build_registry(registry=None):
    """Register every derived value of the theme."""
    if registry is None:
        registry = DependencyRegistry()
    _register_settings(registry)
    _register_faces(registry)
    return registry


def apply_theme(palette, boundary=None, registry=None):
    """Assign `palette` and re-evaluate the whole theme against `boundary`.

    Returns:
        tuple: (values dict, boundary)
    """
    boundary = boundary if boundary is not None else FaceTable()
    registry = registry if registry is not None else build_registry()
    return registry.reevaluate(palette, boundary), boundary


def load_preset(name, boundary=None, registry=None, **overrides):
    """Switch to a built-in palette, then re-evaluate."""
    return apply_theme(preset(name, **overrides), boundary, registry)
