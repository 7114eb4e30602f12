from ..mappings import resolve_mappings

# Zed syntax token -> mapped editor face
SYNTAX_FACES = {
    "attribute": "font-lock-property-name-face",
    "boolean": "font-lock-constant-face",
    "comment": "font-lock-comment-face",
    "comment.doc": "font-lock-doc-face",
    "constant": "font-lock-constant-face",
    "constructor": "font-lock-type-face",
    "function": "font-lock-function-name-face",
    "keyword": "font-lock-keyword-face",
    "link_uri": "link",
    "number": "font-lock-number-face",
    "operator": "font-lock-operator-face",
    "preproc": "font-lock-preprocessor-face",
    "property": "font-lock-property-name-face",
    "punctuation": "font-lock-punctuation-face",
    "string": "font-lock-string-face",
    "title": "org-level-1",
    "type": "font-lock-type-face",
    "variable": "font-lock-variable-name-face",
}


def opacity_to_hex(opacity):
    """Convert 0.0-1.0 opacity to hex string (00-ff)."""
    clamped = max(0.0, min(1.0, opacity))
    return f"{round(clamped * 255):02x}"


def _rgba(color, opacity=1.0):
    if color is None:
        return None
    return f"{color}{opacity_to_hex(opacity)}"


def _syntax_entry(style):
    return {
        "color": _rgba(style.foreground),
        "background_color": _rgba(style.background),
        "font_style": "italic" if style.slant == "italic" else None,
        "font_weight": 700 if style.weight == "bold" else None,
    }


def build_zed_style(values):
    """Build the style dict for a Zed theme from evaluated theme values.

    Args:
        values: Evaluated derived values (settings and faces)
    """
    default = values["default"]
    fg, bg = default.foreground, default.background
    mapped = resolve_mappings(values)

    style = {
        "background": _rgba(values["subtle"].background),
        "border": _rgba(values["highlight"].background),
        "border.variant": _rgba(values["subtle"].background),
        "border.focused": _rgba(values["salient"].foreground, 0.6),
        "border.selected": _rgba(values["salient"].foreground),
        "elevated_surface.background": _rgba(values["subtle"].background),
        "surface.background": _rgba(values["subtle"].background),
        "element.background": _rgba(values["highlight"].background),
        "element.hover": _rgba(values["highlight"].background),
        "element.selected": _rgba(values["selected"].background),
        "ghost_element.hover": _rgba(values["highlight"].background),
        "ghost_element.selected": _rgba(values["selected"].background),
        "text": _rgba(fg),
        "text.muted": _rgba(values["faded"].foreground),
        "text.placeholder": _rgba(values["faded"].foreground),
        "text.accent": _rgba(values["salient"].foreground),
        "icon": _rgba(fg),
        "icon.muted": _rgba(values["faded"].foreground),
        "icon.accent": _rgba(values["salient"].foreground),
        "status_bar.background": _rgba(values["mode-line"].background),
        "title_bar.background": _rgba(values["mode-line"].background),
        "title_bar.inactive_background": _rgba(values["mode-line-inactive"].background),
        "tab_bar.background": _rgba(values["subtle"].background),
        "tab.inactive_background": _rgba(values["subtle"].background),
        "tab.active_background": _rgba(bg),
        "panel.background": _rgba(values["subtle"].background),
        "editor.foreground": _rgba(fg),
        "editor.background": _rgba(bg),
        "editor.gutter.background": _rgba(bg),
        "editor.active_line.background": _rgba(values["highlight"].background, 0.75),
        "editor.line_number": _rgba(mapped["line-number"].foreground),
        "editor.active_line_number": _rgba(mapped["line-number-current-line"].foreground),
        "editor.document_highlight.read_background": _rgba(
            values["salient-highlight"].background
        ),
        "search.match_background": _rgba(values["popout-highlight"].background),
        "error": _rgba(values["critical"].background),
        "error.background": _rgba(values["critical-highlight"].background),
        "warning": _rgba(values["popout"].foreground),
        "warning.background": _rgba(values["popout-highlight"].background),
        "success": _rgba(values["salient"].foreground),
        "info": _rgba(values["accent-analogous-1"].foreground),
        "created": _rgba(mapped["diff-added"].foreground),
        "deleted": _rgba(mapped["diff-removed"].foreground),
        "modified": _rgba(values["accent-coanalogous-1"].foreground),
        "terminal.background": _rgba(bg),
        "terminal.foreground": _rgba(fg),
        "terminal.bright_foreground": _rgba(values["strong"].foreground),
        "terminal.dim_foreground": _rgba(values["faded"].foreground),
        "players": [
            {
                "cursor": _rgba(values["salient"].foreground),
                "background": _rgba(values["salient"].foreground),
                "selection": _rgba(values["selected"].background),
            }
        ],
        "syntax": {
            token: _syntax_entry(mapped[face]) for token, face in SYNTAX_FACES.items()
        },
    }

    style["background.appearance"] = "opaque"
    return style
