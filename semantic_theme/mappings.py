"""Static mapping of editor and package faces onto semantic faces.

A mapping may name several semantic faces; later ones win on conflicting
attributes, e.g. ("strong", "popout") is bold text in the popout color.
"""

from .styles import Style, flatten

STYLE_MAPPINGS = {
    # Editor basics
    "region": ("selected",),
    "hl-line": ("highlight",),
    "fringe": ("faded",),
    "line-number": ("faded",),
    "line-number-current-line": ("default",),
    "minibuffer-prompt": ("strong",),
    "link": ("salient",),
    "shadow": ("faded",),
    "success": ("salient",),
    "warning": ("popout",),
    "error": ("critical",),
    "match": ("popout",),
    "isearch": ("strong", "popout"),
    "lazy-highlight": ("subtle",),
    "show-paren-match": ("strong", "popout"),
    "show-paren-mismatch": ("critical",),
    "trailing-whitespace": ("subtle",),
    "header-line": ("mode-line",),
    "tooltip": ("subtle",),
    # Syntax highlighting
    "font-lock-comment-face": ("faded",),
    "font-lock-doc-face": ("faded",),
    "font-lock-string-face": ("popout",),
    "font-lock-constant-face": ("salient",),
    "font-lock-warning-face": ("strong", "popout"),
    "font-lock-function-name-face": ("strong", "salient"),
    "font-lock-variable-name-face": ("strong",),
    "font-lock-builtin-face": ("salient",),
    "font-lock-type-face": ("salient",),
    "font-lock-keyword-face": ("salient",),
    "font-lock-number-face": ("accent-analogous-1",),
    "font-lock-operator-face": ("faded",),
    "font-lock-punctuation-face": ("faded",),
    "font-lock-property-name-face": ("accent-coanalogous-1",),
    "font-lock-preprocessor-face": ("accent-complementary",),
    # Packages
    "org-level-1": ("strong", "salient"),
    "org-level-2": ("strong",),
    "org-todo": ("strong", "popout"),
    "org-done": ("faded",),
    "org-code": ("salient",),
    "org-block": ("highlight",),
    "magit-diff-added": ("salient-highlight",),
    "magit-diff-removed": ("critical-highlight",),
    "diff-added": ("salient-highlight",),
    "diff-removed": ("popout-highlight",),
    "completions-common-part": ("salient",),
    "completions-first-difference": ("strong",),
}


def resolve_mappings(values, mappings=None):
    """Flatten every mapping into a concrete Style.

    Args:
        values: Evaluated derived values; the Style entries are used
        mappings: external name -> tuple of semantic face names

    Returns:
        dict of external name -> Style
    """
    mappings = STYLE_MAPPINGS if mappings is None else mappings
    styles = {name: v for name, v in values.items() if isinstance(v, Style)}
    styles.update(
        (name, Style(inherit=tuple(parents)))
        for name, parents in mappings.items()
        if name not in styles
    )
    return {name: flatten(name, styles) for name in mappings}
