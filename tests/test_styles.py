import unittest

from semantic_theme.errors import CyclicDependencyError, UnknownNameError
from semantic_theme.mappings import resolve_mappings
from semantic_theme.styles import Style, flatten, merge, style_attributes


class TestMerge(unittest.TestCase):
    def test_later_defined_attributes_win(self) -> None:
        base = Style(foreground="#111111", background="#eeeeee")
        merged = merge(base, Style(foreground="#222222"), Style(weight="bold"))
        self.assertEqual(merged, Style(foreground="#222222", background="#eeeeee", weight="bold"))

    def test_unspecified_never_overrides(self) -> None:
        base = Style(extend=False, underline=True)
        self.assertEqual(merge(base, Style()), base)

    def test_style_attributes_drops_unspecified(self) -> None:
        self.assertEqual(
            style_attributes(Style(foreground="#000000", extend=False)),
            {"foreground": "#000000", "extend": False},
        )


class TestFlatten(unittest.TestCase):
    def setUp(self) -> None:
        self.styles = {
            "salient": Style(foreground="#673ab7"),
            "strong": Style(foreground="#000000", weight="bold"),
            "bold-salient": Style(inherit=("strong", "salient")),
            "link": Style(inherit=("salient",), underline=True),
            "own-wins": Style(inherit=("strong",), foreground="#ff0000"),
        }

    def test_rightmost_parent_wins(self) -> None:
        self.assertEqual(
            flatten("bold-salient", self.styles),
            Style(foreground="#673ab7", weight="bold"),
        )

    def test_own_attributes_win_over_parents(self) -> None:
        self.assertEqual(flatten("own-wins", self.styles).foreground, "#ff0000")
        self.assertEqual(flatten("link", self.styles).underline, True)

    def test_unknown_parent(self) -> None:
        self.styles["orphan"] = Style(inherit=("nowhere",))
        with self.assertRaises(UnknownNameError) as cm:
            flatten("orphan", self.styles)
        self.assertEqual(cm.exception.requested_by, "orphan")

    def test_inheritance_cycle(self) -> None:
        self.styles["a"] = Style(inherit=("b",))
        self.styles["b"] = Style(inherit=("a",))
        with self.assertRaises(CyclicDependencyError):
            flatten("a", self.styles)


class TestMappings(unittest.TestCase):
    def test_resolve_custom_mappings(self) -> None:
        values = {
            "popout": Style(foreground="#ffab91"),
            "strong": Style(foreground="#000000", weight="bold"),
            "faded-fg": "#999999",
        }
        mapped = resolve_mappings(values, {"isearch": ("strong", "popout"), "warning": ("popout",)})
        self.assertEqual(mapped["isearch"], Style(foreground="#ffab91", weight="bold"))
        self.assertEqual(mapped["warning"], Style(foreground="#ffab91"))
