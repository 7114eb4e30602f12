import os
import subprocess
import sys
import threading
import unittest

from semantic_theme.boundary import PresentationBoundary
from semantic_theme.color import ARGB, from_premultiplied, hex_to_rgb
from semantic_theme.errors import (
    CyclicDependencyError,
    DuplicateRegistrationError,
    UnknownNameError,
    ZeroAlphaError,
)
from semantic_theme.palette import preset
from semantic_theme.registry import SETTING, STYLE_SPEC, DependencyRegistry
from semantic_theme.styles import Style

ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


class RecordingBoundary(PresentationBoundary):
    def __init__(self):
        self.applied = []

    def apply_style(self, name, attributes, priority="default"):
        self.applied.append((name, attributes, priority))

    def resolve_named_color(self, name):
        if name == "paper":
            return (1.0, 1.0, 0.9)
        return hex_to_rgb(name)


class TestRegistration(unittest.TestCase):
    def test_duplicate_registration_rejected(self) -> None:
        registry = DependencyRegistry()
        registry.register("a", SETTING, lambda p, v: 1)
        with self.assertRaises(DuplicateRegistrationError):
            registry.register("a", STYLE_SPEC, lambda p, v: Style())
        self.assertEqual(len(registry), 1)

    def test_unknown_kind_rejected(self) -> None:
        with self.assertRaises(ValueError):
            DependencyRegistry().register("a", "face", lambda p, v: 1)

    def test_decorators_register_in_order(self) -> None:
        registry = DependencyRegistry()

        @registry.setting("x")
        def x(p, v):
            return 1

        @registry.style("y", depends_on=["x"])
        def y(p, v):
            return Style(weight="bold")

        self.assertEqual(registry.names(), ["x", "y"])
        self.assertIn("y", registry)
        self.assertEqual([e.kind for e in registry], [SETTING, STYLE_SPEC])

    def test_reset_allows_re_registration(self) -> None:
        registry = DependencyRegistry()
        registry.register("a", SETTING, lambda p, v: 1)
        registry.reset()
        self.assertEqual(len(registry), 0)
        registry.register("a", SETTING, lambda p, v: 2)
        self.assertEqual(registry.evaluate(preset("light")), {"a": 2})


class TestOrdering(unittest.TestCase):
    def test_consumer_sees_committed_producer_value(self) -> None:
        registry = DependencyRegistry()
        registry.register("s1", SETTING, lambda p, v: p.default_bg)
        registry.register("s2", SETTING, lambda p, v: "seen " + v["s1"], depends_on=["s1"])
        values = registry.evaluate(preset("light"))
        self.assertEqual(values["s2"], "seen #ffffff")

    def test_consumer_registered_before_producer(self) -> None:
        registry = DependencyRegistry()
        registry.register("s2", SETTING, lambda p, v: v["s1"] * 2, depends_on=["s1"])
        registry.register("s1", SETTING, lambda p, v: 21)
        self.assertEqual(registry.evaluate(preset("light"))["s2"], 42)

    def test_order_is_stable_topological(self) -> None:
        registry = DependencyRegistry()
        registry.register("a", SETTING, lambda p, v: 0)
        registry.register("b", STYLE_SPEC, lambda p, v: Style(), depends_on=["c"])
        registry.register("c", SETTING, lambda p, v: 0)
        registry.register("d", SETTING, lambda p, v: 0, depends_on=["a", "a"])
        self.assertEqual([e.name for e in registry.order()], ["a", "c", "b", "d"])

    def test_settings_and_styles_share_one_order(self) -> None:
        registry = DependencyRegistry()
        registry.register("face", STYLE_SPEC, lambda p, v: Style(foreground=v["fg"]), depends_on=["fg"])
        registry.register("fg", SETTING, lambda p, v: p.salient_fg)
        values = registry.evaluate(preset("light"))
        self.assertEqual(list(values), ["fg", "face"])
        self.assertEqual(values["face"].foreground, "#673ab7")

    def test_cycle_detected(self) -> None:
        registry = DependencyRegistry()
        registry.register("ok", SETTING, lambda p, v: 0)
        registry.register("a", SETTING, lambda p, v: 0, depends_on=["b"])
        registry.register("b", SETTING, lambda p, v: 0, depends_on=["a"])
        with self.assertRaises(CyclicDependencyError) as cm:
            registry.evaluate(preset("light"))
        self.assertEqual(set(cm.exception.names), {"a", "b"})

    def test_cycle_report_excludes_downstream_consumers(self) -> None:
        registry = DependencyRegistry()
        registry.register("consumer", SETTING, lambda p, v: 0, depends_on=["a"])
        registry.register("a", SETTING, lambda p, v: 0, depends_on=["b"])
        registry.register("b", SETTING, lambda p, v: 0, depends_on=["a"])
        registry.register("later", SETTING, lambda p, v: 0, depends_on=["consumer"])
        with self.assertRaises(CyclicDependencyError) as cm:
            registry.order()
        self.assertEqual(cm.exception.names, ("a", "b"))

    def test_unregistered_dependency_reported(self) -> None:
        registry = DependencyRegistry()
        registry.register("a", SETTING, lambda p, v: 0, depends_on=["missing"])
        with self.assertRaises(UnknownNameError) as cm:
            registry.order()
        self.assertEqual(cm.exception.name, "missing")
        self.assertEqual(cm.exception.requested_by, "a")

    def test_undeclared_read_reported(self) -> None:
        registry = DependencyRegistry()
        registry.register("s1", SETTING, lambda p, v: 1)
        registry.register("s2", SETTING, lambda p, v: v["s1"] + 1)
        with self.assertRaises(UnknownNameError) as cm:
            registry.evaluate(preset("light"))
        self.assertEqual(cm.exception.name, "s1")
        self.assertEqual(cm.exception.requested_by, "s2")
        self.assertIn("s2", str(cm.exception))


class TestEvaluation(unittest.TestCase):
    def test_errors_carry_derived_value_name(self) -> None:
        registry = DependencyRegistry()
        registry.register("broken", SETTING, lambda p, v: from_premultiplied(ARGB(0, 0, 0, 0)))
        with self.assertRaises(ZeroAlphaError) as cm:
            registry.evaluate(preset("light"))
        self.assertEqual(cm.exception.context["derived_value"], "broken")
        self.assertIn("broken", str(cm.exception))

    def test_other_errors_note_derived_value_name(self) -> None:
        registry = DependencyRegistry()
        registry.register("lookup", SETTING, lambda p, v: {}["missing"])
        with self.assertRaises(KeyError) as cm:
            registry.evaluate(preset("light"))
        self.assertIn("while evaluating 'lookup'", cm.exception.__notes__)

    def test_registry_does_not_load_image_stack(self) -> None:
        code = "import sys, semantic_theme.registry; print('sklearn' in sys.modules, 'PIL' in sys.modules)"
        result = subprocess.run(
            [sys.executable, "-c", code], capture_output=True, text=True, check=True, cwd=ROOT
        )
        self.assertEqual(result.stdout.split(), ["False", "False"])

    def test_style_must_evaluate_to_style(self) -> None:
        registry = DependencyRegistry()
        registry.register("face", STYLE_SPEC, lambda p, v: {"foreground": "#000000"})
        with self.assertRaises(TypeError):
            registry.evaluate(preset("light"))

    def test_empty_registry(self) -> None:
        boundary = RecordingBoundary()
        self.assertEqual(DependencyRegistry().reevaluate(preset("light"), boundary), {})
        self.assertEqual(boundary.applied, [])


class TestReevaluate(unittest.TestCase):
    def setUp(self) -> None:
        self.registry = DependencyRegistry()
        self.registry.register(
            "tinted", STYLE_SPEC, lambda p, v: Style(background=v["bg"], extend=True), depends_on=["bg"]
        )
        self.registry.register("bg", SETTING, lambda p, v: p.default_bg)
        self.registry.register("plain", STYLE_SPEC, lambda p, v: Style(foreground=p.default_fg))

    def test_styles_applied_at_default_priority_in_order(self) -> None:
        boundary = RecordingBoundary()
        self.registry.reevaluate(preset("light"), boundary)
        self.assertEqual(
            boundary.applied,
            [
                ("tinted", {"background": "#ffffff", "extend": True}, "default"),
                ("plain", {"foreground": "#37474f"}, "default"),
            ],
        )

    def test_reevaluate_is_idempotent(self) -> None:
        boundary = RecordingBoundary()
        first = self.registry.reevaluate(preset("dark"), boundary)
        second = self.registry.reevaluate(preset("dark"), boundary)
        self.assertEqual(first, second)
        self.assertEqual(boundary.applied[:2], boundary.applied[2:])

    def test_palette_names_resolved_through_boundary(self) -> None:
        boundary = RecordingBoundary()
        values = self.registry.reevaluate(preset("light", default_bg="paper"), boundary)
        self.assertEqual(values["bg"], "#ffffe6")

    def test_concurrent_reevaluation_is_consistent(self) -> None:
        boundary = RecordingBoundary()
        palettes = [preset("light"), preset("dark")]
        threads = [
            threading.Thread(target=self.registry.reevaluate, args=(palettes[i % 2], boundary))
            for i in range(8)
        ]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        # Each run applies its two styles back to back
        for i in range(0, len(boundary.applied), 2):
            tinted, plain = boundary.applied[i], boundary.applied[i + 1]
            self.assertEqual(tinted[0], "tinted")
            palette = palettes[0] if tinted[1]["background"] == "#ffffff" else palettes[1]
            self.assertEqual(plain[1]["foreground"], palette.default_fg)
