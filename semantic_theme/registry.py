"""Ordered registry of derived values and the re-evaluation protocol.

A derived value is either a plain setting (a color, an angle, ...) or a
style specification applied to the presentation boundary. Each one declares
the names it reads; evaluation walks a stable topological order of that
graph, so registration order only breaks ties.
"""

import heapq
import logging
import threading
from collections import namedtuple

from .errors import (
    CyclicDependencyError,
    DuplicateRegistrationError,
    ThemeError,
    UnknownNameError,
)
from .palette.model import resolve_palette
from .styles import Style, style_attributes

logger = logging.getLogger(__name__)

SETTING = "setting"
STYLE_SPEC = "style"
KINDS = (SETTING, STYLE_SPEC)

DerivedValue = namedtuple("DerivedValue", ["name", "kind", "evaluator", "depends_on"])


class _Scope:
    """Read-only view of the values a single evaluator may read."""

    def __init__(self, owner, allowed, values):
        self._owner = owner
        self._allowed = allowed
        self._values = values

    def __getitem__(self, name):
        if name not in self._allowed or name not in self._values:
            raise UnknownNameError(name, self._owner)
        return self._values[name]

    def __contains__(self, name):
        return name in self._allowed and name in self._values


class DependencyRegistry:
    def __init__(self):
        self._entries = {}
        self._lock = threading.RLock()

    def __len__(self):
        return len(self._entries)

    def __contains__(self, name):
        return name in self._entries

    def __iter__(self):
        return iter(list(self._entries.values()))

    def names(self):
        return list(self._entries)

    def register(self, name, kind, evaluator, depends_on=()):
        """Append a derived value.

        Args:
            name: Unique name of the value
            kind: SETTING or STYLE_SPEC
            evaluator: callable(palette, values) -> value; `values` only
                exposes the names listed in `depends_on`
            depends_on: Names of derived values the evaluator reads
        """
        if kind not in KINDS:
            raise ValueError(f"Unknown derived value kind {kind!r}")
        with self._lock:
            if name in self._entries:
                raise DuplicateRegistrationError(
                    f"Derived value '{name}' is already registered", {"name": name}
                )
            self._entries[name] = DerivedValue(name, kind, evaluator, tuple(depends_on))

    def setting(self, name, depends_on=()):
        """Decorator registering a SETTING."""

        def decorator(evaluator):
            self.register(name, SETTING, evaluator, depends_on)
            return evaluator

        return decorator

    def style(self, name, depends_on=()):
        """Decorator registering a STYLE_SPEC."""

        def decorator(evaluator):
            self.register(name, STYLE_SPEC, evaluator, depends_on)
            return evaluator

        return decorator

    def reset(self):
        with self._lock:
            self._entries.clear()

    def order(self):
        """Stable topological order: producers before consumers, ties in
        registration order.

        Raises:
            UnknownNameError: a dependency was never registered
            CyclicDependencyError: the dependency graph has a cycle
        """
        with self._lock:
            entries = list(self._entries.values())

        position = {entry.name: i for i, entry in enumerate(entries)}
        pending = {}
        consumers = {entry.name: [] for entry in entries}
        for entry in entries:
            for dependency in entry.depends_on:
                if dependency not in position:
                    raise UnknownNameError(dependency, entry.name)
                consumers[dependency].append(entry.name)
            pending[entry.name] = len(set(entry.depends_on))

        ready = [position[name] for name, count in pending.items() if count == 0]
        heapq.heapify(ready)
        ordered = []
        while ready:
            entry = entries[heapq.heappop(ready)]
            ordered.append(entry)
            for consumer in dict.fromkeys(consumers[entry.name]):
                pending[consumer] -= 1
                if pending[consumer] == 0:
                    heapq.heappush(ready, position[consumer])

        if len(ordered) != len(entries):
            raise CyclicDependencyError(_find_cycle(entries, pending))
        return ordered

    def evaluate(self, palette):
        """Compute every derived value for `palette`.

        Returns:
            dict of name -> value, in evaluation order
        """
        with self._lock:
            values = {}
            for entry in self.order():
                scope = _Scope(entry.name, entry.depends_on, values)
                try:
                    value = entry.evaluator(palette, scope)
                except ThemeError as e:
                    e.context.setdefault("derived_value", entry.name)
                    raise
                except Exception as e:
                    e.add_note(f"while evaluating '{entry.name}'")
                    raise
                if entry.kind == STYLE_SPEC and not isinstance(value, Style):
                    raise TypeError(
                        f"Style '{entry.name}' evaluated to {type(value).__name__}, "
                        "expected Style"
                    )
                values[entry.name] = value
                logger.debug("Evaluated %s = %r", entry.name, value)
            return values

    def reevaluate(self, palette, boundary):
        """Recompute everything and apply every style to `boundary`.

        Palette colors given by name are resolved through the boundary
        first. Styles are applied at "default" priority, in evaluation order,
        so overrides at higher priorities survive.
        """
        with self._lock:
            palette = resolve_palette(palette, boundary.resolve_named_color)
            values = self.evaluate(palette)
            styles = 0
            for name, value in values.items():
                if self._entries[name].kind != STYLE_SPEC:
                    continue
                boundary.apply_style(name, style_attributes(value), priority="default")
                styles += 1
            logger.info(
                "Re-evaluated %d derived values (%d styles applied)", len(values), styles
            )
            return values


def _find_cycle(entries, pending):
    """Names on one dependency cycle among the entries left unsorted.

    Every unsorted entry still waits on an unsorted dependency, so following
    those dependencies from the first one must come back to a name already
    seen; the names from that point on form the cycle.
    """
    stuck = {entry.name: entry for entry in entries if pending[entry.name]}
    path = []
    seen = {}
    name = next(iter(stuck))
    while name not in seen:
        seen[name] = len(path)
        path.append(name)
        name = next(d for d in stuck[name].depends_on if d in stuck)
    return path[seen[name]:]
