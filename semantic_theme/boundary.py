"""Presentation boundary: where evaluated faces end up."""

import abc
import copy
import logging

from .color import hex_to_rgb, is_hex_color
from .errors import InvalidColorError

logger = logging.getLogger(__name__)

PRIORITIES = ("default", "user")

# Basic system color names understood without an editor behind the boundary
NAMED_COLORS = {
    "black": "#000000",
    "white": "#ffffff",
    "gray": "#bebebe",
    "grey": "#bebebe",
    "dim gray": "#696969",
    "light gray": "#d3d3d3",
    "red": "#ff0000",
    "green": "#00ff00",
    "blue": "#0000ff",
    "yellow": "#ffff00",
    "cyan": "#00ffff",
    "magenta": "#ff00ff",
    "orange": "#ffa500",
    "purple": "#a020f0",
    "brown": "#a52a2a",
    "navy": "#000080",
}


class PresentationBoundary(abc.ABC):
    """What the theme engine needs from the editor it themes."""

    @abc.abstractmethod
    def apply_style(self, name, attributes, priority="default"):
        """Install `attributes` for face `name` at the given priority level."""

    @abc.abstractmethod
    def resolve_named_color(self, name):
        """Return (r, g, b) in [0, 1] for a system color name."""


class FaceTable(PresentationBoundary):
    """In-memory boundary keeping one attribute layer per priority.

    The theme writes the "default" layer; user overrides live in the
    "user" layer and are never touched by re-evaluation.
    """

    def __init__(self, named_colors=None):
        self.named_colors = dict(NAMED_COLORS)
        if named_colors:
            self.named_colors.update(named_colors)
        self._layers = {priority: {} for priority in PRIORITIES}

    def apply_style(self, name, attributes, priority="default"):
        if priority not in self._layers:
            raise ValueError(f"Unknown priority {priority!r}")
        self._layers[priority][name] = copy.deepcopy(dict(attributes))
        logger.debug("Applied %s face %s: %s", priority, name, attributes)

    def set_user_override(self, name, **attributes):
        self._layers["user"].setdefault(name, {}).update(attributes)

    def clear_user_override(self, name):
        self._layers["user"].pop(name, None)

    def resolve_named_color(self, name):
        if is_hex_color(name):
            return hex_to_rgb(name)
        key = name.strip().lower()
        if key not in self.named_colors:
            raise InvalidColorError(f"Unknown color name: {name!r}", {"color": name})
        return hex_to_rgb(self.named_colors[key])

    def face(self, name):
        """Effective attributes of a face: user layer over default layer."""
        attributes = dict(self._layers["default"].get(name, {}))
        attributes.update(self._layers["user"].get(name, {}))
        return copy.deepcopy(attributes)

    def faces(self, priority="default"):
        return copy.deepcopy(self._layers[priority])

    def __contains__(self, name):
        return any(name in layer for layer in self._layers.values())
