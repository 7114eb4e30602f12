"""Exception hierarchy for the theming engine.

Every error here is a programmer or configuration error: they abort the
offending evaluation and are never retried.
"""


class ThemeError(Exception):
    """Base exception for all theming errors."""

    def __init__(self, message, context=None):
        """
        Args:
            message: Technical error message
            context: Additional context (dict), e.g. the offending value
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self):
        derived = self.context.get("derived_value")
        if derived:
            return f"{self.message} (while evaluating '{derived}')"
        return self.message

    def to_dict(self):
        """Convert error to dictionary"""
        return {
            "type": self.__class__.__name__,
            "message": self.message,
            "context": dict(self.context),
        }


class InvalidChannelError(ThemeError, ValueError):
    """A channel, alpha or gamma value outside its representable range."""


class InvalidColorError(ThemeError, ValueError):
    """A color string that is neither hex nor a known color name."""


class ZeroAlphaError(ThemeError, ZeroDivisionError):
    """Un-premultiplying a transparent color, or scraping an opaque one."""


class DuplicateRegistrationError(ThemeError):
    """The same derived value name was registered twice."""


class UnknownNameError(ThemeError):
    """A derived value read a name that is not available to it."""

    def __init__(self, name, requested_by=None):
        if requested_by:
            message = f"'{requested_by}' depends on unknown or undeclared name '{name}'"
        else:
            message = f"Unknown name '{name}'"
        super().__init__(message, {"name": name, "requested_by": requested_by})
        self.name = name
        self.requested_by = requested_by


class CyclicDependencyError(ThemeError):
    """Derived values (or style inheritance) form a cycle."""

    def __init__(self, names):
        names = tuple(names)
        super().__init__(
            "Cyclic dependency between: " + ", ".join(names), {"names": names}
        )
        self.names = names


class PaletteError(ThemeError):
    """An invalid palette configuration (preset, JSON file or scalar)."""
