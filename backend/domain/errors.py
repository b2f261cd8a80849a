"""
Error types raised by the snake board core.

Unknown actions are not errors: the reducer passes them
through untouched so it can share a dispatch channel with other features.
"""

from .constants import Direction


class SnakeBoardError(Exception):
    """Base class for every error raised by this package."""


class ConfigurationError(SnakeBoardError, ValueError):
    """Board parameters (or their environment overrides) are out of range."""


class InvalidDirectionError(SnakeBoardError, ValueError):
    """A value outside the Direction enum reached the geometry helper or an action."""

    def __init__(self, value):
        self.value = value
        valid = ", ".join(d.value for d in Direction)
        super().__init__(f"Invalid direction {value!r}. Expected one of: {valid}")


class InvalidActionError(SnakeBoardError, ValueError):
    """An action record does not have the expected shape, or a Play interval is not positive."""


class InvalidSnapshotError(SnakeBoardError, ValueError):
    """A serialized board snapshot or replay document cannot be decoded."""
