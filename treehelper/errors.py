"""Exception hierarchy for TreeHelper.

Every error is raised by the call that would have introduced the bad state,
before any mutation happens, so a failed call leaves the tree untouched.
"""


class TreeError(Exception):
    """Base class for all errors raised by TreeHelper."""
    pass


class InvalidTitle(TreeError, ValueError):
    """Raised when a node without a title is attached to a parent."""
    pass


class UnsupportedValueType(TreeError, TypeError):
    """Raised when a value is not one of ``str``, ``int``, ``float``, ``bool`` or ``None``."""
    pass


# Name used by the value-accepting node operations
InvalidValue = UnsupportedValueType


class CircularReference(TreeError, RuntimeError):
    """Raised when reparenting a node would make it its own ancestor."""

    def __init__(self, message: str = "Circular reference detected while setting child to parent"):
        super().__init__(message)


class ConfigurationError(TreeError, ValueError):
    """Raised when a render configuration or glyph override is invalid."""
    pass
