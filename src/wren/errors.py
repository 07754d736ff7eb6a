"""wren exception hierarchy.

Shared across the routing and validation packages so every module
raises and catches the same types.
"""


class WrenError(Exception):
    """Base for all wren-specific errors."""


class ConfigurationError(WrenError):
    """Raised when a schema or route definition is invalid.

    These are programmer errors, raised at definition time (route
    registration, startup) and never recovered from.
    """


class InvalidPathError(ConfigurationError):
    """A route path pattern is malformed or breaks the optional-segment order.

    ``pattern`` is the full pattern being compiled (for prefixed paths, the
    combined pattern) and ``reason`` the specific complaint.
    """

    def __init__(self, pattern: str, reason: str) -> None:
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"API path {pattern} is invalid: {reason}")
