"""Exception classes for autolinker.

Provides standardized exceptions for error handling throughout autolinker.
"""

from __future__ import annotations


class AutolinkerError(Exception):
    """Base exception for all autolinker errors.

    Subclass this for specific error categories.
    """

    pass


class ConfigError(AutolinkerError):
    """Invalid linkify configuration.

    Raised when patterns are built from a configuration that cannot
    produce a usable grammar (e.g. no allowed schemes for full links).
    """

    def __init__(self, field: str, message: str) -> None:
        """Initialize configuration error.

        Args:
            field: Name of the offending LinkifyConfig field
            message: Description of the problem
        """
        self.field = field
        super().__init__(f"Invalid config '{field}': {message}")


class PatternError(AutolinkerError):
    """A link grammar failed to compile."""

    def __init__(self, kind: str, message: str) -> None:
        self.kind = kind
        super().__init__(f"Pattern '{kind}': {message}")
