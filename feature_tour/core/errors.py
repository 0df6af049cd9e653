"""Exceptions raised while loading the feature tour.

Navigation never raises: unknown ids and boundary moves are ignored by the
paginator. Bad catalog content and bad settings can only be reported, and
they are reported once, at startup. The category tells the startup code
what kind of problem stopped it.
"""

from enum import Enum, auto


class ErrorCategory(Enum):
    """What kind of input a startup failure came from."""

    INVALID_INPUT = auto()  # Malformed catalog content
    CONFIGURATION = auto()  # Missing or malformed settings
    UNKNOWN = auto()


class FeatureTourError(Exception):
    """Base class for errors raised by the feature tour.

    Attributes:
        category: The kind of failure, defaulting to the subclass's own.
        original_error: The underlying exception, if this wraps one.
    """

    category = ErrorCategory.UNKNOWN

    def __init__(self, message: str, original_error: Exception | None = None) -> None:
        super().__init__(message)
        self.original_error = original_error


class CatalogError(FeatureTourError):
    """A topic catalog violates its invariants (blank or duplicate ids)."""

    category = ErrorCategory.INVALID_INPUT


class ConfigurationError(FeatureTourError):
    """Settings could not be parsed or name an unsupported option."""

    category = ErrorCategory.CONFIGURATION
