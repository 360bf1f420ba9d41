"""Error hierarchy for selectorkit."""
from __future__ import annotations


class SelectorKitError(Exception):
    """Base error for all selectorkit errors."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


# ---------------------------------------------------------------------------
# JSON bridge errors
# ---------------------------------------------------------------------------


class SerializationError(SelectorKitError):
    """An object could not be converted to JSON text."""


class DeserializationError(SelectorKitError):
    """JSON text could not be turned back into an object."""


# ---------------------------------------------------------------------------
# Configuration errors
# ---------------------------------------------------------------------------


class ConfigurationError(SelectorKitError):
    """An environment setting has an unusable value."""
