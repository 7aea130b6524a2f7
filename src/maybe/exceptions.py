"""Exception hierarchy for maybe.

Domain failures never raise: they travel inside an ``Outcome``. The
exceptions here signal programmer errors (unwrapping the wrong arm, passing
no handler) and invalid configuration.
"""

from __future__ import annotations


class MaybeError(Exception):
    """Base exception for all maybe library errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint

    def __str__(self) -> str:
        """Return the message followed by the hint, when one is set."""
        msg = super().__str__()
        return f"{msg}. {self.hint}" if self.hint else msg


class InvalidStateError(MaybeError, RuntimeError):
    """An outcome was unwrapped on the arm it does not hold."""


class MissingArgumentError(MaybeError, TypeError):
    """A required callable or value was passed as ``None``."""

    def __init__(
        self, parameter: str, message: str | None = None, *, hint: str | None = None
    ) -> None:
        self.parameter = parameter
        super().__init__(message or f"'{parameter}' must not be None", hint=hint)


class ConfigurationError(MaybeError):
    """Formatter or library settings failed validation."""
