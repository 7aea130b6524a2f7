"""Structured error values and their cause chain.

Errors here are plain values, not exceptions: they are returned inside an
``Outcome`` and never raised. Each error owns at most one ``cause``, set at
construction, so a chain is always finite and acyclic.

Equality is structural on ``(type, kind, code)``. Two errors that share a
code compare equal even when their messages or causes differ, which keeps
assertions like ``assert outcome.error_or_fail() == NotFoundError("User", 1)``
independent of timestamps and context.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
import time
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Self

from maybe.kinds import ConflictKind, OutcomeKind

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping

    from maybe.config import FormatSettings

__all__ = [
    "AuthorizationError",
    "BaseError",
    "ConflictError",
    "Error",
    "FailureError",
    "NotFoundError",
    "UnexpectedError",
    "ValidationError",
]

_EMPTY: Mapping[str, Any] = MappingProxyType({})


class BaseError(ABC):
    """Abstract structured error: kind, machine code, message, timestamp, cause."""

    __slots__ = ("_cause", "_code", "_kind", "_message", "_sealed", "_timestamp")

    def __init__(
        self,
        kind: OutcomeKind,
        code: str,
        message: str,
        cause: BaseError | None = None,
    ) -> None:
        if kind.is_success_family:
            raise ValueError(f"Error kind must be a failure kind, got {kind.value!r}")
        if cause is not None and not isinstance(cause, BaseError):
            raise TypeError(
                f"cause must be a BaseError, got {type(cause).__name__}"
            )
        object.__setattr__(self, "_kind", kind)
        object.__setattr__(self, "_code", code)
        object.__setattr__(self, "_message", message)
        object.__setattr__(self, "_timestamp", int(time.time()))
        object.__setattr__(self, "_cause", cause)
        object.__setattr__(self, "_sealed", True)

    def __setattr__(self, name: str, value: Any) -> None:
        if getattr(self, "_sealed", False):
            raise AttributeError(f"{type(self).__name__} is immutable")
        object.__setattr__(self, name, value)

    # --- Core fields ---

    @property
    def kind(self) -> OutcomeKind:
        return self._kind

    @property
    def code(self) -> str:
        return self._code

    @property
    def message(self) -> str:
        return self._message

    @property
    def timestamp(self) -> int:
        """Creation time in whole seconds since the Unix epoch (UTC)."""
        return self._timestamp

    @property
    def cause(self) -> BaseError | None:
        return self._cause

    # --- Conversion path ---

    @classmethod
    @abstractmethod
    def from_error(cls, source: BaseError) -> Self:
        """Build an instance of ``cls`` that carries ``source`` as its cause.

        Used by the conversion protocol when a chain changes its declared
        error type. Implementations adopt the source's message.
        """

    # --- Chain views ---

    def chain(self) -> Iterator[BaseError]:
        """Yield this error followed by each cause, outermost first."""
        current: BaseError | None = self
        while current is not None:
            yield current
            current = current.cause

    def flatten(self) -> list[BaseError]:
        """Return the cause chain as a list, outermost first."""
        return list(self.chain())

    @property
    def root_cause(self) -> BaseError:
        """The innermost error of the chain (``self`` when there is no cause)."""
        *_, last = self.chain()
        return last

    def to_full_string(self, settings: FormatSettings | None = None) -> str:
        """Render this error and its cause chain as a columnar report."""
        from maybe.formatting import format_chain

        return format_chain(self, settings)

    # --- Dunder protocol ---

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BaseError) or type(other) is not type(self):
            return NotImplemented
        return self.kind == other.kind and self.code == other.code

    def __hash__(self) -> int:
        return hash((type(self), self.kind, self.code))

    def __str__(self) -> str:
        return f"[{self.kind.value}] {self.code}: {self.message}"

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(kind={self.kind.value}, code={self.code!r}, "
            f"message={self.message!r})"
        )


class Error(BaseError):
    """General-purpose error with caller-chosen kind, code and message.

    Also the home of the factory helpers, e.g.
    ``Error.not_found("User", 42)`` or ``Error.validation({"email": "required"})``.
    Subclassing ``Error`` without overriding ``__init__`` gives a custom
    error type that the conversion protocol can target out of the box.
    """

    __slots__ = ()

    DEFAULT_CODE = "Default.Error"
    DEFAULT_MESSAGE = "An error has occurred."

    def __init__(
        self,
        kind: OutcomeKind = OutcomeKind.FAILURE,
        code: str | None = None,
        message: str | None = None,
        cause: BaseError | None = None,
    ) -> None:
        super().__init__(
            kind,
            code if code is not None else self.DEFAULT_CODE,
            message if message is not None else self.DEFAULT_MESSAGE,
            cause,
        )

    @classmethod
    def from_error(cls, source: BaseError) -> Self:
        return cls(kind=source.kind, message=source.message, cause=source)

    # --- Factories ---

    @staticmethod
    def custom(
        kind: OutcomeKind, code: str, message: str, cause: BaseError | None = None
    ) -> Error:
        return Error(kind, code, message, cause)

    @staticmethod
    def failure(
        message: str = "A failure has occurred.",
        code: str = "Default.Failure",
        context_data: Mapping[str, Any] | None = None,
        cause: BaseError | None = None,
    ) -> FailureError:
        return FailureError(message, code, context_data, cause)

    @staticmethod
    def unexpected(
        exception: BaseException, message: str | None = None, code: str | None = None
    ) -> UnexpectedError:
        return UnexpectedError(exception, message, code)

    @staticmethod
    def validation(
        field_errors: Mapping[str, str],
        message: str = "A validation error has occurred.",
        code: str = "Default.Validation",
        cause: BaseError | None = None,
    ) -> ValidationError:
        return ValidationError(field_errors, message, code, cause)

    @staticmethod
    def conflict(
        conflict_kind: ConflictKind,
        resource_type: str,
        conflicting_parameters: Mapping[str, Any],
        message: str | None = None,
        code: str | None = None,
        cause: BaseError | None = None,
    ) -> ConflictError:
        return ConflictError(
            conflict_kind, resource_type, conflicting_parameters, message, code, cause
        )

    @staticmethod
    def not_found(
        entity_name: str,
        identifier: Any,
        message: str | None = None,
        code: str | None = None,
        cause: BaseError | None = None,
    ) -> NotFoundError:
        return NotFoundError(entity_name, identifier, message, code, cause)

    @staticmethod
    def unauthorized(
        action: str,
        resource_identifier: str | None = None,
        user_id: str | None = None,
        message: str | None = None,
        code: str | None = None,
        cause: BaseError | None = None,
    ) -> AuthorizationError:
        return AuthorizationError(
            OutcomeKind.UNAUTHORIZED,
            action,
            resource_identifier,
            user_id,
            message,
            code,
            cause,
        )

    @staticmethod
    def forbidden(
        action: str,
        resource_identifier: str | None = None,
        user_id: str | None = None,
        message: str | None = None,
        code: str | None = None,
        cause: BaseError | None = None,
    ) -> AuthorizationError:
        return AuthorizationError(
            OutcomeKind.FORBIDDEN,
            action,
            resource_identifier,
            user_id,
            message,
            code,
            cause,
        )


class ValidationError(Error):
    """Input failed validation; ``field_errors`` maps field name to message."""

    __slots__ = ("_field_errors",)

    DEFAULT_CODE = "Default.Validation"
    DEFAULT_MESSAGE = "A validation error has occurred."

    def __init__(
        self,
        field_errors: Mapping[str, str] | None = None,
        message: str | None = None,
        code: str | None = None,
        cause: BaseError | None = None,
    ) -> None:
        object.__setattr__(
            self, "_field_errors", MappingProxyType(dict(field_errors or {}))
        )
        super().__init__(OutcomeKind.VALIDATION, code, message, cause)

    @property
    def field_errors(self) -> Mapping[str, str]:
        return self._field_errors

    @classmethod
    def from_error(cls, source: BaseError) -> Self:
        return cls(message=source.message, cause=source)


class NotFoundError(Error):
    """A looked-up entity does not exist.

    Code and message derive from the entity: ``NotFoundError("User", 123)``
    has code ``"NotFound.User"`` and message
    ``"User with identifier '123' was not found."``.
    """

    __slots__ = ("_entity_name", "_identifier")

    DEFAULT_CODE = "Default.NotFound"
    DEFAULT_MESSAGE = "A 'not found' error has occurred."

    def __init__(
        self,
        entity_name: str,
        identifier: Any,
        message: str | None = None,
        code: str | None = None,
        cause: BaseError | None = None,
    ) -> None:
        object.__setattr__(self, "_entity_name", entity_name)
        object.__setattr__(self, "_identifier", identifier)
        super().__init__(
            OutcomeKind.NOT_FOUND,
            code if code is not None else f"NotFound.{entity_name}",
            message
            if message is not None
            else f"{entity_name} with identifier '{identifier}' was not found.",
            cause,
        )

    @property
    def entity_name(self) -> str:
        return self._entity_name

    @property
    def identifier(self) -> Any:
        return self._identifier

    @classmethod
    def from_error(cls, source: BaseError) -> Self:
        return cls(
            "", "", message=source.message, code=cls.DEFAULT_CODE, cause=source
        )


class ConflictError(Error):
    """The operation clashes with the current state of a resource."""

    __slots__ = ("_conflict_kind", "_conflicting_parameters", "_resource_type")

    DEFAULT_CODE = "Default.Conflict"
    DEFAULT_MESSAGE = "A conflict error has occurred."

    def __init__(
        self,
        conflict_kind: ConflictKind,
        resource_type: str,
        conflicting_parameters: Mapping[str, Any] | None = None,
        message: str | None = None,
        code: str | None = None,
        cause: BaseError | None = None,
    ) -> None:
        object.__setattr__(self, "_conflict_kind", conflict_kind)
        object.__setattr__(self, "_resource_type", resource_type)
        object.__setattr__(
            self,
            "_conflicting_parameters",
            MappingProxyType(dict(conflicting_parameters or {})),
        )
        super().__init__(
            OutcomeKind.CONFLICT,
            code if code is not None else f"Conflict.{conflict_kind.value}",
            message
            if message is not None
            else (
                f"A {conflict_kind.value} conflict occurred on resource "
                f"'{resource_type}'."
            ),
            cause,
        )

    @property
    def conflict_kind(self) -> ConflictKind:
        return self._conflict_kind

    @property
    def resource_type(self) -> str:
        return self._resource_type

    @property
    def conflicting_parameters(self) -> Mapping[str, Any]:
        return self._conflicting_parameters

    @classmethod
    def from_error(cls, source: BaseError) -> Self:
        return cls(
            ConflictKind.BUSINESS_RULE_VIOLATION,
            "",
            message=source.message,
            code=cls.DEFAULT_CODE,
            cause=source,
        )


_AUTHORIZATION_KINDS = frozenset({OutcomeKind.UNAUTHORIZED, OutcomeKind.FORBIDDEN})


class AuthorizationError(Error):
    """The caller is not authenticated (UNAUTHORIZED) or not allowed (FORBIDDEN)."""

    __slots__ = ("_action", "_resource_identifier", "_user_id")

    def __init__(
        self,
        kind: OutcomeKind,
        action: str,
        resource_identifier: str | None = None,
        user_id: str | None = None,
        message: str | None = None,
        code: str | None = None,
        cause: BaseError | None = None,
    ) -> None:
        if kind not in _AUTHORIZATION_KINDS:
            raise ValueError(
                f"AuthorizationError kind must be Unauthorized or Forbidden, "
                f"got {kind.value!r}"
            )
        object.__setattr__(self, "_action", action)
        object.__setattr__(self, "_resource_identifier", resource_identifier)
        object.__setattr__(self, "_user_id", user_id)
        super().__init__(
            kind,
            code if code is not None else f"Authorization.{kind.value}",
            message
            if message is not None
            else _authorization_message(action, resource_identifier, user_id),
            cause,
        )

    @property
    def action(self) -> str:
        return self._action

    @property
    def resource_identifier(self) -> str | None:
        return self._resource_identifier

    @property
    def user_id(self) -> str | None:
        return self._user_id

    @classmethod
    def from_error(cls, source: BaseError) -> Self:
        return cls(
            OutcomeKind.UNAUTHORIZED, "", message=source.message, cause=source
        )


def _authorization_message(
    action: str, resource_identifier: str | None, user_id: str | None
) -> str:
    user = user_id or "anonymous"
    if not action:
        return f"User '{user}' is not authorized to perform this action."
    if resource_identifier is not None:
        return (
            f"User '{user}' is not authorized to perform action '{action}' "
            f"on resource '{resource_identifier}'."
        )
    return f"User '{user}' is not authorized to perform action '{action}'."


class FailureError(Error):
    """Generic operational failure with free-form ``context_data``."""

    __slots__ = ("_context_data",)

    DEFAULT_CODE = "Default.Failure"
    DEFAULT_MESSAGE = "A failure has occurred."

    def __init__(
        self,
        message: str | None = None,
        code: str | None = None,
        context_data: Mapping[str, Any] | None = None,
        cause: BaseError | None = None,
    ) -> None:
        object.__setattr__(
            self,
            "_context_data",
            MappingProxyType(dict(context_data)) if context_data else _EMPTY,
        )
        super().__init__(OutcomeKind.FAILURE, code, message, cause)

    @property
    def context_data(self) -> Mapping[str, Any]:
        return self._context_data

    @classmethod
    def from_error(cls, source: BaseError) -> Self:
        return cls(message=source.message, cause=source)


class UnexpectedError(Error):
    """Wraps a Python exception that escaped into a result chain.

    The exception's own ``__cause__`` (or implicit ``__context__``) chain is
    mirrored as a chain of ``UnexpectedError`` causes, one per level. This is
    the only error whose cause is derived rather than passed in; an explicit
    ``cause`` takes precedence over the derived one.
    """

    __slots__ = ("_exception",)

    DEFAULT_CODE = "System.Exception"
    DEFAULT_MESSAGE = "An unexpected error has occurred."

    def __init__(
        self,
        exception: BaseException | None = None,
        message: str | None = None,
        code: str | None = None,
        cause: BaseError | None = None,
    ) -> None:
        object.__setattr__(self, "_exception", exception)
        if cause is None and exception is not None:
            cause = _unexpected_chain(_inner_exceptions(exception))
        if message is None and exception is not None:
            message = _exception_message(exception)
        super().__init__(OutcomeKind.UNEXPECTED, code, message, cause)

    @property
    def exception(self) -> BaseException | None:
        return self._exception

    @classmethod
    def from_error(cls, source: BaseError) -> Self:
        return cls(message=source.message, cause=source)

    @classmethod
    def _link(cls, exception: BaseException, cause: BaseError | None) -> Self:
        """Wrap one level of an exception chain without deriving further causes."""
        err = cls.__new__(cls)
        object.__setattr__(err, "_exception", exception)
        Error.__init__(
            err, OutcomeKind.UNEXPECTED, None, _exception_message(exception), cause
        )
        return err


def _exception_message(exc: BaseException) -> str:
    return str(exc) or type(exc).__name__


def _inner_exceptions(exc: BaseException) -> list[BaseException]:
    """Return the exceptions behind ``exc``, nearest first, with cycle protection."""
    seen: set[int] = {id(exc)}
    inner: list[BaseException] = []
    current = _next_exception(exc)
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        inner.append(current)
        current = _next_exception(current)
    return inner


def _next_exception(exc: BaseException) -> BaseException | None:
    if exc.__cause__ is not None:
        return exc.__cause__
    if exc.__suppress_context__:
        return None
    return exc.__context__


def _unexpected_chain(exceptions: list[BaseException]) -> UnexpectedError | None:
    """Build nested UnexpectedErrors from innermost outwards."""
    cause: UnexpectedError | None = None
    for exc in reversed(exceptions):
        cause = UnexpectedError._link(exc, cause)
    return cause
