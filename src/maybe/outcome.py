"""The Outcome container and its combinator algebra.

An ``Outcome[V, E]`` holds exactly one of a success value ``V`` or an error
``E`` (a ``BaseError``). Combinators compose steps without branching::

    user_name = (
        find_user(user_id)                      # Outcome[User, Error]
        .ensure(lambda u: u.active, inactive)   # guard
        .select(lambda u: u.name)               # map
        .match(str.upper, lambda e: "?")        # exit the algebra
    )

Sync and async steps share the same names. When a continuation returns an
awaitable, the combinator returns a ``PendingOutcome`` that exposes the same
combinators and can be awaited to an ``Outcome``. ``Outcome`` itself is
awaitable (it resolves to itself), so ``await outcome.then(async_step)`` is
valid whether or not the step ran. Terminal operations that produce plain
values have explicit ``*_async`` forms.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Generator
from dataclasses import dataclass
import inspect
from typing import Any, Self, cast

from maybe.conversion import convert_error
from maybe.enrichment import resolve_success_kind
from maybe.errors import BaseError, Error
from maybe.exceptions import InvalidStateError, MissingArgumentError
from maybe.kinds import OutcomeKind

__all__ = [
    "Maybe",
    "Outcome",
    "PendingOutcome",
    "failure",
    "might_be",
    "pending",
    "success",
]

_NO_VALUE_MESSAGE = "Cannot access the value of an error outcome."
_NO_ERROR_MESSAGE = "Cannot access the error of a success outcome."


def _needs_await(result: object) -> bool:
    return inspect.isawaitable(result) and not isinstance(result, Outcome)


def _require(fn: object, parameter: str) -> None:
    if fn is None:
        raise MissingArgumentError(parameter)


def _as_outcome(result: object, step: str) -> Outcome[Any, Any]:
    if not isinstance(result, Outcome):
        raise TypeError(
            f"{step}() continuation must return an Outcome, got {type(result).__name__}"
        )
    return result


async def _finish[T, R](awaitable: Awaitable[T], finish: Callable[[T], R]) -> R:
    result = finish(await awaitable)
    if _needs_await(result):
        return await cast("Awaitable[R]", result)
    return result


def _continue[T](
    result: T | Awaitable[T], finish: Callable[[T], Outcome[Any, Any]]
) -> Outcome[Any, Any] | PendingOutcome[Any, Any]:
    """Apply ``finish`` now, or later when ``result`` is still pending."""
    if _needs_await(result):
        return PendingOutcome(_finish(cast("Awaitable[T]", result), finish))
    return finish(cast("T", result))


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class Outcome[V, E: BaseError]:
    """Either a success value or an error, never both.

    Build instances with ``Outcome.success`` / ``Outcome.failure`` (or the
    module-level ``success`` / ``failure``). ``error_type`` is the declared
    error type of the chain; it defaults to the general ``Error`` and drives
    the conversion protocol when a step supplies an error of another type.
    """

    _is_success: bool
    _value: Any
    _error: Any
    error_type: type[BaseError] = Error

    # --- Construction ---

    @classmethod
    def success(cls, value: V, *, error_type: type[E] | None = None) -> Outcome[V, E]:
        return cls(True, value, None, error_type or Error)

    @classmethod
    def failure(
        cls, error: BaseError, *, error_type: type[E] | None = None
    ) -> Outcome[V, E]:
        """Build an error outcome.

        With ``error_type``, an error of another type is converted into it
        (the given error becomes the cause); an error already of that type is
        kept as-is.
        """
        if not isinstance(error, BaseError):
            raise TypeError(
                f"failure() expects a BaseError, got {type(error).__name__}"
            )
        if error_type is None:
            return cls(False, None, error, Error)
        return cls(False, None, convert_error(error, error_type), error_type)

    # --- Introspection ---

    @property
    def is_success(self) -> bool:
        return self._is_success

    @property
    def is_error(self) -> bool:
        return not self._is_success

    @property
    def kind(self) -> OutcomeKind:
        """The error's kind, or the success value's reported kind (default SUCCESS)."""
        if not self._is_success:
            return self._error.kind
        return resolve_success_kind(self._value)

    def value_or_fail(self, message: str | None = None) -> V:
        """Return the success value.

        Raises:
            InvalidStateError: If this is an error outcome.
        """
        if not self._is_success:
            raise InvalidStateError(message or _NO_VALUE_MESSAGE)
        return self._value

    def error_or_fail(self, message: str | None = None) -> E:
        """Return the error.

        Raises:
            InvalidStateError: If this is a success outcome.
        """
        if self._is_success:
            raise InvalidStateError(message or _NO_ERROR_MESSAGE)
        return self._error

    def value_or_default(self, default: V | None = None) -> V | None:
        return self._value if self._is_success else default

    def error_or_default(self, default: E | None = None) -> E | None:
        return default if self._is_success else self._error

    def with_error_type[E2: BaseError](self, error_type: type[E2]) -> Outcome[V, E2]:
        """Re-declare the error type, converting a held error if needed."""
        if self.error_type is error_type:
            return cast("Outcome[V, E2]", self)
        if self._is_success:
            return Outcome(True, self._value, None, error_type)
        return Outcome.failure(self._error, error_type=error_type)

    # --- Value path ---

    def select[U](
        self, fn: Callable[[V], U | Awaitable[U]]
    ) -> Outcome[U, E] | PendingOutcome[U, E]:
        """Map the success value; errors pass through and ``fn`` never runs."""
        _require(fn, "fn")
        if not self._is_success:
            return cast("Outcome[U, E]", self)
        return _continue(
            fn(self._value),
            lambda value: Outcome(True, value, None, self.error_type),
        )

    def then[U](
        self,
        fn: Callable[[V], Outcome[U, Any] | Awaitable[Outcome[U, Any]]],
        *,
        error_type: type[BaseError] | None = None,
    ) -> Outcome[U, Any] | PendingOutcome[U, Any]:
        """Chain a step that itself returns an outcome.

        Errors short-circuit: ``fn`` never runs. With ``error_type``, the
        resulting error (propagated or returned by ``fn``) is lifted into
        that type through the conversion protocol.
        """
        _require(fn, "fn")
        if not self._is_success:
            if error_type is None:
                return cast("Outcome[U, E]", self)
            return Outcome.failure(self._error, error_type=error_type)

        def finish(result: Outcome[U, Any]) -> Outcome[U, Any]:
            outcome = _as_outcome(result, "then")
            return outcome if error_type is None else outcome.with_error_type(error_type)

        return _continue(fn(self._value), finish)

    def then_combine[U, R](
        self,
        fn: Callable[[V], Outcome[U, Any] | Awaitable[Outcome[U, Any]]],
        combine: Callable[[V, U], R],
    ) -> Outcome[R, E] | PendingOutcome[R, E]:
        """Chain a step and merge both values with ``combine``."""
        _require(fn, "fn")
        _require(combine, "combine")
        if not self._is_success:
            return cast("Outcome[R, E]", self)
        value = self._value

        def finish(result: Outcome[U, Any]) -> Outcome[R, E]:
            outcome = _as_outcome(result, "then_combine")
            if outcome.is_error:
                return Outcome.failure(outcome._error, error_type=self.error_type)
            return Outcome(True, combine(value, outcome._value), None, self.error_type)

        return _continue(fn(value), finish)

    def ensure(
        self,
        predicate: Callable[[V], bool | Awaitable[bool]],
        error: BaseError | Callable[[V], BaseError],
    ) -> Outcome[V, E] | PendingOutcome[V, E]:
        """Keep the success only when ``predicate`` holds.

        On a failed check the outcome becomes ``error`` (or ``error(value)``
        when a factory is given), converted into the declared error type
        when it is not already one. Existing errors pass through and the
        predicate never runs.
        """
        _require(predicate, "predicate")
        _require(error, "error")
        if not self._is_success:
            return self
        value = self._value

        def finish(passed: bool) -> Outcome[V, E]:
            if passed:
                return self
            err = error if isinstance(error, BaseError) else error(value)
            return Outcome.failure(err, error_type=self.error_type)

        return _continue(predicate(value), finish)

    def if_some(
        self, action: Callable[[V], Any]
    ) -> Outcome[V, E] | PendingOutcome[V, E]:
        """Run ``action`` on the success value; return this outcome unchanged."""
        _require(action, "action")
        if not self._is_success:
            return self
        return _continue(action(self._value), lambda _: self)

    def if_none(
        self, action: Callable[[E], Any]
    ) -> Outcome[V, E] | PendingOutcome[V, E]:
        """Run ``action`` on the error; return this outcome unchanged."""
        _require(action, "action")
        if self._is_success:
            return self
        return _continue(action(self._error), lambda _: self)

    # --- Error path ---

    def recover(
        self,
        fn: Callable[[E], Outcome[V, Any] | Awaitable[Outcome[V, Any]]],
        *,
        error_type: type[BaseError] | None = None,
    ) -> Outcome[V, Any] | PendingOutcome[V, Any]:
        """Give an error a chance to become a success; successes pass through."""
        _require(fn, "fn")
        if self._is_success:
            return self if error_type is None else self.with_error_type(error_type)

        def finish(result: Outcome[V, Any]) -> Outcome[V, Any]:
            outcome = _as_outcome(result, "recover")
            return outcome if error_type is None else outcome.with_error_type(error_type)

        return _continue(fn(self._error), finish)

    def else_error(
        self, error: BaseError | Callable[[E], BaseError | Awaitable[BaseError]]
    ) -> Outcome[V, E] | PendingOutcome[V, E]:
        """Replace the error with ``error`` (or ``error(e)``); successes pass through.

        Raises:
            MissingArgumentError: If ``error`` is None, before anything runs.
        """
        _require(error, "error")
        if self._is_success:
            return self
        if isinstance(error, BaseError):
            return Outcome.failure(error, error_type=self.error_type)
        return _continue(
            error(self._error),
            lambda err: Outcome.failure(err, error_type=self.error_type),
        )

    # --- Terminals ---

    def else_(self, fallback: V) -> V:
        """Return the success value, or ``fallback`` for an error."""
        return self._value if self._is_success else fallback

    def else_get(self, fn: Callable[[E], V]) -> V:
        """Return the success value, or ``fn(error)``.

        Raises:
            MissingArgumentError: If ``fn`` is None, before anything runs.
        """
        _require(fn, "fn")
        return self._value if self._is_success else fn(self._error)

    async def else_get_async(self, fn: Callable[[E], V | Awaitable[V]]) -> V:
        _require(fn, "fn")
        if self._is_success:
            return self._value
        result = fn(self._error)
        if _needs_await(result):
            return await cast("Awaitable[V]", result)
        return cast("V", result)

    def match[R](self, on_success: Callable[[V], R], on_error: Callable[[E], R]) -> R:
        """Exit the algebra: exactly one of the two handlers runs."""
        _require(on_success, "on_success")
        _require(on_error, "on_error")
        if self._is_success:
            return on_success(self._value)
        return on_error(self._error)

    async def match_async[R](
        self,
        on_success: Callable[[V], R | Awaitable[R]],
        on_error: Callable[[E], R | Awaitable[R]],
    ) -> R:
        """Like ``match``, awaiting whichever handler result is awaitable."""
        result = self.match(on_success, on_error)
        if _needs_await(result):
            return await cast("Awaitable[R]", result)
        return cast("R", result)

    def then_do(self, action: Callable[[V], Any]) -> None:
        """Run ``action`` on the success value and end the chain."""
        _require(action, "action")
        if self._is_success:
            action(self._value)

    def else_do(self, action: Callable[[E], Any]) -> None:
        """Run ``action`` on the error and end the chain."""
        _require(action, "action")
        if not self._is_success:
            action(self._error)

    async def then_do_async(self, action: Callable[[V], Any]) -> None:
        _require(action, "action")
        if self._is_success:
            result = action(self._value)
            if _needs_await(result):
                await result

    async def else_do_async(self, action: Callable[[E], Any]) -> None:
        _require(action, "action")
        if not self._is_success:
            result = action(self._error)
            if _needs_await(result):
                await result

    # --- Protocols ---

    def __await__(self) -> Generator[Any, None, Self]:
        """Resolve immediately to this outcome."""
        if False:  # pragma: no cover - makes this a generator
            yield
        return self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Outcome):
            return NotImplemented
        if self._is_success != other._is_success:
            return False
        if self._is_success:
            return bool(self._value == other._value)
        return bool(self._error == other._error)

    def __hash__(self) -> int:
        return hash((self._is_success, self._value if self._is_success else self._error))

    def __repr__(self) -> str:
        if self._is_success:
            return f"Outcome.success({self._value!r})"
        return f"Outcome.failure({self._error!r})"


#: Outcome whose error type is the general ``Error``.
type Maybe[V] = Outcome[V, Error]


class PendingOutcome[V, E: BaseError]:
    """An outcome still being computed by an awaitable.

    Offers the same combinators as ``Outcome``; each returns a new
    ``PendingOutcome`` and nothing runs until it is awaited. Terminal
    operations are coroutines. A pending outcome wraps a single awaitable and
    can be awaited once.
    """

    __slots__ = ("_awaitable",)

    def __init__(self, awaitable: Awaitable[Outcome[V, E]]) -> None:
        if not inspect.isawaitable(awaitable):
            raise TypeError(
                f"PendingOutcome expects an awaitable, got {type(awaitable).__name__}"
            )
        self._awaitable = awaitable

    def __await__(self) -> Generator[Any, None, Outcome[V, E]]:
        return self._resolve().__await__()

    def __repr__(self) -> str:
        return f"PendingOutcome({self._awaitable!r})"

    async def _resolve(self) -> Outcome[V, E]:
        outcome = await self._awaitable
        if not isinstance(outcome, Outcome):
            raise TypeError(
                f"PendingOutcome resolved to {type(outcome).__name__}, expected Outcome"
            )
        return outcome

    async def _step(self, apply: Callable[[Outcome[V, E]], Any]) -> Any:
        result = apply(await self._resolve())
        if inspect.isawaitable(result):
            return await result
        return result

    def _chain(self, apply: Callable[[Outcome[V, E]], Any]) -> PendingOutcome[Any, Any]:
        return PendingOutcome(self._step(apply))

    # --- Value path ---

    def select[U](self, fn: Callable[[V], U | Awaitable[U]]) -> PendingOutcome[U, E]:
        _require(fn, "fn")
        return self._chain(lambda o: o.select(fn))

    def then[U](
        self,
        fn: Callable[[V], Outcome[U, Any] | Awaitable[Outcome[U, Any]]],
        *,
        error_type: type[BaseError] | None = None,
    ) -> PendingOutcome[U, Any]:
        _require(fn, "fn")
        return self._chain(lambda o: o.then(fn, error_type=error_type))

    def then_combine[U, R](
        self,
        fn: Callable[[V], Outcome[U, Any] | Awaitable[Outcome[U, Any]]],
        combine: Callable[[V, U], R],
    ) -> PendingOutcome[R, E]:
        _require(fn, "fn")
        _require(combine, "combine")
        return self._chain(lambda o: o.then_combine(fn, combine))

    def ensure(
        self,
        predicate: Callable[[V], bool | Awaitable[bool]],
        error: BaseError | Callable[[V], BaseError],
    ) -> PendingOutcome[V, E]:
        _require(predicate, "predicate")
        _require(error, "error")
        return self._chain(lambda o: o.ensure(predicate, error))

    def if_some(self, action: Callable[[V], Any]) -> PendingOutcome[V, E]:
        _require(action, "action")
        return self._chain(lambda o: o.if_some(action))

    def if_none(self, action: Callable[[E], Any]) -> PendingOutcome[V, E]:
        _require(action, "action")
        return self._chain(lambda o: o.if_none(action))

    # --- Error path ---

    def recover(
        self,
        fn: Callable[[E], Outcome[V, Any] | Awaitable[Outcome[V, Any]]],
        *,
        error_type: type[BaseError] | None = None,
    ) -> PendingOutcome[V, Any]:
        _require(fn, "fn")
        return self._chain(lambda o: o.recover(fn, error_type=error_type))

    def else_error(
        self, error: BaseError | Callable[[E], BaseError | Awaitable[BaseError]]
    ) -> PendingOutcome[V, E]:
        _require(error, "error")
        return self._chain(lambda o: o.else_error(error))

    # --- Terminals ---

    async def else_(self, fallback: V) -> V:
        return (await self._resolve()).else_(fallback)

    async def else_get(self, fn: Callable[[E], V | Awaitable[V]]) -> V:
        _require(fn, "fn")
        return await (await self._resolve()).else_get_async(fn)

    async def else_get_async(self, fn: Callable[[E], V | Awaitable[V]]) -> V:
        return await self.else_get(fn)

    async def match[R](
        self,
        on_success: Callable[[V], R | Awaitable[R]],
        on_error: Callable[[E], R | Awaitable[R]],
    ) -> R:
        _require(on_success, "on_success")
        _require(on_error, "on_error")
        return await (await self._resolve()).match_async(on_success, on_error)

    async def match_async[R](
        self,
        on_success: Callable[[V], R | Awaitable[R]],
        on_error: Callable[[E], R | Awaitable[R]],
    ) -> R:
        return await self.match(on_success, on_error)

    async def then_do(self, action: Callable[[V], Any]) -> None:
        _require(action, "action")
        await (await self._resolve()).then_do_async(action)

    async def else_do(self, action: Callable[[E], Any]) -> None:
        _require(action, "action")
        await (await self._resolve()).else_do_async(action)

    then_do_async = then_do
    else_do_async = else_do


def success[V](
    value: V, *, error_type: type[BaseError] | None = None
) -> Outcome[V, Any]:
    """Shorthand for ``Outcome.success``."""
    return Outcome.success(value, error_type=error_type)


def failure(
    error: BaseError, *, error_type: type[BaseError] | None = None
) -> Outcome[Any, Any]:
    """Shorthand for ``Outcome.failure``."""
    return Outcome.failure(error, error_type=error_type)


def might_be(
    value: Any, *, error_type: type[BaseError] | None = None
) -> Outcome[Any, Any]:
    """Lift a plain value or an error into an outcome.

    Errors become failures, anything else (``None`` included) a success.
    """
    if isinstance(value, BaseError):
        return Outcome.failure(value, error_type=error_type)
    return Outcome.success(value, error_type=error_type)


def pending[V, E: BaseError](
    awaitable: Awaitable[Outcome[V, E]],
) -> PendingOutcome[V, E]:
    """Wrap an awaitable outcome (e.g. an ``async def`` call) for chaining."""
    return PendingOutcome(awaitable)
