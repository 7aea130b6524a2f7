"""Success enrichment: values that report a more specific kind than SUCCESS.

A success value may expose ``kind: OutcomeKind``; ``Outcome.kind`` then
reports it instead of the generic ``OutcomeKind.SUCCESS``. The marker types
below cover the common cases, e.g. ``success(Outcomes.CREATED)`` for a
command that only needs to say "created".
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

from maybe.kinds import OutcomeKind

__all__ = [
    "Accepted",
    "Cached",
    "Created",
    "Deleted",
    "HasOutcomeKind",
    "Outcomes",
    "Succeeded",
    "Unchanged",
    "Updated",
    "resolve_success_kind",
]


@runtime_checkable
class HasOutcomeKind(Protocol):
    """Capability: a success value that knows its own outcome kind."""

    @property
    def kind(self) -> OutcomeKind: ...


def resolve_success_kind(value: Any) -> OutcomeKind:
    """Return the kind a success value reports, defaulting to SUCCESS."""
    if isinstance(value, HasOutcomeKind):
        kind = value.kind
        if isinstance(kind, OutcomeKind) and kind.is_success_family:
            return kind
    return OutcomeKind.SUCCESS


@dataclass(frozen=True, slots=True)
class Succeeded:
    """Plain success with no payload."""

    @property
    def kind(self) -> OutcomeKind:
        return OutcomeKind.SUCCESS


@dataclass(frozen=True, slots=True)
class Created:
    @property
    def kind(self) -> OutcomeKind:
        return OutcomeKind.CREATED


@dataclass(frozen=True, slots=True)
class Accepted:
    @property
    def kind(self) -> OutcomeKind:
        return OutcomeKind.ACCEPTED


@dataclass(frozen=True, slots=True)
class Updated:
    @property
    def kind(self) -> OutcomeKind:
        return OutcomeKind.UPDATED


@dataclass(frozen=True, slots=True)
class Unchanged:
    @property
    def kind(self) -> OutcomeKind:
        return OutcomeKind.UNCHANGED


@dataclass(frozen=True, slots=True)
class Deleted:
    @property
    def kind(self) -> OutcomeKind:
        return OutcomeKind.DELETED


@dataclass(frozen=True, slots=True)
class Cached[T]:
    """A value served from a cache.

    Still a plain SUCCESS: the wrapper type itself tells callers that the
    value came from a cache.
    """

    value: T

    @property
    def kind(self) -> OutcomeKind:
        return OutcomeKind.SUCCESS


class Outcomes:
    """Ready-made marker instances."""

    SUCCESS = Succeeded()
    CREATED = Created()
    ACCEPTED = Accepted()
    UPDATED = Updated()
    UNCHANGED = Unchanged()
    DELETED = Deleted()
