"""Outcome taxonomy: the closed set of success and failure categories."""

from __future__ import annotations

from enum import Enum


class OutcomeKind(str, Enum):
    """Categorical kind of an outcome.

    Values are the labels used in codes and rendered reports
    (e.g. ``"NotFound"``), so ``kind.value`` is safe to show to humans.
    """

    # --- Success family ---
    SUCCESS = "Success"
    CREATED = "Created"
    ACCEPTED = "Accepted"
    UPDATED = "Updated"
    UNCHANGED = "Unchanged"
    DELETED = "Deleted"

    # --- Failure family ---
    VALIDATION = "Validation"
    UNAUTHORIZED = "Unauthorized"
    FORBIDDEN = "Forbidden"
    NOT_FOUND = "NotFound"
    CONFLICT = "Conflict"
    LOCKED = "Locked"
    THROTTLED = "Throttled"
    FAILURE = "Failure"
    UNEXPECTED = "Unexpected"

    @property
    def is_success_family(self) -> bool:
        return self in _SUCCESS_FAMILY

    @property
    def is_failure_family(self) -> bool:
        return self not in _SUCCESS_FAMILY

    def __str__(self) -> str:
        return self.value


_SUCCESS_FAMILY = frozenset(
    {
        OutcomeKind.SUCCESS,
        OutcomeKind.CREATED,
        OutcomeKind.ACCEPTED,
        OutcomeKind.UPDATED,
        OutcomeKind.UNCHANGED,
        OutcomeKind.DELETED,
    }
)


class ConflictKind(str, Enum):
    """Flavor of a conflict reported by ``ConflictError``."""

    #: The resource already exists (e.g. unique key violation).
    DUPLICATE = "Duplicate"
    #: The caller acted on an outdated version of the resource.
    STALE_STATE = "StaleState"
    #: The operation would break a domain rule.
    BUSINESS_RULE_VIOLATION = "BusinessRuleViolation"

    def __str__(self) -> str:
        return self.value
