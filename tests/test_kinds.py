from __future__ import annotations

import pytest

from maybe import ConflictKind, OutcomeKind

pytestmark = pytest.mark.unit

SUCCESS_FAMILY = {
    OutcomeKind.SUCCESS,
    OutcomeKind.CREATED,
    OutcomeKind.ACCEPTED,
    OutcomeKind.UPDATED,
    OutcomeKind.UNCHANGED,
    OutcomeKind.DELETED,
}


@pytest.mark.parametrize("kind", list(OutcomeKind))
def test_every_kind_belongs_to_exactly_one_family(kind: OutcomeKind) -> None:
    assert kind.is_success_family != kind.is_failure_family
    assert kind.is_success_family == (kind in SUCCESS_FAMILY)


def test_failure_family_is_closed() -> None:
    failures = {k for k in OutcomeKind if k.is_failure_family}
    assert failures == {
        OutcomeKind.VALIDATION,
        OutcomeKind.UNAUTHORIZED,
        OutcomeKind.FORBIDDEN,
        OutcomeKind.NOT_FOUND,
        OutcomeKind.CONFLICT,
        OutcomeKind.LOCKED,
        OutcomeKind.THROTTLED,
        OutcomeKind.FAILURE,
        OutcomeKind.UNEXPECTED,
    }


def test_kind_str_is_its_label() -> None:
    assert str(OutcomeKind.NOT_FOUND) == "NotFound"
    assert str(ConflictKind.STALE_STATE) == "StaleState"
    assert OutcomeKind("Throttled") is OutcomeKind.THROTTLED
