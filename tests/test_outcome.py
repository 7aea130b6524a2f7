"""Outcome construction, unwrapping and identity tests."""

from __future__ import annotations

from hypothesis import given, settings
from hypothesis import strategies as st
import pytest

from maybe import (
    Error,
    FailureError,
    InvalidStateError,
    NotFoundError,
    Outcome,
    UnexpectedError,
    ValidationError,
    failure,
    might_be,
    success,
)
from maybe.conversion import CONVERSION_FAILED_CODE

pytestmark = pytest.mark.unit

values = st.one_of(st.integers(), st.text(max_size=20), st.none(), st.booleans())
codes = st.text(alphabet="abcdefghij.", min_size=1, max_size=12)


def test_success_unwraps_value() -> None:
    outcome = success(7)
    assert outcome.is_success
    assert not outcome.is_error
    assert outcome.value_or_fail() == 7
    with pytest.raises(InvalidStateError, match="error of a success outcome"):
        outcome.error_or_fail()


def test_failure_unwraps_same_error() -> None:
    err = NotFoundError("User", 1)
    outcome = failure(err)
    assert outcome.is_error
    assert outcome.error_or_fail() is err
    with pytest.raises(InvalidStateError, match="value of an error outcome"):
        outcome.value_or_fail()


def test_unwrap_accepts_custom_message() -> None:
    with pytest.raises(InvalidStateError, match="no user"):
        failure(Error()).value_or_fail("no user")


def test_defaulted_unwraps() -> None:
    err = Error()
    assert success(1).value_or_default(0) == 1
    assert failure(err).value_or_default(0) == 0
    assert failure(err).value_or_default() is None
    assert success(1).error_or_default() is None
    assert failure(err).error_or_default() is err


def test_failure_rejects_non_errors() -> None:
    with pytest.raises(TypeError, match="expects a BaseError"):
        Outcome.failure(ValueError("x"))  # type: ignore[arg-type]


def test_might_be_lifts_values_and_errors() -> None:
    err = ValidationError()
    assert might_be(err).error_or_fail() is err
    assert might_be(None).is_success
    assert might_be("x").value_or_fail() == "x"


def test_failure_with_matching_error_type_reuses_error() -> None:
    err = FailureError(code="Jobs.Stalled")
    outcome = Outcome.failure(err, error_type=FailureError)
    assert outcome.error_or_fail() is err
    assert outcome.error_type is FailureError


def test_failure_with_other_error_type_converts_and_links_cause() -> None:
    err = NotFoundError("User", 3)
    converted = Outcome.failure(err, error_type=ValidationError).error_or_fail()

    assert isinstance(converted, ValidationError)
    assert converted.code == "Default.Validation"
    assert converted.message == err.message
    assert converted.cause is err


def test_with_error_type_degrades_when_conversion_fails() -> None:
    class Strict(Error):
        @classmethod
        def from_error(cls, source):
            raise ValueError("refusing")

    outcome = failure(Error()).with_error_type(Strict)
    converted = outcome.error_or_fail()
    assert isinstance(converted, UnexpectedError)
    assert converted.code == CONVERSION_FAILED_CODE
    assert outcome.error_type is Strict


def test_equality_and_repr() -> None:
    assert success(1) == success(1)
    assert success(1) != success(2)
    assert failure(NotFoundError("User", 1)) == failure(NotFoundError("User", 2))
    assert success(1) != failure(Error())
    assert repr(success(1)) == "Outcome.success(1)"
    assert repr(failure(Error())).startswith("Outcome.failure(Error(")


def test_outcome_is_immutable() -> None:
    outcome = success(1)
    with pytest.raises(AttributeError):
        outcome._value = 2  # type: ignore[misc]


@pytest.mark.asyncio
async def test_awaiting_an_outcome_returns_itself() -> None:
    outcome = success("ready")
    assert (await outcome) is outcome


@given(value=values)
@settings(max_examples=50, deadline=None, derandomize=True)
def test_success_laws(value: object) -> None:
    """Property: a success always yields its value and never an error."""
    outcome = success(value)
    assert outcome.is_success
    assert outcome.value_or_fail() == value
    assert outcome.error_or_default() is None


@given(code=codes)
@settings(max_examples=50, deadline=None, derandomize=True)
def test_failure_laws(code: str) -> None:
    """Property: a failure always yields the identical error and never a value."""
    err = Error(code=code)
    outcome = failure(err)
    assert outcome.is_error
    assert outcome.error_or_fail() is err
    assert outcome.value_or_default("fallback") == "fallback"
