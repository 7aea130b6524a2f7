from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from enum import Enum
import uuid

from hypothesis import given, settings
from hypothesis import strategies as st
import pytest

from maybe import OutcomeKind, ValidationError
from maybe.toolkit import (
    ParseError,
    try_parse_bool,
    try_parse_datetime,
    try_parse_decimal,
    try_parse_enum,
    try_parse_float,
    try_parse_int,
    try_parse_uuid,
)

pytestmark = pytest.mark.unit


class Color(Enum):
    RED = 1
    GREEN = "green"


def test_successful_parses() -> None:
    assert try_parse_int(" 42 ").value_or_fail() == 42
    assert try_parse_int("ff", base=16).value_or_fail() == 255
    assert try_parse_float("2.5").value_or_fail() == 2.5
    assert try_parse_decimal("0.10").value_or_fail() == Decimal("0.10")
    uid = uuid.uuid4()
    assert try_parse_uuid(str(uid)).value_or_fail() == uid
    assert try_parse_datetime("2024-05-01T10:00:00").value_or_fail() == datetime(
        2024, 5, 1, 10
    )
    assert try_parse_datetime("01/05/2024", "%d/%m/%Y").value_or_fail() == datetime(
        2024, 5, 1
    )


def test_parse_error_shape() -> None:
    err = try_parse_int("4.2").error_or_fail()

    assert isinstance(err, ParseError)
    assert isinstance(err, ValidationError)
    assert err.kind is OutcomeKind.VALIDATION
    assert err.code == "Parse.FormatError"
    assert err.message == "'4.2' is not a valid integer format"
    assert err.input_value == "4.2"
    assert err.target_type is int
    assert isinstance(err.exception, ValueError)


@pytest.mark.parametrize(
    "parse",
    [try_parse_int, try_parse_float, try_parse_decimal, try_parse_uuid, try_parse_bool],
)
@pytest.mark.parametrize("value", ["", "  ", None])
def test_blank_input_is_rejected(parse, value) -> None:
    assert parse(value).error_or_fail().message == "Value cannot be null or empty"


def test_invalid_decimal_and_uuid() -> None:
    assert try_parse_decimal("1,5").is_error
    assert try_parse_uuid("not-a-uuid").error_or_fail().message == (
        "'not-a-uuid' is not a valid UUID format"
    )


@pytest.mark.parametrize(
    ("value", "expected"),
    [("true", True), ("YES", True), ("1", True), ("Off", False), ("n", False)],
)
def test_parse_bool(value: str, expected: bool) -> None:
    assert try_parse_bool(value).value_or_fail() is expected


def test_parse_bool_rejects_other_words() -> None:
    assert try_parse_bool("maybe").is_error


def test_parse_enum_by_name_or_value() -> None:
    assert try_parse_enum("red", Color).value_or_fail() is Color.RED
    assert try_parse_enum("1", Color).value_or_fail() is Color.RED
    assert try_parse_enum("green", Color).value_or_fail() is Color.GREEN
    assert try_parse_enum("red", Color, ignore_case=False).is_error
    err = try_parse_enum("blue", Color).error_or_fail()
    assert err.message == "'blue' is not a valid Color format"
    assert err.target_type is Color


@given(number=st.integers())
@settings(max_examples=50, deadline=None, derandomize=True)
def test_parse_int_accepts_any_rendered_integer(number: int) -> None:
    """Property: every rendered integer parses back to itself."""
    assert try_parse_int(str(number)).value_or_fail() == number
