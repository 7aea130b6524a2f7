"""String parsing that returns outcomes instead of raising."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal, InvalidOperation
from enum import Enum
import logging
from typing import TYPE_CHECKING, Any
import uuid

from maybe.outcome import Outcome
from maybe.toolkit.errors import ParseError

if TYPE_CHECKING:
    from collections.abc import Callable

__all__ = [
    "try_parse_bool",
    "try_parse_datetime",
    "try_parse_decimal",
    "try_parse_enum",
    "try_parse_float",
    "try_parse_int",
    "try_parse_uuid",
]

logger = logging.getLogger(__name__)

_TRUE = frozenset({"true", "1", "yes", "y", "on"})
_FALSE = frozenset({"false", "0", "no", "n", "off"})


def _parse[T](
    value: str | None,
    target: type[Any],
    label: str,
    parser: Callable[[str], T],
    errors: tuple[type[Exception], ...] = (ValueError,),
) -> Outcome[T, ParseError]:
    if value is None or not value.strip():
        return Outcome.failure(
            ParseError(value or "", target, None, "Value cannot be null or empty"),
            error_type=ParseError,
        )
    try:
        return Outcome.success(parser(value.strip()), error_type=ParseError)
    except errors as exc:
        logger.debug("Parse of %r as %s failed: %s", value, label, exc)
        return Outcome.failure(
            ParseError(value, target, exc, f"'{value}' is not a valid {label} format"),
            error_type=ParseError,
        )


def try_parse_int(value: str | None, base: int = 10) -> Outcome[int, ParseError]:
    return _parse(value, int, "integer", lambda s: int(s, base))


def try_parse_float(value: str | None) -> Outcome[float, ParseError]:
    return _parse(value, float, "float", float)


def try_parse_decimal(value: str | None) -> Outcome[Decimal, ParseError]:
    return _parse(value, Decimal, "decimal", Decimal, (InvalidOperation, ValueError))


def try_parse_uuid(value: str | None) -> Outcome[uuid.UUID, ParseError]:
    return _parse(value, uuid.UUID, "UUID", uuid.UUID)


def try_parse_datetime(
    value: str | None, fmt: str | None = None
) -> Outcome[datetime, ParseError]:
    """Parse an ISO 8601 timestamp, or use ``fmt`` with ``strptime`` when given."""
    if fmt is None:
        return _parse(value, datetime, "datetime", datetime.fromisoformat)
    return _parse(value, datetime, "datetime", lambda s: datetime.strptime(s, fmt))


def try_parse_bool(value: str | None) -> Outcome[bool, ParseError]:
    """Accept true/false, yes/no, on/off, y/n and 1/0 (case-insensitive)."""

    def parse(s: str) -> bool:
        lowered = s.lower()
        if lowered in _TRUE:
            return True
        if lowered in _FALSE:
            return False
        raise ValueError(f"unrecognized boolean {s!r}")

    return _parse(value, bool, "boolean", parse)


def try_parse_enum[T: Enum](
    value: str | None, enum_type: type[T], *, ignore_case: bool = True
) -> Outcome[T, ParseError]:
    """Match ``value`` against member names first, then member values."""

    def parse(s: str) -> T:
        for member in enum_type:
            name_match = (
                member.name.lower() == s.lower() if ignore_case else member.name == s
            )
            if name_match or str(member.value) == s:
                return member
        raise ValueError(f"{s!r} is not a member of {enum_type.__name__}")

    return _parse(value, enum_type, enum_type.__name__, parse)
