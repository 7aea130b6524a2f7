from __future__ import annotations

import pytest

from maybe.toolkit import (
    CollectionError,
    try_first,
    try_get_item,
    try_get_value,
    try_single,
)

pytestmark = pytest.mark.unit


def test_get_value() -> None:
    assert try_get_value({"a": 1}, "a").value_or_fail() == 1

    err = try_get_value({"a": 1}, "b").error_or_fail()
    assert isinstance(err, CollectionError)
    assert err.code == "Collection.AccessError"
    assert err.key == "b"
    assert err.message == "Key 'b' was not found in the mapping"
    assert isinstance(err.exception, KeyError)


def test_get_value_rejects_unhashable_keys_and_missing_mapping() -> None:
    assert try_get_value({"a": 1}, ["a"]).error_or_fail().message == (
        "Key '['a']' is not a valid mapping key"
    )
    assert try_get_value(None, "a").error_or_fail().message == "Mapping cannot be None"


def test_get_item() -> None:
    assert try_get_item([1, 2, 3], -1).value_or_fail() == 3
    err = try_get_item([1, 2, 3], 5).error_or_fail()
    assert err.message == "Index 5 is out of range for a sequence of length 3"
    assert err.key == 5


def test_first() -> None:
    assert try_first([3, 4, 5], lambda v: v % 2 == 0).value_or_fail() == 4
    assert try_first(iter("ab")).value_or_fail() == "a"
    assert try_first([]).error_or_fail().message == "Sequence contains no elements"
    assert try_first([1], lambda v: v > 1).error_or_fail().message == (
        "Sequence contains no matching element"
    )


def test_single() -> None:
    assert try_single([7]).value_or_fail() == 7
    assert try_single([1, 2, 3], lambda v: v == 2).value_or_fail() == 2
    assert try_single([1, 2]).error_or_fail().message == (
        "Sequence contains more than one matching element"
    )
    assert try_single([], None).is_error
    assert try_single(None).error_or_fail().message == "Iterable cannot be None"
