"""Collection access that returns outcomes instead of raising."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from maybe.outcome import Outcome
from maybe.toolkit.errors import CollectionError

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Mapping, Sequence

__all__ = ["try_first", "try_get_item", "try_get_value", "try_single"]


def _fail(
    key: Any, message: str, exc: BaseException | None = None
) -> Outcome[Any, Any]:
    return Outcome.failure(
        CollectionError(key, exc, message), error_type=CollectionError
    )


def try_get_value[K, V](
    mapping: Mapping[K, V] | None, key: K
) -> Outcome[V, CollectionError]:
    if mapping is None:
        return _fail(key, "Mapping cannot be None")
    try:
        return Outcome.success(mapping[key], error_type=CollectionError)
    except KeyError as exc:
        return _fail(key, f"Key '{key}' was not found in the mapping", exc)
    except TypeError as exc:
        return _fail(key, f"Key '{key}' is not a valid mapping key", exc)


def try_get_item[T](
    sequence: Sequence[T] | None, index: int
) -> Outcome[T, CollectionError]:
    """Index into ``sequence``; negative indexes count from the end."""
    if sequence is None:
        return _fail(index, "Sequence cannot be None")
    try:
        return Outcome.success(sequence[index], error_type=CollectionError)
    except IndexError as exc:
        return _fail(
            index,
            f"Index {index} is out of range for a sequence of length {len(sequence)}",
            exc,
        )


def try_first[T](
    iterable: Iterable[T] | None, predicate: Callable[[T], bool] | None = None
) -> Outcome[T, CollectionError]:
    """Return the first element (matching ``predicate``, when given)."""
    if iterable is None:
        return _fail(None, "Iterable cannot be None")
    for item in iterable:
        if predicate is None or predicate(item):
            return Outcome.success(item, error_type=CollectionError)
    if predicate is None:
        return _fail(None, "Sequence contains no elements")
    return _fail(None, "Sequence contains no matching element")


def try_single[T](
    iterable: Iterable[T] | None, predicate: Callable[[T], bool] | None = None
) -> Outcome[T, CollectionError]:
    """Return the only element (matching ``predicate``); none or several is an error."""
    if iterable is None:
        return _fail(None, "Iterable cannot be None")
    matches = (item for item in iterable if predicate is None or predicate(item))
    first = next(matches, _MISSING)
    if first is _MISSING:
        return _fail(None, "Sequence contains no matching element")
    if next(matches, _MISSING) is not _MISSING:
        return _fail(None, "Sequence contains more than one matching element")
    return Outcome.success(first, error_type=CollectionError)


_MISSING: Any = object()
