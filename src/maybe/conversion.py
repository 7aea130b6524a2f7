"""Error-type conversion for chains that change their declared error type.

Rules, in order:

1. ``source`` already is a ``target_type`` (or the target is one of the
   general base types): reuse it as-is, no wrapper, no cause link.
2. Otherwise ask ``target_type.from_error(source)`` for a new instance that
   carries ``source`` as its cause.
3. If that path is missing or fails, degrade to an ``UnexpectedError``
   (code ``Conversion.Failed``) naming both types, with ``source`` as cause.

Conversion never raises: it runs deep inside result chains where an
exception would defeat the point of returning outcomes.
"""

from __future__ import annotations

import logging
from typing import TypeVar, cast

from maybe.errors import BaseError, Error, UnexpectedError

__all__ = ["CONVERSION_FAILED_CODE", "convert_error"]

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=BaseError)

CONVERSION_FAILED_CODE = "Conversion.Failed"

_GENERAL_TYPES: frozenset[type[BaseError]] = frozenset({BaseError, Error})


def convert_error(source: BaseError, target_type: type[E]) -> E:
    """Return ``source`` expressed as ``target_type``."""
    if target_type in _GENERAL_TYPES or isinstance(source, target_type):
        return cast("E", source)

    try:
        converted = target_type.from_error(source)
    except Exception as exc:
        logger.warning(
            "Cannot convert %s to %s: %s",
            type(source).__name__,
            target_type.__name__,
            exc,
        )
        failed = UnexpectedError(
            exc,
            message=(
                f"Failed to convert error of type '{type(source).__name__}' "
                f"to '{target_type.__name__}'."
            ),
            code=CONVERSION_FAILED_CODE,
            cause=source,
        )
        # Typed as E for callers; at runtime this is the degraded error.
        return cast("E", failed)

    logger.debug(
        "Converted %s to %s (code=%s)",
        type(source).__name__,
        target_type.__name__,
        converted.code,
    )
    return converted
