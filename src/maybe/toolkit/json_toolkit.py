"""JSON encoding and decoding that return outcomes instead of raising."""

from __future__ import annotations

import json
import logging
from typing import Any

from maybe.outcome import Outcome
from maybe.toolkit.errors import JsonError

__all__ = ["try_dumps", "try_loads"]

logger = logging.getLogger(__name__)


def try_loads(text: str | bytes | None, **kwargs: Any) -> Outcome[Any, JsonError]:
    """Decode JSON text.

    Empty input and a top-level ``null`` are reported as errors; extra
    keyword arguments are passed to ``json.loads``.
    """
    if text is None or not text.strip():
        return Outcome.failure(
            JsonError(ValueError("JSON input is empty"), "JSON input cannot be empty"),
            error_type=JsonError,
        )
    try:
        value = json.loads(text, **kwargs)
    except json.JSONDecodeError as exc:
        logger.debug("JSON decode failed: %s", exc)
        return Outcome.failure(
            JsonError(
                exc,
                f"Failed to decode JSON at line {exc.lineno} column {exc.colno}: "
                f"{exc.msg}",
            ),
            error_type=JsonError,
        )
    except RecursionError as exc:
        logger.debug("JSON decode exceeded the nesting limit: %s", exc)
        return Outcome.failure(
            JsonError(exc, "JSON input is nested too deeply"), error_type=JsonError
        )
    except (TypeError, ValueError) as exc:
        return Outcome.failure(
            JsonError(exc, f"Invalid JSON input: {exc}"), error_type=JsonError
        )
    if value is None:
        return Outcome.failure(
            JsonError(
                ValueError("Deserialization resulted in null"),
                "Deserialization resulted in null",
            ),
            error_type=JsonError,
        )
    return Outcome.success(value, error_type=JsonError)


def try_dumps(value: Any, **kwargs: Any) -> Outcome[str, JsonError]:
    """Encode ``value`` as JSON; keyword arguments go to ``json.dumps``."""
    try:
        return Outcome.success(json.dumps(value, **kwargs), error_type=JsonError)
    except (TypeError, ValueError, RecursionError) as exc:
        logger.debug("JSON encode failed for %s: %s", type(value).__name__, exc)
        return Outcome.failure(
            JsonError(exc, f"Failed to serialize {type(value).__name__} to JSON"),
            error_type=JsonError,
        )
