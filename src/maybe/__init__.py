"""maybe: typed outcomes and a fluent combinator algebra.

Public API:
    - Outcome / Maybe: success-or-error container (``success``, ``failure``)
    - PendingOutcome / pending(): the same algebra over awaitables
    - Error and its specializations: structured, chainable error values
    - OutcomeKind / ConflictKind: the outcome taxonomy
    - Outcomes: success markers that enrich the reported kind
"""

from __future__ import annotations

import logging

from maybe.config import FormatSettings, resolve_settings
from maybe.conversion import convert_error
from maybe.enrichment import (
    Accepted,
    Cached,
    Created,
    Deleted,
    HasOutcomeKind,
    Outcomes,
    Succeeded,
    Unchanged,
    Updated,
)
from maybe.errors import (
    AuthorizationError,
    BaseError,
    ConflictError,
    Error,
    FailureError,
    NotFoundError,
    UnexpectedError,
    ValidationError,
)
from maybe.exceptions import (
    ConfigurationError,
    InvalidStateError,
    MaybeError,
    MissingArgumentError,
)
from maybe.formatting import format_chain
from maybe.kinds import ConflictKind, OutcomeKind
from maybe.outcome import (
    Maybe,
    Outcome,
    PendingOutcome,
    failure,
    might_be,
    pending,
    success,
)

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("maybe-outcome")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("maybe").addHandler(logging.NullHandler())

__all__ = [
    "Accepted",
    "AuthorizationError",
    "BaseError",
    "Cached",
    "ConfigurationError",
    "ConflictError",
    "ConflictKind",
    "Created",
    "Deleted",
    "Error",
    "FailureError",
    "FormatSettings",
    "HasOutcomeKind",
    "InvalidStateError",
    "Maybe",
    "MaybeError",
    "MissingArgumentError",
    "NotFoundError",
    "Outcome",
    "OutcomeKind",
    "Outcomes",
    "PendingOutcome",
    "Succeeded",
    "Unchanged",
    "UnexpectedError",
    "Updated",
    "ValidationError",
    "convert_error",
    "failure",
    "format_chain",
    "might_be",
    "pending",
    "resolve_settings",
    "success",
]
