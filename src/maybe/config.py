"""Formatter configuration: validated schema, environment loading, frozen result.

Resolution precedence is ``defaults < environment < overrides``. Environment
variables use the ``MAYBE_`` prefix (e.g. ``MAYBE_TOTAL_WIDTH=100``); a
``.env`` file is loaded once through python-dotenv before they are read.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from functools import cache
import logging
import os
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, Field, ValidationError, field_validator

from maybe.exceptions import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = logging.getLogger(__name__)

ENV_PREFIX = "MAYBE_"

_DOTENV_LOADED = False


class Settings(BaseModel):
    """Pydantic schema for formatter settings: fields, defaults, validation."""

    #: Width of a rendered report line, message column included.
    total_width: int = Field(default=120, ge=20)
    #: Width reserved for the ``[YYYY-MM-DD HH:MM:SS]`` column and its padding.
    timestamp_width: int = Field(default=24, ge=0)
    #: Spaces of indentation added per level of the cause chain.
    indent_width: int = Field(default=2, ge=0)
    timestamp_format: str = Field(default="%Y-%m-%d %H:%M:%S", min_length=1)

    model_config = {"extra": "forbid"}

    @field_validator("timestamp_format")
    @classmethod
    def validate_timestamp_format(cls, v: str) -> str:
        """Reject formats that strftime cannot render."""
        try:
            datetime(2000, 1, 1).strftime(v)
        except ValueError as e:
            raise ValueError(f"invalid timestamp_format {v!r}: {e}") from e
        return v


@dataclass(frozen=True)
class FormatSettings:
    """Immutable, validated settings consumed by the chain formatter."""

    total_width: int = 120
    timestamp_width: int = 24
    indent_width: int = 2
    timestamp_format: str = "%Y-%m-%d %H:%M:%S"


def _try_load_dotenv() -> None:
    """Load a ``.env`` file once, if present."""
    global _DOTENV_LOADED
    if _DOTENV_LOADED:
        return
    from dotenv import load_dotenv

    load_dotenv()
    _DOTENV_LOADED = True


def load_env() -> dict[str, Any]:
    """Read ``MAYBE_*`` variables that name a known settings field."""
    known = set(Settings.model_fields)
    config: dict[str, Any] = {}
    for key, value in os.environ.items():
        if not key.startswith(ENV_PREFIX):
            continue
        field_name = key[len(ENV_PREFIX) :].lower()
        if field_name in known:
            config[field_name] = value.strip()
    return config


def resolve_settings(overrides: Mapping[str, Any] | None = None) -> FormatSettings:
    """Resolve formatter settings from defaults, environment and overrides.

    Raises:
        ConfigurationError: If the merged values fail validation.
    """
    _try_load_dotenv()
    merged = {**load_env(), **(overrides or {})}
    try:
        settings = Settings.model_validate(merged)
    except ValidationError as e:
        err = e.errors()[0]
        field = ".".join(str(p) for p in err.get("loc", ())) or "<settings>"
        msg = err.get("msg", "invalid value")
        if msg.startswith("Value error, "):
            msg = msg[len("Value error, ") :]
        raise ConfigurationError(
            f"Invalid setting '{field}': {msg}",
            hint=f"Check {ENV_PREFIX}{field.upper()} or the overrides passed in.",
        ) from e
    logger.debug("Resolved format settings: %s", settings.model_dump())
    return FormatSettings(**settings.model_dump())


@cache
def default_settings() -> FormatSettings:
    """Settings resolved from the environment, computed once per process."""
    return resolve_settings()
