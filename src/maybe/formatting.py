"""Columnar rendering of an error and its cause chain.

Example (two-level chain)::

    [Unexpected]   System.Exception   [2024-05-01 10:00:00]   Request failed
      [NotFound]   NotFound.User      [2024-05-01 10:00:00]   User with identifier '7' was
                                                              not found.
"""

from __future__ import annotations

from datetime import datetime
import textwrap
from typing import TYPE_CHECKING

from maybe.config import FormatSettings, default_settings

if TYPE_CHECKING:
    from maybe.errors import BaseError

__all__ = ["format_chain", "format_timestamp", "wrap_message"]


def format_timestamp(timestamp: int, settings: FormatSettings) -> str:
    """Render epoch seconds in the local time zone, bracketed."""
    local = datetime.fromtimestamp(timestamp)
    return f"[{local.strftime(settings.timestamp_format)}]"


def wrap_message(text: str, width: int) -> list[str]:
    """Word-wrap ``text`` to ``width``; words longer than the width stay whole.

    Always returns at least one line (possibly empty); a non-positive width
    leaves the text unwrapped.
    """
    if not text.strip():
        return [""]
    if width <= 0:
        return [text.strip()]
    return textwrap.wrap(
        text, width, break_long_words=False, break_on_hyphens=False
    ) or [""]


def format_chain(error: BaseError, settings: FormatSettings | None = None) -> str:
    """Render ``error`` and every cause below it, one row per error.

    Each row holds the ``[Kind]`` column (indented by depth), the code, the
    local timestamp and the message. Column widths are sized to the widest
    value observed anywhere in the chain, so the whole report lines up.
    """
    settings = settings or default_settings()
    rows = list(enumerate(error.chain()))

    max_depth = rows[-1][0]
    indent_unit = settings.indent_width
    kind_width = (
        max(len(f"[{e.kind.value}]") for _, e in rows) + 1 + max_depth * indent_unit
    )
    code_width = max(len(e.code) for _, e in rows) + 3
    message_start = kind_width + code_width + settings.timestamp_width
    message_width = settings.total_width - message_start
    continuation = " " * message_start

    lines: list[str] = []
    for depth, err in rows:
        kind_part = f"{' ' * (depth * indent_unit)}[{err.kind.value}]".ljust(kind_width)
        code_part = err.code.ljust(code_width)
        stamp_part = format_timestamp(err.timestamp, settings).ljust(
            settings.timestamp_width
        )
        first, *rest = wrap_message(err.message, message_width)
        lines.append(f"{kind_part}{code_part}{stamp_part}{first}")
        lines.extend(f"{continuation}{line}" for line in rest)

    return "\n".join(lines).rstrip()
