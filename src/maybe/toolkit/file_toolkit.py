"""File I/O that returns outcomes instead of raising."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING

from maybe.outcome import Outcome
from maybe.toolkit.errors import FileError

if TYPE_CHECKING:
    from collections.abc import Callable

__all__ = ["try_read_bytes", "try_read_text", "try_write_bytes", "try_write_text"]

logger = logging.getLogger(__name__)

PathLike = str | os.PathLike[str]


def _describe(exc: BaseException, path: Path, verb: str) -> str:
    if isinstance(exc, FileNotFoundError):
        if not path.parent.exists():
            return f"Directory not found for file: {path}"
        return f"File not found: {path}"
    if isinstance(exc, PermissionError):
        return f"Access denied to file: {path}"
    if isinstance(exc, UnicodeError):
        return f"Could not decode file: {path}"
    if isinstance(exc, OSError):
        return f"I/O error {verb} file: {path}"
    return f"Unexpected error {verb} file: {path}"


def _guarded[T](
    path: PathLike | None, verb: str, op: Callable[[Path], T]
) -> Outcome[T, FileError]:
    if path is None or not str(path).strip():
        return Outcome.failure(
            FileError(
                ValueError("File path cannot be empty"),
                None if path is None else str(path),
                "File path cannot be empty",
            ),
            error_type=FileError,
        )
    resolved = Path(path)
    try:
        return Outcome.success(op(resolved), error_type=FileError)
    except Exception as exc:
        logger.debug("File %s failed for %s: %s", verb, resolved, exc)
        return Outcome.failure(
            FileError(exc, str(resolved), _describe(exc, resolved, verb)),
            error_type=FileError,
        )


def try_read_text(path: PathLike, encoding: str = "utf-8") -> Outcome[str, FileError]:
    return _guarded(path, "reading", lambda p: p.read_text(encoding=encoding))


def try_read_bytes(path: PathLike) -> Outcome[bytes, FileError]:
    return _guarded(path, "reading", lambda p: p.read_bytes())


def try_write_text(
    path: PathLike, contents: str, encoding: str = "utf-8"
) -> Outcome[None, FileError]:
    """Write ``contents`` to ``path``, replacing any existing file."""

    def write(p: Path) -> None:
        p.write_text(contents, encoding=encoding)

    return _guarded(path, "writing", write)


def try_write_bytes(path: PathLike, data: bytes) -> Outcome[None, FileError]:
    def write(p: Path) -> None:
        p.write_bytes(data)

    return _guarded(path, "writing", write)
