from __future__ import annotations

from pathlib import Path

import pytest

from maybe import OutcomeKind
from maybe.toolkit import (
    FileError,
    try_read_bytes,
    try_read_text,
    try_write_bytes,
    try_write_text,
)

pytestmark = pytest.mark.unit


def test_write_then_read_text(tmp_path: Path) -> None:
    target = tmp_path / "notes.txt"

    written = try_write_text(target, "héllo")
    read = try_read_text(str(target))

    assert written.is_success
    assert read.value_or_fail() == "héllo"


def test_bytes_round_trip(tmp_path: Path) -> None:
    target = tmp_path / "blob.bin"
    assert try_write_bytes(target, b"\x00\x01").is_success
    assert try_read_bytes(target).value_or_fail() == b"\x00\x01"


def test_missing_file_is_a_file_error(tmp_path: Path) -> None:
    missing = tmp_path / "missing.txt"

    outcome = try_read_text(missing)
    err = outcome.error_or_fail()

    assert isinstance(err, FileError)
    assert err.kind is OutcomeKind.FAILURE
    assert err.code == "File.IOError"
    assert err.message == f"File not found: {missing}"
    assert err.path == str(missing)
    assert err.context_data["path"] == str(missing)
    assert isinstance(err.exception, FileNotFoundError)
    assert outcome.error_type is FileError


def test_missing_directory_is_reported(tmp_path: Path) -> None:
    target = tmp_path / "nope" / "file.txt"
    err = try_write_text(target, "x").error_or_fail()
    assert err.message == f"Directory not found for file: {target}"


def test_reading_a_directory_is_an_io_error(tmp_path: Path) -> None:
    err = try_read_text(tmp_path).error_or_fail()
    assert isinstance(err.exception, OSError)
    assert str(tmp_path) in err.message


def test_undecodable_text_is_reported(tmp_path: Path) -> None:
    target = tmp_path / "latin.txt"
    target.write_bytes(b"\xff\xfe\xfa")
    err = try_read_text(target).error_or_fail()
    assert err.message == f"Could not decode file: {target}"


@pytest.mark.parametrize("path", ["", "   ", None])
def test_empty_path_is_rejected(path) -> None:
    err = try_read_text(path).error_or_fail()
    assert err.message == "File path cannot be empty"
