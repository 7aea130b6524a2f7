"""Safe wrappers: common fallible operations returning outcomes.

Each wrapper catches the faults of one operation family and returns them as
a typed error (``FileError``, ``JsonError``, ``ParseError``,
``CollectionError``) inside an ``Outcome``.
"""

from __future__ import annotations

from maybe.toolkit.collection_toolkit import (
    try_first,
    try_get_item,
    try_get_value,
    try_single,
)
from maybe.toolkit.errors import CollectionError, FileError, JsonError, ParseError
from maybe.toolkit.file_toolkit import (
    try_read_bytes,
    try_read_text,
    try_write_bytes,
    try_write_text,
)
from maybe.toolkit.json_toolkit import try_dumps, try_loads
from maybe.toolkit.parse_toolkit import (
    try_parse_bool,
    try_parse_datetime,
    try_parse_decimal,
    try_parse_enum,
    try_parse_float,
    try_parse_int,
    try_parse_uuid,
)

__all__ = [
    "CollectionError",
    "FileError",
    "JsonError",
    "ParseError",
    "try_dumps",
    "try_first",
    "try_get_item",
    "try_get_value",
    "try_loads",
    "try_parse_bool",
    "try_parse_datetime",
    "try_parse_decimal",
    "try_parse_enum",
    "try_parse_float",
    "try_parse_int",
    "try_parse_uuid",
    "try_read_bytes",
    "try_read_text",
    "try_single",
    "try_write_bytes",
    "try_write_text",
]
