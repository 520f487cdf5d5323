"""TOML translation documents.

A document holds one top-level table per translation key:

    [greeting]
    locale = "en"
    other = "Hello, {0}!"

    [days-left]
    locale = "en"
    rule = "cardinal"
    one = "{0} day left"
    other = "{0} days left"

Documents are read with the standard library ``tomllib`` and written with
``tomli_w``.

Python 3.13+. External dependency: tomli-w (writing).
"""

from __future__ import annotations

import tomllib
from collections.abc import Mapping
from typing import BinaryIO

import tomli_w

from univtrans.constants import TRANSLATION_FILE_ENCODING
from univtrans.diagnostics import ImportReadError
from univtrans.serialization.records import TranslationRecord

__all__ = [
    "decode_records",
    "load_document",
    "parse_document",
    "serialize_document",
]


def decode_records(data: Mapping[object, object]) -> dict[str, TranslationRecord]:
    """Validate decoded document data into records, preserving entry order.

    Raises:
        KeyNotStringError: If an entry key is not a string
        ImportReadError: If an entry is malformed
    """
    records: dict[str, TranslationRecord] = {}
    for key, table in data.items():
        record = TranslationRecord.from_table(key, table)
        records[str(key)] = record
    return records


def parse_document(source: str | bytes) -> dict[str, TranslationRecord]:
    """Parse TOML source into records.

    Args:
        source: Document text, or UTF-8 encoded bytes

    Raises:
        ImportReadError: If the source is not valid UTF-8 or TOML, or an entry is malformed
    """
    if isinstance(source, bytes):
        try:
            source = source.decode(TRANSLATION_FILE_ENCODING)
        except UnicodeDecodeError as e:
            raise ImportReadError(str(e)) from e
    try:
        data = tomllib.loads(source)
    except tomllib.TOMLDecodeError as e:
        raise ImportReadError(str(e)) from e
    return decode_records(data)


def load_document(stream: BinaryIO) -> dict[str, TranslationRecord]:
    """Read and parse a document from a binary stream.

    Raises:
        ImportReadError: If reading or parsing fails
    """
    try:
        data = tomllib.load(stream)
    except (tomllib.TOMLDecodeError, UnicodeDecodeError, OSError) as e:
        raise ImportReadError(str(e)) from e
    return decode_records(data)


def serialize_document(records: Mapping[str, TranslationRecord]) -> str:
    """Serialize records to TOML, one table per key in sorted key order.

    Raises:
        TypeError: If a record holds a value TOML cannot represent
    """
    return tomli_w.dumps({key: records[key].to_table() for key in sorted(records)})
