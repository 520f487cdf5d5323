"""Serialization bridge between translation stores and TOML documents.

Submodules:
    records  - TranslationRecord (flat per-key record, boundary validation)
    document - TOML parsing and serialization
    bridge   - Store <-> record conversion

Python 3.13+.
"""

from .bridge import apply_records, export_store_records
from .document import decode_records, load_document, parse_document, serialize_document
from .records import TranslationRecord

__all__ = [
    "TranslationRecord",
    "apply_records",
    "decode_records",
    "export_store_records",
    "load_document",
    "parse_document",
    "serialize_document",
]
