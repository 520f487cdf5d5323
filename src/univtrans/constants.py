"""Shared constants for univtrans.

This module provides centralized configuration constants used across
runtime, localization, and serialization packages. Placing constants here
avoids circular imports and provides a single source of truth.

Constants are grouped by domain:
- Placeholders: literal tokens recognized in template text
- Serialization: file naming, encoding, and field order

Python 3.13+. Zero external dependencies.
"""

from univtrans.enums import PluralRule

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Placeholders
    "OPEN_BRACE",
    "CLOSE_BRACE",
    "PARAM_ZERO",
    "PARAM_ONE",
    # Serialization
    "TRANSLATION_FILE_EXTENSION",
    "TRANSLATION_FILE_ENCODING",
    "EXPORT_DIR_MODE",
    "PLURAL_FIELD_ORDER",
    "RECORD_FIELD_LOCALE",
    "RECORD_FIELD_OVERRIDE",
    "RECORD_FIELD_RULE",
]

# ============================================================================
# PLACEHOLDERS
# ============================================================================

OPEN_BRACE: str = "{"
CLOSE_BRACE: str = "}"

# Cardinal and ordinal templates accept exactly PARAM_ZERO; range templates
# require both PARAM_ZERO and PARAM_ONE.
PARAM_ZERO: str = "{0}"
PARAM_ONE: str = "{1}"

# ============================================================================
# SERIALIZATION
# ============================================================================

TRANSLATION_FILE_EXTENSION: str = ".toml"
TRANSLATION_FILE_ENCODING: str = "utf-8"

# Permissions for directories created by export (before umask).
EXPORT_DIR_MODE: int = 0o755

# Fixed order in which plural fields are read from a record on import.
PLURAL_FIELD_ORDER: tuple[PluralRule, ...] = (
    PluralRule.ZERO,
    PluralRule.ONE,
    PluralRule.TWO,
    PluralRule.FEW,
    PluralRule.MANY,
    PluralRule.OTHER,
)

RECORD_FIELD_LOCALE: str = "locale"
RECORD_FIELD_OVERRIDE: str = "override"
RECORD_FIELD_RULE: str = "rule"
