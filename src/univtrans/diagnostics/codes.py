"""Diagnostic codes and data structures.

Defines error codes, error categories, and the structured diagnostic
carried by every univtrans exception.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum, StrEnum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ErrorCategory",
]


class ErrorCategory(StrEnum):
    """Error categorization for TranslationError subclasses.

    Categories:
        INPUT: Caller supplied malformed data (key type, braces, placeholders)
        RULE: Plural rule not valid for the locale, or placeholder missing
        CONFLICT: Existing entry blocks a non-override add
        LOOKUP: Unknown translation key or unregistered locale
        COMPLETENESS: Verification found an unpopulated mandatory rule
        BOUNDARY: Import/export failure at the serialization boundary
    """

    INPUT = "input"
    RULE = "rule"
    CONFLICT = "conflict"
    LOOKUP = "lookup"
    COMPLETENESS = "completeness"
    BOUNDARY = "boundary"


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    The 1501-1750 block is reserved for translation errors.
    """

    KEY_NOT_STRING = 1501
    UNKNOWN_TRANSLATION = 1502
    EXISTING_TRANSLATOR = 1503
    CONFLICTING_TRANSLATION = 1504
    RANGE_TRANSLATION = 1505
    ORDINAL_TRANSLATION = 1506
    CARDINAL_TRANSLATION = 1507
    MISSING_PLURAL_TRANSLATION = 1508
    MISSING_BRACE = 1509
    BAD_PARAM_SYNTAX = 1510
    LOCALE_NOT_REGISTERED = 1511
    INVALID_RULE_TYPE = 1512
    EXPORT_PATH_FAILURE = 1513
    EXPORT_WRITE_FAILURE = 1514
    IMPORT_PATH_FAILURE = 1515
    IMPORT_READ_FAILURE = 1516


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        location: Source file the error relates to (import/export errors)
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    location: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like the Rust compiler.

        Example output:
            error[MISSING_BRACE]: Missing brace ({}) in translation. locale: 'en' key: 'greeting' text: 'Hello {0'
              = help: Every '{' must be closed by a matching '}'

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
