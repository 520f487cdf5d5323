"""Diagnostic system for translation errors.

Provides structured error diagnostics with codes, categories, and hints.
Inspired by Rust compiler diagnostics.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, ErrorCategory
from .errors import (
    BadParamSyntaxError,
    BoundaryError,
    CardinalTranslationError,
    CompletenessError,
    ConflictingTranslationError,
    ExistingTranslatorError,
    ExportPathError,
    ExportWriteError,
    ImportPathError,
    ImportReadError,
    InputValidationError,
    InvalidPluralRuleError,
    InvalidRuleTypeError,
    KeyNotStringError,
    LocaleNotRegisteredError,
    LookupFailureError,
    MissingBraceError,
    MissingPluralTranslationError,
    OrdinalTranslationError,
    RangeTranslationError,
    RuleValidationError,
    StateConflictError,
    TranslationError,
    UnknownTranslationError,
    plural_error_class,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "BadParamSyntaxError",
    "BoundaryError",
    "CardinalTranslationError",
    "CompletenessError",
    "ConflictingTranslationError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorCategory",
    "ErrorTemplate",
    "ExistingTranslatorError",
    "ExportPathError",
    "ExportWriteError",
    "ImportPathError",
    "ImportReadError",
    "InputValidationError",
    "InvalidPluralRuleError",
    "InvalidRuleTypeError",
    "KeyNotStringError",
    "LocaleNotRegisteredError",
    "LookupFailureError",
    "MissingBraceError",
    "MissingPluralTranslationError",
    "OrdinalTranslationError",
    "OutputFormat",
    "RangeTranslationError",
    "RuleValidationError",
    "StateConflictError",
    "TranslationError",
    "UnknownTranslationError",
    "plural_error_class",
]
