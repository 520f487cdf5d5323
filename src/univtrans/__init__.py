"""univtrans - Multi-locale translation registry with CLDR plural rules.

Stores translation templates per locale, renders them with positional
placeholders, selects plural forms via CLDR rules (cardinal, ordinal,
range), verifies completeness, and round-trips translations through
TOML documents.

Public API:
    UniversalTranslator - Multi-locale registry with fallback
    TranslationRecord - Flat serialized record of one translation key
    TranslationStore - Single-locale template storage and rendering
    BabelLocaleCapabilities - CLDR plural rules backed by Babel
    LocaleCapabilities - Protocol for custom plural rule providers
    PluralRule - Plural categories (zero, one, two, few, many, other)
    RuleType - Template categories (plain, cardinal, ordinal, range)

Exceptions:
    TranslationError - Base exception class
    InputValidationError - Malformed keys and templates
    RuleValidationError - Plural rules a locale does not support
    StateConflictError - Duplicate translations and translators
    LookupFailureError - Unknown keys and locales
    CompletenessError - Missing plural forms
    BoundaryError - Import/export failures
    (concrete errors such as MissingBraceError are exported alongside)

Submodules:
    univtrans.runtime - Stores, template compilation, plural selection
    univtrans.serialization - TOML records and store bridge
    univtrans.localization - Registry, file discovery, import results
    univtrans.diagnostics - Error types, codes, and formatting
"""

# Public API - category bases plus every concrete error
from .diagnostics import (
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
)
from .enums import PluralRule, RuleType
from .localization import UniversalTranslator
from .runtime import BabelLocaleCapabilities, LocaleCapabilities, TranslationStore
from .serialization import TranslationRecord

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("univtrans")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "BabelLocaleCapabilities",
    "BadParamSyntaxError",
    "BoundaryError",
    "CardinalTranslationError",
    "CompletenessError",
    "ConflictingTranslationError",
    "ExistingTranslatorError",
    "ExportPathError",
    "ExportWriteError",
    "ImportPathError",
    "ImportReadError",
    "InputValidationError",
    "InvalidPluralRuleError",
    "InvalidRuleTypeError",
    "KeyNotStringError",
    "LocaleCapabilities",
    "LocaleNotRegisteredError",
    "LookupFailureError",
    "MissingBraceError",
    "MissingPluralTranslationError",
    "OrdinalTranslationError",
    "PluralRule",
    "RangeTranslationError",
    "RuleType",
    "RuleValidationError",
    "StateConflictError",
    "TranslationError",
    "TranslationRecord",
    "TranslationStore",
    "UniversalTranslator",
    "UnknownTranslationError",
    "__version__",
]
