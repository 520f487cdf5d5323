"""Translation exception hierarchy with structured diagnostics.

All exceptions store Diagnostic objects for rich error information and
keep the fields a caller needs to rebuild a message (locale, key, rule,
text, path) as plain attributes.

Hierarchy:
    TranslationError
    ├── InputValidationError: KeyNotStringError, MissingBraceError, BadParamSyntaxError
    ├── RuleValidationError
    │   └── InvalidPluralRuleError: Cardinal/Ordinal/RangeTranslationError
    ├── StateConflictError: ConflictingTranslationError, ExistingTranslatorError
    ├── LookupFailureError: UnknownTranslationError, LocaleNotRegisteredError
    ├── CompletenessError: MissingPluralTranslationError
    └── BoundaryError: InvalidRuleTypeError, Export*/Import* errors

Python 3.13+. Zero external dependencies.
"""

from typing import ClassVar

from univtrans.enums import PluralRule, RuleType

from .codes import Diagnostic, DiagnosticCode, ErrorCategory
from .templates import ErrorTemplate

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    "TranslationError",
    # Category bases
    "InputValidationError",
    "RuleValidationError",
    "StateConflictError",
    "LookupFailureError",
    "CompletenessError",
    "BoundaryError",
    # Input validation
    "KeyNotStringError",
    "MissingBraceError",
    "BadParamSyntaxError",
    # Rule validation
    "InvalidPluralRuleError",
    "CardinalTranslationError",
    "OrdinalTranslationError",
    "RangeTranslationError",
    "plural_error_class",
    # State conflict
    "ConflictingTranslationError",
    "ExistingTranslatorError",
    # Lookup failure
    "UnknownTranslationError",
    "LocaleNotRegisteredError",
    # Completeness
    "MissingPluralTranslationError",
    # Boundary
    "InvalidRuleTypeError",
    "ExportPathError",
    "ExportWriteError",
    "ImportPathError",
    "ImportReadError",
]


class TranslationError(Exception):
    """Base exception for all translation errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
        category: Error category shared by the subclass family
    """

    category: ClassVar[ErrorCategory]

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize TranslationError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)

    @property
    def code(self) -> DiagnosticCode | None:
        """Diagnostic code, None for errors built from a bare message."""
        return self.diagnostic.code if self.diagnostic is not None else None


# ---------------------------------------------------------------------------
# Category bases
# ---------------------------------------------------------------------------


class InputValidationError(TranslationError):
    """Caller supplied malformed data. Never retried."""

    category = ErrorCategory.INPUT


class RuleValidationError(TranslationError):
    """Requested plural rule or placeholder layout does not fit the locale."""

    category = ErrorCategory.RULE


class StateConflictError(TranslationError):
    """An existing entry blocks a non-override add."""

    category = ErrorCategory.CONFLICT


class LookupFailureError(TranslationError):
    """A key or locale is not registered."""

    category = ErrorCategory.LOOKUP


class CompletenessError(TranslationError):
    """Verification found an unpopulated mandatory plural rule."""

    category = ErrorCategory.COMPLETENESS


class BoundaryError(TranslationError):
    """Failure at the serialization boundary.

    Wrapped I/O and parse failures are chained as ``__cause__``.

    Attributes:
        path: File or directory involved, None when reading from a stream
    """

    category = ErrorCategory.BOUNDARY

    def __init__(self, message: str | Diagnostic, *, path: str | None = None) -> None:
        super().__init__(message)
        self.path = path


# ---------------------------------------------------------------------------
# Input validation
# ---------------------------------------------------------------------------


class KeyNotStringError(InputValidationError):
    """Translation key is not a string.

    Attributes:
        key: The offending key object
    """

    def __init__(self, key: object) -> None:
        super().__init__(ErrorTemplate.key_not_string(key))
        self.key = key


class MissingBraceError(InputValidationError):
    """Template text has unbalanced braces.

    Example:
        ``"This is a {0"`` is missing its closing brace.
    """

    def __init__(self, locale: str, key: str, text: str) -> None:
        super().__init__(ErrorTemplate.missing_brace(locale, key, text))
        self.locale = locale
        self.key = key
        self.text = text


class BadParamSyntaxError(InputValidationError):
    """A placeholder number required by the template is absent.

    Example:
        ``"{0} of {x}"`` has two placeholders but no ``{1}``.
    """

    def __init__(self, locale: str, key: str, param: str, text: str) -> None:
        super().__init__(ErrorTemplate.bad_param_syntax(locale, key, param, text))
        self.locale = locale
        self.key = key
        self.param = param
        self.text = text


# ---------------------------------------------------------------------------
# Rule validation
# ---------------------------------------------------------------------------


class InvalidPluralRuleError(RuleValidationError):
    """Plural add rejected for a category.

    Raised when the rule is not valid for the locale (``param`` is None) or
    when the template lacks a required placeholder (``param`` names it).
    """

    rule_type: ClassVar[RuleType]

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        locale: str,
        key: str,
        text: str,
        rule: PluralRule,
        param: str | None = None,
    ) -> None:
        super().__init__(message)
        self.locale = locale
        self.key = key
        self.text = text
        self.rule = rule
        self.param = param

    @classmethod
    def rule_not_supported(
        cls, rule: PluralRule, locale: str, key: str, text: str
    ) -> "InvalidPluralRuleError":
        """Build the error for a rule outside the locale's valid set."""
        diagnostic = ErrorTemplate.plural_rule_not_supported(
            cls.rule_type, rule, locale, key, text
        )
        return cls(diagnostic, locale=locale, key=key, text=text, rule=rule)

    @classmethod
    def param_missing(
        cls, param: str, rule: PluralRule, locale: str, key: str, text: str
    ) -> "InvalidPluralRuleError":
        """Build the error for a template without its required placeholder."""
        diagnostic = ErrorTemplate.plural_param_missing(cls.rule_type, param, locale, key, text)
        return cls(diagnostic, locale=locale, key=key, text=text, rule=rule, param=param)


class CardinalTranslationError(InvalidPluralRuleError):
    """Cardinal add rejected."""

    rule_type = RuleType.CARDINAL


class OrdinalTranslationError(InvalidPluralRuleError):
    """Ordinal add rejected."""

    rule_type = RuleType.ORDINAL


class RangeTranslationError(InvalidPluralRuleError):
    """Range add rejected."""

    rule_type = RuleType.RANGE


_PLURAL_ERROR_CLASSES: dict[RuleType, type[InvalidPluralRuleError]] = {
    RuleType.CARDINAL: CardinalTranslationError,
    RuleType.ORDINAL: OrdinalTranslationError,
    RuleType.RANGE: RangeTranslationError,
}


def plural_error_class(rule_type: RuleType) -> type[InvalidPluralRuleError]:
    """Return the category-specific error class for a plural rule type.

    Raises:
        KeyError: If rule_type is RuleType.PLAIN
    """
    return _PLURAL_ERROR_CLASSES[rule_type]


# ---------------------------------------------------------------------------
# State conflict
# ---------------------------------------------------------------------------


class ConflictingTranslationError(StateConflictError):
    """Entry already exists and override was not requested.

    Attributes:
        rule: Offending plural rule, None for plain translations
    """

    def __init__(
        self, locale: str, key: str, text: str, rule: PluralRule | None = None
    ) -> None:
        super().__init__(ErrorTemplate.conflicting_translation(locale, key, text, rule))
        self.locale = locale
        self.key = key
        self.text = text
        self.rule = rule


class ExistingTranslatorError(StateConflictError):
    """A translator for the locale is already registered."""

    def __init__(self, locale: str) -> None:
        super().__init__(ErrorTemplate.existing_translator(locale))
        self.locale = locale


# ---------------------------------------------------------------------------
# Lookup failure
# ---------------------------------------------------------------------------


class UnknownTranslationError(LookupFailureError):
    """Render referenced a key absent from the category map."""

    def __init__(self, key: str, rule_type: RuleType = RuleType.PLAIN) -> None:
        super().__init__(ErrorTemplate.unknown_translation(key, rule_type))
        self.key = key
        self.rule_type = rule_type


class LocaleNotRegisteredError(LookupFailureError):
    """Import referenced a locale without a registered translator."""

    def __init__(self, locale: str) -> None:
        super().__init__(ErrorTemplate.locale_not_registered(locale))
        self.locale = locale


# ---------------------------------------------------------------------------
# Completeness
# ---------------------------------------------------------------------------


class MissingPluralTranslationError(CompletenessError):
    """A key lacks a form for one of the locale's mandatory plural rules."""

    def __init__(self, locale: str, key: str, rule: PluralRule, rule_type: RuleType) -> None:
        super().__init__(ErrorTemplate.missing_plural_translation(locale, key, rule, rule_type))
        self.locale = locale
        self.key = key
        self.rule = rule
        self.rule_type = rule_type


# ---------------------------------------------------------------------------
# Boundary
# ---------------------------------------------------------------------------


class InvalidRuleTypeError(BoundaryError):
    """Serialized record carries an unrecognized rule type."""

    def __init__(self, rule_type: str, key: str) -> None:
        super().__init__(ErrorTemplate.invalid_rule_type(rule_type, key))
        self.rule_type = rule_type
        self.key = key


class ExportPathError(BoundaryError):
    """Export directory could not be created."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(ErrorTemplate.export_path_failure(path, reason), path=path)


class ExportWriteError(BoundaryError):
    """Exported document could not be encoded or written."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(ErrorTemplate.export_write_failure(path, reason), path=path)


class ImportPathError(BoundaryError):
    """Import file or directory could not be located or opened."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(ErrorTemplate.import_path_failure(path, reason), path=path)


class ImportReadError(BoundaryError):
    """Import source could not be read, parsed, or decoded into records."""

    def __init__(self, reason: str, path: str | None = None) -> None:
        super().__init__(ErrorTemplate.import_read_failure(reason, path), path=path)
        self.reason = reason

    def with_path(self, path: str) -> "ImportReadError":
        """Return a copy of this error annotated with the originating path."""
        return ImportReadError(self.reason, path)
