"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from univtrans.enums import PluralRule, RuleType

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]

_RULE_TYPE_CODES: dict[RuleType, DiagnosticCode] = {
    RuleType.CARDINAL: DiagnosticCode.CARDINAL_TRANSLATION,
    RuleType.ORDINAL: DiagnosticCode.ORDINAL_TRANSLATION,
    RuleType.RANGE: DiagnosticCode.RANGE_TRANSLATION,
}


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    Every factory returns a Diagnostic that the matching exception wraps.
    """

    @staticmethod
    def key_not_string(key: object) -> Diagnostic:
        """Translation key is not a string."""
        return Diagnostic(
            code=DiagnosticCode.KEY_NOT_STRING,
            message=f"Translation key must be a string, got {type(key).__name__}",
            hint="Use str keys for every translation",
        )

    @staticmethod
    def unknown_translation(key: str, rule_type: RuleType = RuleType.PLAIN) -> Diagnostic:
        """Render referenced a key the store does not hold."""
        if rule_type is RuleType.PLAIN:
            msg = f"Unknown translation key '{key}'"
        else:
            msg = f"Unknown {rule_type} translation key '{key}'"
        return Diagnostic(
            code=DiagnosticCode.UNKNOWN_TRANSLATION,
            message=msg,
            hint="Check that the key was added or imported for this locale",
        )

    @staticmethod
    def existing_translator(locale: str) -> Diagnostic:
        """A translator is already registered for the locale."""
        return Diagnostic(
            code=DiagnosticCode.EXISTING_TRANSLATOR,
            message=f"Conflicting translator for locale '{locale}'",
            hint="Pass override=True to replace the registered translator",
        )

    @staticmethod
    def conflicting_translation(
        locale: str, key: str, text: str, rule: PluralRule | None = None
    ) -> Diagnostic:
        """An existing entry blocks a non-override add."""
        if rule is None:
            msg = f"Conflicting key '{key}' with text '{text}' for locale '{locale}'"
        else:
            msg = (
                f"Conflicting key '{key}' rule '{rule}' with text '{text}' "
                f"for locale '{locale}'"
            )
        return Diagnostic(
            code=DiagnosticCode.CONFLICTING_TRANSLATION,
            message=msg,
            hint="Pass override=True to replace the existing translation",
        )

    @staticmethod
    def plural_rule_not_supported(
        rule_type: RuleType, rule: PluralRule, locale: str, key: str, text: str
    ) -> Diagnostic:
        """Plural rule is not in the locale's valid-rule set for the category."""
        return Diagnostic(
            code=_RULE_TYPE_CODES[rule_type],
            message=(
                f"{rule_type.capitalize()} plural rule '{rule}' does not exist "
                f"for locale '{locale}' key: '{key}' text: '{text}'"
            ),
            hint=f"Use one of the {rule_type} rules the locale supports",
        )

    @staticmethod
    def plural_param_missing(
        rule_type: RuleType, param: str, locale: str, key: str, text: str
    ) -> Diagnostic:
        """Required placeholder is absent from a plural template."""
        if rule_type is RuleType.RANGE:
            hint = "A range translation requires both '{0}' and '{1}'"
        else:
            hint = f"Use add_plain() instead of add_{rule_type}() for text without '{{0}}'"
        return Diagnostic(
            code=_RULE_TYPE_CODES[rule_type],
            message=(
                f"Parameter '{param}' not found in {rule_type} translation. "
                f"locale: '{locale}' key: '{key}' text: '{text}'"
            ),
            hint=hint,
        )

    @staticmethod
    def missing_plural_translation(
        locale: str, key: str, rule: PluralRule, rule_type: RuleType
    ) -> Diagnostic:
        """Verification found an empty slot for a mandatory rule."""
        return Diagnostic(
            code=DiagnosticCode.MISSING_PLURAL_TRANSLATION,
            message=(
                f"Missing '{rule_type}' plural rule '{rule}' for translation "
                f"with key '{key}' and locale '{locale}'"
            ),
            hint=f"Add the '{rule}' form with add_{rule_type}()",
        )

    @staticmethod
    def missing_brace(locale: str, key: str, text: str) -> Diagnostic:
        """Template has unbalanced braces."""
        return Diagnostic(
            code=DiagnosticCode.MISSING_BRACE,
            message=(
                f"Missing brace ({{}}) in translation. "
                f"locale: '{locale}' key: '{key}' text: '{text}'"
            ),
            hint="Every '{' must be closed by a matching '}'",
        )

    @staticmethod
    def bad_param_syntax(locale: str, key: str, param: str, text: str) -> Diagnostic:
        """A placeholder number required by the brace count is absent."""
        return Diagnostic(
            code=DiagnosticCode.BAD_PARAM_SYNTAX,
            message=(
                f"Bad parameter syntax, missing parameter '{param}' in translation. "
                f"locale: '{locale}' key: '{key}' text: '{text}'"
            ),
            hint="Placeholders must be numbered {0}, {1}, ... without gaps",
        )

    @staticmethod
    def locale_not_registered(locale: str) -> Diagnostic:
        """Import referenced a locale without a registered translator."""
        return Diagnostic(
            code=DiagnosticCode.LOCALE_NOT_REGISTERED,
            message=f"Locale '{locale}' is not registered",
            hint="Register the locale with add_translator() before importing",
        )

    @staticmethod
    def invalid_rule_type(rule_type: str, key: str) -> Diagnostic:
        """Serialized record carries an unrecognized rule type."""
        valid = ", ".join(f"'{r}'" for r in RuleType)
        return Diagnostic(
            code=DiagnosticCode.INVALID_RULE_TYPE,
            message=f"Rule type '{rule_type}' for key '{key}' is not valid",
            hint=f"Use one of {valid} or leave the rule empty",
        )

    @staticmethod
    def export_path_failure(path: str, reason: str) -> Diagnostic:
        """Export directory could not be created."""
        return Diagnostic(
            code=DiagnosticCode.EXPORT_PATH_FAILURE,
            message=f"Failed to create export path '{path}': {reason}",
            location=path,
        )

    @staticmethod
    def export_write_failure(path: str, reason: str) -> Diagnostic:
        """Export document could not be encoded or written."""
        return Diagnostic(
            code=DiagnosticCode.EXPORT_WRITE_FAILURE,
            message=f"Failed to export translations to '{path}': {reason}",
            location=path,
        )

    @staticmethod
    def import_path_failure(path: str, reason: str) -> Diagnostic:
        """Import source could not be located or opened."""
        return Diagnostic(
            code=DiagnosticCode.IMPORT_PATH_FAILURE,
            message=f"Failed to open import path '{path}': {reason}",
            location=path,
        )

    @staticmethod
    def import_read_failure(reason: str, path: str | None = None) -> Diagnostic:
        """Import source could not be read or parsed."""
        if path:
            msg = f"Failed to import translations from '{path}': {reason}"
        else:
            msg = f"Failed to import translations: {reason}"
        return Diagnostic(
            code=DiagnosticCode.IMPORT_READ_FAILURE,
            message=msg,
            location=path,
        )
