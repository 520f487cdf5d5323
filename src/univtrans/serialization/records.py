"""Flat translation records.

A record is the serialized shape of one translation key for one locale:
the locale, a rule-type tag, an override flag, and up to six plural-form
strings. Plain translations use only ``other``.

Records are the system boundary for untyped data: every field decoded
from a document is type-checked here before it reaches a store.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass

from univtrans.constants import (
    PLURAL_FIELD_ORDER,
    RECORD_FIELD_LOCALE,
    RECORD_FIELD_OVERRIDE,
    RECORD_FIELD_RULE,
)
from univtrans.diagnostics import ImportReadError, KeyNotStringError
from univtrans.enums import PluralRule, RuleType

__all__ = ["TranslationRecord"]

_PLAIN_RULE_TYPES = frozenset({"", RuleType.PLAIN.value})
_PLURAL_RULE_TYPES = frozenset({RuleType.CARDINAL.value, RuleType.ORDINAL.value, RuleType.RANGE.value})


@dataclass(frozen=True, slots=True)
class TranslationRecord:
    """One translation key as stored in a document.

    Attributes:
        locale: Locale the translation belongs to
        rule_type: "", "plain", "cardinal", "ordinal" or "range" (any case)
        override: Replace existing translations on import
        zero, one, two, few, many, other: Plural-form templates ("" when unused)
    """

    locale: str
    rule_type: str = ""
    override: bool = False
    zero: str = ""
    one: str = ""
    two: str = ""
    few: str = ""
    many: str = ""
    other: str = ""

    def form(self, rule: PluralRule) -> str:
        """Template stored for a plural rule ("" when empty).

        Raises:
            ValueError: If rule is PluralRule.UNKNOWN
        """
        if rule not in PLURAL_FIELD_ORDER:
            msg = f"Records have no field for plural rule '{rule}'"
            raise ValueError(msg)
        text: str = getattr(self, rule.value)
        return text

    def plural_forms(self) -> Iterator[tuple[PluralRule, str]]:
        """Yield non-empty plural forms in fixed order (zero ... other)."""
        for rule in PLURAL_FIELD_ORDER:
            text = self.form(rule)
            if text:
                yield rule, text

    def to_table(self) -> dict[str, str | bool]:
        """Convert to the document table written on export.

        ``other`` is always written; ``rule`` only for plural records; the
        remaining empty fields and a false ``override`` are omitted.
        """
        table: dict[str, str | bool] = {RECORD_FIELD_LOCALE: self.locale}
        if self.override:
            table[RECORD_FIELD_OVERRIDE] = True
        if self.rule_type and self.rule_type.lower() != RuleType.PLAIN:
            table[RECORD_FIELD_RULE] = self.rule_type
        for rule in PLURAL_FIELD_ORDER:
            text = self.form(rule)
            if text or rule is PluralRule.OTHER:
                table[rule.value] = text
        return table

    @classmethod
    def from_table(cls, key: object, table: object) -> TranslationRecord:
        """Decode and validate one document entry.

        Unknown fields are ignored. Rule types outside the known set pass
        through unchanged and are rejected when the record is applied.

        Args:
            key: Translation key of the entry
            table: Decoded entry value

        Raises:
            KeyNotStringError: If key is not a string
            ImportReadError: If the entry is malformed
        """
        if not isinstance(key, str):
            raise KeyNotStringError(key)
        if not isinstance(table, Mapping):
            msg = f"entry '{key}' must be a table, got {type(table).__name__}"
            raise ImportReadError(msg)

        locale = table.get(RECORD_FIELD_LOCALE)
        if not isinstance(locale, str) or not locale:
            msg = f"entry '{key}' requires a non-empty string 'locale'"
            raise ImportReadError(msg)

        override = table.get(RECORD_FIELD_OVERRIDE, False)
        if not isinstance(override, bool):
            msg = f"entry '{key}' field 'override' must be a boolean"
            raise ImportReadError(msg)

        rule_type = table.get(RECORD_FIELD_RULE, "")
        if not isinstance(rule_type, str):
            msg = f"entry '{key}' field 'rule' must be a string"
            raise ImportReadError(msg)

        forms: dict[str, str] = {}
        for rule in PLURAL_FIELD_ORDER:
            value = table.get(rule.value, "")
            if not isinstance(value, str):
                msg = f"entry '{key}' field '{rule}' must be a string"
                raise ImportReadError(msg)
            forms[rule.value] = value

        normalized = rule_type.lower()
        if normalized in _PLAIN_RULE_TYPES and PluralRule.OTHER.value not in table:
            msg = f"plain entry '{key}' requires an 'other' field"
            raise ImportReadError(msg)
        if normalized in _PLURAL_RULE_TYPES and not any(forms.values()):
            msg = f"{normalized} entry '{key}' requires at least one plural form"
            raise ImportReadError(msg)

        return cls(locale=locale, rule_type=rule_type, override=override, **forms)
