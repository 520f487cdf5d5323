"""Locale capability providers.

A TranslationStore never evaluates plural rules itself. It asks a
LocaleCapabilities provider which rules a locale supports (add-time
validation and verification) and which rule applies to a number
(rendering). Any object with the methods below satisfies the protocol.

Components:
    LocaleCapabilities - Protocol consumed by TranslationStore (structural typing)
    BabelLocaleCapabilities - Provider backed by Babel's CLDR data

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from decimal import Decimal
from typing import Protocol, TypeAlias

from univtrans.core.babel_compat import get_unknown_locale_error, require_babel
from univtrans.enums import PluralRule
from univtrans.locale_utils import get_babel_locale, normalize_locale
from univtrans.runtime.plural_rules import evaluate_plural_rule, rule_set

__all__ = [
    "BabelLocaleCapabilities",
    "LocaleCapabilities",
    "RangeRuleTable",
]

logger = logging.getLogger(__name__)

Number: TypeAlias = "int | float | Decimal"

RangeRuleTable: TypeAlias = "Mapping[tuple[PluralRule, PluralRule], PluralRule]"
"""CLDR plural-range table: (start rule, end rule) -> range rule."""


class LocaleCapabilities(Protocol):
    """Protocol for per-locale plural rule data.

    The valid-rule sets double as the mandatory sets checked by
    verification: every key in a plural category must carry a form for
    every rule the locale supports in that category.

    Example:
        >>> class EnglishOnly:
        ...     def locale_name(self) -> str:
        ...         return "en"
        ...     def valid_cardinal_rules(self) -> frozenset[PluralRule]:
        ...         return frozenset({PluralRule.ONE, PluralRule.OTHER})
        ...     ...
    """

    def locale_name(self) -> str:
        """Locale code the rules belong to (e.g., 'en', 'pl_PL')."""

    def valid_cardinal_rules(self) -> frozenset[PluralRule]:
        """Cardinal rules the locale supports."""

    def valid_ordinal_rules(self) -> frozenset[PluralRule]:
        """Ordinal rules the locale supports."""

    def valid_range_rules(self) -> frozenset[PluralRule]:
        """Range rules the locale supports."""

    def cardinal_rule(self, num: Number, digits: int) -> PluralRule:
        """Cardinal rule for ``num`` shown with ``digits`` fraction digits."""

    def ordinal_rule(self, num: Number, digits: int) -> PluralRule:
        """Ordinal rule for ``num`` shown with ``digits`` fraction digits."""

    def range_rule(self, num1: Number, digits1: int, num2: Number, digits2: int) -> PluralRule:
        """Range rule for the interval ``num1``-``num2``."""


class BabelLocaleCapabilities:
    """LocaleCapabilities backed by Babel's CLDR plural rules.

    Cardinal rules come from ``Locale.plural_form`` and ordinal rules from
    ``Locale.ordinal_form``. Babel ships no CLDR plural-range data, so range
    selection uses the category of the end value unless an explicit
    ``range_rules`` table is supplied. With a table, the valid range set is
    the table's result rules plus ``other``, which unlisted pairs select.

    Example:
        >>> caps = BabelLocaleCapabilities("pl")
        >>> sorted(caps.valid_cardinal_rules())
        [<PluralRule.FEW: 'few'>, <PluralRule.MANY: 'many'>, <PluralRule.ONE: 'one'>, ...]
        >>> caps.cardinal_rule(3, 0)
        <PluralRule.FEW: 'few'>
        >>> en = BabelLocaleCapabilities(
        ...     "en",
        ...     range_rules={
        ...         (PluralRule.ONE, PluralRule.OTHER): PluralRule.OTHER,
        ...         (PluralRule.OTHER, PluralRule.ONE): PluralRule.OTHER,
        ...         (PluralRule.OTHER, PluralRule.OTHER): PluralRule.OTHER,
        ...     },
        ... )
        >>> en.valid_range_rules()
        frozenset({<PluralRule.OTHER: 'other'>})
    """

    __slots__ = (
        "_cardinal",
        "_cardinal_rules",
        "_locale",
        "_ordinal",
        "_ordinal_rules",
        "_range_rules",
        "_range_table",
    )

    def __init__(
        self,
        locale: str,
        /,
        *,
        range_rules: RangeRuleTable | None = None,
    ) -> None:
        """Load CLDR plural data for a locale.

        Args:
            locale: Locale code (BCP-47 or POSIX) [positional-only]
            range_rules: Optional CLDR plural-range table

        Raises:
            BabelImportError: If Babel is not installed
            ValueError: If Babel does not know the locale or the code is malformed
        """
        require_babel("BabelLocaleCapabilities")
        unknown_locale_error = get_unknown_locale_error()
        try:
            babel_locale = get_babel_locale(locale)
        except (unknown_locale_error, ValueError) as e:
            msg = f"Unknown locale '{locale}': {e}"
            raise ValueError(msg) from e

        self._locale = normalize_locale(locale)
        self._cardinal = babel_locale.plural_form
        self._ordinal = babel_locale.ordinal_form
        self._cardinal_rules = rule_set(self._cardinal)
        self._ordinal_rules = rule_set(self._ordinal)
        self._range_table: dict[tuple[PluralRule, PluralRule], PluralRule] | None = (
            dict(range_rules) if range_rules is not None else None
        )
        if self._range_table is not None:
            self._range_rules = frozenset(self._range_table.values()) | {PluralRule.OTHER}
        else:
            self._range_rules = self._cardinal_rules

        logger.debug(
            "Loaded CLDR plural rules for %s (cardinal=%s, ordinal=%s, range=%s)",
            self._locale,
            sorted(self._cardinal_rules),
            sorted(self._ordinal_rules),
            sorted(self._range_rules),
        )

    def __repr__(self) -> str:
        return f"BabelLocaleCapabilities({self._locale!r})"

    def locale_name(self) -> str:
        return self._locale

    def valid_cardinal_rules(self) -> frozenset[PluralRule]:
        return self._cardinal_rules

    def valid_ordinal_rules(self) -> frozenset[PluralRule]:
        return self._ordinal_rules

    def valid_range_rules(self) -> frozenset[PluralRule]:
        return self._range_rules

    def cardinal_rule(self, num: Number, digits: int) -> PluralRule:
        return evaluate_plural_rule(self._cardinal, num, digits)

    def ordinal_rule(self, num: Number, digits: int) -> PluralRule:
        return evaluate_plural_rule(self._ordinal, num, digits)

    def range_rule(self, num1: Number, digits1: int, num2: Number, digits2: int) -> PluralRule:
        """Range rule for the interval ``num1``-``num2``.

        Without a range table the end value decides; with a table, a pair
        the table does not list resolves to ``other``.
        """
        end = self.cardinal_rule(num2, digits2)
        if self._range_table is None:
            return end
        start = self.cardinal_rule(num1, digits1)
        return self._range_table.get((start, end), PluralRule.OTHER)
