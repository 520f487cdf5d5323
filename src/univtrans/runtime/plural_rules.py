"""CLDR plural rules implementation using Babel.

Provides plural category selection for all locales using Babel's CLDR data,
with the visible-fraction-digit count (CLDR operand ``v``) supplied by the
caller instead of inferred from the number's formatting.

Python 3.13+. Depends on Babel for CLDR data.

Reference: https://www.unicode.org/cldr/charts/47/supplemental/language_plural_rules.html
"""

from __future__ import annotations

import decimal
from decimal import ROUND_DOWN, Decimal
from typing import TYPE_CHECKING, TypeAlias

from univtrans.enums import PluralRule
from univtrans.locale_utils import get_babel_locale

if TYPE_CHECKING:
    from babel.plural import PluralRule as BabelPluralRule

__all__ = [
    "evaluate_plural_rule",
    "plural_operand",
    "rule_set",
    "select_plural_category",
]

Number: TypeAlias = "int | float | Decimal"


def _operand_context(value: Decimal, digits: int) -> decimal.Context:
    """Decimal context wide enough to hold ``value`` with ``digits`` fraction digits.

    CLDR rules take ``n % 10`` and similar remainders, which fail under the
    default 28-digit precision once the integer part outgrows it.
    """
    ctx = decimal.getcontext().copy()
    ctx.prec = max(ctx.prec, value.adjusted() + digits + 2)
    return ctx


def plural_operand(n: Number, digits: int) -> Decimal:
    """Build the Decimal Babel evaluates, carrying exactly ``digits`` fraction digits.

    The fraction is truncated, never rounded: ``(1.5, 0)`` yields ``1`` so
    that the integer operand matches the number the caller displays.
    Infinities and NaN are returned unchanged.

    Args:
        n: Number to categorize
        digits: Count of visible fraction digits

    Returns:
        Decimal whose exponent encodes the visible digit count

    Raises:
        ValueError: If digits is negative

    Examples:
        >>> plural_operand(1, 0)
        Decimal('1')
        >>> plural_operand(1, 1)
        Decimal('1.0')
        >>> plural_operand(2.75, 1)
        Decimal('2.7')
        >>> plural_operand(1e30, 0)
        Decimal('1000000000000000000000000000000')
    """
    if digits < 0:
        msg = f"digits must be >= 0, got {digits}"
        raise ValueError(msg)
    value = n if isinstance(n, Decimal) else Decimal(str(n))
    if not value.is_finite():
        return value
    with decimal.localcontext(_operand_context(value, digits)):
        return value.quantize(Decimal(1).scaleb(-digits), rounding=ROUND_DOWN)


def evaluate_plural_rule(babel_rule: BabelPluralRule, n: Number, digits: int) -> PluralRule:
    """Apply a Babel plural rule to ``n`` shown with ``digits`` fraction digits.

    Infinities and NaN have no CLDR operands and always select ``other``.

    Raises:
        ValueError: If digits is negative
    """
    operand = plural_operand(n, digits)
    if not operand.is_finite():
        return PluralRule.OTHER
    with decimal.localcontext(_operand_context(operand, digits)):
        return PluralRule.from_tag(babel_rule(operand))


def rule_set(babel_rule: BabelPluralRule) -> frozenset[PluralRule]:
    """Return the rules a Babel plural rule can produce.

    Babel's ``tags`` lists only explicitly defined categories; ``other`` is
    implicit in every CLDR rule set and is added here.
    """
    return frozenset(PluralRule.from_tag(tag) for tag in babel_rule.tags) | {PluralRule.OTHER}


def select_plural_category(
    n: Number, locale: str, digits: int = 0, *, ordinal: bool = False
) -> PluralRule:
    """Select CLDR plural category for number using Babel's CLDR data.

    Args:
        n: Number to categorize
        locale: Locale code (e.g., "lv_LV", "en_US", "ar-SA")
        digits: Count of visible fraction digits (CLDR operand v)
        ordinal: Use ordinal rules instead of cardinal rules

    Returns:
        Plural rule: zero, one, two, few, many, or other

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If digits is negative

    Examples:
        >>> select_plural_category(0, "lv_LV")
        <PluralRule.ZERO: 'zero'>
        >>> select_plural_category(1, "en_US")
        <PluralRule.ONE: 'one'>
        >>> select_plural_category(1, "en_US", digits=1)
        <PluralRule.OTHER: 'other'>
        >>> select_plural_category(2, "en_US", ordinal=True)
        <PluralRule.TWO: 'two'>
    """
    locale_obj = get_babel_locale(locale)
    babel_rule = locale_obj.ordinal_form if ordinal else locale_obj.plural_form
    return evaluate_plural_rule(babel_rule, n, digits)
