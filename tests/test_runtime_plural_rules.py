"""Tests for runtime/plural_rules.py - CLDR operands and category selection."""

from __future__ import annotations

import decimal
from decimal import Decimal

import pytest
from babel import Locale
from babel.core import UnknownLocaleError
from hypothesis import given
from hypothesis import strategies as st

from univtrans import PluralRule
from univtrans.runtime.plural_rules import (
    evaluate_plural_rule,
    plural_operand,
    rule_set,
    select_plural_category,
)


class TestPluralOperand:
    """plural_operand truncation and exponent handling."""

    @pytest.mark.parametrize(
        ("n", "digits", "expected"),
        [
            (1, 0, "1"),
            (1, 1, "1.0"),
            (1, 2, "1.00"),
            (1.5, 0, "1"),
            (1.99, 1, "1.9"),
            (2.75, 1, "2.7"),
            (Decimal("3.14159"), 3, "3.141"),
            (0, 0, "0"),
        ],
    )
    def test_values(self, n: float, digits: int, expected: str) -> None:
        assert str(plural_operand(n, digits)) == expected

    @pytest.mark.parametrize(
        ("n", "digits", "expected"),
        [
            (1e30, 0, "1" + "0" * 30),
            (10**27, 2, "1" + "0" * 27 + ".00"),
            (1, 30, "1." + "0" * 30),
        ],
    )
    def test_beyond_default_precision(self, n: float, digits: int, expected: str) -> None:
        assert str(plural_operand(n, digits)) == expected

    @pytest.mark.parametrize("n", [float("inf"), float("-inf"), float("nan"), Decimal("Infinity")])
    def test_non_finite_unchanged(self, n: float) -> None:
        operand = plural_operand(n, 2)
        assert not operand.is_finite()

    def test_negative_digits(self) -> None:
        with pytest.raises(ValueError, match="digits must be >= 0"):
            plural_operand(1, -1)

    @given(
        st.decimals(min_value=0, max_value=10**6, allow_nan=False, allow_infinity=False, places=4),
        st.integers(min_value=0, max_value=6),
    )
    def test_exponent_matches_digits(self, n: Decimal, digits: int) -> None:
        """The operand always carries exactly ``digits`` fraction digits."""
        operand = plural_operand(n, digits)
        assert operand.as_tuple().exponent == -digits
        assert operand <= n


class TestRuleSet:
    """rule_set adds the implicit 'other' category."""

    def test_english(self) -> None:
        assert rule_set(Locale.parse("en").plural_form) == {PluralRule.ONE, PluralRule.OTHER}

    def test_japanese_only_other(self) -> None:
        assert rule_set(Locale.parse("ja").plural_form) == {PluralRule.OTHER}


class TestEvaluatePluralRule:
    """evaluate_plural_rule over numbers outside the default decimal precision."""

    @pytest.mark.parametrize(
        ("n", "digits"),
        [(1e30, 0), (10**27, 2), (1, 30), (Decimal("1E+40"), 3)],
    )
    def test_large_operands_use_cldr_rules(self, n: float, digits: int) -> None:
        assert evaluate_plural_rule(Locale.parse("en").plural_form, n, digits) is PluralRule.OTHER

    def test_large_ordinal_keeps_last_digits(self) -> None:
        ordinal = Locale.parse("en").ordinal_form
        assert evaluate_plural_rule(ordinal, 10**30 + 2, 0) is PluralRule.TWO
        assert evaluate_plural_rule(ordinal, 10**30 + 12, 0) is PluralRule.OTHER
        assert evaluate_plural_rule(ordinal, 1, 30) is PluralRule.ONE

    @pytest.mark.parametrize("n", [float("inf"), float("-inf"), float("nan")])
    def test_non_finite_is_other(self, n: float) -> None:
        assert evaluate_plural_rule(Locale.parse("lv").plural_form, n, 0) is PluralRule.OTHER

    def test_context_is_restored(self) -> None:
        prec = decimal.getcontext().prec
        evaluate_plural_rule(Locale.parse("en").plural_form, 1e30, 5)
        assert decimal.getcontext().prec == prec


class TestSelectPluralCategory:
    """select_plural_category convenience lookup."""

    def test_cardinal(self) -> None:
        assert select_plural_category(0, "lv_LV") is PluralRule.ZERO
        assert select_plural_category(1, "en_US") is PluralRule.ONE

    def test_digits(self) -> None:
        assert select_plural_category(1, "en_US", digits=1) is PluralRule.OTHER

    def test_ordinal(self) -> None:
        assert select_plural_category(2, "en_US", ordinal=True) is PluralRule.TWO

    def test_bcp47_locale(self) -> None:
        assert select_plural_category(2, "ar-SA") is PluralRule.TWO

    def test_unknown_locale(self) -> None:
        with pytest.raises(UnknownLocaleError):
            select_plural_category(1, "zz")


class TestPluralRuleEnum:
    """PluralRule.from_tag mapping."""

    @pytest.mark.parametrize("tag", ["zero", "one", "two", "few", "many", "other"])
    def test_known_tags(self, tag: str) -> None:
        assert PluralRule.from_tag(tag) == tag

    def test_case_insensitive(self) -> None:
        assert PluralRule.from_tag("ONE") is PluralRule.ONE

    def test_unknown_tag(self) -> None:
        assert PluralRule.from_tag("dual") is PluralRule.UNKNOWN
