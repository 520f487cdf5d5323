"""Intensive property tests for CLDR plural selection.

Selection must always land inside the locale's valid rule set, for any
float, integer or Decimal and any visible-digit count, including values
past the default 28-digit decimal precision and non-finite values.

Marked fuzz: run with ``pytest -m fuzz``.
"""

from __future__ import annotations

from decimal import Decimal

import pytest
from hypothesis import event, given, settings
from hypothesis import strategies as st

from univtrans import BabelLocaleCapabilities, TranslationStore

_LOCALES = ("en", "lv", "pl", "ar", "ru", "cy", "ga", "ja", "fr", "sl")

numbers = st.one_of(
    st.floats(allow_nan=True, allow_infinity=True),
    st.integers(min_value=-(10**60), max_value=10**60),
    st.decimals(allow_nan=False, allow_infinity=False, places=8),
)
digit_counts = st.integers(min_value=0, max_value=40)


def _capabilities(locale: str) -> BabelLocaleCapabilities:
    return BabelLocaleCapabilities(locale)


# ============================================================================
# Provider selection
# ============================================================================


@pytest.mark.fuzz
class TestSelectionStaysInValidSet:
    """Selected rules always belong to the locale's valid set."""

    @given(locale=st.sampled_from(_LOCALES), num=numbers, digits=digit_counts)
    @settings(max_examples=500)
    def test_cardinal(self, locale: str, num: float | int | Decimal, digits: int) -> None:
        """PROPERTY: cardinal_rule(n, v) is in valid_cardinal_rules()."""
        caps = _capabilities(locale)
        rule = caps.cardinal_rule(num, digits)
        event(f"cardinal={rule}")
        assert rule in caps.valid_cardinal_rules()

    @given(locale=st.sampled_from(_LOCALES), num=numbers, digits=digit_counts)
    @settings(max_examples=500)
    def test_ordinal(self, locale: str, num: float | int | Decimal, digits: int) -> None:
        """PROPERTY: ordinal_rule(n, v) is in valid_ordinal_rules()."""
        caps = _capabilities(locale)
        rule = caps.ordinal_rule(num, digits)
        event(f"ordinal={rule}")
        assert rule in caps.valid_ordinal_rules()

    @given(
        locale=st.sampled_from(_LOCALES),
        start=numbers,
        end=numbers,
        digits=digit_counts,
    )
    @settings(max_examples=300)
    def test_range(
        self,
        locale: str,
        start: float | int | Decimal,
        end: float | int | Decimal,
        digits: int,
    ) -> None:
        """PROPERTY: range_rule is in valid_range_rules()."""
        caps = _capabilities(locale)
        assert caps.range_rule(start, digits, end, digits) in caps.valid_range_rules()


# ============================================================================
# Store rendering
# ============================================================================


@pytest.mark.fuzz
class TestVerifiedStoreAlwaysRenders:
    """A store that passed verify renders every number."""

    @given(locale=st.sampled_from(_LOCALES), num=numbers, digits=digit_counts)
    @settings(max_examples=300)
    def test_cardinal_and_ordinal(
        self, locale: str, num: float | int | Decimal, digits: int
    ) -> None:
        """PROPERTY: verify() passing implies render never raises."""
        caps = _capabilities(locale)
        store = TranslationStore(caps)
        for rule in caps.valid_cardinal_rules():
            store.add_cardinal("items", f"{{0}} {rule}", rule)
        for rule in caps.valid_ordinal_rules():
            store.add_ordinal("place", f"{{0}} {rule}", rule)
        store.verify()

        cardinal = store.render_cardinal("items", num, digits, "N")
        ordinal = store.render_ordinal("place", num, digits, "N")
        assert cardinal == f"N {caps.cardinal_rule(num, digits)}"
        assert ordinal == f"N {caps.ordinal_rule(num, digits)}"
