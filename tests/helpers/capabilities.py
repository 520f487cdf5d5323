"""Static LocaleCapabilities double.

Provides fixed rule sets and scripted selection so store behavior can be
tested without CLDR data. Selection follows a simple English-like scheme
unless an explicit mapping is supplied.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from decimal import Decimal

from univtrans.enums import PluralRule
from typing import TypeAlias

Number: TypeAlias = "int | float | Decimal"

_ONE_OTHER = frozenset({PluralRule.ONE, PluralRule.OTHER})


def _one_other(num: Number, digits: int) -> PluralRule:
    return PluralRule.ONE if num == 1 and digits == 0 else PluralRule.OTHER


@dataclass
class StaticCapabilities:
    """LocaleCapabilities with fixed rule sets.

    Attributes:
        locale: Locale code reported by locale_name()
        cardinal: Valid cardinal rules
        ordinal: Valid ordinal rules
        ranges: Valid range rules
        select: Selection used for cardinal and ordinal rules
        range_select: Optional ``(start, end) -> rule`` table for ranges;
            the end value's rule is used when absent
    """

    locale: str = "xx"
    cardinal: frozenset[PluralRule] = _ONE_OTHER
    ordinal: frozenset[PluralRule] = frozenset({PluralRule.OTHER})
    ranges: frozenset[PluralRule] = frozenset({PluralRule.OTHER})
    select: Callable[[Number, int], PluralRule] = _one_other
    range_select: Mapping[tuple[PluralRule, PluralRule], PluralRule] = field(
        default_factory=dict
    )

    def locale_name(self) -> str:
        return self.locale

    def valid_cardinal_rules(self) -> frozenset[PluralRule]:
        return self.cardinal

    def valid_ordinal_rules(self) -> frozenset[PluralRule]:
        return self.ordinal

    def valid_range_rules(self) -> frozenset[PluralRule]:
        return self.ranges

    def cardinal_rule(self, num: Number, digits: int) -> PluralRule:
        return self.select(num, digits)

    def ordinal_rule(self, num: Number, digits: int) -> PluralRule:
        rule = self.select(num, digits)
        return rule if rule in self.ordinal else PluralRule.OTHER

    def range_rule(self, num1: Number, digits1: int, num2: Number, digits2: int) -> PluralRule:
        start = self.select(num1, digits1)
        end = self.select(num2, digits2)
        if self.range_select:
            return self.range_select.get((start, end), PluralRule.OTHER)
        return end if end in self.ranges else PluralRule.OTHER
