"""Enumerations for univtrans type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, so rule names round-trip through
serialized documents and Babel's CLDR tags without conversion tables.

Python 3.13+.
"""

from enum import StrEnum


class PluralRule(StrEnum):
    """CLDR plural category a template variant is stored under.

    StrEnum provides automatic string conversion: str(PluralRule.ONE) == "one"

    Member order is the fixed field order used by serialized documents
    (zero, one, two, few, many, other). UNKNOWN is the sentinel for a
    category a provider cannot name; it is never a valid rule for a locale.
    """

    UNKNOWN = "unknown"
    """Sentinel for an unrecognized category."""

    ZERO = "zero"
    """Zero quantity form (lv: 0, 10, 11-19)."""

    ONE = "one"
    """Singular form (en: 1)."""

    TWO = "two"
    """Dual form (ar: 2)."""

    FEW = "few"
    """Paucal form (pl: 2-4)."""

    MANY = "many"
    """Large quantity form (ru: 5-20)."""

    OTHER = "other"
    """General form, present in every locale."""

    @classmethod
    def from_tag(cls, tag: str) -> "PluralRule":
        """Map a CLDR category tag to a rule, UNKNOWN for unrecognized tags."""
        try:
            return cls(tag.lower())
        except ValueError:
            return cls.UNKNOWN


class RuleType(StrEnum):
    """Translation category of a template.

    StrEnum provides automatic string conversion: str(RuleType.CARDINAL) == "cardinal"
    """

    PLAIN = "plain"
    """Template without plural selection: welcome = Hello, {0}!"""

    CARDINAL = "cardinal"
    """Selection by counted quantity: {0} day / {0} days"""

    ORDINAL = "ordinal"
    """Selection by rank: {0}st / {0}nd / {0}rd / {0}th"""

    RANGE = "range"
    """Selection by an interval of quantities: {0}-{1} days"""


PLURAL_RULE_TYPES: tuple[RuleType, ...] = (
    RuleType.CARDINAL,
    RuleType.ORDINAL,
    RuleType.RANGE,
)
"""Rule types whose templates are indexed by PluralRule."""


__all__ = [
    "PLURAL_RULE_TYPES",
    "PluralRule",
    "RuleType",
]
