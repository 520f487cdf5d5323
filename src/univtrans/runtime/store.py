"""TranslationStore - per-locale translation storage and rendering.

Python 3.13+. Zero external dependencies (plural data comes from the
injected LocaleCapabilities provider).
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from decimal import Decimal
from types import MappingProxyType

from univtrans.constants import PARAM_ONE, PARAM_ZERO
from univtrans.diagnostics import (
    BadParamSyntaxError,
    ConflictingTranslationError,
    KeyNotStringError,
    MissingBraceError,
    MissingPluralTranslationError,
    UnknownTranslationError,
    plural_error_class,
)
from univtrans.enums import PluralRule, RuleType
from univtrans.runtime.capabilities import LocaleCapabilities
from univtrans.runtime.template import (
    CompiledEntry,
    braces_balanced,
    compile_plain,
    compile_plural,
)
from univtrans.runtime.verifier import verify_store
from typing import TypeAlias

__all__ = ["PluralSlots", "TranslationStore"]

logger = logging.getLogger(__name__)

Number: TypeAlias = "int | float | Decimal"

PluralSlots: TypeAlias = "dict[PluralRule, CompiledEntry]"
"""Forms of one key in one plural category. An absent rule is an empty slot."""

# Placeholders each plural category requires, in splice order.
_REQUIRED_PARAMS: dict[RuleType, tuple[str, ...]] = {
    RuleType.CARDINAL: (PARAM_ZERO,),
    RuleType.ORDINAL: (PARAM_ZERO,),
    RuleType.RANGE: (PARAM_ZERO, PARAM_ONE),
}


def _require_key(key: object) -> str:
    if not isinstance(key, str):
        raise KeyNotStringError(key)
    return key


class TranslationStore:
    """Translations for a single locale.

    Holds four independent namespaces: plain templates plus cardinal,
    ordinal and range templates indexed by plural rule. A key may exist in
    any combination of them without collision.

    Templates are compiled when added; rendering only splices parameters
    into precomputed spans.

    Thread Safety:
        Not synchronized. Add every translation (directly or via import)
        before sharing the store; concurrent render and verify calls on a
        store that is no longer mutated are safe. Wrap the store in an
        external readers-writer lock if it must change after start-up.

    Examples:
        >>> store = TranslationStore(BabelLocaleCapabilities("en"))
        >>> store.add_plain("greeting", "Hello, {0}!")
        >>> store.render_plain("greeting", "World")
        'Hello, World!'
        >>> store.add_cardinal("days", "{0} day", PluralRule.ONE)
        >>> store.add_cardinal("days", "{0} days", PluralRule.OTHER)
        >>> store.render_cardinal("days", 1, 0, "1")
        '1 day'
        >>> store.render_cardinal("days", 1.5, 1, "1.5")
        '1.5 days'
    """

    __slots__ = (
        "_capabilities",
        "_cardinal",
        "_locale",
        "_ordinal",
        "_plain",
        "_range",
    )

    def __init__(self, capabilities: LocaleCapabilities, /) -> None:
        """Create an empty store.

        Args:
            capabilities: Plural rule provider for the store's locale [positional-only]
        """
        self._capabilities = capabilities
        self._locale = capabilities.locale_name()
        self._plain: dict[str, CompiledEntry] = {}
        self._cardinal: dict[str, PluralSlots] = {}
        self._ordinal: dict[str, PluralSlots] = {}
        self._range: dict[str, PluralSlots] = {}

        logger.debug("TranslationStore created for locale: %s", self._locale)

    @property
    def locale(self) -> str:
        """Locale code of this store (read-only)."""
        return self._locale

    @property
    def capabilities(self) -> LocaleCapabilities:
        """Plural rule provider backing this store (read-only)."""
        return self._capabilities

    def __repr__(self) -> str:
        return (
            f"TranslationStore(locale={self._locale!r}, "
            f"plain={len(self._plain)}, "
            f"cardinal={len(self._cardinal)}, "
            f"ordinal={len(self._ordinal)}, "
            f"range={len(self._range)})"
        )

    # ------------------------------------------------------------------
    # Read-only views (verification and export)
    # ------------------------------------------------------------------

    def plain_entries(self) -> Mapping[str, CompiledEntry]:
        """Read-only view of plain templates by key."""
        return MappingProxyType(self._plain)

    def plural_entries(self, rule_type: RuleType) -> Mapping[str, Mapping[PluralRule, CompiledEntry]]:
        """Read-only view of one plural category's slots by key.

        Raises:
            ValueError: If rule_type is RuleType.PLAIN
        """
        return MappingProxyType(self._plural_map(rule_type))

    def valid_rules(self, rule_type: RuleType) -> frozenset[PluralRule]:
        """Rules the locale supports for a plural category.

        Raises:
            ValueError: If rule_type is RuleType.PLAIN
        """
        caps = self._capabilities
        match rule_type:
            case RuleType.CARDINAL:
                return caps.valid_cardinal_rules()
            case RuleType.ORDINAL:
                return caps.valid_ordinal_rules()
            case RuleType.RANGE:
                return caps.valid_range_rules()
            case _:
                msg = f"'{rule_type}' translations are not indexed by plural rule"
                raise ValueError(msg)

    def _plural_map(self, rule_type: RuleType) -> dict[str, PluralSlots]:
        match rule_type:
            case RuleType.CARDINAL:
                return self._cardinal
            case RuleType.ORDINAL:
                return self._ordinal
            case RuleType.RANGE:
                return self._range
            case _:
                msg = f"'{rule_type}' translations are not indexed by plural rule"
                raise ValueError(msg)

    # ------------------------------------------------------------------
    # Add operations
    # ------------------------------------------------------------------

    def add_plain(self, key: str, text: str, *, override: bool = False) -> None:
        """Add a plain translation.

        ``{0}``, ``{1}``, ... are the only placeholders accepted and there is
        no limit on their number. A placeholder may repeat; rendering
        replaces every occurrence with the same parameter.

        Example: ``"{0} has {1} unread messages"``

        Raises:
            KeyNotStringError: If key is not a string
            ConflictingTranslationError: If key exists and override is False
            MissingBraceError: If braces are unbalanced
            BadParamSyntaxError: If a required ``{i}`` is absent
        """
        key = _require_key(key)

        if key in self._plain and not override:
            raise ConflictingTranslationError(self._locale, key, text)

        if not braces_balanced(text):
            raise MissingBraceError(self._locale, key, text)

        compiled = compile_plain(text)
        if isinstance(compiled, str):
            raise BadParamSyntaxError(self._locale, key, compiled, text)

        self._plain[key] = compiled
        logger.debug("Added plain translation: %s [%s]", key, self._locale)

    def add_cardinal(
        self, key: str, text: str, rule: PluralRule, *, override: bool = False
    ) -> None:
        """Add a cardinal plural form.

        ``{0}`` is the only placeholder accepted; a single number decides
        the plural form (see add_range for intervals).

        Example: one: ``"{0} day left"``, other: ``"{0} days left"``

        Raises:
            KeyNotStringError: If key is not a string
            CardinalTranslationError: If rule is not a cardinal rule of the
                locale, or text lacks ``{0}``
            ConflictingTranslationError: If the form exists and override is False
            MissingBraceError: If braces are unbalanced
        """
        self._add_plural(RuleType.CARDINAL, key, text, rule, override)

    def add_ordinal(
        self, key: str, text: str, rule: PluralRule, *, override: bool = False
    ) -> None:
        """Add an ordinal plural form.

        Example: one: ``"{0}st day of spring"``, two: ``"{0}nd day of spring"``

        Raises:
            KeyNotStringError: If key is not a string
            OrdinalTranslationError: If rule is not an ordinal rule of the
                locale, or text lacks ``{0}``
            ConflictingTranslationError: If the form exists and override is False
            MissingBraceError: If braces are unbalanced
        """
        self._add_plural(RuleType.ORDINAL, key, text, rule, override)

    def add_range(
        self, key: str, text: str, rule: PluralRule, *, override: bool = False
    ) -> None:
        """Add a range plural form.

        ``{0}`` and ``{1}`` are both required and the only placeholders accepted.

        Example: other: ``"{0}-{1} days left"``

        Raises:
            KeyNotStringError: If key is not a string
            RangeTranslationError: If rule is not a range rule of the
                locale, or text lacks ``{0}`` or ``{1}``
            ConflictingTranslationError: If the form exists and override is False
            MissingBraceError: If braces are unbalanced
        """
        self._add_plural(RuleType.RANGE, key, text, rule, override)

    def _add_plural(
        self, rule_type: RuleType, key: str, text: str, rule: PluralRule, override: bool
    ) -> None:
        key = _require_key(key)
        error_class = plural_error_class(rule_type)
        # Plain tag strings compare equal to members; slots are keyed by member.
        rule = PluralRule.from_tag(rule)

        if rule not in self.valid_rules(rule_type):
            raise error_class.rule_not_supported(rule, self._locale, key, text)

        plural_map = self._plural_map(rule_type)
        slots = plural_map.get(key)
        if slots is not None and rule in slots and not override:
            raise ConflictingTranslationError(self._locale, key, text, rule)

        if not braces_balanced(text):
            raise MissingBraceError(self._locale, key, text)

        if slots is None:
            slots = plural_map[key] = {}

        compiled = compile_plural(text, len(_REQUIRED_PARAMS[rule_type]))
        if isinstance(compiled, str):
            # A failed add leaves its slot empty, and a key with no
            # remaining forms is dropped so verify never sees it.
            slots.pop(rule, None)
            if not slots:
                del plural_map[key]
            raise error_class.param_missing(compiled, rule, self._locale, key, text)

        replaced = rule in slots
        slots[rule] = compiled
        logger.debug(
            "Added %s translation: %s [%s] rule=%s%s",
            rule_type,
            key,
            self._locale,
            rule,
            " (override)" if replaced else "",
        )

    # ------------------------------------------------------------------
    # Render operations
    # ------------------------------------------------------------------

    def render_plain(self, key: str, *params: str) -> str:
        """Render a plain translation.

        Each placeholder ``{i}`` is replaced with ``params[i]``.

        Raises:
            KeyNotStringError: If key is not a string
            UnknownTranslationError: If key has no plain translation
            ValueError: If fewer parameters than placeholders are supplied
        """
        key = _require_key(key)
        entry = self._plain.get(key)
        if entry is None:
            raise UnknownTranslationError(key)
        return entry.render(params)

    def render_cardinal(self, key: str, num: Number, digits: int, param: str) -> str:
        """Render the cardinal form selected by ``num``.

        Args:
            key: Translation key
            num: Quantity deciding the plural form
            digits: Visible fraction digits of the displayed number
            param: Display string spliced into ``{0}``

        Raises:
            KeyNotStringError: If key is not a string
            UnknownTranslationError: If key has no cardinal translation
            MissingPluralTranslationError: If the selected form was never added
        """
        return self._render_single(
            RuleType.CARDINAL, key, self._capabilities.cardinal_rule, num, digits, param
        )

    def render_ordinal(self, key: str, num: Number, digits: int, param: str) -> str:
        """Render the ordinal form selected by ``num``.

        Raises:
            KeyNotStringError: If key is not a string
            UnknownTranslationError: If key has no ordinal translation
            MissingPluralTranslationError: If the selected form was never added
        """
        return self._render_single(
            RuleType.ORDINAL, key, self._capabilities.ordinal_rule, num, digits, param
        )

    def render_range(
        self,
        key: str,
        num1: Number,
        digits1: int,
        num2: Number,
        digits2: int,
        param1: str,
        param2: str,
    ) -> str:
        """Render the range form selected by the interval ``num1``-``num2``.

        ``param1`` replaces ``{0}`` and ``param2`` replaces ``{1}``.

        Raises:
            KeyNotStringError: If key is not a string
            UnknownTranslationError: If key has no range translation
            MissingPluralTranslationError: If the selected form was never added
        """
        key = _require_key(key)
        slots = self._range.get(key)
        if slots is None:
            raise UnknownTranslationError(key, RuleType.RANGE)
        rule = self._capabilities.range_rule(num1, digits1, num2, digits2)
        return self._slot(slots, RuleType.RANGE, key, rule).render((param1, param2))

    def _render_single(
        self,
        rule_type: RuleType,
        key: str,
        select: Callable[[Number, int], PluralRule],
        num: Number,
        digits: int,
        param: str,
    ) -> str:
        key = _require_key(key)
        slots = self._plural_map(rule_type).get(key)
        if slots is None:
            raise UnknownTranslationError(key, rule_type)
        rule = select(num, digits)
        return self._slot(slots, rule_type, key, rule).render((param,))

    def _slot(
        self, slots: PluralSlots, rule_type: RuleType, key: str, rule: PluralRule
    ) -> CompiledEntry:
        entry = slots.get(rule)
        if entry is None:
            # Only reachable when rendering before verify() succeeded.
            raise MissingPluralTranslationError(self._locale, key, rule, rule_type)
        return entry

    # ------------------------------------------------------------------
    # Verification
    # ------------------------------------------------------------------

    def verify(self) -> None:
        """Check that every plural key carries every rule the locale requires.

        Raises:
            MissingPluralTranslationError: On the first missing form
        """
        verify_store(self)

