"""Completeness verification for translation stores.

A plural key is complete when it carries a form for every rule its
locale supports in that category. Verification is a read-only traversal
that stops at the first gap.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from univtrans.diagnostics import KeyNotStringError, MissingPluralTranslationError
from univtrans.enums import PLURAL_RULE_TYPES, PluralRule

if TYPE_CHECKING:
    from univtrans.runtime.store import TranslationStore

__all__ = ["verify_store"]

logger = logging.getLogger(__name__)


def verify_store(store: TranslationStore) -> None:
    """Verify that no mandatory plural form is missing from a store.

    Categories are checked cardinal, ordinal, then range; within a key,
    rules are checked in CLDR order (zero, one, two, few, many, other) so
    the reported gap is deterministic.

    Args:
        store: Store to traverse (never mutated)

    Raises:
        KeyNotStringError: If a non-string key reached a plural map
        MissingPluralTranslationError: On the first missing form

    Example:
        >>> store.add_cardinal("days", "{0} days", PluralRule.OTHER)
        >>> verify_store(store)
        Traceback (most recent call last):
        MissingPluralTranslationError: ... Missing 'cardinal' plural rule 'one' ...
    """
    for rule_type in PLURAL_RULE_TYPES:
        required = store.valid_rules(rule_type)
        ordered = [rule for rule in PluralRule if rule in required]
        for key, slots in store.plural_entries(rule_type).items():
            if not isinstance(key, str):
                raise KeyNotStringError(key)
            for rule in ordered:
                if rule not in slots:
                    raise MissingPluralTranslationError(store.locale, key, rule, rule_type)

    logger.debug("Verified translations for locale: %s", store.locale)
