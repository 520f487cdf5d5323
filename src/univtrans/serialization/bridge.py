"""Conversion between translation stores and flat records.

Export flattens a store's four namespaces into one record per key;
import replays records through the store's add operations, so imported
templates are validated and compiled exactly like direct adds.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING, TypeAlias

from univtrans.diagnostics import InvalidRuleTypeError, LocaleNotRegisteredError
from univtrans.enums import PLURAL_RULE_TYPES, PluralRule, RuleType
from univtrans.serialization.records import TranslationRecord

if TYPE_CHECKING:
    from univtrans.runtime.store import TranslationStore

__all__ = [
    "apply_records",
    "export_store_records",
]

logger = logging.getLogger(__name__)

StoreResolver: TypeAlias = "Callable[[str], TranslationStore | None]"


def export_store_records(store: TranslationStore) -> dict[str, TranslationRecord]:
    """Flatten a store into one record per key.

    Plain templates populate ``other``. Plural categories are visited
    cardinal, ordinal, then range and each sets the record's rule type.
    A key present in several categories shares one record: later
    categories overwrite the rule type and any same-named fields. Such
    collisions are logged as warnings because re-importing the record
    restores only the last category.

    Args:
        store: Store to export

    Returns:
        Records keyed by translation key
    """
    fields: dict[str, dict[str, str]] = {}
    categories: dict[str, RuleType] = {}

    for key, entry in store.plain_entries().items():
        fields.setdefault(key, {})[PluralRule.OTHER.value] = entry.text
        categories[key] = RuleType.PLAIN

    for rule_type in PLURAL_RULE_TYPES:
        for key, slots in store.plural_entries(rule_type).items():
            previous = categories.get(key)
            if previous is not None and previous is not rule_type:
                logger.warning(
                    "Key '%s' [%s] exists as %s and %s; exported record keeps %s only",
                    key,
                    store.locale,
                    previous,
                    rule_type,
                    rule_type,
                )
            record_fields = fields.setdefault(key, {})
            for rule, entry in slots.items():
                record_fields[rule.value] = entry.text
            categories[key] = rule_type

    records: dict[str, TranslationRecord] = {}
    for key, record_fields in fields.items():
        rule_type = categories[key]
        records[key] = TranslationRecord(
            locale=store.locale,
            rule_type="" if rule_type is RuleType.PLAIN else rule_type.value,
            **record_fields,
        )

    logger.debug("Exported %d record(s) for locale: %s", len(records), store.locale)
    return records


def apply_records(records: Mapping[str, TranslationRecord], resolve: StoreResolver) -> int:
    """Add every record to the store of its locale.

    Records are applied in mapping order and plural forms in field order
    (zero, one, two, few, many, other); empty fields are skipped. The first
    failure aborts the import. Translations added before the failing record
    stay in place.

    Args:
        records: Records keyed by translation key
        resolve: Returns the registered store for a locale, or None

    Returns:
        Number of records applied

    Raises:
        LocaleNotRegisteredError: If a record names an unregistered locale
        InvalidRuleTypeError: If a record's rule type is not recognized
        TranslationError: Any error raised by the store's add operations
    """
    applied = 0
    for key, record in records.items():
        store = resolve(record.locale)
        if store is None:
            error = LocaleNotRegisteredError(record.locale)
            logger.error("%s", error.diagnostic)
            raise error

        match record.rule_type.lower():
            case "" | RuleType.PLAIN:
                store.add_plain(key, record.other, override=record.override)
                applied += 1
                continue
            case RuleType.CARDINAL:
                add = store.add_cardinal
            case RuleType.ORDINAL:
                add = store.add_ordinal
            case RuleType.RANGE:
                add = store.add_range
            case _:
                error = InvalidRuleTypeError(record.rule_type, key)
                logger.error("%s", error.diagnostic)
                raise error

        for rule, text in record.plural_forms():
            add(key, text, rule, override=record.override)
        applied += 1

    return applied
