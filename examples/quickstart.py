"""Quickstart example for univtrans.

This example demonstrates registering locales, adding and importing
translations, verifying completeness, rendering, and exporting.

Requires the Babel extra: pip install univtrans[babel]
"""

import logging
import tempfile
from pathlib import Path

from univtrans import BabelLocaleCapabilities, PluralRule, TranslationError, UniversalTranslator
from univtrans.localization import FallbackInfo

logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

TRANSLATIONS = Path(__file__).parent / "translations"


def report_fallback(info: FallbackInfo) -> None:
    print(f"  (fallback: {info.requested_locales} -> {info.resolved_locale})")


# Example 1: Register locales and import translation files
print("=" * 50)
print("Example 1: Import")
print("=" * 50)

en = BabelLocaleCapabilities("en")
ut = UniversalTranslator(en, en, BabelLocaleCapabilities("lv"), on_fallback=report_fallback)
summary = ut.import_path(TRANSLATIONS)
print(summary)
# Output: ImportSummary(files=2, records=6)

ut.verify_all()

# Example 2: Plain and plural rendering
print("\n" + "=" * 50)
print("Example 2: Rendering")
print("=" * 50)

for locale in ("en-US", "lv-LV", "de"):
    store, _ = ut.find_translator(locale, locale.split("-")[0])
    print(store.render_plain("greeting", "World"))
    for days in (0, 1, 2, 21):
        print("  " + store.render_cardinal("days-left", days, 0, str(days)))
    print("  " + store.render_ordinal("place", 3, 0, "3"))

# Example 3: Validation errors
print("\n" + "=" * 50)
print("Example 3: Errors")
print("=" * 50)

store, _ = ut.get_translator("en")
for add in (
    lambda: store.add_plain("greeting", "Hi, {0}!"),
    lambda: store.add_plain("broken", "Hello {0"),
    lambda: store.add_cardinal("days-left", "{0} days", PluralRule.FEW),
    lambda: store.add_range("span", "{0} days", PluralRule.OTHER),
):
    try:
        add()
    except TranslationError as e:
        print(e)
        print()

# Example 4: Export
print("=" * 50)
print("Example 4: Export")
print("=" * 50)

with tempfile.TemporaryDirectory() as tmp:
    for path in ut.export(tmp):
        print(f"--- {path.name}")
        print(path.read_text(encoding="utf-8"))
