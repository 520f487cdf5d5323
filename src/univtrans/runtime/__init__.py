"""Runtime translation storage, rendering, and plural rule selection.

Python 3.13+.
"""

from .capabilities import BabelLocaleCapabilities, LocaleCapabilities, RangeRuleTable
from .plural_rules import select_plural_category
from .store import TranslationStore
from .template import CompiledEntry, Splice
from .verifier import verify_store

__all__ = [
    "BabelLocaleCapabilities",
    "CompiledEntry",
    "LocaleCapabilities",
    "RangeRuleTable",
    "Splice",
    "TranslationStore",
    "select_plural_category",
    "verify_store",
]
