"""Multi-locale translation package for UniversalTranslator.

Provides the registry stack: type aliases, translation file discovery
and import bookkeeping, and the multi-locale registry.

Submodules:
    types    - PEP 695 type aliases (TranslationKey, LocaleCode, TemplateText)
    loading  - iter_translation_files, FallbackInfo, ImportResult, ImportSummary
    registry - UniversalTranslator (multi-locale registry with fallback)

Python 3.13+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from univtrans.localization.loading import (
    FallbackInfo,
    ImportResult,
    ImportSummary,
    iter_translation_files,
)
from univtrans.localization.registry import UniversalTranslator
from univtrans.localization.types import LocaleCode, TemplateText, TranslationKey

__all__ = [
    # Main registry
    "UniversalTranslator",
    # File discovery
    "iter_translation_files",
    # Import tracking
    "ImportResult",
    "ImportSummary",
    # Fallback observability
    "FallbackInfo",
    # Type aliases for user code type annotations
    "LocaleCode",
    "TemplateText",
    "TranslationKey",
]
