"""Type aliases for the translation domain.

Provides semantic type aliases used throughout the package and by user
code when annotating call sites.

Python 3.13+. Zero external dependencies.
"""

from typing import TypeAlias

__all__ = [
    "LocaleCode",
    "TemplateText",
    "TranslationKey",
]

TranslationKey: TypeAlias = str
"""Opaque identifier of a translation (e.g., 'greeting', 'days-left')."""

LocaleCode: TypeAlias = str
"""BCP-47 or POSIX locale code (e.g., 'en', 'pt-BR', 'lv_LV')."""

TemplateText: TypeAlias = str
"""Template text with positional placeholders (e.g., 'Hello, {0}!')."""
