"""Hypothesis strategies for univtrans property-based testing.

Usage:
    from tests.strategies import plain_templates, translation_keys
"""

from .templates import literal_text, plain_templates, render_params, translation_keys

__all__ = [
    "literal_text",
    "plain_templates",
    "render_params",
    "translation_keys",
]
