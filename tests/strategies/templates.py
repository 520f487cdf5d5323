"""Hypothesis strategies for translation templates.

Provides reusable strategies for generating template test data:
- Literal text that never contains braces
- Plain templates with a known placeholder layout
- Render parameters

Event-Emitting Strategies (HypoFuzz-Optimized):
- plain_templates: Emits template_arity=N and template_repeats=yes|no

Python 3.13+.
"""

from __future__ import annotations

import string
from typing import TYPE_CHECKING

from hypothesis import event
from hypothesis import strategies as st

if TYPE_CHECKING:
    from hypothesis.strategies import DrawFn, SearchStrategy

_LITERAL_ALPHABET = string.ascii_letters + string.digits + " .,:;!?-_'\"\n" + "äöüāēīšžłñ日本"

# Translation keys as they appear in documents: [a-zA-Z][a-zA-Z0-9_-]*
_KEY_FIRST = string.ascii_letters
_KEY_REST = string.ascii_letters + string.digits + "-_"


def literal_text(max_size: int = 20) -> SearchStrategy[str]:
    """Generate brace-free literal template text."""
    return st.text(alphabet=_LITERAL_ALPHABET, max_size=max_size)


def render_params(max_size: int = 10) -> SearchStrategy[str]:
    """Generate parameter values, braces included."""
    return st.text(alphabet=_LITERAL_ALPHABET + "{}", max_size=max_size)


@st.composite
def translation_keys(draw: DrawFn) -> str:
    """Generate document-safe translation keys."""
    first = draw(st.sampled_from(list(_KEY_FIRST)))
    rest = draw(st.text(alphabet=_KEY_REST, max_size=15))
    return first + rest


@st.composite
def plain_templates(draw: DrawFn) -> tuple[str, list[int], list[str]]:
    """Generate a plain template and the parameter index of each placeholder.

    Every index in ``range(arity)`` appears at least once; indexes may
    repeat and appear in any order.

    Returns:
        (template text, placeholder indexes in text order, literal runs).
        The literal runs surround the placeholders, so there is always one
        more run than there are placeholders.

    Events emitted:
    - template_arity=N
    - template_repeats=yes|no
    """
    arity = draw(st.integers(min_value=0, max_value=5))
    indexes = list(range(arity))
    extra = draw(st.lists(st.integers(min_value=0, max_value=max(arity - 1, 0)), max_size=3))
    if arity:
        indexes.extend(extra)
    indexes = draw(st.permutations(indexes))

    literals = [draw(literal_text()) for _ in range(len(indexes) + 1)]
    text = literals[0] + "".join(
        f"{{{index}}}{literal}" for index, literal in zip(indexes, literals[1:], strict=True)
    )

    event(f"template_arity={arity}")
    event(f"template_repeats={'yes' if len(indexes) > arity else 'no'}")
    return text, list(indexes), literals
