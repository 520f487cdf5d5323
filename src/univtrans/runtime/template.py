"""Template compilation and splicing.

Templates are analyzed once at add time. Compilation records where each
``{i}`` placeholder sits so that rendering is a single left-to-right copy
of literal text and parameters, with no searching at render time.

Placeholders are located by exact substring search for ``"{i}"``, never by
general brace matching: ``{ 0 }`` or ``{x}`` are literal text that simply
fails the brace accounting below.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from univtrans.constants import CLOSE_BRACE, OPEN_BRACE

__all__ = [
    "CompiledEntry",
    "Splice",
    "braces_balanced",
    "compile_plain",
    "compile_plural",
    "placeholder",
]


def placeholder(index: int) -> str:
    """Return the literal placeholder token for a parameter index."""
    return f"{OPEN_BRACE}{index}{CLOSE_BRACE}"


def braces_balanced(text: str) -> bool:
    """Check that ``{`` and ``}`` occur equally often in text."""
    return text.count(OPEN_BRACE) == text.count(CLOSE_BRACE)


@dataclass(frozen=True, slots=True)
class Splice:
    """Span of one placeholder occurrence in template text.

    Attributes:
        start: Offset of the opening brace
        end: Offset just past the closing brace
        index: Parameter index the placeholder names
    """

    start: int
    end: int
    index: int


@dataclass(frozen=True, slots=True)
class CompiledEntry:
    """Template text plus its precomputed placeholder spans.

    Attributes:
        text: Template text exactly as added
        splices: Placeholder spans ordered by position in text
        arity: Number of parameters rendering consumes
    """

    text: str
    splices: tuple[Splice, ...]
    arity: int

    @property
    def splice_offsets(self) -> tuple[tuple[int, int], ...]:
        """Flat ``(start, end)`` pairs in left-to-right order."""
        return tuple((s.start, s.end) for s in self.splices)

    def render(self, params: tuple[str, ...]) -> str:
        """Splice parameters into the template.

        Each span is replaced by the parameter its placeholder names and the
        literal text between spans is copied unchanged, so the cost is
        linear in the output length.

        Raises:
            ValueError: If fewer parameters than ``arity`` are supplied
        """
        if len(params) < self.arity:
            msg = f"Template requires {self.arity} parameter(s), got {len(params)}"
            raise ValueError(msg)

        parts: list[str] = []
        prev_end = 0
        for splice in self.splices:
            parts.append(self.text[prev_end : splice.start])
            parts.append(params[splice.index])
            prev_end = splice.end
        parts.append(self.text[prev_end:])
        return "".join(parts)


def _occurrences(text: str, token: str) -> list[int]:
    positions: list[int] = []
    pos = text.find(token)
    while pos != -1:
        positions.append(pos)
        pos = text.find(token, pos + len(token))
    return positions


def compile_plain(text: str) -> CompiledEntry | str:
    """Compile a plain template with placeholders ``{0}``, ``{1}``, ...

    Every ``{`` in the text must belong to a placeholder. Indexes are
    searched in ascending order and every occurrence of each is recorded
    until the spans account for all opening braces, so ``{0}`` may repeat
    but ``{1}`` cannot appear without ``{0}``.

    Braces must already be balanced (see braces_balanced).

    Args:
        text: Template text

    Returns:
        The compiled entry, or the first placeholder token the text is
        missing (e.g. ``"{1}"``) when the brace accounting fails

    Examples:
        >>> compile_plain("Hello, {0}!").splice_offsets
        ((7, 10),)
        >>> compile_plain("{0} and {0}").arity
        1
        >>> compile_plain("{0} of {x}")
        '{1}'
    """
    expected = text.count(OPEN_BRACE)
    splices: list[Splice] = []
    index = 0
    while len(splices) < expected:
        token = placeholder(index)
        positions = _occurrences(text, token)
        if not positions:
            return token
        splices.extend(Splice(pos, pos + len(token), index) for pos in positions)
        index += 1

    splices.sort(key=lambda s: s.start)
    return CompiledEntry(text=text, splices=tuple(splices), arity=index)


def compile_plural(text: str, param_count: int) -> CompiledEntry | str:
    """Compile a plural template using its first ``param_count`` placeholders.

    Cardinal and ordinal templates use ``{0}`` (``param_count=1``); range
    templates use ``{0}`` and ``{1}`` (``param_count=2``). Only the first
    occurrence of each placeholder is spliced, and each is searched from
    the start of the text independently of the others.

    Args:
        text: Template text
        param_count: Number of required placeholders

    Returns:
        The compiled entry, or the first required placeholder token the
        text does not contain

    Examples:
        >>> compile_plural("{0} days", 1).splice_offsets
        ((0, 3),)
        >>> compile_plural("{0} days", 2)
        '{1}'
    """
    splices: list[Splice] = []
    for index in range(param_count):
        token = placeholder(index)
        pos = text.find(token)
        if pos == -1:
            return token
        splices.append(Splice(pos, pos + len(token), index))

    splices.sort(key=lambda s: s.start)
    return CompiledEntry(text=text, splices=tuple(splices), arity=param_count)
