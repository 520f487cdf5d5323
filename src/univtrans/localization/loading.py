"""Translation file discovery and import bookkeeping.

Components:
    iter_translation_files - Recursive, ordered discovery of translation documents
    FallbackInfo - Immutable record of a locale fallback event
    ImportResult - Immutable result of importing a single file
    ImportSummary - Immutable aggregate of an import_path() call

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

from univtrans.constants import TRANSLATION_FILE_EXTENSION
from univtrans.localization.types import LocaleCode

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Discovery
    "iter_translation_files",
    # Fallback observability
    "FallbackInfo",
    # Import result types
    "ImportResult",
    "ImportSummary",
]


def iter_translation_files(root: Path) -> Iterator[Path]:
    """Yield translation documents below a directory in sorted path order.

    Only regular files whose suffix is exactly the translation file
    extension (``.toml``) are yielded; subdirectories are walked recursively.

    Args:
        root: Directory to walk

    Example:
        >>> list(iter_translation_files(Path("locales")))
        [PosixPath('locales/de.toml'), PosixPath('locales/en.toml'), PosixPath('locales/extra/fr.toml')]
    """
    for path in sorted(root.rglob(f"*{TRANSLATION_FILE_EXTENSION}")):
        if path.suffix == TRANSLATION_FILE_EXTENSION and path.is_file():
            yield path


@dataclass(frozen=True, slots=True)
class FallbackInfo:
    """Information about a locale fallback event.

    Provided to the on_fallback callback when UniversalTranslator resolves
    a lookup to the fallback translator because no requested locale is
    registered.

    Attributes:
        requested_locales: Locale codes the caller asked for, in order
        resolved_locale: Locale of the fallback translator returned

    Example:
        >>> def log_fallback(info: FallbackInfo) -> None:
        ...     print(f"Fallback: {info.requested_locales} -> {info.resolved_locale}")
        >>> ut = UniversalTranslator(en, en, lv, on_fallback=log_fallback)
    """

    requested_locales: tuple[LocaleCode, ...]
    resolved_locale: LocaleCode


@dataclass(frozen=True, slots=True)
class ImportResult:
    """Result of importing a single translation document.

    Attributes:
        source_path: File the records were read from
        records: Number of records applied
    """

    source_path: str
    records: int


@dataclass(frozen=True, slots=True)
class ImportSummary:
    """Immutable aggregate of the files imported by one import_path() call.

    An import stops at its first error, so a summary only ever describes
    fully successful imports.

    Attributes:
        results: Per-file results in import order
    """

    results: tuple[ImportResult, ...]

    def __repr__(self) -> str:
        return f"ImportSummary(files={self.files}, records={self.total_records})"

    @property
    def files(self) -> int:
        """Number of files imported."""
        return len(self.results)

    @property
    def total_records(self) -> int:
        """Number of records applied across all files."""
        return sum(r.records for r in self.results)

    @property
    def source_paths(self) -> tuple[str, ...]:
        """Imported files in import order."""
        return tuple(r.source_path for r in self.results)
