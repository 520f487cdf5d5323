"""Multi-locale translator registry with fallback.

UniversalTranslator owns one TranslationStore per registered locale plus
a designated fallback store, resolves locale requests to stores, and
drives bulk import/export of TOML translation documents.

Lookups normalize BCP-47 hyphens to underscores and ignore case, so
"en-US", "en_us" and "EN_US" address the same translator.

Python 3.13+.
"""

from __future__ import annotations

import logging
import os
import stat
from collections.abc import Callable, Iterable
from pathlib import Path
from typing import BinaryIO

from univtrans.constants import EXPORT_DIR_MODE, TRANSLATION_FILE_ENCODING, TRANSLATION_FILE_EXTENSION
from univtrans.diagnostics import (
    ExistingTranslatorError,
    ExportPathError,
    ExportWriteError,
    ImportPathError,
    ImportReadError,
    LocaleNotRegisteredError,
    TranslationError,
)
from univtrans.locale_utils import get_system_locale, locale_lookup_key
from univtrans.localization.loading import (
    FallbackInfo,
    ImportResult,
    ImportSummary,
    iter_translation_files,
)
from univtrans.localization.types import LocaleCode
from univtrans.runtime.capabilities import BabelLocaleCapabilities, LocaleCapabilities
from univtrans.runtime.store import TranslationStore
from univtrans.serialization import (
    apply_records,
    export_store_records,
    load_document,
    parse_document,
    serialize_document,
)

__all__ = ["UniversalTranslator"]

logger = logging.getLogger(__name__)


class UniversalTranslator:
    """Registry of per-locale translation stores.

    Architecture:
    - TranslationStore: Single-locale storage and rendering (1 store = 1 locale)
    - UniversalTranslator: Locale resolution, verification, import/export

    Thread Safety:
        Not synchronized. Register translators and load translations at
        start-up, then share the registry for concurrent lookups and renders.

    Example:
        >>> en = BabelLocaleCapabilities("en")
        >>> ut = UniversalTranslator(en, en, BabelLocaleCapabilities("lv"))
        >>> ut.import_path("locales")
        ImportSummary(files=2, records=14)
        >>> ut.verify_all()
        >>> store, matched = ut.find_translator("lv-LV", "lv")
        >>> matched
        True
    """

    __slots__ = ("_fallback", "_on_fallback", "_translators")

    def __init__(
        self,
        fallback: LocaleCapabilities,
        /,
        *supported: LocaleCapabilities,
        on_fallback: Callable[[FallbackInfo], None] | None = None,
    ) -> None:
        """Register the supported locales and designate the fallback.

        Args:
            fallback: Locale whose store answers unmatched lookups
            supported: Locales to register. When the fallback locale is among
                them, the fallback shares the registered store; otherwise it
                gets a dedicated store that lookups cannot match by name.
            on_fallback: Optional callback invoked when a lookup falls back.
                Receives a FallbackInfo with the requested locales and the
                fallback locale.
        """
        self._translators: dict[str, TranslationStore] = {}
        self._on_fallback = on_fallback

        fallback_key = locale_lookup_key(fallback.locale_name())
        fallback_store: TranslationStore | None = None
        for capabilities in supported:
            store = TranslationStore(capabilities)
            lookup_key = locale_lookup_key(store.locale)
            self._translators[lookup_key] = store
            if lookup_key == fallback_key:
                fallback_store = store

        self._fallback = fallback_store if fallback_store is not None else TranslationStore(fallback)

        logger.info(
            "UniversalTranslator initialized (locales=%s, fallback=%s)",
            [s.locale for s in self._translators.values()],
            self._fallback.locale,
        )

    @classmethod
    def for_system_locale(
        cls,
        *,
        on_fallback: Callable[[FallbackInfo], None] | None = None,
    ) -> UniversalTranslator:
        """Create a registry for the system locale, which is also the fallback.

        Raises:
            RuntimeError: If the system locale cannot be determined
            ValueError: If Babel does not know the system locale
        """
        capabilities = BabelLocaleCapabilities(get_system_locale(raise_on_failure=True))
        return cls(capabilities, capabilities, on_fallback=on_fallback)

    def __repr__(self) -> str:
        return f"UniversalTranslator(locales={list(self.locales)!r}, fallback={self._fallback.locale!r})"

    def __contains__(self, locale: object) -> bool:
        return isinstance(locale, str) and locale_lookup_key(locale) in self._translators

    @property
    def locales(self) -> tuple[LocaleCode, ...]:
        """Registered locale codes in registration order (read-only)."""
        return tuple(store.locale for store in self._translators.values())

    @property
    def fallback(self) -> TranslationStore:
        """Store used when no requested locale is registered (read-only)."""
        return self._fallback

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def lookup(self, locale: LocaleCode) -> TranslationStore | None:
        """Return the registered store for a locale, or None."""
        return self._translators.get(locale_lookup_key(locale))

    def find_translator(self, *locales: LocaleCode) -> tuple[TranslationStore, bool]:
        """Return the store of the first registered locale among ``locales``.

        Returns:
            ``(store, True)`` for the first match, or ``(fallback, False)``
            when none of the locales is registered
        """
        for locale in locales:
            store = self.lookup(locale)
            if store is not None:
                return store, True
        self._notify_fallback(locales)
        return self._fallback, False

    def get_translator(self, locale: LocaleCode) -> tuple[TranslationStore, bool]:
        """Return the store for a single locale, or ``(fallback, False)``."""
        return self.find_translator(locale)

    def _notify_fallback(self, locales: tuple[LocaleCode, ...]) -> None:
        logger.debug("No translator for %s, using fallback %s", locales, self._fallback.locale)
        if self._on_fallback is not None:
            self._on_fallback(
                FallbackInfo(requested_locales=locales, resolved_locale=self._fallback.locale)
            )

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def add_translator(self, capabilities: LocaleCapabilities, *, override: bool = False) -> None:
        """Register an empty store for a locale.

        Replacing the fallback locale always requires ``override``, even when
        the fallback store was never registered by name; with ``override``
        the new store also becomes the fallback.

        Raises:
            ExistingTranslatorError: If the locale is registered (or is the
                fallback locale) and override is False
        """
        locale = capabilities.locale_name()
        lookup_key = locale_lookup_key(locale)
        is_fallback = lookup_key == locale_lookup_key(self._fallback.locale)

        if (lookup_key in self._translators or is_fallback) and not override:
            error = ExistingTranslatorError(locale)
            logger.error("%s", error.diagnostic)
            raise error

        store = TranslationStore(capabilities)
        if is_fallback:
            self._fallback = store
        self._translators[lookup_key] = store
        logger.info("Registered translator for locale: %s (override=%s)", locale, override)

    # ------------------------------------------------------------------
    # Verification
    # ------------------------------------------------------------------

    def verify_all(self) -> None:
        """Verify every registered store, plus a standalone fallback store.

        Raises:
            MissingPluralTranslationError: From the first incomplete store
        """
        for store in self._translators.values():
            store.verify()
        if self._fallback not in self._translators.values():
            self._fallback.verify()

    # ------------------------------------------------------------------
    # Import
    # ------------------------------------------------------------------

    def import_from_source(self, source: str | bytes) -> int:
        """Import translations from TOML document text.

        Returns:
            Number of records applied

        Raises:
            ImportReadError: If the document cannot be parsed
            LocaleNotRegisteredError: If a record names an unregistered locale
            InvalidRuleTypeError: If a record's rule type is not recognized
            TranslationError: Any error raised by the store's add operations
        """
        return apply_records(parse_document(source), self.lookup)

    def import_from_stream(self, stream: BinaryIO) -> int:
        """Import translations from a binary stream holding a TOML document.

        Raises:
            Same as import_from_source()
        """
        return apply_records(load_document(stream), self.lookup)

    def import_path(self, path: str | os.PathLike[str]) -> ImportSummary:
        """Import a translation file, or every ``.toml`` file below a directory.

        Files are imported in sorted path order and the first failure
        aborts the import. Translations added before the failure stay in
        place. Store errors carry a note naming the file being imported.

        Raises:
            ImportPathError: If the path does not exist or a file cannot be opened
            ImportReadError: If a file cannot be parsed (``path`` names the file)
            LocaleNotRegisteredError, InvalidRuleTypeError, TranslationError:
                From applying a file's records
        """
        root = Path(path)
        try:
            is_dir = stat.S_ISDIR(root.stat().st_mode)
        except OSError as e:
            error = ImportPathError(str(root), str(e))
            logger.error("%s", error.diagnostic)
            raise error from e

        files = iter_translation_files(root) if is_dir else iter((root,))
        results = [ImportResult(str(file), self._import_file(file)) for file in files]
        summary = ImportSummary(tuple(results))
        logger.info("Imported translations from %s: %r", root, summary)
        return summary

    def _import_file(self, file: Path) -> int:
        logger.debug("Loading translation file: %s", file)
        try:
            stream = file.open("rb")
        except OSError as e:
            error = ImportPathError(str(file), str(e))
            logger.error("%s", error.diagnostic)
            raise error from e

        with stream:
            try:
                records = load_document(stream)
            except ImportReadError as e:
                error = e.with_path(str(file))
                logger.error("%s", error.diagnostic)
                raise error from e.__cause__

        try:
            return apply_records(records, self.lookup)
        except TranslationError as e:
            e.add_note(f"while importing translations from '{file}'")
            raise

    # ------------------------------------------------------------------
    # Export
    # ------------------------------------------------------------------

    def export(
        self,
        path: str | os.PathLike[str],
        *,
        locales: Iterable[LocaleCode] | None = None,
    ) -> tuple[Path, ...]:
        """Write each registered locale to ``<path>/<locale>.toml``.

        The directory is created when missing.

        Args:
            path: Target directory
            locales: Restrict the export to these registered locales

        Returns:
            Paths of the written files

        Raises:
            ExportPathError: If the directory cannot be created
            ExportWriteError: If a document cannot be encoded or written
            LocaleNotRegisteredError: If ``locales`` names an unregistered locale
        """
        target = Path(path)
        try:
            target.mkdir(mode=EXPORT_DIR_MODE, parents=True, exist_ok=True)
        except OSError as e:
            error = ExportPathError(str(target), str(e))
            logger.error("%s", error.diagnostic)
            raise error from e

        if locales is None:
            stores = list(self._translators.values())
        else:
            stores = []
            for locale in locales:
                store = self.lookup(locale)
                if store is None:
                    error = LocaleNotRegisteredError(locale)
                    logger.error("%s", error.diagnostic)
                    raise error
                stores.append(store)

        written: list[Path] = []
        for store in stores:
            logger.debug("Exporting locale: %s", store.locale)
            file = target / f"{store.locale}{TRANSLATION_FILE_EXTENSION}"
            try:
                document = serialize_document(export_store_records(store))
                file.write_text(document, encoding=TRANSLATION_FILE_ENCODING)
            except (OSError, TypeError, ValueError) as e:
                error = ExportWriteError(str(file), str(e))
                logger.error("%s", error.diagnostic)
                raise error from e
            logger.debug("Wrote translation file: %s", file)
            written.append(file)

        logger.info("Exported %d locale(s) to %s", len(written), target)
        return tuple(written)
