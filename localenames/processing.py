"""Locale name table generation for CLDR data."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Any

from tqdm import tqdm

from .fallback import FallbackCache, generate_fallback_mapping
from .io import write_json
from .loaders import scan_aliases, scan_locales
from .models import DisplayPattern, Locale
from .naming import generate_locale_name
from .reader import (
    LANG_BUNDLE,
    BundleEntryReader,
    CldrJsonReader,
    MissingResourceError,
)

logger = logging.getLogger(__name__)

LocaleData = dict[str, Any]

META_FILE_NAME = "meta.json"


class LocaleDataGenerator:
    """Generates, per display locale, the names of all known locales.

    Each table only keeps the names that differ from what the display locale
    already inherits through its fallback locales.
    """

    def __init__(
        self,
        reader: BundleEntryReader,
        locales: Iterable[str],
        aliases: Mapping[str, str],
        fallback_cache: FallbackCache | None = None,
    ) -> None:
        self.reader = reader
        self.locales = list(locales)
        self.aliases = dict(aliases)
        self.fallback_mapping = generate_fallback_mapping(
            [locale for locale in self.locales if locale not in self.aliases],
            self.aliases,
        )
        self.fallback_cache = (
            fallback_cache if fallback_cache is not None else FallbackCache()
        )
        # Only plain language/script/region combinations are named
        self.target_locales = sorted(
            locale
            for locale in self.locales
            if locale not in self.aliases and not Locale.parse(locale).has_variant
        )

    @classmethod
    def from_cldr(cls, cldr_root: Path) -> LocaleDataGenerator:
        """Create a generator over an extracted cldr-json tree."""
        return cls(
            CldrJsonReader(cldr_root),
            scan_locales(cldr_root),
            scan_aliases(cldr_root),
        )

    def reset(self) -> None:
        """Start a new run with an empty fallback cache."""
        self.fallback_cache = FallbackCache()

    def read_display_pattern(self, display_locale: str) -> DisplayPattern:
        try:
            entry = self.reader.read_entry(
                LANG_BUNDLE, display_locale, ["localeDisplayPattern"]
            )
        except MissingResourceError:
            return DisplayPattern()
        return DisplayPattern.from_entry(entry)

    def generate_locale_names(self, display_locale: str) -> dict[str, str]:
        """Name every pure locale in the language of ``display_locale``.

        Locales whose name cannot be composed are left out.
        """
        display_pattern = self.read_display_pattern(display_locale)
        names: dict[str, str] = {}
        for locale in self.target_locales:
            name = self._try_locale_name(locale, display_locale, display_pattern)
            if name is not None:
                names[locale] = name
        return names

    def _try_locale_name(
        self, locale: str, display_locale: str, display_pattern: DisplayPattern
    ) -> str | None:
        try:
            return generate_locale_name(
                self.reader, locale, display_locale, display_pattern
            )
        except MissingResourceError as e:
            logger.debug(
                "No %s name for %s (%s): %s", display_locale, locale, e.kind.value, e
            )
            return None

    def generate_data_for_locale(self, display_locale: str) -> LocaleData | None:
        """Return ``{"Names": ...}`` for ``display_locale``, or None if empty."""
        # Aliases are resolved at lookup time
        if display_locale in self.aliases:
            return None

        cached = self.fallback_cache.get(display_locale)
        if cached is not None:
            return {"Names": dict(cached)} if cached else None

        names = self.generate_locale_names(display_locale)

        # Only keep the differences with every fallback locale
        fallback: str | None = display_locale
        while (fallback := self.fallback_mapping.get(fallback)) is not None:
            inherited = self.fallback_cache.get_or_compute(
                fallback, self._inherited_names
            )
            names = {
                locale: name
                for locale, name in names.items()
                if inherited.get(locale) != name
            }

        if names:
            return {"Names": names}
        return None

    def _inherited_names(self, locale: str) -> dict[str, str]:
        data = self.generate_data_for_locale(locale)
        return data["Names"] if data else {}

    def generate_data_for_meta(self) -> LocaleData | None:
        if not self.locales and not self.aliases:
            return None
        return {
            "Locales": sorted({*self.locales, *self.aliases}),
            "Aliases": self.aliases,
        }

    def iter_locale_data(
        self, display_locales: Iterable[str] | None = None, workers: int = 1
    ) -> Iterator[tuple[str, LocaleData | None]]:
        """Yield ``(display_locale, data)`` pairs in input order."""
        targets = list(self.locales if display_locales is None else display_locales)
        if workers <= 1:
            for display_locale in targets:
                yield display_locale, self.generate_data_for_locale(display_locale)
            return

        with ThreadPoolExecutor(max_workers=workers) as executor:
            yield from zip(
                targets, executor.map(self.generate_data_for_locale, targets)
            )


def generate_data(
    generator: LocaleDataGenerator,
    target_dir: Path,
    display_locales: Iterable[str] | None = None,
    workers: int = 1,
    show_progress: bool = False,
) -> int:
    """Run one generation and write one JSON file per non-empty locale.

    Returns:
        The number of locale files written, meta excluded.
    """
    generator.reset()
    targets = list(generator.locales if display_locales is None else display_locales)
    written = 0

    for display_locale, data in tqdm(
        generator.iter_locale_data(targets, workers),
        total=len(targets),
        desc="Generating locale names",
        unit="locale",
        disable=not show_progress,
    ):
        if data is None:
            continue
        write_json(target_dir / f"{display_locale}.json", data)
        written += 1

    meta = generator.generate_data_for_meta()
    if meta is not None:
        write_json(target_dir / META_FILE_NAME, meta)

    logger.info(
        "Wrote %d of %d locales (%d fallback tables cached)",
        written,
        len(targets),
        len(generator.fallback_cache),
    )
    return written
