"""Bundle entry readers for compiled locale data."""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from enum import Enum
from pathlib import Path
from typing import Any, Protocol

from .fallback import ROOT_LOCALE, fallback_chain
from .loaders import (
    load_display_pattern,
    load_language_names,
    load_script_names,
    load_territory_names,
)

LANG_BUNDLE = "lang"
REGION_BUNDLE = "region"


class MissingResourceKind(str, Enum):
    """Why a resource could not be provided for a locale."""

    MISSING_ENTRY = "missing-entry"
    INVALID_REGION = "invalid-region"


class MissingResourceError(Exception):
    """Raised when a bundle entry is not available for a locale."""

    def __init__(
        self,
        message: str,
        kind: MissingResourceKind = MissingResourceKind.MISSING_ENTRY,
    ) -> None:
        super().__init__(message)
        self.kind = kind


class BundleEntryReader(Protocol):
    """Reads single entries from compiled locale bundles."""

    def read_entry(self, bundle: str, locale: str, key_path: Sequence[str]) -> Any:
        """Return the value at ``key_path`` for ``locale`` in ``bundle``.

        Raises:
            MissingResourceError: If the entry is absent for the locale and
                all of its fallback locales.
        """
        ...


_MISSING = object()


def lookup_path(data: Any, key_path: Sequence[str]) -> Any:
    """Walk ``key_path`` through nested mappings, or return a sentinel."""
    for key in key_path:
        if not isinstance(data, dict) or key not in data:
            return _MISSING
        data = data[key]
    return data


class FallbackBundleReader(ABC):
    """Base reader resolving entries along the locale fallback chain.

    Subclasses provide :meth:`load_bundle`, returning the raw data of one
    locale in one bundle, or None when the locale has no data there.
    """

    @abstractmethod
    def load_bundle(self, bundle: str, locale: str) -> dict[str, Any] | None:
        """Return the raw data of ``locale`` in ``bundle``, or None."""

    def read_entry(self, bundle: str, locale: str, key_path: Sequence[str]) -> Any:
        for fallback in [*fallback_chain(locale), ROOT_LOCALE]:
            data = self.load_bundle(bundle, fallback)
            if data is None:
                continue
            value = lookup_path(data, key_path)
            if value is not _MISSING:
                return value
        raise MissingResourceError(
            f'Entry "{"/".join(key_path)}" is missing in bundle "{bundle}" '
            f'for locale "{locale}".'
        )


class InMemoryBundleReader(FallbackBundleReader):
    """Reader over nested dictionaries: ``{bundle: {locale: data}}``."""

    def __init__(self, bundles: dict[str, dict[str, dict[str, Any]]]) -> None:
        self.bundles = bundles

    def load_bundle(self, bundle: str, locale: str) -> dict[str, Any] | None:
        return self.bundles.get(bundle, {}).get(locale)


class CldrJsonReader(FallbackBundleReader):
    """Reader over an extracted cldr-json "full" release.

    The ``lang`` bundle exposes ``Languages``, ``Scripts`` and
    ``localeDisplayPattern``; the ``region`` bundle exposes ``Countries``.
    """

    def __init__(self, cldr_root: Path) -> None:
        self.cldr_root = cldr_root
        self.languages_root = cldr_root / "cldr-localenames-full" / "main"
        self._cache: dict[tuple[str, str], dict[str, Any] | None] = {}
        self._lock = threading.Lock()

    def load_bundle(self, bundle: str, locale: str) -> dict[str, Any] | None:
        key = (bundle, locale)
        with self._lock:
            if key in self._cache:
                return self._cache[key]
        data = self._load_uncached(bundle, locale)
        with self._lock:
            return self._cache.setdefault(key, data)

    def _load_uncached(self, bundle: str, locale: str) -> dict[str, Any] | None:
        directory = self.languages_root / locale.replace("_", "-")
        if not directory.is_dir():
            return None

        if bundle == LANG_BUNDLE:
            sources: dict[str, Callable[[Path, str], Any]] = {
                "Languages": load_language_names,
                "Scripts": load_script_names,
                "localeDisplayPattern": load_display_pattern,
            }
        elif bundle == REGION_BUNDLE:
            sources = {"Countries": load_territory_names}
        else:
            raise ValueError(f'Unknown bundle "{bundle}".')

        data: dict[str, Any] = {}
        for key, loader in sources.items():
            value = loader(self.languages_root, locale)
            if value is not None:
                data[key] = value
        return data or None
