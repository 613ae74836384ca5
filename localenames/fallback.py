"""Locale fallback graph and the per-run cache of resolved name tables."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Iterable, Mapping
from types import MappingProxyType

from .models import Locale

logger = logging.getLogger(__name__)

ROOT_LOCALE = "root"

NameTable = Mapping[str, str]


class AliasFallbackError(RuntimeError):
    """Raised when a locale alias shows up inside a fallback chain."""


def get_fallback(locale: str) -> str | None:
    """Return the parent locale tag, or None when nothing is left to strip."""
    parent = Locale.parse(locale).parent()
    return str(parent) if parent is not None else None


def fallback_chain(locale: str) -> list[str]:
    """Generate the fallback chain for a locale, most specific first."""
    chain = [locale]
    fallback = locale
    while (fallback := get_fallback(fallback)) is not None:
        chain.append(fallback)
    return chain


def generate_fallback_mapping(
    display_locales: Iterable[str], aliases: Mapping[str, str]
) -> dict[str, str | None]:
    """Map each display locale to its nearest ancestor that is a display locale.

    Args:
        display_locales: Locales with their own data (aliases excluded).
        aliases: Alias table, alias tag to canonical tag.

    Returns:
        Mapping from display locale to its fallback display locale, or None
        when no ancestor carries data.

    Raises:
        AliasFallbackError: If an alias is visited while walking a chain.
    """
    known = set(display_locales)
    mapping: dict[str, str | None] = {}

    for display_locale in sorted(known):
        mapping[display_locale] = None
        fallback = display_locale

        while (fallback := get_fallback(fallback)) is not None:
            if fallback in aliases:
                raise AliasFallbackError(
                    f'Locale "{display_locale}" falls back to the alias '
                    f'"{fallback}" (-> "{aliases[fallback]}").'
                )
            if fallback in known:
                mapping[display_locale] = fallback
                break

    return mapping


class FallbackCache:
    """Name tables of fallback locales, computed at most once per run.

    Safe to share between threads: each locale has its own lock, so two
    display locales resolving the same ancestor wait for one computation.
    """

    def __init__(self) -> None:
        self._tables: dict[str, NameTable] = {}
        self._locks: dict[str, threading.Lock] = {}
        self._lock = threading.Lock()

    def __contains__(self, locale: object) -> bool:
        return locale in self._tables

    def __len__(self) -> int:
        return len(self._tables)

    def get(self, locale: str) -> NameTable | None:
        return self._tables.get(locale)

    def get_or_compute(
        self, locale: str, compute: Callable[[str], Mapping[str, str]]
    ) -> NameTable:
        """Return the cached table for ``locale``, computing it if needed.

        ``compute`` may recurse into this cache for coarser locales only.
        """
        table = self._tables.get(locale)
        if table is not None:
            return table

        with self._lock:
            key_lock = self._locks.setdefault(locale, threading.Lock())

        with key_lock:
            table = self._tables.get(locale)
            if table is None:
                table = MappingProxyType(dict(compute(locale)))
                self._tables[locale] = table
                logger.debug("Cached %d names for fallback %s", len(table), locale)
        return table
