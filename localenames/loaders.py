"""CLDR data loaders with Pydantic validation."""

from __future__ import annotations

from pathlib import Path

from .io import load_json
from .models import (
    AliasesData,
    AvailableLocalesData,
    LanguagesJsonMain,
    Locale,
    LocaleDisplayNamesJsonMain,
    ScriptsJsonMain,
    TerritoriesJsonMain,
    normalize_tag,
)


def _locale_file(languages_root: Path, locale: str, name: str) -> tuple[Path, str]:
    cldr_tag = locale.replace("_", "-")
    return languages_root / cldr_tag / name, cldr_tag


def load_available_locales(cldr_root: Path) -> list[str]:
    """Load and parse availableLocales.json."""
    path = cldr_root / "cldr-core" / "availableLocales.json"
    if not path.is_file():
        raise ValueError(f"Locale list missing from CLDR data: {path}")
    data = AvailableLocalesData.model_validate(load_json(path))
    return data.full


def load_language_aliases(cldr_root: Path) -> dict[str, str]:
    """Load and parse the languageAlias table of supplemental/aliases.json."""
    path = cldr_root / "cldr-core" / "supplemental" / "aliases.json"
    if not path.is_file():
        return {}
    data = AliasesData.model_validate(load_json(path))
    return data.language_aliases


def load_language_names(languages_root: Path, locale: str) -> dict[str, str] | None:
    """Load and parse a locale's languages.json."""
    path, cldr_tag = _locale_file(languages_root, locale, "languages.json")
    if not path.is_file():
        return None
    data = LanguagesJsonMain.model_validate(load_json(path))
    return data.main[cldr_tag].locale_display_names.languages


def load_script_names(languages_root: Path, locale: str) -> dict[str, str] | None:
    """Load and parse a locale's scripts.json."""
    path, cldr_tag = _locale_file(languages_root, locale, "scripts.json")
    if not path.is_file():
        return None
    data = ScriptsJsonMain.model_validate(load_json(path))
    return data.main[cldr_tag].locale_display_names.scripts


def load_territory_names(languages_root: Path, locale: str) -> dict[str, str] | None:
    """Load and parse a locale's territories.json."""
    path, cldr_tag = _locale_file(languages_root, locale, "territories.json")
    if not path.is_file():
        return None
    data = TerritoriesJsonMain.model_validate(load_json(path))
    return data.main[cldr_tag].locale_display_names.territories


def load_display_pattern(languages_root: Path, locale: str) -> dict[str, str] | None:
    """Load a locale's display pattern from localeDisplayNames.json.

    Returns the ``pattern`` / ``separator`` keys that are present.
    """
    path, cldr_tag = _locale_file(languages_root, locale, "localeDisplayNames.json")
    if not path.is_file():
        return None
    data = LocaleDisplayNamesJsonMain.model_validate(load_json(path))
    block = data.main[cldr_tag].locale_display_names.locale_display_pattern
    if block is None:
        return None
    pattern: dict[str, str] = {}
    if block.locale_pattern is not None:
        pattern["pattern"] = block.locale_pattern
    if block.locale_separator is not None:
        pattern["separator"] = block.locale_separator
    return pattern or None


def scan_aliases(cldr_root: Path) -> dict[str, str]:
    """Collect locale aliases that resolve to an available locale.

    Keys that carry variants, that are themselves available locales, or
    whose replacement has no data of its own are ignored.
    """
    available = {normalize_tag(tag) for tag in load_available_locales(cldr_root)}
    aliases: dict[str, str] = {}
    for alias, replacement in load_language_aliases(cldr_root).items():
        parsed = Locale.parse(alias)
        if parsed.has_variant or not parsed.language.isalpha():
            continue
        alias_tag = str(parsed)
        target_tag = normalize_tag(replacement)
        if alias_tag in available or target_tag not in available:
            continue
        aliases[alias_tag] = target_tag
    return dict(sorted(aliases.items()))


def scan_locales(cldr_root: Path) -> list[str]:
    """Collect all known locale tags: available locales plus aliases."""
    locales = {normalize_tag(tag) for tag in load_available_locales(cldr_root)}
    locales.update(scan_aliases(cldr_root))
    return sorted(locales)
