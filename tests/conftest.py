"""Shared test fixtures for localenames tests.

Hypothesis profiles:
- dev: local development (200 examples)
- ci: fast CI feedback (50 examples, derandomized)

Override manually: HYPOTHESIS_PROFILE=ci pytest tests/
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

import pytest
from hypothesis import settings

from localenames.processing import LocaleDataGenerator
from localenames.reader import InMemoryBundleReader

settings.register_profile("dev", max_examples=200)
settings.register_profile("ci", max_examples=50, derandomize=True, print_blob=True)
settings.load_profile(
    os.environ.get("HYPOTHESIS_PROFILE", "ci" if os.environ.get("CI") else "dev")
)


LOCALES = [
    "ca",
    "ca_ES",
    "ca_ES_valencia",
    "de",
    "de_AT",
    "en",
    "en_001",
    "en_GB",
    "fr",
    "id",
    "in",
    "zh",
    "zh_Hans",
    "zh_Hans_MO",
]

ALIASES = {"in": "id"}

ENGLISH_LANGUAGES = {
    "ca": "Catalan",
    "de": "German",
    "en": "English",
    "fr": "French",
    "id": "Indonesian",
    "zh": "Chinese",
}

BUNDLES: dict[str, dict[str, dict[str, Any]]] = {
    "lang": {
        "en": {
            "Languages": ENGLISH_LANGUAGES,
            "Scripts": {"Hans": "Simplified Han"},
        },
        "en_GB": {"Languages": {"zh": "Chinese (Mandarin)"}},
        "de": {
            "Languages": {
                "ca": "Katalanisch",
                "de": "Deutsch",
                "en": "Englisch",
                "fr": "Französisch",
                "zh": "Chinesisch",
            },
            "Scripts": {"Hans": "Vereinfacht"},
        },
        "de_AT": {"Languages": {"zh": "Chinesisch"}},
        "fr": {
            "Languages": {
                "de": "allemand",
                "en": "anglais",
                "fr": "français",
                "zh": "chinois",
            },
            "Scripts": {"Hans": "sinogrammes simplifiés"},
            "localeDisplayPattern": {"pattern": "{0} <{1}>", "separator": "{0} / {1}"},
        },
        "ca": {"Languages": {"ca": "català", "en": "anglès"}},
        "ca_ES": {"Languages": {"en": "angles"}},
        "ca_ES_valencia": {"Languages": {"en": "anglès"}},
    },
    "region": {
        "en": {
            "Countries": {
                "AT": "Austria",
                "ES": "Spain",
                "GB": "United Kingdom",
                "MO": "Macao",
            }
        },
        "de": {
            "Countries": {
                "AT": "Österreich",
                "ES": "Spanien",
                "GB": "Vereinigtes Königreich",
                "MO": "Macau",
            }
        },
        "fr": {"Countries": {"AT": "Autriche", "MO": "Macao (R.A.S.)"}},
    },
}


@pytest.fixture
def reader() -> InMemoryBundleReader:
    """In-memory bundle reader over the sample bundles."""
    return InMemoryBundleReader(BUNDLES)


@pytest.fixture
def generator(reader: InMemoryBundleReader) -> LocaleDataGenerator:
    """Generator over the sample locales and aliases."""
    return LocaleDataGenerator(reader, LOCALES, ALIASES)


def _write_json(path: Path, data: dict) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")


def _main(cldr_tag: str, block: dict) -> dict:
    return {
        "main": {
            cldr_tag: {
                "identity": {"language": cldr_tag.split("-")[0]},
                "localeDisplayNames": block,
            }
        }
    }


@pytest.fixture
def cldr_tree(tmp_path: Path) -> Path:
    """Minimal extracted cldr-json release."""
    root = tmp_path / "cldr"
    _write_json(
        root / "cldr-core" / "availableLocales.json",
        {
            "availableLocales": {
                "modern": ["de", "en"],
                "full": ["de", "de-AT", "en", "en-GB", "zh-Hans-MO", "ca-ES-valencia"],
            }
        },
    )
    _write_json(
        root / "cldr-core" / "supplemental" / "aliases.json",
        {
            "supplemental": {
                "version": {"_cldrVersion": "48"},
                "metadata": {
                    "alias": {
                        "languageAlias": {
                            "deu": {"_replacement": "de", "_reason": "overlong"},
                            "aam": {"_replacement": "aas", "_reason": "deprecated"},
                            "en": {"_replacement": "en", "_reason": "macrolanguage"},
                            "de-x-lvariant-old": {"_replacement": "de"},
                        },
                        "territoryAlias": {"DD": {"_replacement": "DE"}},
                    }
                },
            }
        },
    )

    languages_root = root / "cldr-localenames-full" / "main"
    _write_json(
        languages_root / "en" / "languages.json",
        _main("en", {"languages": {"de": "German", "en": "English", "zh": "Chinese"}}),
    )
    _write_json(
        languages_root / "en" / "scripts.json",
        _main("en", {"scripts": {"Hans": "Simplified Han"}}),
    )
    _write_json(
        languages_root / "en" / "territories.json",
        _main("en", {"territories": {"AT": "Austria", "GB": "United Kingdom", "MO": "Macao"}}),
    )
    _write_json(
        languages_root / "en" / "localeDisplayNames.json",
        _main(
            "en",
            {
                "localeDisplayPattern": {
                    "localePattern": "{0} ({1})",
                    "localeSeparator": "{0}, {1}",
                    "localeKeyTypePattern": "{0}: {1}",
                }
            },
        ),
    )
    _write_json(
        languages_root / "en-GB" / "languages.json",
        _main("en-GB", {"languages": {"de": "German", "en": "British English"}}),
    )
    _write_json(
        languages_root / "de" / "languages.json",
        _main("de", {"languages": {"de": "Deutsch", "en": "Englisch"}}),
    )
    _write_json(
        languages_root / "de" / "territories.json",
        _main("de", {"territories": {"AT": "Österreich", "GB": "Vereinigtes Königreich"}}),
    )
    _write_json(
        languages_root / "de-AT" / "languages.json",
        _main("de-AT", {"languages": {"de": "Deutsch", "en": "Englisch"}}),
    )
    return root
