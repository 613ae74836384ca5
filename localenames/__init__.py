"""CLDR locale display name generator package."""

from .fallback import (
    AliasFallbackError,
    FallbackCache,
    generate_fallback_mapping,
    get_fallback,
)
from .models import DisplayPattern, Locale
from .naming import compose_locale_name, generate_locale_name
from .processing import LocaleDataGenerator, generate_data
from .reader import (
    BundleEntryReader,
    CldrJsonReader,
    MissingResourceError,
    MissingResourceKind,
)

__all__ = [
    "AliasFallbackError",
    "BundleEntryReader",
    "CldrJsonReader",
    "DisplayPattern",
    "FallbackCache",
    "Locale",
    "LocaleDataGenerator",
    "MissingResourceError",
    "MissingResourceKind",
    "compose_locale_name",
    "generate_data",
    "generate_fallback_mapping",
    "generate_locale_name",
    "get_fallback",
]
