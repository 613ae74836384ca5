"""Composition of locale display names from language/script/region names."""

from __future__ import annotations

from .models import DisplayPattern, Locale
from .reader import (
    LANG_BUNDLE,
    REGION_BUNDLE,
    BundleEntryReader,
    MissingResourceError,
    MissingResourceKind,
)

# Region codes that are not countries
NON_COUNTRY_REGIONS = frozenset(
    {
        # Exceptional reservations
        "AC",  # Ascension Island
        "CP",  # Clipperton Island
        "DG",  # Diego Garcia
        "EA",  # Ceuta & Melilla
        "EU",  # European Union
        "EZ",  # Eurozone
        "IC",  # Canary Islands
        "TA",  # Tristan da Cunha
        "UN",  # United Nations
        # User-assigned
        "QO",  # Outlying Oceania
        "XA",  # Pseudo-Accents
        "XB",  # Pseudo-Bidi
        "XK",  # Kosovo
        # Misc
        "ZZ",  # Unknown Region
    }
)


def is_valid_country_code(region: str) -> bool:
    """Whether ``region`` names a country rather than a grouping."""
    if region in NON_COUNTRY_REGIONS:
        return False
    # World, continents and other UN M.49 groupings
    return not region.isdigit()


def escape_parentheses(value: str) -> str:
    """Replace parentheses with square brackets.

    See http://cldr.unicode.org/translation/language-names
    """
    return value.replace("(", "[").replace(")", "]")


def _substitute(template: str, first: str, second: str) -> str:
    return template.replace("{0}", first).replace("{1}", second)


def compose_locale_name(
    language_name: str,
    script_name: str | None = None,
    region_name: str | None = None,
    display_pattern: DisplayPattern | None = None,
) -> str:
    """Compose a display name of the form "Language (Script, Region)".

    Script and region are optional. If both are absent the parentheses are
    not printed.
    """
    display_pattern = display_pattern or DisplayPattern()
    name = escape_parentheses(language_name)
    extras = [
        escape_parentheses(part)
        for part in (script_name, region_name)
        if part is not None
    ]

    if not extras:
        return name

    extra, *rest = extras
    for part in rest:
        extra = _substitute(display_pattern.separator, extra, part)
    return _substitute(display_pattern.pattern, name, extra)


def generate_locale_name(
    reader: BundleEntryReader,
    locale: str,
    display_locale: str,
    display_pattern: DisplayPattern | None = None,
) -> str:
    """Name ``locale`` in the language of ``display_locale``.

    Raises:
        MissingResourceError: If a name fragment is missing, or with kind
            ``INVALID_REGION`` if the region is not a country.
    """
    parsed = Locale.parse(locale)
    language_name = reader.read_entry(
        LANG_BUNDLE, display_locale, ["Languages", parsed.language]
    )

    # i.e. in zh_Hans_MO, "Hans" is the script
    script_name = None
    if parsed.script:
        script_name = reader.read_entry(
            LANG_BUNDLE, display_locale, ["Scripts", parsed.script]
        )

    # i.e. in de_AT, "AT" is the region
    region_name = None
    if parsed.region:
        if not is_valid_country_code(parsed.region):
            raise MissingResourceError(
                f'Skipping "{locale}" due to an invalid country.',
                kind=MissingResourceKind.INVALID_REGION,
            )
        region_name = reader.read_entry(
            REGION_BUNDLE, display_locale, ["Countries", parsed.region]
        )

    return compose_locale_name(language_name, script_name, region_name, display_pattern)
