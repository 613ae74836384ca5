"""Pydantic models for CLDR JSON structures and locale representation."""

from __future__ import annotations

from pydantic import BaseModel, Field

DEFAULT_PATTERN = "{0} ({1})"
DEFAULT_SEPARATOR = "{0}, {1}"


class Locale(BaseModel, frozen=True):
    """ICU-style locale representation (``zh_Hans_MO``)."""

    language: str
    script: str | None = None
    region: str | None = None
    variants: tuple[str, ...] = ()

    @classmethod
    def parse(cls, tag: str) -> Locale:
        """Parse a BCP-47 or ICU locale tag into a Locale."""
        subtags = tag.replace("-", "_").split("_")
        language = subtags[0].lower()
        script: str | None = None
        region: str | None = None
        variants_list: list[str] = []
        for subtag in subtags[1:]:
            if len(subtag) == 4 and subtag.isalpha() and not variants_list:
                script = subtag.title()
            elif (
                (len(subtag) == 2 and subtag.isalpha())
                or (len(subtag) == 3 and subtag.isdigit())
            ) and not variants_list:
                region = subtag.upper()
            elif subtag:
                variants_list.append(subtag)
        return cls(
            language=language,
            script=script,
            region=region,
            variants=tuple(variants_list),
        )

    @property
    def has_variant(self) -> bool:
        return bool(self.variants)

    def parent(self) -> Locale | None:
        """Return the next coarser locale, or None for a bare language.

        Subtags are removed in order: last variant, region, script.
        """
        if self.variants:
            return self.model_copy(update={"variants": self.variants[:-1]})
        if self.region:
            return self.model_copy(update={"region": None})
        if self.script:
            return self.model_copy(update={"script": None})
        return None

    def __str__(self) -> str:
        parts: list[str] = [self.language]
        if self.script:
            parts.append(self.script)
        if self.region:
            parts.append(self.region)
        parts.extend(self.variants)
        return "_".join(parts)

    def __hash__(self) -> int:
        return hash((self.language, self.script, self.region, self.variants))


def normalize_tag(tag: str) -> str:
    """Return the canonical ICU form of a locale tag."""
    return str(Locale.parse(tag))


class DisplayPattern(BaseModel, frozen=True):
    """Locale display pattern of a display locale.

    ``pattern`` joins the language name ``{0}`` with the parenthesised
    extras ``{1}``; ``separator`` joins two extras.
    """

    pattern: str = DEFAULT_PATTERN
    separator: str = DEFAULT_SEPARATOR

    @classmethod
    def from_entry(cls, entry: object) -> DisplayPattern:
        """Build a pattern from a ``localeDisplayPattern`` bundle entry.

        Missing keys keep their defaults.
        """
        if not isinstance(entry, dict):
            return cls()
        return cls(**{key: entry[key] for key in ("pattern", "separator") if key in entry})


class AvailableLocalesData(BaseModel):
    """Model for availableLocales.json."""

    available_locales: dict[str, list[str]] = Field(alias="availableLocales")

    @property
    def full(self) -> list[str]:
        return self.available_locales["full"]


class AliasReplacement(BaseModel):
    """Single entry of an alias table in aliases.json."""

    replacement: str = Field(alias="_replacement")
    reason: str | None = Field(default=None, alias="_reason")


class AliasTables(BaseModel):
    """Alias tables in aliases.json."""

    language_alias: dict[str, AliasReplacement] = Field(
        default_factory=dict, alias="languageAlias"
    )


class AliasMetadata(BaseModel):
    """Metadata block in aliases.json."""

    alias: AliasTables


class AliasSupplemental(BaseModel):
    """Supplemental block in aliases.json."""

    metadata: AliasMetadata


class AliasesData(BaseModel):
    """Model for supplemental/aliases.json."""

    supplemental: AliasSupplemental

    @property
    def language_aliases(self) -> dict[str, str]:
        alias = self.supplemental.metadata.alias
        return {
            key: value.replacement for key, value in alias.language_alias.items()
        }


class LanguageDisplayNames(BaseModel):
    """Language display names block."""

    languages: dict[str, str]


class LanguagesLocaleEntry(BaseModel):
    """Entry for a single locale in languages.json."""

    locale_display_names: LanguageDisplayNames = Field(alias="localeDisplayNames")


class LanguagesJsonMain(BaseModel):
    """Main block in languages.json."""

    main: dict[str, LanguagesLocaleEntry]


class ScriptDisplayNames(BaseModel):
    """Script display names block."""

    scripts: dict[str, str]


class ScriptsLocaleEntry(BaseModel):
    """Entry for a single locale in scripts.json."""

    locale_display_names: ScriptDisplayNames = Field(alias="localeDisplayNames")


class ScriptsJsonMain(BaseModel):
    """Main block in scripts.json."""

    main: dict[str, ScriptsLocaleEntry]


class TerritoryDisplayNames(BaseModel):
    """Territory display names block."""

    territories: dict[str, str]


class TerritoriesLocaleEntry(BaseModel):
    """Entry for a single locale in territories.json."""

    locale_display_names: TerritoryDisplayNames = Field(alias="localeDisplayNames")


class TerritoriesJsonMain(BaseModel):
    """Main block in territories.json."""

    main: dict[str, TerritoriesLocaleEntry]


class LocaleDisplayPatternData(BaseModel):
    """``localeDisplayPattern`` block in localeDisplayNames.json."""

    locale_pattern: str | None = Field(default=None, alias="localePattern")
    locale_separator: str | None = Field(default=None, alias="localeSeparator")


class LocaleDisplayNamesBlock(BaseModel):
    """Locale display names block of localeDisplayNames.json."""

    locale_display_pattern: LocaleDisplayPatternData | None = Field(
        default=None, alias="localeDisplayPattern"
    )


class LocaleDisplayNamesLocaleEntry(BaseModel):
    """Entry for a single locale in localeDisplayNames.json."""

    locale_display_names: LocaleDisplayNamesBlock = Field(alias="localeDisplayNames")


class LocaleDisplayNamesJsonMain(BaseModel):
    """Main block in localeDisplayNames.json."""

    main: dict[str, LocaleDisplayNamesLocaleEntry]
