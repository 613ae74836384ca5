"""Tests for locale display name composition."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from localenames.models import DisplayPattern
from localenames.naming import (
    compose_locale_name,
    escape_parentheses,
    generate_locale_name,
    is_valid_country_code,
)
from localenames.reader import (
    InMemoryBundleReader,
    MissingResourceError,
    MissingResourceKind,
)


class TestComposeLocaleName:
    def test_language_only(self) -> None:
        assert compose_locale_name("German") == "German"

    def test_language_and_region(self) -> None:
        assert compose_locale_name("German", region_name="Austria") == "German (Austria)"

    def test_script_comes_before_region(self) -> None:
        name = compose_locale_name("Chinese", "Simplified Han", "Macao")

        assert name == "Chinese (Simplified Han, Macao)"

    def test_custom_pattern(self) -> None:
        pattern = DisplayPattern(pattern="{0}（{1}）", separator="{0}、{1}")

        name = compose_locale_name("中文", "简体", "澳门", pattern)

        assert name == "中文（简体、澳门）"

    def test_fragments_parentheses_become_brackets(self) -> None:
        name = compose_locale_name("Chinese (Mandarin)", None, "Macao (SAR China)")

        assert name == "Chinese [Mandarin] (Macao [SAR China])"

    @given(
        language=st.text(),
        script=st.none() | st.text(),
        region=st.none() | st.text(),
    )
    def test_fragments_never_add_parentheses(
        self, language: str, script: str | None, region: str | None
    ) -> None:
        name = compose_locale_name(language, script, region)

        expected = 0 if script is None and region is None else 1
        assert name.count("(") == expected
        assert name.count(")") == expected


class TestHelpers:
    def test_escape_parentheses(self) -> None:
        assert escape_parentheses("a (b) c") == "a [b] c"

    @pytest.mark.parametrize("region", ["AT", "MO", "US"])
    def test_valid_country_codes(self, region: str) -> None:
        assert is_valid_country_code(region)

    @pytest.mark.parametrize("region", ["001", "419", "EU", "UN", "ZZ", "XK"])
    def test_invalid_country_codes(self, region: str) -> None:
        assert not is_valid_country_code(region)


class TestGenerateLocaleName:
    def test_region_locale(self, reader: InMemoryBundleReader) -> None:
        assert generate_locale_name(reader, "de_AT", "en") == "German (Austria)"

    def test_script_region_locale(self, reader: InMemoryBundleReader) -> None:
        name = generate_locale_name(reader, "zh_Hans_MO", "en")

        assert name == "Chinese (Simplified Han, Macao)"

    def test_inherits_fragments_through_fallback(
        self, reader: InMemoryBundleReader
    ) -> None:
        assert generate_locale_name(reader, "de_AT", "en_GB") == "German (Austria)"

    def test_missing_language(self, reader: InMemoryBundleReader) -> None:
        with pytest.raises(MissingResourceError) as excinfo:
            generate_locale_name(reader, "id", "de")

        assert excinfo.value.kind is MissingResourceKind.MISSING_ENTRY

    def test_invalid_region(self, reader: InMemoryBundleReader) -> None:
        with pytest.raises(MissingResourceError) as excinfo:
            generate_locale_name(reader, "en_001", "en")

        assert excinfo.value.kind is MissingResourceKind.INVALID_REGION
