# SPDX-License-Identifier: Apache-2.0
"""Tests for response bags."""

from typing import Any

import pytest

from deeply.bags import (
    SupportedLanguage,
    SupportedLanguagesBag,
    Translation,
    TranslationBag,
    Usage,
    UsageBag,
)
from deeply.errors import BagErrorCode, MalformedResultError


class TestTranslationBag:
    """Test TranslationBag validation and accessors."""

    def test_single_translation(self) -> None:
        """Accessors should read the first translation."""
        bag = TranslationBag(
            {"translations": [{"text": "Hallo", "detected_source_language": "EN"}]}
        )
        assert bag.get_translation() == "Hallo"
        assert bag.get_source_language() == "EN"

    def test_multiple_translations_keep_order(self) -> None:
        """get_translations should return all entries in order."""
        bag = TranslationBag(
            {
                "translations": [
                    {"text": "Hallo", "detected_source_language": "EN"},
                    {"text": "Welt", "detected_source_language": "EN"},
                ]
            }
        )
        assert bag.get_translations() == [
            Translation(text="Hallo", detected_source_language="EN"),
            Translation(text="Welt", detected_source_language="EN"),
        ]
        assert bag.get_translation() == "Hallo"

    def test_unknown_source_language_passed_through(self) -> None:
        """Detected languages outside the registry should not be rejected."""
        bag = TranslationBag(
            {"translations": [{"text": "Hi", "detected_source_language": "UK"}]}
        )
        assert bag.get_source_language() == "UK"

    @pytest.mark.parametrize(
        ("content", "code"),
        [
            ([], BagErrorCode.RESPONSE_NOT_AN_OBJECT),
            ("text", BagErrorCode.RESPONSE_NOT_AN_OBJECT),
            ({}, BagErrorCode.TRANSLATIONS_MISSING),
            ({"translations": "Hallo"}, BagErrorCode.TRANSLATIONS_NOT_A_LIST),
            ({"translations": {"text": "Hallo"}}, BagErrorCode.TRANSLATIONS_NOT_A_LIST),
            ({"translations": []}, BagErrorCode.TRANSLATIONS_EMPTY),
            ({"translations": [{"text": "Hallo"}]}, BagErrorCode.TRANSLATION_ENTRY_INVALID),
            (
                {"translations": [{"detected_source_language": "EN"}]},
                BagErrorCode.TRANSLATION_ENTRY_INVALID,
            ),
            ({"translations": ["Hallo"]}, BagErrorCode.TRANSLATION_ENTRY_INVALID),
        ],
    )
    def test_malformed(self, content: Any, code: BagErrorCode) -> None:
        """Malformed content should fail with a distinguishable code."""
        with pytest.raises(MalformedResultError) as exc_info:
            TranslationBag(content)
        assert exc_info.value.code == code

    def test_missing_and_not_a_list_codes_differ(self) -> None:
        """Missing and mis-typed translations should have different codes."""
        assert BagErrorCode.TRANSLATIONS_MISSING != BagErrorCode.TRANSLATIONS_NOT_A_LIST
        assert int(BagErrorCode.TRANSLATIONS_MISSING) == 230
        assert int(BagErrorCode.TRANSLATIONS_NOT_A_LIST) == 231

    def test_error_message(self) -> None:
        """Error message should describe the problem."""
        with pytest.raises(MalformedResultError) as exc_info:
            TranslationBag({})
        assert "translations are missing" in str(exc_info.value)


class TestUsageBag:
    """Test UsageBag validation and accessors."""

    def test_accessors(self) -> None:
        """Counts should be returned unchanged."""
        bag = UsageBag({"character_count": 100, "character_limit": 500000})
        assert bag.get_character_count() == 100
        assert bag.get_character_limit() == 500000
        assert bag.get_response() == {
            "character_count": 100,
            "character_limit": 500000,
        }

    def test_usage_record(self) -> None:
        """usage should expose a typed record with derived values."""
        usage = UsageBag({"character_count": 100, "character_limit": 500}).usage
        assert usage == Usage(character_count=100, character_limit=500)
        assert usage.remaining == 400
        assert usage.limit_reached is False

    def test_used_above_limit_not_enforced(self) -> None:
        """count > limit is accepted as reported by the API."""
        usage = UsageBag({"character_count": 600, "character_limit": 500}).usage
        assert usage.limit_reached is True
        assert usage.remaining == -100

    @pytest.mark.parametrize(
        ("content", "code"),
        [
            ([1, 2], BagErrorCode.RESPONSE_NOT_AN_OBJECT),
            ({"character_limit": 10}, BagErrorCode.CHARACTER_COUNT_MISSING),
            ({"character_count": 10}, BagErrorCode.CHARACTER_LIMIT_MISSING),
            (
                {"character_count": "10", "character_limit": 10},
                BagErrorCode.CHARACTER_COUNT_INVALID,
            ),
            (
                {"character_count": -1, "character_limit": 10},
                BagErrorCode.CHARACTER_COUNT_INVALID,
            ),
            (
                {"character_count": 1, "character_limit": True},
                BagErrorCode.CHARACTER_LIMIT_INVALID,
            ),
            (
                {"character_count": 1, "character_limit": 1.5},
                BagErrorCode.CHARACTER_LIMIT_INVALID,
            ),
        ],
    )
    def test_malformed(self, content: Any, code: BagErrorCode) -> None:
        """Missing or invalid fields should fail with distinct codes."""
        with pytest.raises(MalformedResultError) as exc_info:
            UsageBag(content)
        assert exc_info.value.code == code


class TestSupportedLanguagesBag:
    """Test SupportedLanguagesBag validation and accessors."""

    CONTENT = [
        {"language": "DE", "name": "German", "supports_formality": True},
        {"language": "EN-GB", "name": "English (British)", "supports_formality": False},
        {"language": "JA", "name": "Japanese"},
    ]

    def test_languages_keep_order(self) -> None:
        """Languages should be returned in response order."""
        bag = SupportedLanguagesBag(self.CONTENT)
        assert len(bag) == 3
        assert bag.get_languages() == [
            SupportedLanguage("DE", "German", True),
            SupportedLanguage("EN-GB", "English (British)", False),
            SupportedLanguage("JA", "Japanese", None),
        ]
        assert [lang.language for lang in bag] == ["DE", "EN-GB", "JA"]

    def test_is_language_supported_by_code_or_name(self) -> None:
        """Both codes and names should match."""
        bag = SupportedLanguagesBag(self.CONTENT)
        assert bag.is_language_supported("DE")
        assert bag.is_language_supported("Japanese")
        assert bag.is_language_supported("English (British)")

    def test_is_language_supported_exact_match(self) -> None:
        """Matching should be exact and case-sensitive."""
        bag = SupportedLanguagesBag(self.CONTENT)
        assert not bag.is_language_supported("de")
        assert not bag.is_language_supported("german")
        assert not bag.is_language_supported("FR")
        assert not bag.is_language_supported("")

    def test_get_response_is_a_copy(self) -> None:
        """get_response should not expose the internal entries."""
        bag = SupportedLanguagesBag(self.CONTENT)
        response = bag.get_response()
        response[0]["name"] = "changed"
        assert bag.get_languages()[0].name == "German"

    @pytest.mark.parametrize(
        ("content", "code"),
        [
            ({"language": "DE"}, BagErrorCode.LANGUAGES_NOT_A_LIST),
            ([], BagErrorCode.LANGUAGES_EMPTY),
            ([{"language": "DE"}], BagErrorCode.LANGUAGE_ENTRY_INVALID),
            ([{"name": "German"}], BagErrorCode.LANGUAGE_ENTRY_INVALID),
            (["DE"], BagErrorCode.LANGUAGE_ENTRY_INVALID),
        ],
    )
    def test_malformed(self, content: Any, code: BagErrorCode) -> None:
        """Invalid lists should fail with distinct codes."""
        with pytest.raises(MalformedResultError) as exc_info:
            SupportedLanguagesBag(content)
        assert exc_info.value.code == code
