# SPDX-License-Identifier: Apache-2.0
"""Typed wrappers around decoded API responses.

A bag validates its content when it is created and raises
:class:`~deeply.errors.MalformedResultError` if anything required is
missing, so accessors never see a half-valid payload.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from deeply.errors import BagErrorCode, MalformedResultError


@dataclass(frozen=True)
class Translation:
    """Single translation returned by the translate operation."""

    text: str
    detected_source_language: str


@dataclass(frozen=True)
class Usage:
    """Character usage of the current billing period."""

    character_count: int
    character_limit: int

    @property
    def remaining(self) -> int:
        """Characters left before the limit (may be negative)."""
        return self.character_limit - self.character_count

    @property
    def limit_reached(self) -> bool:
        """Whether the character limit has been reached."""
        return self.character_count >= self.character_limit


@dataclass(frozen=True)
class SupportedLanguage:
    """Language entry of the languages operation.

    ``supports_formality`` is only reported for target languages.
    """

    language: str
    name: str
    supports_formality: bool | None = None


def _is_count(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


class ResponseBag:
    """Base class for response bags."""

    def __init__(self, response_content: Any) -> None:
        self.verify_response_content(response_content)
        self._response_content = response_content

    def verify_response_content(self, response_content: Any) -> None:
        """Validate the decoded response.

        Raises:
            MalformedResultError: If the content is not a JSON object.
        """
        if not isinstance(response_content, dict):
            raise MalformedResultError(
                f"expected an object, got {type(response_content).__name__}",
                BagErrorCode.RESPONSE_NOT_AN_OBJECT,
            )

    @property
    def response(self) -> Any:
        """Return the decoded response content."""
        return self._response_content


class TranslationBag(ResponseBag):
    """Result of a translate call.

    DeepL may return several translations; the first one is treated as the
    best match.
    """

    def verify_response_content(self, response_content: Any) -> None:
        super().verify_response_content(response_content)

        if "translations" not in response_content:
            raise MalformedResultError(
                "translations are missing", BagErrorCode.TRANSLATIONS_MISSING
            )

        translations = response_content["translations"]
        if not isinstance(translations, list):
            raise MalformedResultError(
                "translations are not a list", BagErrorCode.TRANSLATIONS_NOT_A_LIST
            )
        if not translations:
            raise MalformedResultError(
                "translations are empty", BagErrorCode.TRANSLATIONS_EMPTY
            )

        for index, entry in enumerate(translations):
            if not (
                isinstance(entry, dict)
                and isinstance(entry.get("text"), str)
                and isinstance(entry.get("detected_source_language"), str)
            ):
                raise MalformedResultError(
                    f"translation {index} lacks text or detected_source_language",
                    BagErrorCode.TRANSLATION_ENTRY_INVALID,
                )

    def get_translation(self) -> str:
        """Return the text of the first translation."""
        return self._response_content["translations"][0]["text"]

    def get_source_language(self) -> str:
        """Return the (possibly auto-detected) source language code.

        The code is not checked against the language registry, so languages
        DeepL adds later are passed through.
        """
        return self._response_content["translations"][0]["detected_source_language"]

    def get_translations(self) -> list[Translation]:
        """Return all translations in response order."""
        return [
            Translation(
                text=entry["text"],
                detected_source_language=entry["detected_source_language"],
            )
            for entry in self._response_content["translations"]
        ]


class UsageBag(ResponseBag):
    """Result of a usage call."""

    def verify_response_content(self, response_content: Any) -> None:
        super().verify_response_content(response_content)

        if "character_count" not in response_content:
            raise MalformedResultError(
                "character_count is missing", BagErrorCode.CHARACTER_COUNT_MISSING
            )
        if not _is_count(response_content["character_count"]):
            raise MalformedResultError(
                "character_count is not a non-negative integer",
                BagErrorCode.CHARACTER_COUNT_INVALID,
            )
        if "character_limit" not in response_content:
            raise MalformedResultError(
                "character_limit is missing", BagErrorCode.CHARACTER_LIMIT_MISSING
            )
        if not _is_count(response_content["character_limit"]):
            raise MalformedResultError(
                "character_limit is not a non-negative integer",
                BagErrorCode.CHARACTER_LIMIT_INVALID,
            )

    def get_character_count(self) -> int:
        """Characters translated so far in the current billing period."""
        return self._response_content["character_count"]

    def get_character_limit(self) -> int:
        """Maximum characters that can be translated in the billing period."""
        return self._response_content["character_limit"]

    @property
    def usage(self) -> Usage:
        """Return the usage as a typed record."""
        return Usage(
            character_count=self.get_character_count(),
            character_limit=self.get_character_limit(),
        )

    def get_response(self) -> dict[str, int]:
        """Return the validated usage counts as a dict."""
        return {
            "character_count": self.get_character_count(),
            "character_limit": self.get_character_limit(),
        }


class SupportedLanguagesBag(ResponseBag):
    """Result of a languages call."""

    def verify_response_content(self, response_content: Any) -> None:
        if not isinstance(response_content, list):
            raise MalformedResultError(
                "languages are not a list", BagErrorCode.LANGUAGES_NOT_A_LIST
            )
        if not response_content:
            raise MalformedResultError(
                "languages array is empty", BagErrorCode.LANGUAGES_EMPTY
            )

        for index, entry in enumerate(response_content):
            if not (
                isinstance(entry, dict)
                and isinstance(entry.get("language"), str)
                and isinstance(entry.get("name"), str)
            ):
                raise MalformedResultError(
                    f"language {index} lacks language or name",
                    BagErrorCode.LANGUAGE_ENTRY_INVALID,
                )

    def get_languages(self) -> list[SupportedLanguage]:
        """Return the supported languages in response order."""
        return [
            SupportedLanguage(
                language=entry["language"],
                name=entry["name"],
                supports_formality=entry.get("supports_formality"),
            )
            for entry in self._response_content
        ]

    def is_language_supported(self, language: str) -> bool:
        """Check whether a language code or name is in the list.

        Matching is exact and case-sensitive.
        """
        return any(
            language == entry["language"] or language == entry["name"]
            for entry in self._response_content
        )

    def get_response(self) -> list[dict[str, Any]]:
        """Return a copy of the language entries."""
        return [dict(entry) for entry in self._response_content]

    def __len__(self) -> int:
        return len(self._response_content)

    def __iter__(self) -> Iterator[SupportedLanguage]:
        return iter(self.get_languages())
