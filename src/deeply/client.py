# SPDX-License-Identifier: Apache-2.0
"""DeepL API client.

Usage:
    async with DeepLyClient(api_key="your-key:fx") as client:
        text = await client.translate("Hello", LanguageCode.DE)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, ClassVar

from deeply.bags import SupportedLanguagesBag, TranslationBag, UsageBag
from deeply.errors import (
    CallError,
    FileReadError,
    InvalidArgumentError,
    TextLengthError,
    map_call_error,
)
from deeply.http_client import AiohttpClient, HttpClient
from deeply.languages import (
    SOURCE_LANGUAGE_CODES,
    TARGET_LANGUAGE_CODES,
    LanguageCode,
    code_for_name,
    code_value,
    display_name,
    is_valid_source,
    is_valid_target,
)
from deeply.protocol import JsonProtocol

logger = logging.getLogger(__name__)

# DeepL limits the text of a single request
MAX_TRANSLATION_TEXT_LENGTH = 30000

API_BASE_URL_PRO = "https://api.deepl.com/v2/"
API_BASE_URL_FREE = "https://api-free.deepl.com/v2/"

# Versions of the DeepL API this client speaks
SUPPORTED_API_VERSIONS = (2,)

FREE_ACCOUNT_KEY_SUFFIX = ":fx"


@dataclass
class TranslationOptions:
    """Options sent with every translate request.

    Attributes:
        split_sentences: "1" splits on punctuation and newlines, "nonewlines"
            on punctuation only, "0" treats the input as one sentence.
        preserve_formatting: "1" keeps the original formatting even where
            DeepL would correct it.
        formality: Register of the output ("default", "more", "less",
            "prefer_more", "prefer_less").
        validate_text_length: Reject texts longer than
            MAX_TRANSLATION_TEXT_LENGTH before sending them.
    """

    split_sentences: str = "1"
    preserve_formatting: str = "0"
    formality: str = "default"
    validate_text_length: bool = True

    SPLIT_SENTENCES_VALUES: ClassVar[frozenset[str]] = frozenset(
        {"0", "1", "nonewlines"}
    )
    PRESERVE_FORMATTING_VALUES: ClassVar[frozenset[str]] = frozenset({"0", "1"})
    FORMALITY_VALUES: ClassVar[frozenset[str]] = frozenset(
        {"default", "more", "less", "prefer_more", "prefer_less"}
    )


@dataclass
class ClientConfig:
    """Client configuration.

    Attributes:
        api_key: DeepL authentication key.
        api_url: Explicit base URL. If None, the endpoint is chosen from the
            key: keys ending in ":fx" belong to free accounts.
        timeout: Total timeout per request in seconds.
        options: Translation options.
    """

    api_key: str
    api_url: str | None = None
    timeout: float = AiohttpClient.DEFAULT_TIMEOUT
    options: TranslationOptions = field(default_factory=TranslationOptions)

    @property
    def is_free_account(self) -> bool:
        """Whether the key belongs to a free account."""
        return self.api_key.endswith(FREE_ACCOUNT_KEY_SUFFIX)

    @property
    def base_url(self) -> str:
        """Resolved API base URL."""
        if self.api_url:
            return self.api_url
        return API_BASE_URL_FREE if self.is_free_account else API_BASE_URL_PRO


class DeepLyClient:
    """Client for the DeepL translation API.

    Option setters return the client so they can be chained:

        client.split_sentences("0").preserve_formatting(True).formality("more")

    The client is not safe to share between tasks that change options while
    requests are in flight; use one client per caller instead.
    """

    def __init__(
        self,
        api_key: str,
        *,
        http_client: HttpClient | None = None,
        api_url: str | None = None,
        timeout: float = AiohttpClient.DEFAULT_TIMEOUT,
    ) -> None:
        """Initialize DeepLyClient.

        Args:
            api_key: DeepL API key.
            http_client: Transport to use. Defaults to an AiohttpClient for
                the endpoint matching the key.
            api_url: Override the API base URL.
            timeout: Total timeout per request in seconds.
        """
        self._config = ClientConfig(api_key=api_key, api_url=api_url, timeout=timeout)
        self._protocol = JsonProtocol()
        self._owns_http_client = http_client is None
        if http_client is None:
            http_client = AiohttpClient(self._config.base_url, timeout=timeout)
        self._http_client: HttpClient = http_client
        self._last_translation: TranslationBag | None = None

    @property
    def config(self) -> ClientConfig:
        """Return the client configuration."""
        return self._config

    @property
    def last_translation(self) -> TranslationBag | None:
        """Result of the most recent successful translation.

        Overwritten by every successful translate call and left unchanged by
        failed ones. Do not rely on it when several tasks share the client.
        """
        return self._last_translation

    async def set_http_client(self, http_client: HttpClient) -> None:
        """Replace the transport.

        A transport created by this client is closed first. Injected
        transports are left open for their owner.
        """
        await self.close()
        self._http_client = http_client
        self._owns_http_client = False

    async def __aenter__(self) -> DeepLyClient:
        """Enter async context manager."""
        return self

    async def __aexit__(self, *args: Any) -> None:
        """Exit async context manager."""
        await self.close()

    async def close(self) -> None:
        """Close the transport if it was created by this client."""
        if self._owns_http_client and isinstance(self._http_client, AiohttpClient):
            await self._http_client.close()

    # Options

    def split_sentences(self, flag: str = "1") -> DeepLyClient:
        """Set how the input is split into sentences ("0", "1", "nonewlines")."""
        flag = str(flag)
        if flag not in TranslationOptions.SPLIT_SENTENCES_VALUES:
            raise InvalidArgumentError(
                f"split_sentences must be one of "
                f"{sorted(TranslationOptions.SPLIT_SENTENCES_VALUES)}, got {flag!r}"
            )
        self._config.options.split_sentences = flag
        return self

    def preserve_formatting(self, flag: str | bool = "0") -> DeepLyClient:
        """Set whether DeepL should keep the original formatting."""
        if isinstance(flag, bool):
            flag = "1" if flag else "0"
        if flag not in TranslationOptions.PRESERVE_FORMATTING_VALUES:
            raise InvalidArgumentError(
                f"preserve_formatting must be '0' or '1', got {flag!r}"
            )
        self._config.options.preserve_formatting = flag
        return self

    def formality(self, level: str) -> DeepLyClient:
        """Set the formality of translations.

        Formality is ignored by DeepL for some target languages (e.g. "ES",
        "JA" and "ZH").
        """
        self._config.options.formality = self._validate_formality(level)
        return self

    def set_validate_text_length(self, flag: bool = False) -> DeepLyClient:
        """Enable or disable the local text length check."""
        self._config.options.validate_text_length = bool(flag)
        return self

    # Language registry

    def supports_source_lang_code(self, code: str) -> bool:
        return is_valid_source(code)

    def supports_target_lang_code(self, code: str) -> bool:
        return is_valid_target(code)

    def get_lang_name(self, code: str) -> str:
        return display_name(code)

    def get_lang_code_by_name(self, name: str) -> LanguageCode | None:
        return code_for_name(name)

    # API operations

    async def translate(
        self,
        text: str,
        target_lang: LanguageCode | str = LanguageCode.EN,
        source_lang: LanguageCode | str = LanguageCode.AUTO,
        formality: str | None = None,
    ) -> str | None:
        """Translate a text.

        Note that the target language comes before the source language.

        Args:
            text: Text to translate.
            target_lang: Target language code.
            source_lang: Source language code, AUTO to let DeepL detect it.
            formality: Formality for this call only. Defaults to the
                configured level.

        Returns:
            The first translation, or None if DeepL returned none.

        Raises:
            InvalidArgumentError: On invalid text or language codes.
            TextLengthError: If the text is too long and checking is enabled.
            AuthenticationError: On status 403.
            RateLimitedError: On status 429.
            QuotaExceededError: On status 456.
            CallError: On any other failed call.
            DecodeError: If the response is not JSON.
            MalformedResultError: If the response lacks translations.
        """
        bag = await self.request_translation(text, target_lang, source_lang, formality)
        translations = bag.get_translations()
        return translations[0].text if translations else None

    async def translate_file(
        self,
        path: str | Path,
        target_lang: LanguageCode | str = LanguageCode.EN,
        source_lang: LanguageCode | str = LanguageCode.AUTO,
        formality: str | None = None,
    ) -> str | None:
        """Translate the contents of a UTF-8 text file.

        Raises:
            FileReadError: If the file cannot be read or decoded.
        """
        file_path = Path(path)
        try:
            text = file_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise FileReadError(f"Could not read file {file_path}: {e}") from e

        return await self.translate(text, target_lang, source_lang, formality)

    async def detect_language(self, text: str) -> str:
        """Detect the language of a text.

        The text is translated to English and the detected source language is
        returned. For English input DeepL picks a different target itself.

        Returns:
            Language code reported by DeepL, e.g. "DE".
        """
        bag = await self.request_translation(text, LanguageCode.EN, LanguageCode.AUTO)
        return bag.get_source_language()

    async def get_usage(self) -> UsageBag:
        """Return character usage of the current billing period."""
        content = await self._call("usage", "GET", {"auth_key": self._config.api_key})
        return UsageBag(content)

    async def get_supported_languages(self, direction: str = "source") -> SupportedLanguagesBag:
        """List languages supported by the API.

        Args:
            direction: "source" for languages usable as source_lang,
                "target" for languages usable as target_lang.
        """
        if direction not in ("source", "target"):
            raise InvalidArgumentError(
                f"direction must be 'source' or 'target', got {direction!r}"
            )

        content = await self._call(
            "languages",
            "GET",
            {"auth_key": self._config.api_key, "type": direction},
        )
        return SupportedLanguagesBag(content)

    async def request_translation(
        self,
        text: str,
        target_lang: LanguageCode | str = LanguageCode.EN,
        source_lang: LanguageCode | str = LanguageCode.AUTO,
        formality: str | None = None,
    ) -> TranslationBag:
        """Request a translation and return the full result bag.

        Takes the same arguments and raises the same errors as translate().
        """
        options = self._config.options
        self._validate_text(text)
        target = self._validate_target(target_lang)
        source = self._validate_source(source_lang)
        level = options.formality if formality is None else self._validate_formality(formality)

        payload = {
            "auth_key": self._config.api_key,
            "split_sentences": options.split_sentences,
            "preserve_formatting": options.preserve_formatting,
            "formality": level,
            "text": text,
            "source_lang": source,
            "target_lang": target,
        }
        # DeepL detects the language when source_lang is absent
        if source == LanguageCode.AUTO.value:
            del payload["source_lang"]

        logger.debug(
            "Translating %d chars: %s -> %s", len(text), source, target
        )
        content = await self._call("translate", "POST", payload)

        bag = TranslationBag(content)
        self._last_translation = bag
        return bag

    async def _call(self, operation: str, method: str, payload: dict[str, str]) -> Any:
        """Execute an API call and decode the response.

        Raises:
            CallError: Mapped to its specific subclass where one exists.
            DecodeError: If the response is not JSON.
        """
        try:
            raw_response_data = await self._http_client.call_api(operation, method, payload)
        except CallError as e:
            mapped = map_call_error(e)
            if mapped is e:
                raise
            raise mapped from e

        return self._protocol.process_response_data(raw_response_data)

    # Validation

    def _validate_text(self, text: Any) -> None:
        if not isinstance(text, str):
            raise InvalidArgumentError(
                f"text has to be a string, got {type(text).__name__}"
            )

        if (
            self._config.options.validate_text_length
            and len(text) > MAX_TRANSLATION_TEXT_LENGTH
        ):
            raise TextLengthError(len(text), MAX_TRANSLATION_TEXT_LENGTH)

    def _validate_target(self, target_lang: Any) -> str:
        value = code_value(target_lang)
        if value == LanguageCode.AUTO.value:
            raise InvalidArgumentError(
                f'The target language cannot be "{LanguageCode.AUTO.value}"'
            )
        if value is None or not is_valid_target(value):
            raise InvalidArgumentError(
                "The target language has to be one of the supported target "
                f"language codes. [{', '.join(c.value for c in TARGET_LANGUAGE_CODES)}]"
            )
        return value

    def _validate_source(self, source_lang: Any) -> str:
        value = code_value(source_lang)
        if value is None or not is_valid_source(value):
            raise InvalidArgumentError(
                "The source language has to be one of the supported source "
                f"language codes. [{', '.join(c.value for c in SOURCE_LANGUAGE_CODES)}]"
            )
        return value

    def _validate_formality(self, level: Any) -> str:
        if not isinstance(level, str):
            raise InvalidArgumentError(
                f"formality has to be a string, got {type(level).__name__}"
            )
        level = level.lower()
        if level not in TranslationOptions.FORMALITY_VALUES:
            raise InvalidArgumentError(
                f"formality must be one of "
                f"{sorted(TranslationOptions.FORMALITY_VALUES)}, got {level!r}"
            )
        return level
