# SPDX-License-Identifier: Apache-2.0
"""Asyncio client for the DeepL translation API.

Usage:
    from deeply import DeepLyClient, LanguageCode

    async with DeepLyClient(api_key="your-api-key") as client:
        text = await client.translate("Hello", LanguageCode.DE)
        usage = await client.get_usage()
"""

from deeply.bags import (
    SupportedLanguage,
    SupportedLanguagesBag,
    Translation,
    TranslationBag,
    Usage,
    UsageBag,
)
from deeply.client import (
    API_BASE_URL_FREE,
    API_BASE_URL_PRO,
    MAX_TRANSLATION_TEXT_LENGTH,
    SUPPORTED_API_VERSIONS,
    ClientConfig,
    DeepLyClient,
    TranslationOptions,
)
from deeply.errors import (
    AuthenticationError,
    BagErrorCode,
    CallError,
    DecodeError,
    DeeplyError,
    FileReadError,
    InvalidArgumentError,
    MalformedResultError,
    QuotaExceededError,
    RateLimitedError,
    TextLengthError,
)
from deeply.http_client import AiohttpClient, HttpClient
from deeply.languages import (
    DEPRECATED_TARGET_ALIASES,
    LANGUAGE_NAMES,
    SOURCE_LANGUAGE_CODES,
    TARGET_LANGUAGE_CODES,
    UNKNOWN_LANGUAGE_NAME,
    LanguageCode,
    code_for_name,
    display_name,
    is_valid_source,
    is_valid_target,
)
from deeply.protocol import JsonProtocol

__version__ = "0.1.0"

__all__ = [
    # Client
    "DeepLyClient",
    "ClientConfig",
    "TranslationOptions",
    "MAX_TRANSLATION_TEXT_LENGTH",
    "API_BASE_URL_FREE",
    "API_BASE_URL_PRO",
    "SUPPORTED_API_VERSIONS",
    # Transport and decoding
    "HttpClient",
    "AiohttpClient",
    "JsonProtocol",
    # Results
    "TranslationBag",
    "UsageBag",
    "SupportedLanguagesBag",
    "Translation",
    "Usage",
    "SupportedLanguage",
    # Languages
    "LanguageCode",
    "SOURCE_LANGUAGE_CODES",
    "TARGET_LANGUAGE_CODES",
    "DEPRECATED_TARGET_ALIASES",
    "LANGUAGE_NAMES",
    "UNKNOWN_LANGUAGE_NAME",
    "is_valid_source",
    "is_valid_target",
    "display_name",
    "code_for_name",
    # Exceptions
    "DeeplyError",
    "InvalidArgumentError",
    "TextLengthError",
    "CallError",
    "AuthenticationError",
    "RateLimitedError",
    "QuotaExceededError",
    "MalformedResultError",
    "BagErrorCode",
    "DecodeError",
    "FileReadError",
    "__version__",
]
