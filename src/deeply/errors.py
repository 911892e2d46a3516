# SPDX-License-Identifier: Apache-2.0
"""Exception hierarchy for the DeepL client.

Every error raised by this package derives from :class:`DeeplyError`.
Remote call failures are raised by the transport as :class:`CallError` and
translated into the more specific subclasses by :func:`map_call_error`.
"""

from __future__ import annotations

from enum import IntEnum


class DeeplyError(Exception):
    """Base exception for the deeply package."""

    pass


class InvalidArgumentError(DeeplyError, ValueError):
    """Invalid caller input (unsupported language, non-text value, bad option).

    Raised before any network call is made.
    """

    pass


class TextLengthError(DeeplyError):
    """Text exceeds the maximum length accepted by the API."""

    def __init__(self, length: int, max_length: int) -> None:
        super().__init__(
            f"The text exceeds the maximum of {max_length} chars (got {length})"
        )
        self.length = length
        self.max_length = max_length


class FileReadError(DeeplyError, OSError):
    """File passed to translate_file could not be read."""

    pass


class DecodeError(DeeplyError):
    """Response body is not valid JSON."""

    pass


class BagErrorCode(IntEnum):
    """Stable codes for malformed API results."""

    RESPONSE_NOT_AN_OBJECT = 200
    TRANSLATIONS_MISSING = 230
    TRANSLATIONS_NOT_A_LIST = 231
    TRANSLATIONS_EMPTY = 232
    TRANSLATION_ENTRY_INVALID = 233
    CHARACTER_COUNT_MISSING = 300
    CHARACTER_COUNT_INVALID = 301
    CHARACTER_LIMIT_MISSING = 310
    CHARACTER_LIMIT_INVALID = 311
    LANGUAGES_NOT_A_LIST = 320
    LANGUAGES_EMPTY = 321
    LANGUAGE_ENTRY_INVALID = 322


class MalformedResultError(DeeplyError):
    """Well-formed JSON that does not have the expected shape."""

    def __init__(self, message: str, code: BagErrorCode) -> None:
        super().__init__(
            f"DeepL API call resulted in a malformed result - {message}"
        )
        self.code = code


class CallError(DeeplyError):
    """Remote API call failed.

    Attributes:
        status_code: HTTP status of the failed call, 0 when no response was
            received (connection error, timeout).
    """

    def __init__(self, message: str, status_code: int = 0) -> None:
        super().__init__(message)
        self.status_code = status_code


class AuthenticationError(CallError):
    """Status 403: the auth key was rejected."""

    pass


class RateLimitedError(CallError):
    """Status 429: too many requests."""

    pass


class QuotaExceededError(CallError):
    """Status 456: the character quota has been reached."""

    pass


STATUS_ERRORS: dict[int, tuple[type[CallError], str]] = {
    403: (
        AuthenticationError,
        "Authorization failed. Please supply a valid auth_key parameter.",
    ),
    429: (
        RateLimitedError,
        "Too many requests. Please wait and resend your request.",
    ),
    456: (
        QuotaExceededError,
        "Quota exceeded. The character limit has been reached.",
    ),
}


def map_call_error(error: CallError) -> CallError:
    """Map a transport failure to its domain-specific error.

    Args:
        error: Failure raised by the HTTP transport.

    Returns:
        The mapped error with ``__cause__`` set to ``error``, or ``error``
        itself when its status has no dedicated type.
    """
    mapping = STATUS_ERRORS.get(error.status_code)
    if mapping is None:
        return error

    error_class, message = mapping
    mapped = error_class(message, error.status_code)
    mapped.__cause__ = error
    return mapped
