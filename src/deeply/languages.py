# SPDX-License-Identifier: Apache-2.0
"""Language codes supported by the DeepL API.

The registry is a set of static tables. ``EN`` and ``PT`` are still accepted
as target languages but DeepL recommends the regional variants listed in
:data:`DEPRECATED_TARGET_ALIASES`.
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class LanguageCode(str, Enum):
    """Language code as sent to the API (ISO 639-1, optionally with region)."""

    AUTO = "auto"  # Let DeepL detect the language (source only)
    DE = "DE"
    EN = "EN"
    EN_GB = "EN-GB"
    EN_US = "EN-US"
    ES = "ES"
    FR = "FR"
    IT = "IT"
    JA = "JA"
    NL = "NL"
    PL = "PL"
    PT = "PT"
    PT_PT = "PT-PT"
    PT_BR = "PT-BR"
    RU = "RU"
    ZH = "ZH"


SOURCE_LANGUAGE_CODES: tuple[LanguageCode, ...] = (
    LanguageCode.AUTO,
    LanguageCode.DE,
    LanguageCode.EN,
    LanguageCode.ES,
    LanguageCode.FR,
    LanguageCode.IT,
    LanguageCode.JA,
    LanguageCode.NL,
    LanguageCode.PL,
    LanguageCode.PT,
    LanguageCode.RU,
    LanguageCode.ZH,
)

TARGET_LANGUAGE_CODES: tuple[LanguageCode, ...] = (
    LanguageCode.DE,
    LanguageCode.EN_GB,
    LanguageCode.EN_US,
    LanguageCode.EN,
    LanguageCode.ES,
    LanguageCode.FR,
    LanguageCode.IT,
    LanguageCode.JA,
    LanguageCode.NL,
    LanguageCode.PL,
    LanguageCode.PT,
    LanguageCode.PT_PT,
    LanguageCode.PT_BR,
    LanguageCode.RU,
    LanguageCode.ZH,
)

# Generic target codes and the regional variants that replace them
DEPRECATED_TARGET_ALIASES: dict[LanguageCode, tuple[LanguageCode, ...]] = {
    LanguageCode.EN: (LanguageCode.EN_GB, LanguageCode.EN_US),
    LanguageCode.PT: (LanguageCode.PT_PT, LanguageCode.PT_BR),
}

LANGUAGE_NAMES: dict[LanguageCode, str] = {
    LanguageCode.AUTO: "Auto",
    LanguageCode.DE: "German",
    LanguageCode.EN: "English",
    LanguageCode.EN_GB: "English (British)",
    LanguageCode.EN_US: "English (American)",
    LanguageCode.ES: "Spanish",
    LanguageCode.FR: "French",
    LanguageCode.IT: "Italian",
    LanguageCode.JA: "Japanese",
    LanguageCode.NL: "Dutch",
    LanguageCode.PL: "Polish",
    LanguageCode.PT: "Portuguese",
    LanguageCode.PT_PT: "Portuguese (European)",
    LanguageCode.PT_BR: "Portuguese (Brazilian)",
    LanguageCode.RU: "Russian",
    LanguageCode.ZH: "Chinese",
}

UNKNOWN_LANGUAGE_NAME = "UNKNOWN LANGUAGE CODE"

# Plain string values: Enum hashes by member name, not by value
_SOURCE_VALUES = frozenset(code.value for code in SOURCE_LANGUAGE_CODES)
_TARGET_VALUES = frozenset(code.value for code in TARGET_LANGUAGE_CODES)
_NAMES_BY_VALUE = {code.value: name for code, name in LANGUAGE_NAMES.items()}
_CODES_BY_NAME = {name: code for code, name in LANGUAGE_NAMES.items()}


def code_value(code: Any) -> str | None:
    """Return the wire value of a code, or None if it is not a string."""
    if isinstance(code, LanguageCode):
        return code.value
    if isinstance(code, str):
        return code
    return None


def is_valid_source(code: Any) -> bool:
    """Check whether ``code`` can be used as the source language."""
    return code_value(code) in _SOURCE_VALUES


def is_valid_target(code: Any) -> bool:
    """Check whether ``code`` can be used as the target language.

    The auto-detect sentinel is never a valid target.
    """
    return code_value(code) in _TARGET_VALUES


def display_name(code: Any) -> str:
    """Return the English name of a language code.

    Args:
        code: Language code, e.g. ``"DE"`` or ``LanguageCode.DE``.

    Returns:
        Language name, or :data:`UNKNOWN_LANGUAGE_NAME` for unknown codes.
    """
    return _NAMES_BY_VALUE.get(code_value(code), UNKNOWN_LANGUAGE_NAME)


def code_for_name(name: str) -> LanguageCode | None:
    """Look up a language code by its exact (case-sensitive) English name.

    Returns:
        The matching code, or None if no language has this name.
    """
    return _CODES_BY_NAME.get(name)


def source_codes() -> tuple[LanguageCode, ...]:
    """Return the source codes, auto-detect first."""
    return SOURCE_LANGUAGE_CODES


def target_codes() -> tuple[LanguageCode, ...]:
    """Return the target codes."""
    return TARGET_LANGUAGE_CODES
