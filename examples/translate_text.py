#!/usr/bin/env python3
# SPDX-License-Identifier: Apache-2.0
"""DeepLy sample script

Shows the basic use of the deeply client. Change the settings below to try
different options.

Usage:
    cd examples
    python translate_text.py

Environment variables (loaded from a .env file in the project root):
    DEEPL_API_KEY: required
"""

from __future__ import annotations

import asyncio
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

from deeply import DeepLyClient, DeeplyError, LanguageCode

PROJECT_ROOT = Path(__file__).parent.parent

load_dotenv(PROJECT_ROOT / ".env")


# =============================================================================
# Settings
# =============================================================================

TEXT = "The quick brown fox jumps over the lazy dog."

SOURCE_LANG = LanguageCode.AUTO
TARGET_LANG = LanguageCode.DE

# "default" | "more" | "less" | "prefer_more" | "prefer_less"
FORMALITY = "more"

# "1" (punctuation and newlines) | "nonewlines" | "0"
SPLIT_SENTENCES = "1"

PRESERVE_FORMATTING = True

# =============================================================================


async def main() -> int:
    api_key = os.environ.get("DEEPL_API_KEY")
    if not api_key:
        print("Error: DEEPL_API_KEY is not set", file=sys.stderr)
        return 1

    async with DeepLyClient(api_key) as client:
        client.split_sentences(SPLIT_SENTENCES).preserve_formatting(
            PRESERVE_FORMATTING
        ).formality(FORMALITY)

        try:
            translated = await client.translate(TEXT, TARGET_LANG, SOURCE_LANG)
            detected = client.last_translation.get_source_language()
            usage = (await client.get_usage()).usage
        except DeeplyError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1

    print(f"Source ({client.get_lang_name(detected)}): {TEXT}")
    print(f"Target ({client.get_lang_name(TARGET_LANG)}): {translated}")
    print(f"Usage: {usage.character_count} / {usage.character_limit} characters")
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
