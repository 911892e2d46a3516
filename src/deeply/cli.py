# SPDX-License-Identifier: Apache-2.0
"""
DeepLy - CLI Tool

Command line access to the DeepL translation API.

Usage:
    deeply <command> [options]

Examples:
    deeply translate "Hello world" -t DE             # English -> German
    deeply translate --file notes.txt -t FR -s EN
    deeply detect "Wie geht es dir?"
    deeply usage
    deeply languages --type target
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import os
import sys
from pathlib import Path
from typing import NoReturn

from deeply import __version__
from deeply.client import DeepLyClient, TranslationOptions
from deeply.errors import DeeplyError
from deeply.languages import LanguageCode

logger = logging.getLogger(__name__)

API_KEY_ENV_VAR = "DEEPL_API_KEY"


def parse_args() -> argparse.Namespace:
    """Parse command line arguments.

    Returns:
        Parsed argument Namespace.
    """
    parser = argparse.ArgumentParser(
        prog="deeply",
        description="DeepLy - Translate text with the DeepL API",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Examples:
  %(prog)s translate "Hello" -t DE               # Translate to German
  %(prog)s translate --file notes.txt -t FR      # Translate a text file
  %(prog)s detect "Bonjour"                      # Detect the language
  %(prog)s usage                                 # Show character usage
  %(prog)s languages --type target               # List target languages

Environment Variables:
  {API_KEY_ENV_VAR}    DeepL API key (keys ending in ":fx" use the free endpoint)
""",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--api-key",
        help=f"DeepL API key (or set {API_KEY_ENV_VAR})",
    )
    parser.add_argument(
        "--api-url",
        help="DeepL API base URL (default: chosen from the key)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    # translate
    translate_parser = subparsers.add_parser("translate", help="Translate text")
    translate_parser.add_argument(
        "text",
        nargs="?",
        help="Text to translate (omit when using --file)",
    )
    translate_parser.add_argument(
        "-f",
        "--file",
        type=Path,
        help="Translate the contents of a UTF-8 text file",
    )
    translate_parser.add_argument(
        "-t",
        "--target",
        default=LanguageCode.EN.value,
        help="Target language code (default: EN)",
    )
    translate_parser.add_argument(
        "-s",
        "--source",
        default=LanguageCode.AUTO.value,
        help="Source language code (default: auto)",
    )
    translate_parser.add_argument(
        "--formality",
        default="default",
        choices=sorted(TranslationOptions.FORMALITY_VALUES),
        help="Formality of the translation (default: default)",
    )
    translate_parser.add_argument(
        "--split-sentences",
        default="1",
        choices=sorted(TranslationOptions.SPLIT_SENTENCES_VALUES),
        help="Sentence splitting mode (default: 1)",
    )
    translate_parser.add_argument(
        "--preserve-formatting",
        action="store_true",
        help="Keep the original formatting",
    )
    translate_parser.add_argument(
        "--no-length-check",
        action="store_true",
        help="Do not reject texts longer than 30000 characters locally",
    )

    # detect
    detect_parser = subparsers.add_parser("detect", help="Detect the language of a text")
    detect_parser.add_argument("text", help="Text to analyze")

    # usage
    subparsers.add_parser("usage", help="Show character usage")

    # languages
    languages_parser = subparsers.add_parser("languages", help="List supported languages")
    languages_parser.add_argument(
        "--type",
        dest="direction",
        default="source",
        choices=["source", "target"],
        help="List source or target languages (default: source)",
    )

    args = parser.parse_args()

    if args.command == "translate" and (args.text is None) == (args.file is None):
        parser.error("translate needs either a text argument or --file")

    args.api_key = args.api_key or os.environ.get(API_KEY_ENV_VAR)
    if not args.api_key:
        parser.error(f"an API key is required (--api-key or {API_KEY_ENV_VAR})")

    return args


async def execute(client: DeepLyClient, args: argparse.Namespace) -> None:
    """Run the requested command and print its result."""
    if args.command == "translate":
        client.split_sentences(args.split_sentences)
        client.preserve_formatting(args.preserve_formatting)
        client.formality(args.formality)
        client.set_validate_text_length(not args.no_length_check)

        if args.file is not None:
            result = await client.translate_file(args.file, args.target, args.source)
        else:
            result = await client.translate(args.text, args.target, args.source)
        print(result if result is not None else "")

    elif args.command == "detect":
        code = await client.detect_language(args.text)
        print(f"{code} ({client.get_lang_name(code)})")

    elif args.command == "usage":
        usage = (await client.get_usage()).usage
        print(f"Characters: {usage.character_count} / {usage.character_limit}")
        print(f"Remaining: {usage.remaining}")

    elif args.command == "languages":
        bag = await client.get_supported_languages(args.direction)
        for language in bag:
            print(f"{language.language}\t{language.name}")


async def run(args: argparse.Namespace) -> int:
    """Execute the CLI command.

    Args:
        args: Command line arguments.

    Returns:
        Exit code (0: success, 1: failure).
    """
    async with DeepLyClient(args.api_key, api_url=args.api_url) as client:
        try:
            await execute(client, args)
        except DeeplyError as e:
            logger.debug("Command %s failed", args.command, exc_info=True)
            print(f"Error: {e}", file=sys.stderr)
            return 1

    return 0


def main() -> NoReturn:
    """Main entry point."""
    args = parse_args()

    # Configure logging
    log_level = logging.DEBUG if args.verbose else logging.WARNING
    logging.basicConfig(level=log_level, format="%(levelname)s: %(message)s")

    exit_code = asyncio.run(run(args))
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
