# SPDX-License-Identifier: Apache-2.0
"""
Anthropic Translator - CLI Tool

Translates or polishes text with the Anthropic Messages API.

Usage:
    translate-text <text> [options]

Examples:
    translate-text "Hello"                       # English -> Simplified Chinese
    translate-text "Hello" -s en -t ja --stream  # Stream the translation
    echo "Hello" | translate-text -              # Read text from stdin
    translate-text --validate                    # Check API keys
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from collections.abc import Mapping, Sequence
from typing import NoReturn, Optional

from dotenv import load_dotenv

from anthropic_translator.config import TranslatorConfig
from anthropic_translator.core.errors import NormalizedError, TranslatorError
from anthropic_translator.core.languages import LANGUAGES
from anthropic_translator.core.models import TranslateRequest, TranslationResult
from anthropic_translator.translators.anthropic import AnthropicTranslator

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command line arguments.

    Returns:
        Parsed argument Namespace.
    """
    parser = argparse.ArgumentParser(
        prog="translate-text",
        description="Text translation through the Anthropic Messages API",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s "Hello"                          # en -> zh-Hans
  %(prog)s "Hello" -s en -t ja              # English to Japanese
  %(prog)s "Hello" -s en -t en              # Polish mode
  %(prog)s "Hello" --stream                 # Print text as it arrives
  %(prog)s --validate                       # Validate API keys

Environment Variables (also read from .env):
  ANTHROPIC_API_KEYS      Comma-separated API keys (or ANTHROPIC_API_KEY)
  ANTHROPIC_API_URL       API base URL (default: https://api.anthropic.com)
  ANTHROPIC_API_VERSION   anthropic-version header
  ANTHROPIC_MODEL         Model identifier
  ANTHROPIC_MAX_TOKENS    Maximum output tokens
  ANTHROPIC_STREAM        "1" to stream responses
""",
    )

    parser.add_argument(
        "text",
        nargs="?",
        help='Text to translate ("-" reads from stdin)',
    )

    # Language options
    parser.add_argument(
        "-s",
        "--source",
        default="en",
        help="Source language code (default: en)",
    )
    parser.add_argument(
        "-t",
        "--target",
        default="zh-Hans",
        help="Target language code (default: zh-Hans)",
    )

    # API options
    api_group = parser.add_argument_group("API options")
    api_group.add_argument(
        "--api-key",
        help="API key(s), comma-separated (or set ANTHROPIC_API_KEYS)",
    )
    api_group.add_argument(
        "--api-url",
        help="API base URL",
    )
    api_group.add_argument(
        "--api-version",
        help="anthropic-version header value",
    )
    api_group.add_argument(
        "--model",
        help="Model identifier",
    )
    api_group.add_argument(
        "--max-tokens",
        help="Maximum output tokens",
    )
    api_group.add_argument(
        "--stream",
        action="store_true",
        help="Stream the response and print text as it arrives",
    )
    api_group.add_argument(
        "--timeout",
        type=float,
        help="Request timeout in seconds (default: 60)",
    )

    # Prompt options
    prompt_group = parser.add_argument_group("Prompt options")
    prompt_group.add_argument(
        "--system-prompt",
        help="Custom system prompt ($text, $sourceLang, $targetLang are substituted)",
    )
    prompt_group.add_argument(
        "--user-prompt",
        help="Custom user prompt ($text, $sourceLang, $targetLang are substituted)",
    )

    # Other actions
    parser.add_argument(
        "--validate",
        action="store_true",
        help="Validate API keys and endpoint, then exit",
    )
    parser.add_argument(
        "--list-languages",
        action="store_true",
        help="List supported language codes, then exit",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output",
    )

    return parser.parse_args(argv)


def build_config(
    args: argparse.Namespace,
    environ: Optional[Mapping[str, str]] = None,
) -> TranslatorConfig:
    """Create translator config from environment and CLI arguments.

    Command line options take precedence over environment variables.
    """
    return TranslatorConfig.from_env(
        environ,
        api_keys=args.api_key,
        api_url=args.api_url,
        api_version=args.api_version,
        model=args.model,
        max_tokens=args.max_tokens,
        stream="1" if args.stream else None,
        custom_system_prompt=args.system_prompt,
        custom_user_prompt=args.user_prompt,
        timeout=args.timeout,
    )


def read_text(args: argparse.Namespace) -> str:
    if args.text == "-":
        return sys.stdin.read()
    return args.text or ""


def print_error(error: NormalizedError, verbose: bool = False) -> None:
    print(f"Error: {error.message}", file=sys.stderr)
    if verbose and error.detail:
        print(f"  {error.detail}", file=sys.stderr)


class StreamPrinter:
    """Prints only the new suffix of cumulative stream results."""

    def __init__(self) -> None:
        self.printed = ""

    def __call__(self, result: TranslationResult) -> None:
        text = result.text
        if text.startswith(self.printed):
            sys.stdout.write(text[len(self.printed):])
        else:
            sys.stdout.write("\n" + text)
        sys.stdout.flush()
        self.printed = text


async def run(args: argparse.Namespace) -> int:
    """Execute the requested action.

    Args:
        args: Command line arguments.

    Returns:
        Exit code (0: success, 1: failure).
    """
    if args.list_languages:
        for code, name in LANGUAGES:
            print(f"{code}\t{name}")
        return 0

    try:
        config = build_config(args)
    except TranslatorError as e:
        print_error(e.error, args.verbose)
        return 1

    async with AnthropicTranslator(config) as translator:
        if args.validate:
            validation = await translator.validate()
            if validation.ok:
                print("OK")
                return 0
            if validation.error is not None:
                print_error(validation.error, args.verbose)
            return 1

        text = read_text(args)
        if not text.strip():
            print("Error: No text given", file=sys.stderr)
            return 1

        printer = StreamPrinter() if config.stream_enabled else None
        request = TranslateRequest(
            source_lang=args.source,
            target_lang=args.target,
            text=text,
            on_stream=printer,
            on_error=lambda error: logger.warning("%s", error.message),
        )
        completion = await translator.dispatch(request)

    if completion.error is not None:
        if printer is not None and printer.printed:
            print()
        print_error(completion.error, args.verbose)
        return 1

    if completion.result is None:
        return 1
    if printer is not None and printer.printed == completion.result.text:
        print()
    else:
        print(completion.result.text)
    return 0


def main() -> NoReturn:
    """Main entry point."""
    load_dotenv()
    args = parse_args()

    # Configure logging
    log_level = logging.DEBUG if args.verbose else logging.WARNING
    logging.basicConfig(level=log_level, format="%(levelname)s: %(message)s")

    if not args.text and not (args.validate or args.list_languages):
        print("Error: text is required (use - to read stdin)", file=sys.stderr)
        sys.exit(2)

    exit_code = asyncio.run(run(args))
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
