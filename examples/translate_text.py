#!/usr/bin/env python3
# SPDX-License-Identifier: Apache-2.0
"""Text translation sample script.

Shows basic library usage: a non-streaming translation, a streaming one
with progress output, and polish mode.

Usage:
    cd examples
    python translate_text.py

Environment variables (loaded from .env):
    ANTHROPIC_API_KEYS: Comma-separated API keys
    ANTHROPIC_MODEL: Model identifier
"""

from __future__ import annotations

import asyncio
from pathlib import Path

from dotenv import load_dotenv

from anthropic_translator import (
    AnthropicTranslator,
    TranslateRequest,
    TranslationResult,
    TranslatorConfig,
)

PROJECT_ROOT = Path(__file__).parent.parent

# Load .env file from project root
load_dotenv(PROJECT_ROOT / ".env")


# =============================================================================
# Settings
# =============================================================================

SOURCE_LANG = "en"
TARGET_LANG = "zh-Hans"
TEXT = "The quick brown fox jumps over the lazy dog."


async def main() -> None:
    config = TranslatorConfig.from_env()

    async with AnthropicTranslator(config) as translator:
        validation = await translator.validate()
        if validation.error is not None:
            print(f"Validation failed: {validation.error.message}")
            return

        # Non-streaming
        result = await translator.translate(
            TranslateRequest(SOURCE_LANG, TARGET_LANG, TEXT)
        )
        print(f"Translation: {result.text}")

    # Streaming: progress carries the whole text so far
    def on_stream(partial: TranslationResult) -> None:
        print(f"  ... {partial.text}")

    config = TranslatorConfig.from_env(stream="1")
    async with AnthropicTranslator(config) as translator:
        completion = await translator.dispatch(
            TranslateRequest(SOURCE_LANG, "ja", TEXT, on_stream=on_stream)
        )
        if completion.result is not None:
            print(f"Streamed: {completion.result.text}")
        elif completion.error is not None:
            print(f"Error: {completion.error.message}")

        # Polish mode: same source and target
        polished = await translator.translate(TranslateRequest("en", "en", TEXT))
        print(f"Polished: {polished.text}")


if __name__ == "__main__":
    asyncio.run(main())
