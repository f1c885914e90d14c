# SPDX-License-Identifier: Apache-2.0
"""Translation backend modules.

Usage:
    from anthropic_translator.translators import AnthropicTranslator
    translator = AnthropicTranslator(TranslatorConfig(api_keys="your-api-key"))
    result = await translator.translate(TranslateRequest("en", "ja", "Hello"))
"""

from anthropic_translator.translators.anthropic import AnthropicTranslator
from anthropic_translator.translators.base import TranslatorBackend

__all__ = [
    "AnthropicTranslator",
    "TranslatorBackend",
]
