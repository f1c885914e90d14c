# SPDX-License-Identifier: Apache-2.0
"""Translate text through the Anthropic Messages API.

Usage:
    from anthropic_translator import AnthropicTranslator, TranslateRequest, TranslatorConfig

    config = TranslatorConfig(api_keys="sk-ant-...", stream="1")
    async with AnthropicTranslator(config) as translator:
        result = await translator.translate(TranslateRequest("en", "ja", "Hello"))
"""

from anthropic_translator.config import TranslatorConfig
from anthropic_translator.core.errors import (
    ConfigurationError,
    ErrorKind,
    NormalizedError,
    TranslationCancelledError,
    TranslationError,
    TranslatorError,
    normalize_error,
)
from anthropic_translator.core.models import (
    Completion,
    PromptPair,
    TranslateRequest,
    TranslationResult,
    ValidationResult,
)
from anthropic_translator.translators import AnthropicTranslator, TranslatorBackend

__version__ = "0.1.0"

__all__ = [
    "AnthropicTranslator",
    "Completion",
    "ConfigurationError",
    "ErrorKind",
    "NormalizedError",
    "PromptPair",
    "TranslateRequest",
    "TranslationCancelledError",
    "TranslationError",
    "TranslationResult",
    "TranslatorBackend",
    "TranslatorConfig",
    "TranslatorError",
    "ValidationResult",
    "normalize_error",
]
