# SPDX-License-Identifier: Apache-2.0
"""Prompt synthesis, request building, stream parsing and error normalization."""

from anthropic_translator.core.errors import ErrorKind, NormalizedError, normalize_error
from anthropic_translator.core.models import PromptPair, TranslateRequest, TranslationResult
from anthropic_translator.core.prompts import generate_prompts, synthesize
from anthropic_translator.core.request_builder import RequestOptions, build_request_body
from anthropic_translator.core.stream import StreamAccumulator

__all__ = [
    "ErrorKind",
    "NormalizedError",
    "PromptPair",
    "RequestOptions",
    "StreamAccumulator",
    "TranslateRequest",
    "TranslationResult",
    "build_request_body",
    "generate_prompts",
    "normalize_error",
    "synthesize",
]
