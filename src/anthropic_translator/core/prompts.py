# SPDX-License-Identifier: Apache-2.0
"""Prompt synthesis for translate and polish requests."""

from __future__ import annotations

import re
from typing import Optional

from anthropic_translator.core.languages import (
    CANTONESE,
    CHINESE_SOURCES,
    CLASSICAL_CHINESE,
    MODERN_CHINESE,
    SIMPLIFIED_CHINESE,
    TRADITIONAL_CHINESE,
    get_language_name,
)
from anthropic_translator.core.models import PromptPair, TranslateRequest

SYSTEM_PROMPT = (
    "You are a translation engine that can only translate text and cannot "
    "interpret it. Translate faithfully, keep the original formatting and "
    "return only the translated text without any explanations."
)

POLISH_SYSTEM_PROMPT = (
    "You are a text embellisher, you can only embellish the text, "
    "don't interpret it."
)

# Targets phrased in Chinese regardless of the source language
CHINESE_PHRASED_TARGETS = frozenset({CLASSICAL_CHINESE, CANTONESE})

# Vernacular rewrites when translating within the Chinese family
VERNACULAR_PROMPTS = {
    TRADITIONAL_CHINESE: "翻译成繁体白话文",
    SIMPLIFIED_CHINESE: "翻译成简体白话文",
    CANTONESE: "翻译成粤语白话文",
}

_KEYWORD_PATTERN = re.compile(r"\$(text|sourceLang|targetLang)")


def _instruction_for(source_lang: str, target_lang: str) -> tuple[str, str]:
    """Pick (system prompt, user instruction) for a language pair."""
    if source_lang == target_lang:
        if target_lang in MODERN_CHINESE:
            return POLISH_SYSTEM_PROMPT, "润色此句"
        return POLISH_SYSTEM_PROMPT, "polish this sentence"

    source_name = get_language_name(source_lang)
    target_name = get_language_name(target_lang)
    instruction = f"translate from {source_name} to {target_name}"

    if target_lang in CHINESE_PHRASED_TARGETS:
        instruction = f"翻译成{target_name}"

    if source_lang in CHINESE_SOURCES and target_lang in VERNACULAR_PROMPTS:
        instruction = VERNACULAR_PROMPTS[target_lang]

    return SYSTEM_PROMPT, instruction


def generate_prompts(request: TranslateRequest) -> PromptPair:
    """Generate the default prompt pair for a request.

    Identical source and target languages switch to polish mode; Chinese
    targets and intra-Chinese pairs get Chinese instructions. The source
    text is appended after the instruction.

    Args:
        request: Translate request.

    Returns:
        Fresh PromptPair.
    """
    system_prompt, instruction = _instruction_for(
        request.source_lang, request.target_lang
    )
    return PromptPair(
        system_prompt=system_prompt,
        user_prompt=f"{instruction}:\n\n{request.text}",
    )


def replace_prompt_keywords(
    template: Optional[str], request: TranslateRequest
) -> Optional[str]:
    """Substitute ``$text``, ``$sourceLang`` and ``$targetLang`` in a template.

    Every occurrence is replaced in a single pass, so placeholder-like
    sequences inside the substituted text are left alone.
    """
    if not template:
        return template

    values = {
        "text": request.text,
        "sourceLang": request.source_lang,
        "targetLang": request.target_lang,
    }
    return _KEYWORD_PATTERN.sub(lambda m: values[m.group(1)], template)


def synthesize(
    request: TranslateRequest,
    custom_system_prompt: Optional[str] = None,
    custom_user_prompt: Optional[str] = None,
) -> PromptPair:
    """Build the prompt pair, letting non-empty custom templates win."""
    generated = generate_prompts(request)
    system_prompt = replace_prompt_keywords(custom_system_prompt, request)
    user_prompt = replace_prompt_keywords(custom_user_prompt, request)
    return PromptPair(
        system_prompt=system_prompt or generated.system_prompt,
        user_prompt=user_prompt or generated.user_prompt,
    )
