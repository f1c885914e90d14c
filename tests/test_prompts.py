# SPDX-License-Identifier: Apache-2.0
"""Tests for prompt synthesis."""

from __future__ import annotations

import pytest

from anthropic_translator.core.models import PromptPair, TranslateRequest
from anthropic_translator.core.prompts import (
    POLISH_SYSTEM_PROMPT,
    SYSTEM_PROMPT,
    generate_prompts,
    replace_prompt_keywords,
    synthesize,
)


def make_request(source: str, target: str, text: str = "Hello") -> TranslateRequest:
    return TranslateRequest(source_lang=source, target_lang=target, text=text)


class TestGeneratePrompts:
    """Tests for default prompt generation."""

    def test_default_translation_prompt(self) -> None:
        """Plain pairs use the English instruction with display names."""
        prompts = generate_prompts(make_request("en", "zh-Hans"))
        assert prompts.system_prompt == SYSTEM_PROMPT
        assert prompts.user_prompt == (
            "translate from English to Chinese (Simplified):\n\nHello"
        )

    def test_unknown_code_falls_back_to_raw_code(self) -> None:
        """Unmapped language codes are used verbatim."""
        prompts = generate_prompts(make_request("xx", "ja"))
        assert prompts.user_prompt.startswith("translate from xx to Japanese:")

    @pytest.mark.parametrize(
        ("target", "instruction"),
        [("wyw", "翻译成文言文"), ("yue", "翻译成粤语")],
    )
    def test_classical_and_cantonese_targets(self, target: str, instruction: str) -> None:
        """Classical Chinese and Cantonese targets use the Chinese phrasing."""
        prompts = generate_prompts(make_request("en", target, "Good morning"))
        assert prompts.user_prompt == f"{instruction}:\n\nGood morning"

    @pytest.mark.parametrize(
        ("source", "target", "instruction"),
        [
            ("wyw", "zh-Hant", "翻译成繁体白话文"),
            ("wyw", "zh-Hans", "翻译成简体白话文"),
            ("zh-Hans", "zh-Hant", "翻译成繁体白话文"),
            ("zh-Hant", "zh-Hans", "翻译成简体白话文"),
            ("zh-Hans", "yue", "翻译成粤语白话文"),
            ("zh-Hant", "yue", "翻译成粤语白话文"),
        ],
    )
    def test_chinese_family_sources(self, source: str, target: str, instruction: str) -> None:
        """Chinese-family sources get vernacular instructions by target."""
        prompts = generate_prompts(make_request(source, target, "学而时习之"))
        assert prompts.user_prompt == f"{instruction}:\n\n学而时习之"

    def test_chinese_source_to_classical_keeps_target_phrasing(self) -> None:
        """No vernacular rule exists for a Classical Chinese target."""
        prompts = generate_prompts(make_request("zh-Hans", "wyw", "你好"))
        assert prompts.user_prompt == "翻译成文言文:\n\n你好"

    def test_chinese_source_to_other_language(self) -> None:
        """Chinese sources to non-Chinese targets use the default instruction."""
        prompts = generate_prompts(make_request("zh-Hans", "en", "你好"))
        assert prompts.user_prompt == (
            "translate from Chinese (Simplified) to English:\n\n你好"
        )

    @pytest.mark.parametrize("lang", ["zh-Hans", "zh-Hant"])
    def test_polish_mode_chinese(self, lang: str) -> None:
        """Identical Chinese languages polish with the Chinese instruction."""
        prompts = generate_prompts(make_request(lang, lang, "你好"))
        assert prompts.system_prompt == POLISH_SYSTEM_PROMPT
        assert prompts.user_prompt == "润色此句:\n\n你好"

    @pytest.mark.parametrize("lang", ["en", "ja", "wyw", "yue", "fr"])
    def test_polish_mode_other_languages(self, lang: str) -> None:
        """Identical non-modern-Chinese languages polish in English."""
        prompts = generate_prompts(make_request(lang, lang))
        assert prompts.system_prompt == POLISH_SYSTEM_PROMPT
        assert prompts.user_prompt == "polish this sentence:\n\nHello"

    def test_pure(self) -> None:
        """Same input gives equal but distinct outputs."""
        request = make_request("en", "ja")
        first = generate_prompts(request)
        second = generate_prompts(request)
        assert first == second
        assert first is not second
        assert request.text == "Hello"


class TestReplacePromptKeywords:
    """Tests for placeholder substitution in custom templates."""

    def test_replaces_all_placeholders(self) -> None:
        """Each placeholder kind is substituted."""
        request = make_request("en", "ja", "Hi")
        result = replace_prompt_keywords(
            "From $sourceLang to $targetLang: $text", request
        )
        assert result == "From en to ja: Hi"

    def test_replaces_every_occurrence(self) -> None:
        """Repeated placeholders are all substituted, not only the first."""
        request = make_request("en", "ja", "Hi")
        result = replace_prompt_keywords(
            "$text/$text $sourceLang $sourceLang $targetLang$targetLang", request
        )
        assert result == "Hi/Hi en en jaja"

    def test_substituted_text_is_not_rescanned(self) -> None:
        """Placeholders inside the source text stay literal."""
        request = make_request("en", "ja", "costs $targetLang")
        result = replace_prompt_keywords("$text", request)
        assert result == "costs $targetLang"

    @pytest.mark.parametrize("template", [None, ""])
    def test_empty_template_passes_through(self, template: str | None) -> None:
        """Missing templates are returned unchanged."""
        assert replace_prompt_keywords(template, make_request("en", "ja")) == template


class TestSynthesize:
    """Tests for override precedence."""

    def test_without_overrides_matches_generated(self) -> None:
        request = make_request("en", "ja")
        assert synthesize(request) == generate_prompts(request)

    def test_overrides_win_over_every_rule(self) -> None:
        """Custom templates replace the generated prompts, even in polish mode."""
        request = make_request("zh-Hans", "zh-Hans", "你好")
        prompts = synthesize(
            request,
            custom_system_prompt="Act as $targetLang editor",
            custom_user_prompt="Fix: $text",
        )
        assert prompts == PromptPair(
            system_prompt="Act as zh-Hans editor",
            user_prompt="Fix: 你好",
        )

    def test_only_user_override(self) -> None:
        """An override for one prompt leaves the other generated."""
        prompts = synthesize(make_request("en", "ja"), custom_user_prompt="$text")
        assert prompts.system_prompt == SYSTEM_PROMPT
        assert prompts.user_prompt == "Hello"

    def test_empty_override_falls_back(self) -> None:
        """Empty templates do not override."""
        request = make_request("en", "ja")
        prompts = synthesize(request, custom_system_prompt="", custom_user_prompt="")
        assert prompts == generate_prompts(request)
