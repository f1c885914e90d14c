# SPDX-License-Identifier: Apache-2.0
"""Tests for request body building."""

from __future__ import annotations

import pytest

from anthropic_translator.core.errors import ConfigurationError, ErrorKind
from anthropic_translator.core.models import PromptPair, TranslateRequest
from anthropic_translator.core.prompts import synthesize
from anthropic_translator.core.request_builder import (
    RequestOptions,
    build_request_body,
    build_validation_body,
    parse_max_tokens,
)


class TestBuildRequestBody:
    """Tests for build_request_body."""

    def test_body_shape(self) -> None:
        prompts = PromptPair(system_prompt="sys", user_prompt="user")
        options = RequestOptions(model="claude-3", max_tokens="256", stream="1")
        assert build_request_body(prompts, options) == {
            "model": "claude-3",
            "max_tokens": 256,
            "messages": [{"role": "user", "content": "user"}],
            "system": "sys",
            "stream": True,
        }

    @pytest.mark.parametrize(("stream", "expected"), [("1", True), ("0", False), ("", False), ("true", False)])
    def test_stream_sentinel(self, stream: str, expected: bool) -> None:
        """Only the "1" sentinel enables streaming."""
        prompts = PromptPair(system_prompt="s", user_prompt="u")
        body = build_request_body(prompts, RequestOptions(model="m", stream=stream))
        assert body["stream"] is expected

    def test_end_to_end_translation_body(self) -> None:
        """Synthesized prompts flow into the body unchanged."""
        request = TranslateRequest(source_lang="en", target_lang="zh-Hans", text="Hello")
        options = RequestOptions(model="claude-3", max_tokens="1000", stream="0")
        body = build_request_body(synthesize(request), options)

        assert body["model"] == "claude-3"
        assert body["max_tokens"] == 1000
        assert body["stream"] is False
        content = body["messages"][0]["content"]
        assert content.startswith("translate from English to Chinese (Simplified):")
        assert content.endswith("Hello")

    def test_invalid_max_tokens_raises(self) -> None:
        """A non-integer max tokens value is a configuration error."""
        prompts = PromptPair(system_prompt="s", user_prompt="u")
        with pytest.raises(ConfigurationError) as exc_info:
            build_request_body(prompts, RequestOptions(model="m", max_tokens="lots"))
        assert exc_info.value.kind == ErrorKind.CONFIGURATION


class TestParseMaxTokens:
    """Tests for parse_max_tokens."""

    @pytest.mark.parametrize(("value", "expected"), [("1000", 1000), (" 64 ", 64), (512, 512)])
    def test_valid(self, value: str | int, expected: int) -> None:
        assert parse_max_tokens(value) == expected

    @pytest.mark.parametrize("value", ["", "1.5", "abc", True])
    def test_invalid(self, value: str | bool) -> None:
        with pytest.raises(ConfigurationError):
            parse_max_tokens(value)


class TestBuildValidationBody:
    """Tests for build_validation_body."""

    def test_minimal_request(self) -> None:
        assert build_validation_body("claude-3") == {
            "model": "claude-3",
            "max_tokens": 1,
            "messages": [{"role": "user", "content": "Hello"}],
            "stream": False,
        }
