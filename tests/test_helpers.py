# SPDX-License-Identifier: Apache-2.0
"""Tests for endpoint, key selection and header helpers."""

from __future__ import annotations

import random

import pytest

from anthropic_translator.core.errors import ConfigurationError, ErrorKind
from anthropic_translator.core.helpers import (
    build_header,
    ensure_https_and_no_trailing_slash,
    get_api_key,
)


class TestEnsureHttpsAndNoTrailingSlash:
    """Tests for ensure_https_and_no_trailing_slash."""

    def test_adds_https_scheme(self) -> None:
        assert ensure_https_and_no_trailing_slash("api.anthropic.com") == (
            "https://api.anthropic.com"
        )

    def test_keeps_existing_scheme(self) -> None:
        assert ensure_https_and_no_trailing_slash("http://localhost:8080") == (
            "http://localhost:8080"
        )

    def test_scheme_detection_is_case_insensitive(self) -> None:
        assert ensure_https_and_no_trailing_slash("HTTPS://Example.com") == (
            "HTTPS://Example.com"
        )

    def test_removes_one_trailing_slash(self) -> None:
        assert ensure_https_and_no_trailing_slash("https://proxy.example.com/") == (
            "https://proxy.example.com"
        )

    def test_removes_repeated_trailing_slashes(self) -> None:
        assert ensure_https_and_no_trailing_slash("https://x.com//") == "https://x.com"

    @pytest.mark.parametrize(
        "url",
        [
            "api.anthropic.com",
            "api.anthropic.com/",
            "https://api.anthropic.com",
            "http://localhost:8080/",
            "proxy.example.com/anthropic/",
            "api.anthropic.com//",
            "https://x.com//",
        ],
    )
    def test_idempotent(self, url: str) -> None:
        """Applying twice equals applying once."""
        once = ensure_https_and_no_trailing_slash(url)
        assert ensure_https_and_no_trailing_slash(once) == once


class TestGetApiKey:
    """Tests for random key selection."""

    def test_single_key(self) -> None:
        assert get_api_key("sk-one") == "sk-one"

    def test_returns_trimmed_member(self) -> None:
        """Every pick is one of the listed keys, whitespace stripped."""
        keys = {"sk-a", "sk-b", "sk-c"}
        rng = random.Random(0)
        for _ in range(50):
            assert get_api_key(" sk-a , sk-b,sk-c ", rng) in keys

    def test_tolerates_trailing_comma(self) -> None:
        rng = random.Random(1)
        for _ in range(20):
            assert get_api_key("sk-a,sk-b,", rng) in {"sk-a", "sk-b"}

    def test_uses_given_rng(self) -> None:
        """Selection is delegated to the random source."""
        rng = random.Random()
        rng.choice = lambda seq: seq[-1]  # type: ignore[method-assign]
        assert get_api_key("sk-a,sk-b", rng) == "sk-b"

    @pytest.mark.parametrize(
        ("api_keys", "expected"),
        [
            ("sk-a, ", {"sk-a"}),
            ("sk-a,,sk-b", {"sk-a", "sk-b"}),
            (" , sk-a ,", {"sk-a"}),
        ],
    )
    def test_skips_empty_entries(self, api_keys: str, expected: set[str]) -> None:
        """An empty entry is never picked as a key."""
        for seed in range(20):
            assert get_api_key(api_keys, random.Random(seed)) in expected

    @pytest.mark.parametrize("api_keys", ["", ",", "  ", " , ,"])
    def test_no_keys_raises(self, api_keys: str) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            get_api_key(api_keys)
        assert exc_info.value.kind == ErrorKind.MISSING_CREDENTIALS


class TestBuildHeader:
    """Tests for build_header."""

    def test_header_fields(self) -> None:
        assert build_header("sk-test", "2023-06-01") == {
            "Content-Type": "application/json",
            "x-api-key": "sk-test",
            "anthropic-version": "2023-06-01",
        }
