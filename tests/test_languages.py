# SPDX-License-Identifier: Apache-2.0
"""Tests for the language table."""

from anthropic_translator.core.languages import (
    LANGUAGES,
    get_language_name,
    is_supported,
    supported_languages,
)


class TestLanguages:
    """Tests for language lookup."""

    def test_display_names(self) -> None:
        assert get_language_name("en") == "English"
        assert get_language_name("zh-Hans") == "Chinese (Simplified)"
        assert get_language_name("wyw") == "文言文"

    def test_unmapped_code_falls_back(self) -> None:
        assert get_language_name("tlh") == "tlh"

    def test_is_supported(self) -> None:
        assert is_supported("yue")
        assert not is_supported("tlh")

    def test_supported_languages_order(self) -> None:
        codes = supported_languages()
        assert codes == [code for code, _ in LANGUAGES]
        assert len(codes) == len(set(codes))
