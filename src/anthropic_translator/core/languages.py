# SPDX-License-Identifier: Apache-2.0
"""Supported languages and their display names used in prompts."""

from __future__ import annotations

AUTO = "auto"
SIMPLIFIED_CHINESE = "zh-Hans"
TRADITIONAL_CHINESE = "zh-Hant"
CLASSICAL_CHINESE = "wyw"
CANTONESE = "yue"

# (language code, display name) in the order offered to the host
LANGUAGES: list[tuple[str, str]] = [
    (AUTO, "auto"),
    (SIMPLIFIED_CHINESE, "Chinese (Simplified)"),
    (TRADITIONAL_CHINESE, "Chinese (Traditional)"),
    (CLASSICAL_CHINESE, "文言文"),
    (CANTONESE, "粤语"),
    ("en", "English"),
    ("ja", "Japanese"),
    ("ko", "Korean"),
    ("fr", "French"),
    ("de", "German"),
    ("es", "Spanish"),
    ("it", "Italian"),
    ("ru", "Russian"),
    ("pt", "Portuguese"),
    ("nl", "Dutch"),
    ("pl", "Polish"),
    ("ar", "Arabic"),
    ("af", "Afrikaans"),
    ("am", "Amharic"),
    ("az", "Azerbaijani"),
    ("be", "Belarusian"),
    ("bg", "Bulgarian"),
    ("bn", "Bengali"),
    ("bs", "Bosnian"),
    ("ca", "Catalan"),
    ("cs", "Czech"),
    ("cy", "Welsh"),
    ("da", "Danish"),
    ("el", "Greek"),
    ("et", "Estonian"),
    ("fa", "Persian"),
    ("fi", "Finnish"),
    ("ga", "Irish"),
    ("gl", "Galician"),
    ("gu", "Gujarati"),
    ("he", "Hebrew"),
    ("hi", "Hindi"),
    ("hr", "Croatian"),
    ("hu", "Hungarian"),
    ("hy", "Armenian"),
    ("id", "Indonesian"),
    ("is", "Icelandic"),
    ("ka", "Georgian"),
    ("kk", "Kazakh"),
    ("km", "Khmer"),
    ("kn", "Kannada"),
    ("lo", "Lao"),
    ("lt", "Lithuanian"),
    ("lv", "Latvian"),
    ("mk", "Macedonian"),
    ("ml", "Malayalam"),
    ("mn", "Mongolian"),
    ("mr", "Marathi"),
    ("ms", "Malay"),
    ("my", "Burmese"),
    ("ne", "Nepali"),
    ("no", "Norwegian"),
    ("pa", "Punjabi"),
    ("ro", "Romanian"),
    ("si", "Sinhala"),
    ("sk", "Slovak"),
    ("sl", "Slovenian"),
    ("sq", "Albanian"),
    ("sr", "Serbian"),
    ("sv", "Swedish"),
    ("sw", "Swahili"),
    ("ta", "Tamil"),
    ("te", "Telugu"),
    ("th", "Thai"),
    ("tl", "Tagalog"),
    ("tr", "Turkish"),
    ("uk", "Ukrainian"),
    ("ur", "Urdu"),
    ("uz", "Uzbek"),
    ("vi", "Vietnamese"),
]

LANGUAGE_NAMES: dict[str, str] = dict(LANGUAGES)

CHINESE_SOURCES = frozenset({CLASSICAL_CHINESE, SIMPLIFIED_CHINESE, TRADITIONAL_CHINESE})
MODERN_CHINESE = frozenset({SIMPLIFIED_CHINESE, TRADITIONAL_CHINESE})


def get_language_name(lang_code: str) -> str:
    """Convert language code to display name, falling back to the code."""
    return LANGUAGE_NAMES.get(lang_code, lang_code)


def is_supported(lang_code: str) -> bool:
    return lang_code in LANGUAGE_NAMES


def supported_languages() -> list[str]:
    """Return supported language codes in declaration order."""
    return [code for code, _ in LANGUAGES]
