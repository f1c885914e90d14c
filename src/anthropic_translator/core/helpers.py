# SPDX-License-Identifier: Apache-2.0
"""Helpers for API endpoint, key selection and request headers."""

from __future__ import annotations

import random
import re

from anthropic_translator.core.errors import (
    ConfigurationError,
    missing_credentials_error,
)

_SCHEME_PATTERN = re.compile(r"^[a-z]+://", re.IGNORECASE)


def ensure_https_and_no_trailing_slash(url: str) -> str:
    """Normalize an API base URL.

    Prepends ``https://`` when the URL has no scheme and removes trailing
    slashes.

    Example:
        >>> ensure_https_and_no_trailing_slash("api.anthropic.com/")
        'https://api.anthropic.com'
    """
    if not _SCHEME_PATTERN.match(url):
        url = "https://" + url
    return url.rstrip("/")


def get_api_key(api_keys: str, rng: random.Random | None = None) -> str:
    """Pick one key uniformly at random from a comma-separated list.

    Surrounding whitespace is stripped from every key. Empty entries (a
    trailing comma, ",,") are skipped.

    Args:
        api_keys: Comma-separated API keys.
        rng: Random source (module-level ``random`` when omitted).

    Returns:
        One of the keys.

    Raises:
        ConfigurationError: If no key is configured.
    """
    keys = [k for k in (key.strip() for key in api_keys.split(",")) if k]
    if not keys:
        error = missing_credentials_error()
        raise ConfigurationError(error.message, kind=error.kind, detail=error.detail)
    return (rng or random).choice(keys)


def build_header(api_key: str, api_version: str) -> dict[str, str]:
    return {
        "Content-Type": "application/json",
        "x-api-key": api_key,
        "anthropic-version": api_version,
    }
