# SPDX-License-Identifier: Apache-2.0
"""Translator configuration."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Any, ClassVar, Optional

from anthropic_translator.core.errors import ConfigurationError
from anthropic_translator.core.request_builder import STREAM_ENABLED, RequestOptions

DEFAULT_API_URL = "https://api.anthropic.com"


@dataclass
class TranslatorConfig:
    """Options for the Anthropic translator.

    Mirrors the host's option surface, so numeric and boolean options keep
    their string form ("1024", "1") until the request body is built.

    Attributes:
        api_keys: Comma-separated API keys; one is picked per call.
        api_url: API base URL (scheme optional, trailing slash stripped).
        api_version: Value of the ``anthropic-version`` header.
        model: Model identifier.
        max_tokens: Maximum output tokens.
        stream: "1" enables streaming responses.
        custom_system_prompt: System prompt template overriding the default.
        custom_user_prompt: User prompt template overriding the default.
        timeout: Total request timeout in seconds.
    """

    api_keys: str = ""
    api_url: str = DEFAULT_API_URL
    api_version: str = "2023-06-01"
    model: str = "claude-3-5-sonnet-latest"
    max_tokens: str = "1024"
    stream: str = "0"
    custom_system_prompt: Optional[str] = None
    custom_user_prompt: Optional[str] = None
    timeout: float = 60.0

    # Environment variable names per field
    ENV_VARS: ClassVar[dict[str, str]] = {
        "api_keys": "ANTHROPIC_API_KEYS",
        "api_url": "ANTHROPIC_API_URL",
        "api_version": "ANTHROPIC_API_VERSION",
        "model": "ANTHROPIC_MODEL",
        "max_tokens": "ANTHROPIC_MAX_TOKENS",
        "stream": "ANTHROPIC_STREAM",
        "custom_system_prompt": "ANTHROPIC_SYSTEM_PROMPT",
        "custom_user_prompt": "ANTHROPIC_USER_PROMPT",
        "timeout": "ANTHROPIC_TIMEOUT",
    }

    # Single-key variable accepted when ANTHROPIC_API_KEYS is unset
    FALLBACK_API_KEY_ENV_VAR: ClassVar[str] = "ANTHROPIC_API_KEY"

    @classmethod
    def from_env(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        **overrides: Any,
    ) -> TranslatorConfig:
        """Build a config from environment variables.

        Args:
            environ: Mapping to read from (default: ``os.environ``).
            **overrides: Field values that win over the environment. ``None``
                values are ignored.

        Returns:
            New TranslatorConfig.
        """
        env = os.environ if environ is None else environ
        values: dict[str, Any] = {}
        for f in fields(cls):
            env_value = env.get(cls.ENV_VARS[f.name])
            if not env_value:
                continue
            if f.name == "timeout":
                try:
                    values[f.name] = float(env_value)
                except ValueError as e:
                    raise ConfigurationError(
                        f"Invalid timeout: {env_value!r}", detail=str(e)
                    ) from e
            else:
                values[f.name] = env_value

        if "api_keys" not in values and env.get(cls.FALLBACK_API_KEY_ENV_VAR):
            values["api_keys"] = env[cls.FALLBACK_API_KEY_ENV_VAR]

        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)

    @property
    def stream_enabled(self) -> bool:
        return self.stream == STREAM_ENABLED

    @property
    def request_options(self) -> RequestOptions:
        return RequestOptions(
            model=self.model,
            max_tokens=self.max_tokens,
            stream=self.stream,
            custom_system_prompt=self.custom_system_prompt,
            custom_user_prompt=self.custom_user_prompt,
        )
