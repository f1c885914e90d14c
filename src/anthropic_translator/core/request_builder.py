# SPDX-License-Identifier: Apache-2.0
"""Messages API request bodies."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Union

from anthropic_translator.core.errors import ConfigurationError, ErrorKind
from anthropic_translator.core.models import PromptPair

STREAM_ENABLED = "1"


@dataclass(frozen=True)
class RequestOptions:
    """Request options supplied by the host, read-only to the builder.

    Attributes:
        model: Model identifier.
        max_tokens: Maximum output tokens, as an int or integer string.
        stream: "1" enables streaming.
        custom_system_prompt: Optional system prompt template.
        custom_user_prompt: Optional user prompt template.
    """

    model: str
    max_tokens: Union[str, int] = "1024"
    stream: str = "0"
    custom_system_prompt: Optional[str] = None
    custom_user_prompt: Optional[str] = None

    @property
    def stream_enabled(self) -> bool:
        return self.stream == STREAM_ENABLED


def parse_max_tokens(value: Union[str, int]) -> int:
    """Parse the max-tokens option.

    Raises:
        ConfigurationError: If the value is not an integer.
    """
    if isinstance(value, bool):
        raise ConfigurationError(
            f"Invalid max tokens: {value!r}", kind=ErrorKind.CONFIGURATION
        )
    try:
        return int(str(value).strip())
    except ValueError as e:
        raise ConfigurationError(
            f"Invalid max tokens: {value!r}",
            kind=ErrorKind.CONFIGURATION,
            detail=str(e),
        ) from e


def build_request_body(prompts: PromptPair, options: RequestOptions) -> dict[str, Any]:
    """Combine a prompt pair and request options into the wire body."""
    return {
        "model": options.model,
        "max_tokens": parse_max_tokens(options.max_tokens),
        "messages": [
            {
                "role": "user",
                "content": prompts.user_prompt,
            }
        ],
        "system": prompts.system_prompt,
        "stream": options.stream_enabled,
    }


def build_validation_body(model: str) -> dict[str, Any]:
    """Smallest possible request used to check credentials and endpoint."""
    return {
        "model": model,
        "max_tokens": 1,
        "messages": [
            {
                "role": "user",
                "content": "Hello",
            }
        ],
        "stream": False,
    }
