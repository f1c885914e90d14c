# SPDX-License-Identifier: Apache-2.0
"""Data models shared by prompt synthesis, streaming and the translator."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Protocol, runtime_checkable

if TYPE_CHECKING:
    from anthropic_translator.core.errors import NormalizedError


@runtime_checkable
class ProgressCallback(Protocol):
    """Receives cumulative partial results while a stream is in flight."""

    def __call__(self, result: TranslationResult) -> None: ...


@runtime_checkable
class CompletionCallback(Protocol):
    """Receives the single terminal outcome of a translate call."""

    def __call__(self, completion: Completion) -> None: ...


@runtime_checkable
class ErrorCallback(Protocol):
    """Receives advisory, non-terminal errors."""

    def __call__(self, error: NormalizedError) -> None: ...


@dataclass
class TranslateRequest:
    """A single translate call.

    Owned by one call; discarded once its terminal outcome is delivered.

    Attributes:
        source_lang: Source language code ("en", "zh-Hans", ...).
        target_lang: Target language code.
        text: Text to translate.
        on_stream: Progress sink for streaming responses.
        on_completion: Sink for the single terminal outcome.
        on_error: Sink for advisory errors (malformed stream records).
        cancel_event: Set by the caller to stop processing cooperatively.
    """

    source_lang: str
    target_lang: str
    text: str
    on_stream: Optional[ProgressCallback] = None
    on_completion: Optional[CompletionCallback] = None
    on_error: Optional[ErrorCallback] = None
    cancel_event: Optional[asyncio.Event] = None

    @property
    def is_cancelled(self) -> bool:
        return self.cancel_event is not None and self.cancel_event.is_set()


@dataclass(frozen=True)
class PromptPair:
    """System and user prompt produced for one request."""

    system_prompt: str
    user_prompt: str


@dataclass(frozen=True)
class TranslationResult:
    """Translated text split into paragraphs."""

    source_lang: str
    target_lang: str
    paragraphs: tuple[str, ...]

    @property
    def text(self) -> str:
        return "\n".join(self.paragraphs)


@dataclass(frozen=True)
class ProviderEvent:
    """One ``event:``/``data:`` record from the streaming protocol."""

    event_type: str
    data: str


@dataclass(frozen=True)
class Completion:
    """Terminal outcome of a translate call: a result or an error."""

    result: Optional[TranslationResult] = None
    error: Optional[NormalizedError] = None

    def __post_init__(self) -> None:
        if (self.result is None) == (self.error is None):
            raise ValueError("Completion requires exactly one of result or error")

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of a credentials/endpoint validation call."""

    ok: bool
    error: Optional[NormalizedError] = None
