# SPDX-License-Identifier: Apache-2.0
"""Protocol for translation backends."""

from typing import Protocol, runtime_checkable

from anthropic_translator.core.models import (
    Completion,
    TranslateRequest,
    TranslationResult,
    ValidationResult,
)


@runtime_checkable
class TranslatorBackend(Protocol):
    """Protocol definition for translation backends.

    All translator implementations must conform to this protocol.
    """

    @property
    def name(self) -> str:
        """Backend name ("anthropic")."""
        ...

    def supported_languages(self) -> list[str]:
        """Language codes accepted as translation targets."""
        ...

    async def translate(self, request: TranslateRequest) -> TranslationResult:
        """Translate a request.

        Args:
            request: Translate request.

        Returns:
            Translated result.

        Raises:
            TranslatorError: On any failure.
        """
        ...

    async def dispatch(self, request: TranslateRequest) -> Completion:
        """Translate and deliver exactly one completion to the request."""
        ...

    async def validate(self) -> ValidationResult:
        """Check that credentials and endpoint are usable."""
        ...

    async def close(self) -> None: ...
