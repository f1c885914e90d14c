# SPDX-License-Identifier: Apache-2.0
"""Anthropic Messages API translation backend."""

from __future__ import annotations

import asyncio
import codecs
import json
import logging
from collections.abc import AsyncIterator
from typing import Any, Optional

import aiohttp

from anthropic_translator.config import DEFAULT_API_URL, TranslatorConfig
from anthropic_translator.core import languages
from anthropic_translator.core.errors import (
    ErrorKind,
    HttpFailure,
    NormalizedError,
    TranslationCancelledError,
    TranslationError,
    TranslatorError,
    missing_credentials_error,
    normalize_error,
    raise_for_error,
    unsupported_language_error,
)
from anthropic_translator.core.helpers import (
    build_header,
    ensure_https_and_no_trailing_slash,
    get_api_key,
)
from anthropic_translator.core.models import (
    Completion,
    TranslateRequest,
    TranslationResult,
    ValidationResult,
)
from anthropic_translator.core.prompts import synthesize
from anthropic_translator.core.request_builder import (
    build_request_body,
    build_validation_body,
)
from anthropic_translator.core.stream import StreamAccumulator

logger = logging.getLogger(__name__)

MESSAGES_PATH = "/v1/messages"


class AnthropicTranslator:
    """Translation backend for the Anthropic Messages API.

    Builds prompts from the request languages, sends one request per
    translate call and reassembles either the JSON response or the event
    stream into a ``TranslationResult``.

    Attributes:
        name: Backend identifier ("anthropic").
    """

    def __init__(
        self,
        config: TranslatorConfig,
        session: Optional[aiohttp.ClientSession] = None,
    ) -> None:
        """Initialize AnthropicTranslator.

        Args:
            config: Translator configuration.
            session: Existing aiohttp session. When given, the caller keeps
                ownership and ``close()`` leaves it open.
        """
        self._config = config
        self._session = session
        self._owns_session = session is None

    @property
    def name(self) -> str:
        """Return backend name."""
        return "anthropic"

    @property
    def config(self) -> TranslatorConfig:
        return self._config

    @property
    def endpoint(self) -> str:
        """Full Messages API URL."""
        base_url = ensure_https_and_no_trailing_slash(
            self._config.api_url or DEFAULT_API_URL
        )
        return base_url + MESSAGES_PATH

    def supported_languages(self) -> list[str]:
        return languages.supported_languages()

    async def __aenter__(self) -> AnthropicTranslator:
        """Enter async context manager."""
        await self._ensure_session()
        return self

    async def __aexit__(self, *args: Any) -> None:
        """Exit async context manager."""
        await self.close()

    async def _ensure_session(self) -> aiohttp.ClientSession:
        """Ensure aiohttp session exists.

        Returns:
            Active aiohttp session.
        """
        if self._session is None:
            self._session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self._config.timeout)
            )
            self._owns_session = True
        return self._session

    def _check_request(self, request: TranslateRequest) -> None:
        """Pre-flight checks; nothing is sent when one fails.

        Raises:
            ConfigurationError: On unsupported target or missing API keys.
        """
        if not languages.is_supported(request.target_lang):
            raise_for_error(unsupported_language_error(request.target_lang))
        if not self._config.api_keys:
            raise_for_error(missing_credentials_error())

    def _headers(self) -> dict[str, str]:
        api_key = get_api_key(self._config.api_keys)
        return build_header(api_key, self._config.api_version)

    async def translate(self, request: TranslateRequest) -> TranslationResult:
        """Translate a request using the Messages API.

        Args:
            request: Translate request.

        Returns:
            Translated result.

        Raises:
            ConfigurationError: On pre-flight or request-body failure.
            TranslationError: On HTTP, provider or network failure.
            TranslationCancelledError: When ``request.cancel_event`` is set.
        """
        self._check_request(request)

        options = self._config.request_options
        prompts = synthesize(
            request, options.custom_system_prompt, options.custom_user_prompt
        )
        body = build_request_body(prompts, options)
        headers = self._headers()

        if request.is_cancelled:
            raise TranslationCancelledError("Translation cancelled")

        session = await self._ensure_session()
        logger.debug(
            "Sending request: model=%s, stream=%s, url=%s",
            body["model"],
            body["stream"],
            self.endpoint,
        )
        try:
            async with session.post(self.endpoint, json=body, headers=headers) as response:
                if response.status >= 400:
                    raise_for_error(await self._http_failure(response))
                if options.stream_enabled:
                    return await self._read_stream(request, response)
                return await self._read_response(request, response)
        except aiohttp.ClientError as e:
            raise TranslationError(
                f"Request failed: {e}", kind=ErrorKind.UNKNOWN, detail=repr(e)
            ) from e
        except asyncio.TimeoutError as e:
            raise TranslationError(
                f"Request timed out after {self._config.timeout}s",
                kind=ErrorKind.UNKNOWN,
                detail=repr(e),
            ) from e

    async def _http_failure(self, response: aiohttp.ClientResponse) -> NormalizedError:
        body = await response.text()
        logger.debug("HTTP %d from provider: %s", response.status, body)
        return normalize_error(
            HttpFailure(status=response.status, body=body, headers=dict(response.headers))
        )

    async def _read_response(
        self,
        request: TranslateRequest,
        response: aiohttp.ClientResponse,
    ) -> TranslationResult:
        raw = await response.text()
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise TranslationError(
                "Failed to parse API response", detail=raw
            ) from e

        if not isinstance(data, dict):
            raise TranslationError("Unexpected API response", detail=raw)

        error = data.get("error")
        if error:
            message = error.get("message") if isinstance(error, dict) else str(error)
            raise TranslationError(message or "API request failed", detail=raw)

        content = data.get("content")
        if not content:
            raise TranslationError("API returned no result", detail=raw)

        if not isinstance(content, list) or not isinstance(content[0], dict):
            raise TranslationError("Unexpected API response", detail=raw)

        target_text = (content[0].get("text") or "").strip()
        return TranslationResult(
            source_lang=request.source_lang,
            target_lang=request.target_lang,
            paragraphs=tuple(target_text.split("\n")),
        )

    async def _read_stream(
        self,
        request: TranslateRequest,
        response: aiohttp.ClientResponse,
    ) -> TranslationResult:
        def emit(text: str) -> None:
            if request.on_stream is not None and not request.is_cancelled:
                request.on_stream(self._result(request, text))

        accumulator = StreamAccumulator(on_progress=emit, on_error=request.on_error)
        decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")

        async for chunk in self._iter_chunks(response):
            if request.is_cancelled:
                logger.debug("Stream cancelled after %d fragments", len(accumulator.fragments))
                raise TranslationCancelledError("Translation cancelled")
            logger.debug("Received stream chunk: %d bytes", len(chunk))
            accumulator.feed(decoder.decode(chunk))

        if request.is_cancelled:
            raise TranslationCancelledError("Translation cancelled")
        accumulator.feed(decoder.decode(b"", final=True))
        text = accumulator.finish()
        logger.debug("Stream finished: %d characters", len(text))
        return self._result(request, text)

    async def _iter_chunks(self, response: aiohttp.ClientResponse) -> AsyncIterator[bytes]:
        async for chunk in response.content.iter_any():
            yield chunk

    @staticmethod
    def _result(request: TranslateRequest, text: str) -> TranslationResult:
        return TranslationResult(
            source_lang=request.source_lang,
            target_lang=request.target_lang,
            paragraphs=(text,),
        )

    async def dispatch(self, request: TranslateRequest) -> Completion:
        """Translate and deliver exactly one completion.

        The completion goes to ``request.on_completion`` (when set) and is
        also returned. Failures never escape as exceptions, except task
        cancellation.

        Args:
            request: Translate request.

        Returns:
            The delivered completion.
        """
        try:
            result = await self.translate(request)
            completion = Completion(result=result)
        except TranslatorError as e:
            completion = Completion(error=e.error)
        except Exception as e:
            logger.debug("Unexpected translation failure", exc_info=True)
            completion = Completion(error=normalize_error(e))

        if request.on_completion is not None:
            request.on_completion(completion)
        return completion

    async def validate(self) -> ValidationResult:
        """Send a minimal request to check the API keys and endpoint.

        Returns:
            ValidationResult; ``ok`` is True iff the provider returned
            non-empty content and no error.
        """
        try:
            if not self._config.api_keys:
                raise_for_error(missing_credentials_error())
            headers = self._headers()
            body = build_validation_body(self._config.model)
            session = await self._ensure_session()
            async with session.post(self.endpoint, json=body, headers=headers) as response:
                raw = await response.text()
                try:
                    data = json.loads(raw)
                except json.JSONDecodeError:
                    if response.status >= 400:
                        raise_for_error(
                            normalize_error(HttpFailure(status=response.status, body=raw))
                        )
                    raise TranslationError("Unexpected API response", detail=raw) from None
        except TranslatorError as e:
            return ValidationResult(ok=False, error=e.error)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            return ValidationResult(ok=False, error=normalize_error(e))

        error = data.get("error") if isinstance(data, dict) else None
        if error:
            message = error.get("message") if isinstance(error, dict) else None
            kind = ErrorKind.PROVIDER_ERROR
            if response.status >= 400:
                kind = normalize_error(HttpFailure(status=response.status, body=raw)).kind
            return ValidationResult(
                ok=False,
                error=NormalizedError(kind, message or "API request failed", raw),
            )
        if isinstance(data, dict) and data.get("content"):
            logger.info("Validation succeeded for model %s", self._config.model)
            return ValidationResult(ok=True)
        return ValidationResult(
            ok=False,
            error=NormalizedError(ErrorKind.PROVIDER_ERROR, "Unexpected API response", raw),
        )

    async def close(self) -> None:
        """Close the HTTP session if this translator created it."""
        if self._session is not None and self._owns_session:
            await self._session.close()
        self._session = None
