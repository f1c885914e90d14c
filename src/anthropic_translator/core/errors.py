# SPDX-License-Identifier: Apache-2.0
"""Error taxonomy and normalization.

Every failure a translate call can hit (pre-flight checks, HTTP status
failures, provider error payloads, transport exceptions) is collapsed into a
single ``NormalizedError`` record before it reaches the host.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from http import HTTPStatus
from typing import Any, NoReturn


class ErrorKind(str, Enum):
    """Closed set of error kinds reported to the host."""

    MISSING_CREDENTIALS = "missingCredentials"
    UNSUPPORTED_LANGUAGE = "unsupportedLanguage"
    CLIENT_REQUEST = "clientRequest"
    PROVIDER_ERROR = "providerError"
    CONFIGURATION = "configuration"
    CANCELLED = "cancelled"
    UNKNOWN = "unknown"

    @classmethod
    def coerce(cls, value: Any) -> ErrorKind:
        """Convert a loose error tag into an ErrorKind.

        Accepts enum members, canonical values and the legacy plugin tags
        ("secretKey", "unsupportLanguage", "param", "api", "network").
        Anything unrecognized becomes UNKNOWN.
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return cls.UNKNOWN
        try:
            return cls(value)
        except ValueError:
            return _LEGACY_KINDS.get(value, cls.UNKNOWN)


_LEGACY_KINDS = {
    "secretKey": ErrorKind.MISSING_CREDENTIALS,
    "unsupportLanguage": ErrorKind.UNSUPPORTED_LANGUAGE,
    "param": ErrorKind.CLIENT_REQUEST,
    "api": ErrorKind.PROVIDER_ERROR,
    "network": ErrorKind.PROVIDER_ERROR,
}

UNKNOWN_ERROR_MESSAGE = "Unknown error"


@dataclass(frozen=True)
class NormalizedError:
    """Uniform error record handed to the host.

    Attributes:
        kind: Error category.
        message: Human-readable message.
        detail: Raw underlying diagnostic, when available.
    """

    kind: ErrorKind
    message: str
    detail: str | None = None

    def to_dict(self) -> dict[str, str]:
        """Serialize using the host's ``type``/``message``/``addition`` keys."""
        data = {"type": self.kind.value, "message": self.message}
        if self.detail is not None:
            data["addition"] = self.detail
        return data


@dataclass(frozen=True)
class HttpFailure:
    """A non-2xx HTTP response from the provider."""

    status: int
    body: str = ""
    headers: Mapping[str, str] = field(default_factory=dict)

    def to_json(self) -> str:
        """Serialize the raw response for use as error detail."""
        return json.dumps(
            {
                "response": {"statusCode": self.status, "headers": dict(self.headers)},
                "data": self.body,
            },
            ensure_ascii=False,
        )


def describe_status(status: int) -> str:
    """Look up a human-readable description for an HTTP status code."""
    try:
        return HTTPStatus(status).phrase
    except ValueError:
        return f"Unknown status {status}"


class TranslatorError(Exception):
    """Base exception for the translator package.

    Carries the ``NormalizedError`` that describes it, so that the boundary
    can report it without re-classifying.
    """

    default_kind = ErrorKind.UNKNOWN

    def __init__(
        self,
        message: str,
        kind: ErrorKind | None = None,
        detail: str | None = None,
    ) -> None:
        super().__init__(message)
        self.error = NormalizedError(kind or self.default_kind, message, detail)

    @property
    def kind(self) -> ErrorKind:
        return self.error.kind

    @property
    def detail(self) -> str | None:
        return self.error.detail


class ConfigurationError(TranslatorError):
    """Configuration error (missing API key, unsupported language, bad option).

    Raised before any network request is issued.
    """

    default_kind = ErrorKind.CONFIGURATION


class TranslationError(TranslatorError):
    """Error during translation (HTTP failure, provider error, network)."""

    default_kind = ErrorKind.PROVIDER_ERROR


class TranslationCancelledError(TranslatorError):
    """The caller cancelled the translation before it finished."""

    default_kind = ErrorKind.CANCELLED


_EXCEPTION_BY_KIND: dict[ErrorKind, type[TranslatorError]] = {
    ErrorKind.MISSING_CREDENTIALS: ConfigurationError,
    ErrorKind.UNSUPPORTED_LANGUAGE: ConfigurationError,
    ErrorKind.CONFIGURATION: ConfigurationError,
    ErrorKind.CLIENT_REQUEST: TranslationError,
    ErrorKind.PROVIDER_ERROR: TranslationError,
    ErrorKind.UNKNOWN: TranslationError,
    ErrorKind.CANCELLED: TranslationCancelledError,
}


def raise_for_error(error: NormalizedError) -> NoReturn:
    """Raise the TranslatorError subclass matching ``error.kind``."""
    exc_class = _EXCEPTION_BY_KIND[error.kind]
    raise exc_class(error.message, kind=error.kind, detail=error.detail)


def missing_credentials_error() -> NormalizedError:
    return NormalizedError(
        ErrorKind.MISSING_CREDENTIALS,
        "Configuration error - make sure valid API keys are set",
        "Set the API keys option (comma-separated for several keys)",
    )


def unsupported_language_error(lang_code: str) -> NormalizedError:
    return NormalizedError(
        ErrorKind.UNSUPPORTED_LANGUAGE,
        "Unsupported language",
        f"Language '{lang_code}' is not supported",
    )


def normalize_error(error: Any) -> NormalizedError:
    """Collapse any failure shape into a NormalizedError.

    Args:
        error: An ``HttpFailure``, a ``TranslatorError``, a ``NormalizedError``,
            a mapping with ``type``/``message``/``addition`` keys, or any other
            exception.

    Returns:
        The normalized error record.
    """
    if isinstance(error, NormalizedError):
        return error

    if isinstance(error, HttpFailure):
        kind = (
            ErrorKind.CLIENT_REQUEST
            if 400 <= error.status < 500
            else ErrorKind.PROVIDER_ERROR
        )
        return NormalizedError(
            kind,
            f"API response error - {describe_status(error.status)}",
            error.to_json(),
        )

    if isinstance(error, TranslatorError):
        return error.error

    if isinstance(error, Mapping):
        detail = error.get("addition")
        return NormalizedError(
            ErrorKind.coerce(error.get("type")),
            error.get("message") or UNKNOWN_ERROR_MESSAGE,
            None if detail is None else str(detail),
        )

    if isinstance(error, BaseException):
        return NormalizedError(
            ErrorKind.UNKNOWN,
            str(error) or UNKNOWN_ERROR_MESSAGE,
            repr(error),
        )

    return NormalizedError(ErrorKind.UNKNOWN, UNKNOWN_ERROR_MESSAGE, repr(error))
