# SPDX-License-Identifier: Apache-2.0
"""Incremental parser for the Messages API event stream.

The provider sends records of two lines, ``event: <type>`` followed by
``data: <json>``. Only ``content_block_delta`` records carrying a
``text_delta`` contribute text. Chunk boundaries from the transport are
arbitrary, so an incomplete trailing line is held back until the next chunk
(or ``finish()``) completes it.

A malformed ``data:`` payload is reported through ``on_error`` and parsing
carries on with the next line: one stream can produce both error reports and
further accumulated text.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Iterable, Iterator
from typing import Optional

from anthropic_translator.core.errors import ErrorKind, NormalizedError
from anthropic_translator.core.models import ErrorCallback, ProviderEvent

logger = logging.getLogger(__name__)

EVENT_PREFIX = "event: "
DATA_PREFIX = "data: "

CONTENT_BLOCK_DELTA = "content_block_delta"
TEXT_DELTA = "text_delta"
ERROR_EVENT = "error"


class StreamAccumulator:
    """Reassembles streamed text deltas for one in-flight request.

    One instance per call; never share it between requests.

    Attributes:
        errors: Advisory errors reported so far.
    """

    def __init__(
        self,
        on_progress: Optional[Callable[[str], None]] = None,
        on_error: Optional[ErrorCallback] = None,
    ) -> None:
        """Initialize StreamAccumulator.

        Args:
            on_progress: Called with the whole accumulated text after every
                contributing delta.
            on_error: Called with advisory errors (malformed data, provider
                error events).
        """
        self._on_progress = on_progress
        self._on_error = on_error
        self._fragments: list[str] = []
        self._text = ""
        self._buffer = ""
        self._event_type = ""
        self._event_data = ""
        self.errors: list[NormalizedError] = []

    @property
    def text(self) -> str:
        """Accumulated text so far."""
        return self._text

    @property
    def fragments(self) -> tuple[str, ...]:
        return tuple(self._fragments)

    def feed(self, chunk: str) -> list[str]:
        """Process one raw chunk from the transport.

        Args:
            chunk: Decoded text as received; may end mid-line.

        Returns:
            Cumulative texts emitted while processing this chunk, in order.
        """
        data = self._buffer + chunk
        lines = data.split("\n")
        # The last element is incomplete unless the chunk ended with "\n"
        self._buffer = lines.pop()
        return self._process_lines(lines)

    def finish(self) -> str:
        """Flush any buffered line and return the final accumulated text."""
        if self._buffer:
            line, self._buffer = self._buffer, ""
            self._process_lines([line])
        return self._text

    def _process_lines(self, lines: Iterable[str]) -> list[str]:
        emitted: list[str] = []
        for event in self._iter_events(lines):
            text = self._handle_event(event)
            if text is not None:
                emitted.append(text)
                if self._on_progress is not None:
                    self._on_progress(text)
        return emitted

    def _iter_events(self, lines: Iterable[str]) -> Iterator[ProviderEvent]:
        for raw_line in lines:
            line = raw_line.rstrip("\r")
            if not line:
                # Blank line ends a record; drop a half-seen pair
                self._event_type = ""
                self._event_data = ""
                continue
            if line.startswith(EVENT_PREFIX):
                self._event_type = line[len(EVENT_PREFIX):].strip()
            elif line.startswith(DATA_PREFIX):
                self._event_data = line[len(DATA_PREFIX):].strip()
                # A record is complete only when data follows its event line
                if self._event_type and self._event_data:
                    event = ProviderEvent(self._event_type, self._event_data)
                    self._event_type = ""
                    self._event_data = ""
                    yield event

    def _handle_event(self, event: ProviderEvent) -> Optional[str]:
        """Apply one record; return the new accumulated text if it grew."""
        logger.debug("Processing event: %s", event.event_type)
        try:
            payload = json.loads(event.data)
        except json.JSONDecodeError as e:
            logger.warning("Error parsing event data: %s", e)
            self._report(
                NormalizedError(
                    ErrorKind.PROVIDER_ERROR,
                    f"Failed to parse stream event data: {e.msg}",
                    event.data,
                )
            )
            return None

        if not isinstance(payload, dict):
            return None

        if event.event_type == ERROR_EVENT:
            error = payload.get("error")
            message = error.get("message") if isinstance(error, dict) else None
            self._report(
                NormalizedError(
                    ErrorKind.PROVIDER_ERROR,
                    message or "Provider reported a stream error",
                    event.data,
                )
            )
            return None

        if event.event_type != CONTENT_BLOCK_DELTA:
            return None

        delta = payload.get("delta")
        if not isinstance(delta, dict) or delta.get("type") != TEXT_DELTA:
            return None

        fragment = delta.get("text")
        if not fragment:
            return None

        self._fragments.append(fragment)
        self._text += fragment
        return self._text

    def _report(self, error: NormalizedError) -> None:
        self.errors.append(error)
        if self._on_error is not None:
            self._on_error(error)
