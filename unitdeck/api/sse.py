"""Server-Sent Events adapter.

Opens a long-lived GET against the backend and decodes the
``text/event-stream`` framing into ServerSentEvent values:

- ``event:`` sets the event name (default ``message``)
- ``data:`` lines accumulate, joined with ``\\n``
- ``id:`` and ``retry:`` are recorded
- lines starting with ``:`` are comments
- a blank line dispatches the pending event
"""

from __future__ import annotations

import logging
from collections.abc import AsyncGenerator, AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import Any

import httpx

from unitdeck.api.client import raise_for_response
from unitdeck.api.errors import ApiTimeoutError, ApiTransportError, StreamUnsupportedError
from unitdeck.constants.timeouts import API_CONNECT_TIMEOUT, STREAM_READ_TIMEOUT
from unitdeck.constants.values import SSE_CONTENT_TYPE, STREAM_UNSUPPORTED_MESSAGE

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ServerSentEvent:
    """One dispatched server-sent event."""

    event: str = "message"
    data: str = ""
    id: str | None = None
    retry: int | None = None


class _EventBuilder:
    """Accumulates fields until a blank line dispatches them."""

    def __init__(self) -> None:
        self._event: str | None = None
        self._data: list[str] = []
        self._id: str | None = None
        self._retry: int | None = None

    def feed(self, line: str) -> ServerSentEvent | None:
        if not line:
            return self._dispatch()
        if line.startswith(":"):
            return None

        field, _, value = line.partition(":")
        if value.startswith(" "):
            value = value[1:]

        if field == "event":
            self._event = value
        elif field == "data":
            self._data.append(value)
        elif field == "id":
            if "\0" not in value:
                self._id = value
        elif field == "retry":
            if value.isdigit():
                self._retry = int(value)
        else:
            logger.debug("Ignoring unknown SSE field %r", field)
        return None

    def _dispatch(self) -> ServerSentEvent | None:
        if self._event is None and not self._data:
            return None
        event = ServerSentEvent(
            event=self._event or "message",
            data="\n".join(self._data),
            id=self._id,
            retry=self._retry,
        )
        self._event = None
        self._data = []
        self._retry = None
        return event


async def iter_sse_events(lines: AsyncIterator[str]) -> AsyncIterator[ServerSentEvent]:
    """Decode an async iterator of text lines into events.

    A trailing event without its terminating blank line is dropped.
    """
    builder = _EventBuilder()
    async for line in lines:
        event = builder.feed(line.rstrip("\r"))
        if event is not None:
            yield event


async def _translate_errors(
    events: AsyncIterator[ServerSentEvent], path: str
) -> AsyncGenerator[ServerSentEvent, None]:
    """Re-raise httpx read failures as ApiError while the stream is consumed."""
    try:
        async for event in events:
            yield event
    except httpx.TimeoutException as exc:
        raise ApiTimeoutError(f"Stream {path} timed out") from exc
    except httpx.TransportError as exc:
        raise ApiTransportError(f"Stream {path} failed: {exc}") from exc


class EventStreamClient:
    """Opens push streams over the shared ``httpx.AsyncClient``."""

    def __init__(self, http_client: httpx.AsyncClient) -> None:
        self._http = http_client

    @asynccontextmanager
    async def open(
        self, path: str, params: dict[str, Any] | None = None
    ) -> AsyncIterator[AsyncGenerator[ServerSentEvent, None]]:
        """Open ``path`` as an event stream.

        Usage:
            async with client.open("/services/nginx/logs", {"lines": 100}) as events:
                async for event in events:
                    ...

        Leaving the block closes the connection.

        Raises:
            ApiResponseError: Non-2xx status.
            StreamUnsupportedError: The response is not ``text/event-stream``.
            ApiTransportError: Connection or read failure.
        """
        try:
            async with self._http.stream(
                "GET",
                path,
                params=params,
                headers={"Accept": SSE_CONTENT_TYPE, "Cache-Control": "no-cache"},
                timeout=httpx.Timeout(API_CONNECT_TIMEOUT, read=STREAM_READ_TIMEOUT),
            ) as response:
                if not response.is_success:
                    await response.aread()
                    raise_for_response(response)

                content_type = response.headers.get("content-type", "")
                if not content_type.startswith(SSE_CONTENT_TYPE):
                    raise StreamUnsupportedError(
                        f"{STREAM_UNSUPPORTED_MESSAGE} (got {content_type or 'no content type'})"
                    )

                logger.debug("Event stream opened: %s", response.request.url)
                yield _translate_errors(iter_sse_events(response.aiter_lines()), path)
        except httpx.TimeoutException as exc:
            raise ApiTimeoutError(f"Stream {path} timed out") from exc
        except httpx.TransportError as exc:
            raise ApiTransportError(f"Stream {path} failed: {exc}") from exc
        finally:
            logger.debug("Event stream closed: %s", path)


__all__ = [
    "EventStreamClient",
    "ServerSentEvent",
    "iter_sse_events",
]
