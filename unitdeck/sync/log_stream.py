"""Log streams - one push connection exposed as an async iterator of LogRecord."""

from __future__ import annotations

import logging
from collections.abc import AsyncGenerator
from contextlib import AsyncExitStack
from dataclasses import dataclass, replace
from datetime import datetime
from urllib.parse import quote

from unitdeck.api.errors import StreamError
from unitdeck.api.sse import EventStreamClient, ServerSentEvent
from unitdeck.constants.enums import EntityKind
from unitdeck.constants.values import (
    SSE_EVENT_CLOSE,
    SSE_EVENT_ERROR,
    SSE_EVENT_HEARTBEAT,
    SSE_EVENT_OUTPUT,
    SSE_EVENT_SERVICE_LOG,
    STREAM_FAILED_MESSAGE,
)
from unitdeck.models.logs.log_record import LogRecord
from unitdeck.sync.log_parsing import parse_container_log, parse_service_log

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LogTarget:
    """The entity whose logs are tailed."""

    kind: EntityKind
    entity_id: str

    @classmethod
    def service(cls, name: str) -> LogTarget:
        return cls(EntityKind.SERVICE, name)

    @classmethod
    def container(cls, container_id: str) -> LogTarget:
        return cls(EntityKind.CONTAINER, container_id)

    def with_entity(self, entity_id: str) -> LogTarget:
        return replace(self, entity_id=entity_id)

    @property
    def path(self) -> str:
        entity = quote(self.entity_id, safe="@:")
        if self.kind is EntityKind.SERVICE:
            return f"/services/{entity}/logs"
        return f"/containers/{entity}/logs"

    @property
    def event_name(self) -> str:
        if self.kind is EntityKind.SERVICE:
            return SSE_EVENT_SERVICE_LOG
        return SSE_EVENT_OUTPUT

    def parse(self, payload: str) -> LogRecord:
        if self.kind is EntityKind.SERVICE:
            return parse_service_log(payload)
        return parse_container_log(payload)

    def download_filename(self, now: datetime) -> str:
        stamp = now.strftime("%Y-%m-%dT%H-%M-%S")
        safe_id = self.entity_id.replace("/", "_")
        if self.kind is EntityKind.SERVICE:
            return f"{safe_id}-logs-{stamp}.txt"
        return f"container-{safe_id}-logs-{stamp}.txt"


class LogStream:
    """Async iterator of LogRecord over one log event stream.

    The connection opens on first iteration. Iteration ends when the backend
    closes the stream, sends a ``close`` event, or ``aclose()`` is called.
    An ``error`` event raises StreamError; heartbeats are skipped.

    ``aclose()`` must be called from the consuming task (or after iteration
    has stopped); other tasks stop a stream by cancelling its consumer.
    """

    def __init__(self, client: EventStreamClient, target: LogTarget, lines: int) -> None:
        self._client = client
        self._target = target
        self._lines = lines
        self._stack: AsyncExitStack | None = None
        self._events: AsyncGenerator[ServerSentEvent, None] | None = None
        self._closed = False

    @property
    def target(self) -> LogTarget:
        return self._target

    @property
    def closed(self) -> bool:
        return self._closed

    def __aiter__(self) -> LogStream:
        return self

    async def __anext__(self) -> LogRecord:
        if self._closed:
            raise StopAsyncIteration
        if self._events is None:
            await self._connect()
        assert self._events is not None

        while True:
            try:
                event = await self._events.__anext__()
            except StopAsyncIteration:
                logger.info("Log stream for %s ended by backend", self._target.entity_id)
                await self.aclose()
                raise

            if event.event == self._target.event_name:
                return self._target.parse(event.data)
            if event.event == SSE_EVENT_HEARTBEAT:
                continue
            if event.event == SSE_EVENT_ERROR:
                await self.aclose()
                raise StreamError(event.data or STREAM_FAILED_MESSAGE)
            if event.event == SSE_EVENT_CLOSE:
                await self.aclose()
                raise StopAsyncIteration
            logger.debug("Ignoring %r event on %s", event.event, self._target.path)

    async def _connect(self) -> None:
        stack = AsyncExitStack()
        try:
            self._events = await stack.enter_async_context(
                self._client.open(self._target.path, {"lines": self._lines})
            )
        except BaseException:
            await stack.aclose()
            self._closed = True
            raise
        self._stack = stack
        logger.info(
            "Log stream opened for %s %s (lines=%s)",
            self._target.kind.value,
            self._target.entity_id,
            self._lines,
        )

    async def aclose(self) -> None:
        """Close the connection; further iteration ends immediately."""
        self._closed = True
        events, self._events = self._events, None
        stack, self._stack = self._stack, None
        if events is not None:
            await events.aclose()
        if stack is not None:
            await stack.aclose()


__all__ = [
    "LogStream",
    "LogTarget",
]
