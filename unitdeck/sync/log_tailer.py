"""Log tailer - owns one log stream per entity and buffers its records.

State machine:
    IDLE -> STREAMING   start()
    STREAMING -> STOPPED   stop(), stream error, backend closed the stream
    STOPPED -> STREAMING   start(), clear_and_restart(), set_lines() while streaming

Each start() bumps a generation counter; records delivered by a superseded
connection are dropped, so at most one connection ever feeds the buffer.
A new connection is opened only once the superseded ones have closed.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from datetime import datetime
from pathlib import Path

from unitdeck.api.errors import ApiError
from unitdeck.api.sse import EventStreamClient
from unitdeck.constants.defaults import LOG_LINES_DEFAULT
from unitdeck.constants.enums import TailerState
from unitdeck.constants.values import STREAM_FAILED_MESSAGE
from unitdeck.models.logs.log_record import LogRecord
from unitdeck.models.state.subscription_state import SubscriptionState
from unitdeck.sync.log_parsing import serialize_records
from unitdeck.sync.log_stream import LogStream, LogTarget

logger = logging.getLogger(__name__)


class LogTailer:
    """Streams one entity's logs into an append-only buffer.

    Attributes:
        records: Records of the current session in arrival order.
        error: Human-readable message of the last connection failure.
    """

    def __init__(
        self,
        stream_client: EventStreamClient,
        target: LogTarget,
        *,
        lines: int = LOG_LINES_DEFAULT,
        on_update: Callable[[LogTailer], None] | None = None,
    ) -> None:
        self._client = stream_client
        self._target = target
        self._lines = lines
        self._on_update = on_update

        self.records: list[LogRecord] = []
        self.error: str | None = None

        self._state = TailerState.IDLE
        self._task: asyncio.Task[None] | None = None
        self._closing: set[asyncio.Task[None]] = set()
        self._generation = 0

    # =========================================================================
    # State
    # =========================================================================

    @property
    def target(self) -> LogTarget:
        return self._target

    @property
    def lines(self) -> int:
        return self._lines

    @property
    def state(self) -> TailerState:
        return self._state

    @property
    def is_streaming(self) -> bool:
        return self._state is TailerState.STREAMING

    @property
    def subscription_state(self) -> SubscriptionState:
        return SubscriptionState(is_active=self.is_streaming, last_error=self.error)

    # =========================================================================
    # Controls
    # =========================================================================

    def start(self, entity_id: str | None = None, lines: int | None = None) -> None:
        """Close the current connection, clear the buffer and open a new one."""
        if entity_id is not None and entity_id != self._target.entity_id:
            self._target = self._target.with_entity(entity_id)
        if lines is not None:
            self._lines = lines

        self._cancel_task()
        self._generation += 1
        self.records = []
        self.error = None
        self._state = TailerState.STREAMING
        self._task = asyncio.create_task(
            self._consume(self._generation),
            name=f"logs:{self._target.kind.value}:{self._target.entity_id}",
        )
        logger.info(
            "Tailing logs for %s %s (lines=%s)",
            self._target.kind.value,
            self._target.entity_id,
            self._lines,
        )
        self._notify()

    def stop(self) -> None:
        """Close the connection and keep the captured records."""
        self._cancel_task()
        self._generation += 1
        if self._state is TailerState.STREAMING:
            logger.info("Stopped tailing logs for %s", self._target.entity_id)
        self._state = TailerState.STOPPED
        self._notify()

    def clear_and_restart(self) -> None:
        """Manual refresh: drop the buffer and reconnect with current parameters."""
        self.records = []
        self.start()

    def set_lines(self, lines: int) -> None:
        """Change the requested history length.

        The buffer is cleared on every change. A streaming tailer reconnects
        with the new value; a stopped one only remembers it.
        """
        if lines == self._lines:
            return
        self._lines = lines
        if self.is_streaming:
            self.start()
            return
        self.records = []
        self._notify()

    async def aclose(self) -> None:
        """Dispose: close the connection unconditionally and wait for it."""
        self.stop()
        closing = list(self._closing)
        if closing:
            await asyncio.wait(closing)

    # =========================================================================
    # Buffer views
    # =========================================================================

    def filter(self, query: str) -> list[LogRecord]:
        """Records matching ``query``; the buffer itself is untouched."""
        if not query.strip():
            return list(self.records)
        return [record for record in self.records if record.matches(query.strip())]

    def serialize(self) -> str:
        return serialize_records(self.records)

    async def download(
        self, directory: Path | str = ".", *, now: datetime | None = None
    ) -> Path | None:
        """Write the buffer to ``<directory>/<entity>-logs-<timestamp>.txt``.

        File I/O runs in a worker thread.

        Returns:
            The written path, or None when there is nothing to download.

        Raises:
            OSError: The directory or the file could not be written.
        """
        if not self.records:
            logger.warning("No logs to download for %s", self._target.entity_id)
            return None

        path = Path(directory).expanduser() / self._target.download_filename(now or datetime.now())
        await asyncio.to_thread(_write_file, path, self.serialize())
        logger.info("Saved %d log records to %s", len(self.records), path)
        return path

    # =========================================================================
    # Internals
    # =========================================================================

    def _cancel_task(self) -> None:
        task, self._task = self._task, None
        if task is None or task.done():
            return
        task.cancel()
        self._closing.add(task)
        task.add_done_callback(self._closing.discard)

    async def _consume(self, generation: int) -> None:
        closing = [task for task in self._closing if task is not asyncio.current_task()]
        if closing:
            await asyncio.wait(closing)
        if generation != self._generation:
            return

        stream = LogStream(self._client, self._target, self._lines)
        try:
            async for record in stream:
                if generation != self._generation:
                    return
                self.records.append(record)
                self._notify()
        except ApiError as exc:
            self._fail(generation, str(exc) or STREAM_FAILED_MESSAGE)
            return
        except Exception:
            logger.exception("Log stream for %s crashed", self._target.entity_id)
            self._fail(generation, STREAM_FAILED_MESSAGE)
            return
        finally:
            await stream.aclose()

        if generation == self._generation:
            self._state = TailerState.STOPPED
            self._notify()

    def _fail(self, generation: int, message: str) -> None:
        if generation != self._generation:
            return
        logger.error("Log stream for %s failed: %s", self._target.entity_id, message)
        self._state = TailerState.STOPPED
        self.error = message
        self._notify()

    def _notify(self) -> None:
        if self._on_update is None:
            return
        try:
            self._on_update(self)
        except Exception:
            logger.exception("Log update callback failed")


def _write_file(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


__all__ = ["LogTailer"]
