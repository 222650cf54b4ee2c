"""Container exec session - run a command and stream its output."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from contextlib import suppress

from unitdeck.api.errors import ApiError
from unitdeck.api.sse import EventStreamClient
from unitdeck.constants.values import SSE_EVENT_DONE, SSE_EVENT_ERROR, SSE_EVENT_OUTPUT
from unitdeck.controllers.containers import ContainerController

logger = logging.getLogger(__name__)

EXEC_FAILED_MESSAGE = "Failed to execute command"


class ExecSession:
    """Runs commands in one container, one output stream at a time.

    Attributes:
        output: Output lines of the current command.
        is_running: True while the output stream is open.
        error: Message of the last failure, None on success.
    """

    def __init__(
        self,
        controller: ContainerController,
        stream_client: EventStreamClient,
        container_id: str,
        *,
        on_update: Callable[[ExecSession], None] | None = None,
    ) -> None:
        self._controller = controller
        self._client = stream_client
        self._container_id = container_id
        self._on_update = on_update

        self.output: list[str] = []
        self.is_running = False
        self.error: str | None = None

        self._task: asyncio.Task[None] | None = None
        self._generation = 0

    @property
    def container_id(self) -> str:
        return self._container_id

    async def execute(self, command: str) -> None:
        """Submit ``command`` and start streaming its output."""
        command = command.strip()
        if not self._container_id or not command:
            self.error = "Container ID and command are required"
            self._notify()
            return

        await self.cancel()
        self._generation += 1
        generation = self._generation
        self.output = []
        self.is_running = True
        self.error = None
        self._notify()

        logger.info("Executing %r in container %s", command, self._container_id)
        try:
            await self._controller.start_exec(self._container_id, command)
        except ApiError as exc:
            self._finish(generation, str(exc) or EXEC_FAILED_MESSAGE)
            return

        self._task = asyncio.create_task(
            self._consume(generation), name=f"exec:{self._container_id}"
        )

    async def cancel(self) -> None:
        """Close the output stream, keeping the output captured so far."""
        task, self._task = self._task, None
        self._generation += 1
        if task is not None and not task.done():
            task.cancel()
            with suppress(asyncio.CancelledError):
                await task
        if self.is_running:
            self.is_running = False
            self._notify()

    async def wait(self) -> None:
        """Wait until the current output stream finishes."""
        if self._task is not None:
            with suppress(asyncio.CancelledError):
                await self._task

    async def _consume(self, generation: int) -> None:
        path = self._controller.exec_output_path(self._container_id)
        try:
            async with self._client.open(path) as events:
                async for event in events:
                    if generation != self._generation:
                        return
                    if event.event == SSE_EVENT_OUTPUT:
                        self.output.append(event.data)
                        self._notify()
                    elif event.event == SSE_EVENT_ERROR:
                        self._finish(generation, event.data or EXEC_FAILED_MESSAGE)
                        return
                    elif event.event == SSE_EVENT_DONE:
                        self._finish(generation, None)
                        return
        except ApiError as exc:
            self._finish(generation, str(exc) or EXEC_FAILED_MESSAGE)
            return
        self._finish(generation, None)

    def _finish(self, generation: int, error: str | None) -> None:
        if generation != self._generation:
            return
        if error:
            logger.error("Exec in container %s failed: %s", self._container_id, error)
        self.is_running = False
        self.error = error
        self._notify()

    def _notify(self) -> None:
        if self._on_update is None:
            return
        try:
            self._on_update(self)
        except Exception:
            logger.exception("Exec update callback failed")


__all__ = ["ExecSession"]
