"""WorkerMixin - Worker lifecycle and loading state for screens.

Screens run one-shot backend calls (lifecycle actions, manual refreshes,
downloads) as Textual workers so the UI stays responsive. This mixin:

- starts workers with errors contained (``exit_on_error=False``)
- cancels every worker when the screen is unmounted
- logs worker outcomes with their duration
- drives the ``#loading-text`` status line from the ``is_loading`` and
  ``error`` reactives
"""

from __future__ import annotations

import logging
import time
from collections.abc import Awaitable, Callable
from contextlib import suppress
from typing import Any

from rich.markup import escape
from textual._context import NoActiveAppError
from textual.css.query import NoMatches, WrongType
from textual.reactive import reactive
from textual.widgets import Static
from textual.worker import Worker, WorkerState

logger = logging.getLogger(__name__)


class WorkerMixin:
    """Mixin providing standardized Worker lifecycle management.

    Usage:
        ```python
        class MyScreen(WorkerMixin, Screen):
            def action_start(self) -> None:
                self.start_worker(self._start_selected, name="start")
        ```

    Screens using this mixin compose a ``Static`` with id ``loading-text``.
    """

    is_loading = reactive(False)
    error = reactive[str | None](None)
    loading_duration_ms = reactive(0.0, init=False)

    def __init__(self) -> None:
        super().__init__()
        self._worker_started_at: dict[str, float] = {}

    def watch_is_loading(self, loading: bool) -> None:
        if loading:
            self.show_loading_overlay()
        elif not self.error:
            self.hide_loading_overlay()

    def watch_error(self, error: str | None) -> None:
        if error:
            self.show_error_state(error)
        elif not self.is_loading:
            self.hide_loading_overlay()

    def start_worker(
        self,
        worker_func: Callable[..., Awaitable[Any]],
        *,
        exclusive: bool = False,
        name: str | None = None,
        group: str = "default",
    ) -> Worker[Any]:
        """Run ``worker_func`` on the event loop.

        Args:
            worker_func: Async callable to run.
            exclusive: Cancel the workers of ``group`` first.
            name: Worker name, used in logs.
            group: Worker group for exclusive cancellation.
        """
        worker_name = name or getattr(worker_func, "__name__", "worker")
        self._worker_started_at[worker_name] = time.monotonic()
        return self.run_worker(  # type: ignore[attr-defined]
            worker_func,
            name=worker_name,
            group=group,
            exclusive=exclusive,
            exit_on_error=False,
        )

    def cancel_workers(self) -> None:
        """Cancel all running workers of this screen."""
        with suppress(NoActiveAppError):
            self.workers.cancel_all()  # type: ignore[attr-defined]

    def on_unmount(self) -> None:
        """Cancel all workers when the screen is unmounted."""
        self.cancel_workers()

    def on_worker_state_changed(self, event: Worker.StateChanged) -> None:
        """Log finished workers and surface unexpected failures."""
        if event.state not in (WorkerState.SUCCESS, WorkerState.CANCELLED, WorkerState.ERROR):
            return

        started = self._worker_started_at.pop(event.worker.name, None)
        duration_ms = (time.monotonic() - started) * 1000 if started is not None else 0.0
        self.loading_duration_ms = duration_ms

        if event.state == WorkerState.CANCELLED:
            logger.debug("Worker '%s' was cancelled (%.2fms)", event.worker.name, duration_ms)
        elif event.state == WorkerState.ERROR:
            logger.error(
                "Worker '%s' error: %s (%.2fms)", event.worker.name, event.worker.error, duration_ms
            )
            self.notify(  # type: ignore[attr-defined]
                str(event.worker.error), title="Unexpected error", severity="error"
            )
        else:
            logger.debug("Worker '%s' completed (%.2fms)", event.worker.name, duration_ms)

    # =========================================================================
    # Loading State Management
    # =========================================================================

    def show_loading_overlay(self, message: str = "Loading...", *, is_error: bool = False) -> None:
        with suppress(NoMatches, WrongType):
            loading_text = self.query_one("#loading-text", Static)  # type: ignore[attr-defined]
            loading_text.update(escape(message))
            loading_text.set_class(is_error, "error-text")
            loading_text.display = True

    def hide_loading_overlay(self) -> None:
        with suppress(NoMatches, WrongType):
            loading_text = self.query_one("#loading-text", Static)  # type: ignore[attr-defined]
            loading_text.display = False

    def show_error_state(self, message: str) -> None:
        self.show_loading_overlay(message, is_error=True)


__all__ = ["WorkerMixin"]
