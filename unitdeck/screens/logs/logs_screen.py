"""Live log view for one service or container.

The LogTailer owns the connection and the buffer; this screen only
renders it. Filtering narrows what is shown without touching the buffer.
"""

from __future__ import annotations

import logging

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.css.query import NoMatches
from textual.widgets import Input, Log, Static

from unitdeck.constants.defaults import LOG_LINES_CHOICES
from unitdeck.context import AppContext
from unitdeck.keyboard import LOGS_SCREEN_BINDINGS
from unitdeck.screens.base_screen import BaseScreen
from unitdeck.sync.log_stream import LogTarget
from unitdeck.sync.log_tailer import LogTailer

logger = logging.getLogger(__name__)


class LogsScreen(BaseScreen):
    """Streams logs of ``target`` while mounted."""

    BINDINGS = LOGS_SCREEN_BINDINGS

    DEFAULT_CSS = """
    #logs-toolbar {
        height: 3;
    }

    #logs-filter {
        width: 1fr;
    }

    #logs-status {
        width: auto;
        padding: 1 2;
    }

    #logs-output {
        height: 1fr;
        border: round $primary;
    }
    """

    def __init__(self, context: AppContext, target: LogTarget) -> None:
        super().__init__(context)
        self.target = target
        self.filter_query = ""
        self.tailer = LogTailer(
            context.streams,
            target,
            lines=context.settings.log_lines,
            on_update=self._render_tailer,
        )
        self._written = 0

    @property
    def screen_title(self) -> str:
        return f"Logs: {self.target.kind.value} {self.target.entity_id}"

    def compose_content(self) -> ComposeResult:
        with Horizontal(id="logs-toolbar"):
            yield Input(placeholder="Filter logs...", id="logs-filter")
            yield Static("", id="logs-status")
        yield Log(id="logs-output", highlight=False)

    def on_mount(self) -> None:
        self.query_one("#logs-output", Log).focus()
        self.tailer.start()

    async def close_pipelines(self) -> None:
        await self.tailer.aclose()

    # =========================================================================
    # Rendering
    # =========================================================================

    def _render_tailer(self, tailer: LogTailer) -> None:
        try:
            log = self.query_one("#logs-output", Log)
        except NoMatches:
            return
        if self.filter_query:
            self._rerender(log)
        else:
            if len(tailer.records) < self._written:
                log.clear()
                self._written = 0
            log.write_lines(record.to_line() for record in tailer.records[self._written :])
            self._written = len(tailer.records)
        self._update_status()

    def _rerender(self, log: Log) -> None:
        log.clear()
        log.write_lines(record.to_line() for record in self.tailer.filter(self.filter_query))
        self._written = len(self.tailer.records) if not self.filter_query else 0

    def _update_status(self) -> None:
        tailer = self.tailer
        if tailer.error:
            text = Text(tailer.error, style="bold red")
        elif tailer.is_streaming:
            text = Text("● streaming", style="green")
        else:
            text = Text("■ paused", style="yellow")
        text.append(f"  lines: {tailer.lines}  records: {len(tailer.records)}", style="default")
        self.query_one("#logs-status", Static).update(text)

    # =========================================================================
    # Events and actions
    # =========================================================================

    def on_input_changed(self, event: Input.Changed) -> None:
        if event.input.id != "logs-filter":
            return
        self.filter_query = event.value.strip()
        self._rerender(self.query_one("#logs-output", Log))

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if event.input.id == "logs-filter":
            self.query_one("#logs-output", Log).focus()

    def action_focus_search(self) -> None:
        self.query_one("#logs-filter", Input).focus()

    def action_refresh(self) -> None:
        self.tailer.clear_and_restart()

    def action_toggle_streaming(self) -> None:
        if self.tailer.is_streaming:
            self.tailer.stop()
        else:
            self.tailer.start()

    def action_more_lines(self) -> None:
        self._step_lines(1)

    def action_fewer_lines(self) -> None:
        self._step_lines(-1)

    def _step_lines(self, step: int) -> None:
        choices = sorted(set(LOG_LINES_CHOICES) | {self.tailer.lines})
        index = choices.index(self.tailer.lines) + step
        if 0 <= index < len(choices):
            self.tailer.set_lines(choices[index])
            self.notify(f"Showing last {choices[index]} lines")

    def action_download(self) -> None:
        self.start_worker(self._do_download, exclusive=True, name="download", group="download")

    async def _do_download(self) -> None:
        try:
            path = await self.tailer.download(self.context.settings.download_dir)
        except OSError as exc:
            logger.error("Saving logs for %s failed: %s", self.target.entity_id, exc)
            self.notify(f"Error saving logs: {exc}", severity="error")
            return
        if path is None:
            self.notify("No logs to download", severity="warning")
        else:
            self.notify(f"Saved to {path}", title="Logs downloaded")
