"""Run commands inside a container and stream their output."""

from __future__ import annotations

from functools import partial

from rich.text import Text
from textual.app import ComposeResult
from textual.css.query import NoMatches
from textual.widgets import Input, Log, Static

from unitdeck.context import AppContext
from unitdeck.keyboard import EXEC_SCREEN_BINDINGS
from unitdeck.screens.base_screen import BaseScreen
from unitdeck.sync.exec_session import ExecSession


class ExecScreen(BaseScreen):
    """Command prompt plus the output of the last command."""

    BINDINGS = EXEC_SCREEN_BINDINGS

    DEFAULT_CSS = """
    #exec-output {
        height: 1fr;
        border: round $primary;
    }

    #exec-status {
        height: 1;
        padding: 0 1;
    }
    """

    def __init__(self, context: AppContext, container_id: str) -> None:
        super().__init__(context)
        self.container_id = container_id
        self.session = ExecSession(
            context.containers,
            context.streams,
            container_id,
            on_update=self._render_session,
        )
        self._written = 0

    @property
    def screen_title(self) -> str:
        return f"Exec {self.container_id[:12]}"

    def compose_content(self) -> ComposeResult:
        yield Input(placeholder="Command, e.g. ls -la /", id="exec-command")
        yield Log(id="exec-output", highlight=False)
        yield Static("Idle", id="exec-status")

    def on_mount(self) -> None:
        self.query_one("#exec-command", Input).focus()

    async def close_pipelines(self) -> None:
        await self.session.cancel()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if event.input.id != "exec-command":
            return
        command = event.value
        event.input.value = ""
        self.start_worker(
            partial(self.session.execute, command), exclusive=True, name="exec", group="exec"
        )

    def _render_session(self, session: ExecSession) -> None:
        try:
            log = self.query_one("#exec-output", Log)
        except NoMatches:
            return
        if len(session.output) < self._written:
            log.clear()
            self._written = 0
        log.write_lines(session.output[self._written :])
        self._written = len(session.output)

        status = self.query_one("#exec-status", Static)
        if session.is_running:
            status.update("Running...")
        elif session.error:
            status.update(Text(session.error, style="red"))
        else:
            status.update("Done" if session.output else "Idle")

    def action_refresh(self) -> None:
        """Nothing is polled here."""

    def action_cancel_exec(self) -> None:
        self.start_worker(self.session.cancel, name="exec-cancel")
