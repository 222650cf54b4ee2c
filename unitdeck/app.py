"""Main application class for UnitDeck."""

from __future__ import annotations

import logging

import httpx
from textual.app import App
from textual.binding import Binding
from textual.screen import Screen

from unitdeck.constants import APP_SUB_TITLE, APP_TITLE
from unitdeck.context import AppContext
from unitdeck.keyboard.app import APP_BINDINGS
from unitdeck.models.state.app_settings import AppSettings

logger = logging.getLogger(__name__)


class UnitDeckApp(App[None]):
    """Main TUI application for UnitDeck."""

    TITLE = APP_TITLE
    SUB_TITLE = APP_SUB_TITLE
    BINDINGS: list[Binding] = APP_BINDINGS

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        super().__init__()
        self.settings = settings or AppSettings()
        self._transport = transport
        self.app_context: AppContext | None = None

    def on_mount(self) -> None:
        self.app_context = AppContext.create(self.settings, transport=self._transport)
        self.action_nav_services()
        self.run_worker(self._check_backend, name="check-backend", exit_on_error=False)

    async def _check_backend(self) -> None:
        if self.app_context is not None and not await self.app_context.systemd.check_connection():
            self.notify(
                f"Backend not reachable at {self.settings.api_url}",
                title="Connection failed",
                severity="error",
                timeout=10,
            )

    async def on_unmount(self) -> None:
        if self.app_context is not None:
            await self.app_context.aclose()
            logger.info("Backend client closed")

    # =========================================================================
    # Navigation
    # =========================================================================

    def _show_root(self, factory: type[Screen]) -> None:
        """Make a fresh ``factory`` screen the only screen above the default one.

        Screens left behind are unmounted, which closes their pipelines.
        """
        if self.app_context is None:
            return
        while len(self.screen_stack) > 2:
            self.pop_screen()
        if len(self.screen_stack) > 1:
            if isinstance(self.screen, factory):
                return
            self.switch_screen(factory(self.app_context))
        else:
            self.push_screen(factory(self.app_context))

    def action_nav_services(self) -> None:
        from unitdeck.screens import ServicesScreen

        self._show_root(ServicesScreen)

    def action_nav_containers(self) -> None:
        from unitdeck.screens import ContainersScreen

        self._show_root(ContainersScreen)

    def action_show_help(self) -> None:
        self.notify(
            "Keybindings:\n"
            "  F1 - Services\n"
            "  F2 - Containers\n"
            "  Enter - Details\n"
            "  Space - Select, A - Select all\n"
            "  S / X / Shift+R - Start / Stop / Restart\n"
            "  L - Logs, E - Exec\n"
            "  R - Refresh, Esc - Back\n"
            "  Q - Quit",
            severity="information",
            timeout=30,
        )
