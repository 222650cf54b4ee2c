"""Base screen class for UnitDeck.

Every screen receives the AppContext and owns a PollingManager; the
manager and any other pipeline a screen starts are torn down on unmount
so nothing keeps polling or streaming after navigation.

Subclasses implement:
- screen_title: title shown in the header
- compose_content(): widgets between the header and the footer
- start_pipelines(): subscribe to backend resources (called on mount)
- close_pipelines(): optional extra teardown (tailers, exec sessions)
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from textual.app import ComposeResult
from textual.containers import Container
from textual.screen import Screen
from textual.widgets import Footer, Header, Static

from unitdeck.constants import APP_TITLE
from unitdeck.constants.enums import EntityAction, FetchState
from unitdeck.context import AppContext
from unitdeck.controllers.base import ActionError, BaseController
from unitdeck.keyboard import BASE_SCREEN_BINDINGS
from unitdeck.screens.mixins.worker_mixin import WorkerMixin
from unitdeck.sync.polling import PollingManager, PollingSubscription

if TYPE_CHECKING:
    from unitdeck.app import UnitDeckApp

logger = logging.getLogger(__name__)


class BaseScreen(WorkerMixin, Screen):
    """Base class for UnitDeck screens."""

    BINDINGS = BASE_SCREEN_BINDINGS

    DEFAULT_CSS = """
    #loading-text {
        height: auto;
        padding: 0 1;
        color: $text-muted;
    }

    #loading-text.error-text {
        color: $error;
        text-style: bold;
    }

    #base-content {
        height: 1fr;
    }
    """

    def __init__(self, context: AppContext) -> None:
        super().__init__()
        self.context = context
        self.polling: PollingManager = context.polling_manager()

    @property
    def screen_title(self) -> str:
        return APP_TITLE

    @property
    def app(self) -> UnitDeckApp:  # type: ignore[override]
        return super().app  # type: ignore[return-value]

    def compose(self) -> ComposeResult:
        yield Header()
        yield Static("Loading...", id="loading-text")
        with Container(id="base-content"):
            yield from self.compose_content()
        yield Footer()

    def compose_content(self) -> ComposeResult:
        yield from ()

    def on_mount(self) -> None:
        self.app.sub_title = self.screen_title
        self.start_pipelines()
        if self.polling.subscriptions:
            self.is_loading = True
        else:
            self.hide_loading_overlay()

    async def on_unmount(self) -> None:
        await self.polling.close_all()
        await self.close_pipelines()
        logger.debug("%s unmounted, pipelines closed", type(self).__name__)

    def start_pipelines(self) -> None:
        """Subscribe to the resources this screen shows."""

    async def close_pipelines(self) -> None:
        """Release pipelines not owned by the polling manager."""

    # =========================================================================
    # Subscription state
    # =========================================================================

    def sync_loading_state(self, subscription: PollingSubscription) -> None:
        """Mirror a subscription's fetch state on the status line.

        Data already on screen stays visible when a refresh fails; only the
        status line reports the error.
        """
        state = subscription.fetch_state
        self.is_loading = state is FetchState.LOADING and subscription.data is None
        self.error = subscription.error if state is FetchState.ERROR else None

    # =========================================================================
    # Actions
    # =========================================================================

    def action_back(self) -> None:
        if len(self.app.screen_stack) > 1:
            self.app.pop_screen()

    def action_refresh(self) -> None:
        for subscription in self.polling.subscriptions:
            self.start_worker(subscription.refresh, name=f"refresh:{subscription.key}")

    def run_entity_action(
        self,
        controller: BaseController,
        action: EntityAction,
        entity_ids: Sequence[str],
        *,
        subscription: PollingSubscription | None = None,
    ) -> None:
        """Run ``action`` on one or more entities in a worker and report it."""
        ids = [entity_id for entity_id in entity_ids if entity_id]
        if not ids:
            self.notify(f"No {controller.kind.value} selected", severity="warning")
            return

        async def perform() -> None:
            if len(ids) == 1:
                try:
                    result = await controller.run_action(action, ids[0])
                except ActionError as exc:
                    self.notify(
                        exc.reason,
                        title=f"Failed to {action.value} {ids[0]}",
                        severity="error",
                    )
                    return
                self.notify(
                    result.message or f"{action.past} {controller.kind.value} {ids[0]}",
                    title=f"{controller.kind.value.capitalize()} {action.past.lower()}",
                )
            else:
                bulk = await controller.bulk_action(action, ids)
                self.notify(bulk.summary, severity=bulk.severity)
            if subscription is not None:
                await subscription.refresh()

        self.start_worker(perform, name=f"{action.value}:{','.join(ids)}")


__all__ = ["BaseScreen"]
