"""Process-wide backend wiring.

One AppContext is built at startup and passed to every screen and pipeline;
nothing in the package keeps module-level client state.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import httpx

from unitdeck.api.client import ApiClient, build_http_client
from unitdeck.api.sse import EventStreamClient
from unitdeck.controllers.containers import ContainerController
from unitdeck.controllers.systemd import SystemdController
from unitdeck.models.state.app_settings import AppSettings
from unitdeck.sync.polling import PollingManager

logger = logging.getLogger(__name__)


@dataclass
class AppContext:
    """Settings, transport adapters and controllers shared by the views."""

    settings: AppSettings
    api: ApiClient
    streams: EventStreamClient
    systemd: SystemdController
    containers: ContainerController

    @classmethod
    def create(
        cls,
        settings: AppSettings,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> AppContext:
        http_client = build_http_client(
            settings.api_url,
            timeout=settings.request_timeout_seconds,
            transport=transport,
        )
        api = ApiClient(http_client)
        logger.info("Backend client created for %s", settings.api_url)
        return cls(
            settings=settings,
            api=api,
            streams=EventStreamClient(http_client),
            systemd=SystemdController(api),
            containers=ContainerController(api),
        )

    def polling_manager(self) -> PollingManager:
        """A fresh manager for one view; the view closes it on unmount."""
        return PollingManager(self.systemd, self.containers, self.settings)

    async def aclose(self) -> None:
        await self.api.aclose()
