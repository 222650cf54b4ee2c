"""Polling subscriptions - periodically refreshed snapshots of backend resources.

A subscription keeps the last successful snapshot of one resource (the
service list, one service, the container list, one container) and replaces
it wholesale on every successful fetch. Failed fetches are retried with a
fixed delay; once retries are exhausted the error is exposed and the last
good snapshot is kept.

Usage:
    manager = PollingManager(systemd, containers, settings)
    services = manager.subscribe(ResourceKey.services(), on_update=self._render)
    ...
    await services.refresh()      # manual, coalesced
    await manager.close_all()     # on unmount
"""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Awaitable, Callable
from contextlib import suppress
from dataclasses import dataclass
from functools import partial
from typing import Any, Generic, TypeVar

from unitdeck.constants.defaults import RETRY_COUNT_DEFAULT, RETRY_DELAY_MS_DEFAULT
from unitdeck.constants.enums import EntityKind, FetchState
from unitdeck.controllers.base import BaseController
from unitdeck.controllers.containers import ContainerController
from unitdeck.controllers.systemd import SystemdController
from unitdeck.models.state.app_settings import AppSettings
from unitdeck.models.state.subscription_state import SubscriptionState

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class ResourceKey:
    """Identifies a polled backend resource.

    ``entity_id`` of None means the whole collection of ``kind``.
    """

    kind: EntityKind
    entity_id: str | None = None

    @classmethod
    def services(cls) -> ResourceKey:
        return cls(EntityKind.SERVICE)

    @classmethod
    def service(cls, name: str) -> ResourceKey:
        return cls(EntityKind.SERVICE, name)

    @classmethod
    def containers(cls) -> ResourceKey:
        return cls(EntityKind.CONTAINER)

    @classmethod
    def container(cls, container_id: str) -> ResourceKey:
        return cls(EntityKind.CONTAINER, container_id)

    @property
    def is_collection(self) -> bool:
        return self.entity_id is None

    def __str__(self) -> str:
        if self.entity_id is None:
            return f"{self.kind.value}s"
        return f"{self.kind.value}s/{self.entity_id}"


class PollingSubscription(Generic[T]):
    """Locally cached, periodically refreshed copy of one resource.

    Attributes:
        data: Last successful snapshot, None until the first success.
        error: Message of the last failed fetch (after retries), cleared on
            the next success.
        is_loading: True until the first fetch settles.
        last_updated: Wall-clock time of the last successful fetch.
    """

    def __init__(
        self,
        key: ResourceKey,
        fetch: Callable[[], Awaitable[T]],
        *,
        interval_ms: int,
        enabled: bool = True,
        retry_count: int = RETRY_COUNT_DEFAULT,
        retry_delay_ms: int = RETRY_DELAY_MS_DEFAULT,
        on_update: Callable[[PollingSubscription[T]], None] | None = None,
    ) -> None:
        self.key = key
        self.interval_ms = interval_ms
        self.enabled = enabled
        self.retry_count = retry_count
        self.retry_delay_ms = retry_delay_ms
        self._fetch = fetch
        self._on_update = on_update

        self.data: T | None = None
        self.error: str | None = None
        self.is_loading = True
        self.last_updated: float | None = None

        self._inflight: asyncio.Task[T | None] | None = None
        self._loop_task: asyncio.Task[None] | None = None
        self._closed = False

    # =========================================================================
    # State
    # =========================================================================

    @property
    def is_refreshing(self) -> bool:
        return self._inflight is not None and not self._inflight.done()

    @property
    def is_active(self) -> bool:
        return self._loop_task is not None and not self._loop_task.done()

    @property
    def state(self) -> SubscriptionState:
        return SubscriptionState(is_active=self.is_active, last_error=self.error)

    @property
    def fetch_state(self) -> FetchState:
        if self.is_loading or self.is_refreshing:
            return FetchState.LOADING
        if self.error is not None:
            return FetchState.ERROR
        return FetchState.SUCCESS

    # =========================================================================
    # Lifecycle
    # =========================================================================

    def start(self) -> None:
        """Start the initial fetch and, when enabled, the refresh loop."""
        if self._closed:
            raise RuntimeError(f"Subscription {self.key} is closed")
        if self.is_active:
            return
        self._loop_task = asyncio.create_task(self._run(), name=f"poll:{self.key}")

    def set_enabled(self, enabled: bool) -> None:
        """Toggle background refresh; manual refresh() keeps working either way."""
        if enabled == self.enabled:
            return
        self.enabled = enabled
        if self._loop_task is not None:
            self._loop_task.cancel()
            self._loop_task = None
        if enabled and not self._closed:
            self._loop_task = asyncio.create_task(self._tick_forever(), name=f"poll:{self.key}")

    async def close(self) -> None:
        """Stop polling and cancel any in-flight fetch."""
        self._closed = True
        tasks = [task for task in (self._loop_task, self._inflight) if task is not None]
        self._loop_task = None
        self._inflight = None
        for task in tasks:
            task.cancel()
        for task in tasks:
            with suppress(asyncio.CancelledError):
                await task
        logger.debug("Subscription %s closed", self.key)

    async def _run(self) -> None:
        await self.refresh()
        if self.enabled:
            await self._tick_forever()

    async def _tick_forever(self) -> None:
        # The next tick is scheduled regardless of the previous outcome.
        while True:
            await asyncio.sleep(self.interval_ms / 1000)
            await self.refresh()

    # =========================================================================
    # Fetching
    # =========================================================================

    async def refresh(self) -> T | None:
        """Fetch now, joining the in-flight fetch if there is one.

        Returns:
            The current snapshot after the fetch settles (the previous one if
            the fetch failed).
        """
        if self._closed:
            return self.data
        if self._inflight is None or self._inflight.done():
            self._inflight = asyncio.create_task(
                self._fetch_with_retry(), name=f"fetch:{self.key}"
            )
        return await asyncio.shield(self._inflight)

    async def _fetch_with_retry(self) -> T | None:
        attempts = self.retry_count + 1
        start = time.monotonic()

        for attempt in range(1, attempts + 1):
            try:
                data = await self._fetch()
            except Exception as exc:
                if attempt < attempts:
                    logger.warning(
                        "Fetching %s failed (attempt %s/%s): %s, retrying in %sms",
                        self.key,
                        attempt,
                        attempts,
                        exc,
                        self.retry_delay_ms,
                    )
                    await asyncio.sleep(self.retry_delay_ms / 1000)
                    continue
                logger.error("Fetching %s failed after %s attempts: %s", self.key, attempts, exc)
                self.error = str(exc) or type(exc).__name__
            else:
                self.data = data
                self.error = None
                self.last_updated = time.time()
                logger.debug(
                    "Fetched %s in %.2fms", self.key, (time.monotonic() - start) * 1000
                )
            break

        self.is_loading = False
        self._notify()
        return self.data

    def _notify(self) -> None:
        if self._on_update is None:
            return
        try:
            self._on_update(self)
        except Exception:
            logger.exception("Update callback for %s failed", self.key)


class PollingManager:
    """Creates and owns the polling subscriptions of one view.

    Every subscription created here is cancelled by ``close_all()``; nothing
    is shared between managers.
    """

    def __init__(
        self,
        systemd: SystemdController,
        containers: ContainerController,
        settings: AppSettings | None = None,
    ) -> None:
        self._controllers: dict[EntityKind, BaseController] = {
            EntityKind.SERVICE: systemd,
            EntityKind.CONTAINER: containers,
        }
        self._settings = settings or AppSettings()
        self._subscriptions: list[PollingSubscription[Any]] = []

    @property
    def subscriptions(self) -> list[PollingSubscription[Any]]:
        return list(self._subscriptions)

    def default_interval_ms(self, key: ResourceKey) -> int:
        """Refresh interval configured for ``key``."""
        if key.kind is EntityKind.CONTAINER:
            return self._settings.container_refresh_ms
        if key.is_collection:
            return self._settings.service_list_refresh_ms
        return self._settings.service_detail_refresh_ms

    def subscribe(
        self,
        key: ResourceKey,
        interval_ms: int | None = None,
        enabled: bool | None = None,
        on_update: Callable[[PollingSubscription[Any]], None] | None = None,
    ) -> PollingSubscription[Any]:
        """Create, register and start a subscription for ``key``.

        Args:
            key: Resource to poll.
            interval_ms: Refresh interval, defaults to the configured one.
            enabled: Background refresh toggle, defaults to
                ``settings.auto_refresh``.
            on_update: Called after every settled fetch.
        """
        subscription: PollingSubscription[Any] = PollingSubscription(
            key,
            self._resolve_fetcher(key),
            interval_ms=interval_ms or self.default_interval_ms(key),
            enabled=self._settings.auto_refresh if enabled is None else enabled,
            retry_count=self._settings.retry_count,
            retry_delay_ms=self._settings.retry_delay_ms,
            on_update=on_update,
        )
        self._subscriptions.append(subscription)
        subscription.start()
        logger.debug(
            "Subscribed to %s every %sms (enabled=%s)",
            key,
            subscription.interval_ms,
            subscription.enabled,
        )
        return subscription

    async def close_all(self) -> None:
        subscriptions, self._subscriptions = self._subscriptions, []
        for subscription in subscriptions:
            await subscription.close()

    def _resolve_fetcher(self, key: ResourceKey) -> Callable[[], Awaitable[Any]]:
        controller = self._controllers[key.kind]
        if key.entity_id is None:
            return controller.fetch_all
        return partial(controller.fetch_one, key.entity_id)


__all__ = [
    "PollingManager",
    "PollingSubscription",
    "ResourceKey",
]
