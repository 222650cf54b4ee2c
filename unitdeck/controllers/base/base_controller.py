"""Base controller for entity-specific backend access.

Controllers own the REST calls for one entity kind: list and detail
snapshots plus start/stop/restart actions. They are constructed with the
shared ApiClient and hold no other state, so screens and the polling
manager can call them from any worker.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, ClassVar
from urllib.parse import quote

from unitdeck.api.client import ApiClient
from unitdeck.api.errors import ApiError
from unitdeck.constants.enums import EntityAction, EntityKind
from unitdeck.controllers.base.bulk_actions import BulkActionResult, run_bulk_action

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ActionResult:
    """Outcome of one accepted lifecycle action."""

    action: EntityAction
    kind: EntityKind
    entity_id: str
    message: str = ""


class ActionError(Exception):
    """Raised when the backend rejects or fails a lifecycle action."""

    def __init__(
        self, action: EntityAction, kind: EntityKind, entity_id: str, reason: str
    ) -> None:
        super().__init__(f"Failed to {action.value} {kind.value} {entity_id}: {reason}")
        self.action = action
        self.kind = kind
        self.entity_id = entity_id
        self.reason = reason


class BaseController(ABC):
    """Base controller class for one entity kind.

    Subclasses set ``kind`` and ``RESOURCE_PATH`` and implement the
    snapshot fetchers.
    """

    kind: ClassVar[EntityKind]
    RESOURCE_PATH: ClassVar[str]

    def __init__(self, api_client: ApiClient) -> None:
        self._api = api_client

    def entity_path(self, entity_id: str, *suffix: str) -> str:
        """Build ``/<resource>/<quoted id>[/<suffix>...]``."""
        parts = [self.RESOURCE_PATH, quote(entity_id, safe="@:")]
        parts.extend(suffix)
        return "/".join(parts)

    async def check_connection(self) -> bool:
        """Check if the backend answers the list endpoint.

        Returns:
            True if connection is available, False otherwise
        """
        try:
            await self._api.get_json(self.RESOURCE_PATH)
        except ApiError as exc:
            logger.warning("Backend not reachable for %s: %s", self.kind.value, exc)
            return False
        return True

    @abstractmethod
    async def fetch_all(self) -> Any:
        """Fetch the full collection snapshot."""
        ...

    @abstractmethod
    async def fetch_one(self, entity_id: str) -> Any:
        """Fetch a single entity snapshot."""
        ...

    async def run_action(self, action: EntityAction, entity_id: str) -> ActionResult:
        """POST a lifecycle action; the effect shows up on the next poll.

        Raises:
            ValueError: If ``entity_id`` is empty.
            ActionError: If the backend rejects the action or is unreachable.
        """
        if not entity_id:
            raise ValueError(f"{self.kind.value} id is required")

        logger.info("%s %s %s", action.progressive, self.kind.value, entity_id)
        try:
            payload = await self._api.post_json(self.entity_path(entity_id, action.value))
        except ApiError as exc:
            logger.error("Failed to %s %s %s: %s", action.value, self.kind.value, entity_id, exc)
            raise ActionError(action, self.kind, entity_id, str(exc)) from exc

        message = ""
        if isinstance(payload, dict):
            message = str(payload.get("message", ""))
        return ActionResult(action=action, kind=self.kind, entity_id=entity_id, message=message)

    async def start(self, entity_id: str) -> ActionResult:
        return await self.run_action(EntityAction.START, entity_id)

    async def stop(self, entity_id: str) -> ActionResult:
        return await self.run_action(EntityAction.STOP, entity_id)

    async def restart(self, entity_id: str) -> ActionResult:
        return await self.run_action(EntityAction.RESTART, entity_id)

    async def bulk_action(
        self, action: EntityAction, entity_ids: Iterable[str]
    ) -> BulkActionResult:
        """Apply ``action`` to every entity, one after another."""
        return await run_bulk_action(action, self.kind, entity_ids, self.run_action)
