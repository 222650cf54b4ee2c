"""Container controller - container snapshots, lifecycle actions and exec."""

from __future__ import annotations

import logging

from unitdeck.api.client import ApiClient
from unitdeck.constants.enums import EntityKind
from unitdeck.controllers.base import BaseController
from unitdeck.controllers.containers.parsers import ContainerParser
from unitdeck.models.core.container_info import ContainerInfo, ContainerListInfo

logger = logging.getLogger(__name__)


class ContainerController(BaseController):
    """Backend access for containers."""

    kind = EntityKind.CONTAINER
    RESOURCE_PATH = "/containers"

    def __init__(self, api_client: ApiClient) -> None:
        super().__init__(api_client)
        self._parser = ContainerParser()

    async def fetch_all(self) -> ContainerListInfo:
        payload = await self._api.get_json(self.RESOURCE_PATH)
        containers = self._parser.parse_container_list(payload)
        logger.debug("Fetched %d containers", containers.count)
        return containers

    async def fetch_one(self, entity_id: str) -> ContainerInfo:
        payload = await self._api.get_json(self.entity_path(entity_id))
        return self._parser.parse_container(payload)

    async def start_exec(self, container_id: str, command: str) -> None:
        """Submit a command; its output is read from ``exec_output_path``.

        The response body is ignored whatever its content type.
        """
        await self._api.post(self.entity_path(container_id, "exec"), {"command": command})

    def exec_output_path(self, container_id: str) -> str:
        return self.entity_path(container_id, "exec", "output")
