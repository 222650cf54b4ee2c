"""Systemd controller - service snapshots and lifecycle actions."""

from __future__ import annotations

import logging

from unitdeck.api.client import ApiClient
from unitdeck.constants.enums import EntityKind
from unitdeck.controllers.base import BaseController
from unitdeck.controllers.systemd.parsers import ServiceParser
from unitdeck.models.core.service_info import ServiceDetailsInfo, ServiceListInfo

logger = logging.getLogger(__name__)


class SystemdController(BaseController):
    """Backend access for systemd services."""

    kind = EntityKind.SERVICE
    RESOURCE_PATH = "/services"

    def __init__(self, api_client: ApiClient) -> None:
        super().__init__(api_client)
        self._parser = ServiceParser()

    async def fetch_all(self) -> ServiceListInfo:
        payload = await self._api.get_json(self.RESOURCE_PATH)
        services = self._parser.parse_service_list(payload)
        logger.debug("Fetched %d services", services.count)
        return services

    async def fetch_one(self, entity_id: str) -> ServiceDetailsInfo:
        payload = await self._api.get_json(self.entity_path(entity_id))
        return self._parser.parse_service_details(payload)
