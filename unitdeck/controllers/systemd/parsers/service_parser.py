"""Service parser for the systemd controller - turns backend JSON into models."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from unitdeck.api.errors import ApiPayloadError
from unitdeck.models.core.service_info import ServiceDetailsInfo, ServiceListInfo

logger = logging.getLogger(__name__)


class ServiceParser:
    """Parses systemd payloads into structured models."""

    def parse_service_list(self, payload: Any) -> ServiceListInfo:
        """Parse ``GET /services``.

        The reported ``count`` is checked against the list and otherwise
        ignored; the model derives its count from the list itself.
        """
        if not isinstance(payload, dict):
            raise ApiPayloadError(f"Expected service list object, got {type(payload).__name__}")
        try:
            service_list = ServiceListInfo.model_validate(payload)
        except ValidationError as exc:
            raise ApiPayloadError(f"Malformed service list: {exc}") from exc

        reported = payload.get("count")
        if reported is not None and reported != service_list.count:
            logger.warning(
                "Service list count mismatch: reported %s, received %s",
                reported,
                service_list.count,
            )
        return service_list

    def parse_service_details(self, payload: Any) -> ServiceDetailsInfo:
        """Parse ``GET /services/{name}``."""
        if not isinstance(payload, dict):
            raise ApiPayloadError(f"Expected service details object, got {type(payload).__name__}")
        try:
            return ServiceDetailsInfo.model_validate(payload)
        except ValidationError as exc:
            raise ApiPayloadError(f"Malformed service details: {exc}") from exc
