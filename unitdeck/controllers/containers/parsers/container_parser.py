"""Container parser for the container controller."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from unitdeck.api.errors import ApiPayloadError
from unitdeck.models.core.container_info import ContainerInfo, ContainerListInfo

logger = logging.getLogger(__name__)


class ContainerParser:
    """Parses container payloads into structured models."""

    def parse_container_list(self, payload: Any) -> ContainerListInfo:
        """Parse ``GET /containers``."""
        if not isinstance(payload, dict):
            raise ApiPayloadError(f"Expected container list object, got {type(payload).__name__}")
        try:
            container_list = ContainerListInfo.model_validate(payload)
        except ValidationError as exc:
            raise ApiPayloadError(f"Malformed container list: {exc}") from exc

        reported = payload.get("count")
        if reported is not None and reported != container_list.count:
            logger.warning(
                "Container list count mismatch: reported %s, received %s",
                reported,
                container_list.count,
            )
        return container_list

    def parse_container(self, payload: Any) -> ContainerInfo:
        """Parse ``GET /containers/{id}``."""
        if not isinstance(payload, dict):
            raise ApiPayloadError(f"Expected container object, got {type(payload).__name__}")
        try:
            return ContainerInfo.model_validate(payload)
        except ValidationError as exc:
            raise ApiPayloadError(f"Malformed container: {exc}") from exc
