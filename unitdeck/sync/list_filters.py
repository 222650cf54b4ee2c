"""Search and status filtering for the list views, plus status tallies.

Tallies are recomputed from the latest snapshot on every call so they can
never drift from the list they describe.
"""

from __future__ import annotations

from collections.abc import Iterable

from unitdeck.constants.enums import ContainerStatusFilter, ServiceStatusFilter
from unitdeck.models.core.container_info import ContainerInfo
from unitdeck.models.core.service_info import ServiceInfo


def service_status_counts(services: Iterable[ServiceInfo]) -> dict[str, int]:
    counts = {"running": 0, "active": 0, "inactive": 0, "failed": 0}
    for service in services:
        if service.is_running:
            counts["running"] += 1
        elif service.active_state == "active":
            counts["active"] += 1
        elif service.active_state == "inactive":
            counts["inactive"] += 1
        elif service.active_state == "failed":
            counts["failed"] += 1
    return counts


def container_status_counts(containers: Iterable[ContainerInfo]) -> dict[str, int]:
    counts = {"running": 0, "exited": 0, "created": 0}
    for container in containers:
        if container.status.running:
            counts["running"] += 1
        if container.status.state == "exited":
            counts["exited"] += 1
        elif container.status.state == "created":
            counts["created"] += 1
    return counts


def filter_services(
    services: Iterable[ServiceInfo],
    query: str = "",
    status: ServiceStatusFilter | None = None,
) -> list[ServiceInfo]:
    """Services whose name or description contains ``query`` and match ``status``."""
    needle = query.strip().lower()
    result: list[ServiceInfo] = []
    for service in services:
        if needle and needle not in service.name.lower() and needle not in service.description.lower():
            continue
        if status is ServiceStatusFilter.RUNNING:
            if not service.is_running:
                continue
        elif status is not None and service.active_state != status.value:
            continue
        result.append(service)
    return result


def filter_containers(
    containers: Iterable[ContainerInfo],
    query: str = "",
    status: ContainerStatusFilter | None = None,
) -> list[ContainerInfo]:
    """Containers whose name or image contains ``query`` and match ``status``."""
    needle = query.strip().lower()
    result: list[ContainerInfo] = []
    for container in containers:
        if needle and needle not in container.name.lower() and needle not in container.image.lower():
            continue
        if status is ContainerStatusFilter.RUNNING:
            if not container.status.running:
                continue
        elif status is not None and container.status.state != status.value:
            continue
        result.append(container)
    return result


__all__ = [
    "container_status_counts",
    "filter_containers",
    "filter_services",
    "service_status_counts",
]
