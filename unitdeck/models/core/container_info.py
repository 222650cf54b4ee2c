"""Container models."""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import Field

from unitdeck.constants.enums import EntityKind
from unitdeck.models.core._base import ApiModel


class ContainerStatusInfo(ApiModel):
    """Runtime status of a container."""

    running: bool = False
    state: str = "unknown"
    exit_code: int | None = None
    error: str = ""
    oom_killed: bool = False
    pid: int | None = None
    started_at: str | None = None
    finished_at: str | None = None


class NetworkInfo(ApiModel):
    """Per-network address configuration."""

    ip_address: str = ""
    gateway: str = ""
    mac_address: str = ""


class MountInfo(ApiModel):
    """Container mount point."""

    source: str = ""
    destination: str = ""
    mode: str = ""


class ContainerInfo(ApiModel):
    """Point-in-time state of one container."""

    kind: ClassVar[EntityKind] = EntityKind.CONTAINER

    id: str
    name: str = ""
    image: str = ""
    command: str = ""
    created: str | None = None
    status: ContainerStatusInfo = Field(default_factory=ContainerStatusInfo)
    cpu_usage: float | None = None
    memory_usage: int | None = None
    ports: str | list[dict[str, Any]] = ""
    networks: dict[str, NetworkInfo] = Field(default_factory=dict)
    mounts: list[MountInfo] = Field(default_factory=list)
    environment: list[str] = Field(default_factory=list)
    labels: dict[str, str] = Field(default_factory=dict)

    @property
    def entity_id(self) -> str:
        return self.id

    @property
    def is_running(self) -> bool:
        return self.status.running

    @property
    def display_name(self) -> str:
        """Name without the leading slash docker adds."""
        return self.name.lstrip("/") or self.id


class ContainerListInfo(ApiModel):
    """All containers known to the backend."""

    containers: list[ContainerInfo] = Field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.containers)

    def get(self, container_id: str) -> ContainerInfo | None:
        """Look up a container by id."""
        for container in self.containers:
            if container.id == container_id:
                return container
        return None
