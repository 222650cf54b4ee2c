"""Systemd service models."""

from __future__ import annotations

from typing import ClassVar

from pydantic import Field

from unitdeck.constants.enums import EntityKind
from unitdeck.models.core._base import ApiModel

# Sentinel sent by the backend while the first CPU delta is being measured.
CPU_MEASURING = -1


class ServiceInfo(ApiModel):
    """Point-in-time state of one systemd unit."""

    kind: ClassVar[EntityKind] = EntityKind.SERVICE

    name: str
    description: str = ""
    load_state: str = ""
    active_state: str = ""
    sub_state: str = ""
    cpu_usage: float | None = None
    memory_usage: int | None = None
    uptime: float | None = None

    @property
    def entity_id(self) -> str:
        return self.name

    @property
    def is_running(self) -> bool:
        """A unit is running when it is active and its sub state is running."""
        return self.active_state == "active" and self.sub_state == "running"


class ServiceDetailsInfo(ApiModel):
    """Single service snapshot with its extended detail fields."""

    service: ServiceInfo
    main_pid: int | None = Field(default=None, alias="mainPID")
    main_process: str = ""
    c_group: str = ""
    fragment_path: str = ""
    io_read_bytes: int | None = None
    io_write_bytes: int | None = None
    ip_ingress_bytes: int | None = None
    ip_egress_bytes: int | None = None
    tasks: int | None = None
    tasks_limit: int | None = None
    memory_peak: int | None = None
    cpu_time_nsec: int | None = Field(default=None, alias="cpuTimeNSec")
    drop_in: list[str] = Field(default_factory=list)
    docs: list[str] = Field(default_factory=list)
    triggered_by: list[str] = Field(default_factory=list)
    processes: list[str] = Field(default_factory=list)
    since: str = ""
    invocation: str = ""

    @property
    def entity_id(self) -> str:
        return self.service.name

    @property
    def is_running(self) -> bool:
        return self.service.is_running

    @property
    def cpu_usage(self) -> float | None:
        return self.service.cpu_usage

    @property
    def memory_usage(self) -> int | None:
        return self.service.memory_usage


class ServiceListInfo(ApiModel):
    """All services known to the backend.

    ``count`` is derived from the list so it can never disagree with it.
    """

    services: list[ServiceInfo] = Field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.services)

    def get(self, name: str) -> ServiceInfo | None:
        """Look up a service by name."""
        for service in self.services:
            if service.name == name:
                return service
        return None
