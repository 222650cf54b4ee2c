"""Entity snapshot models for services and containers."""

from unitdeck.models.core.container_info import (
    ContainerInfo,
    ContainerListInfo,
    ContainerStatusInfo,
    MountInfo,
    NetworkInfo,
)
from unitdeck.models.core.service_info import (
    CPU_MEASURING,
    ServiceDetailsInfo,
    ServiceInfo,
    ServiceListInfo,
)

# Tagged snapshot variant: both kinds expose entity_id, is_running,
# cpu_usage and memory_usage.
EntitySnapshot = ServiceInfo | ServiceDetailsInfo | ContainerInfo

__all__ = [
    "CPU_MEASURING",
    "ContainerInfo",
    "ContainerListInfo",
    "ContainerStatusInfo",
    "EntitySnapshot",
    "MountInfo",
    "NetworkInfo",
    "ServiceDetailsInfo",
    "ServiceInfo",
    "ServiceListInfo",
]
