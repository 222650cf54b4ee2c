"""Container screens."""

from unitdeck.screens.containers.container_detail_screen import ContainerDetailScreen
from unitdeck.screens.containers.containers_screen import ContainersScreen
from unitdeck.screens.containers.exec_screen import ExecScreen

__all__ = ["ContainerDetailScreen", "ContainersScreen", "ExecScreen"]
