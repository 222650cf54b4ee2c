"""Screens for the UnitDeck TUI."""

from unitdeck.screens.base_screen import BaseScreen
from unitdeck.screens.containers import ContainerDetailScreen, ContainersScreen, ExecScreen
from unitdeck.screens.logs import LogsScreen
from unitdeck.screens.services import ServiceDetailScreen, ServicesScreen

__all__ = [
    "BaseScreen",
    "ContainerDetailScreen",
    "ContainersScreen",
    "ExecScreen",
    "LogsScreen",
    "ServiceDetailScreen",
    "ServicesScreen",
]
