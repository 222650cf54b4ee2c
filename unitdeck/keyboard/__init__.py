"""Keyboard bindings module.

- app: App-level bindings (APP_BINDINGS)
- navigation: Screen-specific bindings (*_SCREEN_BINDINGS)
"""

from unitdeck.keyboard.app import APP_BINDINGS
from unitdeck.keyboard.navigation import (
    BASE_SCREEN_BINDINGS,
    CONTAINER_DETAIL_SCREEN_BINDINGS,
    CONTAINERS_SCREEN_BINDINGS,
    EXEC_SCREEN_BINDINGS,
    LOGS_SCREEN_BINDINGS,
    SERVICE_DETAIL_SCREEN_BINDINGS,
    SERVICES_SCREEN_BINDINGS,
)

__all__ = [
    "APP_BINDINGS",
    "BASE_SCREEN_BINDINGS",
    "CONTAINERS_SCREEN_BINDINGS",
    "CONTAINER_DETAIL_SCREEN_BINDINGS",
    "EXEC_SCREEN_BINDINGS",
    "LOGS_SCREEN_BINDINGS",
    "SERVICES_SCREEN_BINDINGS",
    "SERVICE_DETAIL_SCREEN_BINDINGS",
]
