"""All enum definitions for the TUI.

This module consolidates all enumerations used throughout the application.
"""

from enum import Enum, auto

# =============================================================================
# Entity Enums
# =============================================================================

class EntityKind(Enum):
    """Kinds of monitored entities."""

    SERVICE = "service"
    CONTAINER = "container"


class EntityAction(Enum):
    """Lifecycle actions accepted by the backend."""

    START = "start"
    STOP = "stop"
    RESTART = "restart"

    @property
    def progressive(self) -> str:
        """Verb used while the action is running ("Starting")."""
        return {
            EntityAction.START: "Starting",
            EntityAction.STOP: "Stopping",
            EntityAction.RESTART: "Restarting",
        }[self]

    @property
    def past(self) -> str:
        """Verb used once the action completed ("Started")."""
        return {
            EntityAction.START: "Started",
            EntityAction.STOP: "Stopped",
            EntityAction.RESTART: "Restarted",
        }[self]


# =============================================================================
# Status Enums
# =============================================================================

class ServiceStatusFilter(Enum):
    """Status filters for the service list."""

    RUNNING = "active:running"
    ACTIVE = "active"
    INACTIVE = "inactive"
    FAILED = "failed"


class ContainerStatusFilter(Enum):
    """Status filters for the container list."""

    RUNNING = "running"
    EXITED = "exited"
    CREATED = "created"


# =============================================================================
# Pipeline State Enums
# =============================================================================

class TailerState(Enum):
    """Lifecycle of a log tailer."""

    IDLE = auto()  # Not yet started
    STREAMING = auto()  # Connection open
    STOPPED = auto()  # Stopped by user or error


class FetchState(Enum):
    """Data fetch state values."""

    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"
