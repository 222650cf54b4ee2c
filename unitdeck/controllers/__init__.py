"""Controllers module for UnitDeck.

This module provides per-entity controllers for fetching service and
container snapshots and issuing lifecycle actions against the backend.
"""

from __future__ import annotations

# Base classes
from unitdeck.controllers.base import (
    ActionError,
    ActionResult,
    BaseController,
    BulkActionResult,
    run_bulk_action,
)

# Containers domain
from unitdeck.controllers.containers import ContainerController

# Systemd domain
from unitdeck.controllers.systemd import SystemdController

__all__ = [
    "ActionError",
    "ActionResult",
    "BaseController",
    "BulkActionResult",
    "ContainerController",
    "SystemdController",
    "run_bulk_action",
]
