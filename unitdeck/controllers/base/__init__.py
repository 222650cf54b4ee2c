"""Base classes for controllers."""

from unitdeck.controllers.base.base_controller import (
    ActionError,
    ActionResult,
    BaseController,
)
from unitdeck.controllers.base.bulk_actions import BulkActionResult, run_bulk_action

__all__ = [
    "ActionError",
    "ActionResult",
    "BaseController",
    "BulkActionResult",
    "run_bulk_action",
]
