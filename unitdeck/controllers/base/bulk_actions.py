"""Sequential bulk lifecycle actions with aggregate reporting."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Iterable
from dataclasses import dataclass, field
from typing import Any

from unitdeck.constants.enums import EntityAction, EntityKind

logger = logging.getLogger(__name__)


@dataclass
class BulkActionResult:
    """Aggregate outcome of a bulk action.

    Attributes:
        action: The action applied.
        kind: Entity kind the ids refer to.
        succeeded: Ids whose action was accepted, in execution order.
        failed: Id to error message for every rejected action.
    """

    action: EntityAction
    kind: EntityKind
    succeeded: list[str] = field(default_factory=list)
    failed: dict[str, str] = field(default_factory=dict)

    @property
    def success_count(self) -> int:
        return len(self.succeeded)

    @property
    def failure_count(self) -> int:
        return len(self.failed)

    @property
    def total(self) -> int:
        return self.success_count + self.failure_count

    @property
    def severity(self) -> str:
        """Notification severity: information, warning or error."""
        if self.total == 0:
            return "warning"
        if self.failure_count == 0:
            return "information"
        if self.success_count == 0:
            return "error"
        return "warning"

    @property
    def summary(self) -> str:
        noun = f"{self.kind.value}s"
        verb = self.action.value
        if self.total == 0:
            return f"No valid {noun} selected"
        if self.failure_count == 0:
            return f"Successfully {self.action.past.lower()} {self.success_count} {noun}"
        if self.success_count == 0:
            return f"Failed to {verb} all {self.failure_count} {noun}"
        return (
            f"{self.action.past} {self.success_count} {noun}, "
            f"failed to {verb} {self.failure_count} {noun}"
        )


async def run_bulk_action(
    action: EntityAction,
    kind: EntityKind,
    entity_ids: Iterable[str],
    execute: Callable[[EntityAction, str], Awaitable[Any]],
) -> BulkActionResult:
    """Run ``execute`` for each id sequentially.

    A failing entity is recorded and the remaining ids still run. Empty ids
    are skipped without being counted.
    """
    result = BulkActionResult(action=action, kind=kind)
    for entity_id in entity_ids:
        if not entity_id:
            continue
        try:
            await execute(action, entity_id)
        except Exception as exc:
            logger.error("Bulk %s failed for %s %s: %s", action.value, kind.value, entity_id, exc)
            result.failed[entity_id] = str(exc)
        else:
            result.succeeded.append(entity_id)

    logger.info(
        "Bulk %s finished: %d succeeded, %d failed",
        action.value,
        result.success_count,
        result.failure_count,
    )
    return result
