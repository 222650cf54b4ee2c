"""Per-pipeline subscription state."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SubscriptionState:
    """Transient state of one polling or streaming pipeline instance."""

    is_active: bool = False
    last_error: str | None = None
