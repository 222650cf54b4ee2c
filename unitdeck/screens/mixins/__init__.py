"""Screen mixins."""

from unitdeck.screens.mixins.worker_mixin import WorkerMixin

__all__ = ["WorkerMixin"]
