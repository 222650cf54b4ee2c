"""Synchronization core: polling subscriptions, log tailing and metrics history."""

from unitdeck.sync.exec_session import ExecSession
from unitdeck.sync.list_filters import (
    container_status_counts,
    filter_containers,
    filter_services,
    service_status_counts,
)
from unitdeck.sync.log_stream import LogStream, LogTarget
from unitdeck.sync.log_tailer import LogTailer
from unitdeck.sync.metrics_history import MetricsHistory
from unitdeck.sync.polling import PollingManager, PollingSubscription, ResourceKey

__all__ = [
    "ExecSession",
    "LogStream",
    "LogTailer",
    "LogTarget",
    "MetricsHistory",
    "PollingManager",
    "PollingSubscription",
    "ResourceKey",
    "container_status_counts",
    "filter_containers",
    "filter_services",
    "service_status_counts",
]
