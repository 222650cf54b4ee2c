"""Service list screen."""

from __future__ import annotations

from typing import Any

from rich.text import Text

from unitdeck.constants.enums import ServiceStatusFilter
from unitdeck.controllers.systemd import SystemdController
from unitdeck.keyboard import SERVICES_SCREEN_BINDINGS
from unitdeck.models.core.service_info import ServiceInfo, ServiceListInfo
from unitdeck.screens.list_screen import EntityListScreen
from unitdeck.sync.list_filters import filter_services, service_status_counts
from unitdeck.sync.log_stream import LogTarget
from unitdeck.sync.polling import ResourceKey
from unitdeck.utils.formatting import format_bytes, format_cpu, format_duration


def service_state_text(service: ServiceInfo) -> Text:
    """``active (running)`` styled by health."""
    label = f"{service.active_state} ({service.sub_state})" if service.sub_state else service.active_state
    if service.is_running:
        style = "green"
    elif service.active_state == "failed":
        style = "bold red"
    elif service.active_state == "active":
        style = "yellow"
    else:
        style = "dim"
    return Text(label or "-", style=style)


class ServicesScreen(EntityListScreen):
    """All systemd services with live CPU and memory."""

    BINDINGS = SERVICES_SCREEN_BINDINGS
    COLUMNS = ("Name", "State", "CPU", "Memory", "Uptime", "Description")
    STATUS_FILTERS = tuple(ServiceStatusFilter)
    SEARCH_PLACEHOLDER = "Search services by name or description..."

    @property
    def screen_title(self) -> str:
        return "Services"

    @property
    def controller(self) -> SystemdController:
        return self.context.systemd

    @property
    def resource_key(self) -> ResourceKey:
        return ResourceKey.services()

    def list_items(self, data: ServiceListInfo) -> list[ServiceInfo]:
        return data.services

    def filter_items(self, items: list[Any]) -> list[ServiceInfo]:
        return filter_services(items, self.search_query, self.status_filter)  # type: ignore[arg-type]

    def status_counts(self, items: list[Any]) -> dict[str, int]:
        return service_status_counts(items)

    def row_for(self, item: ServiceInfo) -> tuple[Any, ...]:
        return (
            item.name,
            service_state_text(item),
            format_cpu(item.cpu_usage),
            format_bytes(item.memory_usage),
            format_duration(item.uptime) if item.is_running else "-",
            item.description,
        )

    def open_detail(self, entity_id: str) -> None:
        from unitdeck.screens.services.service_detail_screen import ServiceDetailScreen

        self.app.push_screen(ServiceDetailScreen(self.context, entity_id))

    def open_logs(self, entity_id: str) -> None:
        from unitdeck.screens.logs import LogsScreen

        self.app.push_screen(LogsScreen(self.context, LogTarget.service(entity_id)))
