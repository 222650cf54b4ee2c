"""Container list screen."""

from __future__ import annotations

from typing import Any

from rich.text import Text

from unitdeck.constants.enums import ContainerStatusFilter
from unitdeck.controllers.containers import ContainerController
from unitdeck.keyboard import CONTAINERS_SCREEN_BINDINGS
from unitdeck.models.core.container_info import ContainerInfo, ContainerListInfo
from unitdeck.screens.list_screen import EntityListScreen
from unitdeck.sync.list_filters import container_status_counts, filter_containers
from unitdeck.sync.log_stream import LogTarget
from unitdeck.sync.polling import ResourceKey
from unitdeck.utils.formatting import format_bytes, format_cpu


def container_state_text(container: ContainerInfo) -> Text:
    status = container.status
    if status.running:
        return Text(status.state, style="green")
    if status.oom_killed or (status.exit_code not in (None, 0)):
        label = f"{status.state} ({status.exit_code})" if status.exit_code is not None else status.state
        return Text(label, style="bold red")
    return Text(status.state, style="dim")


def format_ports(ports: str | list[dict[str, Any]]) -> str:
    """Ports as sent by the backend: a preformatted string or port mappings."""
    if isinstance(ports, str):
        return ports or "-"
    mappings = []
    for mapping in ports:
        private = mapping.get("privatePort") or mapping.get("PrivatePort")
        public = mapping.get("publicPort") or mapping.get("PublicPort")
        proto = mapping.get("type") or mapping.get("Type") or "tcp"
        mappings.append(f"{public}->{private}/{proto}" if public else f"{private}/{proto}")
    return ", ".join(mappings) or "-"


class ContainersScreen(EntityListScreen):
    """All containers with their status and resource usage."""

    BINDINGS = CONTAINERS_SCREEN_BINDINGS
    COLUMNS = ("Name", "Image", "State", "CPU", "Memory", "Ports")
    STATUS_FILTERS = tuple(ContainerStatusFilter)
    SEARCH_PLACEHOLDER = "Search containers by name or image..."

    @property
    def screen_title(self) -> str:
        return "Containers"

    @property
    def controller(self) -> ContainerController:
        return self.context.containers

    @property
    def resource_key(self) -> ResourceKey:
        return ResourceKey.containers()

    def list_items(self, data: ContainerListInfo) -> list[ContainerInfo]:
        return data.containers

    def filter_items(self, items: list[Any]) -> list[ContainerInfo]:
        return filter_containers(items, self.search_query, self.status_filter)  # type: ignore[arg-type]

    def status_counts(self, items: list[Any]) -> dict[str, int]:
        return container_status_counts(items)

    def row_for(self, item: ContainerInfo) -> tuple[Any, ...]:
        return (
            item.display_name,
            item.image,
            container_state_text(item),
            format_cpu(item.cpu_usage),
            format_bytes(item.memory_usage),
            format_ports(item.ports),
        )

    def open_detail(self, entity_id: str) -> None:
        from unitdeck.screens.containers.container_detail_screen import ContainerDetailScreen

        self.app.push_screen(ContainerDetailScreen(self.context, entity_id))

    def open_logs(self, entity_id: str) -> None:
        from unitdeck.screens.logs import LogsScreen

        self.app.push_screen(LogsScreen(self.context, LogTarget.container(entity_id)))

    def action_exec(self) -> None:
        entity_id = self.current_entity_id()
        if not entity_id:
            return
        from unitdeck.screens.containers.exec_screen import ExecScreen

        self.app.push_screen(ExecScreen(self.context, entity_id))
