"""Container detail screen."""

from __future__ import annotations

from rich.console import Group
from rich.table import Table
from rich.text import Text
from textual.app import ComposeResult
from textual.containers import VerticalScroll
from textual.widgets import Static

from unitdeck.constants.enums import EntityAction
from unitdeck.context import AppContext
from unitdeck.keyboard import CONTAINER_DETAIL_SCREEN_BINDINGS
from unitdeck.models.core.container_info import ContainerInfo
from unitdeck.screens.base_screen import BaseScreen
from unitdeck.screens.containers.containers_screen import container_state_text, format_ports
from unitdeck.sync.log_stream import LogTarget
from unitdeck.sync.metrics_history import MetricsHistory
from unitdeck.sync.polling import PollingSubscription, ResourceKey
from unitdeck.utils.formatting import format_bytes, format_cpu
from unitdeck.widgets import MetricsCharts


def build_container_details(container: ContainerInfo) -> Group:
    status = container.status
    overview = Table.grid(padding=(0, 2))
    overview.add_column(style="bold")
    overview.add_column()
    overview.add_row("Name", container.display_name)
    overview.add_row("ID", container.id[:12])
    overview.add_row("Image", container.image or "-")
    overview.add_row("Command", container.command or "-")
    overview.add_row("Created", container.created or "-")
    overview.add_row("State", container_state_text(container))
    overview.add_row("PID", str(status.pid) if status.pid else "-")
    overview.add_row("Started", status.started_at or "-")
    if not status.running:
        overview.add_row("Finished", status.finished_at or "-")
        overview.add_row("Exit code", "-" if status.exit_code is None else str(status.exit_code))
    if status.oom_killed:
        overview.add_row("OOM killed", Text("yes", style="bold red"))
    if status.error:
        overview.add_row("Error", Text(status.error, style="red"))
    overview.add_row("CPU", format_cpu(container.cpu_usage))
    overview.add_row("Memory", format_bytes(container.memory_usage))
    overview.add_row("Ports", format_ports(container.ports))

    sections: list[Table | Text] = [overview]
    if container.networks:
        networks = Table(title="Networks", expand=True)
        for column in ("Network", "IP", "Gateway", "MAC"):
            networks.add_column(column)
        for name, network in sorted(container.networks.items()):
            networks.add_row(name, network.ip_address, network.gateway, network.mac_address)
        sections.append(networks)
    if container.mounts:
        mounts = Table(title="Mounts", expand=True)
        for column in ("Source", "Destination", "Mode"):
            mounts.add_column(column)
        for mount in container.mounts:
            mounts.add_row(mount.source, mount.destination, mount.mode or "-")
        sections.append(mounts)
    if container.labels:
        labels = Table(title="Labels", expand=True)
        labels.add_column("Key")
        labels.add_column("Value")
        for key, value in sorted(container.labels.items()):
            labels.add_row(key, value)
        sections.append(labels)
    if container.environment:
        sections.append(Text("Environment\n", style="bold") + Text("\n".join(container.environment)))
    return Group(*sections)


class ContainerDetailScreen(BaseScreen):
    """One container, refreshed on the container interval."""

    BINDINGS = CONTAINER_DETAIL_SCREEN_BINDINGS

    DEFAULT_CSS = """
    #container-details {
        height: auto;
        padding: 1 2;
    }
    """

    def __init__(self, context: AppContext, container_id: str) -> None:
        super().__init__(context)
        self.container_id = container_id
        self.metrics = MetricsHistory(context.settings.metrics_max_points)
        self.subscription: PollingSubscription | None = None

    @property
    def screen_title(self) -> str:
        return f"Container {self.container_id[:12]}"

    def compose_content(self) -> ComposeResult:
        with VerticalScroll():
            yield MetricsCharts(id="container-metrics")
            yield Static(id="container-details")

    def start_pipelines(self) -> None:
        self.subscription = self.polling.subscribe(
            ResourceKey.container(self.container_id), on_update=self._apply_subscription
        )

    def _apply_subscription(self, subscription: PollingSubscription) -> None:
        self.sync_loading_state(subscription)
        container: ContainerInfo | None = subscription.data
        if container is None:
            return
        if subscription.error is None:
            self.metrics.on_snapshot(container)
        self.query_one("#container-details", Static).update(build_container_details(container))
        self.query_one("#container-metrics", MetricsCharts).update_history(self.metrics)

    def _run_action(self, action: EntityAction) -> None:
        self.run_entity_action(
            self.context.containers, action, [self.container_id], subscription=self.subscription
        )

    def action_start(self) -> None:
        self._run_action(EntityAction.START)

    def action_stop(self) -> None:
        self._run_action(EntityAction.STOP)

    def action_restart(self) -> None:
        self._run_action(EntityAction.RESTART)

    def action_show_logs(self) -> None:
        from unitdeck.screens.logs import LogsScreen

        self.app.push_screen(LogsScreen(self.context, LogTarget.container(self.container_id)))

    def action_exec(self) -> None:
        from unitdeck.screens.containers.exec_screen import ExecScreen

        self.app.push_screen(ExecScreen(self.context, self.container_id))
