"""Service detail screen - unit properties, live metrics and lifecycle actions."""

from __future__ import annotations

import logging

from rich.table import Table
from rich.text import Text
from textual.app import ComposeResult
from textual.containers import VerticalScroll
from textual.widgets import Static

from unitdeck.constants.enums import EntityAction
from unitdeck.context import AppContext
from unitdeck.keyboard import SERVICE_DETAIL_SCREEN_BINDINGS
from unitdeck.models.core.service_info import ServiceDetailsInfo
from unitdeck.screens.base_screen import BaseScreen
from unitdeck.screens.services.services_screen import service_state_text
from unitdeck.sync.log_stream import LogTarget
from unitdeck.sync.metrics_history import MetricsHistory
from unitdeck.sync.polling import PollingSubscription, ResourceKey
from unitdeck.utils.formatting import format_bytes, format_cpu, format_duration
from unitdeck.widgets import MetricsCharts

logger = logging.getLogger(__name__)


def _value(value: object) -> str:
    if value is None or value == "" or value == []:
        return "-"
    if isinstance(value, list):
        return "\n".join(str(item) for item in value)
    return str(value)


def build_details_table(details: ServiceDetailsInfo) -> Table:
    """Two-column property table for one service."""
    service = details.service
    table = Table.grid(padding=(0, 2))
    table.add_column(style="bold")
    table.add_column()

    rows: list[tuple[str, object]] = [
        ("Name", service.name),
        ("Description", service.description),
        ("State", service_state_text(service)),
        ("Load state", service.load_state),
        ("Uptime", format_duration(service.uptime) if service.is_running else None),
        ("Since", details.since),
        ("CPU", format_cpu(service.cpu_usage)),
        ("Memory", format_bytes(service.memory_usage)),
        ("Memory peak", format_bytes(details.memory_peak)),
        ("Main PID", details.main_pid),
        ("Main process", details.main_process),
        ("Tasks", f"{_value(details.tasks)} / {_value(details.tasks_limit)}"),
        ("IO read / write", f"{format_bytes(details.io_read_bytes)} / {format_bytes(details.io_write_bytes)}"),
        ("IP in / out", f"{format_bytes(details.ip_ingress_bytes)} / {format_bytes(details.ip_egress_bytes)}"),
        ("CGroup", details.c_group),
        ("Unit file", details.fragment_path),
        ("Drop-ins", details.drop_in),
        ("Docs", details.docs),
        ("Triggered by", details.triggered_by),
        ("Invocation", details.invocation),
    ]
    for label, value in rows:
        table.add_row(label, value if isinstance(value, Text) else _value(value))
    return table


class ServiceDetailScreen(BaseScreen):
    """One service, refreshed on the service-detail interval."""

    BINDINGS = SERVICE_DETAIL_SCREEN_BINDINGS

    DEFAULT_CSS = """
    #service-details {
        height: auto;
        padding: 1 2;
    }

    #service-processes {
        height: auto;
        padding: 0 2 1 2;
        color: $text-muted;
    }
    """

    def __init__(self, context: AppContext, service_name: str) -> None:
        super().__init__(context)
        self.service_name = service_name
        self.metrics = MetricsHistory(context.settings.metrics_max_points)
        self.subscription: PollingSubscription | None = None

    @property
    def screen_title(self) -> str:
        return f"Service {self.service_name}"

    def compose_content(self) -> ComposeResult:
        with VerticalScroll():
            yield Static(id="service-details")
            yield MetricsCharts(id="service-metrics")
            yield Static(id="service-processes")

    def start_pipelines(self) -> None:
        self.subscription = self.polling.subscribe(
            ResourceKey.service(self.service_name), on_update=self._apply_subscription
        )

    def _apply_subscription(self, subscription: PollingSubscription) -> None:
        self.sync_loading_state(subscription)
        details: ServiceDetailsInfo | None = subscription.data
        if details is None:
            return
        # A failed refresh leaves the previous snapshot; sample fresh ones only.
        if subscription.error is None:
            self.metrics.on_snapshot(details)

        self.query_one("#service-details", Static).update(build_details_table(details))
        self.query_one("#service-metrics", MetricsCharts).update_history(self.metrics)
        processes = "\n".join(details.processes) if details.processes else "No processes"
        self.query_one("#service-processes", Static).update(Text(f"Processes:\n{processes}"))

    # =========================================================================
    # Actions
    # =========================================================================

    def _run_action(self, action: EntityAction) -> None:
        self.run_entity_action(
            self.context.systemd, action, [self.service_name], subscription=self.subscription
        )

    def action_start(self) -> None:
        self._run_action(EntityAction.START)

    def action_stop(self) -> None:
        self._run_action(EntityAction.STOP)

    def action_restart(self) -> None:
        self._run_action(EntityAction.RESTART)

    def action_show_logs(self) -> None:
        from unitdeck.screens.logs import LogsScreen

        self.app.push_screen(LogsScreen(self.context, LogTarget.service(self.service_name)))
