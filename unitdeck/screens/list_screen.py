"""Shared behaviour of the service and container list screens.

The table is rebuilt from the latest snapshot after every settled fetch;
search text and the status filter are applied on top of the snapshot and
never change it. Selected rows drive the bulk actions.
"""

from __future__ import annotations

import logging
from abc import abstractmethod
from collections.abc import Sequence
from enum import Enum
from typing import Any, ClassVar

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.coordinate import Coordinate
from textual.css.query import NoMatches
from textual.widgets import DataTable, Input, Static

from unitdeck.constants.enums import EntityAction
from unitdeck.context import AppContext
from unitdeck.controllers.base import BaseController
from unitdeck.screens.base_screen import BaseScreen
from unitdeck.sync.polling import PollingSubscription, ResourceKey

logger = logging.getLogger(__name__)

SELECTED_MARK = "●"


class EntityListScreen(BaseScreen):
    """Polled, filterable, multi-select table of entities."""

    DEFAULT_CSS = """
    #list-toolbar {
        height: 3;
    }

    #search-input {
        width: 1fr;
    }

    #status-counts {
        width: auto;
        padding: 1 2;
    }

    #entity-table {
        height: 1fr;
    }

    #selection-info {
        height: 1;
        padding: 0 1;
        color: $text-muted;
    }
    """

    COLUMNS: ClassVar[tuple[str, ...]] = ()
    STATUS_FILTERS: ClassVar[Sequence[Enum]] = ()
    SEARCH_PLACEHOLDER: ClassVar[str] = "Search..."

    def __init__(self, context: AppContext) -> None:
        super().__init__(context)
        self.search_query = ""
        self.status_filter: Enum | None = None
        self.selected: set[str] = set()
        self.subscription: PollingSubscription | None = None

    # =========================================================================
    # Hooks
    # =========================================================================

    @property
    @abstractmethod
    def controller(self) -> BaseController: ...

    @property
    @abstractmethod
    def resource_key(self) -> ResourceKey: ...

    @abstractmethod
    def list_items(self, data: Any) -> list[Any]:
        """Entities of a snapshot."""

    @abstractmethod
    def filter_items(self, items: list[Any]) -> list[Any]:
        """Apply search and status filter."""

    @abstractmethod
    def status_counts(self, items: list[Any]) -> dict[str, int]: ...

    @abstractmethod
    def row_for(self, item: Any) -> tuple[Any, ...]:
        """Table cells of one entity, without the selection column."""

    @abstractmethod
    def open_detail(self, entity_id: str) -> None: ...

    @abstractmethod
    def open_logs(self, entity_id: str) -> None: ...

    # =========================================================================
    # Composition and lifecycle
    # =========================================================================

    def compose_content(self) -> ComposeResult:
        with Horizontal(id="list-toolbar"):
            yield Input(placeholder=self.SEARCH_PLACEHOLDER, id="search-input")
            yield Static("", id="status-counts")
        yield DataTable(id="entity-table", cursor_type="row", zebra_stripes=True)
        yield Static("", id="selection-info")

    def on_mount(self) -> None:
        table = self.query_one("#entity-table", DataTable)
        table.add_columns(" ", *self.COLUMNS)
        table.focus()

    def start_pipelines(self) -> None:
        self.subscription = self.polling.subscribe(
            self.resource_key, on_update=self._apply_subscription
        )

    def _apply_subscription(self, subscription: PollingSubscription) -> None:
        self.sync_loading_state(subscription)
        self.render_table()

    # =========================================================================
    # Rendering
    # =========================================================================

    @property
    def all_items(self) -> list[Any]:
        if self.subscription is None or self.subscription.data is None:
            return []
        return self.list_items(self.subscription.data)

    def render_table(self) -> None:
        try:
            table = self.query_one("#entity-table", DataTable)
        except NoMatches:
            return

        items = self.all_items
        visible = self.filter_items(items)
        self.selected &= {self.entity_id_of(item) for item in items}

        cursor_key = self.current_entity_id()
        table.clear()
        for item in visible:
            entity_id = self.entity_id_of(item)
            mark = SELECTED_MARK if entity_id in self.selected else ""
            table.add_row(mark, *self.row_for(item), key=entity_id)

        if cursor_key is not None:
            for index, item in enumerate(visible):
                if self.entity_id_of(item) == cursor_key:
                    table.move_cursor(row=index)
                    break

        counts = self.status_counts(items)
        summary = "  ".join(f"{name}: {count}" for name, count in counts.items())
        self.query_one("#status-counts", Static).update(f"total: {len(items)}  {summary}")
        self._update_selection_info(len(visible), len(items))

    def _update_selection_info(self, shown: int, total: int) -> None:
        parts = [f"Showing {shown} of {total}"]
        if self.status_filter is not None:
            parts.append(f"status: {self.status_filter.name.lower()}")
        if self.search_query:
            parts.append(f'search: "{self.search_query}"')
        if self.selected:
            parts.append(f"{len(self.selected)} selected")
        if self.subscription is not None and not self.subscription.enabled:
            parts.append("auto refresh off")
        self.query_one("#selection-info", Static).update(Text(" | ".join(parts)))

    @staticmethod
    def entity_id_of(item: Any) -> str:
        return item.entity_id

    def current_entity_id(self) -> str | None:
        table = self.query_one("#entity-table", DataTable)
        if table.row_count == 0:
            return None
        row_key, _ = table.coordinate_to_cell_key(Coordinate(table.cursor_row, 0))
        return row_key.value

    def target_ids(self) -> list[str]:
        """Selected ids, or the row under the cursor when nothing is selected."""
        if self.selected:
            return sorted(self.selected)
        current = self.current_entity_id()
        return [current] if current else []

    # =========================================================================
    # Events
    # =========================================================================

    def on_input_changed(self, event: Input.Changed) -> None:
        if event.input.id != "search-input":
            return
        self.search_query = event.value
        self.render_table()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if event.input.id == "search-input":
            self.query_one("#entity-table", DataTable).focus()

    def on_data_table_row_selected(self, event: DataTable.RowSelected) -> None:
        if event.row_key.value:
            self.open_detail(event.row_key.value)

    # =========================================================================
    # Actions
    # =========================================================================

    def action_focus_search(self) -> None:
        self.query_one("#search-input", Input).focus()

    def action_cycle_status_filter(self) -> None:
        options: list[Enum | None] = [None, *self.STATUS_FILTERS]
        position = options.index(self.status_filter)
        self.status_filter = options[(position + 1) % len(options)]
        self.render_table()

    def action_toggle_selection(self) -> None:
        entity_id = self.current_entity_id()
        if entity_id is None:
            return
        self.selected.symmetric_difference_update({entity_id})
        self.render_table()

    def action_select_all(self) -> None:
        visible = {self.entity_id_of(item) for item in self.filter_items(self.all_items)}
        if visible and visible <= self.selected:
            self.selected -= visible
        else:
            self.selected |= visible
        self.render_table()

    def action_start(self) -> None:
        self._run_action(EntityAction.START)

    def action_stop(self) -> None:
        self._run_action(EntityAction.STOP)

    def action_restart(self) -> None:
        self._run_action(EntityAction.RESTART)

    def _run_action(self, action: EntityAction) -> None:
        targets = self.target_ids()
        self.run_entity_action(
            self.controller, action, targets, subscription=self.subscription
        )
        self.selected.clear()

    def action_show_logs(self) -> None:
        entity_id = self.current_entity_id()
        if entity_id:
            self.open_logs(entity_id)

    def action_toggle_auto_refresh(self) -> None:
        if self.subscription is None:
            return
        self.subscription.set_enabled(not self.subscription.enabled)
        state = "on" if self.subscription.enabled else "off"
        self.notify(f"Auto refresh {state}")
        self.render_table()


__all__ = ["EntityListScreen", "SELECTED_MARK"]
