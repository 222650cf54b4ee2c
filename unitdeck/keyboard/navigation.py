"""Screen-specific keyboard bindings."""

from typing import Annotated

ScreenBinding = Annotated[tuple[str, str, str], "key, action, description"]

# ============================================================================
# SCREEN BINDINGS
# ============================================================================

BASE_SCREEN_BINDINGS: list[ScreenBinding] = [
    ("escape", "back", "Back"),
    ("r", "refresh", "Refresh"),
]

# ============================================================================
# List Screen Bindings
# ============================================================================

SERVICES_SCREEN_BINDINGS: list[ScreenBinding] = [
    *BASE_SCREEN_BINDINGS,
    ("slash", "focus_search", "Search"),
    ("f", "cycle_status_filter", "Status"),
    ("space", "toggle_selection", "Select"),
    ("a", "select_all", "Select all"),
    ("s", "start", "Start"),
    ("x", "stop", "Stop"),
    ("R", "restart", "Restart"),
    ("l", "show_logs", "Logs"),
    ("p", "toggle_auto_refresh", "Auto refresh"),
]

CONTAINERS_SCREEN_BINDINGS: list[ScreenBinding] = [
    *SERVICES_SCREEN_BINDINGS,
    ("e", "exec", "Exec"),
]

# ============================================================================
# Detail Screen Bindings
# ============================================================================

SERVICE_DETAIL_SCREEN_BINDINGS: list[ScreenBinding] = [
    *BASE_SCREEN_BINDINGS,
    ("s", "start", "Start"),
    ("x", "stop", "Stop"),
    ("R", "restart", "Restart"),
    ("l", "show_logs", "Logs"),
]

CONTAINER_DETAIL_SCREEN_BINDINGS: list[ScreenBinding] = [
    *SERVICE_DETAIL_SCREEN_BINDINGS,
    ("e", "exec", "Exec"),
]

# ============================================================================
# Streaming Screen Bindings
# ============================================================================

LOGS_SCREEN_BINDINGS: list[ScreenBinding] = [
    ("escape", "back", "Back"),
    ("r", "refresh", "Clear & restart"),
    ("p", "toggle_streaming", "Pause/Resume"),
    ("slash", "focus_search", "Filter"),
    ("plus", "more_lines", "More lines"),
    ("minus", "fewer_lines", "Fewer lines"),
    ("d", "download", "Download"),
]

EXEC_SCREEN_BINDINGS: list[ScreenBinding] = [
    ("escape", "back", "Back"),
    ("ctrl+c", "cancel_exec", "Cancel"),
]

__all__ = [
    "BASE_SCREEN_BINDINGS",
    "CONTAINERS_SCREEN_BINDINGS",
    "CONTAINER_DETAIL_SCREEN_BINDINGS",
    "EXEC_SCREEN_BINDINGS",
    "LOGS_SCREEN_BINDINGS",
    "SERVICES_SCREEN_BINDINGS",
    "SERVICE_DETAIL_SCREEN_BINDINGS",
]
