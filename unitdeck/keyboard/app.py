"""App-level keyboard bindings that work from any screen."""

from textual.binding import Binding

# ============================================================================
# Textual Binding objects for app-level bindings
# ============================================================================

APP_BINDINGS: list[Binding] = [
    Binding("f1", "nav_services", "Services"),
    Binding("f2", "nav_containers", "Containers"),
    Binding("?", "show_help", "Help"),
    Binding("q", "quit", "Quit", priority=True),
]

__all__ = [
    "APP_BINDINGS",
]
