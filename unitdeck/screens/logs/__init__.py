"""Log streaming screens."""

from unitdeck.screens.logs.logs_screen import LogsScreen

__all__ = ["LogsScreen"]
