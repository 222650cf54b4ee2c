"""Scalar constants for the TUI."""

from typing import Final

APP_TITLE: Final = "UnitDeck"
APP_SUB_TITLE: Final = "systemd services and containers"

# ============================================================================
# Server-Sent Event names
# ============================================================================

SSE_EVENT_SERVICE_LOG: Final = "log"
SSE_EVENT_OUTPUT: Final = "output"
SSE_EVENT_ERROR: Final = "error"
SSE_EVENT_HEARTBEAT: Final = "heartbeat"
SSE_EVENT_CLOSE: Final = "close"
SSE_EVENT_DONE: Final = "done"
SSE_CONTENT_TYPE: Final = "text/event-stream"

# ============================================================================
# Log line delimiters
# ============================================================================

SERVICE_LOG_DELIMITER: Final = ": "
CONTAINER_LOG_DELIMITER: Final = " "
DOWNLOAD_LINE_SEPARATOR: Final = ": "

# ============================================================================
# Display strings
# ============================================================================

MEASURING_LABEL: Final = "Measuring..."
NOT_AVAILABLE_LABEL: Final = "N/A"
PLACEHOLDER: Final = "-"
COLLECTING_DATA_LABEL: Final = "Collecting data..."
STREAM_FAILED_MESSAGE: Final = "Failed to connect to log stream"
STREAM_UNSUPPORTED_MESSAGE: Final = "Server-Sent Events are not supported by the backend"

__all__ = [
    "APP_SUB_TITLE",
    "APP_TITLE",
    "COLLECTING_DATA_LABEL",
    "CONTAINER_LOG_DELIMITER",
    "DOWNLOAD_LINE_SEPARATOR",
    "MEASURING_LABEL",
    "NOT_AVAILABLE_LABEL",
    "PLACEHOLDER",
    "SERVICE_LOG_DELIMITER",
    "SSE_CONTENT_TYPE",
    "SSE_EVENT_CLOSE",
    "SSE_EVENT_DONE",
    "SSE_EVENT_ERROR",
    "SSE_EVENT_HEARTBEAT",
    "SSE_EVENT_OUTPUT",
    "SSE_EVENT_SERVICE_LOG",
    "STREAM_FAILED_MESSAGE",
    "STREAM_UNSUPPORTED_MESSAGE",
]
