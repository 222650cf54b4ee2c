"""Timeout constants for the TUI.

All timeout and interval values for API requests, async operations, and refresh cycles.
"""

from typing import Final

# ============================================================================
# API timeouts (float, in seconds)
# ============================================================================

API_REQUEST_TIMEOUT: Final = 30.0
API_CONNECT_TIMEOUT: Final = 10.0

# Log streams stay open indefinitely; the backend sends a heartbeat every 5s.
STREAM_READ_TIMEOUT: Final = None

__all__ = [
    "API_CONNECT_TIMEOUT",
    "API_REQUEST_TIMEOUT",
    "STREAM_READ_TIMEOUT",
]
