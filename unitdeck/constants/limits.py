"""Limit and threshold constants for the TUI.

All limit values, thresholds, and validation ranges.
"""

from typing import Final

# ============================================================================
# Validation limits
# ============================================================================

REFRESH_INTERVAL_MS_MIN: Final = 1_000
RETRY_COUNT_MIN: Final = 0
RETRY_COUNT_MAX: Final = 10
LOG_LINES_MIN: Final = 1
LOG_LINES_MAX: Final = 10_000
METRICS_MAX_POINTS_MIN: Final = 2
METRICS_MAX_POINTS_MAX: Final = 1_000

# ============================================================================
# Display limits
# ============================================================================

# Values above this cannot be represented exactly and mean "unset" in systemd.
MAX_SAFE_BYTES: Final = 2**53 - 1

__all__ = [
    "LOG_LINES_MAX",
    "LOG_LINES_MIN",
    "MAX_SAFE_BYTES",
    "METRICS_MAX_POINTS_MAX",
    "METRICS_MAX_POINTS_MIN",
    "REFRESH_INTERVAL_MS_MIN",
    "RETRY_COUNT_MAX",
    "RETRY_COUNT_MIN",
]
