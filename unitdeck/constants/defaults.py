"""Default values for settings.

All default values used in AppSettings model and validation fallback values.
"""

from typing import Final

# ============================================================================
# Backend defaults
# ============================================================================

API_URL_DEFAULT: Final = "http://localhost:9733/api"
API_URL_ENV_VAR: Final = "UNITDECK_API_URL"

# ============================================================================
# Refresh defaults (milliseconds)
# ============================================================================

SERVICE_LIST_REFRESH_MS_DEFAULT: Final = 10_000
SERVICE_DETAIL_REFRESH_MS_DEFAULT: Final = 5_000
CONTAINER_REFRESH_MS_DEFAULT: Final = 10_000

# ============================================================================
# Retry defaults
# ============================================================================

RETRY_COUNT_DEFAULT: Final = 3
RETRY_DELAY_MS_DEFAULT: Final = 1_000

# ============================================================================
# Logs and metrics defaults
# ============================================================================

LOG_LINES_DEFAULT: Final = 100
LOG_LINES_CHOICES: Final = (50, 100, 200, 500, 1000)
METRICS_MAX_POINTS_DEFAULT: Final = 20
LOG_LEVEL_DEFAULT: Final = "INFO"

__all__ = [
    "API_URL_DEFAULT",
    "API_URL_ENV_VAR",
    "CONTAINER_REFRESH_MS_DEFAULT",
    "LOG_LEVEL_DEFAULT",
    "LOG_LINES_CHOICES",
    "LOG_LINES_DEFAULT",
    "METRICS_MAX_POINTS_DEFAULT",
    "RETRY_COUNT_DEFAULT",
    "RETRY_DELAY_MS_DEFAULT",
    "SERVICE_DETAIL_REFRESH_MS_DEFAULT",
    "SERVICE_LIST_REFRESH_MS_DEFAULT",
]
