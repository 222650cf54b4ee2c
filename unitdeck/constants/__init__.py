"""Constants module for UnitDeck.

Centralized constants organized by domain:
- enums.py: All Enum class definitions
- values.py: Scalar constants (strings, event names, delimiters)
- timeouts.py: Timeout values (seconds)
- limits.py: Limit values (max/min)
- defaults.py: Default values for settings
"""

from unitdeck.constants.defaults import (
    API_URL_DEFAULT,
    LOG_LINES_DEFAULT,
    METRICS_MAX_POINTS_DEFAULT,
    RETRY_COUNT_DEFAULT,
    RETRY_DELAY_MS_DEFAULT,
)
from unitdeck.constants.enums import (
    ContainerStatusFilter,
    EntityAction,
    EntityKind,
    FetchState,
    ServiceStatusFilter,
    TailerState,
)
from unitdeck.constants.timeouts import API_REQUEST_TIMEOUT
from unitdeck.constants.values import APP_SUB_TITLE, APP_TITLE

__all__ = [
    "API_REQUEST_TIMEOUT",
    "API_URL_DEFAULT",
    "APP_SUB_TITLE",
    "APP_TITLE",
    "ContainerStatusFilter",
    "EntityAction",
    "EntityKind",
    "FetchState",
    "LOG_LINES_DEFAULT",
    "METRICS_MAX_POINTS_DEFAULT",
    "RETRY_COUNT_DEFAULT",
    "RETRY_DELAY_MS_DEFAULT",
    "ServiceStatusFilter",
    "TailerState",
]
