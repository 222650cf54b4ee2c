"""Application settings models."""

from pydantic import BaseModel, ConfigDict, Field

from unitdeck.constants.defaults import (
    API_URL_DEFAULT,
    CONTAINER_REFRESH_MS_DEFAULT,
    LOG_LEVEL_DEFAULT,
    LOG_LINES_DEFAULT,
    METRICS_MAX_POINTS_DEFAULT,
    RETRY_COUNT_DEFAULT,
    RETRY_DELAY_MS_DEFAULT,
    SERVICE_DETAIL_REFRESH_MS_DEFAULT,
    SERVICE_LIST_REFRESH_MS_DEFAULT,
)
from unitdeck.constants.limits import (
    LOG_LINES_MAX,
    LOG_LINES_MIN,
    METRICS_MAX_POINTS_MAX,
    METRICS_MAX_POINTS_MIN,
    REFRESH_INTERVAL_MS_MIN,
    RETRY_COUNT_MAX,
    RETRY_COUNT_MIN,
)
from unitdeck.constants.timeouts import API_REQUEST_TIMEOUT


class AppSettings(BaseModel):
    """Application settings model with validation."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    # Backend
    api_url: str = API_URL_DEFAULT
    request_timeout_seconds: float = Field(default=API_REQUEST_TIMEOUT, gt=0)

    # Polling
    auto_refresh: bool = True
    service_list_refresh_ms: int = Field(
        default=SERVICE_LIST_REFRESH_MS_DEFAULT, ge=REFRESH_INTERVAL_MS_MIN
    )
    service_detail_refresh_ms: int = Field(
        default=SERVICE_DETAIL_REFRESH_MS_DEFAULT, ge=REFRESH_INTERVAL_MS_MIN
    )
    container_refresh_ms: int = Field(
        default=CONTAINER_REFRESH_MS_DEFAULT, ge=REFRESH_INTERVAL_MS_MIN
    )
    retry_count: int = Field(
        default=RETRY_COUNT_DEFAULT, ge=RETRY_COUNT_MIN, le=RETRY_COUNT_MAX
    )
    retry_delay_ms: int = Field(default=RETRY_DELAY_MS_DEFAULT, ge=0)

    # Logs and metrics
    log_lines: int = Field(default=LOG_LINES_DEFAULT, ge=LOG_LINES_MIN, le=LOG_LINES_MAX)
    metrics_max_points: int = Field(
        default=METRICS_MAX_POINTS_DEFAULT,
        ge=METRICS_MAX_POINTS_MIN,
        le=METRICS_MAX_POINTS_MAX,
    )
    download_dir: str = "."

    # Diagnostics
    log_level: str = LOG_LEVEL_DEFAULT
    log_file: str | None = None


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigLoadError(ConfigError):
    """Raised when settings fail to load."""
