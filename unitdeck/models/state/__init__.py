from unitdeck.models.state.app_settings import AppSettings, ConfigError, ConfigLoadError
from unitdeck.models.state.config_manager import ConfigManager
from unitdeck.models.state.subscription_state import SubscriptionState

__all__ = [
    "AppSettings",
    "ConfigError",
    "ConfigLoadError",
    "ConfigManager",
    "SubscriptionState",
]
