"""Systemd service screens."""

from unitdeck.screens.services.service_detail_screen import ServiceDetailScreen
from unitdeck.screens.services.services_screen import ServicesScreen

__all__ = ["ServiceDetailScreen", "ServicesScreen"]
