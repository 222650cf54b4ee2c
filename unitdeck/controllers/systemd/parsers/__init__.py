from unitdeck.controllers.systemd.parsers.service_parser import ServiceParser

__all__ = ["ServiceParser"]
