from unitdeck.controllers.systemd.controller import SystemdController

__all__ = ["SystemdController"]
