from unitdeck.controllers.containers.controller import ContainerController

__all__ = ["ContainerController"]
