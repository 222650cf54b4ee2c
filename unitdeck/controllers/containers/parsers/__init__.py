from unitdeck.controllers.containers.parsers.container_parser import ContainerParser

__all__ = ["ContainerParser"]
