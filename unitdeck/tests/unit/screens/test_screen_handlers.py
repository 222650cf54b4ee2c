"""Screen callbacks must stay out of Textual's message handler namespace."""

from __future__ import annotations

import pytest
from textual.screen import Screen

from unitdeck.screens import (
    ContainerDetailScreen,
    ContainersScreen,
    ExecScreen,
    LogsScreen,
    ServiceDetailScreen,
    ServicesScreen,
)
from unitdeck.screens.base_screen import BaseScreen
from unitdeck.screens.list_screen import EntityListScreen

SCREEN_CLASSES = [
    BaseScreen,
    EntityListScreen,
    ServicesScreen,
    ContainersScreen,
    ServiceDetailScreen,
    ContainerDetailScreen,
    LogsScreen,
    ExecScreen,
]


@pytest.mark.unit
@pytest.mark.parametrize("screen_class", SCREEN_CLASSES, ids=lambda cls: cls.__name__)
class TestScreenHandlers:
    """Pipeline callbacks must not shadow Textual's private handlers."""

    def test_no_private_handlers_defined(self, screen_class: type[Screen]) -> None:
        shadowing = [name for name in vars(screen_class) if name.startswith("_on_")]
        assert shadowing == []

    def test_update_handler_is_textual_one(self, screen_class: type[Screen]) -> None:
        assert "_on_update" not in vars(screen_class)
        assert getattr(screen_class, "_on_update", None) is getattr(Screen, "_on_update", None)
