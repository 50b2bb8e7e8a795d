"""Clickable control buttons shown in the HUD panel."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, List, Optional

import pygame


@dataclass
class Button:
    """A labelled rectangle that runs an action when clicked."""

    key: str
    label: str
    rect: pygame.Rect
    action: Callable[[], None]


@dataclass
class ControlBar:
    """Track the HUD buttons and route clicks to them."""

    buttons: List[Button] = field(default_factory=list)

    def add(
        self,
        key: str,
        label: str,
        rect: pygame.Rect,
        action: Callable[[], None],
    ) -> Button:
        button = Button(key, label, rect, action)
        self.buttons.append(button)
        return button

    def get(self, key: str) -> Button:
        for button in self.buttons:
            if button.key == key:
                return button
        raise KeyError(f"Unknown button '{key}'")

    def set_label(self, key: str, label: str) -> None:
        self.get(key).label = label

    def button_at(self, pos: tuple[int, int]) -> Optional[Button]:
        for button in self.buttons:
            if button.rect.collidepoint(pos):
                return button
        return None

    def click(self, key: str) -> None:
        self.get(key).action()


__all__ = ["Button", "ControlBar"]
