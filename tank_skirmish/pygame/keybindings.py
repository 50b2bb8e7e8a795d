"""Keyboard mapping for the Tank Skirmish pygame client."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Dict, Optional

import pygame

from tank_skirmish.core.input import DOWN, FIRE, LEFT, RESET, RIGHT, UP

_FIELD_CODES = {
    "up": UP,
    "down": DOWN,
    "left": LEFT,
    "right": RIGHT,
    "fire": FIRE,
    "reset": RESET,
}


@dataclass
class KeyBindings:
    up: int = pygame.K_UP
    down: int = pygame.K_DOWN
    left: int = pygame.K_LEFT
    right: int = pygame.K_RIGHT
    fire: int = pygame.K_SPACE
    reset: int = pygame.K_r

    def codes(self) -> Dict[int, str]:
        """Map each bound pygame key to its logical input code."""

        return {getattr(self, f.name): _FIELD_CODES[f.name] for f in fields(self)}

    def code_for(self, key: int) -> Optional[str]:
        return self.codes().get(key)

    def format_key(self, key: int) -> str:
        return pygame.key.name(key).upper()


__all__ = ["KeyBindings"]
