"""Presentation constants for the pygame client."""

from __future__ import annotations

BACKGROUND_COLOR = "#0c1320"
GRID_COLOR = "#132033"
GRID_SPACING = 60
TANK_CORE_COLOR = "#0c1320"
BARREL_COLOR = "#e9f0f7"
TEXT_COLOR = "#e9f0f7"
TEXT_MUTED = "#9fb0c4"
PLAYER_BULLET_COLOR = "#5ec8ff"
ENEMY_BULLET_COLOR = "#ffb347"
PANEL_COLOR = (16, 24, 38)
BUTTON_COLOR = (34, 50, 74)
BUTTON_HOVER_COLOR = (52, 74, 106)
BUTTON_BORDER_COLOR = (94, 200, 255)
OVERLAY_RGBA = (0, 0, 0, 115)
PARTICLE_SIZE = 3

PANEL_HEIGHT = 64
DEFAULT_FPS = 60
AUTOSTART_DELAY_MS = 200.0
CAPTION = "Tank Skirmish"


__all__ = [
    "AUTOSTART_DELAY_MS",
    "BACKGROUND_COLOR",
    "BARREL_COLOR",
    "BUTTON_BORDER_COLOR",
    "BUTTON_COLOR",
    "BUTTON_HOVER_COLOR",
    "CAPTION",
    "DEFAULT_FPS",
    "ENEMY_BULLET_COLOR",
    "GRID_COLOR",
    "GRID_SPACING",
    "OVERLAY_RGBA",
    "PANEL_COLOR",
    "PANEL_HEIGHT",
    "PARTICLE_SIZE",
    "PLAYER_BULLET_COLOR",
    "TANK_CORE_COLOR",
    "TEXT_COLOR",
    "TEXT_MUTED",
]
