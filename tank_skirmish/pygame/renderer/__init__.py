"""Rendering helpers for the pygame front-end."""

from tank_skirmish.pygame.renderer.scene import (
    draw_background,
    draw_bullets,
    draw_overlay,
    draw_particles,
    draw_tank,
    draw_tanks,
)

__all__ = [
    "draw_background",
    "draw_bullets",
    "draw_overlay",
    "draw_particles",
    "draw_tank",
    "draw_tanks",
]
