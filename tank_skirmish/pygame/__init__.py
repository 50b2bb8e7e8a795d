"""Pygame front-end for Tank Skirmish."""

from tank_skirmish.pygame.app import PygameSkirmish, run_pygame

__all__ = ["PygameSkirmish", "run_pygame"]
