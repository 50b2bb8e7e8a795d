"""Input handling for the pygame client."""

from __future__ import annotations

import logging

import pygame

from tank_skirmish.core.input import FIRE, RESET
from tank_skirmish.pygame.keybindings import KeyBindings

logger = logging.getLogger(__name__)


class InputHandler:
    """Translate pygame events into held keys and lifecycle actions.

    Events never touch entity physics directly: key presses only update the
    polled ``InputState`` or trigger start/pause/reset/fire on the game.
    """

    def __init__(self, app) -> None:
        self.app = app

    @property
    def bindings(self) -> KeyBindings:
        return self.app.keybindings

    # ------------------------------------------------------------------
    # Event entry point
    def process_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.QUIT:
            self.app.running = False
        elif event.type == pygame.KEYDOWN:
            self._handle_key_down(event.key)
        elif event.type == pygame.KEYUP:
            code = self.bindings.code_for(event.key)
            if code is not None:
                self.app.game.input.release(code)
        elif event.type == pygame.MOUSEBUTTONDOWN and getattr(event, "button", 1) == 1:
            self._handle_click(event.pos)
        elif event.type == pygame.WINDOWFOCUSLOST:
            self.app.game.input.clear()

    # ------------------------------------------------------------------
    # Internal helpers
    def _handle_key_down(self, key: int) -> None:
        game = self.app.game
        code = self.bindings.code_for(key)
        if code is None:
            return
        game.input.press(code)
        if code == FIRE:
            game.fire()
        elif code == RESET:
            game.reset()

    def _handle_click(self, pos: tuple[int, int]) -> None:
        button = self.app.controls.button_at(pos)
        if button is not None:
            logger.debug("Button '%s' clicked", button.key)
            button.action()
            return
        if self.app.playfield_rect.collidepoint(pos):
            self.app.game.start()


__all__ = ["InputHandler"]
