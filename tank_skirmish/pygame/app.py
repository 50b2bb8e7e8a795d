"""Pygame-powered presentation layer for Tank Skirmish."""

from __future__ import annotations

import itertools
import logging
from typing import Iterable, Iterator, Optional

try:
    import pygame
except ImportError as exc:  # pragma: no cover - depends on runtime environment
    raise RuntimeError(
        "The pygame package is required to run the graphical version of Tank Skirmish."
    ) from exc

from tank_skirmish.core.game import Game, GameState
from tank_skirmish.core.loop import run_loop
from tank_skirmish.core.settings import ArenaSettings
from tank_skirmish.pygame.config import (
    AUTOSTART_DELAY_MS,
    CAPTION,
    DEFAULT_FPS,
    PANEL_HEIGHT,
)
from tank_skirmish.pygame.controls import ControlBar
from tank_skirmish.pygame.hud import draw_hud
from tank_skirmish.pygame.input import InputHandler
from tank_skirmish.pygame.keybindings import KeyBindings
from tank_skirmish.pygame.renderer import (
    draw_background,
    draw_bullets,
    draw_overlay,
    draw_particles,
    draw_tanks,
)

logger = logging.getLogger(__name__)


class PygameSkirmish:
    """Application context: display, fonts, controls and the game, built once."""

    def __init__(
        self,
        settings: Optional[ArenaSettings] = None,
        seed: Optional[int] = None,
        fps: int = DEFAULT_FPS,
        autostart: bool = True,
        debug: bool = False,
    ) -> None:
        pygame.init()
        pygame.font.init()

        self.settings = settings or ArenaSettings()
        self.debug = debug
        self.fps = fps
        self.panel_height = PANEL_HEIGHT

        width, height = self.settings.width, self.settings.height
        self.screen = pygame.display.set_mode((width, height + self.panel_height))
        pygame.display.set_caption(CAPTION)
        self.playfield = pygame.Surface((width, height))
        self.playfield_rect = pygame.Rect(0, self.panel_height, width, height)

        self.font_small = pygame.font.Font(None, 22)
        self.font_regular = pygame.font.Font(None, 30)
        self.font_large = pygame.font.Font(None, 40)

        self.clock = pygame.time.Clock()
        self.running = True

        self.game = Game(self.settings, seed=seed)
        self.keybindings = KeyBindings()
        self.controls = ControlBar()
        self._register_controls()
        self.input = InputHandler(self)

        self._autostart_remaining: Optional[float] = (
            AUTOSTART_DELAY_MS if autostart else None
        )
        self.frames_drawn = 0
        self._last_state = self.game.state
        logger.debug(
            "Client ready: playfield %dx%d, %d fps target", width, height, fps
        )

    # ------------------------------------------------------------------
    # Setup
    def _register_controls(self) -> None:
        width = self.screen.get_width()
        button_width, button_height, gap = 96, 32, 10
        top = (self.panel_height - button_height) // 2
        actions = [
            ("start", "Start", self.game.start),
            ("pause", "Pause", self.game.toggle_pause),
            ("reset", "Reset", self.game.reset),
        ]
        left = width - len(actions) * (button_width + gap)
        for idx, (key, label, action) in enumerate(actions):
            rect = pygame.Rect(left + idx * (button_width + gap), top, button_width, button_height)
            self.controls.add(key, label, rect, action)

    @property
    def controls_hint(self) -> str:
        bindings = self.keybindings
        return (
            "Arrows move  |  "
            f"{bindings.format_key(bindings.fire)} fire  |  "
            f"{bindings.format_key(bindings.reset)} reset"
        )

    # ------------------------------------------------------------------
    # Game loop
    def run(self, max_frames: Optional[int] = None) -> int:
        """Drive the game at the display rate until the window is closed."""

        frames: Iterable[float] = self._frame_timestamps()
        if max_frames is not None:
            frames = itertools.islice(frames, max_frames)
        try:
            ticks = run_loop(self.tick, frames)
        finally:
            pygame.quit()
        logger.debug("Loop finished after %d frames", ticks)
        return ticks

    def _frame_timestamps(self) -> Iterator[float]:
        elapsed = 0.0
        while True:
            elapsed += self.clock.tick(self.fps)
            yield elapsed

    def tick(self, dt: float) -> bool:
        self._handle_events()
        self._update_autostart(dt)
        self.game.frame(dt)
        self._sync_controls()
        self._draw()
        return self.running

    def _handle_events(self) -> None:
        for event in pygame.event.get():
            self.input.process_event(event)

    def _update_autostart(self, dt: float) -> None:
        if self._autostart_remaining is None:
            return
        self._autostart_remaining -= dt
        if self._autostart_remaining <= 0:
            self._autostart_remaining = None
            if self.game.state is GameState.IDLE:
                self.game.start()

    def _debug(self, message: str) -> None:
        if self.debug:
            logger.info("[DEBUG] %s", message)

    def _sync_controls(self) -> None:
        state = self.game.state
        if state is not self._last_state:
            hud = self.game.hud
            self._debug(
                f"State {self._last_state.value} -> {state.value} ({hud.score}, {hud.lives})"
            )
            self._last_state = state
        label = "Resume" if state is GameState.PAUSED else "Pause"
        self.controls.set_label("pause", label)

    def _draw(self) -> None:
        draw_background(self)
        draw_tanks(self)
        draw_bullets(self)
        draw_particles(self)
        draw_overlay(self)
        self.screen.blit(self.playfield, self.playfield_rect)
        draw_hud(self)
        pygame.display.flip()
        self.frames_drawn += 1


def run_pygame(max_frames: Optional[int] = None, **kwargs: object) -> int:
    """Convenience helper for launching the pygame client."""

    app = PygameSkirmish(**kwargs)  # type: ignore[arg-type]
    return app.run(max_frames=max_frames)


__all__ = ["PygameSkirmish", "run_pygame"]
