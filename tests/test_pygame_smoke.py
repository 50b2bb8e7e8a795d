import logging

import pygame
import pytest

from tank_skirmish import PygameSkirmish
from tank_skirmish.core.bullet import Owner
from tank_skirmish.core.game import GameState
from tank_skirmish.core.input import RIGHT
from tank_skirmish.core.settings import ArenaSettings


@pytest.fixture
def app(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    client = PygameSkirmish(ArenaSettings(enemy_fire_chance=0.0), seed=11)
    try:
        yield client
    finally:
        client.running = False
        pygame.quit()


@pytest.mark.smoke
def test_client_initialises_with_fixed_playfield(app) -> None:
    assert app.playfield.get_size() == (960, 600)
    assert app.screen.get_size() == (960, 600 + app.panel_height)
    assert [button.key for button in app.controls.buttons] == ["start", "pause", "reset"]
    assert app.game.state is GameState.IDLE


@pytest.mark.smoke
def test_client_autostarts_after_delay(app) -> None:
    app.tick(100)
    assert app.game.state is GameState.IDLE

    app.tick(120)
    assert app.game.running
    assert app.frames_drawn == 2


@pytest.mark.smoke
def test_keyboard_events_drive_input_and_lifecycle(app) -> None:
    app.game.start()

    app.input.process_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_RIGHT))
    assert app.game.input.pressed(RIGHT)
    start_x = app.game.player.x
    app.tick(16)
    assert app.game.player.x > start_x

    app.input.process_event(pygame.event.Event(pygame.KEYUP, key=pygame.K_RIGHT))
    assert not app.game.input.pressed(RIGHT)

    app.input.process_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_SPACE))
    assert [bullet.owner for bullet in app.game.bullets] == [Owner.PLAYER]

    app.input.process_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_r))
    assert app.game.state is GameState.IDLE
    assert app.game.bullets == []

    app.input.process_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_z))
    assert app.game.state is GameState.IDLE


@pytest.mark.smoke
def test_holding_space_keeps_firing(app) -> None:
    app.game.start()

    app.input.process_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_SPACE))
    for _ in range(30):
        app.tick(16)

    shots = [bullet for bullet in app.game.bullets if bullet.owner is Owner.PLAYER]
    assert len(shots) > 1

    app.input.process_event(pygame.event.Event(pygame.KEYUP, key=pygame.K_SPACE))
    app.tick(16)
    fired = len(app.game.bullets)
    for _ in range(10):
        app.tick(16)
    assert len(app.game.bullets) == fired


@pytest.mark.smoke
def test_debug_mode_logs_state_changes(monkeypatch, caplog) -> None:
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    caplog.set_level(logging.INFO, logger="tank_skirmish.pygame.app")
    client = PygameSkirmish(ArenaSettings(enemy_fire_chance=0.0), seed=11, debug=True)
    try:
        client.tick(250)
        client.game.toggle_pause()
        client.tick(16)
    finally:
        pygame.quit()

    messages = [record.getMessage() for record in caplog.records]
    assert "[DEBUG] State idle -> running (Score: 0, Lives: 3)" in messages
    assert any(message.startswith("[DEBUG] State running -> paused") for message in messages)


@pytest.mark.smoke
def test_buttons_and_playfield_clicks(app) -> None:
    app.input.process_event(
        pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=app.playfield_rect.center, button=1)
    )
    assert app.game.running

    pause = app.controls.get("pause")
    app.input.process_event(
        pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=pause.rect.center, button=1)
    )
    assert app.game.state is GameState.PAUSED
    app.tick(16)
    assert pause.label == "Resume"

    app.controls.click("pause")
    app.tick(16)
    assert app.game.running
    assert pause.label == "Pause"

    app.controls.click("reset")
    assert app.game.state is GameState.IDLE
    app.controls.click("start")
    assert app.game.running


@pytest.mark.smoke
def test_quit_event_stops_the_loop(app) -> None:
    pygame.event.post(pygame.event.Event(pygame.QUIT))

    ticks = app.run(max_frames=5)

    assert ticks == 1
    assert app.running is False
