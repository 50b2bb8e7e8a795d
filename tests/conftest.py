import os

import pytest

from tank_skirmish.core.game import Game
from tank_skirmish.core.settings import ArenaSettings

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")


@pytest.fixture
def settings() -> ArenaSettings:
    """Default arena with enemy fire disabled so outcomes are deterministic."""

    return ArenaSettings(enemy_fire_chance=0.0)


@pytest.fixture
def game(settings: ArenaSettings) -> Game:
    return Game(settings, seed=1234)
