"""Core game logic for Tank Skirmish, independent of rendering."""

from tank_skirmish.core.bullet import Bullet, Owner
from tank_skirmish.core.game import CollisionReport, Game, GameState, HudText
from tank_skirmish.core.input import InputState
from tank_skirmish.core.loop import FrameLoop, run_loop
from tank_skirmish.core.particles import Particle, ParticleSystem
from tank_skirmish.core.settings import ArenaSettings
from tank_skirmish.core.tank import (
    PlayerController,
    StepContext,
    Tank,
    WanderController,
)

__all__ = [
    "ArenaSettings",
    "Bullet",
    "CollisionReport",
    "FrameLoop",
    "Game",
    "GameState",
    "HudText",
    "InputState",
    "Owner",
    "Particle",
    "ParticleSystem",
    "PlayerController",
    "StepContext",
    "Tank",
    "WanderController",
    "run_loop",
]
