"""Tank entities and their steering policies."""

from __future__ import annotations

import itertools
import math
import random
from dataclasses import dataclass, field
from typing import List, Optional, Protocol

from tank_skirmish.core.bullet import Bullet, Owner
from tank_skirmish.core.input import InputState
from tank_skirmish.core.settings import ArenaSettings

_entity_ids = itertools.count(1)

PLAYER_COLOR = "#5ec8ff"
ENEMY_COLOR = "#ffb347"


@dataclass
class StepContext:
    """Per-tick information a controller may consult."""

    settings: ArenaSettings
    input: InputState


class TankController(Protocol):
    is_player: bool

    def steer(self, tank: "Tank", dt: float, context: StepContext) -> None:
        ...


class PlayerController:
    """Drive a tank from the held movement keys."""

    is_player = True

    def steer(self, tank: "Tank", dt: float, context: StepContext) -> None:
        dx, dy = context.input.direction()
        if dx == 0 and dy == 0:
            return
        length = math.hypot(dx, dy)
        nx = dx / length
        ny = dy / length
        tank.x += nx * tank.speed
        tank.y += ny * tank.speed
        tank.angle = math.atan2(ny, nx)


class WanderController:
    """Hold a random heading for a random duration, then pick another."""

    is_player = False

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        *,
        min_duration: float = 120.0,
        duration_spread: float = 120.0,
        speed_factor: float = 0.8,
        turn_chance: float = 0.01,
    ) -> None:
        self.rng = rng or random.Random()
        self.min_duration = min_duration
        self.duration_spread = duration_spread
        self.speed_factor = speed_factor
        self.turn_chance = turn_chance
        self.timer = 0.0

    @classmethod
    def from_settings(
        cls, settings: ArenaSettings, rng: Optional[random.Random] = None
    ) -> "WanderController":
        return cls(
            rng,
            min_duration=settings.wander_min_duration,
            duration_spread=settings.wander_duration_spread,
            speed_factor=settings.enemy_speed_factor,
            turn_chance=settings.wander_turn_chance,
        )

    def steer(self, tank: "Tank", dt: float, context: StepContext) -> None:
        self.timer -= dt
        if self.timer <= 0:
            self.timer = self.min_duration + self.rng.random() * self.duration_spread
            dx = self.rng.random() * 2 - 1
            dy = self.rng.random() * 2 - 1
            tank.angle = math.atan2(dy, dx)
        step = tank.speed * self.speed_factor
        tank.x += math.cos(tank.angle) * step
        tank.y += math.sin(tank.angle) * step
        if self.rng.random() < self.turn_chance:
            tank.angle += math.pi / 2


@dataclass(eq=False)
class Tank:
    """A player or AI tank on the playfield."""

    x: float
    y: float
    controller: TankController
    angle: float = 0.0
    size: float = 36.0
    color: str = ENEMY_COLOR
    speed: float = 1.8
    cooldown: float = 0.0
    shoot_cooldown: float = 40.0
    muzzle_offset: float = 0.7
    entity_id: int = field(default_factory=lambda: next(_entity_ids), init=False)

    @property
    def radius(self) -> float:
        return self.size / 2

    @property
    def is_player(self) -> bool:
        return self.controller.is_player

    def update(self, dt: float, context: StepContext) -> None:
        self.controller.steer(self, dt, context)
        self.cooldown = max(0.0, self.cooldown - dt)
        self.clamp_to(context.settings.width, context.settings.height)

    def clamp_to(self, width: float, height: float) -> None:
        half = self.size / 2
        self.x = max(half, min(width - half, self.x))
        self.y = max(half, min(height - half, self.y))

    def try_shoot(
        self,
        bullets: List[Bullet],
        owner: Owner,
        *,
        speed: float = 6.0,
        size: float = 6.0,
    ) -> Optional[Bullet]:
        if self.cooldown > 0:
            return None
        reach = self.size * self.muzzle_offset
        bullet = Bullet(
            self.x + math.cos(self.angle) * reach,
            self.y + math.sin(self.angle) * reach,
            self.angle,
            owner,
            speed=speed,
            size=size,
        )
        bullets.append(bullet)
        self.cooldown = self.shoot_cooldown
        return bullet

    def respawn(self, x: float, y: float) -> None:
        self.x = x
        self.y = y

    def distance_to(self, x: float, y: float) -> float:
        return math.hypot(self.x - x, self.y - y)


def make_player(settings: ArenaSettings) -> Tank:
    x, y = settings.player_spawn
    return Tank(
        x,
        y,
        PlayerController(),
        size=settings.tank_size,
        color=PLAYER_COLOR,
        speed=settings.player_speed,
        shoot_cooldown=settings.shoot_cooldown,
        muzzle_offset=settings.muzzle_offset,
    )


def make_enemy(
    settings: ArenaSettings,
    x: float,
    y: float,
    angle: float,
    rng: Optional[random.Random] = None,
) -> Tank:
    return Tank(
        x,
        y,
        WanderController.from_settings(settings, rng),
        angle=angle,
        size=settings.tank_size,
        color=ENEMY_COLOR,
        speed=settings.enemy_speed,
        shoot_cooldown=settings.shoot_cooldown,
        muzzle_offset=settings.muzzle_offset,
    )


__all__ = [
    "ENEMY_COLOR",
    "PLAYER_COLOR",
    "PlayerController",
    "StepContext",
    "Tank",
    "TankController",
    "WanderController",
    "make_enemy",
    "make_player",
]
