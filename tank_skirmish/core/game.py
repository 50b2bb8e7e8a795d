"""Real-time skirmish between the player tank and a wandering enemy roster."""

from __future__ import annotations

import enum
import logging
import math
import random
from dataclasses import dataclass, field
from typing import List, Optional, Set

from tank_skirmish.core.bullet import Bullet, Owner
from tank_skirmish.core.input import FIRE, InputState
from tank_skirmish.core.particles import ParticleSystem
from tank_skirmish.core.settings import ArenaSettings
from tank_skirmish.core.tank import StepContext, Tank, make_enemy, make_player

logger = logging.getLogger(__name__)


class GameState(enum.Enum):
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "game_over"


STATUS_TEXT = {
    "idle": "Status: Standing by",
    "fighting": "Status: Fighting",
    "paused": "Status: Paused",
    "hit": "Status: Hit! Back to the start line",
    "defeated": "Status: Defeated, press Start to retry",
}

OVERLAY_PROMPTS = {
    GameState.IDLE: "Click to enter the battle",
    GameState.PAUSED: "Paused, click to resume",
    GameState.GAME_OVER: "Defeated, click to try again",
}


@dataclass
class HudText:
    """Text shown next to the playfield."""

    score: str
    lives: str
    status: str


@dataclass
class CollisionReport:
    """What a single collision pass destroyed or damaged."""

    rammed: List[Tank] = field(default_factory=list)
    shot: List[Tank] = field(default_factory=list)
    player_hit: bool = False

    @property
    def destroyed(self) -> List[Tank]:
        return self.rammed + self.shot


class Game:
    """Own every entity and drive the update → collide cycle."""

    def __init__(
        self,
        settings: Optional[ArenaSettings] = None,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
        input_state: Optional[InputState] = None,
    ) -> None:
        self.settings = settings or ArenaSettings()
        self.rng = rng or random.Random(seed)
        self.input = input_state or InputState()
        self.particles = ParticleSystem(self.rng)
        self.player: Tank = make_player(self.settings)
        self.enemies: List[Tank] = []
        self.bullets: List[Bullet] = []
        self.score = 0
        self.lives = self.settings.max_lives
        self.state = GameState.IDLE
        self.status_key = "idle"
        self.hud = HudText("", "", "")
        self._player_hit_this_tick = False
        self.last_collisions = CollisionReport()
        self.spawn_enemies()
        self.sync_hud()

    # ------------------------------------------------------------------
    # Properties
    @property
    def running(self) -> bool:
        return self.state is GameState.RUNNING

    @property
    def is_over(self) -> bool:
        return self.state is GameState.GAME_OVER

    @property
    def overlay_prompt(self) -> Optional[str]:
        return OVERLAY_PROMPTS.get(self.state)

    # ------------------------------------------------------------------
    # Lifecycle
    def start(self) -> None:
        if self.state is GameState.GAME_OVER:
            self.reset()
        if self.state is not GameState.RUNNING:
            logger.debug("Game state %s -> running", self.state.value)
        self.state = GameState.RUNNING
        self._set_status("fighting")

    def toggle_pause(self) -> None:
        if self.state is GameState.GAME_OVER:
            return
        if self.state is GameState.RUNNING:
            self.state = GameState.PAUSED
            self._set_status("paused")
        else:
            self.state = GameState.RUNNING
            self._set_status("fighting")
        logger.debug("Pause toggled, state is now %s", self.state.value)

    def reset(self) -> None:
        self.player = make_player(self.settings)
        self.bullets = []
        self.particles.clear()
        self.score = 0
        self.lives = self.settings.max_lives
        self.spawn_enemies()
        self.state = GameState.IDLE
        self._set_status("idle")
        logger.info("Game reset")

    def game_over(self) -> None:
        self.state = GameState.GAME_OVER
        self._set_status("defeated")
        logger.info("Game over with score %d", self.score)

    # ------------------------------------------------------------------
    # Actions
    def fire(self) -> Optional[Bullet]:
        """Fire the player's cannon if the battle is on and it has cooled down."""

        if not self.running:
            return None
        return self._shoot(self.player, Owner.PLAYER)

    def _shoot(self, tank: Tank, owner: Owner) -> Optional[Bullet]:
        return tank.try_shoot(
            self.bullets,
            owner,
            speed=self.settings.bullet_speed,
            size=self.settings.bullet_size,
        )

    def spawn_enemies(self) -> None:
        settings = self.settings
        rng = self.rng
        pad = settings.spawn_padding
        self.enemies = []
        for _ in range(settings.enemy_count):
            x = pad + rng.random() * (settings.width - pad * 2)
            y = pad + rng.random() * (settings.height / 2 - pad)
            angle = rng.random() * math.tau
            self.enemies.append(make_enemy(settings, x, y, angle, rng))
        logger.debug("Spawned %d enemies", len(self.enemies))

    # ------------------------------------------------------------------
    # Simulation
    def frame(self, dt: float) -> None:
        """Advance one animation frame; the simulation only runs while fighting."""

        if self.running:
            self.update(dt)
        self.particles.update()

    def update(self, dt: float) -> None:
        if self.state is GameState.GAME_OVER:
            return
        settings = self.settings
        context = StepContext(settings, self.input)

        self.player.update(dt, context)
        if self.input.pressed(FIRE):
            self._shoot(self.player, Owner.PLAYER)
        for enemy in self.enemies:
            enemy.update(dt, context)
            if self.rng.random() < settings.enemy_fire_chance:
                self._shoot(enemy, Owner.ENEMY)

        for bullet in self.bullets:
            bullet.update(settings.width, settings.height, settings.bullet_margin)

        self.last_collisions = self.handle_collisions()
        self.bullets = [bullet for bullet in self.bullets if bullet.active]

        if not self.enemies:
            logger.info("Enemy roster cleared, sending reinforcements")
            self.spawn_enemies()

    def handle_collisions(self) -> CollisionReport:
        report = CollisionReport()
        self._player_hit_this_tick = False
        self._resolve_rams(report)
        self._resolve_player_bullets(report)
        self._resolve_enemy_bullets(report)
        self.sync_hud()
        return report

    def _resolve_rams(self, report: CollisionReport) -> None:
        player = self.player
        rammed: Set[int] = set()
        for enemy in self.enemies:
            reach = (player.size + enemy.size) / 2
            if player.distance_to(enemy.x, enemy.y) < reach:
                rammed.add(enemy.entity_id)
                report.rammed.append(enemy)
                self._burst(enemy)
                self._burst(player)
                self.score += self.settings.kill_score
        if rammed:
            self._remove_enemies(rammed)
            self._lose_life()
            report.player_hit = True

    def _resolve_player_bullets(self, report: CollisionReport) -> None:
        for bullet in self.bullets:
            if not bullet.active or bullet.owner is not Owner.PLAYER:
                continue
            for enemy in self.enemies:
                if enemy.distance_to(bullet.x, bullet.y) < enemy.radius:
                    bullet.deactivate()
                    self.score += self.settings.kill_score
                    self._burst(enemy)
                    report.shot.append(enemy)
                    self._remove_enemies({enemy.entity_id})
                    break

    def _resolve_enemy_bullets(self, report: CollisionReport) -> None:
        player = self.player
        for bullet in self.bullets:
            if self._player_hit_this_tick or self.is_over:
                return
            if not bullet.active or bullet.owner is not Owner.ENEMY:
                continue
            if player.distance_to(bullet.x, bullet.y) < player.radius:
                bullet.deactivate()
                self._burst(player)
                self._lose_life()
                report.player_hit = True

    def _remove_enemies(self, entity_ids: Set[int]) -> None:
        self.enemies = [e for e in self.enemies if e.entity_id not in entity_ids]

    def _lose_life(self) -> None:
        self._player_hit_this_tick = True
        self.lives = max(0, self.lives - 1)
        logger.info("Player hit, %d lives left", self.lives)
        if self.lives <= 0:
            self.game_over()
            return
        self.player.respawn(*self.settings.player_spawn)
        self._set_status("hit")

    def _burst(self, tank: Tank) -> None:
        self.particles.burst(tank.x, tank.y, tank.color, self.settings.particle_burst)

    # ------------------------------------------------------------------
    # HUD
    def _set_status(self, key: str) -> None:
        self.status_key = key
        self.sync_hud()

    def sync_hud(self) -> None:
        self.hud = HudText(
            score=f"Score: {self.score}",
            lives=f"Lives: {self.lives}",
            status=STATUS_TEXT[self.status_key],
        )


__all__ = [
    "CollisionReport",
    "Game",
    "GameState",
    "HudText",
    "OVERLAY_PROMPTS",
    "STATUS_TEXT",
]
