"""Arena configuration shared by the simulation and the front-end."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ArenaSettings:
    """Tunable constants for a skirmish.

    Speeds are measured in pixels per tick; cooldowns and AI timers are
    measured in milliseconds of elapsed frame time.
    """

    width: int = 960
    height: int = 600
    tank_size: int = 36
    player_speed: float = 2.6
    enemy_speed: float = 1.8
    enemy_speed_factor: float = 0.8
    bullet_speed: float = 6.0
    bullet_size: int = 6
    bullet_margin: float = 10.0
    enemy_count: int = 5
    max_lives: int = 3
    shoot_cooldown: float = 40.0
    muzzle_offset: float = 0.7
    kill_score: int = 100
    enemy_fire_chance: float = 0.01
    wander_turn_chance: float = 0.01
    wander_min_duration: float = 120.0
    wander_duration_spread: float = 120.0
    spawn_padding: float = 60.0
    player_spawn_offset: float = 80.0
    particle_burst: int = 10

    def __post_init__(self) -> None:
        for name in ("width", "height", "tank_size", "enemy_count", "max_lives"):
            value = getattr(self, name)
            if value <= 0:
                raise ValueError(f"{name} must be positive, got {value!r}")
        if self.height / 2 <= self.spawn_padding or self.width <= self.spawn_padding * 2:
            raise ValueError(
                f"Arena {self.width}x{self.height} is too small for spawn padding "
                f"{self.spawn_padding}"
            )

    @property
    def player_spawn(self) -> tuple[float, float]:
        return self.width / 2, self.height - self.player_spawn_offset


__all__ = ["ArenaSettings"]
