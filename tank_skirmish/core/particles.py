"""Cosmetic particle bursts spawned by hits and crashes."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Iterator, List, Optional


@dataclass
class Particle:
    x: float
    y: float
    vx: float
    vy: float
    life: float
    color: str

    @property
    def alpha(self) -> float:
        return max(0.0, min(1.0, self.life / ParticleSystem.fade_life))


class ParticleSystem:
    """Owns every live particle; no gameplay effect."""

    fade_life = 50.0

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        *,
        max_speed: float = 2.0,
        min_life: float = 30.0,
        life_spread: float = 20.0,
    ) -> None:
        self.rng = rng or random.Random()
        self.max_speed = max_speed
        self.min_life = min_life
        self.life_spread = life_spread
        self.particles: List[Particle] = []

    def burst(self, x: float, y: float, color: str, count: int = 10) -> None:
        rng = self.rng
        for _ in range(count):
            self.particles.append(
                Particle(
                    x=x,
                    y=y,
                    vx=(rng.random() * 2 - 1) * self.max_speed,
                    vy=(rng.random() * 2 - 1) * self.max_speed,
                    life=self.min_life + rng.random() * self.life_spread,
                    color=color,
                )
            )

    def update(self) -> None:
        for particle in self.particles:
            particle.x += particle.vx
            particle.y += particle.vy
            particle.life -= 1
        self.particles = [p for p in self.particles if p.life > 0]

    def clear(self) -> None:
        self.particles.clear()

    def __iter__(self) -> Iterator[Particle]:
        return iter(self.particles)

    def __len__(self) -> int:
        return len(self.particles)


__all__ = ["Particle", "ParticleSystem"]
