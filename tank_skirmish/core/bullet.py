"""Straight-line projectiles."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass


class Owner(str, enum.Enum):
    """Which side fired a bullet, and therefore what it can damage."""

    PLAYER = "player"
    ENEMY = "enemy"


@dataclass
class Bullet:
    x: float
    y: float
    direction: float  # radians
    owner: Owner
    speed: float = 6.0
    size: float = 6.0
    active: bool = True

    @property
    def radius(self) -> float:
        return self.size / 2

    def update(self, width: float, height: float, margin: float = 10.0) -> None:
        if not self.active:
            return
        self.x += math.cos(self.direction) * self.speed
        self.y += math.sin(self.direction) * self.speed
        if (
            self.x < -margin
            or self.x > width + margin
            or self.y < -margin
            or self.y > height + margin
        ):
            self.active = False

    def deactivate(self) -> None:
        self.active = False


__all__ = ["Bullet", "Owner"]
