import math
import random

import pytest

from tank_skirmish.core.bullet import Owner
from tank_skirmish.core.input import DOWN, LEFT, RIGHT, UP, InputState
from tank_skirmish.core.settings import ArenaSettings
from tank_skirmish.core.tank import (
    PlayerController,
    StepContext,
    Tank,
    WanderController,
    make_enemy,
    make_player,
)


def _context(*keys: str) -> StepContext:
    return StepContext(ArenaSettings(), InputState(keys))


def test_diagonal_movement_matches_axial_speed():
    settings = ArenaSettings()
    axial = make_player(settings)
    diagonal = make_player(settings)
    start = (axial.x, axial.y)

    axial.update(16, _context(UP))
    diagonal.update(16, _context(UP, RIGHT))

    axial_distance = math.hypot(axial.x - start[0], axial.y - start[1])
    diagonal_distance = math.hypot(diagonal.x - start[0], diagonal.y - start[1])
    assert axial_distance == pytest.approx(settings.player_speed)
    assert diagonal_distance == pytest.approx(axial_distance)
    assert diagonal.angle == pytest.approx(-math.pi / 4)


def test_player_heading_holds_when_idle():
    tank = make_player(ArenaSettings())

    tank.update(16, _context(LEFT))
    assert tank.angle == pytest.approx(math.pi)
    position = (tank.x, tank.y)

    tank.update(16, _context())
    assert tank.angle == pytest.approx(math.pi)
    assert (tank.x, tank.y) == position


def test_position_is_clamped_inside_playfield():
    settings = ArenaSettings()
    tank = Tank(settings.width - 19, 19, PlayerController(), size=36, speed=2.6)

    for _ in range(10):
        tank.update(16, _context(UP, RIGHT))

    assert tank.x == pytest.approx(settings.width - 18)
    assert tank.y == pytest.approx(18)

    tank.update(16, _context(DOWN))
    assert tank.y == pytest.approx(18 + 2.6)


def test_try_shoot_spawns_bullet_ahead_and_respects_cooldown():
    tank = Tank(200, 200, PlayerController(), angle=math.pi / 2, size=36)
    bullets = []

    bullet = tank.try_shoot(bullets, Owner.PLAYER)

    assert bullet is not None
    assert bullets == [bullet]
    assert bullet.x == pytest.approx(200)
    assert bullet.y == pytest.approx(200 + 36 * 0.7)
    assert bullet.direction == pytest.approx(math.pi / 2)
    assert bullet.owner is Owner.PLAYER
    assert tank.cooldown == 40

    assert tank.try_shoot(bullets, Owner.PLAYER) is None
    assert len(bullets) == 1


def test_cooldown_decreases_with_elapsed_time_and_floors_at_zero():
    tank = Tank(200, 200, PlayerController(), cooldown=40)

    tank.update(25, _context())
    assert tank.cooldown == pytest.approx(15)

    tank.update(25, _context())
    assert tank.cooldown == 0

    assert tank.try_shoot([], Owner.PLAYER) is not None


def test_wander_picks_heading_from_seeded_rng():
    rng = random.Random(7)
    replay = random.Random(7)
    controller = WanderController(rng)
    tank = Tank(300, 300, controller, speed=1.8)

    tank.update(16, _context())

    duration = 120 + replay.random() * 120
    dx = replay.random() * 2 - 1
    dy = replay.random() * 2 - 1
    heading = math.atan2(dy, dx)
    turned = replay.random() < 0.01

    assert controller.timer == pytest.approx(duration)
    assert 120 <= controller.timer < 240
    assert tank.x == pytest.approx(300 + math.cos(heading) * 1.8 * 0.8)
    assert tank.y == pytest.approx(300 + math.sin(heading) * 1.8 * 0.8)
    expected = heading + (math.pi / 2 if turned else 0.0)
    assert tank.angle == pytest.approx(expected)


def test_wander_holds_heading_until_timer_expires():
    controller = WanderController(random.Random(3), turn_chance=0.0)
    tank = Tank(300, 300, controller, angle=0.5, speed=1.8)
    controller.timer = 100

    tank.update(40, _context())
    assert tank.angle == pytest.approx(0.5)
    assert controller.timer == pytest.approx(60)
    assert tank.x == pytest.approx(300 + math.cos(0.5) * 1.44)

    tank.update(60, _context())
    assert 120 <= controller.timer < 240


def test_wander_snaps_heading_by_quarter_turn():
    controller = WanderController(random.Random(1), turn_chance=1.0)
    tank = Tank(300, 300, controller, angle=0.25)
    controller.timer = 1000

    tank.update(16, _context())

    assert tank.angle == pytest.approx(0.25 + math.pi / 2)


def test_factories_set_variant_flags():
    settings = ArenaSettings()
    player = make_player(settings)
    enemy = make_enemy(settings, 100, 100, 0.0, random.Random(0))

    assert player.is_player
    assert not enemy.is_player
    assert (player.x, player.y) == settings.player_spawn
    assert player.speed == settings.player_speed
    assert enemy.speed == settings.enemy_speed
    assert player.entity_id != enemy.entity_id
