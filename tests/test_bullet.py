import math

import pytest

from tank_skirmish.core.bullet import Bullet, Owner


def test_update_moves_along_direction():
    bullet = Bullet(100.0, 100.0, math.pi / 2, Owner.PLAYER)

    bullet.update(960, 600)

    assert bullet.x == pytest.approx(100.0)
    assert bullet.y == pytest.approx(106.0)
    assert bullet.active


def test_bullet_deactivates_past_margin_and_stays_inactive():
    bullet = Bullet(955.0, 300.0, 0.0, Owner.ENEMY)

    bullet.update(960, 600)  # x = 961, still inside the margin
    assert bullet.active

    bullet.update(960, 600)  # x = 967, still inside the margin
    assert bullet.active

    bullet.update(960, 600)  # x = 973, beyond the 10px margin
    assert bullet.active is False
    x_after = bullet.x

    bullet.update(960, 600)
    assert bullet.active is False
    assert bullet.x == x_after


def test_radius_is_half_size():
    assert Bullet(0, 0, 0, Owner.PLAYER, size=6).radius == 3
