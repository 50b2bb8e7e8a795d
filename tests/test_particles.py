import random

import pytest

from tank_skirmish.core.particles import Particle, ParticleSystem


def test_burst_spawns_particles_with_bounded_life_and_speed():
    system = ParticleSystem(random.Random(42))

    system.burst(50, 60, "#ffb347")

    assert len(system) == 10
    for particle in system:
        assert (particle.x, particle.y) == (50, 60)
        assert 30 <= particle.life < 50
        assert -2 <= particle.vx < 2
        assert -2 <= particle.vy < 2
        assert particle.color == "#ffb347"


def test_update_integrates_and_discards_expired_particles():
    system = ParticleSystem(random.Random(0))
    system.particles = [
        Particle(0, 0, 1.0, -1.0, life=1, color="#fff"),
        Particle(5, 5, 0.5, 0.5, life=10, color="#fff"),
    ]

    system.update()

    assert len(system) == 1
    survivor = system.particles[0]
    assert (survivor.x, survivor.y) == (5.5, 5.5)
    assert survivor.life == 9


@pytest.mark.parametrize(
    "life, expected",
    [(60, 1.0), (50, 1.0), (25, 0.5), (0, 0.0)],
)
def test_alpha_is_proportional_to_remaining_life(life, expected):
    particle = Particle(0, 0, 0, 0, life=life, color="#fff")
    assert particle.alpha == pytest.approx(expected)
