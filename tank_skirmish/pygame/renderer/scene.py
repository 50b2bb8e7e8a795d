"""Playfield rendering for the Tank Skirmish pygame client."""

from __future__ import annotations

import math

import pygame

from tank_skirmish.core.bullet import Owner
from tank_skirmish.core.tank import Tank
from tank_skirmish.pygame.config import (
    BACKGROUND_COLOR,
    BARREL_COLOR,
    ENEMY_BULLET_COLOR,
    GRID_COLOR,
    GRID_SPACING,
    OVERLAY_RGBA,
    PARTICLE_SIZE,
    PLAYER_BULLET_COLOR,
    TANK_CORE_COLOR,
    TEXT_COLOR,
)


def draw_background(app) -> None:
    surface = app.playfield
    width, height = surface.get_size()
    surface.fill(pygame.Color(BACKGROUND_COLOR))
    grid = pygame.Color(GRID_COLOR)
    for x in range(0, width, GRID_SPACING):
        pygame.draw.line(surface, grid, (x, 0), (x, height))
    for y in range(0, height, GRID_SPACING):
        pygame.draw.line(surface, grid, (0, y), (width, y))


def _tank_sprite(tank: Tank) -> pygame.Surface:
    size = int(tank.size)
    half = size // 2
    quarter = size // 4
    # Twice the hull size so the barrel fits when pointing right.
    sprite = pygame.Surface((size * 2, size * 2), pygame.SRCALPHA)
    center = size
    pygame.draw.rect(
        sprite,
        pygame.Color(tank.color),
        pygame.Rect(center - half, center - half, size, size),
    )
    pygame.draw.rect(
        sprite,
        pygame.Color(TANK_CORE_COLOR),
        pygame.Rect(center - quarter, center - quarter, half, half),
    )
    pygame.draw.rect(
        sprite,
        pygame.Color(BARREL_COLOR),
        pygame.Rect(center + half, center - 4, half, 8),
    )
    return sprite


def draw_tank(surface: pygame.Surface, tank: Tank) -> None:
    # Canvas angles grow clockwise with y pointing down; pygame rotates anticlockwise.
    rotated = pygame.transform.rotate(_tank_sprite(tank), -math.degrees(tank.angle))
    rect = rotated.get_rect(center=(round(tank.x), round(tank.y)))
    surface.blit(rotated, rect)


def draw_tanks(app) -> None:
    game = app.game
    draw_tank(app.playfield, game.player)
    for enemy in game.enemies:
        draw_tank(app.playfield, enemy)


def draw_bullets(app) -> None:
    surface = app.playfield
    player_color = pygame.Color(PLAYER_BULLET_COLOR)
    enemy_color = pygame.Color(ENEMY_BULLET_COLOR)
    for bullet in app.game.bullets:
        color = player_color if bullet.owner is Owner.PLAYER else enemy_color
        radius = max(1, int(round(bullet.radius)))
        pygame.draw.circle(surface, color, (round(bullet.x), round(bullet.y)), radius)


def draw_particles(app) -> None:
    particles = app.game.particles
    if not len(particles):
        return
    surface = app.playfield
    for particle in particles:
        alpha = int(255 * particle.alpha)
        if alpha <= 0:
            continue
        color = pygame.Color(particle.color)
        speck = pygame.Surface((PARTICLE_SIZE, PARTICLE_SIZE), pygame.SRCALPHA)
        speck.fill((color.r, color.g, color.b, alpha))
        surface.blit(speck, (int(particle.x), int(particle.y)))


def draw_overlay(app) -> None:
    game = app.game
    if game.running:
        return
    surface = app.playfield
    overlay = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
    overlay.fill(OVERLAY_RGBA)
    surface.blit(overlay, (0, 0))
    prompt = game.overlay_prompt or ""
    text = app.font_large.render(prompt, True, pygame.Color(TEXT_COLOR))
    rect = text.get_rect(center=(surface.get_width() // 2, surface.get_height() // 2))
    surface.blit(text, rect)


__all__ = [
    "draw_background",
    "draw_bullets",
    "draw_overlay",
    "draw_particles",
    "draw_tank",
    "draw_tanks",
]
