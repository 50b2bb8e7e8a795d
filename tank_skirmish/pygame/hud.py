"""HUD panel rendering: score, lives, status and control buttons."""

from __future__ import annotations

import pygame

from tank_skirmish.pygame.config import (
    BUTTON_BORDER_COLOR,
    BUTTON_COLOR,
    BUTTON_HOVER_COLOR,
    PANEL_COLOR,
    TEXT_COLOR,
    TEXT_MUTED,
)


def draw_hud(app) -> None:
    surface = app.screen
    panel = pygame.Rect(0, 0, surface.get_width(), app.panel_height)
    pygame.draw.rect(surface, PANEL_COLOR, panel)

    hud = app.game.hud
    text_color = pygame.Color(TEXT_COLOR)
    top = 10
    left = 16
    for text in (hud.score, hud.lives):
        rendered = app.font_regular.render(text, True, text_color)
        surface.blit(rendered, (left, top))
        left += rendered.get_width() + 28

    status = app.font_small.render(hud.status, True, pygame.Color(TEXT_MUTED))
    surface.blit(status, (16, panel.bottom - status.get_height() - 8))

    hint = app.font_small.render(app.controls_hint, True, pygame.Color(TEXT_MUTED))
    hint_rect = hint.get_rect(centerx=panel.centerx, bottom=panel.bottom - 8)
    if hint_rect.left < left:
        hint_rect.left = left
    surface.blit(hint, hint_rect)

    _draw_buttons(app)


def _draw_buttons(app) -> None:
    surface = app.screen
    mouse = pygame.mouse.get_pos() if pygame.mouse.get_focused() else (-1, -1)
    for button in app.controls.buttons:
        hovered = button.rect.collidepoint(mouse)
        fill = BUTTON_HOVER_COLOR if hovered else BUTTON_COLOR
        pygame.draw.rect(surface, fill, button.rect, border_radius=6)
        pygame.draw.rect(surface, BUTTON_BORDER_COLOR, button.rect, width=1, border_radius=6)
        label = app.font_small.render(button.label, True, pygame.Color(TEXT_COLOR))
        surface.blit(label, label.get_rect(center=button.rect.center))


__all__ = ["draw_hud"]
