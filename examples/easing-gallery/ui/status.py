"""Info panel (sidebar) and bottom status bar."""
from __future__ import annotations

import pygame

from tick_timeline.easing import FAMILIES

from ui.constants import (
    LABEL_COLOR,
    LANE_COUNT,
    LANE_H,
    SCREEN_W,
    SIDEBAR_BG,
    SIDEBAR_W,
    STATUS_BG,
    STATUS_H,
    TEXT_COLOR,
    TEXT_DIM,
)


def draw_sidebar(
    surface: pygame.Surface,
    font: pygame.font.Font,
    wave_count: int,
    complete_count: int,
    active_count: int,
    duration: float,
    tps: int,
    auto_wave: bool,
    family: str,
) -> None:
    """Draw right-side info panel."""
    x = SCREEN_W - SIDEBAR_W
    h = LANE_H * LANE_COUNT

    pygame.draw.rect(surface, SIDEBAR_BG, (x, 0, SIDEBAR_W, h))
    pygame.draw.line(surface, (50, 50, 70), (x, 0), (x, h))

    pad = 10
    line_h = 22
    cx = x + pad
    cy = 8

    surface.blit(font.render("INFO", True, LABEL_COLOR), (cx, cy))
    cy += line_h + 4

    surface.blit(font.render(f"Wave: {wave_count}", True, TEXT_COLOR), (cx, cy))
    cy += line_h
    surface.blit(font.render(f"Done: {complete_count}", True, TEXT_COLOR), (cx, cy))
    cy += line_h
    surface.blit(font.render(f"Live: {active_count}", True, TEXT_COLOR), (cx, cy))
    cy += line_h + 8

    surface.blit(font.render(f"Dur: {duration:.1f}s", True, TEXT_COLOR), (cx, cy))
    cy += line_h
    surface.blit(font.render(f"TPS: {tps}", True, TEXT_COLOR), (cx, cy))
    cy += line_h

    auto_str = "ON" if auto_wave else "OFF"
    auto_color = (100, 255, 100) if auto_wave else TEXT_DIM
    surface.blit(font.render(f"Auto: {auto_str}", True, auto_color), (cx, cy))
    cy += line_h + 8

    surface.blit(font.render("Family:", True, TEXT_DIM), (cx, cy))
    cy += line_h
    for name in FAMILIES:
        color = TEXT_COLOR if name == family else TEXT_DIM
        prefix = "> " if name == family else "  "
        surface.blit(font.render(f"{prefix}{name}", True, color), (cx, cy))
        cy += line_h - 6


def draw_status_bar(surface: pygame.Surface, font: pygame.font.Font) -> None:
    """Draw bottom key-bindings bar."""
    y = LANE_H * LANE_COUNT
    pygame.draw.rect(surface, STATUS_BG, (0, y, SCREEN_W, STATUS_H))
    pygame.draw.line(surface, (50, 50, 70), (0, y), (SCREEN_W, y))

    text = "[Space] Wave  [Up/Down] Family  [A] Auto  [+/-] Duration  [C] Clear  [Esc] Quit"
    label = font.render(text, True, TEXT_DIM)
    surface.blit(label, (8, y + STATUS_H // 2 - label.get_height() // 2))
