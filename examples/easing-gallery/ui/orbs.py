"""Orb circle renderer."""
from __future__ import annotations

import pygame

from ui.constants import BG_COLOR, STATE_SETTLED


def draw_orb(
    surface: pygame.Surface,
    x: int,
    y: int,
    radius: int,
    color: tuple[int, int, int],
    settled: bool,
    alpha: float,
) -> None:
    """Draw a single orb, white once it has arrived, blended into the background as it fades."""
    base = STATE_SETTLED if settled else color
    alpha = min(max(alpha, 0.0), 1.0)
    fill = tuple(int(bg + (c - bg) * alpha) for c, bg in zip(base, BG_COLOR))

    pygame.draw.circle(surface, fill, (x, y), radius)
    # Thin outline
    outline = tuple(min(c + 40, 255) for c in fill)
    pygame.draw.circle(surface, outline, (x, y), radius, 1)
