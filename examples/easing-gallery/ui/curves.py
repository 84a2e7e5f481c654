"""Easing curve plot renderer."""
from __future__ import annotations

import pygame

from tick_timeline.easing import EASINGS

from ui.constants import CURVE_BG, TEXT_DIM


def draw_curve_plot(
    surface: pygame.Surface,
    easing_name: str,
    color: tuple[int, int, int],
    x: int,
    y: int,
    w: int,
    h: int,
    current_t: float,
) -> None:
    """Draw an easing curve with a tracking dot."""
    pad = 10
    plot_x = x + pad
    plot_w = w - 2 * pad
    # Leave headroom above 1 and below 0 for back and elastic overshoot.
    span = (h - 2 * pad) * 0.6
    base_y = y + pad + (h - 2 * pad) * 0.8

    pygame.draw.rect(surface, CURVE_BG, (x, y, w, h))

    # Axes at value 0 and value 1
    pygame.draw.line(surface, TEXT_DIM, (plot_x, base_y), (plot_x + plot_w, base_y))
    pygame.draw.line(surface, TEXT_DIM, (plot_x, base_y - span), (plot_x + plot_w, base_y - span))
    pygame.draw.line(surface, TEXT_DIM, (plot_x, y + pad), (plot_x, y + h - pad))

    easing = EASINGS.get(easing_name)
    if easing is None:
        return

    samples = 80
    points = []
    for i in range(samples + 1):
        t = i / samples
        points.append((plot_x + t * plot_w, base_y - easing(t) * span))
    pygame.draw.lines(surface, color, False, points, 2)

    # Moving dot
    if 0.0 <= current_t <= 1.0:
        dot_x = int(plot_x + current_t * plot_w)
        dot_y = int(base_y - easing(current_t) * span)
        pygame.draw.circle(surface, (255, 255, 255), (dot_x, dot_y), 4)
        pygame.draw.circle(surface, color, (dot_x, dot_y), 3)
