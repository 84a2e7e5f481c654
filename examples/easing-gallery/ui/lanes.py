"""Lane-based rendering: one lane per variant of the selected family."""
from __future__ import annotations

import pygame

from tick_timeline.easing import VARIANTS

from game.orbs import Orb, lane_bounds
from ui.constants import (
    CURVE_W,
    LABEL_COLOR,
    LABEL_W,
    LANE_BG,
    LANE_BORDER,
    LANE_H,
    ORB_RADIUS,
    TRACK_BG,
    TRACK_RAIL,
    TRACK_W,
    VARIANT_COLORS,
)
from ui.curves import draw_curve_plot
from ui.orbs import draw_orb


def draw_lanes(surface: pygame.Surface, orbs: list[Orb], family: str, font: pygame.font.Font) -> None:
    """Draw 4 lanes with labels, curves, and orb tracks."""
    lane_orbs: dict[int, list[Orb]] = {i: [] for i in range(len(VARIANTS))}
    for orb in orbs:
        lane_orbs[orb.lane].append(orb)

    track_x = LABEL_W + CURVE_W
    full_w = LABEL_W + CURVE_W + TRACK_W

    for i, variant in enumerate(VARIANTS):
        lane_y = i * LANE_H
        easing_name = f"{family}_{variant}"
        color = VARIANT_COLORS[variant]

        pygame.draw.rect(surface, LANE_BG, (0, lane_y, full_w, LANE_H))
        pygame.draw.line(surface, LANE_BORDER, (0, lane_y + LANE_H - 1), (full_w, lane_y + LANE_H - 1))

        label = font.render(easing_name, True, LABEL_COLOR)
        surface.blit(label, (10, lane_y + LANE_H // 2 - label.get_height() // 2))

        # Curve dot follows the newest orb still travelling
        travelling = [orb.t for orb in lane_orbs[i] if orb.t < 1.0]
        current_t = min(travelling) if travelling else -1.0
        draw_curve_plot(surface, easing_name, color, LABEL_W, lane_y + 10, CURVE_W, LANE_H - 20, current_t)

        pygame.draw.rect(surface, TRACK_BG, (track_x, lane_y, TRACK_W, LANE_H))

        rail_left, rail_right, rail_y = lane_bounds(i)
        rail_y = int(rail_y)
        pygame.draw.line(surface, TRACK_RAIL, (rail_left, rail_y), (rail_right, rail_y), 2)

        dim_color = tuple(c // 3 for c in color)
        pygame.draw.circle(surface, dim_color, (int(rail_left), rail_y), 4)
        pygame.draw.circle(surface, dim_color, (int(rail_right), rail_y), 4)

        for orb in lane_orbs[i]:
            draw_orb(surface, int(orb.x), int(orb.y), ORB_RADIUS, color, orb.t >= 1.0, orb.alpha)
