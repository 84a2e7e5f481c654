"""Easing Gallery - Interactive easing curve visualizer.

Exercises tick-timeline: each orb is a three-phase Timeline (travel, settle
back, fade out and destroy) driven by a fixed-timestep Ticker.

Controls:
  Space     Launch wave
  Up/Down   Select easing family
  A         Toggle auto-wave
  +/-       Adjust travel duration
  C         Clear all orbs
  Esc       Quit
"""
from __future__ import annotations

import logging
import sys

import pygame

from tick_timeline import Ticker, Timeline, TimelineStatus
from tick_timeline.easing import FAMILIES

from game.orbs import Orb, launch_wave
from ui.constants import (
    BG_COLOR,
    DURATION_MAX,
    DURATION_MIN,
    DURATION_STEP,
    FPS,
    SCREEN_H,
    SCREEN_W,
    TPS,
)
from ui.lanes import draw_lanes
from ui.status import draw_sidebar, draw_status_bar

logger = logging.getLogger(__name__)


class GameState:
    """Holds all game objects and state."""

    def __init__(self) -> None:
        self.ticker = Ticker(tps=TPS)
        self.ticker.on_finish(self._on_finish)
        self.orbs: list[Orb] = []

        self.family_index = 0
        self.duration = 1.5  # seconds
        self.wave_count = 0
        self.complete_count = 0
        self.auto_wave = False

    @property
    def family(self) -> str:
        return FAMILIES[self.family_index]

    def _on_finish(self, timeline: Timeline, status: TimelineStatus) -> None:
        orb = timeline.target
        if status is TimelineStatus.DESTROYED and not orb.cleared:
            self.complete_count += 1

    def launch_wave(self) -> None:
        launch_wave(self.ticker, self.orbs, self.family, self.duration)
        self.wave_count += 1
        logger.info("wave %d: %s over %.1fs", self.wave_count, self.family, self.duration)

    def step(self) -> None:
        """Advance one tick; auto-wave relaunches once the lanes are empty."""
        self.ticker.step()
        if self.auto_wave and not self.ticker.active:
            self.launch_wave()

    def cycle_family(self, delta: int) -> None:
        self.family_index = (self.family_index + delta) % len(FAMILIES)

    def clear_orbs(self) -> None:
        """Stop every orb; their timelines destroy them on the next tick."""
        for orb in self.orbs:
            orb.cleared = True


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    pygame.init()
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
    pygame.display.set_caption("Easing Gallery - tick-timeline demo")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 13)

    state = GameState()

    tick_interval = state.ticker.dt
    accumulator = 0.0
    running = True

    while running:
        dt = clock.tick(FPS) / 1000.0
        accumulator += dt

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False

                elif event.key == pygame.K_SPACE:
                    state.launch_wave()

                elif event.key == pygame.K_UP:
                    state.cycle_family(-1)

                elif event.key == pygame.K_DOWN:
                    state.cycle_family(1)

                elif event.key == pygame.K_a:
                    state.auto_wave = not state.auto_wave

                elif event.key in (pygame.K_PLUS, pygame.K_EQUALS, pygame.K_KP_PLUS):
                    state.duration = min(state.duration + DURATION_STEP, DURATION_MAX)

                elif event.key in (pygame.K_MINUS, pygame.K_KP_MINUS):
                    state.duration = max(state.duration - DURATION_STEP, DURATION_MIN)

                elif event.key == pygame.K_c:
                    state.clear_orbs()

        # --- Tick ---
        while accumulator >= tick_interval:
            state.step()
            accumulator -= tick_interval

        # --- Render ---
        screen.fill(BG_COLOR)
        draw_lanes(screen, state.orbs, state.family, font)
        draw_sidebar(
            screen,
            font,
            wave_count=state.wave_count,
            complete_count=state.complete_count,
            active_count=len(state.orbs),
            duration=state.duration,
            tps=TPS,
            auto_wave=state.auto_wave,
            family=state.family,
        )
        draw_status_bar(screen, font)

        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
