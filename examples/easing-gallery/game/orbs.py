"""Orb objects and the timelines that move them."""
from __future__ import annotations

from dataclasses import dataclass

from tick_timeline import Ticker, Timeline
from tick_timeline.easing import VARIANTS

from ui.constants import (
    CURVE_W,
    FADE_SECONDS,
    LABEL_W,
    LANE_H,
    SETTLE_BACK,
    SETTLE_SECONDS,
    TRACK_PAD,
    TRACK_W,
)


@dataclass(eq=False)
class Orb:
    """A dot travelling along one lane's track."""

    lane: int
    variant: str
    x: float
    y: float
    t: float = 0.0  # linear progress through the travel phase
    alpha: float = 1.0
    cleared: bool = False


def lane_bounds(lane: int) -> tuple[float, float, float]:
    """Return (start_x, end_x, y) of a lane's rail."""
    track_x = LABEL_W + CURVE_W
    y = lane * LANE_H + LANE_H / 2
    return track_x + TRACK_PAD, track_x + TRACK_W - TRACK_PAD, y


def make_orb_timeline(orb: Orb, easing: str, end_x: float, duration: float, on_destroy) -> Timeline:
    """Travel to end_x, settle back a little, then fade out and destroy."""
    cleared = lambda: orb.cleared  # noqa: E731
    timeline = Timeline(orb, on_destroy=on_destroy).duration(duration).stop_when(cleared)
    timeline.attribute("x").to(end_x, easing)
    timeline.attribute("t").to(1.0)

    timeline.then(duration=SETTLE_SECONDS, stop_when=cleared)
    timeline.attribute("x").by(-SETTLE_BACK, "quad_out")

    timeline.then(duration=FADE_SECONDS, stop_when=cleared, destroy_after=True)
    timeline.attribute("alpha").to(0.0)
    return timeline


def launch_wave(ticker: Ticker, orbs: list[Orb], family: str, duration: float) -> None:
    """Spawn one orb per variant of ``family`` at the left of its lane."""
    def remove(orb: Orb) -> None:
        if orb in orbs:
            orbs.remove(orb)

    for lane, variant in enumerate(VARIANTS):
        start_x, end_x, y = lane_bounds(lane)
        orb = Orb(lane=lane, variant=variant, x=start_x, y=y)
        orbs.append(orb)
        ticker.add(make_orb_timeline(orb, f"{family}_{variant}", end_x, duration, remove))
