"""Ticker - fixed-timestep driver that advances timelines once per tick."""
from __future__ import annotations

import time
from typing import Callable

from tick_timeline.timeline import Timeline
from tick_timeline.types import TimelineStatus

FinishHook = Callable[[Timeline, TimelineStatus], None]


class Ticker:
    def __init__(self, tps: int = 60) -> None:
        if tps <= 0:
            raise ValueError("tps must be positive")
        self._tps = tps
        self._dt = 1.0 / tps
        self._tick_number = 0
        self._timelines: list[Timeline] = []
        self._finish_hooks: list[FinishHook] = []
        self._stop_requested = False

    @property
    def tps(self) -> int:
        return self._tps

    @property
    def dt(self) -> float:
        return self._dt

    @property
    def tick_number(self) -> int:
        return self._tick_number

    @property
    def active(self) -> list[Timeline]:
        return list(self._timelines)

    def add(self, timeline: Timeline) -> Timeline:
        """Start ``timeline`` and advance it on every following tick."""
        timeline.start()
        self._timelines.append(timeline)
        return timeline

    def on_finish(self, hook: FinishHook) -> None:
        self._finish_hooks.append(hook)

    def request_stop(self) -> None:
        self._stop_requested = True

    def _tick(self) -> None:
        """Advance every active timeline once.

        A timeline whose ``advance`` raises is dropped and the error
        propagates; timelines not yet advanced stay active for the next tick.
        """
        self._tick_number += 1
        running: list[Timeline] = []
        # Iterate a snapshot: hooks may add timelines for the next tick.
        pending = iter(self._timelines)
        self._timelines = []
        try:
            for timeline in pending:
                status = timeline.advance(self._dt)
                if status is TimelineStatus.RUNNING:
                    running.append(timeline)
                    continue
                for hook in self._finish_hooks:
                    hook(timeline, status)
        finally:
            self._timelines = running + list(pending) + self._timelines

    def step(self) -> None:
        self._stop_requested = False
        self._tick()

    def run(self, n: int) -> None:
        self._stop_requested = False
        for _ in range(n):
            self._tick()
            if self._stop_requested:
                break

    def run_forever(self) -> None:
        """Tick in real time until ``request_stop`` or no timelines remain."""
        self._stop_requested = False
        while not self._stop_requested and self._timelines:
            start = time.monotonic()
            self._tick()
            if self._stop_requested:
                break
            sleep_time = self._dt - (time.monotonic() - start)
            if sleep_time > 0:
                time.sleep(sleep_time)
