"""Phase: channels sharing one duration and stop condition."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta

from tick_timeline.channels import Channel
from tick_timeline.types import PhaseState, StopPredicate

# Accumulated frame deltas rarely sum to the duration exactly
# (ten steps of 0.1 give 0.9999999999999999).
COMPLETION_EPSILON = 1e-9


def to_seconds(duration: float | timedelta) -> float:
    """Normalize a duration in seconds or as a timedelta. Raises ValueError if negative."""
    seconds = duration.total_seconds() if isinstance(duration, timedelta) else float(duration)
    if seconds < 0:
        raise ValueError(f"duration must be >= 0, got {seconds}")
    return seconds


@dataclass
class Phase:
    """A time-bounded group of channels.

    All channels are driven with the same elapsed fraction each step.
    A phase whose stop predicate fires completes without the final snap,
    leaving targets at whatever the last step wrote.
    """

    channels: list[Channel] = field(default_factory=list)
    duration: float = 0.0
    stop_when: StopPredicate | None = None
    destroy_after: bool = False
    elapsed: float = 0.0
    state: PhaseState = PhaseState.PENDING
    stopped: bool = False

    def __post_init__(self) -> None:
        self.duration = to_seconds(self.duration)

    def add(self, channel: Channel) -> None:
        self.channels.append(channel)

    def set_duration(self, duration: float | timedelta) -> None:
        self.duration = to_seconds(duration)

    def should_stop(self) -> bool:
        return self.stop_when is not None and bool(self.stop_when())

    def is_due(self) -> bool:
        return self.elapsed >= self.duration - COMPLETION_EPSILON

    @property
    def completed(self) -> bool:
        return self.state is PhaseState.COMPLETED

    def step(self, dt: float) -> None:
        self.state = PhaseState.RUNNING
        self.elapsed += dt
        self.apply(self.elapsed / self.duration)

    def apply(self, fraction: float) -> None:
        for channel in self.channels:
            channel.advance(fraction)

    def complete(self, snap: bool) -> None:
        if snap:
            self.apply(1.0)
        self.stopped = not snap
        self.state = PhaseState.COMPLETED
