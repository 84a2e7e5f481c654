"""tick-timeline - Multi-phase property tweening driven by per-tick time deltas."""
from __future__ import annotations

from tick_timeline.capabilities import CapabilityRegistry
from tick_timeline.channels import Accessor, Channel, ChannelBuilder, component, euler
from tick_timeline.driver import Ticker
from tick_timeline.easing import EASINGS, Easing, get_easing
from tick_timeline.phase import Phase
from tick_timeline.ranges import AbsoluteRange, OffsetRange, ValueRange
from tick_timeline.timeline import Timeline
from tick_timeline.types import (
    MissingCapabilityError,
    PhaseState,
    TimelineStartedError,
    TimelineStatus,
    TweenError,
    UnsupportedOperationError,
)
from tick_timeline.values import COLOR, FLOAT, INT, QUATERNION, VECTOR2, VECTOR3, ValueOps

__all__ = [
    "Timeline",
    "Phase",
    "Channel",
    "ChannelBuilder",
    "Accessor",
    "component",
    "euler",
    "ValueRange",
    "AbsoluteRange",
    "OffsetRange",
    "Easing",
    "EASINGS",
    "get_easing",
    "ValueOps",
    "FLOAT",
    "INT",
    "VECTOR2",
    "VECTOR3",
    "COLOR",
    "QUATERNION",
    "CapabilityRegistry",
    "Ticker",
    "PhaseState",
    "TimelineStatus",
    "TweenError",
    "UnsupportedOperationError",
    "MissingCapabilityError",
    "TimelineStartedError",
]
