"""Shared enums and exceptions for tick-timeline."""
from __future__ import annotations

from enum import Enum
from typing import Callable, TypeVar

T = TypeVar("T")

Getter = Callable[[], T]
Setter = Callable[[T], None]
StopPredicate = Callable[[], bool]


class PhaseState(Enum):
    PENDING = "pending"
    RUNNING = "running"
    COMPLETED = "completed"


class TimelineStatus(Enum):
    """Result of one ``Timeline.advance`` call."""

    RUNNING = "running"
    COMPLETED = "completed"
    DESTROYED = "destroyed"


class TweenError(Exception):
    """Base class for tick-timeline errors."""


class UnsupportedOperationError(TweenError, TypeError):
    """Raised when a value type lacks the requested operation (e.g. offset on rotations)."""


class MissingCapabilityError(TweenError, LookupError):
    """Raised when a target exposes nothing that can back the requested channel."""

    def __init__(self, capability: str, message: str) -> None:
        self.capability = capability
        super().__init__(message)


class TimelineStartedError(TweenError, RuntimeError):
    """Raised on configuration or restart of a timeline that has already started."""
