"""Lazy value ranges: the (start, end) interval a channel interpolates across."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, Generic

from tick_timeline.types import T, UnsupportedOperationError


class ValueRange(ABC, Generic[T]):
    """Interval whose start is read from ``provider`` on first access.

    Capture happens at most once, when either ``start`` or ``end`` is
    first read, never at construction. A later phase therefore starts from
    whatever the target holds when that phase begins interpolating.
    """

    def __init__(self, provider: Callable[[], T]) -> None:
        self._provider = provider
        self._start: T | None = None
        self._captured = False

    @property
    def captured(self) -> bool:
        return self._captured

    @property
    def start(self) -> T:
        if not self._captured:
            self._capture()
        return self._start  # type: ignore[return-value]

    @property
    @abstractmethod
    def end(self) -> T:
        ...

    def _capture(self) -> None:
        self._start = self._provider()
        self._captured = True


class AbsoluteRange(ValueRange[T]):
    """Range towards a fixed target. Reading ``end`` never touches the provider."""

    def __init__(self, provider: Callable[[], T], target: T) -> None:
        super().__init__(provider)
        self._target = target

    @property
    def end(self) -> T:
        return self._target


class OffsetRange(ValueRange[T]):
    """Range towards ``add(start, offset)``, computed once alongside the start capture."""

    def __init__(
        self,
        provider: Callable[[], T],
        offset: T,
        add: Callable[[T, T], T] | None,
        type_name: str = "value",
    ) -> None:
        if add is None:
            raise UnsupportedOperationError(f"{type_name} values do not support offsets")
        super().__init__(provider)
        self._offset = offset
        self._add = add
        self._end: T | None = None

    @property
    def offset(self) -> T:
        return self._offset

    @property
    def end(self) -> T:
        if not self._captured:
            self._capture()
        return self._end  # type: ignore[return-value]

    def _capture(self) -> None:
        # A failing add leaves the range uncaptured; the next read retries.
        start = self._provider()
        self._end = self._add(start, self._offset)
        self._start = start
        self._captured = True
