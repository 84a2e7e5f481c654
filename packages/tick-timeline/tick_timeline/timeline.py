"""Timeline - sequences phases and drives them from per-step time deltas."""
from __future__ import annotations

import logging
from datetime import timedelta
from typing import Any, Callable, Iterable, Iterator

from tick_timeline.capabilities import CapabilityRegistry
from tick_timeline.channels import Accessor, Channel, ChannelBuilder
from tick_timeline.phase import Phase
from tick_timeline.types import (
    MissingCapabilityError,
    PhaseState,
    StopPredicate,
    T,
    TimelineStartedError,
    TimelineStatus,
)
from tick_timeline.values import FLOAT, ValueOps

logger = logging.getLogger(__name__)


class Timeline:
    """Ordered phases of property channels for one target.

    Configure with chained calls, then drive with ``advance(dt)`` once per
    host tick (or hand ``run`` a stream of deltas). Builder calls always
    apply to the current (last) phase; ``then`` opens a new one. Once the
    first step runs the timeline is locked against further configuration.
    """

    def __init__(self, target: Any, on_destroy: Callable[[Any], None] | None = None) -> None:
        self._target = target
        self._on_destroy = on_destroy
        self._phases: list[Phase] = [Phase()]
        self._cursor = 0
        self._started = False
        self._status = TimelineStatus.RUNNING

    # --- Configuration ---

    @property
    def target(self) -> Any:
        return self._target

    @property
    def phases(self) -> tuple[Phase, ...]:
        return tuple(self._phases)

    @property
    def current_phase(self) -> Phase:
        return self._phases[-1]

    def duration(self, seconds: float | timedelta) -> Timeline:
        self._check_mutable()
        self.current_phase.set_duration(seconds)
        return self

    def stop_when(self, predicate: StopPredicate) -> Timeline:
        self._check_mutable()
        self.current_phase.stop_when = predicate
        return self

    def then_destroy(self) -> Timeline:
        self._check_mutable()
        if self._on_destroy is None:
            raise ValueError("then_destroy requires an on_destroy callback")
        self.current_phase.destroy_after = True
        return self

    def then(
        self,
        duration: float | timedelta | None = None,
        stop_when: StopPredicate | None = None,
        destroy_after: bool = False,
    ) -> Timeline:
        """Open a new phase, optionally configured up front."""
        self._check_mutable()
        if destroy_after and self._on_destroy is None:
            raise ValueError("destroy_after requires an on_destroy callback")
        phase = Phase(
            duration=0.0 if duration is None else duration,
            stop_when=stop_when,
            destroy_after=destroy_after,
        )
        self._phases.append(phase)
        return self

    def add(self, channel: Channel) -> Timeline:
        self._check_mutable()
        self.current_phase.add(channel)
        return self

    def channel(
        self, get: Callable[[], T], set: Callable[[T], None], ops: ValueOps[T] = FLOAT
    ) -> ChannelBuilder[T]:
        self._check_mutable()
        return ChannelBuilder(self, Accessor(get, set, ops))

    def channel_for(self, accessor: Accessor[T]) -> ChannelBuilder[T]:
        self._check_mutable()
        return ChannelBuilder(self, accessor)

    def attribute(self, name: str, ops: ValueOps[T] = FLOAT) -> ChannelBuilder[T]:
        """Channel over ``getattr``/``setattr`` of the bound target."""
        self._check_mutable()
        target = self._target
        if not hasattr(target, name):
            raise MissingCapabilityError(
                name, f"{type(target).__name__} has no attribute '{name}'"
            )
        return ChannelBuilder(
            self,
            Accessor(lambda: getattr(target, name), lambda v: setattr(target, name, v), ops),
        )

    def capability(self, registry: CapabilityRegistry) -> ChannelBuilder:
        """Channel over the first provider in ``registry`` that accepts the target."""
        self._check_mutable()
        return ChannelBuilder(self, registry.resolve(self._target))

    def _check_mutable(self) -> None:
        if self._started:
            raise TimelineStartedError("Timeline has already started")

    # --- Execution ---

    @property
    def started(self) -> bool:
        return self._started

    @property
    def status(self) -> TimelineStatus:
        return self._status

    @property
    def finished(self) -> bool:
        return self._status is not TimelineStatus.RUNNING

    def start(self) -> Timeline:
        if self._started:
            raise TimelineStartedError("Timeline can only be started once")
        self._started = True
        logger.debug("timeline start: %d phase(s) for %r", len(self._phases), self._target)
        return self

    def run(self, deltas: Iterable[float]) -> Iterator[TimelineStatus]:
        """Start, then advance once per delta, yielding after every step until finished."""
        self.start()
        return self._run(deltas)

    def _run(self, deltas: Iterable[float]) -> Iterator[TimelineStatus]:
        for dt in deltas:
            status = self.advance(dt)
            yield status
            if status is not TimelineStatus.RUNNING:
                return

    def advance(self, dt: float) -> TimelineStatus:
        """Consume one host tick of ``dt`` seconds.

        At most one interpolation step runs per call. Phases that are
        already due or stopped complete without consuming ``dt``, and the
        next phase takes the step instead.
        """
        if dt < 0:
            raise ValueError(f"dt must be >= 0, got {dt}")
        if not self._started:
            self.start()
        if self.finished:
            return self._status

        while self._cursor < len(self._phases):
            phase = self._phases[self._cursor]
            if phase.should_stop():
                if self._finish_phase(phase, snap=False):
                    return self._status
                continue
            if phase.is_due():
                if self._finish_phase(phase, snap=True):
                    return self._status
                continue

            if phase.state is PhaseState.PENDING:
                logger.debug("phase %d start: %.3fs", self._cursor, phase.duration)
            phase.step(dt)
            if phase.is_due() and self._finish_phase(phase, snap=not phase.should_stop()):
                return self._status
            if self._cursor >= len(self._phases):
                self._status = TimelineStatus.COMPLETED
            return self._status

        self._status = TimelineStatus.COMPLETED
        return self._status

    def _finish_phase(self, phase: Phase, snap: bool) -> bool:
        """Complete ``phase`` and move the cursor. Returns True if the timeline halted."""
        phase.complete(snap)
        if snap:
            logger.debug("phase %d complete", self._cursor)
        else:
            logger.debug("phase %d stopped at %.3fs", self._cursor, phase.elapsed)
        self._cursor += 1

        if phase.destroy_after:
            logger.debug("phase %d destroying %r", self._cursor - 1, self._target)
            self._status = TimelineStatus.DESTROYED
            if self._on_destroy is not None:
                self._on_destroy(self._target)
            return True
        return False
