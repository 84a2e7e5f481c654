"""Tests for Timeline sequencing, snapping, stopping and destruction."""

import logging
from dataclasses import dataclass
from datetime import timedelta

import pytest
from tick_timeline import (
    INT,
    MissingCapabilityError,
    PhaseState,
    Timeline,
    TimelineStartedError,
    TimelineStatus,
)


@dataclass
class Sprite:
    """Test target with a scalar, an integer and a vector field."""

    x: float = 0.0
    font_size: int = 10
    alpha: float = 1.0


class Destroyer:
    def __init__(self):
        self.calls = []

    def __call__(self, target):
        self.calls.append(target)


def _drive(timeline, dt, steps):
    return [timeline.advance(dt) for _ in range(steps)]


class TestSinglePhase:
    def test_linear_progress(self):
        sprite = Sprite()
        timeline = Timeline(sprite).duration(1.0)
        timeline.attribute("x").to(10.0)
        timeline.advance(0.25)
        assert sprite.x == 2.5
        timeline.advance(0.25)
        assert sprite.x == 5.0

    def test_final_snap_despite_float_drift(self):
        sprite = Sprite()
        timeline = Timeline(sprite).duration(1.0)
        timeline.attribute("x").to(7.3, "sine_in_out")
        statuses = _drive(timeline, 0.1, 10)
        assert statuses[-1] is TimelineStatus.COMPLETED
        assert statuses[:-1] == [TimelineStatus.RUNNING] * 9
        assert sprite.x == 7.3

    def test_final_snap_when_steps_overshoot(self):
        sprite = Sprite()
        timeline = Timeline(sprite).duration(1.0)
        timeline.attribute("x").to(7.3)
        statuses = _drive(timeline, 0.3, 4)
        assert statuses[-1] is TimelineStatus.COMPLETED
        assert sprite.x == 7.3

    def test_variable_steps(self):
        sprite = Sprite()
        timeline = Timeline(sprite).duration(1.0)
        timeline.attribute("x").to(100.0)
        timeline.advance(0.1)
        assert abs(sprite.x - 10.0) < 1e-9
        timeline.advance(0.4)
        assert abs(sprite.x - 50.0) < 1e-9
        assert timeline.advance(0.7) is TimelineStatus.COMPLETED
        assert sprite.x == 100.0

    def test_timedelta_duration(self):
        sprite = Sprite()
        timeline = Timeline(sprite).duration(timedelta(milliseconds=500))
        timeline.attribute("x").to(1.0)
        assert _drive(timeline, 0.25, 2)[-1] is TimelineStatus.COMPLETED

    def test_zero_duration_snaps_on_first_step(self):
        sprite = Sprite()
        timeline = Timeline(sprite)
        timeline.attribute("x").to(4.0)
        assert timeline.advance(0.016) is TimelineStatus.COMPLETED
        assert sprite.x == 4.0

    def test_empty_timeline_completes(self):
        assert Timeline(object()).advance(0.1) is TimelineStatus.COMPLETED

    def test_integer_offset(self):
        sprite = Sprite(font_size=10)
        timeline = Timeline(sprite).duration(1.0)
        timeline.attribute("font_size", INT).by(5)
        timeline.advance(0.5)
        assert sprite.font_size == 12
        timeline.advance(0.5)
        assert sprite.font_size == 15

    def test_inert_after_completion(self):
        sprite = Sprite()
        timeline = Timeline(sprite).duration(0.5)
        timeline.attribute("x").to(1.0)
        _drive(timeline, 0.5, 1)
        sprite.x = 42.0
        assert timeline.advance(0.5) is TimelineStatus.COMPLETED
        assert sprite.x == 42.0
        assert timeline.finished


class TestStopPredicate:
    def test_stop_skips_snap(self):
        sprite = Sprite()
        flag = {"stop": False}
        timeline = Timeline(sprite).duration(1.0).stop_when(lambda: flag["stop"])
        timeline.attribute("x").to(10.0)
        _drive(timeline, 0.25, 2)
        assert sprite.x == 5.0
        flag["stop"] = True
        assert timeline.advance(0.25) is TimelineStatus.COMPLETED
        assert sprite.x == 5.0
        phase = timeline.phases[0]
        assert phase.stopped
        assert phase.state is PhaseState.COMPLETED

    def test_predicate_checked_every_step(self):
        calls = []
        sprite = Sprite()

        def predicate():
            calls.append(sprite.x)
            return False

        timeline = Timeline(sprite).duration(1.0).stop_when(predicate)
        timeline.attribute("x").to(10.0)
        _drive(timeline, 0.25, 4)
        assert len(calls) >= 4

    def test_true_at_start_never_moves(self):
        sprite = Sprite(x=3.0)
        timeline = Timeline(sprite).duration(1.0).stop_when(lambda: True)
        timeline.attribute("x").to(10.0)
        assert timeline.advance(0.25) is TimelineStatus.COMPLETED
        assert sprite.x == 3.0

    def test_stopped_phase_hands_over_to_next(self):
        sprite = Sprite()
        flag = {"stop": False}
        timeline = Timeline(sprite).duration(1.0).stop_when(lambda: flag["stop"])
        timeline.attribute("x").to(10.0)
        timeline.then(duration=1.0)
        timeline.attribute("x").by(1.0)
        timeline.advance(0.5)
        flag["stop"] = True
        # Phase 1 stops and phase 2 takes this step from x == 5.0.
        timeline.advance(0.5)
        assert sprite.x == 5.5
        assert timeline.phases[1].channels[0].range.start == 5.0


class TestSequencing:
    def test_two_phase_offset(self):
        sprite = Sprite()
        timeline = Timeline(sprite).duration(1.0)
        timeline.attribute("x").to(10.0)
        timeline.then().duration(1.0)
        timeline.attribute("x").by(5.0)

        statuses = _drive(timeline, 0.25, 4)
        assert statuses[-1] is TimelineStatus.RUNNING
        assert sprite.x == 10.0
        second = timeline.phases[1].channels[0]
        assert not second.range.captured

        statuses = _drive(timeline, 0.25, 4)
        assert statuses[-1] is TimelineStatus.COMPLETED
        assert sprite.x == 15.0
        assert second.range.start == 10.0

    def test_later_phase_reads_live_value(self):
        sprite = Sprite()
        timeline = Timeline(sprite).duration(0.5)
        timeline.attribute("x").to(10.0)
        timeline.then(duration=0.5)
        timeline.attribute("x").by(1.0)
        _drive(timeline, 0.5, 1)
        sprite.x = 100.0
        _drive(timeline, 0.5, 1)
        assert sprite.x == 101.0

    def test_zero_duration_phase_falls_through(self):
        sprite = Sprite()
        timeline = Timeline(sprite)
        timeline.attribute("alpha").to(0.0)
        timeline.then(duration=1.0)
        timeline.attribute("x").to(10.0)
        assert timeline.advance(0.5) is TimelineStatus.RUNNING
        assert sprite.alpha == 0.0
        assert sprite.x == 5.0

    def test_then_config(self):
        stop = lambda: False  # noqa: E731
        timeline = Timeline(Sprite(), on_destroy=Destroyer())
        timeline.then(duration=2.0, stop_when=stop, destroy_after=True)
        phase = timeline.current_phase
        assert phase.duration == 2.0
        assert phase.stop_when is stop
        assert phase.destroy_after
        assert len(timeline.phases) == 2

    def test_builders_target_current_phase(self):
        timeline = Timeline(Sprite()).duration(1.0)
        timeline.then().duration(3.0)
        assert [p.duration for p in timeline.phases] == [1.0, 3.0]

    def test_starts_with_one_empty_phase(self):
        timeline = Timeline(Sprite())
        assert len(timeline.phases) == 1
        assert timeline.current_phase.channels == []
        assert timeline.status is TimelineStatus.RUNNING
        assert not timeline.started


class TestDestroy:
    def test_destroy_once_and_halt(self):
        sprite = Sprite()
        destroyer = Destroyer()
        timeline = Timeline(sprite, on_destroy=destroyer).duration(0.5)
        timeline.attribute("x").to(10.0)
        timeline.then_destroy()
        timeline.then(duration=0.5)
        timeline.attribute("alpha").to(0.0)

        statuses = _drive(timeline, 0.25, 6)
        assert statuses[1] is TimelineStatus.DESTROYED
        assert statuses[2:] == [TimelineStatus.DESTROYED] * 4
        assert destroyer.calls == [sprite]
        assert sprite.x == 10.0
        assert sprite.alpha == 1.0
        assert not timeline.phases[1].channels[0].range.captured

    def test_destroy_after_stop(self):
        sprite = Sprite()
        destroyer = Destroyer()
        flag = {"stop": False}
        timeline = Timeline(sprite, on_destroy=destroyer).duration(1.0)
        timeline.attribute("x").to(10.0)
        timeline.stop_when(lambda: flag["stop"]).then_destroy()
        timeline.advance(0.25)
        flag["stop"] = True
        assert timeline.advance(0.25) is TimelineStatus.DESTROYED
        assert destroyer.calls == [sprite]
        assert sprite.x == 2.5

    def test_then_destroy_requires_callback(self):
        with pytest.raises(ValueError):
            Timeline(Sprite()).then_destroy()
        with pytest.raises(ValueError):
            Timeline(Sprite()).then(destroy_after=True)


class TestLifecycle:
    def test_configuration_locked_after_start(self):
        sprite = Sprite()
        timeline = Timeline(sprite).duration(1.0)
        timeline.attribute("x").to(1.0)
        timeline.advance(0.1)
        assert timeline.started
        with pytest.raises(TimelineStartedError):
            timeline.duration(2.0)
        with pytest.raises(TimelineStartedError):
            timeline.then()
        with pytest.raises(TimelineStartedError):
            timeline.attribute("x")
        with pytest.raises(TimelineStartedError):
            timeline.stop_when(lambda: True)
        assert len(timeline.phases) == 1
        assert len(timeline.phases[0].channels) == 1

    def test_builder_held_across_start_is_rejected(self):
        timeline = Timeline(Sprite()).duration(1.0)
        builder = timeline.attribute("x")
        timeline.start()
        with pytest.raises(TimelineStartedError):
            builder.to(5.0)

    def test_start_only_once(self):
        timeline = Timeline(Sprite())
        timeline.start()
        with pytest.raises(TimelineStartedError):
            timeline.start()
        with pytest.raises(TimelineStartedError):
            timeline.run([0.1])

    def test_run_yields_per_step(self):
        sprite = Sprite()
        timeline = Timeline(sprite).duration(1.0)
        timeline.attribute("x").to(10.0)
        statuses = list(timeline.run([0.5] * 5))
        assert statuses == [TimelineStatus.RUNNING, TimelineStatus.COMPLETED]
        assert sprite.x == 10.0

    def test_run_is_lazy(self):
        sprite = Sprite()
        timeline = Timeline(sprite).duration(1.0)
        timeline.attribute("x").to(10.0)
        steps = timeline.run([0.5, 0.5])
        assert timeline.started
        assert sprite.x == 0.0
        next(steps)
        assert sprite.x == 5.0

    def test_negative_dt_rejected(self):
        with pytest.raises(ValueError):
            Timeline(Sprite()).advance(-0.1)

    def test_missing_attribute(self):
        with pytest.raises(MissingCapabilityError) as excinfo:
            Timeline(Sprite()).attribute("rotation")
        assert excinfo.value.capability == "rotation"

    def test_setter_errors_propagate(self):
        def boom(value):
            raise RuntimeError("setter failed")

        timeline = Timeline(Sprite()).duration(1.0)
        timeline.channel(lambda: 0.0, boom).to(1.0)
        with pytest.raises(RuntimeError, match="setter failed"):
            timeline.advance(0.5)

    def test_logs_phase_events(self, caplog):
        sprite = Sprite()
        timeline = Timeline(sprite).duration(0.5)
        timeline.attribute("x").to(1.0)
        with caplog.at_level(logging.DEBUG, logger="tick_timeline.timeline"):
            _drive(timeline, 0.5, 1)
        assert "phase 0 complete" in caplog.text
