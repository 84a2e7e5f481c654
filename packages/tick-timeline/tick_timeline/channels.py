"""Property channels: one animated value bound to a range and an easing."""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Generic

from tick_timeline.easing import Easing, resolve_easing
from tick_timeline.ranges import AbsoluteRange, OffsetRange, ValueRange
from tick_timeline.rotation import euler_to_quaternion, quaternion_to_euler
from tick_timeline.types import T, UnsupportedOperationError
from tick_timeline.values import FLOAT, QUATERNION, VECTOR3, ValueOps, Vec

if TYPE_CHECKING:
    from tick_timeline.timeline import Timeline

EasingLike = Easing | str | Callable[[float], float] | None


@dataclass(frozen=True)
class Accessor(Generic[T]):
    """Getter/setter pair for one property of a live target, plus its value ops."""

    get: Callable[[], T]
    set: Callable[[T], None]
    ops: ValueOps[T] = FLOAT  # type: ignore[assignment]


class Channel(Generic[T]):
    """Interpolates one accessor across a value range.

    The channel only reads and writes through its accessor and knows nothing
    about the target behind it.
    """

    def __init__(
        self,
        accessor: Accessor[T],
        value_range: ValueRange[T],
        easing: EasingLike = None,
    ) -> None:
        self.accessor = accessor
        self.range = value_range
        self.easing = resolve_easing(easing)

    def advance(self, fraction: float) -> None:
        eased = self.easing.ease(fraction)
        value = self.accessor.ops.lerp(self.range.start, self.range.end, eased)
        self.accessor.set(value)

    def __repr__(self) -> str:
        return f"Channel({self.accessor.ops.name}, easing={self.easing.name})"


def component(parent: Accessor[Vec], index: int | str) -> Accessor[float]:
    """Scalar accessor over one axis or colour channel of ``parent``.

    Writes replace a single slot in a copy of the parent's current value.
    """
    ops = parent.ops
    if not ops.axes:
        raise UnsupportedOperationError(f"{ops.name} values have no components")
    if isinstance(index, str):
        if index not in ops.axes:
            raise UnsupportedOperationError(f"{ops.name} values have no '{index}' component")
        index = ops.axes.index(index)
    if not 0 <= index < ops.size:
        raise UnsupportedOperationError(
            f"{ops.name} component index {index} out of range 0..{ops.size - 1}"
        )
    i = index

    def get() -> float:
        return parent.get()[i]

    def set_(value: float) -> None:
        current = tuple(parent.get())
        parent.set(current[:i] + (value,) + current[i + 1:])

    return Accessor(get, set_, FLOAT)


def euler(parent: Accessor[Vec]) -> Accessor[Vec]:
    """Vector accessor over the Euler angles (degrees) of a rotation accessor."""
    if parent.ops is not QUATERNION:
        raise UnsupportedOperationError(f"{parent.ops.name} values have no Euler decomposition")
    return Accessor(
        lambda: quaternion_to_euler(parent.get()),
        lambda value: parent.set(euler_to_quaternion(value)),
        VECTOR3,
    )


class ChannelBuilder(Generic[T]):
    """Staged channel configuration returned by ``Timeline.channel``.

    ``to`` and ``by`` finish the channel, add it to the timeline's current
    phase and return the timeline.
    """

    def __init__(self, timeline: Timeline, accessor: Accessor[T]) -> None:
        self._timeline = timeline
        self._accessor = accessor
        self._provider: Callable[[], T] = accessor.get

    @property
    def accessor(self) -> Accessor[T]:
        return self._accessor

    def start_at(self, value: T) -> ChannelBuilder[T]:
        start = self._pad(value, self._accessor.get)
        self._provider = lambda: start
        return self

    def to(self, value: T, easing: EasingLike = None) -> Timeline:
        target = self._pad(value, self._accessor.get)
        return self._finish(AbsoluteRange(self._provider, target), easing)

    def by(self, offset: T, easing: EasingLike = None) -> Timeline:
        ops = self._accessor.ops
        value_range = OffsetRange(self._provider, self._pad(offset, None), ops.add, ops.name)
        return self._finish(value_range, easing)

    def component(self, index: int | str) -> ChannelBuilder[float]:
        return ChannelBuilder(self._timeline, component(self._accessor, index))  # type: ignore[arg-type]

    @property
    def x(self) -> ChannelBuilder[float]:
        return self.component("x")

    @property
    def y(self) -> ChannelBuilder[float]:
        return self.component("y")

    @property
    def z(self) -> ChannelBuilder[float]:
        return self.component("z")

    @property
    def r(self) -> ChannelBuilder[float]:
        return self.component("r")

    @property
    def g(self) -> ChannelBuilder[float]:
        return self.component("g")

    @property
    def b(self) -> ChannelBuilder[float]:
        return self.component("b")

    @property
    def a(self) -> ChannelBuilder[float]:
        return self.component("a")

    @property
    def euler(self) -> ChannelBuilder[Vec]:
        return ChannelBuilder(self._timeline, euler(self._accessor))  # type: ignore[arg-type]

    def _pad(self, value, fill: Callable[[], T] | None):
        """Complete a short vector from the live value (or zeros when ``fill`` is None)."""
        size = self._accessor.ops.size
        if not size or len(value) >= size:
            return value
        value = tuple(value)
        if fill is None:
            return value + (0.0,) * (size - len(value))
        return value + tuple(fill())[len(value):size]

    def _finish(self, value_range: ValueRange[T], easing: EasingLike) -> Timeline:
        return self._timeline.add(Channel(self._accessor, value_range, easing))
