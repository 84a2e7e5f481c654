"""Per-type interpolation operations.

A ``ValueOps`` pairs an unclamped lerp with an optional ``add``. Vectors and
colours are plain ``tuple[float, ...]``; rotations are ``(x, y, z, w)`` unit
quaternions.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Generic

from tick_timeline.types import T

Vec = tuple[float, ...]


@dataclass(frozen=True)
class ValueOps(Generic[T]):
    """Interpolation operations for one value type.

    ``add`` is None for types with no meaningful offset (rotations).
    ``axes`` names the independently animatable components, empty for
    scalars and rotations.
    """

    name: str
    lerp: Callable[[T, T, float], T]
    add: Callable[[T, T], T] | None = None
    axes: tuple[str, ...] = ()

    @property
    def size(self) -> int:
        return len(self.axes)

    @property
    def supports_offset(self) -> bool:
        return self.add is not None


def lerp_float(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


def lerp_int(a: int, b: int, t: float) -> int:
    # int() truncates toward zero, so the result never rounds past ``a``'s side.
    return a + int((b - a) * t)


def add_vec(a: Vec, b: Vec) -> Vec:
    return tuple(ai + bi for ai, bi in zip(a, b, strict=True))


def lerp_vec(a: Vec, b: Vec, t: float) -> Vec:
    return tuple(ai + (bi - ai) * t for ai, bi in zip(a, b, strict=True))


def normalize(v: Vec) -> Vec:
    mag = math.sqrt(sum(vi * vi for vi in v))
    if mag == 0.0:
        return v
    return tuple(vi / mag for vi in v)


def nlerp_quaternion(a: Vec, b: Vec, t: float) -> Vec:
    """Unclamped quaternion lerp along the shorter arc, renormalized.

    The endpoints come back exactly as given, so a finished rotation
    holds the target quaternion rather than its negation.
    """
    if t == 0.0:
        return a
    if t == 1.0:
        return b
    if sum(ai * bi for ai, bi in zip(a, b, strict=True)) < 0.0:
        b = tuple(-bi for bi in b)
    return normalize(lerp_vec(a, b, t))


def _add(a, b):
    return a + b


FLOAT: ValueOps[float] = ValueOps("float", lerp_float, _add)
INT: ValueOps[int] = ValueOps("int", lerp_int, _add)
VECTOR2: ValueOps[Vec] = ValueOps("vector2", lerp_vec, add_vec, axes=("x", "y"))
VECTOR3: ValueOps[Vec] = ValueOps("vector3", lerp_vec, add_vec, axes=("x", "y", "z"))
COLOR: ValueOps[Vec] = ValueOps("color", lerp_vec, add_vec, axes=("r", "g", "b", "a"))
QUATERNION: ValueOps[Vec] = ValueOps("quaternion", nlerp_quaternion)
