"""Quaternion <-> Euler angle conversion.

Euler angles are in degrees and applied Z first, then X, then Y, so
``q = qy * qx * qz``. Angles come back normalized to [0, 360).
"""
from __future__ import annotations

import math

from tick_timeline.values import Vec

IDENTITY: Vec = (0.0, 0.0, 0.0, 1.0)

_GIMBAL_EPS = 1e-9


def multiply(a: Vec, b: Vec) -> Vec:
    ax, ay, az, aw = a
    bx, by, bz, bw = b
    return (
        aw * bx + ax * bw + ay * bz - az * by,
        aw * by - ax * bz + ay * bw + az * bx,
        aw * bz + ax * by - ay * bx + az * bw,
        aw * bw - ax * bx - ay * by - az * bz,
    )


def _axis_angle(axis: int, degrees: float) -> Vec:
    half = math.radians(degrees) / 2
    q = [0.0, 0.0, 0.0, math.cos(half)]
    q[axis] = math.sin(half)
    return tuple(q)


def euler_to_quaternion(euler: Vec) -> Vec:
    x, y, z = euler
    return multiply(multiply(_axis_angle(1, y), _axis_angle(0, x)), _axis_angle(2, z))


def quaternion_to_euler(q: Vec) -> Vec:
    x, y, z, w = q
    m12 = 2 * (y * z - x * w)
    m12 = max(-1.0, min(1.0, m12))
    pitch = math.asin(-m12)
    if abs(m12) < 1.0 - _GIMBAL_EPS:
        yaw = math.atan2(2 * (x * z + y * w), 1 - 2 * (x * x + y * y))
        roll = math.atan2(2 * (x * y + z * w), 1 - 2 * (x * x + z * z))
    else:
        # Gimbal lock: fold roll into yaw.
        yaw = math.atan2(-2 * (x * z - y * w), 1 - 2 * (y * y + z * z))
        roll = 0.0
    return tuple(math.degrees(a) % 360.0 for a in (pitch, yaw, roll))
