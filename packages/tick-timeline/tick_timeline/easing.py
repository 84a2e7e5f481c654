"""Easing curves for tween interpolation.

Every raw curve maps a fraction in (0, 1) to an eased fraction. Back and
elastic curves leave [0, 1] in the interior; ``Easing.ease`` pins the
endpoints so that fractions <= 0 give exactly 0 and fractions >= 1 give
exactly 1.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable

_HALF_PI = math.pi / 2

_BACK = 1.70158
_BACK2 = _BACK + 1.0

_ELASTIC_PERIOD = 0.3
_ELASTIC_SHIFT = _ELASTIC_PERIOD / 4

_B1 = 1 / 2.75
_B2 = 2 / 2.75
_B3 = 1.5 / 2.75
_B4 = 2.5 / 2.75
_B5 = 2.25 / 2.75
_B6 = 2.625 / 2.75
_BOUNCE = 7.5625


@dataclass(frozen=True)
class Easing:
    """Named easing curve with the endpoint clamp applied at call time."""

    name: str
    curve: Callable[[float], float]

    def ease(self, fraction: float) -> float:
        if fraction <= 0:
            return 0.0
        if fraction >= 1:
            return 1.0
        return self.curve(fraction)

    def __call__(self, fraction: float) -> float:
        return self.ease(fraction)


def linear(t: float) -> float:
    return t


# --- Sine ---

def sine_in(t: float) -> float:
    return 1 - math.cos(_HALF_PI * t)


def sine_out(t: float) -> float:
    return math.sin(_HALF_PI * t)


def sine_in_out(t: float) -> float:
    return 0.5 - math.cos(math.pi * t) / 2


def sine_out_in(t: float) -> float:
    if t < 0.5:
        return 0.5 * math.sin(math.pi * t)
    return 1 - 0.5 * math.cos((t * 2 - 1) * _HALF_PI)


# --- Power curves ---

def quad_in(t: float) -> float:
    return t * t


def quad_out(t: float) -> float:
    return -t * (t - 2)


def quad_in_out(t: float) -> float:
    if t < 0.5:
        return 2 * t * t
    u = t - 1
    return 1 - 2 * u * u


def quad_out_in(t: float) -> float:
    if t < 0.5:
        s = t * 2
        return -0.5 * s * (s - 2)
    u = t * 2 - 1
    return 0.5 * u * u + 0.5


def cubic_in(t: float) -> float:
    return t * t * t


def cubic_out(t: float) -> float:
    u = t - 1
    return 1 + u * u * u


def cubic_in_out(t: float) -> float:
    if t < 0.5:
        return 4 * t * t * t
    u = t - 1
    return 1 + 4 * u * u * u


def cubic_out_in(t: float) -> float:
    u = t * 2 - 1
    return 0.5 * (u * u * u + 1)


def quart_in(t: float) -> float:
    return t ** 4


def quart_out(t: float) -> float:
    return 1 - (t - 1) ** 4


def quart_in_out(t: float) -> float:
    if t < 0.5:
        return 8 * t ** 4
    return (1 - (t * 2 - 2) ** 4) / 2 + 0.5


def quart_out_in(t: float) -> float:
    u = (t * 2 - 1) ** 4
    if t < 0.5:
        return 0.5 - 0.5 * u
    return 0.5 + 0.5 * u


def quint_in(t: float) -> float:
    return t ** 5


def quint_out(t: float) -> float:
    return 1 + (t - 1) ** 5


def quint_in_out(t: float) -> float:
    s = t * 2
    if s < 1:
        return s ** 5 / 2
    return ((s - 2) ** 5 + 2) / 2


def quint_out_in(t: float) -> float:
    return 0.5 * ((t * 2 - 1) ** 5 + 1)


# --- Exponential ---

def expo_in(t: float) -> float:
    return 2 ** (10 * (t - 1))


def expo_out(t: float) -> float:
    return 1 - 2 ** (-10 * t)


def expo_in_out(t: float) -> float:
    s = t * 2
    if s < 1:
        return 0.5 * 2 ** (10 * (s - 1))
    return 0.5 * (2 - 2 ** (-10 * (s - 1)))


def expo_out_in(t: float) -> float:
    if t < 0.5:
        return 0.5 * (1 - 2 ** (-20 * t))
    return 0.5 * (2 ** (20 * (t - 1)) + 1)


# --- Circular ---

def circ_in(t: float) -> float:
    return 1 - math.sqrt(1 - t * t)


def circ_out(t: float) -> float:
    u = t - 1
    return math.sqrt(1 - u * u)


def circ_in_out(t: float) -> float:
    if t < 0.5:
        return (1 - math.sqrt(1 - 4 * t * t)) / 2
    u = t * 2 - 2
    return (math.sqrt(1 - u * u) + 1) / 2


def circ_out_in(t: float) -> float:
    u = t * 2 - 1
    if t < 0.5:
        return 0.5 * math.sqrt(1 - u * u)
    return 1 - 0.5 * math.sqrt(1 - u * u)


# --- Back (overshoot) ---

def back_in(t: float) -> float:
    return t * t * (_BACK2 * t - _BACK)


def back_out(t: float) -> float:
    u = t - 1
    return 1 + u * u * (_BACK2 * u + _BACK)


def back_in_out(t: float) -> float:
    s = t * 2
    if s < 1:
        return 0.5 * back_in(s)
    return 0.5 * back_out(s - 1) + 0.5


def back_out_in(t: float) -> float:
    u = t * 2 - 1
    if t < 0.5:
        return 0.5 * (u * u * (_BACK2 * u + _BACK) + 1)
    return 0.5 * u * u * (_BACK2 * u - _BACK) + 0.5


# --- Elastic ---

def _wave(t: float) -> float:
    return math.sin((t - _ELASTIC_SHIFT) * 2 * math.pi / _ELASTIC_PERIOD)


def elastic_in(t: float) -> float:
    u = t - 1
    return -(2 ** (10 * u)) * _wave(u)


def elastic_out(t: float) -> float:
    return 2 ** (-10 * t) * _wave(t) + 1


def elastic_in_out(t: float) -> float:
    u = t * 2 - 1
    if u < 0:
        return -0.5 * 2 ** (10 * u) * _wave(u)
    return 0.5 * 2 ** (-10 * u) * _wave(u) + 1


def elastic_out_in(t: float) -> float:
    if t < 0.5:
        return 0.5 * elastic_out(t * 2)
    return 0.5 * elastic_in(t * 2 - 1) + 0.5


# --- Bounce ---

def bounce_out(t: float) -> float:
    if t < _B1:
        return _BOUNCE * t * t
    if t < _B2:
        t -= _B3
        return _BOUNCE * t * t + 0.75
    if t < _B4:
        t -= _B5
        return _BOUNCE * t * t + 0.9375
    t -= _B6
    return _BOUNCE * t * t + 0.984375


def bounce_in(t: float) -> float:
    return 1 - bounce_out(1 - t)


def bounce_in_out(t: float) -> float:
    if t < 0.5:
        return bounce_in(t * 2) / 2
    return bounce_out(t * 2 - 1) / 2 + 0.5


def bounce_out_in(t: float) -> float:
    if t < 0.5:
        return bounce_out(t * 2) / 2
    return bounce_in(t * 2 - 1) / 2 + 0.5


LINEAR = Easing("linear", linear)

SINE_IN = Easing("sine_in", sine_in)
SINE_OUT = Easing("sine_out", sine_out)
SINE_IN_OUT = Easing("sine_in_out", sine_in_out)
SINE_OUT_IN = Easing("sine_out_in", sine_out_in)

QUAD_IN = Easing("quad_in", quad_in)
QUAD_OUT = Easing("quad_out", quad_out)
QUAD_IN_OUT = Easing("quad_in_out", quad_in_out)
QUAD_OUT_IN = Easing("quad_out_in", quad_out_in)

CUBIC_IN = Easing("cubic_in", cubic_in)
CUBIC_OUT = Easing("cubic_out", cubic_out)
CUBIC_IN_OUT = Easing("cubic_in_out", cubic_in_out)
CUBIC_OUT_IN = Easing("cubic_out_in", cubic_out_in)

QUART_IN = Easing("quart_in", quart_in)
QUART_OUT = Easing("quart_out", quart_out)
QUART_IN_OUT = Easing("quart_in_out", quart_in_out)
QUART_OUT_IN = Easing("quart_out_in", quart_out_in)

QUINT_IN = Easing("quint_in", quint_in)
QUINT_OUT = Easing("quint_out", quint_out)
QUINT_IN_OUT = Easing("quint_in_out", quint_in_out)
QUINT_OUT_IN = Easing("quint_out_in", quint_out_in)

EXPO_IN = Easing("expo_in", expo_in)
EXPO_OUT = Easing("expo_out", expo_out)
EXPO_IN_OUT = Easing("expo_in_out", expo_in_out)
EXPO_OUT_IN = Easing("expo_out_in", expo_out_in)

CIRC_IN = Easing("circ_in", circ_in)
CIRC_OUT = Easing("circ_out", circ_out)
CIRC_IN_OUT = Easing("circ_in_out", circ_in_out)
CIRC_OUT_IN = Easing("circ_out_in", circ_out_in)

BACK_IN = Easing("back_in", back_in)
BACK_OUT = Easing("back_out", back_out)
BACK_IN_OUT = Easing("back_in_out", back_in_out)
BACK_OUT_IN = Easing("back_out_in", back_out_in)

ELASTIC_IN = Easing("elastic_in", elastic_in)
ELASTIC_OUT = Easing("elastic_out", elastic_out)
ELASTIC_IN_OUT = Easing("elastic_in_out", elastic_in_out)
ELASTIC_OUT_IN = Easing("elastic_out_in", elastic_out_in)

BOUNCE_IN = Easing("bounce_in", bounce_in)
BOUNCE_OUT = Easing("bounce_out", bounce_out)
BOUNCE_IN_OUT = Easing("bounce_in_out", bounce_in_out)
BOUNCE_OUT_IN = Easing("bounce_out_in", bounce_out_in)

DEFAULT = LINEAR

FAMILIES = ("sine", "quad", "cubic", "quart", "quint", "expo", "circ", "back", "elastic", "bounce")
VARIANTS = ("in", "out", "in_out", "out_in")

EASINGS: dict[str, Easing] = {
    e.name: e
    for e in (
        LINEAR,
        SINE_IN, SINE_OUT, SINE_IN_OUT, SINE_OUT_IN,
        QUAD_IN, QUAD_OUT, QUAD_IN_OUT, QUAD_OUT_IN,
        CUBIC_IN, CUBIC_OUT, CUBIC_IN_OUT, CUBIC_OUT_IN,
        QUART_IN, QUART_OUT, QUART_IN_OUT, QUART_OUT_IN,
        QUINT_IN, QUINT_OUT, QUINT_IN_OUT, QUINT_OUT_IN,
        EXPO_IN, EXPO_OUT, EXPO_IN_OUT, EXPO_OUT_IN,
        CIRC_IN, CIRC_OUT, CIRC_IN_OUT, CIRC_OUT_IN,
        BACK_IN, BACK_OUT, BACK_IN_OUT, BACK_OUT_IN,
        ELASTIC_IN, ELASTIC_OUT, ELASTIC_IN_OUT, ELASTIC_OUT_IN,
        BOUNCE_IN, BOUNCE_OUT, BOUNCE_IN_OUT, BOUNCE_OUT_IN,
    )
}


def get_easing(name: str) -> Easing:
    """Look up a registered easing. Raises KeyError if unknown."""
    try:
        return EASINGS[name]
    except KeyError:
        raise KeyError(f"Unknown easing: '{name}'") from None


def resolve_easing(easing: Easing | str | Callable[[float], float] | None) -> Easing:
    """Coerce a name, bare curve, or None into an ``Easing``."""
    if easing is None:
        return DEFAULT
    if isinstance(easing, Easing):
        return easing
    if isinstance(easing, str):
        return get_easing(easing)
    return Easing(getattr(easing, "__name__", "custom"), easing)
