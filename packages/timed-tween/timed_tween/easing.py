"""Easing functions for tween sampling.

Every function maps a progress value in [0, 1] to an eased value. Inputs are
not clamped: outside [0, 1] the formulas simply extrapolate. The overshooting
curves (out_back, out_back2, out_elastic) leave [0, 1] on purpose.

See Robert Penner's easing equations (http://robertpenner.com/easing/).
"""
from __future__ import annotations

import math

from timed_tween.types import EaseFunc

_BACK_OVERSHOOT = 1.70158


def linear(t: float) -> float:
    return t


def in_out_cubic(t: float) -> float:
    """Piecewise cubic: 4t^3 below 0.5, 0.5((2t-2)^3 + 2) above."""
    v = t * 2
    if v < 1:
        return 0.5 * v * v * v
    v -= 2
    return 0.5 * (v * v * v + 2)


def in_out_quartic(t: float) -> float:
    """Piecewise quartic: 8t^4 below 0.5, -0.5((2t-2)^4 - 2) above."""
    v = t * 2
    if v < 1:
        return 0.5 * v * v * v * v
    v -= 2
    return -0.5 * (v * v * v * v - 2)


def out_back(t: float) -> float:
    """Overshooting cubic, peaks roughly 10% above 1 before settling."""
    v = t - 1
    return v * v * ((_BACK_OVERSHOOT + 1) * v + _BACK_OVERSHOOT) + 1


def out_back2(t: float) -> float:
    """Overshooting cubic, y = 1 - ((1-t)^3 - (1-t)sin((1-t)pi)).

    Overshoots a bit more than out_back.
    """
    u = 1 - t
    return 1 - (u * u * u - u * math.sin(u * math.pi))


def out_elastic(t: float) -> float:
    """Damped sine wave, y = sin(-13pi/2 (t + 1)) * 2^(-10t) + 1."""
    # Exact endpoints; the formula only lands near them.
    if t == 0:
        return 0.0
    if t == 1:
        return 1.0
    return math.sin(-6.5 * math.pi * (t + 1)) * math.pow(2, -10 * t) + 1


EASINGS: dict[str, EaseFunc] = {
    "linear": linear,
    "in_out_cubic": in_out_cubic,
    "in_out_quartic": in_out_quartic,
    "out_back": out_back,
    "out_back2": out_back2,
    "out_elastic": out_elastic,
}


def get_easing(name: str) -> EaseFunc:
    """Look up an easing function by name. Raises KeyError if unknown."""
    if name not in EASINGS:
        raise KeyError(f"Unknown easing {name!r}, expected one of {sorted(EASINGS)}")
    return EASINGS[name]
