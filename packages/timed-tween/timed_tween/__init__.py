"""timed-tween - Time-bounded tweening driven by easing curves."""
from __future__ import annotations

from timed_tween.clock import Stopwatch
from timed_tween.driver import lerp_performer, run_tween, run_tween_async
from timed_tween.easing import (
    EASINGS,
    get_easing,
    in_out_cubic,
    in_out_quartic,
    linear,
    out_back,
    out_back2,
    out_elastic,
)
from timed_tween.types import EaseFunc, Performer, Step, TweenOptions

__all__ = [
    "run_tween",
    "run_tween_async",
    "lerp_performer",
    "Step",
    "TweenOptions",
    "Stopwatch",
    "EaseFunc",
    "Performer",
    "EASINGS",
    "get_easing",
    "linear",
    "in_out_cubic",
    "in_out_quartic",
    "out_back",
    "out_back2",
    "out_elastic",
]
