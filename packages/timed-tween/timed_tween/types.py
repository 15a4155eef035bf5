"""Shared types for tween sessions: continuation signal, options, aliases."""
from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Callable


class Step(Enum):
    """Performer result controlling whether the tween keeps sampling."""

    CONTINUE = "continue"
    STOP = "stop"


EaseFunc = Callable[[float], float]
Performer = Callable[[float], Step | None]


@dataclass(frozen=True, slots=True)
class TweenOptions:
    """Throttle policy for one tween session.

    Attributes:
        throttle: Minimum milliseconds between samples (0 = unthrottled).
        initial_throttle: Also wait one throttle unit before the first sample.
    """

    throttle: int = 0
    initial_throttle: bool = False

    def __post_init__(self) -> None:
        validate_millis("throttle", self.throttle)

    @classmethod
    def from_fps(cls, fps: float, initial_throttle: bool = False) -> TweenOptions:
        """Options capping the sample rate at `fps` samples per second."""
        if fps <= 0:
            raise ValueError("fps must be positive")
        return cls(throttle=math.ceil(1000 / fps), initial_throttle=initial_throttle)


def validate_millis(name: str, value: object) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int of milliseconds, got {value!r}")
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")
