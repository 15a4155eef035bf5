"""Tween driver - samples an easing curve against elapsed wall-clock time."""
from __future__ import annotations

import logging
from typing import Callable

from timed_tween.clock import Stopwatch
from timed_tween.easing import get_easing
from timed_tween.types import EaseFunc, Performer, Step, TweenOptions, validate_millis

logger = logging.getLogger(__name__)


class _Session:
    """Loop state for a single tween. Lives only for one driver call."""

    def __init__(
        self,
        ease: EaseFunc,
        duration: int,
        performer: Performer,
        options: TweenOptions,
        stopwatch: Stopwatch,
    ) -> None:
        self.ease = ease
        self.duration = duration
        self.performer = performer
        self.options = options
        self.stopwatch = stopwatch
        self.elapsed = 0
        self.samples = 0
        self.running = True
        self.reached_end = False

    @property
    def active(self) -> bool:
        return self.running and not self.reached_end

    def wants_throttle(self) -> bool:
        if self.options.throttle == 0 or self.elapsed >= self.duration:
            return False
        # Only the first sample skips the throttle, unless initial_throttle.
        return self.samples != 0 or self.options.initial_throttle

    def throttle_delay(self) -> int:
        # Never sleep past the end of the tween.
        remaining = self.duration - self.stopwatch.elapsed_ms()
        if remaining <= 0:
            return 0
        return min(remaining, self.options.throttle)

    def after_throttle(self) -> None:
        self.elapsed = self.stopwatch.elapsed_ms()

    def sample(self) -> None:
        if self.elapsed > self.duration:
            self.elapsed = self.duration
        progress = self.elapsed / self.duration if self.duration else 1.0

        self.samples += 1
        result = self.performer(self.ease(progress))
        self.reached_end = self.elapsed == self.duration

        if result is Step.STOP:
            self.running = False
            logger.debug(f"Tween stopped by performer at {self.elapsed} ms")
        elif result is not None and result is not Step.CONTINUE:
            raise TypeError(f"performer must return a Step or None, got {result!r}")

        # Time spent in the performer counts toward the tween.
        self.elapsed = self.stopwatch.elapsed_ms()

    def aborted(self) -> None:
        logger.debug(f"Tween aborted after {self.samples} samples at {self.elapsed} ms")

    def finish(self) -> int:
        logger.debug(f"Tween finished: {self.samples} samples in {self.stopwatch.elapsed_ms()} ms")
        return self.samples


def _open_session(
    ease: EaseFunc | str,
    duration: int,
    performer: Performer,
    throttle: int,
    initial_throttle: bool,
    options: TweenOptions | None,
    stopwatch: Stopwatch | None,
) -> _Session:
    if isinstance(ease, str):
        ease = get_easing(ease)
    if not callable(ease):
        raise TypeError(f"ease must be callable or an easing name, got {ease!r}")
    if not callable(performer):
        raise TypeError(f"performer must be callable, got {performer!r}")
    validate_millis("duration", duration)

    if options is None:
        options = TweenOptions(throttle=throttle, initial_throttle=initial_throttle)
    elif throttle != 0 or initial_throttle:
        raise ValueError("Pass throttle settings either as arguments or as options, not both")

    if stopwatch is None:
        stopwatch = Stopwatch()
    stopwatch.restart()

    logger.debug(
        f"Tween started: duration={duration} ms, throttle={options.throttle} ms, "
        f"initial_throttle={options.initial_throttle}"
    )
    return _Session(ease, duration, performer, options, stopwatch)


def run_tween(
    ease: EaseFunc | str,
    duration: int,
    performer: Performer,
    throttle: int = 0,
    initial_throttle: bool = False,
    *,
    options: TweenOptions | None = None,
    stopwatch: Stopwatch | None = None,
) -> int:
    """Feed eased progress values to `performer` until `duration` ms elapse.

    Blocks the calling thread. The performer receives ease(progress) for
    progress = elapsed / duration and may return Step.STOP to end the tween
    early. With a non-zero throttle, consecutive samples are at least
    `throttle` ms apart; the first sample is delayed too only when
    `initial_throttle` is set. Unless stopped early, the last sample is
    always taken at progress 1.0. A zero duration yields exactly one sample
    at progress 1.0.

    Exceptions raised by `ease` or `performer` propagate and end the tween.

    Returns the number of times the performer was called.
    """
    session = _open_session(
        ease, duration, performer, throttle, initial_throttle, options, stopwatch
    )
    try:
        while session.active:
            if session.wants_throttle():
                session.stopwatch.sleep_ms(session.throttle_delay())
                session.after_throttle()
            session.sample()
    except Exception:
        session.aborted()
        raise
    return session.finish()


async def run_tween_async(
    ease: EaseFunc | str,
    duration: int,
    performer: Performer,
    throttle: int = 0,
    initial_throttle: bool = False,
    *,
    options: TweenOptions | None = None,
    stopwatch: Stopwatch | None = None,
) -> int:
    """Coroutine version of run_tween that awaits the throttle delay.

    Ordering and elapsed-time accounting match run_tween; the performer is
    still called synchronously.
    """
    session = _open_session(
        ease, duration, performer, throttle, initial_throttle, options, stopwatch
    )
    try:
        while session.active:
            if session.wants_throttle():
                await session.stopwatch.sleep_ms_async(session.throttle_delay())
                session.after_throttle()
            session.sample()
    except Exception:
        session.aborted()
        raise
    return session.finish()


def lerp_performer(
    start: float,
    end: float,
    apply: Callable[[float], Step | None],
) -> Performer:
    """Return a performer that maps eased values onto the range start..end.

    The final sample (eased value 1.0) is passed as exactly `end`.
    """
    span = end - start

    def performer(value: float) -> Step | None:
        if value == 1.0:
            return apply(end)
        return apply(start + span * value)

    return performer
