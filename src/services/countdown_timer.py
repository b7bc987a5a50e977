"""
Countdown Timer - Fixed-interval countdown with tick and finish events.

One timer counts a fixed duration down in fixed steps. Every step that leaves
time on the clock is reported through on_tick(millis_until_finished); the step
that uses up the remaining time is reported once through on_finish() and the
timer stops for good.
"""

import logging
import threading
from typing import Callable, Optional

logger = logging.getLogger(__name__)


class CountdownTimer:
    """Repeating countdown driven by a scheduler."""

    def __init__(self, millis_in_future: int, interval_ms: int,
                 on_tick: Callable[[int], None], on_finish: Callable[[], None],
                 scheduler, lock=None):
        """Initialize the countdown without starting it.

        Args:
            millis_in_future: Total countdown duration in milliseconds
            interval_ms: Time between two ticks in milliseconds
            on_tick: Called with the milliseconds left after each non-final tick
            on_finish: Called once when the countdown reaches zero
            scheduler: Object providing schedule_repeating(interval_seconds, callback)
            lock: Lock shared with the owner so ticks never interleave with its updates
        """
        if millis_in_future <= 0:
            raise ValueError(f"Countdown duration must be positive: {millis_in_future}")
        if interval_ms <= 0:
            raise ValueError(f"Tick interval must be positive: {interval_ms}")
        if millis_in_future % interval_ms != 0:
            raise ValueError(f"Tick interval {interval_ms}ms does not divide countdown of {millis_in_future}ms")

        self.millis_in_future = millis_in_future
        self.interval_ms = interval_ms
        self.on_tick = on_tick
        self.on_finish = on_finish
        self.scheduler = scheduler
        self._lock = lock or threading.RLock()

        self._task = None
        self._elapsed_ms = 0
        self._started = False
        self._cancelled = False
        self._finished = False

    @property
    def millis_until_finished(self) -> int:
        return max(self.millis_in_future - self._elapsed_ms, 0)

    @property
    def is_running(self) -> bool:
        return self._started and not (self._cancelled or self._finished)

    @property
    def is_finished(self) -> bool:
        return self._finished

    @property
    def is_cancelled(self) -> bool:
        return self._cancelled

    def start(self) -> 'CountdownTimer':
        """Schedule the ticks. A timer runs only once; later calls are ignored."""
        with self._lock:
            if self._started:
                logger.warning("Countdown timer already started")
                return self

            self._started = True
            self._task = self.scheduler.schedule_repeating(self.interval_ms / 1000.0, self.tick)
            logger.debug(f"Countdown started: {self.millis_in_future}ms in {self.interval_ms}ms steps")
        return self

    def cancel(self) -> None:
        """
        Stop the countdown.

        Once this returns no tick or finish callback is running or will run.
        """
        with self._lock:
            self._cancelled = True
            task, self._task = self._task, None

        if task is not None:
            task.cancel()
            logger.debug("Countdown cancelled")

    def tick(self) -> None:
        """Advance the countdown by one interval."""
        with self._lock:
            if not self._started or self._cancelled or self._finished:
                return

            self._elapsed_ms += self.interval_ms
            remaining = self.millis_in_future - self._elapsed_ms

            if remaining <= 0:
                self._finished = True
                task, self._task = self._task, None
                if task is not None:
                    task.cancel()
                logger.debug("Countdown finished")
                self.on_finish()
            else:
                self.on_tick(remaining)

    def __repr__(self) -> str:
        return (f"CountdownTimer(remaining={self.millis_until_finished}ms, "
                f"running={self.is_running}, finished={self._finished})")


def create_countdown(settings, on_tick, on_finish, scheduler, lock: Optional[threading.RLock] = None) -> CountdownTimer:
    """Build a countdown from game settings."""
    return CountdownTimer(
        millis_in_future=settings.countdown_time_ms,
        interval_ms=settings.tick_interval_ms,
        on_tick=on_tick,
        on_finish=on_finish,
        scheduler=scheduler,
        lock=lock
    )
