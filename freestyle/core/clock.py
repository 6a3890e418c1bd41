"""Countdown clock driving word changes.

The clock measures real elapsed time between ticks instead of counting
ticks, so a late or skipped tick never stretches an interval. Ticks are
scheduled through an object with urwid's alarm API (``set_alarm_in`` and
``remove_alarm``), normally the application's ``urwid.MainLoop``.
"""

import logging
import time
from typing import Callable, Optional


logger = logging.getLogger(__name__)

DEFAULT_TICK_MS = 50
MIN_TICK_MS = 16
MAX_TICK_MS = 60


class SessionClock:
    """A repeating countdown with pause support.

    Events:
        on_tick(remaining_ms, progress): after every measured tick
        on_interval_elapsed(): once each time the countdown runs out
    """

    def __init__(
        self,
        scheduler,
        tick_ms: int = DEFAULT_TICK_MS,
        time_fn: Callable[[], float] = time.monotonic,
    ):
        self.scheduler = scheduler
        self.tick_ms = max(MIN_TICK_MS, min(MAX_TICK_MS, int(tick_ms)))
        self._time_fn = time_fn

        self.on_tick: Optional[Callable[[float, float], None]] = None
        self.on_interval_elapsed: Optional[Callable[[], None]] = None

        self.interval_ms = 0
        self._period_ms = 0
        self._remaining_ms = 0.0
        self._last_tick = 0.0
        self._alarm = None
        self.is_running = False
        self.is_paused = False

    def _now_ms(self) -> float:
        return self._time_fn() * 1000.0

    @property
    def remaining_ms(self) -> float:
        """Time left in the current countdown."""
        return self._remaining_ms

    @property
    def progress(self) -> float:
        """Fraction of the current countdown that has elapsed, in [0, 1]."""
        if not self.is_running or self._period_ms <= 0:
            return 0.0
        fraction = 1.0 - self._remaining_ms / self._period_ms
        return max(0.0, min(1.0, fraction))

    def start(self, interval_ms: int) -> None:
        """Start a fresh countdown of ``interval_ms``."""
        if interval_ms <= 0:
            raise ValueError(f"Interval must be positive: {interval_ms}")

        self._cancel_alarm()
        self.interval_ms = interval_ms
        self._period_ms = interval_ms
        self._remaining_ms = float(interval_ms)
        self._last_tick = self._now_ms()
        self.is_running = True
        self.is_paused = False
        self._schedule()

    def set_interval(self, interval_ms: int) -> None:
        """Change the interval used from the next countdown on."""
        if interval_ms <= 0:
            raise ValueError(f"Interval must be positive: {interval_ms}")
        self.interval_ms = interval_ms

    def pause(self) -> None:
        """Freeze the countdown at its current remaining time."""
        if not self.is_running or self.is_paused:
            return
        self.tick()
        self.is_paused = True
        self._cancel_alarm()

    def resume(self) -> None:
        """Continue a paused countdown from where it stopped."""
        if not self.is_running or not self.is_paused:
            return
        self.is_paused = False
        self._last_tick = self._now_ms()
        self._schedule()

    def stop(self) -> None:
        """Cancel the countdown. Safe to call repeatedly."""
        self._cancel_alarm()
        self.is_running = False
        self.is_paused = False
        self._remaining_ms = 0.0
        self._period_ms = 0

    def tick(self) -> None:
        """Measure elapsed time and emit events.

        A single tick fires ``on_interval_elapsed`` at most once, however
        much time has passed. After a stall longer than a whole interval
        the countdown restarts in full instead of catching up.
        """
        if not self.is_running or self.is_paused:
            return

        now = self._now_ms()
        delta = max(0.0, now - self._last_tick)
        self._last_tick = now
        self._remaining_ms -= delta

        if self._remaining_ms <= 0:
            overshoot = -self._remaining_ms
            self._period_ms = self.interval_ms
            if overshoot >= self.interval_ms:
                logger.debug("Clock stalled for %.0fms, resyncing", overshoot)
                self._remaining_ms = float(self.interval_ms)
            else:
                self._remaining_ms = self.interval_ms - overshoot
            if self.on_interval_elapsed:
                self.on_interval_elapsed()
            # The handler may have stopped or paused the clock
            if not self.is_running:
                return

        if self.on_tick:
            self.on_tick(self._remaining_ms, self.progress)

    def _schedule(self) -> None:
        self._alarm = self.scheduler.set_alarm_in(self.tick_ms / 1000.0, self._on_alarm)

    def _cancel_alarm(self) -> None:
        if self._alarm is not None:
            self.scheduler.remove_alarm(self._alarm)
            self._alarm = None

    def _on_alarm(self, loop, user_data=None) -> None:
        self._alarm = None
        self.tick()
        if self.is_running and not self.is_paused and self._alarm is None:
            self._schedule()
