"""Interval timer with pause/resume and named laps."""

from __future__ import annotations

import logging
import time
from enum import Enum
from typing import Callable, Dict, Optional

logger = logging.getLogger(__name__)


class Precision(Enum):
    """Unit of reported durations, valued in nanoseconds per unit."""

    NANOSECONDS = 1
    MICROSECONDS = 1_000
    MILLISECONDS = 1_000_000
    SECONDS = 1_000_000_000
    MINUTES = 60_000_000_000
    HOURS = 3_600_000_000_000

    def convert(self, nanoseconds: int) -> float:
        return nanoseconds / self.value


class TimerState(Enum):
    STOPPED = "stopped"
    RUNNING = "running"
    PAUSED = "paused"


class TimerStateError(RuntimeError):
    """Raised when a timer operation is called from the wrong state."""


class IntervalTimer:
    """Measure elapsed time across start/stop cycles.

    Paused intervals are excluded from the measurement. ``lap`` records the
    duration since the previous start/lap under a name and restarts the
    timer, so consecutive phases can be timed with one call per boundary.

    ``pause`` outside ``RUNNING``, ``resume`` outside ``PAUSED`` and
    ``duration`` before ``stop`` raise :class:`TimerStateError`. ``stop`` on
    a stopped timer is a no-op.

    Not thread-safe; use one timer per thread.
    """

    def __init__(
        self,
        precision: Precision = Precision.MILLISECONDS,
        clock: Callable[[], int] = time.perf_counter_ns,
    ) -> None:
        self._precision = precision
        self._clock = clock
        self._state = TimerState.STOPPED
        self._begin: Optional[int] = None
        self._end: Optional[int] = None
        self._accumulated = 0.0
        self._laps: Dict[str, float] = {}

    def __enter__(self) -> "IntervalTimer":
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:  # noqa: D401
        self.stop()

    @property
    def state(self) -> TimerState:
        return self._state

    @property
    def precision(self) -> Precision:
        return self._precision

    def start(self) -> None:
        """Start a fresh interval, discarding any accumulated time."""

        self._state = TimerState.RUNNING
        self._accumulated = 0.0
        self._end = None
        self._begin = self._clock()

    def pause(self) -> None:
        """Bank the time since the last start/resume without stopping."""

        if self._state is not TimerState.RUNNING:
            raise TimerStateError(f"cannot pause a {self._state.value} timer")
        self._accumulated += self._precision.convert(self._clock() - self._begin)
        self._state = TimerState.PAUSED

    def resume(self) -> None:
        if self._state is not TimerState.PAUSED:
            raise TimerStateError(f"cannot resume a {self._state.value} timer")
        self._begin = self._clock()
        self._state = TimerState.RUNNING

    def stop(self) -> None:
        if self._state is TimerState.STOPPED:
            logger.debug("stop() on a stopped timer ignored")
            return
        # A paused timer closes a zero-length final interval.
        self._end = self._begin if self._state is TimerState.PAUSED else self._clock()
        self._state = TimerState.STOPPED

    def duration(self) -> float:
        """Return the running time of the last stopped interval."""

        if self._state is not TimerState.STOPPED or self._end is None:
            raise TimerStateError("duration() requires stop() after start()")
        return self._accumulated + self._precision.convert(self._end - self._begin)

    def lap(self, name: str) -> float:
        """Record the time since the last start/lap under ``name`` and restart."""

        if self._begin is None:
            raise TimerStateError("lap() requires a started timer")
        self.stop()
        value = self.duration()
        self._laps[name] = value
        logger.debug("lap %s: %.6f %s", name, value, self._precision.name.lower())
        self.start()
        return value

    def timings(self) -> Dict[str, float]:
        return dict(self._laps)

    def reset(self) -> None:
        """Stop, drop accumulated time and forget all laps."""

        self.stop()
        self._accumulated = 0.0
        self._laps.clear()
        self._begin = None
        self._end = None
