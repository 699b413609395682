"""Timing and logging helpers."""

from toolbelt.utils.timer import IntervalTimer, Precision, TimerState, TimerStateError

__all__ = ["IntervalTimer", "Precision", "TimerState", "TimerStateError"]
