"""Run a callback once after a number of updates."""

from __future__ import annotations

from typing import Callable

_TIMER_RANGE = 2**32


class TimedCall:
    """Counts down one per update and calls ``callback`` when it reaches zero.

    The counter is an unsigned 32-bit value, so a timer of 0 wraps around on
    the first update instead of firing.
    """

    def __init__(self, callback: Callable[[], None], timer: int) -> None:
        if not 0 <= timer < _TIMER_RANGE:
            raise ValueError("timer must be an unsigned 32-bit value")
        self._callback = callback
        self._timer = timer
        self._finished = False

    def update(self) -> None:
        """Count down one step, firing the callback when the timer runs out."""
        if self._finished:
            return
        self._timer = (self._timer - 1) % _TIMER_RANGE
        if self._timer == 0:
            self._finished = True
            self._callback()

    def is_finished(self) -> bool:
        """Whether the callback has already run."""
        return self._finished