"""Steady clocks that can be paused and shifted."""

from __future__ import annotations

import time
from typing import Callable

TimeSource = Callable[[], float]


class PauseableSteadyClock:
    """A monotonic clock whose readings leave out the time spent paused.

    Readings and offsets are in seconds. While the clock is paused its
    readings keep advancing; the paused span is taken off when it is
    unpaused.
    """

    def __init__(self, time_source: TimeSource = time.monotonic) -> None:
        self._source = time_source
        self._paused = False
        self._last_pause = 0.0
        self._offset = 0.0

    @classmethod
    def new_clock(cls) -> "PauseableSteadyClock":
        """Create a clock backed by the system's monotonic clock."""
        return cls()

    def pause(self) -> None:
        """Start (or restart) a pause at the current instant."""
        self._paused = True
        self._last_pause = self._source()

    def unpause(self) -> None:
        """End the current pause; does nothing if the clock is running."""
        if not self._paused:
            return
        self._paused = False
        self._offset += self._source() - self._last_pause

    @property
    def paused(self) -> bool:
        """Whether the clock is currently paused."""
        return self._paused

    def now(self) -> float:
        """The underlying monotonic time minus the accumulated pause time."""
        return self._source() - self._offset

    @property
    def cumulated_offset(self) -> float:
        """Total time, in seconds, taken off the underlying clock."""
        return self._offset

    def _set_offset(self, offset: float) -> None:
        self._offset = offset


class PauseableAdjustableSteadyClock(PauseableSteadyClock):
    """A pauseable clock whose offset can also be shifted by hand."""

    @classmethod
    def new_clock(cls) -> "PauseableAdjustableSteadyClock":
        """Create a clock backed by the system's monotonic clock."""
        return cls()

    def add_offset(self, offset: float) -> None:
        """Add ``offset`` seconds to the amount taken off the readings."""
        self._set_offset(self.cumulated_offset + offset)