"""Benchmark timing based on processor time, in microsecond ticks."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Callable, Optional

TICKS_PER_SEC = 1_000_000


def _process_ticks() -> int:
    return time.process_time_ns() // (1_000_000_000 // TICKS_PER_SEC)


@dataclass
class Timer:
    """Measures the timed part of a run in abstract ticks.

    ``clock`` returns the current time in ticks; by default it reads the
    processor time used by this process.  The timer can also be used as a
    context manager around the timed code.
    """

    clock: Callable[[], int] = field(default=_process_ticks, repr=False)
    _start: Optional[int] = field(default=None, init=False, repr=False)
    _stop: Optional[int] = field(default=None, init=False, repr=False)

    def start(self) -> None:
        """Record the start of the timed section."""
        self._start = self.clock()
        self._stop = None

    def stop(self) -> None:
        """Record the end of the timed section."""
        if self._start is None:
            raise RuntimeError("timer stopped before it was started")
        self._stop = self.clock()

    def elapsed_ticks(self) -> int:
        """Ticks between the last start and stop."""
        if self._start is None or self._stop is None:
            raise RuntimeError("timer has not been started and stopped")
        return self._stop - self._start

    def __enter__(self) -> "Timer":
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()


def time_in_secs(ticks: int) -> float:
    """Convert a tick count to seconds."""
    return ticks / TICKS_PER_SEC