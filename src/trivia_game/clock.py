"""Clock: monotonic time source used to measure answer times."""

import time
from typing import Protocol


class Clock(Protocol):
    """Anything with a ``now()`` returning monotonic seconds."""

    def now(self) -> float:
        ...


class MonotonicClock:
    """Production clock backed by time.monotonic()."""

    def now(self) -> float:
        return time.monotonic()


def elapsed_seconds(start: float, end: float) -> float:
    """Elapsed real time between two instants, never negative."""
    return max(0.0, end - start)
