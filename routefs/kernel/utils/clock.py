"""Monotonic clock anchored at construction.

Used by the VFS to timestamp changes relative to its own start time:
    clock = MonotonicClock()
    ...
    clock.elapsed()  # fractional seconds since construction
"""

import time


class MonotonicClock:
    """Lightweight monotonic clock reporting elapsed seconds.

    Examples
    --------
    >>> clock = MonotonicClock()
    >>> assert clock.elapsed() >= 0
    """

    __slots__ = ("_start",)

    def __init__(self) -> None:
        self._start = time.perf_counter()

    def elapsed(self) -> float:
        """Seconds since the clock was created; never decreases."""
        return time.perf_counter() - self._start
