"""Time sources for the relative formatters.

A clock is any zero-argument callable returning the current Unix time in
seconds. Formatters take one as a parameter instead of reading the wall
clock themselves.
"""

from time import time as current_time
from typing import Callable, TypeAlias

from humantime.instant import Instant, to_timestamp

Clock: TypeAlias = Callable[[], float]


def system_clock() -> float:
    return current_time()


def fixed_clock(instant: Instant) -> Clock:
    """Return a clock frozen at the given instant.

    Example:
        >>> now = fixed_clock("2025-01-15T12:00:00Z")
        >>> time_ago("2025-01-15T11:00:00Z", clock=now)
        '1 hour ago'
    """
    frozen = to_timestamp(instant)

    def clock() -> float:
        return frozen

    return clock
