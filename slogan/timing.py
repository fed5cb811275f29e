"""
Timing checkpoints and duration formatting.

Example Usage:
    >>> delta_str(3661.5)
    '1h1m1.500s'

    >>> delta_str(0.0125)
    '12.500ms'

    >>> delta_str(0.000012)
    '12μs'
"""

import math
import time

SECONDS_PER_DAY = 86400
SECONDS_PER_HOUR = 3600
SECONDS_PER_MINUTE = 60
MILLISECONDS_PER_SECOND = 1000
MICROSECONDS_PER_SECOND = 1_000_000


def _format_sub_second(secs: float) -> str:
    """Format a duration below one second."""
    if secs < 0.001:
        return f"{round(secs * MICROSECONDS_PER_SECOND)}μs"
    return f"{secs * MILLISECONDS_PER_SECOND:.3f}ms"


def delta_str(secs: float) -> str:
    """
    Format a duration in seconds as a compact human-readable string.

    Args:
        secs: Duration in seconds

    Returns:
        Formatted duration ("0s", "12μs", "1.250ms", "2.000s", "1h1m1.500s").
        Negative values carry a leading "-". NaN, infinite and non-numeric
        values render with repr().
    """
    if not isinstance(secs, (int, float)):
        return repr(secs)
    try:
        secs = float(secs)
    except OverflowError:
        return repr(secs)
    if math.isnan(secs) or math.isinf(secs):
        return repr(secs)
    if secs < 0:
        return f"-{delta_str(-secs)}"
    if secs == 0:
        return "0s"
    if secs < 1:
        return _format_sub_second(secs)

    # Float divmod keeps huge durations finite; ints are only made for display
    days, remaining = divmod(secs, SECONDS_PER_DAY)
    hours, remaining = divmod(remaining, SECONDS_PER_HOUR)
    minutes, remaining = divmod(remaining, SECONDS_PER_MINUTE)
    days, hours, minutes = int(days), int(hours), int(minutes)

    out = ""
    if days:
        out += f"{days}d"
    if days or hours:
        out += f"{hours}h"
    if days or hours or minutes:
        out += f"{minutes}m"
    return out + f"{remaining:.3f}s"


class Checkpoints:
    """
    Two monotonic time references used for elapsed-time notices.

    `start` measures the time since creation or since the last
    `since_start()`; `last` does the same for `since_last()`. Each call
    returns the duration against its reference and resets that reference.
    """

    def __init__(self) -> None:
        now = time.monotonic()
        self._start = now
        self._last = now

    def since_start(self) -> float:
        """Return seconds since the start reference and reset it."""
        now = time.monotonic()
        elapsed = now - self._start
        self._start = now
        return elapsed

    def since_last(self) -> float:
        """Return seconds since the last reference and reset it."""
        now = time.monotonic()
        elapsed = now - self._last
        self._last = now
        return elapsed
