"""Injectable millisecond clock.

Relative-time formatting measures offsets against "now". The clock is
injectable so tests can pin it.

Usage:
    from intl_units.core.timing import now_ms, set_clock, reset_clock

    set_clock(lambda: 1_700_000_000_000.0)
    assert now_ms() == 1_700_000_000_000.0
    reset_clock()
"""

from __future__ import annotations

import time
from collections.abc import Callable

# Conversion constants
MS_PER_SECOND = 1_000
MS_PER_MINUTE = 60 * MS_PER_SECOND
MS_PER_HOUR = 60 * MS_PER_MINUTE
MS_PER_DAY = 24 * MS_PER_HOUR


def _default_clock() -> float:
    """Return current epoch time in milliseconds."""
    return time.time() * MS_PER_SECOND


_clock: Callable[[], float] = _default_clock


def set_clock(clock: Callable[[], float]) -> None:
    """Set custom clock for testing.

    Args:
        clock: Function returning epoch milliseconds.

    """
    global _clock
    _clock = clock


def reset_clock() -> None:
    """Reset clock to default (real time)."""
    global _clock
    _clock = _default_clock


def now_ms() -> float:
    """Get current epoch time in milliseconds from the active clock."""
    return _clock()
