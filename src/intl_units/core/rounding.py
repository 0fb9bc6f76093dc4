"""Rounding helpers with half-up semantics.

Python's built-in ``round`` uses banker's rounding (``round(2.5) == 2``).
The cascading unit arithmetic must round halves toward positive infinity
so results match across implementations:

    >>> round_half_up(2.5)
    3
    >>> round_half_up(-2.5)
    -2
    >>> round_to_hundredths(1.499)
    1.5

"""

from __future__ import annotations

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward positive infinity.

    Args:
        value: Finite number to round.

    Returns:
        Rounded integer.

    """
    floor = math.floor(value)
    # Compare the fraction rather than floor(value + 0.5), which
    # rounds 0.49999999999999994 up.
    if value - floor >= 0.5:
        return floor + 1
    return floor


def round_to_hundredths(value: float) -> float:
    """Round to two decimal digits with half-up semantics."""
    return round_half_up(value * 100) / 100
