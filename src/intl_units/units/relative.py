"""Relative-time unit selection and message-key resolution.

Relative formatting works in two synchronous steps before any string is
looked up:

1. ``compute_time_units`` derives signed counts for every calendar-ish unit
   from a millisecond offset. Each unit is rounded from the previous
   *rounded* unit, so rounding error accumulates the same way everywhere.
2. ``best_fit_unit`` picks the display unit by ordered thresholds, and
   ``resolve_relative`` turns the unit, sign and style into a message key.

Seconds and quarters are never chosen as a best fit. Their thresholds are
intentionally absent, so ``second`` and ``quarter`` are only reachable as
an explicit unit.

Example:
    >>> compute_time_units(-2_000)["minute"]
    0
    >>> resolve_relative(-2_000, now_ms=0)
    RelativeSelection(message_key='minutes-ago-long', magnitude=0)

"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from intl_units.core.rounding import round_half_up
from intl_units.core.timing import now_ms as clock_now_ms
from intl_units.core.types import BEST_FIT, TimeUnits

logger = logging.getLogger(__name__)

# Gregorian cycle: 146097 days per 400 years
_DAYS_PER_400_YEARS = 146_097

# Ordered thresholds on absolute magnitude, first match wins.
# second (< 45) and quarter (< 4) are deliberately not listed.
BEST_FIT_THRESHOLDS: tuple[tuple[str, int], ...] = (
    ("minute", 45),
    ("hour", 22),
    ("day", 7),
    ("week", 4),
    ("month", 11),
)
BEST_FIT_FALLBACK = "year"

DEFAULT_RELATIVE_STYLE = "long"


@dataclass(frozen=True, slots=True)
class RelativeSelection:
    """Message key and magnitude for a relative-time string.

    Attributes:
        message_key: Lookup handle for the localization resolver; tense is
            encoded in it (e.g. "minutes-ago-long").
        magnitude: Absolute count of the chosen unit.

    """

    message_key: str
    magnitude: int


def compute_time_units(diff_ms: float) -> TimeUnits:
    """Derive signed unit counts from a millisecond offset.

    Args:
        diff_ms: Signed offset in milliseconds (target minus now).

    Returns:
        Mapping of millisecond, second, minute, hour, day, week, month,
        quarter and year to signed integer counts.

    """
    millisecond = round_half_up(diff_ms)
    second = round_half_up(millisecond / 1000)
    minute = round_half_up(second / 60)
    hour = round_half_up(minute / 60)
    day = round_half_up(hour / 24)
    raw_year = day * 400 / _DAYS_PER_400_YEARS
    return {
        "millisecond": millisecond,
        "second": second,
        "minute": minute,
        "hour": hour,
        "day": day,
        "week": round_half_up(day / 7),
        "month": round_half_up(raw_year * 12),
        "quarter": round_half_up(raw_year * 4),
        "year": round_half_up(raw_year),
    }


def best_fit_unit(units: TimeUnits) -> str:
    """Pick the display unit for a set of unit counts.

    Args:
        units: Counts as returned by compute_time_units.

    Returns:
        One of minute, hour, day, week, month or year.

    """
    for unit, limit in BEST_FIT_THRESHOLDS:
        if abs(units[unit]) < limit:
            return unit
    return BEST_FIT_FALLBACK


def message_key(unit: str, past: bool, style: str | None = None) -> str:
    """Build the relative-time message key, e.g. "hours-ago-short"."""
    tense = "-ago" if past else "-until"
    return f"{unit}s{tense}-{style or DEFAULT_RELATIVE_STYLE}"


def resolve_relative(
    target_ms: float,
    unit: str = BEST_FIT,
    style: str | None = None,
    now_ms: float | None = None,
) -> RelativeSelection:
    """Resolve a point in time to a relative-time message key.

    The unit is trusted as given unless it is "bestFit". An unknown unit
    name surfaces as a KeyError from the unit mapping.

    Args:
        target_ms: Target time in epoch milliseconds.
        unit: Explicit unit name or "bestFit".
        style: Message style, "long" when None.
        now_ms: Reference time in epoch milliseconds, clock time when None.

    Returns:
        RelativeSelection with the message key and absolute magnitude.

    """
    if now_ms is None:
        now_ms = clock_now_ms()
    diff_ms = target_ms - now_ms
    units = compute_time_units(diff_ms)
    chosen = best_fit_unit(units) if unit == BEST_FIT else unit
    value = units[chosen]
    # A count that rounds to zero keeps the tense of the raw offset
    past = value < 0 or (value == 0 and diff_ms < 0)
    selection = RelativeSelection(message_key=message_key(chosen, past, style), magnitude=abs(value))
    logger.debug("Resolved relative offset %s ms to %s", diff_ms, selection)
    return selection


def relative_part(milliseconds: float) -> RelativeSelection:
    """Best-fit unit and magnitude for an offset, without tense or style.

    The key is the plural unit name (e.g. "hours").
    """
    units = compute_time_units(milliseconds)
    unit = best_fit_unit(units)
    return RelativeSelection(message_key=f"{unit}s", magnitude=abs(units[unit]))
