"""Duration decomposition and pattern trimming.

Two pure functions realize duration formatting:

- ``split_into_units`` breaks a signed millisecond duration into an ordered
  unit -> magnitude mapping bounded by a max/min unit
- ``trim_pattern`` cuts a full localized template (``hh:mm:ss.SS``) down to
  the part that spans the same max/min units

Sign is not part of the breakdown. Callers prefix ``-`` on the rendered
string when the rounded input was negative.

Example:
    >>> split_into_units(8_134_000, "hour", "second")
    {'hour': 2, 'minute': 15, 'second': 34}
    >>> trim_pattern("hh:mm:ss.SS", "minute", "millisecond")
    'mm:ss.SS'

"""

from __future__ import annotations

import logging
import math

from intl_units.core.exceptions import InvalidRangeError, InvalidUnitError, UnknownUnitError
from intl_units.core.rounding import round_half_up
from intl_units.core.types import UnitBreakdown
from intl_units.units.table import DEFAULT_UNIT_TABLE, UnitTable

logger = logging.getLogger(__name__)


def round_to_unit(duration_ms: float, unit: str, table: UnitTable = DEFAULT_UNIT_TABLE) -> float:
    """Round a signed duration to the nearest multiple of a unit's size.

    Args:
        duration_ms: Signed duration in milliseconds.
        unit: Duration unit whose size is the rounding step.
        table: Unit table to read sizes from.

    Returns:
        Rounded signed duration in milliseconds.

    Raises:
        InvalidUnitError: If the duration is NaN or infinite.

    """
    if not math.isfinite(duration_ms):
        raise InvalidUnitError(f"Duration must be finite, got {duration_ms}", value=duration_ms)
    step = table.duration_unit(unit).base_value
    return round_half_up(duration_ms / step) * step


def split_into_units(
    duration_ms: float,
    max_unit: str,
    min_unit: str,
    table: UnitTable = DEFAULT_UNIT_TABLE,
) -> UnitBreakdown:
    """Decompose a duration into per-unit integer magnitudes.

    The whole input is rounded to the nearest ``min_unit`` step first, then
    every unit above ``min_unit`` takes the floor of what is left and
    ``min_unit`` takes the rounded remainder.

    Args:
        duration_ms: Signed duration in milliseconds.
        max_unit: Largest unit to report.
        min_unit: Smallest unit to report.
        table: Unit table to read the duration order from.

    Returns:
        Ordered mapping unit -> non-negative magnitude, largest unit first,
        covering exactly max_unit..min_unit.

    Raises:
        UnknownUnitError: If either unit is not a duration unit.
        InvalidRangeError: If max_unit comes after min_unit.
        InvalidUnitError: If the duration is NaN or infinite.

    """
    units = table.duration_range(max_unit, min_unit)
    remaining = abs(round_to_unit(duration_ms, min_unit, table))

    breakdown: UnitBreakdown = {}
    last = len(units) - 1
    for i, unit in enumerate(units):
        if i == last:
            breakdown[unit.name] = round_half_up(remaining / unit.base_value)
        else:
            magnitude = math.floor(remaining / unit.base_value)
            breakdown[unit.name] = magnitude
            remaining -= magnitude * unit.base_value

    logger.debug("Split %s ms into %s", duration_ms, breakdown)
    return breakdown


def trim_pattern(
    pattern: str,
    max_unit: str,
    min_unit: str,
    table: UnitTable = DEFAULT_UNIT_TABLE,
) -> str:
    """Trim a full duration template to the max_unit..min_unit span.

    Tokens are assumed to appear largest to smallest, left to right. Right
    to left locales still render duration fields in that order, so only the
    separators between tokens vary.

    Args:
        pattern: Full template containing every unit token.
        max_unit: Largest unit to keep.
        min_unit: Smallest unit to keep.
        table: Unit table to read tokens from.

    Returns:
        Substring from max_unit's token through the end of min_unit's token.

    Raises:
        UnknownUnitError: If a unit is unknown or its token is not in the
            pattern.
        InvalidRangeError: If min_unit's token precedes max_unit's token.

    """
    max_token = _token(table, max_unit)
    min_token = _token(table, min_unit)

    start = pattern.find(max_token)
    if start == -1:
        raise UnknownUnitError(
            f"Token '{max_token}' for unit '{max_unit}' not found in pattern {pattern!r}",
            unit=max_token,
        )
    min_start = pattern.find(min_token)
    if min_start == -1:
        raise UnknownUnitError(
            f"Token '{min_token}' for unit '{min_unit}' not found in pattern {pattern!r}",
            unit=min_token,
        )
    if min_start < start:
        raise InvalidRangeError(
            f"Token '{min_token}' precedes '{max_token}' in pattern {pattern!r}",
            max_unit=max_unit,
            min_unit=min_unit,
        )
    return pattern[start : min_start + len(min_token)]


def _token(table: UnitTable, unit: str) -> str:
    token = table.duration_unit(unit).token
    if not token:
        raise UnknownUnitError(f"Unit '{unit}' has no pattern token", unit=unit)
    return token
