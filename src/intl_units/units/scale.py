"""Scale selection for magnitudes in a unit group.

Picks the unit a magnitude is displayed in (bytes vs. kilobytes, seconds
vs. hours) and re-expresses the magnitude in it, rounded to two decimals.
A group's rounding factor promotes early: with 0.8, 900 bytes is already
shown as 0.88 kilobyte.

Example:
    >>> from intl_units.units.table import DEFAULT_UNIT_TABLE
    >>> select_scale(DEFAULT_UNIT_TABLE.group("digital"), 1536)
    ScaleChoice(unit_name='kilobyte', scaled_value=1.5)

"""

from __future__ import annotations

import math
from dataclasses import dataclass

from intl_units.core.exceptions import InvalidUnitError
from intl_units.core.rounding import round_to_hundredths
from intl_units.units.table import UnitGroup


@dataclass(frozen=True, slots=True)
class ScaleChoice:
    """Chosen display unit and the magnitude expressed in it.

    Attributes:
        unit_name: Name of the chosen unit.
        scaled_value: Magnitude in that unit, rounded to 2 decimal digits.

    """

    unit_name: str
    scaled_value: float


def coerce_magnitude(value: object) -> float:
    """Convert a caller-supplied magnitude to a finite float.

    Numeric strings are accepted ("1536", " 2.5 ").

    Raises:
        InvalidUnitError: If the value is not a finite number.

    """
    if isinstance(value, bool):
        raise InvalidUnitError(f"invalid magnitude {value!r}", value=value)
    if isinstance(value, int | float):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            raise InvalidUnitError(f"invalid magnitude {value!r}", value=value) from None
    else:
        raise InvalidUnitError(f"invalid magnitude {value!r}", value=value)

    if not math.isfinite(number):
        raise InvalidUnitError(f"invalid magnitude {value!r}", value=value)
    return number


def select_scale(group: UnitGroup, magnitude: object) -> ScaleChoice:
    """Pick the display scale for a magnitude.

    Scale i-1 is chosen for the first i >= 1 where
    ``magnitude < units[i].base_value * rounding_factor``; past every
    threshold the last unit is used.

    Args:
        group: Unit group, smallest unit first.
        magnitude: Value in the group's base unit.

    Returns:
        ScaleChoice with the unit name and the two-decimal scaled value.

    Raises:
        InvalidUnitError: If magnitude is not a finite number.

    """
    value = coerce_magnitude(magnitude)
    units = group.units

    scale = len(units) - 1
    for i in range(1, len(units)):
        if value < units[i].base_value * group.rounding_factor:
            scale = i - 1
            break

    unit = units[scale]
    return ScaleChoice(unit_name=unit.name, scaled_value=round_to_hundredths(value / unit.base_value))
