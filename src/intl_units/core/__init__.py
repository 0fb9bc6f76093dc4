"""Core primitives: exceptions, rounding, clock and shared types."""

from intl_units.core.exceptions import (
    ConfigError,
    IntlUnitsError,
    InvalidRangeError,
    InvalidStyleError,
    InvalidUnitError,
    MissingMessageError,
    UnknownTokenError,
    UnknownUnitError,
)
from intl_units.core.rounding import round_half_up, round_to_hundredths
from intl_units.core.timing import now_ms, reset_clock, set_clock

__all__ = [
    "ConfigError",
    "IntlUnitsError",
    "InvalidRangeError",
    "InvalidStyleError",
    "InvalidUnitError",
    "MissingMessageError",
    "UnknownTokenError",
    "UnknownUnitError",
    "now_ms",
    "reset_clock",
    "round_half_up",
    "round_to_hundredths",
    "set_clock",
]
