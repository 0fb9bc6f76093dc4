"""Async formatting facades over the unit arithmetic.

Each facade computes a message key and magnitude synchronously, then awaits
a ``MessageResolver`` for the localized text.
"""

from intl_units.formatting.base import DateFormatter, MessageResolver, NumberFormatter
from intl_units.formatting.duration import DURATION_PATTERN_KEY, DurationFormat
from intl_units.formatting.info import calendar_info, format_list
from intl_units.formatting.options import (
    DurationFormatOptions,
    RelativeTimeFormatOptions,
    UnitFormatOptions,
)
from intl_units.formatting.relative import INCORRECT_DATE_KEY, RelativeDate, RelativeTimeFormat
from intl_units.formatting.resolvers import (
    DecimalNumberFormatter,
    NumericDateFormatter,
    StaticMessageResolver,
)
from intl_units.formatting.unit import UnitFormat, format_unit

__all__ = [
    "DURATION_PATTERN_KEY",
    "DateFormatter",
    "DecimalNumberFormatter",
    "DurationFormat",
    "DurationFormatOptions",
    "INCORRECT_DATE_KEY",
    "MessageResolver",
    "NumberFormatter",
    "NumericDateFormatter",
    "RelativeDate",
    "RelativeTimeFormat",
    "RelativeTimeFormatOptions",
    "StaticMessageResolver",
    "UnitFormat",
    "UnitFormatOptions",
    "calendar_info",
    "format_list",
    "format_unit",
]
