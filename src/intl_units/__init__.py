"""intl-units - locale-agnostic unit decomposition for localized formatters."""

from importlib.metadata import version

from intl_units.config import FormatterConfig, load_config
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
from intl_units.formatting import (
    DurationFormat,
    DurationFormatOptions,
    MessageResolver,
    RelativeDate,
    RelativeTimeFormat,
    RelativeTimeFormatOptions,
    StaticMessageResolver,
    UnitFormat,
    UnitFormatOptions,
    calendar_info,
    format_list,
    format_unit,
)
from intl_units.units import (
    DEFAULT_UNIT_TABLE,
    RelativeSelection,
    ScaleChoice,
    UnitTable,
    best_fit_unit,
    compute_time_units,
    relative_part,
    resolve_relative,
    select_scale,
    split_into_units,
    trim_pattern,
)

try:
    __version__ = version("intl-units")
except Exception:
    __version__ = "0.0.0-dev"

__all__ = [
    "ConfigError",
    "DEFAULT_UNIT_TABLE",
    "DurationFormat",
    "DurationFormatOptions",
    "FormatterConfig",
    "IntlUnitsError",
    "InvalidRangeError",
    "InvalidStyleError",
    "InvalidUnitError",
    "MessageResolver",
    "MissingMessageError",
    "RelativeDate",
    "RelativeSelection",
    "RelativeTimeFormat",
    "RelativeTimeFormatOptions",
    "ScaleChoice",
    "StaticMessageResolver",
    "UnitFormat",
    "UnitFormatOptions",
    "UnitTable",
    "UnknownTokenError",
    "UnknownUnitError",
    "best_fit_unit",
    "calendar_info",
    "compute_time_units",
    "format_list",
    "format_unit",
    "load_config",
    "relative_part",
    "resolve_relative",
    "select_scale",
    "split_into_units",
    "trim_pattern",
]
