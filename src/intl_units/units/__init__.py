"""Pure unit arithmetic: tables, duration splitting, relative and scale selection.

Everything here is synchronous and side-effect free. String lookup lives in
``intl_units.formatting``.
"""

from intl_units.units.duration import round_to_unit, split_into_units, trim_pattern
from intl_units.units.relative import (
    BEST_FIT_THRESHOLDS,
    RelativeSelection,
    best_fit_unit,
    compute_time_units,
    relative_part,
    resolve_relative,
)
from intl_units.units.scale import ScaleChoice, coerce_magnitude, select_scale
from intl_units.units.table import DEFAULT_UNIT_TABLE, Unit, UnitGroup, UnitTable

__all__ = [
    "BEST_FIT_THRESHOLDS",
    "DEFAULT_UNIT_TABLE",
    "RelativeSelection",
    "ScaleChoice",
    "Unit",
    "UnitGroup",
    "UnitTable",
    "best_fit_unit",
    "coerce_magnitude",
    "compute_time_units",
    "relative_part",
    "resolve_relative",
    "round_to_unit",
    "select_scale",
    "split_into_units",
    "trim_pattern",
]
