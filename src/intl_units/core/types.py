"""Core type definitions for intl-units.

Type aliases shared by the unit tables, the decomposition functions and
the formatting facades.
"""

from __future__ import annotations

from typing import TypeAlias

# Ordered mapping unit name -> non-negative integer magnitude,
# largest unit first (insertion order is the display order).
UnitBreakdown: TypeAlias = dict[str, int]

# Signed cascading-rounded counts keyed by calendar-ish unit name
TimeUnits: TypeAlias = dict[str, int]

# Relative-time unit option that asks for automatic unit selection
BEST_FIT = "bestFit"
