"""Static unit registry.

This module declares the immutable unit data every decomposition reads:

- the time-duration order (hour -> minute -> second -> millisecond) with
  pattern tokens and millisecond sizes
- the scale groups used by the generic unit formatter (``duration`` in
  seconds, ``digital`` in bytes) with their allowed styles and promotion
  rounding factor

A table is a plain value. The default one is exposed as
``DEFAULT_UNIT_TABLE``; custom tables come from ``UnitTable.from_dict``
(usually via ``intl_units.config.load_config``).

Example:
    >>> table = DEFAULT_UNIT_TABLE
    >>> table.duration_unit("minute").base_value
    60000
    >>> table.group_for_unit("kilobyte").name
    'digital'

"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from intl_units.core.exceptions import (
    ConfigError,
    InvalidRangeError,
    InvalidStyleError,
    UnknownUnitError,
)


@dataclass(frozen=True, slots=True)
class Unit:
    """A single unit of a group.

    Attributes:
        name: Unit name (e.g. "minute", "kilobyte").
        base_value: Size of the unit in the group's base unit.
        token: Pattern token for duration units (e.g. "mm"), else None.

    """

    name: str
    base_value: float
    token: str | None = None


@dataclass(frozen=True, slots=True)
class UnitGroup:
    """Ordered scale group, smallest unit first.

    Attributes:
        name: Group name (e.g. "digital").
        units: Units ordered by increasing base value.
        styles: Allowed display styles.
        rounding_factor: Multiplier on the next unit's size at which a
            magnitude is promoted to it (0.8 promotes slightly early).

    """

    name: str
    units: tuple[Unit, ...]
    styles: frozenset[str]
    rounding_factor: float = 1.0

    @property
    def unit_names(self) -> tuple[str, ...]:
        """Names of the group's units, smallest first."""
        return tuple(u.name for u in self.units)

    def __contains__(self, unit_name: object) -> bool:
        return unit_name in self.unit_names

    def unit(self, name: str) -> Unit:
        """Look up a unit of this group by name.

        Raises:
            UnknownUnitError: If the unit is not part of the group.

        """
        for unit in self.units:
            if unit.name == name:
                return unit
        raise UnknownUnitError(
            f"Unknown unit '{name}' for group '{self.name}'", unit=name, group=self.name
        )

    def check_style(self, style: str | None) -> None:
        """Ensure a style is allowed for this group.

        Raises:
            InvalidStyleError: If the style is not in the allowed set.

        """
        if style not in self.styles:
            raise InvalidStyleError(
                f"Invalid style {style!r} for group '{self.name}'. "
                f"Valid options: {', '.join(sorted(self.styles))}",
                style=style,
                group=self.name,
            )


@dataclass(frozen=True, slots=True)
class UnitTable:
    """Immutable registry of duration units and scale groups.

    Attributes:
        duration_units: Time-duration units, largest first.
        groups: Scale groups keyed by name.

    """

    duration_units: tuple[Unit, ...]
    groups: Mapping[str, UnitGroup] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Freeze the group mapping so a table can be shared between callers
        object.__setattr__(self, "groups", MappingProxyType(dict(self.groups)))

    @property
    def duration_order(self) -> tuple[str, ...]:
        """Duration unit names, largest first."""
        return tuple(u.name for u in self.duration_units)

    def duration_index(self, name: str) -> int:
        """Position of a duration unit in the order.

        Raises:
            UnknownUnitError: If the name is not a duration unit.

        """
        try:
            return self.duration_order.index(name)
        except ValueError:
            raise UnknownUnitError(f"Unknown unit type: {name}", unit=name) from None

    def duration_unit(self, name: str) -> Unit:
        """Look up a duration unit by name.

        Raises:
            UnknownUnitError: If the name is not a duration unit.

        """
        return self.duration_units[self.duration_index(name)]

    def duration_range(self, max_unit: str, min_unit: str) -> tuple[Unit, ...]:
        """Duration units from max_unit to min_unit inclusive.

        Raises:
            UnknownUnitError: If either unit is unknown.
            InvalidRangeError: If max_unit comes after min_unit.

        """
        max_idx = self.duration_index(max_unit)
        min_idx = self.duration_index(min_unit)
        if max_idx > min_idx:
            raise InvalidRangeError(
                f"maxUnit '{max_unit}' must not be smaller than minUnit '{min_unit}'",
                max_unit=max_unit,
                min_unit=min_unit,
            )
        return self.duration_units[max_idx : min_idx + 1]

    def group(self, name: str) -> UnitGroup:
        """Look up a scale group by name.

        Raises:
            UnknownUnitError: If no group has this name.

        """
        try:
            return self.groups[name]
        except KeyError:
            raise UnknownUnitError(f"Unknown unit group: {name}", group=name) from None

    def group_for_unit(self, unit_name: str) -> UnitGroup:
        """Find the first scale group that contains a unit.

        Raises:
            UnknownUnitError: If no group contains the unit.

        """
        for group in self.groups.values():
            if unit_name in group:
                return group
        raise UnknownUnitError(f"invalid value {unit_name} for option unit", unit=unit_name)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> UnitTable:
        """Build a table from plain data (e.g. parsed YAML).

        Expected structure::

            duration:
              - {name: hour, value: 3600000, token: hh}
              ...
            groups:
              digital:
                units: [{name: byte, value: 1}, ...]
                styles: [short]
                rounding: 0.8

        Args:
            data: Mapping with ``duration`` and ``groups`` keys.

        Returns:
            Validated UnitTable.

        Raises:
            ConfigError: If the structure or values are invalid.

        """
        if not isinstance(data, Mapping):
            raise ConfigError(f"unit table must be a mapping, got {type(data).__name__}")

        duration = _parse_units(data.get("duration"), "duration", need_token=True)
        _check_monotonic(duration, "duration", decreasing=True)

        raw_groups = data.get("groups") or {}
        if not isinstance(raw_groups, Mapping):
            raise ConfigError(f"groups must be a mapping, got {type(raw_groups).__name__}")

        groups: dict[str, UnitGroup] = {}
        for group_name, raw in raw_groups.items():
            if not isinstance(raw, Mapping):
                raise ConfigError(f"group '{group_name}' must be a mapping")
            units = _parse_units(raw.get("units"), str(group_name), need_token=False)
            _check_monotonic(units, str(group_name), decreasing=False)
            styles = raw.get("styles") or []
            if isinstance(styles, str) or not isinstance(styles, Iterable):
                raise ConfigError(f"styles of group '{group_name}' must be a list")
            rounding = raw.get("rounding", 1)
            if not isinstance(rounding, int | float) or isinstance(rounding, bool) or rounding <= 0:
                raise ConfigError(f"rounding of group '{group_name}' must be a positive number")
            groups[str(group_name)] = UnitGroup(
                name=str(group_name),
                units=units,
                styles=frozenset(str(s) for s in styles),
                rounding_factor=float(rounding),
            )

        return cls(duration_units=duration, groups=groups)


def _parse_units(raw: Any, where: str, need_token: bool) -> tuple[Unit, ...]:
    """Parse a list of unit mappings."""
    if not isinstance(raw, list) or not raw:
        raise ConfigError(f"'{where}' must be a non-empty list of units")

    units: list[Unit] = []
    seen: set[str] = set()
    for entry in raw:
        if not isinstance(entry, Mapping) or "name" not in entry or "value" not in entry:
            raise ConfigError(f"'{where}' entries need 'name' and 'value': {entry!r}")
        name = str(entry["name"])
        value = entry["value"]
        if not isinstance(value, int | float) or isinstance(value, bool) or value <= 0:
            raise ConfigError(f"unit '{name}' in '{where}' needs a positive value")
        if name in seen:
            raise ConfigError(f"duplicate unit '{name}' in '{where}'")
        token = entry.get("token")
        if need_token and not token:
            raise ConfigError(f"duration unit '{name}' needs a token")
        seen.add(name)
        units.append(Unit(name=name, base_value=value, token=str(token) if token else None))
    return tuple(units)


def _check_monotonic(units: tuple[Unit, ...], where: str, decreasing: bool) -> None:
    """Reject unit lists that are not strictly ordered by size."""
    for prev, cur in zip(units, units[1:], strict=False):
        ordered = prev.base_value > cur.base_value if decreasing else prev.base_value < cur.base_value
        if not ordered:
            direction = "decreasing" if decreasing else "increasing"
            raise ConfigError(f"units in '{where}' must be strictly {direction} in size")


DEFAULT_UNIT_TABLE = UnitTable(
    duration_units=(
        Unit("hour", 3_600_000, "hh"),
        Unit("minute", 60_000, "mm"),
        Unit("second", 1_000, "ss"),
        # milliseconds are shown in tens
        Unit("millisecond", 10, "SS"),
    ),
    groups={
        "duration": UnitGroup(
            name="duration",
            units=(
                Unit("second", 1),
                Unit("minute", 60),
                Unit("hour", 60 * 60),
                Unit("day", 24 * 60 * 60),
                Unit("month", 30 * 24 * 60 * 60),
            ),
            styles=frozenset({"narrow"}),
            rounding_factor=1,
        ),
        "digital": UnitGroup(
            name="digital",
            units=(
                Unit("byte", 1),
                Unit("kilobyte", 1024),
                Unit("megabyte", 1024**2),
                Unit("gigabyte", 1024**3),
                Unit("terabyte", 1024**4),
            ),
            styles=frozenset({"short"}),
            rounding_factor=0.8,
        ),
    },
)
