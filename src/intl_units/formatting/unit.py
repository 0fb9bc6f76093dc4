"""Generic unit formatter.

``UnitFormat`` renders a value already expressed in one unit ("1.5
kilobytes"). ``format_unit`` takes a raw magnitude in a group's base unit,
picks the display scale first and then formats it.

Message keys are ``{group}-{unit}-{style}``, e.g. ``digital-kilobyte-short``.

Example:
    >>> await format_unit(resolver, "digital", "short", 1536)
    '1.5 KB'

"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from intl_units.formatting.base import MessageResolver
from intl_units.formatting.options import UnitFormatOptions
from intl_units.units.scale import select_scale
from intl_units.units.table import DEFAULT_UNIT_TABLE, UnitTable

logger = logging.getLogger(__name__)


class UnitFormat:
    """Formats values of a single unit."""

    def __init__(
        self,
        resolver: MessageResolver,
        locales: Sequence[str] = (),
        options: UnitFormatOptions | None = None,
        table: UnitTable = DEFAULT_UNIT_TABLE,
        *,
        unit: str | None = None,
        style: str | None = None,
    ) -> None:
        """Initialize formatter.

        Args:
            resolver: Message resolver for the locale list.
            locales: Requested locales.
            options: Unit and style; alternatively pass ``unit``/``style``.
            table: Unit table with scale groups.
            unit: Unit name when options is None.
            style: Style name when options is None.

        Raises:
            UnknownUnitError: If no group contains the unit.
            InvalidStyleError: If the style is not allowed for the group.

        """
        if options is None:
            options = UnitFormatOptions(unit=unit or "", style=style or "")
        group = table.group_for_unit(options.unit)
        group.check_style(options.style)

        self._resolver = resolver
        self._locales = tuple(locales)
        self._options = options
        self.message_key = f"{group.name}-{options.unit}-{options.style}"

    def resolved_options(self) -> UnitFormatOptions:
        """Options this formatter was built with."""
        return self._options

    async def format(self, value: float) -> str:
        """Render a value of this unit."""
        return await self._resolver.format_value(self.message_key, {"value": value})


async def format_unit(
    resolver: MessageResolver,
    group_name: str,
    style: str,
    magnitude: object,
    table: UnitTable = DEFAULT_UNIT_TABLE,
    locales: Sequence[str] = (),
) -> str:
    """Scale a magnitude within a group and render it.

    Args:
        resolver: Message resolver.
        group_name: Unit group (e.g. "digital").
        style: Display style allowed by the group.
        magnitude: Value in the group's base unit (number or numeric string).
        table: Unit table.
        locales: Requested locales.

    Returns:
        Localized string for the scaled value.

    Raises:
        UnknownUnitError: If the group is not declared.
        InvalidStyleError: If the style is not allowed for the group.
        InvalidUnitError: If the magnitude is not a finite number.

    """
    group = table.group(group_name)
    group.check_style(style)
    choice = select_scale(group, magnitude)
    logger.debug("Scaled %s in group %s to %s", magnitude, group_name, choice)

    formatter = UnitFormat(
        resolver, locales, UnitFormatOptions(unit=choice.unit_name, style=style), table
    )
    return await formatter.format(choice.scaled_value)
