"""Duration formatter.

Formats a millisecond duration into a localized clock-style string
(``02:12:34`` for hour..second in en-US). The localized full pattern is
fetched once from the message resolver under ``durationPattern``; after
that, formatting is synchronous.

Example:
    >>> formatter = await DurationFormat.create(
    ...     resolver, ["en-US"], DurationFormatOptions(max_unit="minute", min_unit="millisecond")
    ... )
    >>> formatter.format(754_800)
    '12:34.80'

"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from intl_units.formatting.base import MessageResolver, NumberFormatter
from intl_units.formatting.options import DurationFormatOptions
from intl_units.formatting.resolvers import DecimalNumberFormatter
from intl_units.units.duration import round_to_unit, split_into_units, trim_pattern
from intl_units.units.table import DEFAULT_UNIT_TABLE, UnitTable

logger = logging.getLogger(__name__)

DURATION_PATTERN_KEY = "durationPattern"


class DurationFormat:
    """Formats durations for one locale list and unit range.

    Build with ``await DurationFormat.create(...)``; the constructor takes
    an already resolved pattern.
    """

    def __init__(
        self,
        pattern: str,
        options: DurationFormatOptions,
        number_formatter: NumberFormatter | None = None,
        table: UnitTable = DEFAULT_UNIT_TABLE,
    ) -> None:
        """Initialize formatter.

        Args:
            pattern: Full localized duration pattern (e.g. "hh:mm:ss.SS").
            options: Resolved options.
            number_formatter: Renders each field, two-digit decimal default.
            table: Unit table with duration tokens.

        Raises:
            UnknownUnitError: If a unit is unknown or missing from pattern.
            InvalidRangeError: If max_unit comes after min_unit.

        """
        self._options = options
        self._table = table
        self._numbers = number_formatter or DecimalNumberFormatter(
            minimum_integer_digits=2, use_grouping=False
        )
        self._units = table.duration_range(options.max_unit, options.min_unit)
        self._pattern = trim_pattern(pattern, options.max_unit, options.min_unit, table)

    @classmethod
    async def create(
        cls,
        resolver: MessageResolver,
        locales: Sequence[str] = (),
        options: DurationFormatOptions | None = None,
        number_formatter: NumberFormatter | None = None,
        table: UnitTable = DEFAULT_UNIT_TABLE,
    ) -> DurationFormat:
        """Resolve the duration pattern and build a formatter.

        Unit names and range are checked before the pattern is fetched.

        Args:
            resolver: Message resolver for the locale list.
            locales: Requested locales, first one is reported back.
            options: Max/min unit, hour..second when None.
            number_formatter: Field renderer.
            table: Unit table.

        Returns:
            Ready DurationFormat.

        """
        options = options or DurationFormatOptions()
        if options.locale is None and locales:
            options = options.model_copy(update={"locale": locales[0]})
        table.duration_range(options.max_unit, options.min_unit)

        pattern = await resolver.format_value(DURATION_PATTERN_KEY)
        logger.debug("Resolved duration pattern %r for locale %s", pattern, options.locale)
        return cls(pattern, options, number_formatter=number_formatter, table=table)

    def resolved_options(self) -> DurationFormatOptions:
        """Options this formatter was built with."""
        return self._options

    def format(self, duration_ms: float) -> str:
        """Render a signed duration.

        Args:
            duration_ms: Duration in milliseconds.

        Returns:
            Pattern with each token replaced by its field, prefixed with
            "-" when the duration rounds to a negative value.

        Raises:
            InvalidUnitError: If the duration is NaN or infinite.

        """
        rounded = round_to_unit(duration_ms, self._options.min_unit, self._table)
        breakdown = split_into_units(
            rounded, self._options.max_unit, self._options.min_unit, self._table
        )

        text = self._pattern
        for unit in self._units:
            text = text.replace(unit.token or "", self._numbers.format(breakdown[unit.name]), 1)

        if rounded < 0:
            return "-" + text
        return text
