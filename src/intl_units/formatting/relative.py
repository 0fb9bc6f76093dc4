"""Relative-time formatters.

``RelativeTimeFormat`` renders "3 minutes ago" / "in 2 days" style strings
for a target time. ``RelativeDate`` does the same for recent times and
falls back to an absolute date once the time is older than a cut-off.

A NaN or infinite target time is not an error: it resolves the ``incorrectDate``
message instead.

Example:
    >>> formatter = RelativeTimeFormat(resolver, ["en-US"])
    >>> await formatter.format(now_ms() - 3 * 60_000)
    '3 minutes ago'

"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence

from intl_units.core.timing import MS_PER_SECOND
from intl_units.core.timing import now_ms as clock_now_ms
from intl_units.core.types import BEST_FIT
from intl_units.formatting.base import DateFormatter, MessageResolver
from intl_units.formatting.options import RelativeTimeFormatOptions
from intl_units.formatting.resolvers import NumericDateFormatter
from intl_units.units.relative import resolve_relative

logger = logging.getLogger(__name__)

INCORRECT_DATE_KEY = "incorrectDate"

# 10 days
DEFAULT_MAX_DIFF_SECONDS = 86_400 * 10


def _is_incorrect(value: float) -> bool:
    return isinstance(value, float) and not math.isfinite(value)


class RelativeTimeFormat:
    """Formats target times relative to now."""

    def __init__(
        self,
        resolver: MessageResolver,
        locales: Sequence[str] = (),
        options: RelativeTimeFormatOptions | None = None,
    ) -> None:
        """Initialize formatter.

        Args:
            resolver: Message resolver for the locale list.
            locales: Requested locales.
            options: Unit and style, best fit / long when None.

        """
        self._resolver = resolver
        self._locales = tuple(locales)
        self._options = options or RelativeTimeFormatOptions()

    def resolved_options(self) -> RelativeTimeFormatOptions:
        """Options this formatter was built with."""
        return self._options

    async def format(self, target_ms: float, now_ms: float | None = None) -> str:
        """Render a target time relative to now.

        Args:
            target_ms: Target time in epoch milliseconds.
            now_ms: Reference time, clock time when None.

        Returns:
            Localized relative-time string.

        """
        if _is_incorrect(target_ms):
            logger.debug("Non-finite target time, resolving %s", INCORRECT_DATE_KEY)
            return await self._resolver.format_value(INCORRECT_DATE_KEY)

        selection = resolve_relative(
            target_ms, unit=self._options.unit, style=self._options.style, now_ms=now_ms
        )
        return await self._resolver.format_value(
            selection.message_key, {"value": selection.magnitude}
        )


class RelativeDate:
    """Relative date for recent times, absolute date for older ones."""

    def __init__(
        self,
        resolver: MessageResolver,
        locales: Sequence[str] = (),
        style: str | None = None,
        date_formatter: DateFormatter | None = None,
        max_diff_seconds: float = DEFAULT_MAX_DIFF_SECONDS,
    ) -> None:
        """Initialize formatter.

        Args:
            resolver: Message resolver for the locale list.
            locales: Requested locales.
            style: Relative-time style, "long" when None.
            date_formatter: Absolute date renderer, numeric UTC default.
            max_diff_seconds: Default cut-off age for relative rendering.

        """
        self._resolver = resolver
        self._locales = tuple(locales)
        self._date_formatter = date_formatter or NumericDateFormatter()
        self._max_diff_seconds = max_diff_seconds
        self._options = RelativeTimeFormatOptions(
            unit=BEST_FIT, style=style or "long", min_unit="minute"
        )

    def resolved_options(self) -> RelativeTimeFormatOptions:
        """Relative-time options used for recent dates."""
        return self._options

    async def format(
        self,
        time_ms: float,
        max_diff_seconds: float | None = None,
        now_ms: float | None = None,
    ) -> str:
        """Render a time as relative text or an absolute date.

        Args:
            time_ms: Time in epoch milliseconds.
            max_diff_seconds: Cut-off age, formatter default when None or 0.
            now_ms: Reference time, clock time when None.

        Returns:
            Localized string.

        """
        if now_ms is None:
            now_ms = clock_now_ms()
        max_diff = max_diff_seconds or self._max_diff_seconds

        if _is_incorrect(time_ms):
            logger.debug("Non-finite time, resolving %s", INCORRECT_DATE_KEY)
            return await self._resolver.format_value(INCORRECT_DATE_KEY)

        sec_diff = (now_ms - time_ms) / MS_PER_SECOND
        if sec_diff > max_diff:
            return self._date_formatter.format(time_ms)

        selection = resolve_relative(
            time_ms, unit=self._options.unit, style=self._options.style, now_ms=now_ms
        )
        return await self._resolver.format_value(
            selection.message_key, {"value": selection.magnitude}
        )
