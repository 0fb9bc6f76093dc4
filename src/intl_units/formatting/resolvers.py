"""Reference collaborator implementations.

These cover tests and callers without a full localization stack:

- ``StaticMessageResolver`` substitutes ``{name}`` placeholders into
  templates from an in-memory mapping
- ``DecimalNumberFormatter`` zero-pads integers without digit grouping
- ``NumericDateFormatter`` renders ``year-month-day`` in UTC

Example:
    >>> DecimalNumberFormatter().format(7)
    '07'
    >>> NumericDateFormatter().format(0)
    '1970-01-01'

"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import UTC, datetime
from decimal import Decimal
from typing import Any

from intl_units.core.exceptions import MissingMessageError
from intl_units.formatting.base import DateFormatter, MessageResolver, NumberFormatter


class StaticMessageResolver(MessageResolver):
    """Message resolver backed by a fixed key -> template mapping.

    Example:
        >>> resolver = StaticMessageResolver({"hours-ago-long": "{value} hours ago"})

    """

    def __init__(self, messages: Mapping[str, str]) -> None:
        """Initialize resolver with templates.

        Args:
            messages: Key -> template with ``{name}`` placeholders.

        """
        self._messages = dict(messages)

    async def format_value(self, key: str, args: Mapping[str, Any] | None = None) -> str:
        """Substitute args into the template for key.

        Raises:
            MissingMessageError: If no template is registered for key.

        """
        try:
            template = self._messages[key]
        except KeyError:
            raise MissingMessageError(f"No message for key '{key}'", key=key) from None
        return template.format_map(dict(args or {}))


class DecimalNumberFormatter(NumberFormatter):
    """Plain decimal formatter with minimum integer digits.

    Attributes:
        minimum_integer_digits: Zero-pad the integer part to this width.
        use_grouping: Insert "," thousands separators.

    """

    def __init__(self, minimum_integer_digits: int = 2, use_grouping: bool = False) -> None:
        self.minimum_integer_digits = minimum_integer_digits
        self.use_grouping = use_grouping

    def format(self, value: float) -> str:
        """Render value in plain notation, zero-padded, integral floats without a fraction."""
        if isinstance(value, float) and value.is_integer():
            value = int(value)
        sign = "-" if value < 0 else ""
        integer, _, fraction = format(Decimal(repr(abs(value))), "f").partition(".")
        integer = integer.zfill(self.minimum_integer_digits)
        if self.use_grouping:
            integer = f"{int(integer):,}".zfill(self.minimum_integer_digits)
        return f"{sign}{integer}.{fraction}" if fraction else f"{sign}{integer}"


class NumericDateFormatter(DateFormatter):
    """Numeric ``YYYY-MM-DD`` date in UTC."""

    def format(self, time_ms: float) -> str:
        """Render the UTC calendar date of an epoch-millisecond time."""
        return datetime.fromtimestamp(time_ms / 1000, tz=UTC).strftime("%Y-%m-%d")
