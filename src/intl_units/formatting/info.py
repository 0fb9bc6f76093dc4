"""List joining and calendar information lookups."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable

from intl_units.core.exceptions import UnknownTokenError
from intl_units.formatting.base import MessageResolver

logger = logging.getLogger(__name__)

LIST_SEPARATOR_KEY = "listSeparator_middle"
FIRST_DAY_OF_THE_WEEK = "firstDayOfTheWeek"

_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")


async def format_list(resolver: MessageResolver, items: Iterable[str]) -> str:
    """Join items with the locale's middle list separator ("X, Y, Z")."""
    separator = await resolver.format_value(LIST_SEPARATOR_KEY)
    return separator.join(items)


async def calendar_info(resolver: MessageResolver, token: str) -> int:
    """Look up locale calendar information.

    Supported tokens:
        firstDayOfTheWeek: 0 for Sunday, 1 for Monday, ...

    Raises:
        UnknownTokenError: If the token is not supported.
        ValueError: If the resolved message does not start with an integer.

    """
    if token != FIRST_DAY_OF_THE_WEEK:
        raise UnknownTokenError(f"Unknown token: {token}", token=token)

    raw = await resolver.format_value(FIRST_DAY_OF_THE_WEEK)
    match = _LEADING_INT_RE.match(raw)
    if match is None:
        logger.warning("Resolver returned non-numeric %s: %r", FIRST_DAY_OF_THE_WEEK, raw)
        raise ValueError(f"Invalid {FIRST_DAY_OF_THE_WEEK} value: {raw!r}")
    return int(match.group(1)) % 7
