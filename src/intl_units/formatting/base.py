"""Abstract collaborator interfaces for the formatting facades.

The unit arithmetic only produces message keys and numbers. Turning them
into text is delegated to three collaborators:

- ``MessageResolver``: async key -> localized template lookup
- ``NumberFormatter``: locale-aware integer rendering for duration fields
- ``DateFormatter``: absolute date rendering for old relative dates

Example:
    >>> class UpperResolver(MessageResolver):
    ...     async def format_value(self, key, args=None):
    ...         return key.upper()

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any


class MessageResolver(ABC):
    """Resolves message keys to localized strings.

    Implementations own caching, retries and timeouts of the lookup.
    Errors they raise propagate to the facade's caller unchanged.
    """

    @abstractmethod
    async def format_value(self, key: str, args: Mapping[str, Any] | None = None) -> str:
        """Resolve a message key with substitution arguments.

        Args:
            key: Message key (e.g. "minutes-ago-long").
            args: Substitution arguments (e.g. {"value": 3}).

        Returns:
            Localized string.

        """
        ...


class NumberFormatter(ABC):
    """Renders numbers as locale-specific decimal strings."""

    @abstractmethod
    def format(self, value: float) -> str:
        """Render a number."""
        ...


class DateFormatter(ABC):
    """Renders an epoch-millisecond time as an absolute date."""

    @abstractmethod
    def format(self, time_ms: float) -> str:
        """Render a date."""
        ...
