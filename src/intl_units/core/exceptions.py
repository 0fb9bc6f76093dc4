"""Exceptions for intl-units.

This module provides the exception hierarchy shared by the unit tables,
the pure decomposition functions and the async formatting facades.

All errors are raised synchronously at the point of misuse. Nothing in
the package retries or recovers from them.
"""

from __future__ import annotations

from pathlib import Path


class IntlUnitsError(Exception):
    """Base exception for intl-units.

    All package specific exceptions inherit from this class.
    """

    pass


class UnknownUnitError(IntlUnitsError):
    """Unit or unit token not present in the relevant table.

    Raised when:
    - A unit name is not part of the duration order
    - A unit name does not belong to any scale group
    - A scale group name is not declared
    - A unit token cannot be found in a duration pattern

    Attributes:
        unit: The unit (or token) that could not be resolved.
        group: The group that was searched, if any.

    """

    def __init__(self, message: str, unit: str | None = None, group: str | None = None) -> None:
        """Initialize UnknownUnitError with context.

        Args:
            message: Human-readable error message.
            unit: The unit name or token that was not found.
            group: The group that was searched.

        """
        super().__init__(message)
        self.unit = unit
        self.group = group


class InvalidRangeError(IntlUnitsError):
    """Max unit comes after min unit in unit order.

    Attributes:
        max_unit: Requested largest unit.
        min_unit: Requested smallest unit.

    """

    def __init__(self, message: str, max_unit: str, min_unit: str) -> None:
        """Initialize InvalidRangeError with context.

        Args:
            message: Human-readable error message.
            max_unit: Requested largest unit.
            min_unit: Requested smallest unit.

        """
        super().__init__(message)
        self.max_unit = max_unit
        self.min_unit = min_unit


class InvalidStyleError(IntlUnitsError):
    """Style not in the unit group's allowed set.

    Attributes:
        style: The rejected style.
        group: The unit group the style was checked against.

    """

    def __init__(self, message: str, style: str | None, group: str) -> None:
        """Initialize InvalidStyleError with context."""
        super().__init__(message)
        self.style = style
        self.group = group


class InvalidUnitError(IntlUnitsError):
    """Non-numeric or non-finite magnitude passed to scale selection.

    Attributes:
        value: The rejected magnitude, as given by the caller.

    """

    def __init__(self, message: str, value: object) -> None:
        """Initialize InvalidUnitError with context."""
        super().__init__(message)
        self.value = value


class UnknownTokenError(IntlUnitsError):
    """Calendar information token is not recognised."""

    def __init__(self, message: str, token: str) -> None:
        """Initialize UnknownTokenError with context."""
        super().__init__(message)
        self.token = token


class MissingMessageError(IntlUnitsError):
    """Message resolver has no template for a key."""

    def __init__(self, message: str, key: str) -> None:
        """Initialize MissingMessageError with context."""
        super().__init__(message)
        self.key = key


class ConfigError(IntlUnitsError):
    """Configuration could not be loaded or is structurally invalid.

    Attributes:
        file_path: Path of the offending configuration file, if any.

    """

    def __init__(self, message: str, file_path: Path | None = None) -> None:
        """Initialize ConfigError with context.

        Args:
            message: Human-readable error message.
            file_path: Path to the configuration file that failed.

        """
        super().__init__(message)
        self.file_path = file_path
