"""Tests for the generic unit formatter."""

from unittest.mock import AsyncMock

import pytest

from intl_units.core.exceptions import InvalidStyleError, InvalidUnitError, UnknownUnitError
from intl_units.formatting.options import UnitFormatOptions
from intl_units.formatting.resolvers import StaticMessageResolver
from intl_units.formatting.unit import UnitFormat, format_unit


class TestUnitFormat:
    """Test UnitFormat."""

    def test_message_key(self, resolver: StaticMessageResolver) -> None:
        """Test key is group-unit-style."""
        formatter = UnitFormat(resolver, ["en-US"], UnitFormatOptions(unit="kilobyte", style="short"))
        assert formatter.message_key == "digital-kilobyte-short"

    def test_keyword_options(self, resolver: StaticMessageResolver) -> None:
        """Test unit and style can be passed directly."""
        formatter = UnitFormat(resolver, unit="hour", style="narrow")
        assert formatter.message_key == "duration-hour-narrow"
        assert formatter.resolved_options() == UnitFormatOptions(unit="hour", style="narrow")

    def test_unknown_unit(self, resolver: StaticMessageResolver) -> None:
        """Test unit outside every group raises UnknownUnitError."""
        with pytest.raises(UnknownUnitError):
            UnitFormat(resolver, unit="parsec", style="short")

    def test_invalid_style(self, resolver: StaticMessageResolver) -> None:
        """Test style outside the group's set raises InvalidStyleError."""
        with pytest.raises(InvalidStyleError) as exc_info:
            UnitFormat(resolver, unit="kilobyte", style="long")
        assert exc_info.value.group == "digital"

    async def test_format(self, resolver: StaticMessageResolver) -> None:
        """Test value substitution."""
        formatter = UnitFormat(resolver, unit="megabyte", style="short")
        assert await formatter.format(3.25) == "3.25 MB"


class TestFormatUnit:
    """Test scaling then formatting."""

    async def test_digital(self, resolver: StaticMessageResolver) -> None:
        """Test 1536 bytes renders as 1.5 KB."""
        assert await format_unit(resolver, "digital", "short", 1536) == "1.5 KB"

    async def test_duration(self, resolver: StaticMessageResolver) -> None:
        """Test 90 seconds renders as 1.5m."""
        assert await format_unit(resolver, "duration", "narrow", 90) == "1.5m"

    async def test_resolver_receives_scaled_value(self) -> None:
        """Test the resolver gets the scaled key and value."""
        resolver = AsyncMock()
        resolver.format_value.return_value = "x"
        await format_unit(resolver, "digital", "short", 900)
        resolver.format_value.assert_awaited_once_with("digital-kilobyte-short", {"value": 0.88})

    async def test_unknown_group(self, resolver: StaticMessageResolver) -> None:
        """Test unknown group raises UnknownUnitError."""
        with pytest.raises(UnknownUnitError):
            await format_unit(resolver, "distance", "short", 10)

    async def test_invalid_style(self, resolver: StaticMessageResolver) -> None:
        """Test disallowed style raises InvalidStyleError."""
        with pytest.raises(InvalidStyleError):
            await format_unit(resolver, "digital", "narrow", 10)

    async def test_invalid_magnitude(self, resolver: StaticMessageResolver) -> None:
        """Test non-numeric magnitude raises InvalidUnitError."""
        with pytest.raises(InvalidUnitError):
            await format_unit(resolver, "digital", "short", "lots")
