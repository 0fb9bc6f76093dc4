"""Tests for the async duration formatter."""

from unittest.mock import AsyncMock

import pytest

from intl_units.core.exceptions import InvalidRangeError, InvalidUnitError, UnknownUnitError
from intl_units.formatting.base import NumberFormatter
from intl_units.formatting.duration import DURATION_PATTERN_KEY, DurationFormat
from intl_units.formatting.options import DurationFormatOptions
from intl_units.formatting.resolvers import StaticMessageResolver


class TestDurationFormatCreate:
    """Test construction and option resolution."""

    async def test_defaults(self, resolver: StaticMessageResolver) -> None:
        """Test hour..second defaults and locale from the locale list."""
        formatter = await DurationFormat.create(resolver, ["en-US", "fr"])
        options = formatter.resolved_options()
        assert options.max_unit == "hour"
        assert options.min_unit == "second"
        assert options.locale == "en-US"

    async def test_pattern_is_resolved_once(self) -> None:
        """Test the pattern is fetched once, at creation."""
        resolver = AsyncMock()
        resolver.format_value.return_value = "hh:mm:ss.SS"
        formatter = await DurationFormat.create(resolver, ["en-US"])
        formatter.format(1_000)
        formatter.format(2_000)
        resolver.format_value.assert_awaited_once_with(DURATION_PATTERN_KEY)

    async def test_reversed_range_fails_before_lookup(self) -> None:
        """Test InvalidRangeError is raised without awaiting the resolver."""
        resolver = AsyncMock()
        with pytest.raises(InvalidRangeError):
            await DurationFormat.create(
                resolver, ["en-US"], DurationFormatOptions(max_unit="second", min_unit="hour")
            )
        resolver.format_value.assert_not_awaited()

    async def test_unknown_unit(self, resolver: StaticMessageResolver) -> None:
        """Test unknown unit raises UnknownUnitError."""
        with pytest.raises(UnknownUnitError):
            await DurationFormat.create(resolver, ["en-US"], DurationFormatOptions(max_unit="day"))

    async def test_pattern_without_token(self) -> None:
        """Test a pattern missing a requested token raises UnknownUnitError."""
        resolver = StaticMessageResolver({DURATION_PATTERN_KEY: "mm:ss"})
        with pytest.raises(UnknownUnitError):
            await DurationFormat.create(resolver, ["en-US"])


class TestDurationFormatFormat:
    """Test rendering."""

    async def test_hour_to_second(self, resolver: StaticMessageResolver) -> None:
        """Test 2h 12m 34s renders as 02:12:34."""
        formatter = await DurationFormat.create(resolver, ["en-US"])
        assert formatter.format(7_954_000) == "02:12:34"

    async def test_minute_to_millisecond(self, resolver: StaticMessageResolver) -> None:
        """Test 12m 34.8s renders as 12:34.80."""
        formatter = await DurationFormat.create(
            resolver, ["en-US"], DurationFormatOptions(max_unit="minute", min_unit="millisecond")
        )
        assert formatter.format(754_800) == "12:34.80"

    async def test_rounds_to_min_unit(self, resolver: StaticMessageResolver) -> None:
        """Test 59.6s with second precision shows 00:01:00."""
        formatter = await DurationFormat.create(resolver, ["en-US"])
        assert formatter.format(59_600) == "00:01:00"

    async def test_large_hours(self, resolver: StaticMessageResolver) -> None:
        """Test hours are not capped at two digits."""
        formatter = await DurationFormat.create(resolver, ["en-US"])
        assert formatter.format(100 * 3_600_000) == "100:00:00"

    async def test_negative_prefix(self, resolver: StaticMessageResolver) -> None:
        """Test negative durations get a literal minus prefix."""
        formatter = await DurationFormat.create(
            resolver, ["en-US"], DurationFormatOptions(max_unit="second", min_unit="second")
        )
        assert formatter.format(-5_000) == "-05"

    async def test_negative_rounding_to_zero_has_no_sign(
        self, resolver: StaticMessageResolver
    ) -> None:
        """Test -400ms at second precision renders without a minus."""
        formatter = await DurationFormat.create(resolver, ["en-US"])
        assert formatter.format(-400) == "00:00:00"

    async def test_nan_duration(self, resolver: StaticMessageResolver) -> None:
        """Test NaN duration raises InvalidUnitError."""
        formatter = await DurationFormat.create(resolver, ["en-US"])
        with pytest.raises(InvalidUnitError):
            formatter.format(float("nan"))

    async def test_custom_number_formatter(self, resolver: StaticMessageResolver) -> None:
        """Test fields are rendered by the supplied number formatter."""

        class ArabicIndic(NumberFormatter):
            def format(self, value: float) -> str:
                return str(int(value)).translate(str.maketrans("0123456789", "٠١٢٣٤٥٦٧٨٩"))

        formatter = await DurationFormat.create(
            resolver,
            ["ar"],
            DurationFormatOptions(max_unit="minute", min_unit="second"),
            number_formatter=ArabicIndic(),
        )
        assert formatter.format(65_000) == "١:٥"
