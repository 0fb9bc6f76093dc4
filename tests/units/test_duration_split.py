"""Tests for duration splitting and pattern trimming."""

import math

import pytest

from intl_units.core.exceptions import InvalidRangeError, InvalidUnitError, UnknownUnitError
from intl_units.core.timing import MS_PER_HOUR, MS_PER_MINUTE
from intl_units.units.duration import round_to_unit, split_into_units, trim_pattern
from intl_units.units.table import DEFAULT_UNIT_TABLE

FULL_PATTERN = "hh:mm:ss.SS"


class TestSplitIntoUnits:
    """Test split_into_units."""

    def test_hour_to_second(self) -> None:
        """Test 2h 15m 34s splits into its fields."""
        assert split_into_units(8_134_000, "hour", "second") == {
            "hour": 2,
            "minute": 15,
            "second": 34,
        }

    def test_keys_cover_range_in_order(self) -> None:
        """Test breakdown covers exactly max..min, largest first."""
        breakdown = split_into_units(0, "hour", "millisecond")
        assert list(breakdown) == ["hour", "minute", "second", "millisecond"]
        assert all(v == 0 for v in breakdown.values())

    def test_milliseconds_are_tens(self) -> None:
        """Test millisecond field counts tens of milliseconds."""
        assert split_into_units(1_234, "second", "millisecond") == {"second": 1, "millisecond": 23}

    def test_whole_input_is_rounded_before_splitting(self) -> None:
        """Test 59.6s with min unit second carries into the minute."""
        assert split_into_units(59_600, "minute", "second") == {"minute": 1, "second": 0}

    def test_max_unit_is_not_capped(self) -> None:
        """Test the max unit absorbs everything above it."""
        assert split_into_units(25 * MS_PER_HOUR, "hour", "minute") == {"hour": 25, "minute": 0}
        assert split_into_units(2 * MS_PER_HOUR, "minute", "second") == {"minute": 120, "second": 0}

    def test_negative_duration_drops_sign(self) -> None:
        """Test -5000ms yields 5 seconds; sign is the caller's business."""
        assert split_into_units(-5_000, "second", "second") == {"second": 5}

    def test_negative_half_step_rounds_toward_positive(self) -> None:
        """Test -15ms rounds to -10ms before the absolute value is taken."""
        assert split_into_units(-15, "millisecond", "millisecond") == {"millisecond": 1}

    def test_reversed_range(self) -> None:
        """Test max unit after min unit raises InvalidRangeError."""
        with pytest.raises(InvalidRangeError) as exc_info:
            split_into_units(1_000, "second", "hour")
        assert exc_info.value.max_unit == "second"
        assert exc_info.value.min_unit == "hour"

    def test_unknown_unit(self) -> None:
        """Test unknown unit raises UnknownUnitError."""
        with pytest.raises(UnknownUnitError):
            split_into_units(1_000, "day", "second")

    @pytest.mark.parametrize("duration", [math.nan, math.inf, -math.inf])
    def test_non_finite_duration(self, duration: float) -> None:
        """Test NaN and infinities raise InvalidUnitError."""
        with pytest.raises(InvalidUnitError):
            split_into_units(duration, "hour", "second")

    @pytest.mark.parametrize(
        "duration",
        [0, 1, 999, 61_001, 3_725_450, 86_399_999, -7_322_015, 12 * MS_PER_MINUTE + 7],
    )
    @pytest.mark.parametrize(
        ("max_unit", "min_unit"),
        [("hour", "millisecond"), ("hour", "second"), ("minute", "second"), ("hour", "minute")],
    )
    def test_lossless_to_min_unit(self, duration: int, max_unit: str, min_unit: str) -> None:
        """Test fields recombine to the input rounded to the min unit."""
        breakdown = split_into_units(duration, max_unit, min_unit)
        total = sum(
            magnitude * DEFAULT_UNIT_TABLE.duration_unit(unit).base_value
            for unit, magnitude in breakdown.items()
        )
        assert total == abs(round_to_unit(duration, min_unit))
        assert all(v >= 0 for v in breakdown.values())


class TestTrimPattern:
    """Test trim_pattern."""

    @pytest.mark.parametrize(
        ("max_unit", "min_unit", "expected"),
        [
            ("hour", "millisecond", "hh:mm:ss.SS"),
            ("hour", "second", "hh:mm:ss"),
            ("minute", "millisecond", "mm:ss.SS"),
            ("minute", "second", "mm:ss"),
            ("second", "second", "ss"),
        ],
    )
    def test_bounds(self, max_unit: str, min_unit: str, expected: str) -> None:
        """Test trimmed span for each unit range."""
        result = trim_pattern(FULL_PATTERN, max_unit, min_unit)
        assert result == expected
        assert result in FULL_PATTERN

    def test_surrounding_text_is_dropped(self) -> None:
        """Test direction marks and literals outside the span are cut."""
        assert trim_pattern("\u200fhh h mm min ss s", "hour", "minute") == "hh h mm"

    def test_missing_max_token(self) -> None:
        """Test absent token raises UnknownUnitError."""
        with pytest.raises(UnknownUnitError) as exc_info:
            trim_pattern("mm:ss", "hour", "second")
        assert exc_info.value.unit == "hh"

    def test_missing_min_token(self) -> None:
        """Test absent min token raises UnknownUnitError."""
        with pytest.raises(UnknownUnitError) as exc_info:
            trim_pattern("hh:mm:ss", "hour", "millisecond")
        assert exc_info.value.unit == "SS"

    def test_tokens_out_of_order(self) -> None:
        """Test min token before max token raises InvalidRangeError."""
        with pytest.raises(InvalidRangeError):
            trim_pattern("ss:mm", "minute", "second")
