"""Pytest configuration and fixtures for intl-units tests."""

import pytest

from intl_units.core.timing import reset_clock
from intl_units.formatting.resolvers import StaticMessageResolver

# 2023-11-14T22:13:20Z
NOW_MS = 1_700_000_000_000


@pytest.fixture(autouse=True)
def reset_clock_fixture():
    """Reset the injectable clock before and after each test.

    Tests that pin the clock with set_clock() don't leak it to others.
    """
    reset_clock()
    yield
    reset_clock()


@pytest.fixture
def now_ms() -> int:
    """Fixed reference time in epoch milliseconds."""
    return NOW_MS


@pytest.fixture
def messages() -> dict[str, str]:
    """English templates for the keys the facades resolve."""
    return {
        "durationPattern": "hh:mm:ss.SS",
        "incorrectDate": "Incorrect date",
        "listSeparator_middle": ", ",
        "firstDayOfTheWeek": "1",
        "minutes-ago-long": "{value} minutes ago",
        "minutes-until-long": "in {value} minutes",
        "minutes-ago-short": "{value} min. ago",
        "hours-ago-long": "{value} hours ago",
        "hours-until-long": "in {value} hours",
        "days-ago-long": "{value} days ago",
        "weeks-ago-long": "{value} weeks ago",
        "seconds-ago-long": "{value} seconds ago",
        "digital-byte-short": "{value} B",
        "digital-kilobyte-short": "{value} KB",
        "digital-megabyte-short": "{value} MB",
        "duration-minute-narrow": "{value}m",
        "duration-hour-narrow": "{value}h",
    }


@pytest.fixture
def resolver(messages: dict[str, str]) -> StaticMessageResolver:
    """Static resolver over the English templates."""
    return StaticMessageResolver(messages)
