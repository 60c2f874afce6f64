"""Tests for instant coercion and clocks."""

from datetime import date, datetime, timedelta, timezone

import pytest

from humantime import InvalidInstant, fixed_clock, system_clock, to_timestamp

NOON = 1736942400.0  # 2025-01-15 12:00:00 UTC


def test_numbers_pass_through():
    """Test that Unix seconds are returned as floats."""
    assert to_timestamp(NOON) == NOON
    assert to_timestamp(0) == 0.0


def test_datetimes():
    """Test aware and naive datetimes."""
    aware = datetime(2025, 1, 15, 12, 0, 0, tzinfo=timezone.utc)
    assert to_timestamp(aware) == NOON

    offset = datetime(2025, 1, 15, 13, 0, 0, tzinfo=timezone(timedelta(hours=1)))
    assert to_timestamp(offset) == NOON

    # Naive datetimes are read as UTC
    assert to_timestamp(datetime(2025, 1, 15, 12, 0, 0)) == NOON


def test_dates_are_midnight_utc():
    """Test that a date maps to the start of the day in UTC."""
    assert to_timestamp(date(1970, 1, 2)) == 86400.0


def test_strings():
    """Test that date strings are parsed."""
    assert to_timestamp("2025-01-15T12:00:00Z") == NOON
    assert to_timestamp("2025-01-15T13:00:00+01:00") == NOON
    assert to_timestamp("Wed, 15 Jan 2025 12:00:00 +0000") == NOON


def test_invalid_values():
    """Test that invalid instants raise InvalidInstant."""
    with pytest.raises(InvalidInstant, match="Could not parse"):
        to_timestamp("not a date")

    with pytest.raises(InvalidInstant, match="finite"):
        to_timestamp(float("inf"))

    with pytest.raises(InvalidInstant, match="bool"):
        to_timestamp(True)

    with pytest.raises(InvalidInstant, match="must be int, float"):
        to_timestamp(object())


def test_invalid_instant_is_value_error():
    """Test that InvalidInstant can be caught as ValueError."""
    with pytest.raises(ValueError):
        to_timestamp("")


def test_fixed_clock_is_frozen():
    """Test that a fixed clock always returns the same instant."""
    clock = fixed_clock("2025-01-15T12:00:00Z")
    assert clock() == NOON
    assert clock() == NOON


def test_system_clock_is_current():
    """Test that the system clock reads the wall clock."""
    now = datetime.now(timezone.utc).timestamp()
    assert abs(system_clock() - now) < 5
