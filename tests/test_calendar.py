"""Tests for the calendar kernel."""

from __future__ import annotations

import pytest

from isocal._internal.calendar import (
    MAX_EPOCH_DAY,
    MAX_MJD,
    MIN_EPOCH_DAY,
    MIN_MJD,
    day_of_week,
    day_of_year,
    from_epoch_day,
    from_modified_julian_day,
    is_leap_year,
    iso_week,
    iso_week_to_epoch_day,
    month_length,
    to_epoch_day,
    to_modified_julian_day,
    weeks_in_week_based_year,
    year_length,
)
from isocal._internal.constants import MAX_YEAR, MIN_YEAR, MJD_EPOCH_DAY_OFFSET
from isocal.errors import IllegalFieldValueError


def _next_day(year: int, month: int, day: int) -> tuple[int, int, int]:
    # Steps a day without going through epoch-day arithmetic
    if day < month_length(year, month):
        return (year, month, day + 1)
    if month < 12:
        return (year, month + 1, 1)
    return (year + 1, 1, 1)


def _previous_day(year: int, month: int, day: int) -> tuple[int, int, int]:
    if day > 1:
        return (year, month, day - 1)
    if month > 1:
        return (year, month - 1, month_length(year, month - 1))
    return (year - 1, 12, 31)


class TestLeapYear:
    """Tests for is_leap_year()."""

    def test_divisible_by_400(self) -> None:
        """Test that centuries divisible by 400 are leap years."""
        assert is_leap_year(2000) is True
        assert is_leap_year(1600) is True

    def test_divisible_by_100_only(self) -> None:
        """Test that other centuries are not leap years."""
        assert is_leap_year(1900) is False
        assert is_leap_year(1800) is False
        assert is_leap_year(2100) is False

    def test_divisible_by_4(self) -> None:
        """Test ordinary leap years."""
        assert is_leap_year(2004) is True
        assert is_leap_year(2008) is True

    def test_common_years(self) -> None:
        """Test years not divisible by 4."""
        assert is_leap_year(2001) is False
        assert is_leap_year(2007) is False

    def test_year_zero_and_negative(self) -> None:
        """Test that the proleptic rule applies to year zero and earlier."""
        assert is_leap_year(0) is True
        assert is_leap_year(-4) is True
        assert is_leap_year(-1) is False
        assert is_leap_year(-100) is False
        assert is_leap_year(-400) is True

    def test_year_limits(self) -> None:
        """Test the rule at the ends of the supported range."""
        assert is_leap_year(MAX_YEAR) is False
        assert is_leap_year(MIN_YEAR) is False


class TestMonthLength:
    """Tests for month_length() and year_length()."""

    def test_thirty_one_day_months(self) -> None:
        for month in (1, 3, 5, 7, 8, 10, 12):
            assert month_length(2007, month) == 31

    def test_thirty_day_months(self) -> None:
        for month in (4, 6, 9, 11):
            assert month_length(2007, month) == 30

    def test_february(self) -> None:
        """Test February in leap and common years."""
        assert month_length(2008, 2) == 29
        assert month_length(2007, 2) == 28
        assert month_length(1900, 2) == 28
        assert month_length(2000, 2) == 29

    def test_year_length(self) -> None:
        assert year_length(2008) == 366
        assert year_length(2007) == 365

    def test_day_of_year(self) -> None:
        """Test cumulative day-of-year across the leap day."""
        assert day_of_year(2007, 1, 1) == 1
        assert day_of_year(2007, 3, 1) == 60
        assert day_of_year(2008, 3, 1) == 61
        assert day_of_year(2007, 12, 31) == 365
        assert day_of_year(2008, 12, 31) == 366


class TestEpochDay:
    """Tests for to_epoch_day() and from_epoch_day()."""

    def test_epoch(self) -> None:
        """Test that 1970-01-01 is epoch-day 0."""
        assert to_epoch_day(1970, 1, 1) == 0
        assert from_epoch_day(0) == (1970, 1, 1)

    def test_known_values(self) -> None:
        """Test reference days expressed through their MJD."""
        assert to_epoch_day(1858, 11, 17) == -40587
        assert to_epoch_day(1, 1, 1) == -678575 - 40587
        assert to_epoch_day(1995, 9, 27) == 49987 - 40587
        assert to_epoch_day(0, 1, 1) == -678941 - 40587
        assert to_epoch_day(-1, 12, 31) == -678942 - 40587

    def test_year_zero_neighbourhood(self) -> None:
        """Test from_epoch_day() across year zero."""
        day_0000_01_01 = -678941 - 40587
        assert from_epoch_day(day_0000_01_01) == (0, 1, 1)
        assert from_epoch_day(day_0000_01_01 - 1) == (-1, 12, 31)

    def test_sequential_days_forward(self) -> None:
        """Test every day of a full 400-year cycle against a day-by-day walk."""
        ymd = (1600, 1, 1)
        start = to_epoch_day(*ymd)
        for offset in range(146_097):
            assert to_epoch_day(*ymd) == start + offset
            assert from_epoch_day(start + offset) == ymd
            ymd = _next_day(*ymd)
        assert ymd == (2000, 1, 1)

    def test_sequential_days_backward_through_year_zero(self) -> None:
        """Test a backward walk from year 2 into negative years."""
        ymd = (2, 1, 1)
        start = to_epoch_day(*ymd)
        for offset in range(5_000):
            assert to_epoch_day(*ymd) == start - offset
            assert from_epoch_day(start - offset) == ymd
            ymd = _previous_day(*ymd)

    def test_year_limits(self) -> None:
        """Test that the supported range round-trips at both ends."""
        assert from_epoch_day(MAX_EPOCH_DAY) == (MAX_YEAR, 12, 31)
        assert from_epoch_day(MIN_EPOCH_DAY) == (MIN_YEAR, 1, 1)
        assert to_epoch_day(MAX_YEAR, 12, 31) == MAX_EPOCH_DAY
        assert to_epoch_day(MIN_YEAR, 1, 1) == MIN_EPOCH_DAY

    def test_above_max(self) -> None:
        with pytest.raises(IllegalFieldValueError):
            from_epoch_day(MAX_EPOCH_DAY + 1)

    def test_below_min(self) -> None:
        with pytest.raises(IllegalFieldValueError):
            from_epoch_day(MIN_EPOCH_DAY - 1)

    def test_non_integer(self) -> None:
        """Test that fractional day counts are rejected rather than truncated."""
        with pytest.raises(TypeError):
            from_epoch_day(0.5)  # type: ignore[arg-type]
        with pytest.raises(TypeError):
            from_epoch_day(0.0)  # type: ignore[arg-type]
        with pytest.raises(TypeError):
            from_modified_julian_day(40587.5)  # type: ignore[arg-type]

    def test_range_fits_int64(self) -> None:
        """Test that the supported day counts are well inside 64 bits."""
        assert -(2**63) < MIN_EPOCH_DAY < MAX_EPOCH_DAY < 2**63 - 1


class TestModifiedJulianDay:
    """Tests for the MJD conversions."""

    def test_mjd_epoch(self) -> None:
        """Test that MJD 0 is 1858-11-17."""
        assert from_modified_julian_day(0) == (1858, 11, 17)
        assert to_modified_julian_day(1858, 11, 17) == 0

    def test_offset_from_epoch_day(self) -> None:
        assert to_modified_julian_day(1970, 1, 1) == MJD_EPOCH_DAY_OFFSET
        assert from_modified_julian_day(40587) == (1970, 1, 1)

    def test_year_zero(self) -> None:
        assert from_modified_julian_day(-678941) == (0, 1, 1)
        assert from_modified_julian_day(-678942) == (-1, 12, 31)

    def test_limits(self) -> None:
        assert from_modified_julian_day(MAX_MJD) == (MAX_YEAR, 12, 31)
        assert from_modified_julian_day(MIN_MJD) == (MIN_YEAR, 1, 1)
        with pytest.raises(IllegalFieldValueError):
            from_modified_julian_day(MAX_MJD + 1)
        with pytest.raises(IllegalFieldValueError):
            from_modified_julian_day(MIN_MJD - 1)


class TestDayOfWeek:
    """Tests for day_of_week()."""

    def test_epoch_is_thursday(self) -> None:
        assert day_of_week(0) == 4

    def test_known_days(self) -> None:
        assert day_of_week(to_epoch_day(2007, 7, 15)) == 7
        assert day_of_week(to_epoch_day(2000, 1, 1)) == 6
        assert day_of_week(to_epoch_day(2007, 1, 1)) == 1

    def test_negative_epoch_days(self) -> None:
        """Test that the cycle continues before the epoch."""
        assert day_of_week(-1) == 3
        assert day_of_week(-7) == 4
        assert day_of_week(-8) == 3


class TestIsoWeek:
    """Tests for the ISO week-numbering rules."""

    @pytest.mark.parametrize(
        "ymd, expected",
        [
            ((2005, 1, 1), (2004, 53)),
            ((2005, 1, 2), (2004, 53)),
            ((2005, 12, 31), (2005, 52)),
            ((2006, 1, 1), (2005, 52)),
            ((2007, 1, 1), (2007, 1)),
            ((2007, 12, 30), (2007, 52)),
            ((2007, 12, 31), (2008, 1)),
            ((2008, 1, 1), (2008, 1)),
            ((2008, 12, 28), (2008, 52)),
            ((2008, 12, 29), (2009, 1)),
            ((2008, 12, 31), (2009, 1)),
            ((2009, 1, 1), (2009, 1)),
            ((2009, 12, 31), (2009, 53)),
            ((2010, 1, 3), (2009, 53)),
            ((2010, 1, 4), (2010, 1)),
        ],
    )
    def test_iso_week(self, ymd: tuple[int, int, int], expected: tuple[int, int]) -> None:
        """Test week-based year and week against published ISO week dates."""
        assert iso_week(*ymd) == expected

    def test_weeks_in_week_based_year(self) -> None:
        """Test 53-week years: starting Thursday, or Wednesday in a leap year."""
        assert weeks_in_week_based_year(2004) == 53
        assert weeks_in_week_based_year(2009) == 53
        assert weeks_in_week_based_year(2015) == 53
        assert weeks_in_week_based_year(2020) == 53
        assert weeks_in_week_based_year(2007) == 52
        assert weeks_in_week_based_year(2008) == 52

    def test_iso_week_to_epoch_day(self) -> None:
        assert iso_week_to_epoch_day(2008, 1, 1) == to_epoch_day(2007, 12, 31)
        assert iso_week_to_epoch_day(2009, 53, 7) == to_epoch_day(2010, 1, 3)
        assert iso_week_to_epoch_day(2004, 53, 6) == to_epoch_day(2005, 1, 1)

    def test_iso_week_round_trip(self) -> None:
        """Test that every day of several years maps back from its week date."""
        ymd = (2003, 12, 1)
        while ymd < (2011, 2, 1):
            epoch_day = to_epoch_day(*ymd)
            week_year, week = iso_week(*ymd)
            assert iso_week_to_epoch_day(week_year, week, day_of_week(epoch_day)) == epoch_day
            ymd = _next_day(*ymd)
