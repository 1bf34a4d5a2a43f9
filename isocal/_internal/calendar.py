"""Calendar kernel for isocal.

This module provides the pure functions that convert between
(year, month, day) triples and linear day counts, together with the
leap year rule and the month length table.

Day counts:
    epoch-day 0 = 1970-01-01
    MJD 0       = 1858-11-17 (epoch-day -40587)

The conversions are closed-form. Years are shifted so that the year
starts on March 1st, which moves the leap day to the end of the year and
lets the month offset be computed with a single linear formula. Python's
floor division keeps the formulas exact for negative years.

This module is not part of the public API.
"""

from __future__ import annotations

import operator

from isocal._internal.constants import (
    DAYS_0000_TO_1970,
    DAYS_BEFORE_MONTH,
    DAYS_IN_MONTH,
    DAYS_PER_CYCLE,
    MAX_YEAR,
    MIN_YEAR,
    MJD_EPOCH_DAY_OFFSET,
)
from isocal.errors import IllegalFieldValueError

# Days from 0000-03-01 to 1970-01-01 (Jan and Feb of the leap year 0 removed)
_DAYS_0000_03_01_TO_1970 = DAYS_0000_TO_1970 - 60


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    A year is a leap year if:
    - Divisible by 4, AND
    - NOT divisible by 100, unless also divisible by 400

    Args:
        year: The year to check (zero and negative years included).

    Returns:
        True if the year is a leap year.

    Examples:
        >>> is_leap_year(2000)  # Divisible by 400
        True
        >>> is_leap_year(1900)  # Divisible by 100 but not 400
        False
        >>> is_leap_year(-4)
        True
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def month_length(year: int, month: int) -> int:
    """Return the number of days in a given month.

    Args:
        year: The year (needed for February in leap years).
        month: The month (1-12), assumed valid.

    Returns:
        Number of days in the month.
    """
    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month]


def year_length(year: int) -> int:
    """Return 366 for leap years, 365 otherwise."""
    return 366 if is_leap_year(year) else 365


def day_of_year(year: int, month: int, day: int) -> int:
    """Return the 1-based day of the year for a valid date."""
    result = DAYS_BEFORE_MONTH[month] + day
    if month > 2 and is_leap_year(year):
        result += 1
    return result


def to_epoch_day(year: int, month: int, day: int) -> int:
    """Convert a validated (year, month, day) to an epoch-day count.

    Args:
        year: The proleptic year.
        month: The month (1-12).
        day: The day of the month, valid for year and month.

    Returns:
        Days since 1970-01-01 (negative before it).

    Examples:
        >>> to_epoch_day(1970, 1, 1)
        0
        >>> to_epoch_day(1858, 11, 17)
        -40587
    """
    y = year - 1 if month <= 2 else year
    cycle = y // 400
    year_of_cycle = y - cycle * 400
    march_month = month - 3 if month > 2 else month + 9
    day_of_march_year = (153 * march_month + 2) // 5 + day - 1
    day_of_cycle = (
        year_of_cycle * 365
        + year_of_cycle // 4
        - year_of_cycle // 100
        + day_of_march_year
    )
    return cycle * DAYS_PER_CYCLE + day_of_cycle - _DAYS_0000_03_01_TO_1970


def _epoch_day_to_ymd(epoch_day: int) -> tuple[int, int, int]:
    shifted = epoch_day + _DAYS_0000_03_01_TO_1970
    cycle = shifted // DAYS_PER_CYCLE
    day_of_cycle = shifted - cycle * DAYS_PER_CYCLE
    year_of_cycle = (
        day_of_cycle
        - day_of_cycle // 1460
        + day_of_cycle // 36524
        - day_of_cycle // (DAYS_PER_CYCLE - 1)
    ) // 365
    day_of_march_year = day_of_cycle - (
        365 * year_of_cycle + year_of_cycle // 4 - year_of_cycle // 100
    )
    march_month = (5 * day_of_march_year + 2) // 153
    day = day_of_march_year - (153 * march_month + 2) // 5 + 1
    month = march_month + 3 if march_month < 10 else march_month - 9
    year = year_of_cycle + cycle * 400 + (1 if month <= 2 else 0)
    return (year, month, day)


MIN_EPOCH_DAY: int = to_epoch_day(MIN_YEAR, 1, 1)
MAX_EPOCH_DAY: int = to_epoch_day(MAX_YEAR, 12, 31)
MIN_MJD: int = MIN_EPOCH_DAY + MJD_EPOCH_DAY_OFFSET
MAX_MJD: int = MAX_EPOCH_DAY + MJD_EPOCH_DAY_OFFSET


def from_epoch_day(epoch_day: int) -> tuple[int, int, int]:
    """Convert an epoch-day count to (year, month, day).

    Args:
        epoch_day: Days since 1970-01-01.

    Returns:
        Tuple of (year, month, day).

    Raises:
        TypeError: If epoch_day is not an integer.
        IllegalFieldValueError: If the day falls outside the supported years.

    Examples:
        >>> from_epoch_day(0)
        (1970, 1, 1)
        >>> from_epoch_day(-719528)
        (0, 1, 1)
    """
    epoch_day = operator.index(epoch_day)
    if epoch_day < MIN_EPOCH_DAY or epoch_day > MAX_EPOCH_DAY:
        raise IllegalFieldValueError("EpochDay", epoch_day, MIN_EPOCH_DAY, MAX_EPOCH_DAY)
    return _epoch_day_to_ymd(epoch_day)


def to_modified_julian_day(year: int, month: int, day: int) -> int:
    """Convert a validated (year, month, day) to a Modified Julian Day."""
    return to_epoch_day(year, month, day) + MJD_EPOCH_DAY_OFFSET


def from_modified_julian_day(mjd: int) -> tuple[int, int, int]:
    """Convert a Modified Julian Day to (year, month, day).

    Raises:
        TypeError: If mjd is not an integer.
        IllegalFieldValueError: If the day falls outside the supported years.
    """
    mjd = operator.index(mjd)
    if mjd < MIN_MJD or mjd > MAX_MJD:
        raise IllegalFieldValueError("ModifiedJulianDay", mjd, MIN_MJD, MAX_MJD)
    return _epoch_day_to_ymd(mjd - MJD_EPOCH_DAY_OFFSET)


def day_of_week(epoch_day: int) -> int:
    """Return the ISO day of week (Monday=1, Sunday=7) of an epoch-day.

    Epoch-day 0 (1970-01-01) was a Thursday.
    """
    return (epoch_day + 3) % 7 + 1


def weeks_in_week_based_year(week_based_year: int) -> int:
    """Return 52 or 53, the number of ISO weeks in a week-based year.

    A week-based year has 53 weeks when it starts on a Thursday, or on a
    Wednesday in a leap year.
    """
    jan1 = day_of_week(to_epoch_day(week_based_year, 1, 1))
    if jan1 == 4 or (jan1 == 3 and is_leap_year(week_based_year)):
        return 53
    return 52


def iso_week(year: int, month: int, day: int) -> tuple[int, int]:
    """Return (week_based_year, week_of_week_based_year) for a valid date.

    Week 1 is the week holding the first Thursday of the year. The first
    days of January may belong to the last week of the previous
    week-based year and the last days of December to week 1 of the next.

    Examples:
        >>> iso_week(2005, 1, 1)
        (2004, 53)
        >>> iso_week(2007, 12, 31)
        (2008, 1)
    """
    dow = day_of_week(to_epoch_day(year, month, day))
    doy = day_of_year(year, month, day)
    week = (doy - dow + 10) // 7
    if week < 1:
        return (year - 1, weeks_in_week_based_year(year - 1))
    if week > weeks_in_week_based_year(year):
        return (year + 1, 1)
    return (year, week)


def iso_week_to_epoch_day(week_based_year: int, week: int, dow: int) -> int:
    """Return the epoch-day of the given ISO week date.

    January 4th always lies in week 1, so week 1 starts on the Monday on
    or before it. Assumes week is valid for the week-based year.

    Examples:
        >>> iso_week_to_epoch_day(2008, 1, 1) == to_epoch_day(2007, 12, 31)
        True
    """
    jan4 = to_epoch_day(week_based_year, 1, 4)
    week1_monday = jan4 - (day_of_week(jan4) - 1)
    return week1_monday + (week - 1) * 7 + (dow - 1)


__all__ = [
    "MIN_EPOCH_DAY",
    "MAX_EPOCH_DAY",
    "MIN_MJD",
    "MAX_MJD",
    "is_leap_year",
    "month_length",
    "year_length",
    "day_of_year",
    "to_epoch_day",
    "from_epoch_day",
    "to_modified_julian_day",
    "from_modified_julian_day",
    "day_of_week",
    "weeks_in_week_based_year",
    "iso_week",
    "iso_week_to_epoch_day",
]
