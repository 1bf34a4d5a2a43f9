"""Validation utilities for isocal.

Every path that builds a Date funnels through validate_date, which checks
the raw range of each field before checking that the three fields name a
day that exists. The two failures raise different exceptions.

This module is not part of the public API.
"""

from __future__ import annotations

from typing import TypeVar

from isocal._internal.calendar import month_length
from isocal.errors import InvalidDateError, MissingValueError
from isocal.units.field import DateField

T = TypeVar("T")

_MONTH_NAMES = (
    "", "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


def require(value: T | None, name: str) -> T:
    """Return value, raising MissingValueError if it is None."""
    if value is None:
        raise MissingValueError(name)
    return value


def validate_year(year: int) -> int:
    """Validate that a year is within MIN_YEAR to MAX_YEAR.

    Raises:
        MissingValueError: If year is None.
        TypeError: If year is not an integer.
        IllegalFieldValueError: If year is out of range.
    """
    return DateField.YEAR.check_value(require(year, "year"))


def validate_month(month: int) -> int:
    """Validate that a month is within 1-12 and return it as a plain int."""
    return DateField.MONTH_OF_YEAR.check_value(require(month, "month"))


def validate_day_of_month(day: int) -> int:
    """Validate that a day-of-month is within 1-31, ignoring the month."""
    return DateField.DAY_OF_MONTH.check_value(require(day, "day"))


def check_day_exists(year: int, month: int, day: int) -> None:
    """Check that day exists in the given month of the given year.

    Assumes each field has already passed its raw range check.

    Raises:
        InvalidDateError: If the month is shorter than day.
    """
    if day > month_length(year, month):
        if month == 2 and day == 29:
            reason = f"February 29 as {year} is not a leap year"
        else:
            reason = f"{_MONTH_NAMES[month]} {day} does not exist"
        raise InvalidDateError(year, month, day, reason)


def validate_date(year: int, month: int, day: int) -> tuple[int, int, int]:
    """Validate a (year, month, day) triple and return it normalized to ints.

    Raises:
        MissingValueError: If any component is None.
        TypeError: If any component is not an integer.
        IllegalFieldValueError: If any component is outside its raw range.
        InvalidDateError: If the components do not form an existing date.

    Examples:
        >>> validate_date(2008, 2, 29)
        (2008, 2, 29)
        >>> validate_date(2007, 2, 29)
        Traceback (most recent call last):
        ...
        isocal.errors.InvalidDateError: Invalid date 2007-02-29: February 29 as 2007 is not a leap year
    """
    year = validate_year(year)
    month = validate_month(month)
    day = validate_day_of_month(day)
    check_day_exists(year, month, day)
    return (year, month, day)


__all__ = [
    "require",
    "validate_year",
    "validate_month",
    "validate_day_of_month",
    "check_day_exists",
    "validate_date",
]
