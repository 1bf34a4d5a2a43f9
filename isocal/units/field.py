"""Field rules for date queries.

This module provides the DateField enum, the closed set of fields a
Date can supply, and the TimeField enum naming time-of-day fields that
a Date never supplies. Each member carries its display name and the
static (minimum, maximum) range of values it can take.
"""

from __future__ import annotations

import operator
from enum import Enum
from typing import TYPE_CHECKING, Callable

from isocal._internal.calendar import weeks_in_week_based_year
from isocal._internal.constants import MAX_YEAR, MIN_YEAR
from isocal.errors import IllegalFieldValueError

if TYPE_CHECKING:
    from isocal.core.date import Date


class DateField(Enum):
    """Fields derivable from a date alone.

    Examples:
        >>> from isocal import Date
        >>> DateField.QUARTER_OF_YEAR.get_value(Date(2007, 7, 15))
        3

        >>> DateField.DAY_OF_MONTH.maximum
        31
        >>> DateField.DAY_OF_MONTH.maximum_for(Date(2007, 2, 1))
        28
    """

    YEAR = ("Year", MIN_YEAR, MAX_YEAR)
    QUARTER_OF_YEAR = ("QuarterOfYear", 1, 4)
    MONTH_OF_YEAR = ("MonthOfYear", 1, 12)
    MONTH_OF_QUARTER = ("MonthOfQuarter", 1, 3)
    DAY_OF_MONTH = ("DayOfMonth", 1, 31)
    DAY_OF_WEEK = ("DayOfWeek", 1, 7)
    DAY_OF_YEAR = ("DayOfYear", 1, 366)
    WEEK_OF_MONTH = ("WeekOfMonth", 1, 5)
    WEEK_OF_WEEK_BASED_YEAR = ("WeekOfWeekBasedYear", 1, 53)
    WEEK_BASED_YEAR = ("WeekBasedYear", MIN_YEAR - 1, MAX_YEAR + 1)

    def __init__(self, display_name: str, minimum: int, maximum: int) -> None:
        self.display_name = display_name
        self.minimum = minimum
        self.maximum = maximum

    def get_value(self, date: Date) -> int:
        """Return the value of this field for the given date."""
        return _GETTERS[self](date)

    def maximum_for(self, date: Date) -> int:
        """Return the largest value this field can take within the date's context.

        Day-of-month, day-of-year, week-of-month and week-of-week-based-year
        depend on the month, the year or the week-based year of the date;
        every other field returns its static maximum.
        """
        if self is DateField.DAY_OF_MONTH:
            return date.length_of_month
        if self is DateField.DAY_OF_YEAR:
            return date.length_of_year
        if self is DateField.WEEK_OF_MONTH:
            return (date.length_of_month - 1) // 7 + 1
        if self is DateField.WEEK_OF_WEEK_BASED_YEAR:
            return weeks_in_week_based_year(date.week_based_year)
        return self.maximum

    def is_valid_value(self, value: int) -> bool:
        """Return True if value lies within the static range of this field."""
        return self.minimum <= value <= self.maximum

    def check_value(self, value: int, date: Date | None = None) -> int:
        """Return value as a plain int if it lies within the range of this field.

        Without a date only the static range is checked. With a date the
        maximum is narrowed to maximum_for(date), so 30 is rejected as a
        day-of-month in February.

        Raises:
            TypeError: If value is not an integer (a float, a string).
            IllegalFieldValueError: If value is outside the range.
        """
        value = operator.index(value)
        maximum = self.maximum if date is None else self.maximum_for(date)
        if value < self.minimum or value > maximum:
            raise IllegalFieldValueError(self, value, self.minimum, maximum)
        return value

    def __repr__(self) -> str:
        return f"DateField.{self.name}"


class TimeField(Enum):
    """Time-of-day fields. A Date supports none of them."""

    HOUR_OF_DAY = ("HourOfDay", 0, 23)
    HOUR_OF_AMPM = ("HourOfAmPm", 0, 11)
    AMPM_OF_DAY = ("AmPmOfDay", 0, 1)
    MINUTE_OF_HOUR = ("MinuteOfHour", 0, 59)
    SECOND_OF_MINUTE = ("SecondOfMinute", 0, 59)
    NANO_OF_SECOND = ("NanoOfSecond", 0, 999_999_999)

    def __init__(self, display_name: str, minimum: int, maximum: int) -> None:
        self.display_name = display_name
        self.minimum = minimum
        self.maximum = maximum


_GETTERS: dict[DateField, Callable[[Date], int]] = {
    DateField.YEAR: lambda date: date.year,
    DateField.QUARTER_OF_YEAR: lambda date: date.quarter_of_year,
    DateField.MONTH_OF_YEAR: lambda date: date.month,
    DateField.MONTH_OF_QUARTER: lambda date: date.month_of_quarter,
    DateField.DAY_OF_MONTH: lambda date: date.day,
    DateField.DAY_OF_WEEK: lambda date: int(date.day_of_week),
    DateField.DAY_OF_YEAR: lambda date: date.day_of_year,
    DateField.WEEK_OF_MONTH: lambda date: date.week_of_month,
    DateField.WEEK_OF_WEEK_BASED_YEAR: lambda date: date.week_of_week_based_year,
    DateField.WEEK_BASED_YEAR: lambda date: date.week_based_year,
}


__all__ = ["DateField", "TimeField"]
