"""MonthOfYear and QuarterOfYear enumerations.

Both are IntEnums, so a member can be passed anywhere a plain month or
quarter number is expected.
"""

from __future__ import annotations

from enum import IntEnum
from typing import TYPE_CHECKING

from isocal._internal.calendar import month_length
from isocal._internal.constants import DAYS_BEFORE_MONTH, DAYS_IN_MONTH
from isocal.units.field import DateField

if TYPE_CHECKING:
    from isocal.core.date import Date


class QuarterOfYear(IntEnum):
    """Quarter of the year, Q1 (January-March) to Q4 (October-December).

    Examples:
        >>> QuarterOfYear.Q3.first_month
        <MonthOfYear.JULY: 7>
    """

    Q1 = 1
    Q2 = 2
    Q3 = 3
    Q4 = 4

    @classmethod
    def of(cls, value: int) -> QuarterOfYear:
        """Return the quarter for value, raising IllegalFieldValueError if not 1-4."""
        return cls(DateField.QUARTER_OF_YEAR.check_value(value))

    @property
    def first_month(self) -> MonthOfYear:
        return MonthOfYear((self - 1) * 3 + 1)

    def matches_date(self, date: Date) -> bool:
        """Return True if the date falls in this quarter."""
        return date.quarter_of_year == self


class MonthOfYear(IntEnum):
    """Month of the year, JANUARY (1) to DECEMBER (12).

    Examples:
        >>> MonthOfYear.FEBRUARY.length(2008)
        29
        >>> MonthOfYear.DECEMBER.next()
        <MonthOfYear.JANUARY: 1>
        >>> MonthOfYear.of(13)
        Traceback (most recent call last):
        ...
        isocal.errors.IllegalFieldValueError: Illegal value for MonthOfYear field, value 13 is not in the range 1 to 12
    """

    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12

    @classmethod
    def of(cls, value: int) -> MonthOfYear:
        """Return the month for value, raising IllegalFieldValueError if not 1-12."""
        return cls(DateField.MONTH_OF_YEAR.check_value(value))

    def length(self, year: int) -> int:
        """Return the number of days in this month for the given year."""
        return month_length(year, self)

    @property
    def min_length(self) -> int:
        return DAYS_IN_MONTH[self]

    @property
    def max_length(self) -> int:
        return 29 if self is MonthOfYear.FEBRUARY else DAYS_IN_MONTH[self]

    @property
    def quarter_of_year(self) -> QuarterOfYear:
        return QuarterOfYear((self - 1) // 3 + 1)

    @property
    def month_of_quarter(self) -> int:
        return (self - 1) % 3 + 1

    def first_day_of_year(self, leap_year: bool) -> int:
        """Return the day-of-year on which this month starts."""
        leap = 1 if leap_year and self > MonthOfYear.FEBRUARY else 0
        return DAYS_BEFORE_MONTH[self] + leap + 1

    def next(self) -> MonthOfYear:
        """Return the following month, wrapping December to January."""
        return MonthOfYear(self % 12 + 1)

    def previous(self) -> MonthOfYear:
        """Return the preceding month, wrapping January to December."""
        return MonthOfYear((self + 10) % 12 + 1)

    def matches_date(self, date: Date) -> bool:
        """Return True if the date falls in this month of any year."""
        return date.month == self


__all__ = ["MonthOfYear", "QuarterOfYear"]
