"""Partial dates: a year with a month, and a month with a day.

YearMonth and MonthDay are the pieces of a Date that recur independently
of it, such as a billing month (2007-07) or an anniversary (--02-29).
Both are immutable and order naturally by their components.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from isocal._internal.calendar import is_leap_year, month_length
from isocal._internal.validation import (
    require,
    validate_day_of_month,
    validate_month,
    validate_year,
)
from isocal.errors import IllegalFieldValueError
from isocal.units.field import DateField
from isocal.units.monthofyear import MonthOfYear

if TYPE_CHECKING:
    from isocal.arithmetic.resolvers import DateResolver
    from isocal.core.date import Date


@dataclass(frozen=True, order=True)
class YearMonth:
    """A year and month, such as 2007-07.

    Examples:
        >>> ym = YearMonth(2008, 2)
        >>> ym.length_of_month
        29
        >>> ym.at_day(29)
        Date(2008, 2, 29)
        >>> str(ym)
        '2008-02'
    """

    year: int
    month: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "year", validate_year(self.year))
        object.__setattr__(self, "month", validate_month(self.month))

    @property
    def month_of_year(self) -> MonthOfYear:
        return MonthOfYear(self.month)

    @property
    def length_of_month(self) -> int:
        return month_length(self.year, self.month)

    def at_day(self, day: int) -> Date:
        """Return the Date for day in this month.

        Raises:
            IllegalFieldValueError: If day is outside 1-31.
            InvalidDateError: If this month has no such day.
        """
        from isocal.core.date import Date

        return Date(self.year, self.month, day)

    def __str__(self) -> str:
        from isocal.format.iso8601 import format_year

        return f"{format_year(self.year)}-{self.month:02d}"


@dataclass(frozen=True, order=True)
class MonthDay:
    """A month and day without a year, such as --02-29.

    February 29 is a valid MonthDay; it only fails to exist in some years.

    Examples:
        >>> MonthDay(2, 29).at_year(2007)
        Date(2007, 2, 28)
        >>> MonthDay(2, 29).is_valid_year(2007)
        False
        >>> str(MonthDay(7, 15))
        '--07-15'
    """

    month: int
    day: int

    def __post_init__(self) -> None:
        month = validate_month(self.month)
        day = validate_day_of_month(self.day)
        max_length = MonthOfYear(month).max_length
        if day > max_length:
            raise IllegalFieldValueError(DateField.DAY_OF_MONTH, day, 1, max_length)
        object.__setattr__(self, "month", month)
        object.__setattr__(self, "day", day)

    @property
    def month_of_year(self) -> MonthOfYear:
        return MonthOfYear(self.month)

    def is_valid_year(self, year: int) -> bool:
        """Return True if this month-day exists in year."""
        return not (self.month == 2 and self.day == 29 and not is_leap_year(year))

    def at_year(self, year: int, resolver: DateResolver | None = None) -> Date:
        """Return this month-day in year.

        February 29 in a common year is resolved with resolver, which
        defaults to previous-valid (February 28).

        Raises:
            IllegalFieldValueError: If year is outside MIN_YEAR to MAX_YEAR.
            InvalidDateError: If resolver is strict and the day is invalid.
            MissingValueError: If resolver returns None.
        """
        from isocal.arithmetic.resolvers import DateResolvers

        if resolver is None:
            resolver = DateResolvers.PREVIOUS_VALID
        return require(
            resolver.resolve(validate_year(year), self.month, self.day), "resolved date"
        )

    def __str__(self) -> str:
        return f"--{self.month:02d}-{self.day:02d}"


__all__ = ["YearMonth", "MonthDay"]
