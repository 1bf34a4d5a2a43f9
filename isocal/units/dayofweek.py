"""DayOfWeek enumeration.

ISO-8601 numbering: MONDAY is 1 and SUNDAY is 7.
"""

from __future__ import annotations

from enum import IntEnum
from typing import TYPE_CHECKING

from isocal.units.field import DateField

if TYPE_CHECKING:
    from isocal.core.date import Date


class DayOfWeek(IntEnum):
    """Day of the week, MONDAY (1) to SUNDAY (7).

    Examples:
        >>> DayOfWeek.SUNDAY.next()
        <DayOfWeek.MONDAY: 1>
        >>> DayOfWeek.of(3)
        <DayOfWeek.WEDNESDAY: 3>
    """

    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
    SUNDAY = 7

    @classmethod
    def of(cls, value: int) -> DayOfWeek:
        """Return the day for value, raising IllegalFieldValueError if not 1-7."""
        return cls(DateField.DAY_OF_WEEK.check_value(value))

    def next(self) -> DayOfWeek:
        return DayOfWeek(self % 7 + 1)

    def previous(self) -> DayOfWeek:
        return DayOfWeek((self + 5) % 7 + 1)

    def matches_date(self, date: Date) -> bool:
        """Return True if the date falls on this day of the week."""
        return date.day_of_week == self


__all__ = ["DayOfWeek"]
