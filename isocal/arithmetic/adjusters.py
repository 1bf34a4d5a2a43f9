"""Common date adjusters.

An adjuster is anything that turns one Date into another: a plain
function, or an object with an ``adjust_date(date)`` method. Pass one to
Date.with_adjuster().

Examples:
    >>> from isocal import Date, DayOfWeek
    >>> Date(2007, 7, 15).with_adjuster(last_day_of_month)
    Date(2007, 7, 31)
    >>> Date(2007, 7, 15).with_adjuster(next_day_of_week(DayOfWeek.MONDAY))
    Date(2007, 7, 16)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from isocal._internal.validation import require
from isocal.units.dayofweek import DayOfWeek

if TYPE_CHECKING:
    from isocal.core.date import Date

DateAdjuster = Callable[["Date"], "Date"]


def first_day_of_month(date: Date) -> Date:
    """Return the first day of the date's month."""
    return date.with_day_of_month(1)


def last_day_of_month(date: Date) -> Date:
    """Return the last day of the date's month."""
    return date.with_day_of_month(date.length_of_month)


def first_day_of_year(date: Date) -> Date:
    """Return January 1st of the date's year."""
    return date.with_month(1).with_day_of_month(1)


def last_day_of_year(date: Date) -> Date:
    """Return December 31st of the date's year."""
    return date.with_month(12).with_day_of_month(31)


def _seek(day_of_week: DayOfWeek, forward: bool, allow_same: bool) -> DateAdjuster:
    target = DayOfWeek.of(require(day_of_week, "day_of_week"))

    def adjust(date: Date) -> Date:
        current = date.day_of_week
        if allow_same and current == target:
            return date
        if forward:
            return date.plus_days((target - current - 1) % 7 + 1)
        return date.minus_days((current - target - 1) % 7 + 1)

    return adjust


def next_day_of_week(day_of_week: DayOfWeek) -> DateAdjuster:
    """Return an adjuster moving to the next given weekday, strictly after the date."""
    return _seek(day_of_week, forward=True, allow_same=False)


def next_or_same(day_of_week: DayOfWeek) -> DateAdjuster:
    """Return an adjuster moving to the given weekday, or staying if already on it."""
    return _seek(day_of_week, forward=True, allow_same=True)


def previous_day_of_week(day_of_week: DayOfWeek) -> DateAdjuster:
    """Return an adjuster moving to the previous given weekday, strictly before the date."""
    return _seek(day_of_week, forward=False, allow_same=False)


def previous_or_same(day_of_week: DayOfWeek) -> DateAdjuster:
    """Return an adjuster moving back to the given weekday, or staying if already on it."""
    return _seek(day_of_week, forward=False, allow_same=True)


__all__ = [
    "DateAdjuster",
    "first_day_of_month",
    "last_day_of_month",
    "first_day_of_year",
    "last_day_of_year",
    "next_day_of_week",
    "next_or_same",
    "previous_day_of_week",
    "previous_or_same",
]
