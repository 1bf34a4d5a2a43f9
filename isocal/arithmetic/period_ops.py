"""Period arithmetic for dates.

A period is applied one component at a time, in a fixed order:
    1. Years
    2. Months
    3. Days

The year and month steps always clamp an overflowing day-of-month to the
last valid day of the resulting month. The order is observable:

    Date(2008, 1, 31) + Period(months=1)         -> Date(2008, 2, 29)
    Date(2008, 1, 31) + Period(months=1, days=1) -> Date(2008, 3, 1)

Time-of-day components of the period are ignored.

Any object exposing ``years``, ``months`` and ``days`` is accepted, as is
any object with a ``to_period()`` method returning such a value.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

from isocal._internal.validation import require
from isocal.arithmetic.resolvers import DateResolvers

if TYPE_CHECKING:
    from isocal.core.date import Date


class PeriodLike(Protocol):
    """The part of a period a Date consumes."""

    @property
    def years(self) -> int: ...

    @property
    def months(self) -> int: ...

    @property
    def days(self) -> int: ...


def _as_period(period: Any) -> PeriodLike:
    require(period, "period")
    to_period = getattr(period, "to_period", None)
    if to_period is not None:
        return require(to_period(), "period")
    return period


def add_period_to_date(date: Date, period: Any) -> Date:
    """Add a period to a date, clamping the day-of-month after the month step.

    Args:
        date: The date to add to.
        period: A Period, or any object shaped like one.

    Returns:
        The resulting Date, or date itself when the period has no
        year, month or day component.

    Raises:
        MissingValueError: If period, or the value its to_period() returns, is None.
        DateOverflowError: If the year leaves the supported range.
        IllegalFieldValueError: If the day step leaves the supported range.

    Examples:
        >>> from isocal import Date, Period
        >>> add_period_to_date(Date(2007, 7, 15), Period(1, 2, 3))
        Date(2008, 9, 18)
    """
    p = _as_period(period)
    return (
        date.plus_years(p.years, DateResolvers.PREVIOUS_VALID)
        .plus_months(p.months, DateResolvers.PREVIOUS_VALID)
        .plus_days(p.days)
    )


def subtract_period_from_date(date: Date, period: Any) -> Date:
    """Subtract a period from a date, component by component.

    Years are subtracted first, then months, then days, with the same
    clamping as add_period_to_date.

    Examples:
        >>> from isocal import Date, Period
        >>> subtract_period_from_date(Date(2008, 3, 31), Period(months=1))
        Date(2008, 2, 29)
    """
    p = _as_period(period)
    return (
        date.minus_years(p.years, DateResolvers.PREVIOUS_VALID)
        .minus_months(p.months, DateResolvers.PREVIOUS_VALID)
        .minus_days(p.days)
    )


__all__ = ["PeriodLike", "add_period_to_date", "subtract_period_from_date"]
