"""Period class representing a calendar-based amount of time.

A Period carries signed years, months and days together with time-of-day
components. Dates only consume the years, months and days; the time
components are ignored when a Period is applied to a Date.
"""

from __future__ import annotations

from typing import ClassVar


class Period:
    """An amount of time in years, months, days, hours, minutes, seconds and nanos.

    The components are stored as given, without normalization, so
    Period(months=14) stays 14 months rather than becoming 1 year and
    2 months.

    Attributes:
        years: Number of years (can be negative).
        months: Number of months (can be negative).
        days: Number of days (can be negative).
        hours: Number of hours (ignored by Date).
        minutes: Number of minutes (ignored by Date).
        seconds: Number of seconds (ignored by Date).
        nanos: Number of nanoseconds (ignored by Date).

    Examples:
        >>> p = Period(years=1, months=2, days=3)
        >>> p.months
        2

        >>> from isocal import Date
        >>> Date(2008, 1, 31) + Period(months=1)
        Date(2008, 2, 29)
    """

    __slots__ = ("_years", "_months", "_days", "_hours", "_minutes", "_seconds", "_nanos")

    ZERO: ClassVar[Period]

    def __init__(
        self,
        years: int = 0,
        months: int = 0,
        days: int = 0,
        hours: int = 0,
        minutes: int = 0,
        seconds: int = 0,
        nanos: int = 0,
    ) -> None:
        self._years = years
        self._months = months
        self._days = days
        self._hours = hours
        self._minutes = minutes
        self._seconds = seconds
        self._nanos = nanos

    @classmethod
    def of_years(cls, years: int) -> Period:
        """Create a Period of a given number of years.

        Examples:
            >>> Period.of_years(2)
            Period(years=2)
        """
        return cls(years=years)

    @classmethod
    def of_months(cls, months: int) -> Period:
        """Create a Period of a given number of months."""
        return cls(months=months)

    @classmethod
    def of_days(cls, days: int) -> Period:
        """Create a Period of a given number of days."""
        return cls(days=days)

    @classmethod
    def years_months_days(cls, years: int, months: int, days: int) -> Period:
        """Create a date-only Period.

        Examples:
            >>> Period.years_months_days(0, 1, 1)
            Period(months=1, days=1)
        """
        return cls(years=years, months=months, days=days)

    @property
    def years(self) -> int:
        return self._years

    @property
    def months(self) -> int:
        return self._months

    @property
    def days(self) -> int:
        return self._days

    @property
    def hours(self) -> int:
        return self._hours

    @property
    def minutes(self) -> int:
        return self._minutes

    @property
    def seconds(self) -> int:
        return self._seconds

    @property
    def nanos(self) -> int:
        return self._nanos

    @property
    def is_zero(self) -> bool:
        """Return True if every component is zero."""
        return not any(self._components())

    @property
    def is_date_zero(self) -> bool:
        """Return True if years, months and days are all zero.

        A Period with only time components leaves a Date unchanged.
        """
        return self._years == 0 and self._months == 0 and self._days == 0

    def to_period(self) -> Period:
        """Return this period; any object with to_period() can be added to a Date."""
        return self

    def negated(self) -> Period:
        """Return a Period with every component negated.

        Examples:
            >>> Period(years=1, days=-2).negated()
            Period(years=-1, days=2)
        """
        return Period(*(-value for value in self._components()))

    def _components(self) -> tuple[int, ...]:
        return (
            self._years,
            self._months,
            self._days,
            self._hours,
            self._minutes,
            self._seconds,
            self._nanos,
        )

    def __neg__(self) -> Period:
        return self.negated()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Period):
            return NotImplemented
        return self._components() == other._components()

    def __hash__(self) -> int:
        return hash(self._components())

    def __repr__(self) -> str:
        names = ("years", "months", "days", "hours", "minutes", "seconds", "nanos")
        parts = [
            f"{name}={value}"
            for name, value in zip(names, self._components())
            if value != 0
        ]
        return f"Period({', '.join(parts)})"

    def __bool__(self) -> bool:
        """A Period is truthy unless it is zero."""
        return not self.is_zero


Period.ZERO = Period()


__all__ = ["Period"]
