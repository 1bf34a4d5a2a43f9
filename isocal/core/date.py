"""Date class representing a calendar date.

This module provides the Date class, an immutable date in the proleptic
Gregorian calendar used by ISO 8601, together with the MIN and MAX
dates of the supported year range.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, ClassVar

from isocal._internal.calendar import (
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
from isocal._internal.constants import MAX_YEAR, MIN_YEAR
from isocal._internal.validation import (
    check_day_exists,
    require,
    validate_date,
    validate_day_of_month,
    validate_month,
    validate_year,
)
from isocal.arithmetic.checked import safe_add, safe_multiply, safe_subtract
from isocal.arithmetic.resolvers import DateResolver, DateResolvers
from isocal.core.calendrical import MIDNIGHT, Calendrical
from isocal.core.period import Period
from isocal.core.yearmonth import MonthDay, YearMonth
from isocal.errors import DateOverflowError, IllegalFieldValueError, UnsupportedFieldError
from isocal.units.dayofweek import DayOfWeek
from isocal.units.field import DateField
from isocal.units.monthofyear import MonthOfYear, QuarterOfYear

if TYPE_CHECKING:
    from isocal.arithmetic.period_ops import PeriodLike


class Date:
    """A date without time-of-day or zone, such as 2007-07-15.

    Date uses the proleptic Gregorian calendar: the Gregorian rules are
    applied to every year, including year zero and negative years.
    Instances are immutable. Every operation that would change a field
    returns a new Date, or the receiver itself when nothing changes.

    Attributes:
        year: The proleptic year, MIN_YEAR to MAX_YEAR.
        month: The month (1-12).
        day: The day of the month (1-31).

    Examples:
        >>> d = Date(2007, 7, 15)
        >>> d.day_of_week
        <DayOfWeek.SUNDAY: 7>
        >>> d.plus_months(1)
        Date(2007, 8, 15)
        >>> str(d)
        '2007-07-15'

        >>> Date(2007, 2, 29)
        Traceback (most recent call last):
        ...
        isocal.errors.InvalidDateError: Invalid date 2007-02-29: February 29 as 2007 is not a leap year
    """

    __slots__ = ("_year", "_month", "_day")

    MIN: ClassVar[Date]
    MAX: ClassVar[Date]

    def __init__(self, year: int, month: int, day: int) -> None:
        """Create a Date from year, month and day.

        Args:
            year: The year, MIN_YEAR to MAX_YEAR (0 and negatives allowed).
            month: The month (1-12), an int or a MonthOfYear.
            day: The day of the month (1-31).

        Raises:
            MissingValueError: If any component is None.
            TypeError: If a component is not an integer.
            IllegalFieldValueError: If a component is outside its range.
            InvalidDateError: If the day does not exist in that month.
        """
        self._year, self._month, self._day = validate_date(year, month, day)

    @classmethod
    def _create(cls, year: int, month: int, day: int) -> Date:
        """Build a Date from fields the caller has already validated."""
        date = object.__new__(cls)
        date._year = year
        date._month = month
        date._day = day
        return date

    @classmethod
    def of(cls, provider: Any) -> Date:
        """Return the date held by a date provider.

        A provider is any object with a ``to_date()`` method, including a
        Date itself (which returns itself) and a Calendrical.

        Raises:
            MissingValueError: If provider is None or returns None.
            TypeError: If provider has no to_date() method.

        Examples:
            >>> d = Date(2008, 6, 30)
            >>> Date.of(d) is d
            True
        """
        require(provider, "provider")
        if isinstance(provider, Date):
            return provider
        to_date = getattr(provider, "to_date", None)
        if to_date is None:
            raise TypeError(
                f"expected a date provider with a to_date() method, "
                f"got {type(provider).__name__}"
            )
        return require(to_date(), "provided date")

    @classmethod
    def from_epoch_day(cls, epoch_day: int) -> Date:
        """Create a Date from a count of days since 1970-01-01.

        Raises:
            TypeError: If epoch_day is not an integer.
            IllegalFieldValueError: If the day is outside the supported years.

        Examples:
            >>> Date.from_epoch_day(0)
            Date(1970, 1, 1)
            >>> Date.from_epoch_day(-1)
            Date(1969, 12, 31)
        """
        year, month, day = from_epoch_day(require(epoch_day, "epoch_day"))
        return cls._create(year, month, day)

    @classmethod
    def from_modified_julian_day(cls, mjd: int) -> Date:
        """Create a Date from a Modified Julian Day number.

        Raises:
            TypeError: If mjd is not an integer.
            IllegalFieldValueError: If the day is outside the supported years.

        Examples:
            >>> Date.from_modified_julian_day(0)
            Date(1858, 11, 17)
        """
        year, month, day = from_modified_julian_day(require(mjd, "mjd"))
        return cls._create(year, month, day)

    @classmethod
    def parse(cls, text: str) -> Date:
        """Parse a date from ISO 8601 extended format ([sign]YYYY-MM-DD).

        Raises:
            MissingValueError: If text is None.
            ParseError: If text does not follow the format.
            IllegalFieldValueError: If a field is out of range (month 13).
            InvalidDateError: If the day does not exist (February 30).

        Examples:
            >>> Date.parse("2008-07-05")
            Date(2008, 7, 5)
            >>> Date.parse("+10000-01-01")
            Date(10000, 1, 1)
        """
        from isocal.format.iso8601 import parse_date

        return parse_date(text)

    @classmethod
    def from_iso_format(cls, s: str) -> Date:
        """Alias of parse()."""
        return cls.parse(s)

    # ------------------------------------------------------------------
    # Fields
    # ------------------------------------------------------------------

    @property
    def year(self) -> int:
        return self._year

    @property
    def month(self) -> int:
        return self._month

    @property
    def day(self) -> int:
        return self._day

    @property
    def month_of_year(self) -> MonthOfYear:
        return MonthOfYear(self._month)

    @property
    def year_month(self) -> YearMonth:
        """Return the year and month of this date.

        Examples:
            >>> Date(2007, 7, 15).year_month
            YearMonth(year=2007, month=7)
        """
        return YearMonth(self._year, self._month)

    @property
    def month_day(self) -> MonthDay:
        """Return the month and day of this date, dropping the year."""
        return MonthDay(self._month, self._day)

    @property
    def quarter_of_year(self) -> QuarterOfYear:
        return QuarterOfYear((self._month - 1) // 3 + 1)

    @property
    def month_of_quarter(self) -> int:
        return (self._month - 1) % 3 + 1

    @property
    def day_of_week(self) -> DayOfWeek:
        """Return the ISO day of the week.

        Examples:
            >>> Date(1970, 1, 1).day_of_week
            <DayOfWeek.THURSDAY: 4>
        """
        return DayOfWeek(day_of_week(self.to_epoch_day()))

    @property
    def day_of_year(self) -> int:
        """Return the day of the year (1-366).

        Examples:
            >>> Date(2008, 12, 31).day_of_year
            366
        """
        return day_of_year(self._year, self._month, self._day)

    @property
    def week_of_month(self) -> int:
        """Return the week of the month (1-5); days 1-7 are week 1."""
        return (self._day - 1) // 7 + 1

    @property
    def week_based_year(self) -> int:
        """Return the ISO week-based year.

        It differs from the calendar year for the first days of January
        and the last days of December.

        Examples:
            >>> Date(2005, 1, 1).week_based_year
            2004
            >>> Date(2007, 12, 31).week_based_year
            2008
        """
        return iso_week(self._year, self._month, self._day)[0]

    @property
    def week_of_week_based_year(self) -> int:
        """Return the ISO week number (1-53).

        Examples:
            >>> Date(2005, 1, 1).week_of_week_based_year
            53
        """
        return iso_week(self._year, self._month, self._day)[1]

    @property
    def is_leap_year(self) -> bool:
        """Return True if this date is in a leap year."""
        return is_leap_year(self._year)

    @property
    def length_of_month(self) -> int:
        return month_length(self._year, self._month)

    @property
    def length_of_year(self) -> int:
        return year_length(self._year)

    def is_supported(self, field: Any) -> bool:
        """Return True if field can be read from a Date.

        Only DateField members are supported; time fields never are.

        Examples:
            >>> from isocal.units import DateField, TimeField
            >>> Date(2007, 7, 15).is_supported(DateField.DAY_OF_YEAR)
            True
            >>> Date(2007, 7, 15).is_supported(TimeField.HOUR_OF_DAY)
            False
        """
        return isinstance(field, DateField)

    def get(self, field: Any) -> int:
        """Return the value of a field.

        Raises:
            MissingValueError: If field is None.
            UnsupportedFieldError: If field is not a DateField.

        Examples:
            >>> from isocal.units import DateField
            >>> Date(2007, 7, 15).get(DateField.QUARTER_OF_YEAR)
            3
        """
        require(field, "field")
        if not self.is_supported(field):
            raise UnsupportedFieldError(field)
        return field.get_value(self)

    # ------------------------------------------------------------------
    # Field mutation
    # ------------------------------------------------------------------

    def _resolve(self, year: int, month: int, day: int, resolver: DateResolver) -> Date:
        require(resolver, "resolver")
        result = require(resolver.resolve(year, month, day), "resolved date")
        return self if result == self else result

    def with_year(
        self, year: int, resolver: DateResolver = DateResolvers.PREVIOUS_VALID
    ) -> Date:
        """Return a copy with the year changed.

        If the day-of-month does not exist in the new year (February 29),
        resolver picks the date to use.

        Raises:
            IllegalFieldValueError: If year is outside MIN_YEAR to MAX_YEAR.
            InvalidDateError: If resolver is strict and the day is invalid.
            MissingValueError: If resolver is None or returns None.

        Examples:
            >>> Date(2008, 2, 29).with_year(2007)
            Date(2007, 2, 28)
            >>> from isocal.arithmetic import next_valid
            >>> Date(2008, 2, 29).with_year(2007, next_valid())
            Date(2007, 3, 1)
        """
        year = validate_year(year)
        if year == self._year:
            return self
        return self._resolve(year, self._month, self._day, resolver)

    def with_month(
        self, month: int, resolver: DateResolver = DateResolvers.PREVIOUS_VALID
    ) -> Date:
        """Return a copy with the month changed.

        If the day-of-month does not exist in the new month (31st of
        November), resolver picks the date to use.

        Raises:
            IllegalFieldValueError: If month is outside 1-12.
            InvalidDateError: If resolver is strict and the day is invalid.
            MissingValueError: If resolver is None or returns None.

        Examples:
            >>> Date(2007, 12, 31).with_month(11)
            Date(2007, 11, 30)
        """
        month = validate_month(month)
        if month == self._month:
            return self
        return self._resolve(self._year, month, self._day, resolver)

    def with_day_of_month(self, day: int) -> Date:
        """Return a copy with the day-of-month changed.

        The day is never resolved: it must exist in the current month.

        Raises:
            IllegalFieldValueError: If day is outside 1-31.
            InvalidDateError: If the month has no such day.
        """
        day = validate_day_of_month(day)
        if day == self._day:
            return self
        check_day_exists(self._year, self._month, day)
        return Date._create(self._year, self._month, day)

    def with_day_of_year(self, day_of_year: int) -> Date:
        """Return the date with the given day-of-year in the same year.

        Raises:
            IllegalFieldValueError: If day_of_year exceeds the year's length.
        """
        return self.with_field(DateField.DAY_OF_YEAR, day_of_year)

    def with_field(self, field: DateField, value: int) -> Date:
        """Return a copy with one field set, every other field kept where possible.

        The value is checked against the field's range in the context of
        this date, so DAY_OF_YEAR 366 is rejected in a common year and
        WEEK_OF_WEEK_BASED_YEAR 53 in a 52-week year.

        Raises:
            MissingValueError: If field or value is None.
            UnsupportedFieldError: If field is not a DateField.
            IllegalFieldValueError: If value is out of range for this date.
            InvalidDateError: For WEEK_OF_MONTH when the day does not exist.

        Examples:
            >>> from isocal.units import DateField
            >>> Date(2007, 7, 15).with_field(DateField.DAY_OF_WEEK, 1)
            Date(2007, 7, 9)
        """
        require(field, "field")
        if not self.is_supported(field):
            raise UnsupportedFieldError(field)
        value = field.check_value(require(value, "value"), self)
        current = field.get_value(self)
        if value == current:
            return self

        if field is DateField.YEAR:
            return self.with_year(value)
        if field is DateField.MONTH_OF_YEAR:
            return self.with_month(value)
        if field is DateField.DAY_OF_MONTH:
            return self.with_day_of_month(value)
        if field is DateField.QUARTER_OF_YEAR:
            return self.plus_months((value - current) * 3)
        if field is DateField.MONTH_OF_QUARTER:
            return self.plus_months(value - current)
        if field in (DateField.DAY_OF_WEEK, DateField.DAY_OF_YEAR):
            return self.plus_days(value - current)
        if field is DateField.WEEK_OF_MONTH:
            day = self._day + (value - current) * 7
            check_day_exists(self._year, self._month, day)
            return Date._create(self._year, self._month, day)
        if field is DateField.WEEK_OF_WEEK_BASED_YEAR:
            return self.plus_weeks(value - current)

        # WEEK_BASED_YEAR keeps the week number and the day of the week
        week = self.week_of_week_based_year
        max_week = weeks_in_week_based_year(value)
        if week > max_week:
            raise IllegalFieldValueError(DateField.WEEK_OF_WEEK_BASED_YEAR, week, 1, max_week)
        return Date.from_epoch_day(
            iso_week_to_epoch_day(value, week, int(self.day_of_week))
        )

    def with_adjuster(self, adjuster: Any) -> Date:
        """Return the date an adjuster produces from this date.

        adjuster is either an object with an ``adjust_date(date)`` method
        or a plain callable taking and returning a Date. Its result is
        used as-is.

        Raises:
            MissingValueError: If adjuster is None or returns None.

        Examples:
            >>> from isocal.arithmetic import last_day_of_month
            >>> Date(2007, 7, 15).with_adjuster(last_day_of_month)
            Date(2007, 7, 31)
        """
        require(adjuster, "adjuster")
        adjust: Callable[[Date], Date | None] = getattr(adjuster, "adjust_date", adjuster)
        return require(adjust(self), "adjusted date")

    def replace(
        self,
        year: int | None = None,
        month: int | None = None,
        day: int | None = None,
    ) -> Date:
        """Return a Date with the given components replaced, validated strictly.

        Examples:
            >>> Date(2007, 7, 15).replace(month=2, day=28)
            Date(2007, 2, 28)
        """
        new_year = self._year if year is None else year
        new_month = self._month if month is None else month
        new_day = self._day if day is None else day
        if (new_year, new_month, new_day) == (self._year, self._month, self._day):
            return self
        return Date(new_year, new_month, new_day)

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    @staticmethod
    def _check_result_year(year: int) -> int:
        if year < MIN_YEAR or year > MAX_YEAR:
            raise DateOverflowError(
                f"Result year {year} exceeds the supported year range "
                f"{MIN_YEAR} to {MAX_YEAR}"
            )
        return year

    def plus(self, period: PeriodLike | Any) -> Date:
        """Return this date with a period added.

        Years are added first, then months, then days. The year and month
        steps clamp the day-of-month to the last valid day; time-of-day
        components are ignored.

        Raises:
            MissingValueError: If period is None, or its to_period() returns None.
            DateOverflowError: If the year leaves the supported range.

        Examples:
            >>> Date(2008, 1, 31).plus(Period(months=1, days=1))
            Date(2008, 3, 1)
        """
        from isocal.arithmetic.period_ops import add_period_to_date

        return add_period_to_date(self, period)

    def minus(self, period: PeriodLike | Any) -> Date:
        """Return this date with a period subtracted, years then months then days."""
        from isocal.arithmetic.period_ops import subtract_period_from_date

        return subtract_period_from_date(self, period)

    def plus_years(
        self, years: int, resolver: DateResolver = DateResolvers.PREVIOUS_VALID
    ) -> Date:
        """Return this date with years added.

        Raises:
            DateOverflowError: If the resulting year is out of range.

        Examples:
            >>> Date(2008, 2, 29).plus_years(1)
            Date(2009, 2, 28)
        """
        if require(years, "years") == 0:
            return self
        year = self._check_result_year(safe_add(self._year, years))
        return self._resolve(year, self._month, self._day, resolver)

    def minus_years(
        self, years: int, resolver: DateResolver = DateResolvers.PREVIOUS_VALID
    ) -> Date:
        """Return this date with years subtracted."""
        if require(years, "years") == 0:
            return self
        year = self._check_result_year(safe_subtract(self._year, years))
        return self._resolve(year, self._month, self._day, resolver)

    def _shift_months(self, month_index: int, resolver: DateResolver) -> Date:
        year = self._check_result_year(month_index // 12)
        return self._resolve(year, month_index % 12 + 1, self._day, resolver)

    def plus_months(
        self, months: int, resolver: DateResolver = DateResolvers.PREVIOUS_VALID
    ) -> Date:
        """Return this date with months added.

        Months are counted on a zero-based index spanning years, so
        negative amounts cross year boundaries correctly.

        Raises:
            DateOverflowError: If the resulting year is out of range.

        Examples:
            >>> Date(2007, 7, 15).plus_months(-7)
            Date(2006, 12, 15)
            >>> Date(2007, 3, 31).plus_months(1)
            Date(2007, 4, 30)
        """
        if require(months, "months") == 0:
            return self
        month_index = self._year * 12 + (self._month - 1)
        return self._shift_months(safe_add(month_index, months), resolver)

    def minus_months(
        self, months: int, resolver: DateResolver = DateResolvers.PREVIOUS_VALID
    ) -> Date:
        """Return this date with months subtracted."""
        if require(months, "months") == 0:
            return self
        month_index = self._year * 12 + (self._month - 1)
        return self._shift_months(safe_subtract(month_index, months), resolver)

    def plus_weeks(self, weeks: int) -> Date:
        """Return this date with weeks added.

        Raises:
            DateOverflowError: If the day count overflows 64 bits.
            IllegalFieldValueError: If the result is outside the supported years.
        """
        if require(weeks, "weeks") == 0:
            return self
        return self.plus_days(safe_multiply(weeks, 7))

    def minus_weeks(self, weeks: int) -> Date:
        """Return this date with weeks subtracted."""
        if require(weeks, "weeks") == 0:
            return self
        return self.minus_days(safe_multiply(weeks, 7))

    def plus_days(self, days: int) -> Date:
        """Return this date with days added.

        Raises:
            DateOverflowError: If the day count overflows 64 bits.
            IllegalFieldValueError: If the result is outside the supported years.

        Examples:
            >>> Date(2008, 1, 1).plus_days(-1)
            Date(2007, 12, 31)
        """
        if require(days, "days") == 0:
            return self
        return Date.from_epoch_day(safe_add(self.to_epoch_day(), days))

    def minus_days(self, days: int) -> Date:
        """Return this date with days subtracted."""
        if require(days, "days") == 0:
            return self
        return Date.from_epoch_day(safe_subtract(self.to_epoch_day(), days))

    # ------------------------------------------------------------------
    # Comparison and matching
    # ------------------------------------------------------------------

    def _key(self) -> tuple[int, int, int]:
        return (self._year, self._month, self._day)

    def compare_to(self, other: Date) -> int:
        """Return -1, 0 or 1 as this date is before, equal to or after other.

        Raises:
            MissingValueError: If other is None.
            TypeError: If other is not a Date.
        """
        require(other, "other")
        if not isinstance(other, Date):
            raise TypeError(f"cannot compare Date with {type(other).__name__}")
        a, b = self._key(), other._key()
        return (a > b) - (a < b)

    def is_before(self, other: Date) -> bool:
        return self.compare_to(other) < 0

    def is_after(self, other: Date) -> bool:
        return self.compare_to(other) > 0

    def matches(self, matcher: Any) -> bool:
        """Return True if matcher accepts this date.

        matcher is either an object with a ``matches_date(date)`` method,
        such as MonthOfYear.JULY or DayOfWeek.SUNDAY, or a plain predicate.

        Examples:
            >>> Date(2007, 7, 15).matches(DayOfWeek.SUNDAY)
            True
        """
        require(matcher, "matcher")
        check: Callable[[Date], bool] = getattr(matcher, "matches_date", matcher)
        return check(self)

    def matches_date(self, date: Date) -> bool:
        """Return True if date equals this date."""
        return self == require(date, "date")

    # ------------------------------------------------------------------
    # Conversion
    # ------------------------------------------------------------------

    def to_date(self) -> Date:
        return self

    def adjust_date(self, date: Date) -> Date:
        """Adjust any date to this date."""
        require(date, "date")
        return self

    def to_epoch_day(self) -> int:
        """Return the number of days since 1970-01-01.

        Examples:
            >>> Date(1970, 1, 1).to_epoch_day()
            0
        """
        return to_epoch_day(self._year, self._month, self._day)

    def to_modified_julian_day(self) -> int:
        """Return the Modified Julian Day number.

        Examples:
            >>> Date(1858, 11, 17).to_modified_julian_day()
            0
        """
        return to_modified_julian_day(self._year, self._month, self._day)

    def to_calendrical(self) -> Calendrical:
        """Return a Calendrical holding this date and nothing else."""
        return Calendrical(date=self)

    def at_time(self, time: Any) -> Calendrical:
        """Pair this date with a time-of-day value, which is passed through unchanged.

        Raises:
            MissingValueError: If time is None.
        """
        return Calendrical(date=self, time=require(time, "time"))

    def at_offset(self, offset: Any) -> Calendrical:
        """Pair this date with a zone offset, which is passed through unchanged.

        Raises:
            MissingValueError: If offset is None.
        """
        return Calendrical(date=self, offset=require(offset, "offset"))

    def at_midnight(self) -> Calendrical:
        """Pair this date with the time-of-day 00:00.

        Examples:
            >>> Date(2008, 6, 30).at_midnight().time
            datetime.time(0, 0)
        """
        return Calendrical(date=self, time=MIDNIGHT)

    def at_start_of_day_in_zone(self, zone: Any) -> Calendrical:
        """Pair this date with a time zone, leaving the time unset.

        The earliest valid time of the day depends on the zone's rules (a
        daylight saving gap can skip midnight), so the zone layer resolves it.

        Raises:
            MissingValueError: If zone is None.
        """
        return Calendrical(date=self, zone=require(zone, "zone"))

    def to_iso_format(self) -> str:
        """Return the ISO 8601 extended form, such as '2007-07-15' or '-0001-01-02'."""
        from isocal.format.iso8601 import format_date

        return format_date(self)

    # ------------------------------------------------------------------
    # Operators
    # ------------------------------------------------------------------

    def __add__(self, other: object) -> Date:
        """Add a Period to this date.

        Examples:
            >>> Date(2008, 1, 31) + Period(months=1)
            Date(2008, 2, 29)
        """
        if not isinstance(other, Period):
            return NotImplemented  # type: ignore[return-value]
        return self.plus(other)

    def __sub__(self, other: object) -> Date:
        """Subtract a Period from this date."""
        if not isinstance(other, Period):
            return NotImplemented  # type: ignore[return-value]
        return self.minus(other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._key() == other._key()

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._key() >= other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __reduce__(self) -> tuple[type[Date], tuple[int, int, int]]:
        return (Date, self._key())

    def __repr__(self) -> str:
        return f"Date({self._year}, {self._month}, {self._day})"

    def __str__(self) -> str:
        return self.to_iso_format()

    def __bool__(self) -> bool:
        """Dates are always truthy."""
        return True


Date.MIN = Date(MIN_YEAR, 1, 1)
Date.MAX = Date(MAX_YEAR, 12, 31)


__all__ = ["Date"]
