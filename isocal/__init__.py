"""isocal: immutable ISO-8601 calendar dates.

isocal implements the proleptic Gregorian calendar used by ISO 8601:
conversions between (year, month, day) and linear day counts, derived
fields such as day-of-week and the ISO week-based year, pluggable rules
for day-of-month overflow, and strict ``[sign]YYYY-MM-DD`` text.

Core Types:
    Date: Calendar date (year, month, day)
    Period: Years, months and days to add to a Date
    Calendrical: A Date paired with opaque time, offset or zone values
    YearMonth, MonthDay: Partial dates (2007-07, --02-29)

Units:
    DateField: The fields a Date can supply, with their ranges
    TimeField: Time-of-day fields, never supported by Date
    DayOfWeek, MonthOfYear, QuarterOfYear: Value enums

Resolvers:
    strict, previous_valid, next_valid: Day-of-month overflow strategies

Format Functions:
    parse_date: Parse an ISO 8601 extended date
    format_date: Format a Date as ISO 8601 extended text

Exceptions:
    CalendricalError: Base exception
    MissingValueError: A required value was None
    IllegalFieldValueError: A field value is out of range
    InvalidDateError: In-range fields that name no real day
    UnsupportedFieldError: A field a Date cannot supply
    DateOverflowError: Arithmetic left the supported range
    ParseError: Text does not follow the grammar

Example:
    >>> from isocal import Date, Period, next_valid
    >>> Date(2008, 1, 31) + Period(months=1)
    Date(2008, 2, 29)
    >>> Date.parse("2008-02-29").with_year(2007, next_valid())
    Date(2007, 3, 1)
"""

from __future__ import annotations

__version__ = "0.1.0"

# Core types
from isocal.core.date import Date
from isocal.core.calendrical import Calendrical
from isocal.core.period import Period
from isocal.core.yearmonth import MonthDay, YearMonth

# Units
from isocal.units.dayofweek import DayOfWeek
from isocal.units.field import DateField, TimeField
from isocal.units.monthofyear import MonthOfYear, QuarterOfYear

# Resolvers
from isocal.arithmetic.resolvers import (
    DateResolver,
    DateResolvers,
    next_valid,
    previous_valid,
    resolver,
    strict,
)

# Calendar kernel
from isocal._internal.calendar import is_leap_year, month_length
from isocal._internal.constants import MAX_YEAR, MIN_YEAR

# Exceptions
from isocal.errors import (
    CalendricalError,
    DateOverflowError,
    IllegalFieldValueError,
    InvalidDateError,
    MissingValueError,
    ParseError,
    UnsupportedFieldError,
)

# Format functions
from isocal.format import format_date, parse_date

__all__: list[str] = [
    "__version__",
    # Core types
    "Date",
    "Calendrical",
    "Period",
    "YearMonth",
    "MonthDay",
    # Units
    "DateField",
    "TimeField",
    "DayOfWeek",
    "MonthOfYear",
    "QuarterOfYear",
    # Resolvers
    "DateResolver",
    "DateResolvers",
    "resolver",
    "strict",
    "previous_valid",
    "next_valid",
    # Calendar kernel
    "MIN_YEAR",
    "MAX_YEAR",
    "is_leap_year",
    "month_length",
    # Exceptions
    "CalendricalError",
    "MissingValueError",
    "IllegalFieldValueError",
    "InvalidDateError",
    "UnsupportedFieldError",
    "DateOverflowError",
    "ParseError",
    # Format functions
    "parse_date",
    "format_date",
]
