"""Day-of-month resolution strategies.

When arithmetic or a field change lands on a day-of-month that the target
month does not have (January 31 plus one month), a resolver decides which
real date to use instead.

Built-in strategies:
    - strict: Refuse, raising InvalidDateError
    - previous_valid: Clamp to the last day of the month
    - next_valid: Clamp, then roll the excess days into the next month

Custom strategies are any object with a ``resolve(year, month, day)``
method. The ``resolver`` decorator turns a plain function into one.

Examples:
    >>> next_valid().resolve(2007, 2, 31)
    Date(2007, 3, 3)
    >>> previous_valid().resolve(2007, 2, 31)
    Date(2007, 2, 28)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Callable, Protocol, runtime_checkable

from isocal._internal.calendar import month_length
from isocal._internal.validation import check_day_exists

if TYPE_CHECKING:
    from isocal.core.date import Date

logger = logging.getLogger(__name__)


@runtime_checkable
class DateResolver(Protocol):
    """Strategy turning a possibly-overflowing (year, month, day) into a Date.

    The year and month are already valid; day is within 1-31 but may be
    past the end of the month. Given a valid triple the resolver must
    return exactly that date.
    """

    def resolve(self, year: int, month: int, day: int) -> Date | None: ...


class DateResolvers(Enum):
    """The built-in resolution strategies."""

    STRICT = "strict"
    PREVIOUS_VALID = "previous_valid"
    NEXT_VALID = "next_valid"

    def resolve(self, year: int, month: int, day: int) -> Date:
        """Return a valid Date for (year, month, day) under this strategy.

        Raises:
            InvalidDateError: For STRICT when day is past the month end.
        """
        from isocal.core.date import Date

        if self is DateResolvers.STRICT:
            check_day_exists(year, month, day)
            return Date._create(year, month, day)

        last_day = month_length(year, month)
        if day <= last_day:
            return Date._create(year, month, day)

        clamped = Date._create(year, month, last_day)
        if self is DateResolvers.PREVIOUS_VALID:
            logger.debug("clamped %d-%02d-%02d to %s", year, month, day, clamped)
            return clamped

        result = clamped.plus_days(day - last_day)
        logger.debug("rolled %d-%02d-%02d forward to %s", year, month, day, result)
        return result

    def __repr__(self) -> str:
        return f"DateResolvers.{self.name}"


@dataclass(frozen=True)
class FunctionResolver:
    """Adapts a plain ``(year, month, day) -> Date`` function to a DateResolver."""

    func: Callable[[int, int, int], "Date | None"]

    def resolve(self, year: int, month: int, day: int) -> Date | None:
        return self.func(year, month, day)


def resolver(func: Callable[[int, int, int], "Date | None"]) -> FunctionResolver:
    """Decorator that turns a function into a DateResolver.

    Examples:
        >>> from isocal import Date
        >>> @resolver
        ... def first_of_month(year, month, day):
        ...     return Date(year, month, 1)
        >>> Date(2008, 1, 31).plus_months(1, first_of_month)
        Date(2008, 2, 1)
    """
    return FunctionResolver(func)


def strict() -> DateResolvers:
    """Return the resolver that rejects any day past the end of the month."""
    return DateResolvers.STRICT


def previous_valid() -> DateResolvers:
    """Return the resolver that clamps to the last valid day of the month."""
    return DateResolvers.PREVIOUS_VALID


def next_valid() -> DateResolvers:
    """Return the resolver that carries excess days into the following month."""
    return DateResolvers.NEXT_VALID


__all__ = [
    "DateResolver",
    "DateResolvers",
    "FunctionResolver",
    "resolver",
    "strict",
    "previous_valid",
    "next_valid",
]
