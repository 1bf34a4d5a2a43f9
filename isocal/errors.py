"""isocal exception hierarchy.

All isocal-specific exceptions inherit from CalendricalError. Each subclass
names one failure kind so callers can tell, for example, a month of 13
apart from February 30.
"""

from __future__ import annotations

from typing import Any


class CalendricalError(Exception):
    """Base exception for all isocal errors."""

    pass


class MissingValueError(CalendricalError):
    """A required value was None.

    Raised when a mandatory argument is absent, or when a collaborator
    (resolver, adjuster, period provider) hands back None instead of a value.
    """

    def __init__(self, name: str) -> None:
        super().__init__(f"{name} must not be None")
        self.name = name


class IllegalFieldValueError(CalendricalError):
    """A field value is outside the range the field can ever hold.

    Examples:
        - Month value outside 1-12
        - Day-of-month value outside 1-31
        - Year outside MIN_YEAR to MAX_YEAR
        - Epoch-day whose year is outside the supported range
    """

    def __init__(self, field: Any, value: int, minimum: int, maximum: int) -> None:
        name = getattr(field, "display_name", field)
        super().__init__(
            f"Illegal value for {name} field, value {value} "
            f"is not in the range {minimum} to {maximum}"
        )
        self.field = field
        self.value = value


class InvalidDateError(CalendricalError):
    """Each field is in range but together they name no real day.

    Examples:
        - 2007-02-29 (not a leap year)
        - 2008-04-31 (April has 30 days)
    """

    def __init__(self, year: int, month: int, day: int, reason: str) -> None:
        super().__init__(f"Invalid date {year}-{month:02d}-{day:02d}: {reason}")
        self.year = year
        self.month = month
        self.day = day


class UnsupportedFieldError(CalendricalError):
    """A field was queried that a date cannot supply, such as hour-of-day."""

    def __init__(self, field: Any) -> None:
        name = getattr(field, "display_name", field)
        super().__init__(f"Field {name} is not supported by Date")
        self.field = field


class DateOverflowError(CalendricalError):
    """Arithmetic left the representable range.

    Raised when a year or month step lands outside the supported years, or
    when the underlying 64-bit day count addition would wrap around.
    """

    pass


class ParseError(CalendricalError):
    """Failed to parse a string representation.

    Attributes:
        text: The text that failed to parse.
        position: Index of the first offending character.
    """

    def __init__(self, message: str, text: str, position: int = 0) -> None:
        super().__init__(message)
        self.text = text
        self.position = position


__all__ = [
    "CalendricalError",
    "MissingValueError",
    "IllegalFieldValueError",
    "InvalidDateError",
    "UnsupportedFieldError",
    "DateOverflowError",
    "ParseError",
]
