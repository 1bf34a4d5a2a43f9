"""ISO 8601 extended date formatting and parsing.

Functions:
    parse_date: Parse a ``[sign]YYYY-MM-DD`` string into a Date.
    format_date: Format a Date as a ``[sign]YYYY-MM-DD`` string.

Grammar:
    - YYYY-MM-DD        years 0000 to 9999, exactly four digits
    - +YYYYY-MM-DD      years above 9999, five or more digits
    - -YYYY-MM-DD       negative years, at least four digits

Years of more than four digits carry no leading zeros, so +01000 and
-00001 are rejected: every accepted text is the one format_date emits.

Month and day are always exactly two digits. Nothing may follow the day:
offsets, zones and time-of-day are rejected. The year -0000 is rejected
because zero carries no sign.

Syntax errors raise ParseError. Text that is well formed but names an
impossible field value (month 13) raises IllegalFieldValueError, and text
naming a day the month lacks (February 30) raises InvalidDateError.

Examples:
    >>> from isocal import Date
    >>> parse_date("2008-07-05")
    Date(2008, 7, 5)

    >>> format_date(Date(10000, 1, 1))
    '+10000-01-01'

    >>> format_date(Date(-1, 1, 2))
    '-0001-01-02'
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

from isocal._internal.validation import require
from isocal.errors import ParseError

if TYPE_CHECKING:
    from isocal.core.date import Date

logger = logging.getLogger(__name__)

# Year, month and day with an optional sign; ASCII digits only
_DATE_PATTERN = re.compile(
    r"(?P<sign>[+-]?)(?P<year>[0-9]{4,10})-(?P<month>[0-9]{2})-(?P<day>[0-9]{2})"
)


def _error_position(text: str) -> int:
    """Return the index of the first character that breaks the grammar."""
    pos = 0
    if pos < len(text) and text[pos] in "+-":
        pos += 1
    start = pos
    while pos < len(text) and "0" <= text[pos] <= "9":
        pos += 1
    if pos - start < 4:
        return pos
    for _ in range(2):
        if pos >= len(text) or text[pos] != "-":
            return pos
        pos += 1
        for _ in range(2):
            if pos >= len(text) or not ("0" <= text[pos] <= "9"):
                return pos
            pos += 1
    return pos


def _fail(message: str, text: str, position: int) -> ParseError:
    logger.debug("rejected date text %r at index %d: %s", text, position, message)
    return ParseError(f"{message}: {text!r}", text, position)


def parse_date(text: str) -> Date:
    """Parse an ISO 8601 extended date string.

    Args:
        text: The text to parse, such as ``"2008-07-05"``.

    Returns:
        The parsed Date.

    Raises:
        MissingValueError: If text is None.
        ParseError: If text does not follow the grammar.
        IllegalFieldValueError: If a field is outside its range.
        InvalidDateError: If the fields do not name an existing day.

    Examples:
        >>> parse_date("-0044-03-15")
        Date(-44, 3, 15)

        >>> parse_date("2008-1-1")
        Traceback (most recent call last):
        ...
        isocal.errors.ParseError: Invalid ISO 8601 date: '2008-1-1'
    """
    from isocal.core.date import Date

    require(text, "text")
    if not isinstance(text, str):
        raise TypeError(f"expected str, got {type(text).__name__}")

    match = _DATE_PATTERN.fullmatch(text)
    if match is None:
        raise _fail("Invalid ISO 8601 date", text, _error_position(text))

    sign = match.group("sign")
    digits = match.group("year")
    if sign == "+" and len(digits) <= 4:
        raise _fail("Sign '+' is only allowed for years of more than four digits", text, 0)
    if sign == "" and len(digits) > 4:
        raise _fail("Years of more than four digits need a '+' or '-' sign", text, 0)
    if len(digits) > 4 and digits[0] == "0":
        raise _fail("Years of more than four digits must not have leading zeros", text, 1)

    year = int(digits)
    if sign == "-":
        if year == 0:
            raise _fail("Year zero cannot be negative", text, 0)
        year = -year

    return Date(year, int(match.group("month")), int(match.group("day")))


def format_date(date: Date) -> str:
    """Format a Date as an ISO 8601 extended date string.

    The year is zero padded to four digits. Years above 9999 get a
    leading ``+`` and negative years a leading ``-``; neither is ever
    truncated.

    Raises:
        MissingValueError: If date is None.

    Examples:
        >>> from isocal import Date
        >>> format_date(Date(2008, 7, 5))
        '2008-07-05'
        >>> format_date(Date(-12345678, 1, 1))
        '-12345678-01-01'
    """
    require(date, "date")
    return f"{format_year(date.year)}-{date.month:02d}-{date.day:02d}"


def format_year(year: int) -> str:
    """Format a year the way format_date does.

    Examples:
        >>> format_year(7)
        '0007'
        >>> format_year(-44)
        '-0044'
    """
    if year < 0:
        return f"-{-year:04d}"
    if year > 9999:
        return f"+{year}"
    return f"{year:04d}"


__all__ = ["parse_date", "format_date", "format_year"]
