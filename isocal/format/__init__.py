"""Date formatting and parsing.

Functions:
    parse_date: Parse an ISO 8601 extended date string.
    format_date: Format a Date as an ISO 8601 extended date string.

Examples:
    >>> from isocal.format import parse_date, format_date
    >>> d = parse_date("2008-07-05")
    >>> format_date(d)
    '2008-07-05'
"""

from __future__ import annotations

from isocal.format.iso8601 import format_date, format_year, parse_date

__all__: list[str] = [
    "parse_date",
    "format_date",
    "format_year",
]
