"""Core value types.

This module provides:
    - Date: Immutable ISO-8601 calendar date
    - Period: Years, months and days (plus ignored time components)
    - Calendrical: Container pairing a date with opaque time/offset/zone values
    - YearMonth, MonthDay: Partial dates
"""

from __future__ import annotations

from isocal.core.date import Date
from isocal.core.calendrical import Calendrical
from isocal.core.period import Period
from isocal.core.yearmonth import MonthDay, YearMonth

__all__: list[str] = [
    "Date",
    "Calendrical",
    "Period",
    "YearMonth",
    "MonthDay",
]
