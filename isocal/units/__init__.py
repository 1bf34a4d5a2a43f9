"""Calendar units and field rules.

This module provides:
    - DateField: The closed set of fields a Date can supply
    - TimeField: Time-of-day fields, never supported by Date
    - DayOfWeek: ISO day of week enum (MONDAY=1 .. SUNDAY=7)
    - MonthOfYear: Month enum (JANUARY=1 .. DECEMBER=12)
    - QuarterOfYear: Quarter enum (Q1 .. Q4)
"""

from __future__ import annotations

from isocal.units.dayofweek import DayOfWeek
from isocal.units.field import DateField, TimeField
from isocal.units.monthofyear import MonthOfYear, QuarterOfYear

__all__: list[str] = [
    "DateField",
    "TimeField",
    "DayOfWeek",
    "MonthOfYear",
    "QuarterOfYear",
]
