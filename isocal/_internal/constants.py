"""Internal constants for isocal.

These constants define the limits and magic numbers used throughout
the library. This module is not part of the public API.
"""

from __future__ import annotations

# Year limits: the signed 32-bit range, minus Integer.MIN_VALUE itself
MIN_YEAR: int = -2_147_483_647
MAX_YEAR: int = 2_147_483_647

# Days in each month (non-leap year)
DAYS_IN_MONTH: tuple[int, ...] = (
    0,   # Placeholder for 1-indexed access
    31,  # January
    28,  # February (non-leap)
    31,  # March
    30,  # April
    31,  # May
    30,  # June
    31,  # July
    31,  # August
    30,  # September
    31,  # October
    30,  # November
    31,  # December
)

# Days before the first of each month (non-leap year), 1-indexed
DAYS_BEFORE_MONTH: tuple[int, ...] = (0, 0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)

# Length of one 400-year Gregorian cycle
DAYS_PER_CYCLE: int = 146_097

# Days from 0000-01-01 to 1970-01-01
DAYS_0000_TO_1970: int = 719_528

# MJD (Modified Julian Day) reference points
# MJD 0 = 1858-11-17, epoch-day 0 = 1970-01-01 = MJD 40587
MJD_EPOCH_DAY_OFFSET: int = 40_587

# Bounds of a signed 64-bit day count
INT64_MIN: int = -(2**63)
INT64_MAX: int = 2**63 - 1


__all__ = [
    "MIN_YEAR",
    "MAX_YEAR",
    "DAYS_IN_MONTH",
    "DAYS_BEFORE_MONTH",
    "DAYS_PER_CYCLE",
    "DAYS_0000_TO_1970",
    "MJD_EPOCH_DAY_OFFSET",
    "INT64_MIN",
    "INT64_MAX",
]
