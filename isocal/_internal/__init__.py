"""Internal utilities for isocal.

This module contains private implementation details:
    - Calendar kernel (epoch-day and MJD conversions, leap years)
    - Constants and year limits
    - Validation helpers

Note: This module is not part of the public API.
"""

from __future__ import annotations

from isocal._internal.validation import (
    require,
    validate_date,
    validate_day_of_month,
    validate_month,
    validate_year,
)

__all__: list[str] = [
    "require",
    "validate_date",
    "validate_day_of_month",
    "validate_month",
    "validate_year",
]
