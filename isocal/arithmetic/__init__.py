"""Date arithmetic support.

Resolvers (from isocal.arithmetic.resolvers):
    - strict, previous_valid, next_valid: The built-in strategies
    - resolver: Decorator turning a function into a custom strategy

Period operations (from isocal.arithmetic.period_ops):
    - add_period_to_date: Add years, then months, then days
    - subtract_period_from_date: Subtract years, then months, then days

Adjusters (from isocal.arithmetic.adjusters):
    - first_day_of_month, last_day_of_month
    - first_day_of_year, last_day_of_year
    - next_day_of_week, next_or_same, previous_day_of_week, previous_or_same

Checked integer math (from isocal.arithmetic.checked):
    - safe_add, safe_subtract, safe_multiply
"""

from __future__ import annotations

from isocal.arithmetic.resolvers import (
    DateResolver,
    DateResolvers,
    FunctionResolver,
    resolver,
    strict,
    previous_valid,
    next_valid,
)
from isocal.arithmetic.checked import (
    safe_add,
    safe_subtract,
    safe_multiply,
)
from isocal.arithmetic.period_ops import (
    add_period_to_date,
    subtract_period_from_date,
)
from isocal.arithmetic.adjusters import (
    first_day_of_month,
    last_day_of_month,
    first_day_of_year,
    last_day_of_year,
    next_day_of_week,
    next_or_same,
    previous_day_of_week,
    previous_or_same,
)

__all__ = [
    # Resolvers
    "DateResolver",
    "DateResolvers",
    "FunctionResolver",
    "resolver",
    "strict",
    "previous_valid",
    "next_valid",
    # Checked arithmetic
    "safe_add",
    "safe_subtract",
    "safe_multiply",
    # Period operations
    "add_period_to_date",
    "subtract_period_from_date",
    # Adjusters
    "first_day_of_month",
    "last_day_of_month",
    "first_day_of_year",
    "last_day_of_year",
    "next_day_of_week",
    "next_or_same",
    "previous_day_of_week",
    "previous_or_same",
]
