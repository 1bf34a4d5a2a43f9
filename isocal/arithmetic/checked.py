"""Overflow-checked 64-bit integer arithmetic.

Day counts are treated as signed 64-bit values. Python integers never wrap,
so these helpers reject any operand or result outside the int64 range
instead, raising DateOverflowError where a fixed-width addition would have
wrapped around. Non-integer operands raise TypeError.
"""

from __future__ import annotations

import operator

from isocal._internal.constants import INT64_MAX, INT64_MIN
from isocal.errors import DateOverflowError


def _check_int64(value: int, what: str) -> int:
    value = operator.index(value)
    if value < INT64_MIN or value > INT64_MAX:
        raise DateOverflowError(f"{what} overflows a 64-bit day count: {value}")
    return value


def safe_add(a: int, b: int) -> int:
    """Return a + b, raising DateOverflowError if it leaves the int64 range.

    Examples:
        >>> safe_add(1, 2)
        3
        >>> safe_add(2**63 - 1, 1)
        Traceback (most recent call last):
        ...
        isocal.errors.DateOverflowError: Addition overflows a 64-bit day count: 9223372036854775808
    """
    a = _check_int64(a, "Operand")
    b = _check_int64(b, "Operand")
    return _check_int64(a + b, "Addition")


def safe_subtract(a: int, b: int) -> int:
    """Return a - b, raising DateOverflowError if it leaves the int64 range."""
    a = _check_int64(a, "Operand")
    b = _check_int64(b, "Operand")
    return _check_int64(a - b, "Subtraction")


def safe_multiply(a: int, b: int) -> int:
    """Return a * b, raising DateOverflowError if it leaves the int64 range."""
    a = _check_int64(a, "Operand")
    b = _check_int64(b, "Operand")
    return _check_int64(a * b, "Multiplication")


__all__ = ["safe_add", "safe_subtract", "safe_multiply"]
