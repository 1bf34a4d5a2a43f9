"""Pytest configuration and fixtures for isocal tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add the parent directory to sys.path so isocal can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from isocal import Date  # noqa: E402


@pytest.fixture
def date_2007_07_15() -> Date:
    """A Sunday in the third quarter of a common year."""
    return Date(2007, 7, 15)


@pytest.fixture
def leap_day_2008() -> Date:
    """February 29th of a leap year."""
    return Date(2008, 2, 29)


@pytest.fixture
def max_date() -> Date:
    return Date.MAX


@pytest.fixture
def min_date() -> Date:
    return Date.MIN
