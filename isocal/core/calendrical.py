"""Calendrical container pairing a date with optional time, offset and zone.

isocal only models dates. Time-of-day, offset and zone values belong to
other layers; they are carried here unchanged so that a higher layer can
combine them with a Date without re-deriving calendar math.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import time as clock_time
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from isocal.core.date import Date

# Time-of-day value attached by Date.at_midnight()
MIDNIGHT = clock_time(0, 0)


@dataclass(frozen=True)
class Calendrical:
    """An immutable bag of date, time, offset and zone, any of which may be None.

    Examples:
        >>> from isocal import Date
        >>> Date(2008, 6, 30).to_calendrical()
        Calendrical(date=Date(2008, 6, 30), time=None, offset=None, zone=None)
    """

    date: Date | None = None
    time: Any = None
    offset: Any = None
    zone: Any = None

    def to_date(self) -> Date | None:
        """Return the date held by this container."""
        return self.date


__all__ = ["Calendrical", "MIDNIGHT"]
